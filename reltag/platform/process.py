"""Subprocess execution with Result-based error handling.

Commands inherit the terminal's stdout and stderr, so whatever the tool
prints (including its own error messages) reaches the user untouched.

Usage:
    match run_silent(["git", "push", "origin", "v1.2.3"], cwd=Path(".")):
        case Ok(_):
            pass
        case Err(error):
            print(f"exit {error.returncode}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from reltag.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_silent"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process, -1 if it could not be started.
        stderr: OS error text when the process could not be started.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str = ""

    @property
    def not_started(self) -> bool:
        return self.returncode < 0

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.not_started:
            return f"{cmd_str} could not be started: {self.stderr}"
        return f"{cmd_str} failed (exit {self.returncode})"


def run_silent(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    """Execute a command without capturing its output.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
