"""Git repository abstraction.

Only the two operations a release needs are exposed. Both stream git's
output to the terminal and report git's exit code unchanged.

Usage:
    repo = Repository(Path("."))
    repo.create_annotated_tag("v1.2.3", "Release version 1.2.3")
    repo.push_tag("origin", "v1.2.3")
"""

from __future__ import annotations

from pathlib import Path

from reltag.core.result import Result
from reltag.platform.process import ProcessError, run_silent

__all__ = ["Repository"]


class Repository:
    """Git operations on the repository containing ``path``.

    Attributes:
        path: Working directory git is run from
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def create_annotated_tag(self, name: str, message: str) -> Result[None, ProcessError]:
        """Run ``git tag -a <name> -m <message>``."""
        return self._run(["tag", "-a", name, "-m", message])

    def push_tag(self, remote: str, name: str) -> Result[None, ProcessError]:
        """Run ``git push <remote> <name>``."""
        return self._run(["push", remote, name])

    def _run(self, args: list[str]) -> Result[None, ProcessError]:
        return run_silent(["git", *args], cwd=self.path)
