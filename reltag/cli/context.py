from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from reltag.core.config import CONFIG_FILENAME, Config, load_config_or_default
from reltag.core.errors import ErrorCode
from reltag.core.result import Err
from reltag.git.repository import Repository
from reltag.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    repo: Repository
    console: ConsoleProtocol


def build_context(root: Path | None = None) -> CLIContext:
    root = root if root is not None else Path.cwd()
    console = RichConsole()

    config_result = load_config_or_default(root / CONFIG_FILENAME)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(
        root=root,
        config=config_result.value,
        repo=Repository(root),
        console=console,
    )
