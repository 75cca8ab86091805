from __future__ import annotations

from pathlib import Path

import typer

from reltag import __version__
from reltag.cli.context import build_context
from reltag.core.errors import ErrorCode
from reltag.release.tagger import release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
def tag(
    manifest: Path | None = typer.Option(
        None,
        "--manifest",
        help="Manifest to read the version from (default: Cargo.toml).",
    ),
    remote: str | None = typer.Option(
        None,
        "--remote",
        help="Remote to push the tag to (default: origin).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the tag that would be created without running git.",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Create and push an annotated [bold]vMAJOR.MINOR.PATCH[/bold] tag for the manifest version."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    ctx = build_context()
    manifest_path = manifest if manifest is not None else ctx.root / ctx.config.manifest

    code = release(
        manifest=manifest_path,
        repo=ctx.repo,
        console=ctx.console,
        remote=remote or ctx.config.remote,
        dry_run=dry_run,
    )
    if code != ErrorCode.OK:
        raise typer.Exit(code=code)


def main() -> None:
    app()
