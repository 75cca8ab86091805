"""Release tagging: validate the manifest version, then tag and push.

Nothing touches git until the version has been validated. Once it has, the
tag is created and pushed in that order. The push runs whatever the tag
step returned, and git's failures are reported by git itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reltag.core.config import DEFAULT_REMOTE
from reltag.core.errors import ErrorCode
from reltag.core.result import Err, Ok, Result
from reltag.git.repository import Repository
from reltag.output.console import ConsoleProtocol, Style
from reltag.platform.process import ProcessError
from reltag.release.version import Version, read_manifest_version, validate_version

__all__ = ["ReleaseTag", "plan_tag", "publish", "release"]


@dataclass(frozen=True, slots=True)
class ReleaseTag:
    """An annotated tag about to be created and pushed."""

    name: str
    message: str
    remote: str = DEFAULT_REMOTE


def plan_tag(version: Version, *, remote: str = DEFAULT_REMOTE) -> ReleaseTag:
    return ReleaseTag(
        name=f"v{version}",
        message=f"Release version {version}",
        remote=remote,
    )


def publish(tag: ReleaseTag, repo: Repository, console: ConsoleProtocol) -> int:
    """Create the annotated tag, then push it.

    Returns:
        0 if both git commands succeeded, else the first non-zero status
    """
    created = repo.create_annotated_tag(tag.name, tag.message)
    pushed = repo.push_tag(tag.remote, tag.name)

    status = _exit_status(created, console) or _exit_status(pushed, console)
    if status == 0:
        console.success(f"{tag.name} pushed to {tag.remote}")
    return status


def release(
    *,
    manifest: Path,
    repo: Repository,
    console: ConsoleProtocol,
    remote: str = DEFAULT_REMOTE,
    dry_run: bool = False,
) -> int:
    """Run a full release from ``manifest`` and return the process exit code."""
    try:
        candidate = read_manifest_version(manifest)
    except OSError as e:
        console.error(f"{manifest}: {e.strerror or e}")
        candidate = None

    match validate_version(candidate, source=manifest.name):
        case Err(error):
            console.error(error.message)
            if error.hint:
                console.print(f"hint: {error.hint}", Style.DIM)
            return int(ErrorCode.USER_ERROR)
        case Ok(version):
            tag = plan_tag(version, remote=remote)

    if dry_run:
        console.info(f"would create tag {tag.name} ({tag.message!r})")
        console.info(f"would push {tag.name} to {tag.remote}")
        return int(ErrorCode.OK)

    return publish(tag, repo, console)


def _exit_status(result: Result[None, ProcessError], console: ConsoleProtocol) -> int:
    match result:
        case Ok(_):
            return 0
        case Err(error) if error.not_started:
            console.error(str(error))
            return int(ErrorCode.COMMAND_NOT_FOUND)
        case Err(error):
            return error.returncode
