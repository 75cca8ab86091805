from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from reltag.core.config import DEFAULT_MANIFEST
from reltag.core.result import Err, Ok, Result
from reltag.release.errors import VersionFormatError

__all__ = [
    "Version",
    "extract_version",
    "read_manifest_version",
    "validate_version",
]


_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")
_QUOTES = "\"'"


@dataclass(frozen=True, slots=True)
class Version:
    """A MAJOR.MINOR.PATCH version.

    Components keep the exact digit text from the manifest, so "01" stays
    "01" in the tag name.
    """

    major: str
    minor: str
    patch: str

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def extract_version(text: str) -> str | None:
    """Return the raw version value from manifest text.

    The first line starting with a ``version = ...`` assignment wins. The
    value after the first ``=`` is trimmed of whitespace, then of one pair
    of matching quotes. Returns None when no such line exists.
    """
    for line in text.splitlines():
        if not line.startswith("version"):
            continue
        key, sep, value = line.partition("=")
        if not sep or key.strip() != "version":
            continue
        return _unquote(value.strip())
    return None


def _unquote(value: str) -> str:
    # An unbalanced quote is left in place and fails validation.
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def read_manifest_version(path: Path) -> str | None:
    """Read ``path`` and extract its version value.

    Bytes that are not UTF-8 elsewhere in the file do not prevent finding an
    ASCII ``version`` line. OSError (missing or unreadable manifest)
    propagates to the caller.
    """
    return extract_version(path.read_text(encoding="utf-8", errors="surrogateescape"))


def validate_version(
    candidate: str | None,
    *,
    source: str = DEFAULT_MANIFEST,
) -> Result[Version, VersionFormatError]:
    """Parse a candidate string as MAJOR.MINOR.PATCH (ASCII digits only).

    Args:
        candidate: Raw text from the manifest, None if nothing was found
        source: Manifest name used in the diagnostic

    Returns:
        Ok(Version) on a full match, Err(VersionFormatError) otherwise
    """
    m = _VERSION_RE.fullmatch(candidate) if candidate else None
    if m is None:
        return Err(
            VersionFormatError(
                message=f"Unable to parse semver from {source}.",
                candidate=candidate,
                hint="no version line found" if candidate is None else f"found {candidate!r}",
            )
        )
    return Ok(Version(m.group(1), m.group(2), m.group(3)))
