"""Release tagging: manifest version parsing and tag publication."""

from __future__ import annotations

from reltag.release.errors import VersionFormatError
from reltag.release.tagger import ReleaseTag, plan_tag, publish, release
from reltag.release.version import (
    Version,
    extract_version,
    read_manifest_version,
    validate_version,
)

__all__ = [
    "ReleaseTag",
    "Version",
    "VersionFormatError",
    "extract_version",
    "plan_tag",
    "publish",
    "read_manifest_version",
    "release",
    "validate_version",
]
