"""Error types for release tagging."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VersionFormatError:
    """The manifest version is not a plain MAJOR.MINOR.PATCH triple.

    Attributes:
        message: Fixed diagnostic naming the manifest
        candidate: Text that failed to parse, None if no version line was found
        hint: Optional guidance for the user
    """

    message: str
    candidate: str | None = None
    hint: str | None = None
