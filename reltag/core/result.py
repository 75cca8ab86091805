"""Result type for explicit error handling.

Operations that can fail in an expected way (a malformed version, an
unreadable config, a git command that exits non-zero) return a Result
instead of raising, so callers decide where failure turns into an exit code.

Usage:
    match validate_version("1.2.3"):
        case Ok(version):
            print(version)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying an error payload."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
