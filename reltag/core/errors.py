"""Exit codes for the reltag command.

Git failures are not listed here: when git exits non-zero, reltag exits
with git's own status.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes owned by reltag.

    - 0: Success
    - 1: User error (unparsable version, unreadable manifest, bad config)
    - 127: The git executable could not be started (shell convention)
    """

    OK = 0
    USER_ERROR = 1
    COMMAND_NOT_FOUND = 127
