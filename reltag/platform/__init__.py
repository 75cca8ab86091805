"""Platform abstraction layer."""

from .process import ProcessError, run_silent

__all__ = [
    "ProcessError",
    "run_silent",
]
