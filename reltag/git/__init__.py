"""Git operations."""

from reltag.git.repository import Repository

__all__ = ["Repository"]
