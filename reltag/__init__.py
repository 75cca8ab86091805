"""reltag: tag and push a release from the version declared in a manifest."""

__version__ = "0.1.0"
