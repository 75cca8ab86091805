"""Typed configuration loading for reltag.

An optional ``reltag.toml`` next to the manifest can override where the
version is read from and which remote receives the tag:

    [release]
    manifest = "Cargo.toml"
    remote = "origin"

Command-line flags take precedence over the file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_MANIFEST",
    "DEFAULT_REMOTE",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "reltag.toml"
DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Release settings.

    Attributes:
        manifest: Manifest path, relative to the working directory
        remote: Remote that receives the pushed tag
    """

    manifest: str = DEFAULT_MANIFEST
    remote: str = DEFAULT_REMOTE

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        release: StrDict = get_table(data, "release") or {}
        return cls(
            manifest=get_str(release, "manifest") or DEFAULT_MANIFEST,
            remote=get_str(release, "remote") or DEFAULT_REMOTE,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax in {path.name}: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config {path}: {e.strerror or e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to reltag.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
