"""Configuration management for the rpath command line interface."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from rpath.config.paths import default_config_path
from rpath.platform.logging import logger


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """CLI configuration."""

    # Log file path; no file logging when unset
    log_file: Path | None = _path_field()

    # Console log level name
    console_level: str = "INFO"

    # Show dot-entries in `rpath ls`
    show_hidden: bool = False

    # Canonicalize paths before `rpath info` inspects them
    expand_paths: bool = False

    _LEVELS: ClassVar[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __post_init__(self) -> None:
        """Convert string paths and validate scalar fields."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)
            elif value is not None and not isinstance(value, Path):
                raise ConfigValidationError(f"{f.name} must be a string path")

        if not isinstance(self.console_level, str):
            raise ConfigValidationError("console_level must be a string")
        level = self.console_level.strip().upper()
        if level not in self._LEVELS:
            valid = ", ".join(self._LEVELS)
            raise ConfigValidationError(
                f"Unsupported console_level '{self.console_level}'. Valid options: {valid}"
            )
        self.console_level = level

        for name in ("show_hidden", "expand_paths"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigValidationError(f"{name} must be true or false")

    @property
    def console_log_level(self) -> int:
        """Numeric logging level for ``console_level``."""
        return logging.getLevelNamesMapping()[self.console_level]

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from ``path`` or the default location.

        A missing file yields the defaults; nothing is written.

        Args:
            path: Explicit config file, overriding ``RPATH_CONFIG``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigParseError: If the file is not valid TOML.
            ConfigValidationError: If the file holds unknown keys or bad values.
        """
        config_file = default_config_path(path)
        if not config_file.exists():
            logger.debug("No configuration file at %s, using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Failed to parse {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
            )

        instance = cls(**config_dict)
        logger.debug("Configuration loaded from %s", config_file)
        return instance


__all__ = ["Config", "ConfigError", "ConfigParseError", "ConfigValidationError"]
