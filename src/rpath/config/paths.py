"""Shared path utilities for configuration and log locations.

Policy:
- Config: ``RPATH_CONFIG`` if set, else ``<home>/.config/rpath/config.toml``.
- Logs: ``RPATH_LOG_DIR`` if set, else ``<home>/.local/state/rpath``; the
  log file is ``rpath.log`` inside that directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

ENV_CONFIG_FILE: Final[str] = "RPATH_CONFIG"
ENV_LOG_DIR: Final[str] = "RPATH_LOG_DIR"
LOG_FILE_NAME: Final[str] = "rpath.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: Path.home() / ".config" / "rpath" / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_DIR,
        default_factory=lambda: Path.home() / ".local" / "state" / "rpath",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return default_log_dir(env) / LOG_FILE_NAME


__all__ = [
    "ENV_CONFIG_FILE",
    "ENV_LOG_DIR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
