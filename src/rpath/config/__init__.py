"""Configuration loading and file location policy."""

from .config import Config, ConfigError, ConfigParseError, ConfigValidationError
from .paths import default_config_path, default_log_dir, default_log_file

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
