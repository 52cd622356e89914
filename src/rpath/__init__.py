"""rpath - a fluent wrapper around filesystem paths."""

from rpath.core import (
    DEFAULT_DESCRIPTION,
    Display,
    EnvUnavailableError,
    NoBasenameError,
    NoParentError,
    NotUTF8Error,
    PathSource,
    RPath,
    RPathError,
    RPathErrorKind,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DESCRIPTION",
    "Display",
    "EnvUnavailableError",
    "NoBasenameError",
    "NoParentError",
    "NotUTF8Error",
    "PathSource",
    "RPath",
    "RPathError",
    "RPathErrorKind",
    "__version__",
]
