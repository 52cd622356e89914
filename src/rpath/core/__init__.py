# Path: `src/rpath/core/__init__.py`
# Summary: Export the path value type, its display contract and error types.
# Why: Provide a stable import surface for the CLI and library callers.

from .display import DEFAULT_DESCRIPTION, Display
from .errors import (
    EnvUnavailableError,
    NoBasenameError,
    NoParentError,
    NotUTF8Error,
    RPathError,
    RPathErrorKind,
)
from .path import PathSource, RPath

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
]
