"""
Summary: Exception hierarchy raised by ``RPath`` operations.
Why: Let callers tell missing-structure failures apart instead of aborting.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath


class RPathErrorKind(str, Enum):
    """Distinguishable failure kinds for path operations."""

    NO_BASENAME = "no_basename"
    NO_PARENT = "no_parent"
    NOT_UTF8 = "not_utf8"
    ENV_UNAVAILABLE = "env_unavailable"


class RPathError(Exception):
    """Base exception for path operation failures."""

    kind: RPathErrorKind

    def __init__(self, message: str, path: PurePath | None = None) -> None:
        super().__init__(message)
        self.path: PurePath | None = path


class NoBasenameError(RPathError, ValueError):
    """Raised when a path has no final segment."""

    kind = RPathErrorKind.NO_BASENAME

    def __init__(self, path: PurePath, message: str = "Failed to get basename.") -> None:
        super().__init__(f"{message} ({path})", path)


class NoParentError(RPathError, ValueError):
    """Raised when a path has no parent directory."""

    kind = RPathErrorKind.NO_PARENT

    def __init__(self, path: PurePath) -> None:
        super().__init__(f"Failed to get dirname. ({path})", path)


class NotUTF8Error(RPathError, UnicodeError):
    """Raised when a basename cannot be represented as UTF-8 text."""

    kind = RPathErrorKind.NOT_UTF8

    def __init__(self, path: PurePath) -> None:
        super().__init__("Failed to convert basename to UTF-8 text.", path)


class EnvUnavailableError(RPathError, OSError):
    """Raised when the working or home directory cannot be determined."""

    kind = RPathErrorKind.ENV_UNAVAILABLE

    def __init__(self, what: str, reason: str | None = None) -> None:
        message = f"Failed to get {what}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.what: str = what


__all__ = [
    "RPathErrorKind",
    "RPathError",
    "NoBasenameError",
    "NoParentError",
    "NotUTF8Error",
    "EnvUnavailableError",
]
