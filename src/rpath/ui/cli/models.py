"""src/rpath/ui/cli/models.py
What: Presentation models gathered from ``RPath`` values for the CLI.
Why: Keep filesystem queries out of the rendering code.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from rpath.core import RPath, RPathError

T = TypeVar("T")


def _attempt(operation: Callable[[], T]) -> T | None:
    """Run ``operation``, mapping path structure errors to ``None``."""

    try:
        return operation()
    except RPathError:
        return None


@dataclass(slots=True, frozen=True)
class PathReport:
    """Snapshot of the properties of one path."""

    text: str
    absolute: bool
    exists: bool
    is_dir: bool
    is_file: bool
    is_symlink: bool
    basename: str | None
    dirname: str | None
    extension: str | None

    @classmethod
    def from_rpath(cls, rpath: RPath) -> PathReport:
        """Query ``rpath`` once for every reported property."""

        parent = _attempt(rpath.dirname)
        return cls(
            text=rpath.convert_to_string(),
            absolute=rpath.is_absolute(),
            exists=rpath.exists(),
            is_dir=rpath.is_dir(),
            is_file=rpath.is_file(),
            is_symlink=rpath.is_symlink(),
            basename=_attempt(rpath.basename),
            dirname=parent.convert_to_string() if parent is not None else None,
            extension=_attempt(rpath.extension),
        )


@dataclass(slots=True, frozen=True)
class EntryRow:
    """One directory entry as shown by ``rpath ls``."""

    name: str
    kind: str

    DIRECTORY = "dir"
    FILE = "file"
    SYMLINK = "link"
    OTHER = "other"
    UNKNOWN = "?"

    @classmethod
    def from_entry(cls, entry: os.DirEntry[str]) -> EntryRow:
        """Classify ``entry``; the type queries may raise ``OSError``."""

        if entry.is_symlink():
            kind = cls.SYMLINK
        elif entry.is_dir():
            kind = cls.DIRECTORY
        elif entry.is_file():
            kind = cls.FILE
        else:
            kind = cls.OTHER
        return cls(name=RPath.from_(entry.name).convert_to_string(), kind=kind)


__all__ = ["EntryRow", "PathReport"]
