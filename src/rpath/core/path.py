"""
Summary: The ``RPath`` value type and its path operations.
Why: Offer one fluent wrapper over pathlib and os.path for everyday path work.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias, override

from rpath.platform.logging import logger

from .display import Display, write_line
from .errors import EnvUnavailableError, NoBasenameError, NoParentError, NotUTF8Error

PathSource: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]
ScandirIterator: TypeAlias = "os._ScandirIterator[str]"


def _coerce(source: object) -> Path:
    """Turn any supported path-like input into a native ``Path``."""

    if isinstance(source, RPath):
        return source.path
    if not isinstance(source, (str, bytes, os.PathLike)):
        raise TypeError(
            f"expected str, bytes or os.PathLike object, not {type(source).__name__}"
        )
    return Path(os.fsdecode(source))


@dataclass(slots=True, order=True, unsafe_hash=True, repr=False)
class RPath(Display):
    """A filesystem path with convenience operations.

    Equality, ordering and hashing compare the wrapped ``pathlib.Path``.
    Only ``join_multiple`` and ``clear`` change a value in place; every
    other transform returns a new ``RPath``.

    Example:
        >>> RPath.from_("/temp").join("abc.txt").extension()
        'txt'
    """

    path: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        self.path = _coerce(self.path)

    # Construction ---------------------------------------------------------

    @classmethod
    def new(cls) -> RPath:
        """Return an ``RPath`` wrapping the empty path."""
        return cls()

    @classmethod
    def from_(cls, source: PathSource) -> RPath:
        """Build an ``RPath`` from a string, bytes or any path-like object.

        Args:
            source: ``str``, ``bytes``, ``pathlib`` path, ``RPath`` or other
                ``os.PathLike``.

        Returns:
            RPath: New value holding a copy of ``source``.

        Raises:
            TypeError: If ``source`` is not path-like.
        """
        return cls(_coerce(source))

    @classmethod
    def pwd(cls) -> RPath:
        """Return an ``RPath`` for the current working directory.

        Raises:
            EnvUnavailableError: If the OS cannot report the working directory.
        """
        try:
            cwd = Path.cwd()
        except OSError as exc:
            logger.error(
                "Failed to get current dir: %s",
                exc,
                extra={"rpath_event": "rpath.env.error", "error_message": str(exc)},
            )
            raise EnvUnavailableError("current dir", str(exc)) from exc
        return cls(cwd)

    @classmethod
    def gethomedir(cls) -> RPath:
        """Return an ``RPath`` for the current user's home directory.

        Raises:
            EnvUnavailableError: If no home directory can be determined.
        """
        try:
            home = Path.home()
        except (RuntimeError, KeyError, OSError) as exc:
            logger.error(
                "Failed to get homedir: %s",
                exc,
                extra={"rpath_event": "rpath.env.error", "error_message": str(exc)},
            )
            raise EnvUnavailableError("homedir", str(exc)) from exc
        if not home.is_absolute():
            raise EnvUnavailableError("homedir", f"Resolved to relative path '{home}'.")
        return cls(home)

    def clone(self) -> RPath:
        """Return an independent copy of this value."""
        return RPath(self.path)

    def __copy__(self) -> RPath:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> RPath:
        return self.clone()

    # Structural transforms -----------------------------------------------

    def join(self, component: PathSource) -> RPath:
        """Return a new ``RPath`` with ``component`` appended.

        An absolute ``component`` replaces the current path, as with ``/``
        on ``pathlib`` paths.
        """
        return RPath(self.path / _coerce(component))

    def join_multiple(self, components: Iterable[PathSource]) -> None:
        """Append each of ``components`` to this value in place.

        Nothing is changed if any component is rejected.

        Raises:
            TypeError: If ``components`` is a single path rather than a
                sequence, or holds a non path-like item.
        """
        if isinstance(components, (str, bytes, os.PathLike)):
            raise TypeError("join_multiple expects a sequence of components, not a single path")

        joined = self.path
        for component in components:
            joined = joined / _coerce(component)
        self.path = joined

    def basename(self) -> str:
        """Return the final segment of the path.

        Raises:
            NoBasenameError: If the path is empty, a root, or ends in ``..``.
            NotUTF8Error: If the final segment is not valid UTF-8 text.
        """
        name = self.path.name
        if not name or name == "..":
            raise NoBasenameError(self.path)
        try:
            _ = name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise NotUTF8Error(self.path) from exc
        return name

    def dirname(self) -> RPath:
        """Return the parent directory.

        Raises:
            NoParentError: If the path is empty or a root.
        """
        parent = self.path.parent
        if parent == self.path:
            raise NoParentError(self.path)
        return RPath(parent)

    def with_basename(self, name: PathSource) -> RPath:
        """Return a copy whose final segment is replaced by ``name``."""
        return self.dirname().join(name)

    def with_dirname(self, dirname: PathSource) -> RPath:
        """Return ``basename()`` placed under ``dirname``."""
        return RPath.from_(dirname).join(self.basename())

    def extension(self) -> str:
        """Return the text after the last ``.`` of the basename.

        A basename without a dot is returned whole, so ``"noext"`` yields
        ``"noext"`` and ``"a.b.c"`` yields ``"c"``.

        Raises:
            NoBasenameError: If there is no basename to inspect.
        """
        return self.basename().rsplit(".", 1)[-1]

    def expand(self) -> RPath:
        """Return the canonical absolute path if it exists, else a copy of self."""
        try:
            resolved = self.path.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            logger.debug(
                "Keeping unexpanded path %s: %s",
                self.path,
                exc,
                extra={
                    "rpath_event": "rpath.expand.fallback",
                    "source_path": str(self.path),
                    "error_message": str(exc),
                },
            )
            return self.clone()
        return RPath(resolved)

    def clear(self) -> None:
        """Reset this value to the empty path."""
        self.path = Path()

    # Predicates -------------------------------------------------------------

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def is_dir(self) -> bool:
        return os.path.isdir(self.path)

    def is_file(self) -> bool:
        return os.path.isfile(self.path)

    def is_symlink(self) -> bool:
        return os.path.islink(self.path)

    def is_absolute(self) -> bool:
        return self.path.is_absolute()

    def is_relative(self) -> bool:
        return not self.path.is_absolute()

    # Conversions ----------------------------------------------------------

    def convert_to_pathbuf(self) -> Path:
        """Return a ``pathlib.Path`` copy of the wrapped path."""
        return Path(self.path)

    def convert_to_string(self) -> str:
        """Return the path as text, replacing undecodable bytes with U+FFFD."""
        text = str(self.path)
        try:
            _ = text.encode("utf-8")
        except UnicodeEncodeError:
            return os.fsencode(text).decode("utf-8", errors="replace")
        return text

    def read_dir(self) -> ScandirIterator:
        """Return a one-shot iterator over the directory's entries.

        The iterator also works as a context manager that closes the handle.

        Raises:
            OSError: If the path cannot be opened as a directory.
        """
        return os.scandir(self.path)

    @override
    def print(self) -> None:
        """Write the path to standard output."""
        write_line(self.convert_to_string())

    def __str__(self) -> str:
        return self.convert_to_string()

    def __fspath__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"RPath({str(self.path)!r})"


__all__ = ["PathSource", "RPath"]
