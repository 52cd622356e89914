"""Printing capability shared by path-like value types."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

DEFAULT_DESCRIPTION: str = "Default print implementation for RPath"


def write_line(text: str) -> None:
    """Write ``text`` and a newline to the current standard output stream.

    The text is written verbatim; tabs and control characters are kept.
    """

    _ = sys.stdout.write(text + "\n")


class Display(ABC):
    """Something that can render itself as a single line on standard output."""

    __slots__ = ()

    @abstractmethod
    def print(self) -> None:
        """Write this value to standard output."""
        pass

    def print_default(self) -> None:
        """Write the fallback description to standard output."""
        write_line(DEFAULT_DESCRIPTION)


__all__ = ["DEFAULT_DESCRIPTION", "Display", "write_line"]
