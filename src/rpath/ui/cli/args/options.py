"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from rpath.core import RPath


@final
@dataclass(slots=True)
class InfoArgs:
    """Command line arguments for the ``info`` subcommand."""

    command: Literal["info"]
    path: RPath
    expand: bool


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``ls`` subcommand."""

    command: Literal["ls"]
    path: RPath
    show_all: bool


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    base: RPath
    parts: list[str]


@final
@dataclass(slots=True)
class LookupArgs:
    """Command line arguments for the ``pwd`` and ``home`` subcommands."""

    command: Literal["pwd", "home"]


CLIArgs = InfoArgs | ListArgs | JoinArgs | LookupArgs

__all__ = ["CLIArgs", "InfoArgs", "JoinArgs", "ListArgs", "LookupArgs"]
