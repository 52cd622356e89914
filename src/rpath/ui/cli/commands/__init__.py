"""Command execution package for CLI."""

from rpath.ui.cli.commands.executor import CommandExecutor
from rpath.ui.cli.commands.info import InfoCommand
from rpath.ui.cli.commands.join import JoinCommand
from rpath.ui.cli.commands.listing import ListCommand
from rpath.ui.cli.commands.lookup import LookupCommand

__all__ = [
    "CommandExecutor",
    "InfoCommand",
    "JoinCommand",
    "ListCommand",
    "LookupCommand",
]
