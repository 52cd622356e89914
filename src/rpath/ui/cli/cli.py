"""Command line interface for rpath."""

import sys
from typing import final

from rpath.config import ConfigError
from rpath.core import RPathError
from rpath.platform.logging import logger
from rpath.ui.cli.args import ArgumentParser
from rpath.ui.cli.args.options import CLIArgs, InfoArgs, JoinArgs, ListArgs
from rpath.ui.cli.commands import (
    CommandExecutor,
    InfoCommand,
    JoinCommand,
    ListCommand,
    LookupCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor._build_command(args).execute()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (RPathError, ConfigError, OSError) as e:
            logger.error("%s", e)
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor[CLIArgs]:
        """Pick the executor for the parsed subcommand."""

        if isinstance(args, InfoArgs):
            return InfoCommand(args)
        if isinstance(args, ListArgs):
            return ListCommand(args)
        if isinstance(args, JoinArgs):
            return JoinCommand(args)
        return LookupCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
