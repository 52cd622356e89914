"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from rpath.config import Config
from rpath.core import RPath
from rpath.platform.logging import logger, setup_logger
from rpath.ui.cli.args.options import CLIArgs, InfoArgs, JoinArgs, ListArgs, LookupArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        verbosity = common.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all logging except errors",
        )
        _ = common.add_argument(
            "--log-file",
            type=str,
            help="Also write logs to this file",
            metavar="LOG_FILE",
        )
        _ = common.add_argument(
            "--config",
            type=str,
            help="Configuration file to use instead of the default location",
            metavar="CONFIG",
        )

        parser = argparse.ArgumentParser(
            prog="rpath",
            description="rpath - inspect and combine filesystem paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        info_parser = subparsers.add_parser(
            "info",
            parents=[common],
            help="Show the properties of a path",
        )
        _ = info_parser.add_argument("path", type=str, help="Path to inspect", metavar="PATH")
        _ = info_parser.add_argument(
            "--expand",
            action="store_true",
            help="Canonicalize the path first when it exists",
        )

        ls_parser = subparsers.add_parser(
            "ls",
            parents=[common],
            help="List the entries of a directory",
        )
        _ = ls_parser.add_argument("path", type=str, help="Directory to list", metavar="PATH")
        _ = ls_parser.add_argument(
            "--all",
            dest="show_all",
            action="store_true",
            help="Include entries whose names start with a dot",
        )

        join_parser = subparsers.add_parser(
            "join",
            parents=[common],
            help="Join components onto a base path",
        )
        _ = join_parser.add_argument("base", type=str, help="Base path", metavar="BASE")
        _ = join_parser.add_argument(
            "parts",
            type=str,
            nargs="+",
            help="Components appended in order",
            metavar="PART",
        )

        _ = subparsers.add_parser(
            "pwd",
            parents=[common],
            help="Print the current working directory",
        )
        _ = subparsers.add_parser(
            "home",
            parents=[common],
            help="Print the home directory",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        # Console logging first so configuration errors are reported
        _ = setup_logger(console_level=log_level)
        configuration = Config.load(parsed_args.config)

        if not (is_quiet or is_verbose):
            log_level = configuration.console_log_level
        log_file = parsed_args.log_file or configuration.log_file
        if log_file is not None or log_level != logging.INFO:
            _ = setup_logger(log_file=log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "info":
            return InfoArgs(
                command="info",
                path=RPath.from_(parsed_args.path),
                expand=parsed_args.expand or configuration.expand_paths,
            )

        if command == "ls":
            return ListArgs(
                command="ls",
                path=RPath.from_(parsed_args.path),
                show_all=parsed_args.show_all or configuration.show_hidden,
            )

        if command == "join":
            return JoinArgs(
                command="join",
                base=RPath.from_(parsed_args.base),
                parts=list(parsed_args.parts),
            )

        if command in {"pwd", "home"}:
            return LookupArgs(command=command)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)


__all__ = ["ArgumentParser"]
