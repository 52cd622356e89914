"""Command line argument handling package."""

from rpath.ui.cli.args.parser import ArgumentParser
from rpath.ui.cli.args.options import CLIArgs, InfoArgs, JoinArgs, ListArgs, LookupArgs

__all__ = ["ArgumentParser", "CLIArgs", "InfoArgs", "JoinArgs", "ListArgs", "LookupArgs"]
