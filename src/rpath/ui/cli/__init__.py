"""Command line interface package."""

from rpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
