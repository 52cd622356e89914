"""src/rpath/ui/cli/display/report.py
What: Render path reports and directory listings for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rpath.ui.cli.models import EntryRow, PathReport

_MISSING = "-"

_KIND_STYLES: dict[str, str] = {
    EntryRow.DIRECTORY: "bold blue",
    EntryRow.FILE: "white",
    EntryRow.SYMLINK: "cyan",
    EntryRow.OTHER: "magenta",
    EntryRow.UNKNOWN: "yellow",
}


def _flag(value: bool) -> Text:
    return Text("yes", style="green") if value else Text("no", style="dim")


@final
class ReportDisplay:
    """Handles report display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize report display."""
        self.console = Console(soft_wrap=True)

    def show_report(self, report: PathReport) -> None:
        """Display the properties of one path as a two-column table.

        Args:
            report: Properties gathered for the path.
        """
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column("Property", style="bold")
        table.add_column("Value", overflow="fold")

        table.add_row("path", Text(report.text))
        table.add_row("absolute", _flag(report.absolute))
        table.add_row("exists", _flag(report.exists))
        table.add_row("directory", _flag(report.is_dir))
        table.add_row("file", _flag(report.is_file))
        table.add_row("symlink", _flag(report.is_symlink))
        table.add_row("basename", Text(report.basename if report.basename is not None else _MISSING))
        table.add_row("dirname", Text(report.dirname if report.dirname is not None else _MISSING))
        table.add_row("extension", Text(report.extension if report.extension is not None else _MISSING))

        self.console.print(table)

    def show_entries(self, entries: Sequence[EntryRow]) -> None:
        """Display directory entries, one per line with a type marker.

        Args:
            entries: Entries to show, already sorted.
        """
        for entry in entries:
            line = Text()
            _ = line.append(f"{entry.kind:<5} ", style="dim")
            _ = line.append(entry.name, style=_KIND_STYLES.get(entry.kind, "white"))
            self.console.print(line)


__all__ = ["ReportDisplay"]
