"""Display management for CLI interface."""

from rpath.ui.cli.display.report import ReportDisplay

__all__ = ["ReportDisplay"]
