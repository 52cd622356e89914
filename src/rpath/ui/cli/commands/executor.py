"""src/rpath/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rpath.ui.cli.args.options import CLIArgs
from rpath.ui.cli.display.report import ReportDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    display: ReportDisplay

    def __init__(self, args: ArgsT) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args
        self.display = ReportDisplay()

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
