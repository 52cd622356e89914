"""Info command implementation."""

from typing import final, override

from rpath.platform.logging import logger
from rpath.ui.cli.args.options import InfoArgs
from rpath.ui.cli.commands.executor import CommandExecutor
from rpath.ui.cli.models import PathReport


@final
class InfoCommand(CommandExecutor[InfoArgs]):
    """Show the properties of a single path."""

    @override
    def execute(self) -> int:
        path = self.args.path.expand() if self.args.expand else self.args.path
        logger.debug("Inspecting %s", path)
        self.display.show_report(PathReport.from_rpath(path))
        return 0
