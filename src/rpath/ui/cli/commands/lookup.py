"""Working and home directory lookup commands."""

from typing import final, override

from rpath.core import RPath
from rpath.ui.cli.args.options import LookupArgs
from rpath.ui.cli.commands.executor import CommandExecutor


@final
class LookupCommand(CommandExecutor[LookupArgs]):
    """Print the current working directory or the home directory."""

    @override
    def execute(self) -> int:
        rpath = RPath.pwd() if self.args.command == "pwd" else RPath.gethomedir()
        rpath.print()
        return 0
