"""Join command implementation."""

from typing import final, override

from rpath.ui.cli.args.options import JoinArgs
from rpath.ui.cli.commands.executor import CommandExecutor


@final
class JoinCommand(CommandExecutor[JoinArgs]):
    """Join components onto a base path and print the result."""

    @override
    def execute(self) -> int:
        joined = self.args.base.clone()
        joined.join_multiple(self.args.parts)
        joined.print()
        return 0
