"""Directory listing command implementation."""

from typing import final, override

from rpath.core import RPath
from rpath.platform.logging import logger
from rpath.ui.cli.args.options import ListArgs
from rpath.ui.cli.commands.executor import CommandExecutor
from rpath.ui.cli.models import EntryRow


@final
class ListCommand(CommandExecutor[ListArgs]):
    """List the entries of a directory."""

    @override
    def execute(self) -> int:
        """List entries sorted by name.

        Entries whose type cannot be read are shown as ``?`` and logged;
        failing to open the directory at all returns exit code 1.

        Returns:
            int: Process exit code.
        """
        path = self.args.path
        rows: list[EntryRow] = []
        try:
            with path.read_dir() as entries:
                for entry in entries:
                    if not self.args.show_all and entry.name.startswith("."):
                        continue
                    try:
                        rows.append(EntryRow.from_entry(entry))
                    except OSError as e:
                        entry_text = RPath.from_(entry.path).convert_to_string()
                        logger.warning(
                            "Could not read entry %s: %s",
                            entry_text,
                            e,
                            extra={
                                "rpath_event": "rpath.read_dir.entry_error",
                                "source_path": entry_text,
                                "error_message": str(e),
                            },
                        )
                        rows.append(
                            EntryRow(
                                name=RPath.from_(entry.name).convert_to_string(),
                                kind=EntryRow.UNKNOWN,
                            )
                        )
        except OSError as e:
            logger.error(
                "Cannot list %s: %s",
                path,
                e.strerror or e,
                extra={
                    "rpath_event": "rpath.read_dir.error",
                    "source_path": str(path),
                    "error_message": e.strerror or str(e),
                },
            )
            return 1

        rows.sort(key=lambda row: row.name)
        self.display.show_entries(rows)
        return 0
