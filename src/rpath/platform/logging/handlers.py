"""Rich console handler that renders path events compactly."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that styles ``rpath_event`` records and their paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "rpath.expand.fallback": ("↪️", "yellow", "Kept unexpanded "),
        "rpath.read_dir.error": ("❌", "red", "Cannot list "),
        "rpath.read_dir.entry_error": ("⚠️", "yellow", "Unreadable entry "),
        "rpath.env.error": ("⛔", "red", "Environment lookup failed"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str) -> Text:
        """Render ``path`` keeping its anchor and at most four trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Styled path with highlighted separators.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render records tagged with an ``rpath_event`` extra."""

        event = getattr(record, "rpath_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(prefix, style=Style(color=color))
        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self.format_path(str(source_path)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
