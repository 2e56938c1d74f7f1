"""Rich console handler for query events.

Where: platform/logging/handlers.py
What: Render dispatcher events with icons and compact, colored paths.
Why: Long absolute paths drown the query name in plain console output.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class QueryRichHandler(RichHandler):
    """Rich handler that renders ``query_event`` records with styled paths."""

    _QUERY_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "query.submit": ("⏳", "cyan"),
        "query.complete": ("✅", "green"),
        "query.error": ("❌", "red"),
        "query.callback.error": ("⛔", "red"),
    }
    _QUERY_PREFIXES: ClassVar[dict[str, str]] = {
        "query.submit": "Scheduled ",
        "query.complete": "Completed ",
        "query.error": "Failed ",
        "query.callback.error": "Callback raised for ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        display_path = self._to_pure_path(path)
        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display_string += "…"
            if body_parts:
                display_string += separator
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
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_query_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured query events with dedicated styling."""

        event = getattr(record, "query_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._QUERY_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._QUERY_PREFIXES.get(event, ""))

        query = getattr(record, "query", None)
        if query:
            _ = body.append(f"{query} ")

        path = getattr(record, "path", None)
        if path is not None:
            _ = body.append_text(self._format_path(str(path)))

        details: list[str] = []
        duration_ms = getattr(record, "duration_ms", None)
        if isinstance(duration_ms, (int, float)):
            details.append(f"{duration_ms:.2f} ms")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for query events."""

        query_text = self._render_query_message(record)
        if query_text is not None:
            return query_text

        return super().render_message(record, message)


__all__ = ["QueryRichHandler"]
