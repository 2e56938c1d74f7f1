"""Tests for the ``QueryRichHandler`` path formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from pathname.platform.logging import QueryRichHandler, setup_logger


def _make_handler() -> QueryRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return QueryRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with query extras for testing."""

    record = logging.LogRecord(
        name="pathname",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_absolute_paths() -> None:
    """Absolute paths should be abbreviated with an ellipsis prefix."""

    handler = _make_handler()
    record = _build_record(
        query_event="query.complete",
        query="stat",
        path="/home/user/projects/site/assets/images/2024/banner.png",
        duration_ms=0.42,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Completed stat " in plain
    assert "…/assets/images/2024/banner.png" in plain
    assert "/home/user" not in plain
    assert "(0.42 ms)" in plain


def test_render_message_keeps_relative_paths_relative() -> None:
    """Relative paths render without a leading separator."""

    handler = _make_handler()
    record = _build_record(
        query_event="query.submit",
        query="is_file",
        path="src/index.html",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]
    assert plain.endswith("Scheduled is_file src/index.html")


def test_render_message_handles_windows_paths() -> None:
    """Windows-style paths should retain backslash separators."""

    handler = _make_handler()
    record = _build_record(
        query_event="query.error",
        query="lstat",
        path="C:\\Users\\me\\AppData\\Local\\Temp\\scratch\\file.tmp",
        error_message="[WinError 2] not found",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]
    assert "C:\\…\\Local\\Temp\\scratch\\file.tmp" in plain
    assert "[WinError 2] not found" in plain


def test_render_message_short_paths_are_untouched() -> None:
    """Paths within the segment limit render in full."""

    handler = _make_handler()
    record = _build_record(query_event="query.complete", query="size", path="/etc/hosts")

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]
    assert plain.endswith("/etc/hosts")


def test_plain_records_fall_back_to_rich_rendering() -> None:
    """Records without a query event render through RichHandler."""

    handler = _make_handler()
    rendered = handler.render_message(_build_record(), "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_attaches_console_and_file_handlers(tmp_path: Path) -> None:
    """setup_logger replaces handlers and writes DEBUG records to the file."""

    log_file = tmp_path / "logs" / "pathname.log"
    logger = setup_logger(log_file=log_file, console_level=logging.CRITICAL)
    try:
        kinds = {type(handler).__name__ for handler in logger.handlers}
        assert kinds == {"QueryRichHandler", "RotatingFileHandler"}

        logger.debug("query ran")
        for handler in logger.handlers:
            handler.flush()

        assert "pathname - DEBUG - query ran" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.addHandler(logging.NullHandler())
