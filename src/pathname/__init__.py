# Where: pathname.__init__
# What: Public import surface for the Pathname value type and its runtime seams.
# Why: Callers need one import for paths, dispatch, gateways and logging setup.

"""Object wrapper around filesystem path strings."""

from __future__ import annotations

import logging

from .core import FileSystemGateway, Pathname, Query, QueryCallback, StrPath
from .platform.dispatch import QueryDispatcher, default_dispatcher, set_default_dispatcher
from .platform.filesystem import LocalFileSystemGateway, default_gateway, set_default_gateway
from .platform.logging import QueryRichHandler, logger, setup_logger


def configure_logging() -> logging.Logger:
    """Attach console and file handlers using the configured settings."""

    from .config import settings

    return setup_logger(log_file=settings.LOG_FILE, console_level=settings.CONSOLE_LOG_LEVEL)


__all__ = [
    "FileSystemGateway",
    "LocalFileSystemGateway",
    "Pathname",
    "Query",
    "QueryCallback",
    "QueryDispatcher",
    "QueryRichHandler",
    "StrPath",
    "configure_logging",
    "default_dispatcher",
    "default_gateway",
    "logger",
    "set_default_dispatcher",
    "set_default_gateway",
    "setup_logger",
]
