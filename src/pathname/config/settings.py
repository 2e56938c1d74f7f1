"""Where: src/pathname/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the dispatch and logging layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathname.config.config import (
    CONSOLE_LOG_LEVEL_DEFAULT,
    DISPATCH_MAX_WORKERS_DEFAULT,
    DISPATCH_THREAD_NAME_PREFIX_DEFAULT,
    config as app_config,
)

# Logging ---------------------------------------------------------------------

LOG_FILE: Path | None = app_config.log_file

_level_name = str(getattr(app_config, "console_log_level", CONSOLE_LOG_LEVEL_DEFAULT)).upper()
CONSOLE_LOG_LEVEL: int = (
    logging.getLevelNamesMapping()[_level_name]
    if _level_name in logging.getLevelNamesMapping()
    else logging.getLevelNamesMapping()[CONSOLE_LOG_LEVEL_DEFAULT]
)


# Query dispatch --------------------------------------------------------------

_max_workers = getattr(app_config, "dispatch_max_workers", DISPATCH_MAX_WORKERS_DEFAULT)
DISPATCH_MAX_WORKERS: int = (
    _max_workers
    if isinstance(_max_workers, int) and not isinstance(_max_workers, bool) and _max_workers > 0
    else DISPATCH_MAX_WORKERS_DEFAULT
)

DISPATCH_THREAD_NAME_PREFIX: str = (
    app_config.dispatch_thread_name_prefix or DISPATCH_THREAD_NAME_PREFIX_DEFAULT
)


__all__ = [
    "CONSOLE_LOG_LEVEL",
    "DISPATCH_MAX_WORKERS",
    "DISPATCH_THREAD_NAME_PREFIX",
    "LOG_FILE",
]
