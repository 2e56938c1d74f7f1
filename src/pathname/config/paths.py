"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers the locations of its
optional config file and log file.

Policy:
- Config: ``PATHNAME_CONFIG`` when set, otherwise
  ``<project_root>/config/pathname.toml``.
- Logs: ``<project_root>/logs/pathname.log``.

The project root is the closest ancestor of the working directory that holds
a ``pyproject.toml`` or ``.git`` marker.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "PATHNAME_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_project_root(start: Path | None = None) -> Path:
    """Detect the project root by walking up parents.

    Args:
        start: Starting directory. Defaults to the current working directory.

    Returns:
        Path: First directory carrying a root marker, or ``start`` itself when
        no marker is found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if any((p / marker).exists() for marker in _ROOT_MARKERS):
            return p
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _detect_project_root() / "config" / "pathname.toml",
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_project_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "pathname.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
