"""
Summary: Abstract seam between Pathname queries and the host filesystem.
Why: Keep blocking and non-blocking queries on one injectable set of primitives.
"""

from __future__ import annotations

import abc
import os
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

# Completion handler for non-blocking queries: (error, result), exactly one is set.
QueryCallback = Callable[[BaseException | None, T | None], object]


class FileSystemGateway(abc.ABC):
    """Host primitives consumed by the filesystem queries."""

    @abc.abstractmethod
    def stat(self, path: str) -> os.stat_result:
        """Return metadata for ``path``, following a terminal symlink."""

    @abc.abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Return metadata for ``path`` without following a terminal symlink."""

    @abc.abstractmethod
    def access(self, path: str, mode: int) -> bool:
        """Return whether the process has ``mode`` access to ``path``."""

    @abc.abstractmethod
    def getcwd(self) -> str:
        """Return the current working directory."""

    @abc.abstractmethod
    def geteuid(self) -> int:
        """Return the effective user id of the process."""

    @abc.abstractmethod
    def getegid(self) -> int:
        """Return the effective group id of the process."""


__all__ = ["FileSystemGateway", "QueryCallback"]
