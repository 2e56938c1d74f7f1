"""
Summary: Immutable Pathname value wrapping a raw path string.
Why: Chainable path algebra and filesystem queries without mutating or normalizing input.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import TypeVar

from pathname.platform.dispatch import default_dispatcher
from pathname.platform.filesystem import default_gateway

from . import queries
from .ports import QueryCallback
from .queries import Query

T = TypeVar("T")

StrPath = str | os.PathLike[str]

_SEPARATORS: str = os.sep + (os.altsep or "")


def _strip_trailing_separators(path: str) -> str:
    """Drop trailing separators while keeping a bare root intact."""

    drive, root, tail = os.path.splitroot(path)
    if not tail:
        return path
    return drive + root + tail.rstrip(_SEPARATORS)


@dataclass(frozen=True, slots=True)
class Pathname:
    """Immutable wrapper around a filesystem path string.

    ``raw`` keeps the string exactly as supplied. Path algebra methods are
    pure and return new instances; filesystem queries run one host call per
    invocation and are never cached. Every query ``name()`` has a
    ``name_async(callback=None)`` twin that returns a ``Future`` and, when a
    callback is given, calls it once with ``(error, result)``.
    """

    raw: str

    def __post_init__(self) -> None:
        value = os.fspath(self.raw)
        if not isinstance(value, str):
            raise TypeError(f"Pathname expects a str path, got {type(value).__name__}")
        object.__setattr__(self, "raw", value)

    def __str__(self) -> str:
        return self.raw

    def __fspath__(self) -> str:
        return self.raw

    def __truediv__(self, segment: StrPath) -> Pathname:
        return self.join(segment)

    # Path algebra ---------------------------------------------------------------

    def basename(self, suffix: str | None = None) -> Pathname:
        """Return the last segment, dropping ``suffix`` when it ends the segment.

        The suffix is kept when it would consume the whole segment, so
        ``Pathname(".txt").basename(".txt")`` stays ``.txt``.
        """
        name = os.path.basename(_strip_trailing_separators(self.raw))
        if suffix and name != suffix and name.endswith(suffix):
            name = name[: -len(suffix)]
        return Pathname(name)

    def dirname(self) -> Pathname:
        """Return every segment but the last; ``.`` for a single relative segment."""

        head = os.path.dirname(_strip_trailing_separators(self.raw))
        return Pathname(_strip_trailing_separators(head) if head else os.curdir)

    def extname(self) -> str:
        """Return the extension of the last segment including its dot, or ``""``."""

        return os.path.splitext(self.basename().raw)[1]

    def cleanpath(self) -> Pathname:
        """Lexically resolve ``.``, ``..`` and repeated separators."""

        return Pathname(os.path.normpath(self.raw))

    def join(self, *segments: StrPath) -> Pathname:
        """Concatenate ``segments`` onto this path and clean the result.

        Unlike ``os.path.join``, an absolute segment does not discard what
        precedes it: ``Pathname("foo").join("/bar")`` is ``foo/bar``. Empty
        segments are skipped.
        """
        joined = ""
        for part in (self.raw, *(os.fspath(segment) for segment in segments)):
            if not part:
                continue
            if joined and not joined.endswith(tuple(_SEPARATORS)):
                joined += os.sep
            joined += part
        return Pathname(os.path.normpath(joined) if joined else os.curdir)

    def parent(self) -> Pathname:
        return self.join(os.pardir)

    def split(self) -> tuple[Pathname, Pathname]:
        """Return ``(dirname(), basename())``."""

        return self.dirname(), self.basename()

    def sub_ext(self, ext: str) -> Pathname:
        """Replace the extension with ``ext``, appending it when there is none."""

        return self.dirname().join(self.basename(self.extname()).raw + ext)

    def sub(self, old: str, new: str) -> Pathname:
        """Replace the first literal occurrence of ``old`` with ``new``."""

        return Pathname(self.raw.replace(old, new, 1))

    def sub_pattern(
        self,
        pattern: str | re.Pattern[str],
        repl: str | Callable[[re.Match[str]], str],
    ) -> Pathname:
        """Replace the first match of the regular expression ``pattern``."""

        return Pathname(re.sub(pattern, repl, self.raw, count=1))

    def is_absolute(self) -> bool:
        return os.path.isabs(self.raw)

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def is_root(self) -> bool:
        """Return whether the cleaned path is exactly its own root."""

        drive, root, _ = os.path.splitroot(self.raw)
        anchor = drive + root
        return bool(anchor) and self.cleanpath().raw == anchor

    def ascend(self) -> list[Pathname]:
        """Return this path followed by each parent, child to root.

        The walk takes at most one step per separator character plus one and
        stops as soon as a root has been emitted, so relative paths end at
        their first segment: ``foo/bar`` gives ``["foo/bar", "foo"]``.
        """
        bound = sum(self.raw.count(separator) for separator in _SEPARATORS) + 1
        result: list[Pathname] = []
        current = self
        for _ in range(bound):
            result.append(current)
            if current.is_root():
                break
            current = current.parent()
        return result

    def descend(self) -> list[Pathname]:
        """Return ``ascend()`` reversed, root to child."""

        return self.ascend()[::-1]

    def filenames(self) -> list[str]:
        """Return the non-empty segments of the raw path, left to right."""

        raw = self.raw
        if os.altsep:
            raw = raw.replace(os.altsep, os.sep)
        return [segment for segment in raw.split(os.sep) if segment]

    def each_filename(self, visit: Callable[[str], object]) -> None:
        """Call ``visit`` once per non-empty segment of the raw path."""

        for segment in self.filenames():
            visit(segment)

    def relative_path_from(self, base: StrPath) -> Pathname:
        """Express this path relative to ``base``.

        Equal paths give ``.``. Relative inputs are resolved against the
        gateway's current working directory first.
        """
        cwd = default_gateway().getcwd()
        return Pathname(
            os.path.relpath(os.path.join(cwd, self.raw), os.path.join(cwd, os.fspath(base)))
        )

    def expand_path(self, default_dir: StrPath | None = None) -> Pathname:
        """Return the absolute, cleaned form of this path.

        Relative paths are resolved against ``default_dir``, which defaults to
        the current working directory and is itself made absolute first.
        """
        base = os.fspath(default_dir) if default_dir is not None else ""
        if not os.path.isabs(base):
            base = os.path.join(default_gateway().getcwd(), base)
        return Pathname(os.path.normpath(os.path.join(base, self.raw)))

    # Filesystem queries -----------------------------------------------------------

    def _run(self, query: Query[T]) -> T:
        return query(default_gateway(), self.raw)

    def _run_async(self, query: Query[T], callback: QueryCallback[T] | None) -> Future[T]:
        task = partial(query, default_gateway(), self.raw)
        return default_dispatcher().submit(query.name, self.raw, task, callback)

    def stat(self) -> os.stat_result:
        """Return metadata for this path, following a terminal symlink."""

        return self._run(queries.STAT)

    def stat_async(self, callback: QueryCallback[os.stat_result] | None = None) -> Future[os.stat_result]:
        return self._run_async(queries.STAT, callback)

    def lstat(self) -> os.stat_result:
        """Return metadata for this path without following a terminal symlink."""

        return self._run(queries.LSTAT)

    def lstat_async(self, callback: QueryCallback[os.stat_result] | None = None) -> Future[os.stat_result]:
        return self._run_async(queries.LSTAT, callback)

    def size(self) -> int:
        return self._run(queries.SIZE)

    def size_async(self, callback: QueryCallback[int] | None = None) -> Future[int]:
        return self._run_async(queries.SIZE, callback)

    def mtime(self) -> datetime:
        """Return the last modification time as an aware UTC datetime."""

        return self._run(queries.MTIME)

    def mtime_async(self, callback: QueryCallback[datetime] | None = None) -> Future[datetime]:
        return self._run_async(queries.MTIME, callback)

    def atime(self) -> datetime:
        return self._run(queries.ATIME)

    def atime_async(self, callback: QueryCallback[datetime] | None = None) -> Future[datetime]:
        return self._run_async(queries.ATIME, callback)

    def ctime(self) -> datetime:
        return self._run(queries.CTIME)

    def ctime_async(self, callback: QueryCallback[datetime] | None = None) -> Future[datetime]:
        return self._run_async(queries.CTIME, callback)

    def birthtime(self) -> datetime:
        """Return the creation time, or the ctime where the host does not record one."""

        return self._run(queries.BIRTHTIME)

    def birthtime_async(self, callback: QueryCallback[datetime] | None = None) -> Future[datetime]:
        return self._run_async(queries.BIRTHTIME, callback)

    def is_file(self) -> bool:
        return self._run(queries.IS_FILE)

    def is_file_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_FILE, callback)

    def is_directory(self) -> bool:
        return self._run(queries.IS_DIRECTORY)

    def is_directory_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_DIRECTORY, callback)

    def is_symbolic_link(self) -> bool:
        return self._run(queries.IS_SYMBOLIC_LINK)

    def is_symbolic_link_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_SYMBOLIC_LINK, callback)

    def is_block_device(self) -> bool:
        return self._run(queries.IS_BLOCK_DEVICE)

    def is_block_device_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_BLOCK_DEVICE, callback)

    def is_character_device(self) -> bool:
        return self._run(queries.IS_CHARACTER_DEVICE)

    def is_character_device_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_CHARACTER_DEVICE, callback)

    def is_fifo(self) -> bool:
        return self._run(queries.IS_FIFO)

    def is_fifo_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_FIFO, callback)

    is_pipe = is_fifo
    is_pipe_async = is_fifo_async

    def is_socket(self) -> bool:
        return self._run(queries.IS_SOCKET)

    def is_socket_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_SOCKET, callback)

    def file_type(self) -> int:
        """Return the file-type bits of ``st_mode`` (``stat.S_IFMT``)."""

        return self._run(queries.FILE_TYPE)

    def file_type_async(self, callback: QueryCallback[int] | None = None) -> Future[int]:
        return self._run_async(queries.FILE_TYPE, callback)

    def is_empty(self) -> bool:
        return self._run(queries.IS_ZERO)

    def is_empty_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_ZERO, callback)

    is_zero = is_empty
    is_zero_async = is_empty_async

    def is_exist(self) -> bool:
        """Return whether the path resolves; never raises.

        Like the other access checks, the ``_async`` form reports a missing or
        denied path as ``(None, False)`` and never passes an error.
        """

        return self._run(queries.IS_EXIST)

    def is_exist_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_EXIST, callback)

    def is_readable(self) -> bool:
        return self._run(queries.IS_READABLE)

    def is_readable_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_READABLE, callback)

    def is_writable(self) -> bool:
        return self._run(queries.IS_WRITABLE)

    def is_writable_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_WRITABLE, callback)

    def is_executable(self) -> bool:
        return self._run(queries.IS_EXECUTABLE)

    def is_executable_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_EXECUTABLE, callback)

    def is_owned(self) -> bool:
        """Return whether the owner uid matches the effective uid of the process."""

        return self._run(queries.IS_OWNED)

    def is_owned_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_OWNED, callback)

    def is_group_owned(self) -> bool:
        return self._run(queries.IS_GROUP_OWNED)

    def is_group_owned_async(self, callback: QueryCallback[bool] | None = None) -> Future[bool]:
        return self._run_async(queries.IS_GROUP_OWNED, callback)


__all__ = ["Pathname", "StrPath"]
