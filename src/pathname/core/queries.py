"""
Summary: Single definition of every filesystem query a Pathname can run.
Why: Blocking and non-blocking calls execute the same query objects and cannot diverge.
"""

from __future__ import annotations

import os
import stat as stat_module
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, TypeVar

from .ports import FileSystemGateway

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Query(Generic[T]):
    """A named filesystem query over a raw path string."""

    name: str
    run: Callable[[FileSystemGateway, str], T]

    def __call__(self, gateway: FileSystemGateway, path: str) -> T:
        return self.run(gateway, path)


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _birthtime(result: os.stat_result) -> datetime:
    # st_birthtime is only reported on macOS, BSD and Windows.
    birth = getattr(result, "st_birthtime", None)
    return _timestamp(result.st_ctime if birth is None else birth)


def _from_stat(name: str, extract: Callable[[os.stat_result], T]) -> Query[T]:
    return Query(name, lambda gateway, path: extract(gateway.stat(path)))


def _from_lstat(name: str, extract: Callable[[os.stat_result], T]) -> Query[T]:
    return Query(name, lambda gateway, path: extract(gateway.lstat(path)))


def _access(name: str, mode: int) -> Query[bool]:
    return Query(name, lambda gateway, path: gateway.access(path, mode))


STAT: Query[os.stat_result] = Query("stat", lambda gateway, path: gateway.stat(path))
LSTAT: Query[os.stat_result] = Query("lstat", lambda gateway, path: gateway.lstat(path))

SIZE: Query[int] = _from_stat("size", lambda st: st.st_size)
MTIME: Query[datetime] = _from_stat("mtime", lambda st: _timestamp(st.st_mtime))
ATIME: Query[datetime] = _from_stat("atime", lambda st: _timestamp(st.st_atime))
CTIME: Query[datetime] = _from_stat("ctime", lambda st: _timestamp(st.st_ctime))
BIRTHTIME: Query[datetime] = _from_stat("birthtime", _birthtime)
FILE_TYPE: Query[int] = _from_stat("file_type", lambda st: stat_module.S_IFMT(st.st_mode))
IS_ZERO: Query[bool] = _from_stat("is_zero", lambda st: st.st_size == 0)

IS_FILE: Query[bool] = _from_stat("is_file", lambda st: stat_module.S_ISREG(st.st_mode))
IS_DIRECTORY: Query[bool] = _from_stat(
    "is_directory", lambda st: stat_module.S_ISDIR(st.st_mode)
)
IS_BLOCK_DEVICE: Query[bool] = _from_stat(
    "is_block_device", lambda st: stat_module.S_ISBLK(st.st_mode)
)
IS_CHARACTER_DEVICE: Query[bool] = _from_stat(
    "is_character_device", lambda st: stat_module.S_ISCHR(st.st_mode)
)
IS_FIFO: Query[bool] = _from_stat("is_fifo", lambda st: stat_module.S_ISFIFO(st.st_mode))
IS_SOCKET: Query[bool] = _from_stat("is_socket", lambda st: stat_module.S_ISSOCK(st.st_mode))
IS_SYMBOLIC_LINK: Query[bool] = _from_lstat(
    "is_symbolic_link", lambda st: stat_module.S_ISLNK(st.st_mode)
)

IS_EXIST: Query[bool] = _access("is_exist", os.F_OK)
IS_READABLE: Query[bool] = _access("is_readable", os.R_OK)
IS_WRITABLE: Query[bool] = _access("is_writable", os.W_OK)
IS_EXECUTABLE: Query[bool] = _access("is_executable", os.X_OK)

IS_OWNED: Query[bool] = Query(
    "is_owned", lambda gateway, path: gateway.stat(path).st_uid == gateway.geteuid()
)
IS_GROUP_OWNED: Query[bool] = Query(
    "is_group_owned", lambda gateway, path: gateway.stat(path).st_gid == gateway.getegid()
)


__all__ = [
    "ATIME",
    "BIRTHTIME",
    "CTIME",
    "FILE_TYPE",
    "IS_BLOCK_DEVICE",
    "IS_CHARACTER_DEVICE",
    "IS_DIRECTORY",
    "IS_EXECUTABLE",
    "IS_EXIST",
    "IS_FIFO",
    "IS_FILE",
    "IS_GROUP_OWNED",
    "IS_OWNED",
    "IS_READABLE",
    "IS_SOCKET",
    "IS_SYMBOLIC_LINK",
    "IS_WRITABLE",
    "IS_ZERO",
    "LSTAT",
    "MTIME",
    "Query",
    "SIZE",
    "STAT",
]
