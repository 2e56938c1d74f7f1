"""Filesystem gateway backed by the ``os`` module."""

from __future__ import annotations

import os

from pathname.core.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def access(self, path: str, mode: int) -> bool:
        return os.access(path, mode)

    def getcwd(self) -> str:
        return os.getcwd()

    def geteuid(self) -> int:
        return os.geteuid()

    def getegid(self) -> int:
        return os.getegid()


_DEFAULT_GATEWAY: FileSystemGateway = LocalFileSystemGateway()


def default_gateway() -> FileSystemGateway:
    """Return the gateway used by ``Pathname`` queries."""

    return _DEFAULT_GATEWAY


def set_default_gateway(gateway: FileSystemGateway) -> FileSystemGateway:
    """Install ``gateway`` for subsequent queries and return the previous one."""

    global _DEFAULT_GATEWAY
    previous = _DEFAULT_GATEWAY
    _DEFAULT_GATEWAY = gateway
    return previous


__all__ = ["LocalFileSystemGateway", "default_gateway", "set_default_gateway"]
