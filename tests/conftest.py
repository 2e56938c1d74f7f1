"""Shared fixtures for Pathname query and dispatch tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from pathname.core.ports import FileSystemGateway
from pathname.platform.dispatch import QueryDispatcher, set_default_dispatcher
from pathname.platform.filesystem import set_default_gateway


@pytest.fixture
def dispatcher() -> Iterator[QueryDispatcher]:
    """Install a private dispatcher for the duration of a test."""

    fresh = QueryDispatcher(max_workers=2, thread_name_prefix="pathname-test")
    previous = set_default_dispatcher(fresh)
    try:
        yield fresh
    finally:
        fresh.shutdown(wait=True)
        _ = set_default_dispatcher(previous)


@pytest.fixture
def install_gateway() -> Iterator[Callable[[FileSystemGateway], FileSystemGateway]]:
    """Return a helper that swaps the default gateway and restores it afterwards."""

    originals: list[FileSystemGateway] = []

    def _install(gateway: FileSystemGateway) -> FileSystemGateway:
        originals.append(set_default_gateway(gateway))
        return gateway

    try:
        yield _install
    finally:
        if originals:
            _ = set_default_gateway(originals[0])
