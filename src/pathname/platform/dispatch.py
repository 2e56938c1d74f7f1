"""
Summary: Run filesystem queries on a worker pool and deliver (error, result) callbacks.
Why: Non-blocking queries must reuse the blocking query logic and complete exactly once.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from typing import Callable, TypeVar

from pathname.platform.logging import logger
from pathname.core.ports import QueryCallback

T = TypeVar("T")


class QueryDispatcher:
    """Schedule queries on a lazily created ``ThreadPoolExecutor``."""

    def __init__(
        self,
        *,
        max_workers: int | None = None,
        thread_name_prefix: str | None = None,
        executor_factory: Callable[[], Executor] | None = None,
    ) -> None:
        if not (max_workers and thread_name_prefix):
            # Deferred so importing pathname never reads the config file.
            from pathname.config import settings

            max_workers = max_workers or settings.DISPATCH_MAX_WORKERS
            thread_name_prefix = thread_name_prefix or settings.DISPATCH_THREAD_NAME_PREFIX
        self._max_workers: int = max_workers
        self._thread_name_prefix: str = thread_name_prefix
        self._executor_factory: Callable[[], Executor] = executor_factory or self._make_executor
        self._executor: Executor | None = None
        self._lock: threading.Lock = threading.Lock()

    def _make_executor(self) -> Executor:
        return ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix=self._thread_name_prefix,
        )

    def _ensure_executor(self) -> Executor:
        with self._lock:
            if self._executor is None:
                self._executor = self._executor_factory()
            return self._executor

    def submit(
        self,
        name: str,
        path: str,
        query: Callable[[], T],
        callback: QueryCallback[T] | None = None,
    ) -> Future[T]:
        """Schedule ``query`` and return its future.

        Args:
            name: Query name used in log events.
            path: Raw path string the query targets.
            query: Zero-argument callable running the blocking query.
            callback: Optional ``(error, result)`` handler, called exactly once
                when the query finishes.

        Returns:
            Future[T]: Future resolved with the query result or its exception.
        """
        logger.debug(
            "Scheduling %s for %s",
            name,
            path,
            extra={"query_event": "query.submit", "query": name, "path": path},
        )
        future: Future[T] = self._ensure_executor().submit(self._timed, name, path, query)
        if callback is not None:
            future.add_done_callback(
                lambda done: self._deliver(name, path, done, callback)
            )
        return future

    @staticmethod
    def _timed(name: str, path: str, query: Callable[[], T]) -> T:
        started = time.perf_counter()
        try:
            result = query()
        except OSError as exc:
            logger.debug(
                "%s failed for %s: %s",
                name,
                path,
                exc,
                extra={
                    "query_event": "query.error",
                    "query": name,
                    "path": path,
                    "error_message": str(exc),
                },
            )
            raise
        logger.debug(
            "%s completed for %s",
            name,
            path,
            extra={
                "query_event": "query.complete",
                "query": name,
                "path": path,
                "duration_ms": (time.perf_counter() - started) * 1000,
            },
        )
        return result

    @staticmethod
    def _deliver(
        name: str,
        path: str,
        future: Future[T],
        callback: QueryCallback[T],
    ) -> None:
        error: BaseException | None = (
            CancelledError() if future.cancelled() else future.exception()
        )
        try:
            if error is not None:
                callback(error, None)
            else:
                callback(None, future.result())
        except Exception as exc:
            logger.exception(
                "Callback for %s on %s raised",
                name,
                path,
                extra={
                    "query_event": "query.callback.error",
                    "query": name,
                    "path": path,
                    "error_message": str(exc),
                },
            )

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker pool; a later submit creates a fresh one."""

        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)


_DEFAULT_DISPATCHER: QueryDispatcher | None = None
_DEFAULT_LOCK = threading.Lock()


def default_dispatcher() -> QueryDispatcher:
    """Return the process-wide dispatcher, creating it on first use."""

    global _DEFAULT_DISPATCHER
    with _DEFAULT_LOCK:
        if _DEFAULT_DISPATCHER is None:
            _DEFAULT_DISPATCHER = QueryDispatcher()
        return _DEFAULT_DISPATCHER


def set_default_dispatcher(dispatcher: QueryDispatcher | None) -> QueryDispatcher | None:
    """Install ``dispatcher`` as the process-wide one and return the previous one.

    Passing ``None`` makes the next ``default_dispatcher()`` call build a new
    dispatcher from the current settings.
    """

    global _DEFAULT_DISPATCHER
    with _DEFAULT_LOCK:
        previous = _DEFAULT_DISPATCHER
        _DEFAULT_DISPATCHER = dispatcher
        return previous


__all__ = ["QueryDispatcher", "default_dispatcher", "set_default_dispatcher"]
