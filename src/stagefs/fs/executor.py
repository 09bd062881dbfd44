"""Dedicated thread pool for blocking filesystem work."""

from __future__ import annotations

import asyncio
import functools
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from stagefs.infrastructure import config
from stagefs.infrastructure.logger import logger

T = TypeVar("T")


class BlockingExecutor:
    """Lazily created thread pool that blocking syscalls are offloaded to.

    Work submitted here runs to completion even if the awaiting task is
    cancelled; cancelling only drops interest in the result.
    """

    def __init__(self, max_workers: int | None = None, thread_name_prefix: str = "stagefs-blocking") -> None:
        self._max_workers = max_workers
        self._thread_name_prefix = thread_name_prefix
        self._pool: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()

    @property
    def max_workers(self) -> int:
        return self._max_workers or config.BLOCKING_MAX_WORKERS

    def _get_pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._pool is None:
                self._pool = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix=self._thread_name_prefix,
                )
                logger.debug("Blocking executor started", max_workers=self.max_workers)
            return self._pool

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run fn(*args, **kwargs) on the pool and await its result."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._get_pool(), functools.partial(fn, *args, **kwargs))

    def shutdown(self, wait: bool = True) -> None:
        """Stop the pool. The next submission starts a fresh one."""
        with self._lock:
            pool, self._pool = self._pool, None
        if pool is not None:
            pool.shutdown(wait=wait)
            logger.debug("Blocking executor stopped")


_default_executor = BlockingExecutor()


async def run_blocking(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Offload a blocking call to the shared executor."""
    return await _default_executor.run(fn, *args, **kwargs)


def shutdown_executor(wait: bool = True) -> None:
    _default_executor.shutdown(wait=wait)
