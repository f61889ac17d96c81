"""CacheExecutor — memoizes the first invocation's future."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .base import Executor

if TYPE_CHECKING:
    from ..ports.executor import Command

T = TypeVar("T")

logger = logging.getLogger("async_executors.cache")


class CacheExecutor(Executor[T]):
    """
    Executor that runs its command once and shares the outcome.

    The future is cached as soon as the invocation starts, so callers that
    arrive while it is still in flight share it. A failure is cached like a
    success; only :meth:`run_fresh` (or :meth:`clear`) invokes the command
    again.
    """

    def __init__(self, command: Command[T]) -> None:
        super().__init__(command)
        self._cached: asyncio.Future[T] | None = None

    @property
    def is_cached(self) -> bool:
        return self._cached is not None

    def run(self, *args: Any, **kwargs: Any) -> asyncio.Future[T]:
        if self._cached is not None:
            logger.debug("Returning cached invocation of %r", self.command)
            return self._cached
        self._cached = super().run(*args, **kwargs)
        return self._cached

    def run_fresh(self, *args: Any, **kwargs: Any) -> asyncio.Future[T]:
        """Drop the cached future and invoke the command again."""
        self.clear()
        return self.run(*args, **kwargs)

    def clear(self) -> None:
        """Drop the cached future; an in-flight invocation keeps running."""
        self._cached = None
