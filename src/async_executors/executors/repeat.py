"""RepeatExecutor — fires the command on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ..options import RepeatOptions
from .base import Executor

if TYPE_CHECKING:
    from ..ports.executor import Command

T = TypeVar("T")

logger = logging.getLogger("async_executors.repeat")


class RepeatExecutor(Executor[T]):
    """Executor that calls ``run`` every ``interval`` seconds once started.

    The first invocation happens one interval after :meth:`start`, never
    immediately. Firings do not wait for earlier invocations to settle, so
    slow commands overlap exactly as they would with the base executor.

    Implements ``IScheduledExecutor`` (``start`` / ``stop``).
    """

    def __init__(self, command: Command[T], interval: float) -> None:
        super().__init__(command)
        self._options = RepeatOptions.build(interval=interval)
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        return self._options.interval

    @property
    def is_started(self) -> bool:
        return self._task is not None

    def start(self, *args: Any, **kwargs: Any) -> None:
        """Begin firing ``run(*args, **kwargs)``; no-op when already started."""
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(
            self._run_loop(args, kwargs)
        )
        self._task.add_done_callback(self._on_loop_done)
        logger.info("RepeatExecutor started (interval=%.3fs)", self.interval)

    def stop(self) -> None:
        """Stop firing; invocations already in flight run to completion."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.info("RepeatExecutor stopped after %d runs", self.state.run_count)

    async def _run_loop(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        while True:
            # Deadlines come from the loop clock so the period does not drift.
            deadline += self.interval
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            future = self.run(*args, **kwargs)
            future.add_done_callback(self._report_failure)

    def _on_loop_done(self, task: asyncio.Task[None]) -> None:
        if self._task is task:
            self._task = None
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("RepeatExecutor loop error", exc_info=exc)

    def _report_failure(self, future: asyncio.Future[T]) -> None:
        """Log failures of fired invocations; nobody else awaits them."""
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning(
                "Repeated invocation of %r failed: %s",
                self.command,
                exc,
                exc_info=exc,
            )
