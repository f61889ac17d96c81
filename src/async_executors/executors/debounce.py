"""DebounceExecutor — runs the command once a quiet period has elapsed."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING, Any, TypeVar

from ..options import DebounceOptions
from .base import Executor, relay

if TYPE_CHECKING:
    from ..ports.executor import Command

T = TypeVar("T")

logger = logging.getLogger("async_executors.debounce")


class DebounceExecutor(Executor[T]):
    """
    Executor that delays invocation until no ``run`` has arrived for
    ``delay`` seconds.

    Each ``run`` while waiting re-arms the single timer and replaces the
    pending arguments; the superseded caller's future is never settled.
    When the timer elapses the command runs once with the latest arguments.

    A ``run`` that arrives while the command is executing arms a fresh
    timer; that request may start a second, overlapping execution once its
    own delay has passed.
    """

    def __init__(self, command: Command[T], delay: float) -> None:
        super().__init__(command)
        self._options = DebounceOptions.build(delay=delay)
        self._handle: asyncio.TimerHandle | None = None
        self._waiter: asyncio.Future[T] | None = None

    @property
    def delay(self) -> float:
        return self._options.delay

    @property
    def is_waiting(self) -> bool:
        """Timer armed, command not started yet."""
        return self._handle is not None

    @property
    def is_active(self) -> bool:
        return self.is_waiting or bool(self.state.is_running)

    def run(self, *args: Any, **kwargs: Any) -> asyncio.Future[T]:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Re-arming debounce timer for %r", self.command)
        waiter: asyncio.Future[T] = loop.create_future()
        self._waiter = waiter
        self._handle = loop.call_later(self.delay, self._fire, waiter, args, kwargs)
        return waiter

    def cancel(self) -> None:
        """Disarm a pending timer and cancel its caller's future.

        An execution already in progress is not affected.
        """
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        if self._waiter is not None:
            self._waiter.cancel()
            self._waiter = None
        logger.debug("Debounce timer for %r cancelled", self.command)

    def _fire(
        self,
        waiter: asyncio.Future[T],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        self._handle = None
        self._waiter = None
        logger.debug("Debounce delay elapsed, invoking %r", self.command)
        future = super().run(*args, **kwargs)
        future.add_done_callback(partial(relay, target=waiter))
