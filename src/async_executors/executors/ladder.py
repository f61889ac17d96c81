"""LadderExecutor — chains overlapping calls, the last one always runs."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .base import Executor, relay

if TYPE_CHECKING:
    from ..ports.executor import Command

T = TypeVar("T")

logger = logging.getLogger("async_executors.ladder")


@dataclass
class _FollowUp(Generic[T]):
    """Arguments and waiter for the single queued invocation."""

    waiter: asyncio.Future[T]
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


class LadderExecutor(Executor[T]):
    """
    Executor that runs one invocation at a time and queues at most one more.

    While an invocation is in flight, ``run`` only records its arguments in a
    single queue slot. Later requests overwrite earlier ones. When the
    in-flight invocation settles, successfully or not, the queued one starts
    and its outcome is delivered to the caller that queued it.

    A caller whose queued request was overwritten is never notified: its
    future stays pending.
    """

    def __init__(self, command: Command[T]) -> None:
        super().__init__(command)
        self._follow_up: _FollowUp[T] | None = None

    @property
    def has_pending(self) -> bool:
        return self._follow_up is not None

    def run(self, *args: Any, **kwargs: Any) -> asyncio.Future[T]:
        if not self.state.is_running:
            future = super().run(*args, **kwargs)
            future.add_done_callback(self._release_follow_up)
            return future

        if self._follow_up is not None:
            logger.debug("Superseding queued invocation of %r", self.command)
        waiter: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._follow_up = _FollowUp(waiter, args, kwargs)
        logger.debug("Queued follow-up invocation of %r", self.command)
        return waiter

    def _release_follow_up(self, _: asyncio.Future[T]) -> None:
        follow_up, self._follow_up = self._follow_up, None
        if follow_up is None:
            return
        logger.debug("Starting queued follow-up of %r", self.command)
        future = self.run(*follow_up.args, **follow_up.kwargs)
        future.add_done_callback(partial(relay, target=follow_up.waiter))
