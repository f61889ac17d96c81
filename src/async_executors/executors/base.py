"""Executor — the uncontrolled baseline and the invoke-and-track primitive."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.state import ExecutionState

if TYPE_CHECKING:
    from ..ports.executor import Command

T = TypeVar("T")

logger = logging.getLogger("async_executors.executor")


def track(
    state: ExecutionState,
    command: Command[T],
    *args: Any,
    **kwargs: Any,
) -> asyncio.Future[T]:
    """Invoke ``command`` and record the invocation in ``state``.

    The command is called synchronously; the awaitable it returns is wrapped
    with :func:`asyncio.ensure_future`. A completion callback settles the
    state exactly once, whatever the outcome, and only then copies the
    outcome into the returned future. Awaiting the returned future therefore
    always observes up-to-date state, even when the command hands back an
    already completed future.

    The returned future belongs to the caller: cancelling it does not stop
    the command, which always runs to completion.

    A command that raises before producing an awaitable is recorded as a
    failed invocation and the exception is delivered through the future.
    """
    loop = asyncio.get_running_loop()
    state.mark_started()
    outcome: asyncio.Future[T] = loop.create_future()
    try:
        future: asyncio.Future[T] = asyncio.ensure_future(command(*args, **kwargs))
    except Exception as exc:
        state.mark_settled(ok=False)
        logger.debug("Command %r raised before starting: %r", command, exc)
        outcome.set_exception(exc)
        return outcome
    future.add_done_callback(partial(_settle, state, outcome))
    return outcome


def _settle(
    state: ExecutionState,
    outcome: asyncio.Future[Any],
    future: asyncio.Future[Any],
) -> None:
    # Reading exception() marks it retrieved; the caller sees it via outcome.
    ok = not future.cancelled() and future.exception() is None
    state.mark_settled(ok)
    logger.debug(
        "Invocation settled (ok=%s, running=%d, run_count=%d)",
        ok,
        state.is_running,
        state.run_count,
    )
    relay(future, outcome)


def relay(source: asyncio.Future[T], target: asyncio.Future[T]) -> None:
    """Copy the outcome of a settled ``source`` into ``target``."""
    if target.done():
        return
    if source.cancelled():
        target.cancel()
        return
    exc = source.exception()
    if exc is not None:
        target.set_exception(exc)
    else:
        target.set_result(source.result())


class Executor(Generic[T]):
    """
    Wraps a command and tracks every invocation of it.

    ``run`` forwards unconditionally: overlapping calls each get their own
    in-flight slot. No queuing, no dedup. The specialised executors build
    their policies on top of this.
    """

    def __init__(self, command: Command[T]) -> None:
        self._command = command
        self._state = ExecutionState()

    @property
    def command(self) -> Command[T]:
        return self._command

    @property
    def state(self) -> ExecutionState:
        return self._state

    @property
    def is_running(self) -> int:
        """Number of invocations currently in flight."""
        return self._state.is_running

    @property
    def run_count(self) -> int:
        return self._state.run_count

    @property
    def was_run(self) -> bool:
        return self._state.was_run

    @property
    def was_run_fine(self) -> bool:
        return self._state.was_run_fine

    @property
    def was_run_bad(self) -> bool:
        return self._state.was_run_bad

    @property
    def was_last_run_fine(self) -> bool:
        return self._state.was_last_run_fine

    def run(self, *args: Any, **kwargs: Any) -> asyncio.Future[T]:
        """Invoke the command now and return its future."""
        return track(self._state, self._command, *args, **kwargs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(command={self._command!r}, "
            f"running={self._state.is_running}, runs={self._state.run_count})"
        )
