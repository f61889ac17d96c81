"""IExecutor / IScheduledExecutor — protocols for command executors."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    import asyncio

    from ..primitives.state import ExecutionState

T = TypeVar("T")

Command = Callable[..., Awaitable[T]]
"""A callable producing an awaitable that settles with a value or raises."""


@runtime_checkable
class IExecutor(Protocol):
    """
    Anything that gates invocations of a command.

    Implemented by: ``Executor``, ``CacheExecutor``, ``LadderExecutor``,
    ``DebounceExecutor``, ``RepeatExecutor``.
    """

    @property
    def state(self) -> ExecutionState:
        """Bookkeeping for every invocation started so far."""
        ...

    def run(self, *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        """Request an invocation; returns immediately."""
        ...


@runtime_checkable
class IScheduledExecutor(Protocol):
    """Lifecycle protocol for timer-driven executors."""

    @property
    def is_started(self) -> bool: ...

    def start(self, *args: Any, **kwargs: Any) -> None:
        """Begin firing the command on a schedule."""
        ...

    def stop(self) -> None:
        """Stop firing; in-flight invocations keep running."""
        ...
