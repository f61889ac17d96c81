"""Library exceptions for async-executors.

Command failures are never wrapped: they are re-raised unchanged from the
future that belongs to the failed invocation. The classes below only cover
misuse of the library itself.
"""

from __future__ import annotations


class AsyncExecutorsError(Exception):
    """Root exception for the entire async-executors package."""


class ExecutorConfigurationError(AsyncExecutorsError):
    """Raised when an executor or loader is constructed with invalid options.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class ExecutionStateError(AsyncExecutorsError):
    """Raised when execution bookkeeping is driven out of order.

    Usage: ``ExecutionState.mark_settled`` raises this when no invocation
    is in flight, so the running counter can never go negative.
    """
