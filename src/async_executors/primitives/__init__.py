"""Primitives: exceptions, execution state."""

from __future__ import annotations

from .exceptions import (
    AsyncExecutorsError,
    ExecutionStateError,
    ExecutorConfigurationError,
)
from .state import ExecutionState

__all__ = [
    "AsyncExecutorsError",
    "ExecutionState",
    "ExecutionStateError",
    "ExecutorConfigurationError",
]
