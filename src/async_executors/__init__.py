"""async-executors — invocation policies for asynchronous commands.

Dedup, cache, ladder-chain, debounce, repeat and paginate calls to any
callable that returns an awaitable. Runtime dependency: pydantic (options).
"""

from __future__ import annotations

from .executors import (
    CacheExecutor,
    DebounceExecutor,
    Executor,
    LadderExecutor,
    RepeatExecutor,
    relay,
    track,
)
from .loaders import InfiniteLoader, PointerCommand, pointer_request
from .options import DebounceOptions, ExecutorOptions, LoaderOptions, RepeatOptions
from .ports import Command, IExecutor, IScheduledExecutor
from .primitives import (
    AsyncExecutorsError,
    ExecutionState,
    ExecutionStateError,
    ExecutorConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncExecutorsError",
    "CacheExecutor",
    "Command",
    "DebounceExecutor",
    "DebounceOptions",
    "ExecutionState",
    "ExecutionStateError",
    "Executor",
    "ExecutorConfigurationError",
    "ExecutorOptions",
    "IExecutor",
    "IScheduledExecutor",
    "InfiniteLoader",
    "LadderExecutor",
    "LoaderOptions",
    "PointerCommand",
    "RepeatExecutor",
    "RepeatOptions",
    "pointer_request",
    "relay",
    "track",
]
