"""Executors — invocation policies built on the invoke-and-track primitive."""

from __future__ import annotations

from .base import Executor, relay, track
from .cache import CacheExecutor
from .debounce import DebounceExecutor
from .ladder import LadderExecutor
from .repeat import RepeatExecutor

__all__ = [
    "CacheExecutor",
    "DebounceExecutor",
    "Executor",
    "LadderExecutor",
    "RepeatExecutor",
    "relay",
    "track",
]
