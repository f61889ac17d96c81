"""Loaders — paginated accumulation on top of tracked invocations."""

from __future__ import annotations

from .infinite import InfiniteLoader, PointerCommand
from .pointer import pointer_request

__all__ = [
    "InfiniteLoader",
    "PointerCommand",
    "pointer_request",
]
