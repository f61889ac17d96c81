"""Pointer request helpers — page commands over in-memory sequences."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def pointer_request(
    source: Sequence[T],
    delay: float = 0.0,
) -> Callable[[int, int], Awaitable[list[T]]]:
    """Build a ``(pointer, per_step)`` command slicing ``source``.

    ``delay`` simulates request latency in seconds.
    """

    async def request(pointer: int, per_step: int) -> list[T]:
        if delay > 0:
            await asyncio.sleep(delay)
        return list(source[pointer : pointer + per_step])

    return request
