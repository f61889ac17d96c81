"""Shared fixtures for executor and loader tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest


class ControlledCommand:
    """Command whose invocations settle only when the test says so.

    Each call records its arguments and returns a fresh loop future
    (a "gate") that the test resolves or fails by index.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.gates: list[asyncio.Future[Any]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        self.calls.append((args, kwargs))
        gate: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self.gates.append(gate)
        return gate

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def resolve(self, index: int, value: Any = None) -> None:
        self.gates[index].set_result(value)

    def fail(self, index: int, exc: BaseException) -> None:
        self.gates[index].set_exception(exc)


async def drain(rounds: int = 5) -> None:
    """Let pending done-callbacks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def command() -> ControlledCommand:
    return ControlledCommand()
