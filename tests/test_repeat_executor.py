"""Tests for RepeatExecutor."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from async_executors import (
    ExecutorConfigurationError,
    IScheduledExecutor,
    RepeatExecutor,
)
from conftest import ControlledCommand

INTERVAL = 0.1


class TestRepeatExecutor:
    async def test_first_run_after_one_interval(self) -> None:
        command = AsyncMock()
        executor = RepeatExecutor(command, INTERVAL)

        executor.start()
        assert executor.is_started is True
        await asyncio.sleep(INTERVAL / 2)
        assert command.call_count == 0

        await asyncio.sleep(INTERVAL)
        assert command.call_count == 1
        executor.stop()

    async def test_fires_every_interval_with_arguments(self) -> None:
        command = AsyncMock()
        executor = RepeatExecutor(command, INTERVAL)

        executor.start("tick", source="timer")
        await asyncio.sleep(INTERVAL * 3.5)
        executor.stop()

        assert command.call_count == 3
        command.assert_called_with("tick", source="timer")

    async def test_stop_prevents_further_runs(self) -> None:
        command = AsyncMock()
        executor = RepeatExecutor(command, INTERVAL)

        executor.start()
        await asyncio.sleep(INTERVAL * 1.5)
        executor.stop()
        calls = command.call_count

        await asyncio.sleep(INTERVAL * 3)
        assert command.call_count == calls == 1
        assert executor.is_started is False

    async def test_start_twice_keeps_single_timer(self) -> None:
        command = AsyncMock()
        executor = RepeatExecutor(command, INTERVAL)

        executor.start()
        executor.start()
        await asyncio.sleep(INTERVAL * 2.5)
        executor.stop()

        assert command.call_count == 2

    async def test_stop_when_not_started_is_noop(self) -> None:
        executor = RepeatExecutor(AsyncMock(), INTERVAL)
        executor.stop()
        assert executor.is_started is False

    async def test_restart_after_stop(self) -> None:
        command = AsyncMock()
        executor = RepeatExecutor(command, INTERVAL)

        executor.start()
        executor.stop()
        executor.start()
        await asyncio.sleep(INTERVAL * 1.5)
        executor.stop()

        assert command.call_count == 1

    async def test_slow_runs_overlap(self, command: ControlledCommand) -> None:
        """No backpressure: a pending run does not delay the next firing."""
        executor = RepeatExecutor(command, INTERVAL)

        executor.start()
        await asyncio.sleep(INTERVAL * 2.5)
        executor.stop()

        assert command.call_count == 2
        assert executor.is_running == 2
        command.resolve(0)
        command.resolve(1)
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert executor.is_running == 0

    async def test_failed_runs_are_logged_and_loop_continues(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        command = AsyncMock(side_effect=RuntimeError("flaky"))
        executor = RepeatExecutor(command, INTERVAL)

        with caplog.at_level(logging.WARNING, logger="async_executors.repeat"):
            executor.start()
            await asyncio.sleep(INTERVAL * 2.5)
            executor.stop()

        assert command.call_count == 2
        assert executor.was_run_bad is True
        assert "Repeated invocation" in caplog.text
        assert "flaky" in caplog.text

    async def test_broken_loop_is_logged_and_marks_stopped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        executor = RepeatExecutor(AsyncMock(), INTERVAL)
        broken = MagicMock(side_effect=RuntimeError("loop broke"))
        executor.run = broken  # type: ignore[method-assign]

        with caplog.at_level(logging.ERROR, logger="async_executors.repeat"):
            executor.start()
            await asyncio.sleep(INTERVAL * 1.5)

        assert executor.is_started is False
        assert "RepeatExecutor loop error" in caplog.text
        assert "loop broke" in caplog.text

        executor.start()
        assert executor.is_started is True
        executor.stop()

    def test_satisfies_scheduled_protocol(self) -> None:
        assert isinstance(RepeatExecutor(AsyncMock(), INTERVAL), IScheduledExecutor)

    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(ExecutorConfigurationError) as exc_info:
            RepeatExecutor(AsyncMock(), 0)
        assert "interval" in exc_info.value.errors
