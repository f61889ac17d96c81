"""InfiniteLoader — lazily accumulates pages from a pointer command."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Generic, TypeVar

from ..executors.base import track
from ..options import LoaderOptions
from ..primitives.state import ExecutionState

T = TypeVar("T")

PointerCommand = Callable[[int, int], Awaitable[Sequence[T]]]

logger = logging.getLogger("async_executors.loader")


class InfiniteLoader(Generic[T]):
    """
    Pages through ``command(pointer, per_step)`` one load at a time.

    ``next`` appends the following page and is ignored while a load is in
    flight or once the source is exhausted. ``refresh`` starts over from
    pointer zero and replaces ``items`` when the first page arrives; while
    a load is in flight it is queued in a single slot, so any number of
    overlapping refreshes produce one extra load.

    The source counts as exhausted only when a page is strictly shorter
    than ``per_step``. A full last page leaves the loader unfinished; the
    next load then returns an empty page.
    """

    def __init__(self, command: PointerCommand[T], per_step: int = 20) -> None:
        self._command = command
        self._options = LoaderOptions.build(per_step=per_step)
        self._state = ExecutionState()
        self._items: list[T] = []
        self._pointer = 0
        self._is_finished = False
        self._is_refreshing = False
        self._refresh_pending = False
        # Pagination position to restore if a refresh page fails.
        self._before_refresh: tuple[int, bool] | None = None

    @property
    def items(self) -> list[T]:
        """Loaded elements, in order. Returns a copy."""
        return list(self._items)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def per_step(self) -> int:
        return self._options.per_step

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def is_running(self) -> bool:
        return bool(self._state.is_running)

    @property
    def is_refreshing(self) -> bool:
        """True while a refresh load is in flight or queued."""
        return self._is_refreshing

    @property
    def state(self) -> ExecutionState:
        return self._state

    def next(self) -> asyncio.Future[Sequence[T]] | None:
        """Load the following page, or return ``None`` if ignored."""
        if self.is_running or self._is_finished:
            logger.debug(
                "next() ignored (running=%s, finished=%s)",
                self.is_running,
                self._is_finished,
            )
            return None
        return self._load(refreshing=False)

    def refresh(self) -> asyncio.Future[Sequence[T]] | None:
        """Reload from the start, or queue a reload if one is running.

        Returns the load future, or ``None`` when the refresh was queued.
        """
        if self.is_running:
            self._refresh_pending = True
            self._is_refreshing = True
            logger.debug("refresh() queued behind in-flight load")
            return None
        self._before_refresh = (self._pointer, self._is_finished)
        self._pointer = 0
        self._is_finished = False
        return self._load(refreshing=True)

    def _load(self, *, refreshing: bool) -> asyncio.Future[Sequence[T]]:
        self._is_refreshing = refreshing
        logger.debug(
            "Loading page (pointer=%d, per_step=%d, refreshing=%s)",
            self._pointer,
            self.per_step,
            refreshing,
        )
        future = track(self._state, self._command, self._pointer, self.per_step)
        future.add_done_callback(partial(self._on_page, refreshing))
        return future

    def _on_page(self, refreshing: bool, future: asyncio.Future[Sequence[T]]) -> None:
        if not future.cancelled() and future.exception() is None:
            page = list(future.result())
            if refreshing:
                self._items = page
            else:
                self._items.extend(page)
            self._pointer += len(page)
            self._is_finished = len(page) < self.per_step
        elif refreshing and self._before_refresh is not None:
            # Old items are still shown, so the old position must match them.
            self._pointer, self._is_finished = self._before_refresh
            logger.debug("Refresh failed, kept pointer=%d", self._pointer)
        else:
            logger.debug("Page load failed at pointer=%d", self._pointer)
        if refreshing:
            self._before_refresh = None

        if self._refresh_pending:
            self._refresh_pending = False
            self.refresh()
        else:
            self._is_refreshing = False
