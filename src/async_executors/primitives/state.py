"""ExecutionState — run count and outcome history for one command."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .exceptions import ExecutionStateError


@dataclass
class ExecutionState:
    """
    Bookkeeping for every invocation of a single command.

    Owned exclusively by one executor (or loader). ``is_running`` counts
    in-flight invocations, so overlapping runs of the base executor are
    tracked individually. The ``was_*`` flags are monotonic; only
    ``was_last_run_fine`` is overwritten on each settlement.
    """

    is_running: int = 0
    run_count: int = 0
    was_run: bool = False
    was_run_fine: bool = False
    was_run_bad: bool = False
    was_last_run_fine: bool = False

    def mark_started(self) -> None:
        """Record the start of one invocation."""
        self.run_count += 1
        self.is_running += 1
        self.was_run = True

    def mark_settled(self, ok: bool) -> None:
        """Record the settlement of one previously started invocation."""
        if self.is_running <= 0:
            raise ExecutionStateError(
                "Cannot settle an invocation: nothing is running "
                f"(run_count={self.run_count})"
            )
        self.is_running -= 1
        if ok:
            self.was_run_fine = True
            self.was_last_run_fine = True
        else:
            self.was_run_bad = True
            self.was_last_run_fine = False

    def snapshot(self) -> dict[str, Any]:
        """Return all fields as a plain dict."""
        return asdict(self)
