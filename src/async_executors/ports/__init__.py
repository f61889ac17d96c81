"""Ports — protocol interfaces for executors."""

from __future__ import annotations

from .executor import Command, IExecutor, IScheduledExecutor

__all__ = [
    "Command",
    "IExecutor",
    "IScheduledExecutor",
]
