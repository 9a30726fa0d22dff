"""Interfaces shared by every executor and task handle."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable

from taskcore.errors import Cancelled, Panicked, describe_failure

__all__ = ["Executor", "LocalExecutor", "Task", "LocalTask"]


class Executor(ABC):
    """An executor that runs coroutines on threads of its own."""

    @abstractmethod
    def spawn(self, coro):
        """Schedule ``coro`` and return a :class:`Task` for it."""


class LocalExecutor(ABC):
    """An executor that runs coroutines on the current thread's event loop."""

    @abstractmethod
    def spawn(self, coro):
        """Schedule ``coro`` and return a :class:`LocalTask` for it."""


class Task(Awaitable, ABC):
    """Handle to a task that may run on another thread.

    Awaiting the handle gives the task's value and re-raises whatever the
    task raised; a cancelled task raises :class:`Cancelled`.
    """

    @abstractmethod
    async def result(self):
        """Return the value, raising :class:`Panicked` or :class:`Cancelled`."""

    @abstractmethod
    def cancel(self):
        """Ask the task to stop; cancellation is cooperative."""


class LocalTask(Awaitable, ABC):
    """Handle to a task bound to the event loop it was spawned on."""

    @abstractmethod
    async def result(self):
        """Return the value, raising :class:`Panicked` or :class:`Cancelled`."""

    @abstractmethod
    def cancel(self):
        """Ask the task to stop; cancellation is cooperative."""


async def _join(future, is_cancelled):
    """Wait for ``future`` without cancelling it if the waiter is cancelled."""
    try:
        return await asyncio.shield(future)
    except asyncio.CancelledError:
        if is_cancelled():
            raise Cancelled() from None
        raise


async def _join_result(future, is_cancelled):
    """Like :func:`_join`, with task failures turned into :class:`Panicked`."""
    try:
        return await asyncio.shield(future)
    except asyncio.CancelledError:
        if is_cancelled():
            raise Cancelled() from None
        raise
    except Exception as exc:
        raise Panicked(describe_failure(exc)) from exc