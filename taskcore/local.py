"""Executor bound to an asyncio event loop on the current thread."""

from __future__ import annotations

import asyncio

from taskcore.base import LocalExecutor, LocalTask, _join, _join_result

__all__ = ["AsyncioExecutor", "AsyncioTask"]


class AsyncioTask(LocalTask):
    """Handle to a task running on an asyncio event loop."""

    def __init__(self, future):
        self._future = future

    async def result(self):
        """Return the value, raising ``Panicked`` or ``Cancelled`` on failure."""
        return await _join_result(self._future, self._future.cancelled)

    def cancel(self):
        """Request cancellation of the task."""
        self._future.cancel()

    def done(self):
        """Whether the task has finished, failed or been cancelled."""
        return self._future.done()

    def __await__(self):
        return _join(self._future, self._future.cancelled).__await__()


class AsyncioExecutor(LocalExecutor):
    """Spawns coroutines on a given loop, or on the running loop."""

    def __init__(self, loop=None):
        self._loop = loop
        self._tasks = set()

    def spawn(self, coro):
        """Schedule ``coro`` and return an :class:`AsyncioTask` for it."""
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                coro.close()
                raise
        task = loop.create_task(coro)
        # Dropping the handle detaches the task; keep it alive until it ends.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return AsyncioTask(task)