"""Executor that runs coroutines on an event loop in a background thread."""

from __future__ import annotations

import asyncio
import threading

from taskcore.base import Executor, Task, _join, _join_result

__all__ = ["ThreadedExecutor", "ThreadedTask"]


class ThreadedTask(Task):
    """Handle to a task running on a :class:`ThreadedExecutor`."""

    def __init__(self, future):
        self._future = future

    async def result(self):
        """Return the value, raising ``Panicked`` or ``Cancelled`` on failure."""
        return await _join_result(asyncio.wrap_future(self._future), self._future.cancelled)

    def cancel(self):
        """Request cancellation of the task."""
        self._future.cancel()

    def done(self):
        """Whether the task has finished, failed or been cancelled."""
        return self._future.done()

    async def _outcome(self):
        return await _join(asyncio.wrap_future(self._future), self._future.cancelled)

    def __await__(self):
        return self._outcome().__await__()


async def _cancel_pending():
    current = asyncio.current_task()
    pending = [task for task in asyncio.all_tasks() if task is not current]
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


class ThreadedExecutor(Executor):
    """Owns an event loop that runs in a daemon thread."""

    def __init__(self):
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="taskcore-executor", daemon=True
        )
        self._thread.start()

    def _run(self):
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def spawn(self, coro):
        """Schedule ``coro`` on the background loop; safe from any thread."""
        with self._lock:
            if self._closed:
                coro.close()
                raise RuntimeError("executor has been shut down")
            future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        return ThreadedTask(future)

    def shutdown(self):
        """Cancel every pending task, stop the loop and join its thread."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        asyncio.run_coroutine_threadsafe(_cancel_pending(), self._loop).result()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.shutdown()