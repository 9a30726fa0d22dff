"""The process-wide executor and the :func:`spawn` shortcut."""

from __future__ import annotations

import threading

from taskcore.threaded import ThreadedExecutor

__all__ = ["global_executor", "spawn"]

_executor = None
_executor_lock = threading.Lock()


def global_executor():
    """Return the shared executor, creating it on first use."""
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadedExecutor()
        return _executor


def spawn(coro):
    """Spawn ``coro`` on the global executor and return its task handle."""
    return global_executor().spawn(coro)