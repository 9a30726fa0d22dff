import asyncio

import pytest

from taskcore.base import Executor, LocalExecutor, LocalTask, Task
from taskcore.local import AsyncioExecutor


class _Wrapping(Executor):
    def __init__(self, inner):
        self.inner = inner

    def spawn(self, coro):
        return self.inner.spawn(coro)


async def _value(value):
    await asyncio.sleep(0)
    return value


def test_executor_requires_spawn():
    with pytest.raises(TypeError, match="spawn"):
        Executor()


def test_local_executor_requires_spawn():
    with pytest.raises(TypeError, match="spawn"):
        LocalExecutor()


def test_task_requires_await():
    with pytest.raises(TypeError, match="__await__"):
        Task()


def test_local_task_requires_cancel():
    with pytest.raises(TypeError, match="cancel"):
        LocalTask()


@pytest.mark.asyncio
async def test_concrete_subclass_is_usable():
    executor = _Wrapping(AsyncioExecutor())
    task = executor.spawn(_value("ready"))
    assert await task == "ready"
    assert await task.result() == "ready"
    assert task.done()


@pytest.mark.asyncio
async def test_asyncio_executor_fits_local_interfaces():
    executor = AsyncioExecutor()
    task = executor.spawn(_value(None))
    assert isinstance(executor, LocalExecutor)
    assert isinstance(task, LocalTask)
    assert await task is None