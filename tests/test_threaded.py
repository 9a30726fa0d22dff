import asyncio
import threading

import pytest

from taskcore.errors import Cancelled, Panicked
from taskcore.threaded import ThreadedExecutor


@pytest.fixture
def executor():
    ex = ThreadedExecutor()
    yield ex
    ex.shutdown()


async def _value(value):
    await asyncio.sleep(0)
    return value


async def _fail(message):
    await asyncio.sleep(0)
    raise ValueError(message)


async def _thread_ident():
    return threading.get_ident()


@pytest.mark.asyncio
async def test_await_returns_value(executor):
    task = executor.spawn(_value(42))
    assert await task == 42
    assert task.done()


@pytest.mark.asyncio
async def test_result_returns_value(executor):
    assert await executor.spawn(_value("ok")).result() == "ok"


@pytest.mark.asyncio
async def test_runs_on_background_daemon_thread(executor):
    ident = await executor.spawn(_thread_ident())
    thread = next(t for t in threading.enumerate() if t.ident == ident)
    assert thread.daemon
    assert thread is not threading.current_thread()


@pytest.mark.asyncio
async def test_result_reports_failure(executor):
    with pytest.raises(Panicked) as info:
        await executor.spawn(_fail("broken")).result()
    assert info.value.message == "broken"
    assert isinstance(info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_await_reraises_original(executor):
    with pytest.raises(ValueError, match="broken"):
        await executor.spawn(_fail("broken"))


@pytest.mark.asyncio
async def test_cancel(executor):
    task = executor.spawn(asyncio.sleep(10))
    task.cancel()
    assert task.done()
    with pytest.raises(Cancelled):
        await task.result()
    with pytest.raises(Cancelled):
        await task


@pytest.mark.asyncio
async def test_timeout_leaves_task_running(executor):
    task = executor.spawn(asyncio.sleep(0.1, result=100))
    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(task, timeout=0.01)
    assert await task == 100


@pytest.mark.asyncio
async def test_shutdown_cancels_pending_tasks():
    ex = ThreadedExecutor()
    task = ex.spawn(asyncio.sleep(10))
    ex.shutdown()
    assert task.done()
    with pytest.raises(Cancelled):
        await task.result()


def test_spawn_after_shutdown_fails():
    ex = ThreadedExecutor()
    ex.shutdown()
    ex.shutdown()
    with pytest.raises(RuntimeError):
        ex.spawn(_value(1))


def test_context_manager_shuts_down():
    with ThreadedExecutor() as ex:
        task = ex.spawn(_value(5))
    assert task.done()
    with pytest.raises(RuntimeError):
        ex.spawn(_value(1))