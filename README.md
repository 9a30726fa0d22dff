# taskcore

One interface for spawning coroutines and handling what comes back, whichever
event loop runs them.

The interfaces live in `taskcore.base`:

- `Executor` / `Task`: spawn onto an executor that runs work on another thread.
- `LocalExecutor` / `LocalTask`: spawn onto an event loop on the current thread.

Two executors ship with the package:

- `taskcore.local.AsyncioExecutor(loop=None)` creates tasks on the given asyncio
  loop, or on the running loop when none is given. Spawning with no loop given and
  no loop running raises `RuntimeError` (the coroutine is closed).
- `taskcore.threaded.ThreadedExecutor()` starts its own event loop in a daemon
  thread. `spawn` may be called from any thread. `shutdown()` cancels every
  pending task, stops the loop and joins the thread; it is also called when the
  executor is used as a context manager. Spawning after shutdown raises
  `RuntimeError`.

## Installing

```
pip install taskcore
```

## Spawning tasks

`taskcore.runtime.spawn(coro)` hands a coroutine to a shared `ThreadedExecutor`
that is created on first use (see `global_executor()`), and returns a task you
can await:

```python
import asyncio
from taskcore.runtime import spawn

async def work():
    await asyncio.sleep(0.1)
    return 42

async def main():
    task = spawn(work())
    print(await task)  # 42

asyncio.run(main())
```

Awaiting a task directly gives its value and re-raises whatever the coroutine
raised; a cancelled task raises `taskcore.errors.Cancelled`. Cancelling the code
that awaits a task does not cancel the task itself.

To get failures in one form, await `task.result()`. It returns the value, or
raises one of these:

- `taskcore.errors.Panicked`: the coroutine raised an exception. `message` holds
  the exception's text (or `"Task panicked"` when it has none), and `str()` gives
  `"Task panicked: <message>"`.
- `taskcore.errors.Cancelled`: the task was cancelled; `str()` gives
  `"Task was cancelled"`.

Both derive from `taskcore.errors.TaskError`, and compare equal to errors of the
same kind (and, for `Panicked`, the same message).

```python
from taskcore.errors import Cancelled, Panicked

try:
    value = await task.result()
except Panicked as failure:
    print(failure.message)
except Cancelled:
    print("cancelled")
```

`taskcore.errors.describe_failure(error)` turns a string or an exception into a
readable message: a string is returned as it is, an exception gives its text,
and anything else, or an exception with no text, gives `"Task panicked"`.

`task.cancel()` asks the task to stop; cancellation is cooperative and takes
effect at the coroutine's next suspension point. A task that has already finished
is left as it is. `task.done()` tells whether the task has finished, failed or
been cancelled.

## Using an executor of your own

```python
from taskcore.threaded import ThreadedExecutor

async def main():
    with ThreadedExecutor() as executor:
        task = executor.spawn(work())
        value = await task
```

```python
import asyncio
from taskcore.local import AsyncioExecutor

async def main():
    executor = AsyncioExecutor(asyncio.get_running_loop())
    print(await executor.spawn(work()))
```

## Demo

The package comes with a short demo. It spawns a few tasks and awaits them in
order, then shows a failing task, cancellation and a timeout:

```
taskcore-demo                  # both examples
taskcore-demo basic
taskcore-demo error_handling
```

## Limits

- Each `ThreadedExecutor` runs all of its tasks on one event loop in one thread;
  there is no pool of worker threads.
- The global executor is always a `ThreadedExecutor`; there is no setting to
  choose another one, and it is never shut down (its thread is a daemon thread).