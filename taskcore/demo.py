"""Example programs spawning tasks on the global executor."""

from __future__ import annotations

import argparse
import asyncio

from taskcore.errors import Cancelled, Panicked
from taskcore.runtime import spawn

__all__ = ["basic", "error_handling", "main"]


async def _hello():
    print("Hello from a spawned task!")
    await asyncio.sleep(0.1)
    return 42


async def _numbered(i):
    print(f"Task {i} starting")
    await asyncio.sleep(0.05 * i)
    print(f"Task {i} completed")
    return i * 10


async def basic():
    """Spawn tasks, await them in order and return their results."""
    result = await spawn(_hello())
    print(f"Task completed with result: {result}")
    results = [result]

    tasks = [spawn(_numbered(i)) for i in range(1, 6)]
    for i, task in enumerate(tasks, start=1):
        value = await task
        print(f"Task {i} result: {value}")
        results.append(value)

    print("All tasks completed!")
    return results


async def _panicking():
    print("This task will panic!")
    await asyncio.sleep(0.1)
    raise RuntimeError("Intentional panic for demonstration")


async def _long_running():
    print("Starting a long-running task...")
    for step in range(1, 11):
        print(f"Working... step {step}/10")
        await asyncio.sleep(0.1)
    print("Task completed!")
    return "Success"


async def _slow():
    print("Starting slow computation...")
    await asyncio.sleep(2)
    print("Slow computation finished!")
    return 100


async def error_handling():
    """Show failure reporting, cancellation and timeouts."""
    try:
        value = await spawn(_panicking()).result()
    except Panicked as error:
        print(f"Task panicked as expected: {error.message}")
    except Cancelled:
        print("Task was cancelled")
    else:
        print(f"Task completed successfully with: {value}")

    to_cancel = spawn(_long_running())
    await asyncio.sleep(0.25)
    print("Cancelling the task before completion")
    to_cancel.cancel()
    print("Task has been cancelled")

    slow = spawn(_slow())
    try:
        result = await asyncio.wait_for(slow, timeout=0.5)
    except asyncio.TimeoutError:
        print("Task did not complete within timeout")
    else:
        print(f"Task completed within timeout: {result}")

    # The slow task keeps running in the background after the timeout.
    await asyncio.sleep(2)
    print("Done with all examples")


def main(argv=None):
    """Run the chosen example, or both."""
    parser = argparse.ArgumentParser(prog="taskcore-demo", description=__doc__)
    parser.add_argument(
        "example",
        nargs="?",
        choices=["basic", "error_handling", "all"],
        default="all",
    )
    args = parser.parse_args(argv)
    if args.example in ("basic", "all"):
        asyncio.run(basic())
    if args.example in ("error_handling", "all"):
        asyncio.run(error_handling())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())