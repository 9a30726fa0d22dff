"""Spawn coroutines on interchangeable executors and await their results."""

__version__ = "0.1.0"
__all__ = ["base", "demo", "errors", "local", "runtime", "threaded"]