"""Errors reported by spawned tasks."""

from __future__ import annotations

__all__ = ["TaskError", "Panicked", "Cancelled", "describe_failure"]

_GENERIC_FAILURE = "Task panicked"


class TaskError(Exception):
    """Base class for the ways a spawned task can fail."""


class Panicked(TaskError):
    """The task raised an exception while it ran."""

    def __init__(self, message):
        super().__init__(message)
        self.message = str(message)

    def __str__(self):
        return f"Task panicked: {self.message}"

    def __repr__(self):
        return f"Panicked({self.message!r})"

    def __eq__(self, other):
        if not isinstance(other, Panicked):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash((Panicked, self.message))


class Cancelled(TaskError):
    """The task was cancelled before it completed."""

    def __init__(self):
        super().__init__()

    def __str__(self):
        return "Task was cancelled"

    def __repr__(self):
        return "Cancelled()"

    def __eq__(self, other):
        if not isinstance(other, Cancelled):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(Cancelled)


def describe_failure(error):
    """Return a readable message for whatever a failed task raised."""
    if isinstance(error, str):
        return error
    if isinstance(error, BaseException):
        text = str(error)
        if text:
            return text
    return _GENERIC_FAILURE