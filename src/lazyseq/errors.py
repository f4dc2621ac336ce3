"""
Exceptions raised by sequence operations.
"""

from typing import Any, Callable


class SeqError(Exception):
    """Base class for all sequence errors."""


class InvalidArgumentError(SeqError, ValueError):
    """An argument has an unacceptable value, e.g. a negative count."""


class MissingArgumentError(SeqError, TypeError):
    """A required argument is None."""


class EmptySequenceError(SeqError, ValueError):
    """A terminal operation needs at least one element but got none."""


class NoSuchElementError(SeqError, LookupError):
    """next() was called on an iterator without remaining elements."""


class AlreadyConsumedError(SeqError, RuntimeError):
    """A single-use sequence was asked for a second iterator."""


def require(value: Any, name: str) -> Any:
    """Return value, or raise MissingArgumentError if it is None."""
    if value is None:
        raise MissingArgumentError(f"{name} is None")
    return value


def require_callable(func: Callable, name: str) -> Callable:
    """Return func if it is callable."""
    require(func, name)
    if not callable(func):
        raise TypeError(f"{name} must be callable, not {type(func).__name__}")
    return func


def require_count(count: int, name: str = "count") -> int:
    """Return count if it is a non-negative integer."""
    require(count, name)
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"{name} must be an integer, not {type(count).__name__}")
    if count < 0:
        raise InvalidArgumentError(f"{name} < 0: {count}")
    return count
