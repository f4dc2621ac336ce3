"""
Core pull-based iteration protocol.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, Iterator, TypeVar

from lazyseq.errors import NoSuchElementError, require

T = TypeVar('T')

# Returned by BufferedIterator._compute_next() when nothing is left.
# None is a legitimate element, so it cannot play this role.
EXHAUSTED: Any = object()


class IteratorState(Enum):
    """Status of a buffered iterator."""
    NOT_READY = "not_ready"  # Must pull from upstream to decide
    READY = "ready"  # A value is buffered
    DONE = "done"  # Upstream has nothing more to offer


class SeqIterator(ABC, Generic[T]):
    """
    Two-method pull contract implemented by every source and adaptor.

    ``has_next()`` may be called any number of times without consuming
    anything. ``next()`` consumes one element, implicitly checking
    ``has_next()`` first, and raises NoSuchElementError when none is
    left. The Python iterator protocol is bridged on top so adaptors
    work in ``for`` loops.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Tell whether a following next() call will succeed."""
        pass

    @abstractmethod
    def next(self) -> T:
        """Consume and return the next element."""
        pass

    def __iter__(self) -> 'SeqIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class EmptyIterator(SeqIterator[Any]):
    """Iterator without elements."""

    def has_next(self) -> bool:
        return False

    def next(self) -> Any:
        raise NoSuchElementError("Empty iterator")

    def __repr__(self) -> str:
        return "EmptyIterator()"


class BufferedIterator(SeqIterator[T]):
    """
    Three-state machine shared by adaptors that may skip elements.

    Subclasses implement ``_compute_next()``, returning the next value to
    hand out or ``EXHAUSTED``. It is called at most once per element and
    never again after it returned ``EXHAUSTED``.
    """

    def __init__(self):
        self._state = IteratorState.NOT_READY
        self._next: Any = None

    @property
    def state(self) -> IteratorState:
        return self._state

    @abstractmethod
    def _compute_next(self) -> Any:
        pass

    def has_next(self) -> bool:
        if self._state is IteratorState.NOT_READY:
            value = self._compute_next()
            if value is EXHAUSTED:
                self._state = IteratorState.DONE
                return False
            self._next = value
            self._state = IteratorState.READY
            return True
        return self._state is IteratorState.READY

    def next(self) -> T:
        if not self.has_next():
            raise NoSuchElementError(f"{type(self).__name__} is exhausted")

        result = self._next
        self._next = None
        self._state = IteratorState.NOT_READY
        return result


class IterableIterator(BufferedIterator[T]):
    """Adapt a plain Python iterator to the pull contract."""

    def __init__(self, iterator: Iterator[T]):
        super().__init__()
        self._iterator = require(iterator, "iterator")

    def _compute_next(self) -> Any:
        return next(self._iterator, EXHAUSTED)

    def __repr__(self) -> str:
        return f"IterableIterator({self._iterator!r})"


def as_seq_iterator(source: Any) -> SeqIterator[Any]:
    """
    Obtain a protocol instance over a sequence-like value.

    Args:
        source: A SeqIterator (returned as is), anything with an
            ``iterator()`` method such as a Seq, or a Python iterable

    Returns:
        A SeqIterator positioned at the first element of source
    """
    require(source, "source")
    if isinstance(source, SeqIterator):
        return source

    iterator_method = getattr(source, 'iterator', None)
    if callable(iterator_method):
        return iterator_method()

    if hasattr(source, '__iter__'):
        return IterableIterator(iter(source))

    raise TypeError(f"{type(source).__name__} object is not sequence-like")
