"""
Adaptors wrapping an upstream iterator into a new lazy iterator.
"""

import logging
from typing import Any, Callable, Iterable, NamedTuple, Set, TypeVar

import psutil

from lazyseq.config import config
from lazyseq.errors import NoSuchElementError, require, require_callable, require_count
from lazyseq.iterators.base import (
    EXHAUSTED, BufferedIterator, EmptyIterator, SeqIterator, as_seq_iterator
)

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class IndexedValue(NamedTuple):
    """An element paired with its upstream position."""
    index: int
    value: Any


class FilterIterator(BufferedIterator[T]):
    """Keep only elements matching predicate."""

    def __init__(self, iterator: SeqIterator[T], predicate: Callable[[T], bool]):
        super().__init__()
        self.iterator = require(iterator, "iterator")
        self.predicate = require_callable(predicate, "predicate")

    def _compute_next(self) -> Any:
        while self.iterator.has_next():
            element = self.iterator.next()
            if self.predicate(element):
                return element
        return EXHAUSTED

    def __repr__(self) -> str:
        return f"FilterIterator({self.iterator!r})"


class DistinctIterator(BufferedIterator[T]):
    """
    Let through the first occurrence of every value.

    The seen-set lives as long as the iterator and grows with the number
    of distinct values. While it grows, system memory is sampled every
    ``config.distinct_check_interval`` insertions and a warning is logged
    the first time usage exceeds ``config.memory_threshold``.
    """

    def __init__(self, iterator: SeqIterator[T]):
        super().__init__()
        self.iterator = require(iterator, "iterator")
        self.seen: Set[T] = set()
        self._warned = False

    def _compute_next(self) -> Any:
        while self.iterator.has_next():
            element = self.iterator.next()
            if element not in self.seen:
                self.seen.add(element)
                if len(self.seen) % config.distinct_check_interval == 0:
                    self._check_memory()
                return element
        return EXHAUSTED

    def _check_memory(self) -> None:
        if self._warned:
            return

        percent = psutil.virtual_memory().percent
        if percent >= config.memory_threshold_percent:
            self._warned = True
            logger.warning(
                f"Memory usage at {percent:.1f}% while distinct() tracks "
                f"{len(self.seen):,} values"
            )

    def __repr__(self) -> str:
        return f"DistinctIterator({self.iterator!r})"


class FlatMapIterator(SeqIterator[U]):
    """Expand each element into a sequence and chain the results."""

    def __init__(self, iterator: SeqIterator[T], func: Callable[[T], Iterable[U]]):
        self.iterator = require(iterator, "iterator")
        self.func = require_callable(func, "func")
        self.inner: SeqIterator[U] = EmptyIterator()

    def has_next(self) -> bool:
        # Empty expansions are skipped until a value turns up
        while True:
            if self.inner.has_next():
                return True
            if not self.iterator.has_next():
                return False
            self.inner = as_seq_iterator(self.func(self.iterator.next()))

    def next(self) -> U:
        if not self.has_next():
            raise NoSuchElementError("FlatMapIterator is exhausted")
        return self.inner.next()

    def __repr__(self) -> str:
        return f"FlatMapIterator({self.iterator!r})"


class MapIterator(SeqIterator[U]):
    """Apply func to each element."""

    def __init__(self, iterator: SeqIterator[T], func: Callable[[T], U]):
        self.iterator = require(iterator, "iterator")
        self.func = require_callable(func, "func")

    def has_next(self) -> bool:
        return self.iterator.has_next()

    def next(self) -> U:
        return self.func(self.iterator.next())

    def __repr__(self) -> str:
        return f"MapIterator({self.iterator!r})"


class DropIterator(SeqIterator[T]):
    """Skip the first count elements."""

    def __init__(self, iterator: SeqIterator[T], count: int):
        self.iterator = require(iterator, "iterator")
        self.count = require_count(count)

    def has_next(self) -> bool:
        self._drop()
        return self.iterator.has_next()

    def next(self) -> T:
        self._drop()
        return self.iterator.next()

    def _drop(self) -> None:
        while self.count > 0 and self.iterator.has_next():
            self.iterator.next()
            self.count -= 1

    def __repr__(self) -> str:
        return f"DropIterator({self.iterator!r}, count={self.count})"


class TakeIterator(SeqIterator[T]):
    """Stop after count elements without pulling upstream any further."""

    def __init__(self, iterator: SeqIterator[T], count: int):
        self.iterator = require(iterator, "iterator")
        self.count = require_count(count)

    def has_next(self) -> bool:
        return self.count > 0 and self.iterator.has_next()

    def next(self) -> T:
        if self.count == 0:
            raise NoSuchElementError("TakeIterator is exhausted")
        # A pull that raises still uses up one of the count
        self.count -= 1
        return self.iterator.next()

    def __repr__(self) -> str:
        return f"TakeIterator({self.iterator!r}, count={self.count})"


class IndexingIterator(SeqIterator[IndexedValue]):
    """Pair each element with its position in the upstream."""

    def __init__(self, iterator: SeqIterator[T]):
        self.iterator = require(iterator, "iterator")
        self.index = 0

    def has_next(self) -> bool:
        return self.iterator.has_next()

    def next(self) -> IndexedValue:
        value = self.iterator.next()
        indexed = IndexedValue(self.index, value)
        self.index += 1
        return indexed

    def __repr__(self) -> str:
        return f"IndexingIterator({self.iterator!r}, index={self.index})"
