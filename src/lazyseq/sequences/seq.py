"""
Lazy, reusable sequences.
"""

import logging
from collections.abc import Iterator as IteratorABC
from typing import (
    Any, Callable, FrozenSet, Iterable, Iterator, List, Optional,
    Set, Tuple, TypeVar, Union
)

from lazyseq import terminals
from lazyseq.config import config
from lazyseq.errors import require, require_callable, require_count
from lazyseq.iterators import (
    DistinctIterator, DropIterator, EmptyIterator, FilterIterator,
    FlatMapIterator, IndexedValue, IndexingIterator, IterableIterator,
    MapIterator, SeqIterator, TakeIterator, as_seq_iterator
)
from lazyseq.option import Option
from lazyseq.terminals import NumericKind, SummaryStatistics

T = TypeVar('T')
U = TypeVar('U')
C = TypeVar('C')

logger = logging.getLogger(__name__)


class _AdaptorFactory:
    """Produce an adaptor over a fresh iterator of the upstream sequence."""

    def __init__(self, upstream: 'Seq', adaptor: Callable[..., SeqIterator], args: Tuple):
        self.upstream = upstream
        self.adaptor = adaptor
        self.args = args

    def __call__(self) -> SeqIterator:
        return self.adaptor(self.upstream.iterator(), *self.args)

    def __repr__(self) -> str:
        return f"{self.adaptor.__name__} <- {self.upstream!r}"


class _IterableFactory:
    """Iterate an existing collection again on every call, without copying it."""

    def __init__(self, iterable: Iterable):
        self.iterable = iterable

    def __call__(self) -> SeqIterator:
        return IterableIterator(iter(self.iterable))

    def __repr__(self) -> str:
        return f"{type(self.iterable).__name__}@{id(self.iterable):x}"


class _SortedFactory:
    """Materialize and sort the upstream each time an iterator is requested."""

    def __init__(self, upstream: 'Seq', key: Optional[Callable], reverse: bool):
        self.upstream = upstream
        self.key = key
        self.reverse = reverse

    def __call__(self) -> SeqIterator:
        items = self.upstream.to_list()
        logger.debug(f"Sorting {len(items):,} materialized elements")
        items.sort(key=self.key, reverse=self.reverse)
        return IterableIterator(iter(items))

    def __repr__(self) -> str:
        return f"sorted <- {self.upstream!r}"


class Seq(Iterable[T]):
    """
    A lazy sequence: a factory of SeqIterator instances.

    Intermediate operations return a new Seq wrapping this one and do no
    work. Terminal operations request an iterator and pull from it. A Seq
    can be iterated any number of times unless it is single-use (see
    ``once()``).
    """

    def __init__(self, factory: Callable[[], Union[SeqIterator[T], Iterator[T]]]):
        """
        Initialize sequence.

        Args:
            factory: Zero-argument callable returning a SeqIterator or a
                Python iterator
        """
        self._factory = require_callable(factory, "factory")

    def iterator(self) -> SeqIterator[T]:
        """Create a new iterator positioned at the first element."""
        iterator = as_seq_iterator(self._factory())
        if config.trace_iterators:
            logger.debug(f"Created {iterator!r}")
        return iterator

    def __iter__(self) -> SeqIterator[T]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory!r})"

    def _chain(self, adaptor: Callable[..., SeqIterator], *args) -> 'Seq':
        return Seq(_AdaptorFactory(self, adaptor, args))

    # Intermediate operations

    def map(self, func: Callable[[T], U]) -> 'Seq[U]':
        """Apply function to each element."""
        require_callable(func, "func")
        return self._chain(MapIterator, func)

    def filter(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        """Keep only elements matching predicate."""
        require_callable(predicate, "predicate")
        return self._chain(FilterIterator, predicate)

    def flat_map(self, func: Callable[[T], Iterable[U]]) -> 'Seq[U]':
        """
        Map each element to a sequence and concatenate the results.

        func may return a Seq, a SeqIterator or any Python iterable.
        """
        require_callable(func, "func")
        return self._chain(FlatMapIterator, func)

    def distinct(self) -> 'Seq[T]':
        """Remove duplicate elements, keeping first occurrences in order."""
        return self._chain(DistinctIterator)

    def drop(self, count: int) -> 'Seq[T]':
        """Skip first count elements."""
        require_count(count)
        return self._chain(DropIterator, count)

    def take(self, count: int) -> 'Seq[T]':
        """Take first count elements."""
        require_count(count)
        return self._chain(TakeIterator, count)

    def with_index(self) -> 'Seq[IndexedValue]':
        """Pair each element with its position, counted per iterator."""
        return self._chain(IndexingIterator)

    def map_indexed(self, func: Callable[[int, T], U]) -> 'Seq[U]':
        require_callable(func, "func")
        return self.with_index().map(lambda item: func(item.index, item.value))

    def filter_indexed(self, predicate: Callable[[int, T], bool]) -> 'Seq[T]':
        """Keep elements for which predicate(index, element) holds."""
        require_callable(predicate, "predicate")
        return (self.with_index()
                .filter(lambda item: predicate(item.index, item.value))
                .map(lambda item: item.value))

    def flat_map_indexed(self, func: Callable[[int, T], Iterable[U]]) -> 'Seq[U]':
        require_callable(func, "func")
        return self.with_index().flat_map(lambda item: func(item.index, item.value))

    def on_each(self, action: Callable[[T], Any]) -> 'Seq[T]':
        """Call action on each element as it passes through."""
        require_callable(action, "action")

        def peek(element):
            action(element)
            return element

        return self.map(peek)

    def on_each_indexed(self, action: Callable[[int, T], Any]) -> 'Seq[T]':
        require_callable(action, "action")

        def peek(item):
            action(item.index, item.value)
            return item.value

        return self.with_index().map(peek)

    def sorted(self, key: Optional[Callable[[T], Any]] = None,
               reverse: bool = False) -> 'Seq[T]':
        """
        Sort elements.

        Sorting is deferred until iteration, but then buffers the whole
        upstream in memory.
        """
        if key is not None:
            require_callable(key, "key")
        return Seq(_SortedFactory(self, key, reverse))

    def once(self) -> 'Seq[T]':
        """Return a view of this sequence that can be iterated only once."""
        from lazyseq.sequences.once import OnceSeq

        return OnceSeq(self)

    # Terminal operations

    def first(self) -> T:
        return terminals.first(self)

    def first_optional(self) -> Option[T]:
        return terminals.first_optional(self)

    def last(self) -> T:
        return terminals.last(self)

    def last_optional(self) -> Option[T]:
        return terminals.last_optional(self)

    def fold(self, initial: U, func: Callable[[U, T], U]) -> U:
        return terminals.fold(self, initial, func)

    def reduce(self, func: Callable[[T, T], T]) -> T:
        return terminals.reduce(self, func)

    def reduce_optional(self, func: Callable[[T, T], T]) -> Option[T]:
        return terminals.reduce_optional(self, func)

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return terminals.any_match(self, predicate)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return terminals.all_match(self, predicate)

    def none(self, predicate: Callable[[T], bool]) -> bool:
        return terminals.none_match(self, predicate)

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        return terminals.count(self, predicate)

    def min(self, mapper: Optional[Callable[[T], Any]] = None,
            kind: Optional[NumericKind] = None):
        return terminals.min_of(self, mapper, kind)

    def min_optional(self, mapper: Optional[Callable[[T], Any]] = None,
                     kind: Optional[NumericKind] = None) -> Option[Any]:
        return terminals.min_of_optional(self, mapper, kind)

    def max(self, mapper: Optional[Callable[[T], Any]] = None,
            kind: Optional[NumericKind] = None):
        return terminals.max_of(self, mapper, kind)

    def max_optional(self, mapper: Optional[Callable[[T], Any]] = None,
                     kind: Optional[NumericKind] = None) -> Option[Any]:
        return terminals.max_of_optional(self, mapper, kind)

    def sum(self, mapper: Optional[Callable[[T], Any]] = None,
            kind: Optional[NumericKind] = None):
        return terminals.sum_of(self, mapper, kind)

    def average(self, mapper: Optional[Callable[[T], Any]] = None,
                kind: Optional[NumericKind] = None) -> float:
        return terminals.average_of(self, mapper, kind)

    def statistics(self, mapper: Optional[Callable[[T], Any]] = None,
                   kind: Optional[NumericKind] = None) -> SummaryStatistics:
        return terminals.statistics_of(self, mapper, kind)

    def foreach(self, func: Callable[[T], None]) -> None:
        """Apply function to each element."""
        require_callable(func, "func")
        for element in self:
            func(element)

    def to_collection(self, destination: C) -> C:
        return terminals.to_collection(self, destination)

    def to_list(self) -> List[T]:
        return terminals.to_list(self)

    def to_set(self) -> Set[T]:
        return terminals.to_set(self)

    def to_unmodifiable_list(self) -> Tuple[T, ...]:
        return terminals.to_unmodifiable_list(self)

    def to_unmodifiable_set(self) -> FrozenSet[T]:
        return terminals.to_unmodifiable_set(self)


# Factory functions

def seq(source: Union['Seq[T]', SeqIterator[T], Iterator[T], Iterable[T]]) -> Seq[T]:
    """
    Create a sequence over an existing source.

    Collections are wrapped without copying and re-iterated for every
    iterator request. Iterators (Python or SeqIterator) cannot be
    restarted, so the resulting sequence is single-use.

    Example:
        >>> seq(["one", "two", "three", "four"]).drop(1).take(2).to_list()
        ['two', 'three']
    """
    require(source, "source")
    if isinstance(source, Seq):
        return source

    if isinstance(source, (SeqIterator, IteratorABC)):
        return Seq(lambda: source).once()

    if hasattr(source, '__iter__'):
        return Seq(_IterableFactory(source))

    raise TypeError(f"Cannot create a sequence from {type(source).__name__}")


def of(*values: T) -> Seq[T]:
    """Create a sequence over the given values."""
    return seq(values)


def empty() -> Seq[Any]:
    """Create a sequence without elements."""
    return Seq(EmptyIterator)
