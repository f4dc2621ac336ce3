"""
Terminal operations reducing a sequence to a single result.

Every function takes a sequence, meaning anything with an ``iterator()``
method returning a SeqIterator, and drives one fresh iterator over it.
"""

from typing import Any, Callable, Optional, TypeVar

from lazyseq.errors import EmptySequenceError, require_callable
from lazyseq.iterators.base import SeqIterator
from lazyseq.option import Option
from lazyseq.terminals.numeric import NumericKind, projection

T = TypeVar('T')
U = TypeVar('U')


def _non_empty_iterator(sequence) -> SeqIterator:
    iterator = sequence.iterator()
    if not iterator.has_next():
        raise EmptySequenceError("Empty sequence")
    return iterator


def _optional_iterator(sequence) -> Optional[SeqIterator]:
    iterator = sequence.iterator()
    return iterator if iterator.has_next() else None


def _last(iterator: SeqIterator[T]) -> T:
    last = iterator.next()
    while iterator.has_next():
        last = iterator.next()
    return last


def _reduce(iterator: SeqIterator[T], func: Callable[[T, T], T]) -> T:
    acc = iterator.next()
    while iterator.has_next():
        acc = func(acc, iterator.next())
    return acc


def _combiner(kind: Optional[NumericKind], largest: bool) -> Callable[[Any, Any], Any]:
    if kind is not None:
        return kind.maximum if largest else kind.minimum
    if largest:
        return lambda a, b: b if b > a else a
    return lambda a, b: b if b < a else a


# Element access

def first(sequence) -> T:
    """Return the first element, raising EmptySequenceError if there is none."""
    return _non_empty_iterator(sequence).next()


def first_optional(sequence) -> Option[T]:
    iterator = _optional_iterator(sequence)
    return Option.empty() if iterator is None else Option.of(iterator.next())


def last(sequence) -> T:
    """Scan to the final element, raising EmptySequenceError if there is none."""
    return _last(_non_empty_iterator(sequence))


def last_optional(sequence) -> Option[T]:
    iterator = _optional_iterator(sequence)
    return Option.empty() if iterator is None else Option.of(_last(iterator))


# Accumulation

def fold(sequence, initial: U, func: Callable[[U, T], U]) -> U:
    """
    Left fold starting from initial.

    Example:
        >>> fold(seq([1, 2, 3]), "", lambda acc, x: acc + str(x))
        '123'
    """
    require_callable(func, "func")
    result = initial
    for element in sequence.iterator():
        result = func(result, element)
    return result


def reduce(sequence, func: Callable[[T, T], T]) -> T:
    """Left fold seeded with the first element."""
    require_callable(func, "func")
    return _reduce(_non_empty_iterator(sequence), func)


def reduce_optional(sequence, func: Callable[[T, T], T]) -> Option[T]:
    require_callable(func, "func")
    iterator = _optional_iterator(sequence)
    return Option.empty() if iterator is None else Option.of(_reduce(iterator, func))


# Predicates

def any_match(sequence, predicate: Callable[[T], bool]) -> bool:
    require_callable(predicate, "predicate")
    for element in sequence.iterator():
        if predicate(element):
            return True
    return False


def all_match(sequence, predicate: Callable[[T], bool]) -> bool:
    require_callable(predicate, "predicate")
    for element in sequence.iterator():
        if not predicate(element):
            return False
    return True


def none_match(sequence, predicate: Callable[[T], bool]) -> bool:
    require_callable(predicate, "predicate")
    for element in sequence.iterator():
        if predicate(element):
            return False
    return True


def count(sequence, predicate: Optional[Callable[[T], bool]] = None) -> int:
    """Count elements, or only those matching predicate."""
    if predicate is not None:
        require_callable(predicate, "predicate")

    total = 0
    for element in sequence.iterator():
        if predicate is None or predicate(element):
            total += 1
    return total


# Extremes

def min_of(sequence, mapper: Optional[Callable[[T], Any]] = None,
           kind: Optional[NumericKind] = None):
    """
    Smallest projected value.

    Args:
        sequence: Sequence to scan
        mapper: Projection applied to each element, identity if omitted
        kind: Numeric representation values are coerced to before comparing

    Raises:
        EmptySequenceError: If the sequence has no elements
    """
    project = projection(mapper, kind)
    return _extreme(_non_empty_iterator(sequence), project, _combiner(kind, False))


def min_of_optional(sequence, mapper: Optional[Callable[[T], Any]] = None,
                    kind: Optional[NumericKind] = None) -> Option[Any]:
    project = projection(mapper, kind)
    iterator = _optional_iterator(sequence)
    if iterator is None:
        return Option.empty()
    return Option.of(_extreme(iterator, project, _combiner(kind, False)))


def max_of(sequence, mapper: Optional[Callable[[T], Any]] = None,
           kind: Optional[NumericKind] = None):
    """Largest projected value; see min_of."""
    project = projection(mapper, kind)
    return _extreme(_non_empty_iterator(sequence), project, _combiner(kind, True))


def max_of_optional(sequence, mapper: Optional[Callable[[T], Any]] = None,
                    kind: Optional[NumericKind] = None) -> Option[Any]:
    project = projection(mapper, kind)
    iterator = _optional_iterator(sequence)
    if iterator is None:
        return Option.empty()
    return Option.of(_extreme(iterator, project, _combiner(kind, True)))


def _extreme(iterator: SeqIterator[T], project: Callable[[T], Any],
             combine: Callable[[Any, Any], Any]):
    acc = project(iterator.next())
    while iterator.has_next():
        acc = combine(acc, project(iterator.next()))
    return acc
