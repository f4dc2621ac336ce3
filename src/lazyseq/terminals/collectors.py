"""
Terminal operations packing a sequence into a container.
"""

from typing import FrozenSet, List, Set, Tuple, TypeVar

from lazyseq.errors import require

T = TypeVar('T')
C = TypeVar('C')


def to_collection(sequence, destination: C) -> C:
    """
    Add every element to destination and return it.

    Args:
        sequence: Sequence to drain
        destination: Container with an ``add`` (sets) or ``append``
            (lists, deques) method

    Returns:
        destination itself
    """
    require(destination, "destination")
    add = getattr(destination, 'add', None) or getattr(destination, 'append', None)
    if not callable(add):
        raise TypeError(f"{type(destination).__name__} has neither add() nor append()")

    for element in sequence.iterator():
        add(element)
    return destination


def to_list(sequence) -> List[T]:
    return to_collection(sequence, [])


def to_set(sequence) -> Set[T]:
    return to_collection(sequence, set())


def to_unmodifiable_list(sequence) -> Tuple[T, ...]:
    return tuple(to_list(sequence))


def to_unmodifiable_set(sequence) -> FrozenSet[T]:
    return frozenset(to_set(sequence))
