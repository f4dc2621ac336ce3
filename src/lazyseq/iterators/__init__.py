"""Pull-based iterators and the adaptors composing them."""

from lazyseq.iterators.base import (
    SeqIterator,
    IteratorState,
    BufferedIterator,
    EmptyIterator,
    IterableIterator,
    as_seq_iterator,
)
from lazyseq.iterators.adaptors import (
    IndexedValue,
    FilterIterator,
    DistinctIterator,
    FlatMapIterator,
    MapIterator,
    DropIterator,
    TakeIterator,
    IndexingIterator,
)

__all__ = [
    "SeqIterator",
    "IteratorState",
    "BufferedIterator",
    "EmptyIterator",
    "IterableIterator",
    "as_seq_iterator",
    "IndexedValue",
    "FilterIterator",
    "DistinctIterator",
    "FlatMapIterator",
    "MapIterator",
    "DropIterator",
    "TakeIterator",
    "IndexingIterator",
]
