"""
lazyseq: lazy, composable sequences with a pull-based iteration protocol.

Intermediate operations (map, filter, flat_map, distinct, take, drop and
their indexed variants) only describe work. Nothing is computed until a
terminal operation (first, fold, min, to_list, ...) pulls elements, one
at a time, through the chain of adaptors.
"""

from lazyseq.config import SeqConfig, config
from lazyseq.errors import (
    SeqError,
    InvalidArgumentError,
    MissingArgumentError,
    EmptySequenceError,
    NoSuchElementError,
    AlreadyConsumedError,
)
from lazyseq.option import Option
from lazyseq.iterators import SeqIterator, IndexedValue
from lazyseq.terminals import NumericKind, SummaryStatistics
from lazyseq.sequences import Seq, OnceSeq, seq, of, empty

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "SeqConfig",
    "config",
    "SeqError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "EmptySequenceError",
    "NoSuchElementError",
    "AlreadyConsumedError",
    "Option",
    "SeqIterator",
    "IndexedValue",
    "NumericKind",
    "SummaryStatistics",
    "Seq",
    "OnceSeq",
    "seq",
    "of",
    "empty",
]
