"""Lazy sequences and the functions creating them."""

from lazyseq.sequences.seq import Seq, seq, of, empty
from lazyseq.sequences.once import OnceSeq

__all__ = [
    "Seq",
    "OnceSeq",
    "seq",
    "of",
    "empty",
]
