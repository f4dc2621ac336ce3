"""
Single-consumption guard for sequences that cannot be restarted.
"""

import logging
import threading
from typing import Optional, TypeVar

from lazyseq.errors import AlreadyConsumedError, require
from lazyseq.iterators import SeqIterator
from lazyseq.sequences.seq import Seq

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OnceSeq(Seq[T]):
    """
    A sequence that hands out at most one iterator.

    The wrapped sequence is released on the first ``iterator()`` call.
    The exchange happens under a lock, so when several threads race for
    the first iterator exactly one of them gets it. Wrapping a sequence that
    is already guarded returns it unchanged.
    """

    def __new__(cls, sequence: Seq[T]):
        if isinstance(sequence, OnceSeq):
            return sequence
        return super().__new__(cls)

    def __init__(self, sequence: Seq[T]):
        if sequence is self:
            return
        require(sequence, "sequence")
        super().__init__(self._take)
        self._sequence: Optional[Seq[T]] = sequence
        self._lock = threading.Lock()

    def _take(self) -> SeqIterator[T]:
        with self._lock:
            sequence, self._sequence = self._sequence, None

        if sequence is None:
            logger.debug(f"Rejected second iteration of {self!r}")
            raise AlreadyConsumedError("Sequence can only be iterated once")
        logger.debug("Handing out single-use iterator")
        return sequence.iterator()

    @property
    def consumed(self) -> bool:
        return self._sequence is None

    def __repr__(self) -> str:
        state = "consumed" if self._sequence is None else repr(self._sequence)
        return f"OnceSeq({state})"
