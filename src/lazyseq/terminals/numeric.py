"""
Numeric projections: representations, sums, averages and statistics.
"""

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from lazyseq.errors import require_callable

T = TypeVar('T')


class NumericKind(Enum):
    """Numeric representation a projection is evaluated in."""
    INT = "int"  # 32-bit signed integer
    LONG = "long"  # 64-bit signed integer
    FLOAT = "float"  # IEEE 754 double

    @property
    def bits(self) -> Optional[int]:
        return {NumericKind.INT: 32, NumericKind.LONG: 64}.get(self)

    @property
    def zero(self):
        return 0.0 if self is NumericKind.FLOAT else 0

    @property
    def lowest(self):
        if self is NumericKind.FLOAT:
            return -math.inf
        return -(1 << (self.bits - 1))

    @property
    def highest(self):
        if self is NumericKind.FLOAT:
            return math.inf
        return (1 << (self.bits - 1)) - 1

    def coerce(self, value: Any):
        """
        Convert value to this representation.

        Integer kinds refuse non-integral values with TypeError and values
        outside their range with OverflowError.
        """
        if self is NumericKind.FLOAT:
            return float(value)

        number = operator.index(value)
        if not self.lowest <= number <= self.highest:
            raise OverflowError(f"{number} does not fit in {self.bits} bits")
        return number

    def minimum(self, a, b):
        if self is NumericKind.FLOAT and (math.isnan(a) or math.isnan(b)):
            return math.nan
        return b if b < a else a

    def maximum(self, a, b):
        if self is NumericKind.FLOAT and (math.isnan(a) or math.isnan(b)):
            return math.nan
        return b if b > a else a


def projection(mapper: Optional[Callable[[T], Any]] = None,
               kind: Optional[NumericKind] = None) -> Callable[[T], Any]:
    """Build the element -> value function used by numeric terminals."""
    if mapper is not None:
        require_callable(mapper, "mapper")
    if kind is not None and not isinstance(kind, NumericKind):
        raise TypeError(f"kind must be a NumericKind, not {type(kind).__name__}")

    if mapper is None and kind is None:
        return lambda element: element
    if kind is None:
        return mapper
    if mapper is None:
        return kind.coerce
    return lambda element: kind.coerce(mapper(element))


@dataclass
class SummaryStatistics:
    """Count, sum, minimum and maximum of a numeric projection."""
    count: int = 0
    sum: Any = 0
    minimum: Any = math.inf
    maximum: Any = -math.inf

    def accept(self, value: Any) -> None:
        """Record one value."""
        self.count += 1
        self.sum += value
        if value < self.minimum:
            self.minimum = value
        if value > self.maximum:
            self.maximum = value

    @property
    def average(self) -> float:
        return self.sum / self.count if self.count else 0.0


def sum_of(sequence, mapper: Optional[Callable[[T], Any]] = None,
           kind: Optional[NumericKind] = None):
    """
    Sum the projected elements; zero for an empty sequence.

    With an integer kind the total must fit the kind as well, otherwise
    OverflowError is raised.
    """
    project = projection(mapper, kind)
    total = kind.zero if kind is not None else 0
    for element in sequence.iterator():
        total += project(element)
    return kind.coerce(total) if kind is not None else total


def average_of(sequence, mapper: Optional[Callable[[T], Any]] = None,
               kind: Optional[NumericKind] = None) -> float:
    """Arithmetic mean of the projected elements, NaN for an empty sequence."""
    project = projection(mapper, kind)
    count = 0
    total = 0.0
    for element in sequence.iterator():
        total += project(element)
        count += 1
    return total / count if count else math.nan


def statistics_of(sequence, mapper: Optional[Callable[[T], Any]] = None,
                  kind: Optional[NumericKind] = None) -> SummaryStatistics:
    """
    Collect summary statistics in a single pass.

    An empty run reports the highest value of the kind as its minimum and
    the lowest as its maximum; without a kind these are +inf and -inf.
    """
    project = projection(mapper, kind)
    if kind is None:
        statistics = SummaryStatistics()
    else:
        statistics = SummaryStatistics(sum=kind.zero, minimum=kind.highest,
                                       maximum=kind.lowest)
    for element in sequence.iterator():
        statistics.accept(project(element))
    if kind is not None:
        statistics.sum = kind.coerce(statistics.sum)
    return statistics
