"""Terminal operations driving a sequence to a final result."""

from lazyseq.terminals.reducers import (
    first,
    first_optional,
    last,
    last_optional,
    fold,
    reduce,
    reduce_optional,
    any_match,
    all_match,
    none_match,
    count,
    min_of,
    min_of_optional,
    max_of,
    max_of_optional,
)
from lazyseq.terminals.numeric import (
    NumericKind,
    SummaryStatistics,
    sum_of,
    average_of,
    statistics_of,
)
from lazyseq.terminals.collectors import (
    to_collection,
    to_list,
    to_set,
    to_unmodifiable_list,
    to_unmodifiable_set,
)

__all__ = [
    "first",
    "first_optional",
    "last",
    "last_optional",
    "fold",
    "reduce",
    "reduce_optional",
    "any_match",
    "all_match",
    "none_match",
    "count",
    "min_of",
    "min_of_optional",
    "max_of",
    "max_of_optional",
    "NumericKind",
    "SummaryStatistics",
    "sum_of",
    "average_of",
    "statistics_of",
    "to_collection",
    "to_list",
    "to_set",
    "to_unmodifiable_list",
    "to_unmodifiable_set",
]
