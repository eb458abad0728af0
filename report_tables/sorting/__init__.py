"""Sort engine for report tables."""

from .columns import ColumnResolver
from .comparators import (
    NaturalComparator,
    NumericComparator,
    PairComparator,
    StringComparator,
    casefold_compare,
    natural_compare,
    select_comparator,
)
from .sort_filter import Sort
from .sorter import RecursiveSorter, sort_table
from .values import ValueKind, classify, extract

__all__ = [
    "sort_table",
    "Sort",
    "RecursiveSorter",
    "ColumnResolver",
    "select_comparator",
    "PairComparator",
    "NumericComparator",
    "NaturalComparator",
    "StringComparator",
    "natural_compare",
    "casefold_compare",
    "ValueKind",
    "classify",
    "extract",
]
