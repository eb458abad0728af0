"""Recursive sorting of report tables and their sub-tables."""

import logging
from functools import cmp_to_key
from typing import Hashable, List, Optional, Set, Tuple

from ..core.metrics import MetricMapping
from ..core.table import LABEL_COLUMN, DataTable
from .columns import ColumnResolver
from .comparators import PairComparator, select_comparator
from .values import extract

logger = logging.getLogger(__name__)

ORDER_ASC = "asc"
ORDER_DESC = "desc"


def order_to_sign(order: str) -> int:
    """Return 1 for 'asc', -1 for anything else."""
    return 1 if order == ORDER_ASC else -1


def _is_sortable(table: DataTable) -> bool:
    return table.is_sortable and table.get_row_count() > 0


class RecursiveSorter:
    """
    Sorts a table and, if enabled, every sub-table below it.

    The comparator is chosen once from the first row of the top-level table
    and reused for every sub-table. The sort column is resolved separately
    for each table against that table's own first row, so a sub-table that
    lacks the requested column falls back the same way a top-level table
    does.

    Example:
        sorter = RecursiveSorter("nb_visits", order="desc", recursive=True)
        sorter.sort(table)

    Attributes:
        column: Requested sort column
        sign: 1 for ascending, -1 for descending
        natural_sort: Whether text columns use natural order
        recursive: Whether to enable recursive sort on the top-level table
        label_column: Column used for tiebreaks
    """

    def __init__(
        self,
        column: Hashable,
        order: str = ORDER_DESC,
        natural_sort: bool = True,
        recursive: bool = False,
        mapping: Optional[MetricMapping] = None,
        label_column: Hashable = LABEL_COLUMN,
    ):
        """
        Initialize the sorter.

        Args:
            column: Column to sort by (metric name or metric id)
            order: 'asc' or 'desc'. Anything other than 'asc' sorts descending.
            natural_sort: Use natural order for text columns
            recursive: Also sort sub-tables, recursively
            mapping: Metric name to id mapping used for column fallback
            label_column: Column used as tiebreak for equal numeric values
        """
        self.column = column
        self.sign = order_to_sign(order)
        self.natural_sort = natural_sort
        self.recursive = recursive
        self.label_column = label_column
        self._resolver = ColumnResolver(mapping)

    @property
    def order(self) -> str:
        return ORDER_ASC if self.sign == 1 else ORDER_DESC

    def sort(self, table: DataTable) -> None:
        """
        Sort a table in place.

        No-op for non-sortable tables, empty tables and an empty column.
        The summary row is never compared or moved; when recursing, its
        sub-table is sorted like any other.

        Args:
            table: The table to sort
        """
        if not table.is_sortable:
            logger.debug("Skipping sort of non-sortable %s", type(table).__name__)
            return
        if self.column is None or self.column == "":
            logger.debug("Skipping sort: no column requested")
            return
        if table.get_row_count() == 0:
            return

        if self.recursive:
            table.enable_recursive_sort()

        first_row = table.get_first_row()
        column = self._resolver.resolve(self.column, first_row)
        sample_value, _ = extract(first_row, column, self.label_column)
        comparator = select_comparator(sample_value, self.natural_sort, self.sign)
        logger.debug(
            "Sorting by %r (requested %r) with %s comparator, order=%s",
            column,
            self.column,
            comparator.name,
            self.order,
        )

        # Explicit stack so that deep drill-down trees do not grow the call stack
        stack: List[Tuple[DataTable, Hashable]] = [(table, column)]
        visited: Set[int] = set()
        while stack:
            current, current_column = stack.pop()
            if id(current) in visited:
                continue
            visited.add(id(current))

            self._sort_rows(current, current_column, comparator)

            if not current.is_sort_recursive_enabled():
                continue
            # The summary row is never compared, but its sub-table is sorted
            for row in reversed(current.get_rows_with_summary()):
                subtable = row.get_subtable()
                if subtable is None:
                    continue
                subtable.enable_recursive_sort()
                if not _is_sortable(subtable):
                    continue
                subtable_column = self._resolver.resolve(
                    self.column, subtable.get_first_row()
                )
                stack.append((subtable, subtable_column))

    def _sort_rows(
        self, table: DataTable, column: Hashable, comparator: PairComparator
    ) -> None:
        """Sort one table's regular rows and record the column used."""
        table.set_sorted_by(column)

        entries = [
            (extract(row, column, self.label_column), row) for row in table.get_rows()
        ]
        pair_key = cmp_to_key(comparator)
        entries.sort(key=lambda entry: pair_key(entry[0]))

        table.set_rows(row for _, row in entries)


def sort_table(
    table: DataTable,
    column: Hashable,
    order: str = ORDER_DESC,
    natural_sort: bool = True,
    recursive: bool = False,
    mapping: Optional[MetricMapping] = None,
    label_column: Hashable = LABEL_COLUMN,
) -> None:
    """
    Sort a table in place by a column.

    Args:
        table: The table to sort
        column: Column to sort by (metric name or metric id)
        order: 'asc' or 'desc'
        natural_sort: Use natural order for text columns
        recursive: Also sort every sub-table with the same criteria
        mapping: Metric name to id mapping used for column fallback
        label_column: Column used as tiebreak for equal numeric values

    Example:
        sort_table(countries, "nb_visits", order="desc", recursive=True)
    """
    RecursiveSorter(
        column,
        order=order,
        natural_sort=natural_sort,
        recursive=recursive,
        mapping=mapping,
        label_column=label_column,
    ).sort(table)
