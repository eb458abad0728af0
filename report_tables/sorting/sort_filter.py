"""Sort filter, runnable by name through DataTable.filter('sort', ...)."""

from typing import Hashable, Optional

from ..core.base import BaseFilter
from ..core.metrics import MetricMapping
from ..core.registry import register_filter
from ..core.table import LABEL_COLUMN, DataTable
from .sorter import ORDER_ASC, ORDER_DESC, RecursiveSorter


@register_filter("sort")
class Sort(BaseFilter):
    """
    Sorts a table by the value of a column.

    Example:
        table.filter("sort", "nb_visits", "asc", recursive=True)

        # or, equivalently
        Sort("nb_visits", order="asc", recursive=True).filter(table)
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
        Initialize the filter.

        Args:
            column: Column to sort by (metric name or metric id)
            order: 'asc' or 'desc'. Anything other than 'asc' sorts descending.
            natural_sort: Use natural order for text columns
            recursive: Also sort every sub-table with the same criteria
            mapping: Metric name to id mapping used for column fallback
            label_column: Column used as tiebreak for equal numeric values
        """
        self._column = column
        self._natural_sort = natural_sort
        self._recursive = recursive
        self._mapping = mapping
        self._label_column = label_column
        self.set_order(order)

    def set_order(self, order: str) -> None:
        """
        Update the sort direction.

        Args:
            order: 'asc' or 'desc'
        """
        self._order = ORDER_ASC if order == ORDER_ASC else ORDER_DESC

    @property
    def order(self) -> str:
        return self._order

    @property
    def column(self) -> Hashable:
        return self._column

    def filter(self, table: DataTable) -> None:
        """Sort the table in place."""
        RecursiveSorter(
            self._column,
            order=self._order,
            natural_sort=self._natural_sort,
            recursive=self._recursive,
            mapping=self._mapping,
            label_column=self._label_column,
        ).sort(table)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"column={self._column!r}, "
            f"order='{self._order}', "
            f"natural_sort={self._natural_sort}, "
            f"recursive={self._recursive})"
        )
