"""Report table and row data model.

A DataTable is an ordered list of Rows. Each Row maps column keys (metric
names or integer metric ids) to values and may own one sub-table holding a
drill-down breakdown of that row (e.g. cities of a country).
"""

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Type,
    Union,
)

if TYPE_CHECKING:
    from .base import BaseFilter

# Reserved row id for the summary row ("Others") of a table
SUMMARY_ROW_ID = -1

LABEL_COLUMN = "label"


class _Missing:
    """Sentinel returned for columns a row does not have."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Row:
    """
    One record of a report table.

    Attributes:
        _columns: Dict mapping column keys to values
        _subtable: Owned drill-down table, or None
    """

    def __init__(
        self,
        columns: Optional[Dict[Hashable, Any]] = None,
        subtable: Optional["DataTable"] = None,
    ):
        """
        Initialize the row.

        Args:
            columns: Mapping of column keys to values. Keys are metric names
                ('nb_visits', 'label') or integer metric ids.
            subtable: Optional sub-table owned by this row
        """
        self._columns: Dict[Hashable, Any] = dict(columns or {})
        self._subtable: Optional["DataTable"] = None
        if subtable is not None:
            self.set_subtable(subtable)

    def get_column(self, key: Hashable) -> Any:
        """
        Get the value of a column.

        Args:
            key: Column name or metric id

        Returns:
            The value, or MISSING if the row has no such column
        """
        return self._columns.get(key, MISSING)

    def has_column(self, key: Hashable) -> bool:
        """Check if the row has a column (even one holding None)."""
        return key in self._columns

    def set_column(self, key: Hashable, value: Any) -> None:
        self._columns[key] = value

    def delete_column(self, key: Hashable) -> bool:
        """
        Remove a column.

        Returns:
            True if the column existed, False otherwise
        """
        return self._columns.pop(key, MISSING) is not MISSING

    def get_columns(self) -> Dict[Hashable, Any]:
        """Return a copy of the row's columns."""
        return dict(self._columns)

    def get_subtable(self) -> Optional["DataTable"]:
        return self._subtable

    def set_subtable(self, subtable: "DataTable") -> None:
        """
        Attach a sub-table to this row.

        A sub-table has exactly one owner. Any sub-table previously owned by
        this row is released.

        Args:
            subtable: The table to own

        Raises:
            ValueError: If the table is already owned by another row
        """
        owner = subtable._owner
        if owner is not None and owner is not self:
            raise ValueError(
                "Sub-table is already owned by another row; "
                "remove it from that row first"
            )
        if self._subtable is not None and self._subtable is not subtable:
            self._subtable._owner = None
        subtable._owner = self
        self._subtable = subtable

    def remove_subtable(self) -> Optional["DataTable"]:
        """
        Detach and return the owned sub-table.

        Returns:
            The released sub-table, or None if the row had none
        """
        subtable = self._subtable
        if subtable is not None:
            subtable._owner = None
        self._subtable = None
        return subtable

    def is_summary_row(self) -> bool:
        return False

    def __repr__(self) -> str:
        subtable = "" if self._subtable is None else f", subtable={len(self._subtable)} rows"
        return f"{self.__class__.__name__}({self._columns}{subtable})"


class DataTableSummaryRow(Row):
    """Summary row aggregating rows truncated from a table ('Others')."""

    def is_summary_row(self) -> bool:
        return True


class DataTable:
    """
    Ordered collection of report rows.

    The summary row is stored apart from the regular rows: it is never part
    of get_rows(), is never reordered by sorting and survives set_rows().

    Attributes:
        _rows: Regular rows in current order
        _summary_row: Row registered under SUMMARY_ROW_ID, or None
        _sort_recursive: Whether sorting should descend into sub-tables
        _sorted_by: Column the table was last sorted by
        _owner: Row owning this table when it is a sub-table
    """

    is_sortable: bool = True

    def __init__(self, rows: Optional[Iterable[Row]] = None):
        self._rows: List[Row] = []
        self._summary_row: Optional[Row] = None
        self._sort_recursive = False
        self._sorted_by: Optional[Hashable] = None
        self._owner: Optional[Row] = None
        if rows is not None:
            self.set_rows(rows)

    @classmethod
    def from_records(
        cls, records: Iterable[Dict[Hashable, Any]]
    ) -> "DataTable":
        """Build a table with one row per column dict."""
        return cls(Row(columns) for columns in records)

    def get_rows(self) -> List[Row]:
        """Return the regular rows (summary row excluded) in current order."""
        return list(self._rows)

    def get_rows_with_summary(self) -> List[Row]:
        """Return the regular rows followed by the summary row, if any."""
        rows = list(self._rows)
        if self._summary_row is not None:
            rows.append(self._summary_row)
        return rows

    def set_rows(self, rows: Iterable[Row]) -> None:
        """
        Replace the regular rows.

        The summary row is left untouched, unless the sequence contains a
        summary row: that row replaces it and is kept out of the regular rows.

        Args:
            rows: New row sequence
        """
        regular: List[Row] = []
        for row in rows:
            if row.is_summary_row():
                self._summary_row = row
            else:
                regular.append(row)
        self._rows = regular

    def add_row(self, row: Row) -> Row:
        """Append a regular row. Summary rows are registered as the summary row."""
        if row.is_summary_row():
            return self.add_summary_row(row)
        self._rows.append(row)
        return row

    def add_row_from_columns(self, columns: Dict[Hashable, Any]) -> Row:
        return self.add_row(Row(columns))

    def add_summary_row(self, row: Row) -> Row:
        """Register the summary row, replacing any existing one."""
        self._summary_row = row
        return row

    def get_summary_row(self) -> Optional[Row]:
        return self._summary_row

    def get_row_from_id(self, row_id: int) -> Optional[Row]:
        """
        Get a row by id.

        Regular rows are identified by their position; SUMMARY_ROW_ID
        returns the summary row.

        Args:
            row_id: Row position or SUMMARY_ROW_ID

        Returns:
            The row, or None if no row has that id
        """
        if row_id == SUMMARY_ROW_ID:
            return self._summary_row
        if 0 <= row_id < len(self._rows):
            return self._rows[row_id]
        return None

    def get_first_row(self) -> Optional[Row]:
        """Return the first regular row, or None if the table is empty."""
        return self._rows[0] if self._rows else None

    def get_row_count(self) -> int:
        """Return the number of regular rows."""
        return len(self._rows)

    def enable_recursive_sort(self) -> None:
        self._sort_recursive = True

    def is_sort_recursive_enabled(self) -> bool:
        return self._sort_recursive

    def set_sorted_by(self, column: Hashable) -> None:
        self._sorted_by = column

    def get_sorted_by(self) -> Optional[Hashable]:
        """Return the column this table was last sorted by, if any."""
        return self._sorted_by

    def get_column(self, key: Hashable) -> List[Any]:
        """Return a column's values across the regular rows (MISSING if absent)."""
        return [row.get_column(key) for row in self._rows]

    def filter(
        self,
        filter_name: Union[str, Type["BaseFilter"]],
        *args: Any,
        **kwargs: Any,
    ) -> None:
        """
        Run a filter on this table.

        Args:
            filter_name: Registered filter name (e.g. 'sort') or filter class
            *args: Positional arguments for the filter constructor
            **kwargs: Keyword arguments for the filter constructor

        Example:
            table.filter("sort", "nb_visits", "asc", recursive=True)
        """
        from .registry import create_filter

        create_filter(filter_name, *args, **kwargs).filter(self)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(list(self._rows))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"rows={len(self._rows)}, "
            f"summary_row={self._summary_row is not None}, "
            f"sorted_by={self._sorted_by!r})"
        )


class SimpleDataTable(DataTable):
    """
    Table holding a single row of metrics (e.g. a site-wide total).

    Simple tables have no meaningful order; sort calls are no-ops.
    """

    is_sortable: bool = False
