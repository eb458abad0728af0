"""Conversion between report tables and dataframes."""

from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import pandas as pd
import polars as pl

from ..core.metrics import MetricMapping
from ..core.table import LABEL_COLUMN, DataTable, Row
from ..sorting.values import is_missing

FrameLike = Union[pl.DataFrame, pl.LazyFrame, pd.DataFrame]

_NUMERIC_DTYPES = (
    pl.Int8,
    pl.Int16,
    pl.Int32,
    pl.Int64,
    pl.UInt8,
    pl.UInt16,
    pl.UInt32,
    pl.UInt64,
    pl.Float32,
    pl.Float64,
)


def _to_polars(data: FrameLike) -> pl.DataFrame:
    """Collect any supported frame into a polars DataFrame."""
    if isinstance(data, pl.LazyFrame):
        return data.collect()
    if isinstance(data, pl.DataFrame):
        return data
    if isinstance(data, pd.DataFrame):
        # NaN -> None so that polars sees nulls in object columns
        cleaned = data.astype(object).where(data.notna(), None)
        return pl.DataFrame(
            {str(col): cleaned[col].tolist() for col in cleaned.columns},
            strict=False,
        )
    raise TypeError(
        f"Expected a polars DataFrame/LazyFrame or pandas DataFrame, "
        f"got {type(data).__name__}"
    )


def _column_key(name: str, mapping: Optional[MetricMapping]) -> Hashable:
    if mapping is not None and mapping.has_name(name):
        return mapping.get_id(name)
    return name


def _make_row(
    record: Dict[str, Any],
    label_column: str,
    mapping: Optional[MetricMapping],
) -> Row:
    columns: Dict[Hashable, Any] = {}
    for name, value in record.items():
        if is_missing(value):
            continue
        if name == label_column:
            columns[LABEL_COLUMN] = value
        else:
            columns[_column_key(name, mapping)] = value
    return Row(columns)


def table_from_frame(
    data: FrameLike,
    label_column: str = LABEL_COLUMN,
    subtable_column: Optional[str] = None,
    mapping: Optional[MetricMapping] = None,
) -> DataTable:
    """
    Build a report table from a dataframe.

    Without subtable_column every record becomes one row. With it, records
    are grouped by label (in first-seen order): numeric metric columns are
    summed per group, and each row owns a sub-table built from its group's
    records with subtable_column as the sub-table's label.

    Null and NaN cells are left off the rows, so they read as missing.

    Args:
        data: Source frame (polars DataFrame/LazyFrame or pandas DataFrame)
        label_column: Column holding row labels. Stored as 'label' on rows.
        subtable_column: Optional column to break each row down by
        mapping: If provided, metric columns with a known name are stored
            under their metric id, as archived tables do.

    Returns:
        New DataTable

    Example:
        visits = pl.DataFrame({
            "country": ["fr", "fr", "de"],
            "city": ["Paris", "Lyon", "Berlin"],
            "nb_visits": [10, 4, 7],
        })
        countries = table_from_frame(
            visits, label_column="country", subtable_column="city"
        )
    """
    df = _to_polars(data)

    if label_column not in df.columns:
        raise ValueError(
            f"Label column '{label_column}' not found in data. "
            f"Available columns: {df.columns}"
        )

    if subtable_column is None:
        return DataTable(
            _make_row(record, label_column, mapping) for record in df.to_dicts()
        )

    if subtable_column not in df.columns:
        raise ValueError(
            f"Sub-table column '{subtable_column}' not found in data. "
            f"Available columns: {df.columns}"
        )

    metric_columns = [
        col
        for col, dtype in zip(df.columns, df.dtypes)
        if col not in (label_column, subtable_column) and dtype in _NUMERIC_DTYPES
    ]
    grouped = df.group_by(label_column, maintain_order=True).agg(
        [pl.col(col).sum() for col in metric_columns]
    )

    table = DataTable()
    for record in grouped.to_dicts():
        label = record[label_column]
        if label is None:
            members = df.filter(pl.col(label_column).is_null())
        else:
            members = df.filter(pl.col(label_column) == label)

        row = _make_row(record, label_column, mapping)
        row.set_subtable(
            table_from_frame(
                members.drop(label_column),
                label_column=subtable_column,
                mapping=mapping,
            )
        )
        table.add_row(row)
    return table


def _column_name(key: Hashable, mapping: Optional[MetricMapping]) -> Hashable:
    if mapping is not None and isinstance(key, int):
        name = mapping.get_name(key)
        if name is not None:
            return name
    return key


def table_to_frame(
    table: DataTable,
    recursive: bool = True,
    mapping: Optional[MetricMapping] = None,
) -> pd.DataFrame:
    """
    Flatten a report table into a pandas DataFrame in current row order.

    Rows are emitted depth-first: each row is followed by its sub-table's
    rows. A table's summary row comes after its regular rows.

    Args:
        table: The table to flatten
        recursive: Include sub-table rows
        mapping: If provided, metric ids are translated back to names

    Returns:
        DataFrame with a 'depth' column, a 'summary' flag column and one
        column per row column
    """
    records: List[Dict[Hashable, Any]] = []
    column_order: List[Hashable] = ["depth", "summary", LABEL_COLUMN]

    def push_table(current: DataTable, depth: int) -> None:
        summary_row = current.get_summary_row()
        for row in reversed(current.get_rows_with_summary()):
            stack.append((row, depth, row is summary_row))

    stack: List[Tuple[Row, int, bool]] = []
    push_table(table, 0)
    while stack:
        row, depth, is_summary = stack.pop()
        record: Dict[Hashable, Any] = {"depth": depth, "summary": is_summary}
        for key, value in row.get_columns().items():
            name = _column_name(key, mapping)
            if name not in column_order:
                column_order.append(name)
            record[name] = value
        records.append(record)

        subtable = row.get_subtable()
        if recursive and subtable is not None:
            push_table(subtable, depth + 1)

    return pd.DataFrame.from_records(records, columns=column_order)
