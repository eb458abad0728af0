"""
Report Tables - Sorting of hierarchical analytics report tables.

This package provides the report table model (rows owning drill-down
sub-tables) and the sort engine that orders those tables by a metric, with
column fallback, typed comparators and optional recursion into sub-tables.
"""

from .core.base import BaseFilter
from .core.errors import TableIntegrationError
from .core.metrics import INDEX_NB_VISITS, MetricMapping
from .core.registry import create_filter, get_filter_class, register_filter
from .core.table import (
    LABEL_COLUMN,
    MISSING,
    SUMMARY_ROW_ID,
    DataTable,
    DataTableSummaryRow,
    Row,
    SimpleDataTable,
)
from .preprocessing.frames import table_from_frame, table_to_frame
from .sorting.sort_filter import Sort
from .sorting.sorter import RecursiveSorter, sort_table

__version__ = "0.1.0"

__all__ = [
    # Core
    "DataTable",
    "SimpleDataTable",
    "Row",
    "DataTableSummaryRow",
    "MetricMapping",
    "BaseFilter",
    "register_filter",
    "get_filter_class",
    "create_filter",
    "TableIntegrationError",
    "MISSING",
    "SUMMARY_ROW_ID",
    "LABEL_COLUMN",
    "INDEX_NB_VISITS",
    # Sorting
    "sort_table",
    "Sort",
    "RecursiveSorter",
    # Utilities
    "table_from_frame",
    "table_to_frame",
]
