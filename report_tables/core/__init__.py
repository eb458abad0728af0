"""Core infrastructure for report_tables."""

from .base import BaseFilter
from .errors import TableIntegrationError
from .metrics import INDEX_NB_VISITS, MetricMapping
from .registry import create_filter, get_filter_class, register_filter
from .table import (
    LABEL_COLUMN,
    MISSING,
    SUMMARY_ROW_ID,
    DataTable,
    DataTableSummaryRow,
    Row,
    SimpleDataTable,
)

__all__ = [
    "BaseFilter",
    "register_filter",
    "get_filter_class",
    "create_filter",
    "TableIntegrationError",
    "MetricMapping",
    "INDEX_NB_VISITS",
    "DataTable",
    "SimpleDataTable",
    "Row",
    "DataTableSummaryRow",
    "MISSING",
    "SUMMARY_ROW_ID",
    "LABEL_COLUMN",
]
