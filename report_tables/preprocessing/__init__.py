"""Conversion utilities between report tables and dataframes."""

from .frames import table_from_frame, table_to_frame

__all__ = [
    "table_from_frame",
    "table_to_frame",
]
