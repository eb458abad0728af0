"""Reading and tagging sort values from report rows."""

import numbers
import re
from enum import Enum
from typing import Any, Hashable, Optional, Tuple, Union

import numpy as np

from ..core.errors import TableIntegrationError
from ..core.table import LABEL_COLUMN, MISSING, Row

# Numeric strings as accepted by the archiver: optional sign, decimal or
# exponent notation, surrounding whitespace allowed.
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_NON_SCALAR_TYPES = (list, tuple, dict, set, frozenset, np.ndarray)

Number = Union[int, float]


class ValueKind(Enum):
    """Runtime type tag of a column value."""

    NUMERIC = "numeric"
    TEXT = "text"
    MISSING = "missing"


def is_missing(value: Any) -> bool:
    """
    Check if a value sorts as missing.

    Missing covers absent columns, None, NaN and non-scalar values such as
    lists or dicts that some rows carry for nested data.
    """
    if value is None or value is MISSING:
        return True
    if isinstance(value, _NON_SCALAR_TYPES):
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def classify(value: Any) -> ValueKind:
    """
    Tag a raw column value.

    Args:
        value: Value read from a row

    Returns:
        ValueKind.NUMERIC for numbers and numeric strings ('12', ' 1.5e3'),
        ValueKind.MISSING for values that sort as missing, ValueKind.TEXT
        otherwise. Booleans are text.
    """
    if is_missing(value):
        return ValueKind.MISSING
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.TEXT
    if isinstance(value, (numbers.Real, np.integer, np.floating)):
        return ValueKind.NUMERIC
    if isinstance(value, str) and _NUMERIC_STRING.match(value):
        return ValueKind.NUMERIC
    return ValueKind.TEXT


def to_number(value: Any) -> Optional[Number]:
    """
    Convert a value to a number.

    Returns:
        int or float, or None if the value is missing or not numeric
    """
    if classify(value) is not ValueKind.NUMERIC:
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    if isinstance(value, (numbers.Integral, np.integer)):
        return int(value)
    return float(value)


def to_text(value: Any) -> Optional[str]:
    """
    Convert a value to the string used by text comparisons.

    Integral floats lose their fractional part so that 10.0 reads as '10'.

    Returns:
        The string, or None if the value is missing
    """
    if is_missing(value):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def read_column(row: Row, key: Hashable) -> Any:
    """
    Read a column from a row.

    Args:
        row: Row to read from
        key: Column name or metric id

    Returns:
        The raw value, or MISSING

    Raises:
        TableIntegrationError: If the row's column read fails
    """
    try:
        return row.get_column(key)
    except Exception as e:
        raise TableIntegrationError(
            f"Failed to read column {key!r} from {type(row).__name__}: {e}"
        ) from e


def has_value(row: Row, key: Hashable) -> bool:
    """Check if a row holds a non-null value for a column."""
    value = read_column(row, key)
    return value is not MISSING and value is not None


def extract(
    row: Row, column: Hashable, label_column: Hashable = LABEL_COLUMN
) -> Tuple[Any, Any]:
    """
    Get the (primary value, label) pair a row is sorted by.

    Absent and non-scalar values are returned as None; this never raises for
    missing data.

    Args:
        row: Row to read from
        column: Resolved sort column
        label_column: Column used as tiebreak label

    Returns:
        Tuple of (primary value or None, label or None)
    """
    primary = read_column(row, column)
    label = read_column(row, label_column)
    return (
        None if is_missing(primary) else primary,
        None if is_missing(label) else label,
    )
