"""Comparators ordering (value, label) pairs.

Three strategies exist: numeric, natural (digit-run aware) and plain string.
One of them is picked per sort call from a sample value and then used for
every table of that call.

All comparators share the null rule: a pair whose value is None sorts after
any pair with a value, in both directions, and two None values are equal.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Union

from .values import ValueKind, classify, to_number, to_text

Pair = Tuple[Any, Any]

_DIGIT_RUN = re.compile(r"(\d+)")
_LEADING_ZEROS = re.compile(r"^0+(?=\d)")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _natural_key(text: str) -> List[Union[str, Tuple[int, Union[str, int]]]]:
    # Even positions hold text, odd positions hold digit runs. A run with a
    # leading zero compares digit by digit and before any run without one;
    # other runs compare by value.
    text = _LEADING_ZEROS.sub("", text.lstrip().lower())
    parts: List[Any] = _DIGIT_RUN.split(text)
    for i in range(1, len(parts), 2):
        run = parts[i]
        parts[i] = (0, run) if run.startswith("0") else (1, int(run))
    return parts


def natural_compare(a: str, b: str) -> int:
    """
    Case-insensitive natural order comparison.

    Follows strnatcasecmp: digit runs compare by numeric value, so
    'img2' < 'img10', except that a run starting with '0' compares digit by
    digit ('img010' < 'img9', 'v1.05' < 'v1.5'). Leading whitespace and
    leading zeros at the start of the string are ignored. Strings equal
    under natural order ('01', '1') fall back to a case-insensitive
    comparison.

    Returns:
        -1, 0 or 1
    """
    result = _cmp(_natural_key(a), _natural_key(b))
    if result == 0:
        return casefold_compare(a, b)
    return result


def casefold_compare(a: str, b: str) -> int:
    """
    Case-insensitive lexicographic comparison ('page10' < 'page2').

    Returns:
        -1, 0 or 1
    """
    return _cmp(a.lower(), b.lower())


class PairComparator(ABC):
    """
    Base class for pair comparators.

    Instances are callables usable with functools.cmp_to_key.

    Attributes:
        sign: 1 for ascending, -1 for descending
    """

    name: str = ""

    def __init__(self, sign: int = -1):
        if sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1, got {sign!r}")
        self.sign = sign

    def __call__(self, pair_a: Pair, pair_b: Pair) -> int:
        value_a = self._prepare(pair_a[0])
        value_b = self._prepare(pair_b[0])

        if value_a is None and value_b is None:
            return 0
        if value_a is None:
            return 1
        if value_b is None:
            return -1
        return self._compare(value_a, value_b, pair_a[1], pair_b[1])

    @abstractmethod
    def _prepare(self, value: Any) -> Any:
        """Convert a raw value to the comparable form, None if it sorts as missing."""
        pass

    @abstractmethod
    def _compare(self, value_a: Any, value_b: Any, label_a: Any, label_b: Any) -> int:
        """Compare two non-null prepared values."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sign={self.sign})"


class NumericComparator(PairComparator):
    """
    Orders by numeric value; equal values are ordered by label.

    The label tiebreak is always descending natural order, independent of
    the direction of the value sort. Missing labels compare as ''.
    Values that are not numeric sort as missing.
    """

    name = "numeric"

    def _prepare(self, value: Any) -> Any:
        return to_number(value)

    def _compare(self, value_a: Any, value_b: Any, label_a: Any, label_b: Any) -> int:
        if value_a != value_b:
            return self.sign * (-1 if value_a < value_b else 1)
        return -natural_compare(to_text(label_a) or "", to_text(label_b) or "")


class NaturalComparator(PairComparator):
    """Orders by case-insensitive natural order of the values."""

    name = "natural"

    def _prepare(self, value: Any) -> Any:
        return to_text(value)

    def _compare(self, value_a: Any, value_b: Any, label_a: Any, label_b: Any) -> int:
        return self.sign * natural_compare(value_a, value_b)


class StringComparator(PairComparator):
    """Orders by case-insensitive lexicographic order of the values."""

    name = "string"

    def _prepare(self, value: Any) -> Any:
        return to_text(value)

    def _compare(self, value_a: Any, value_b: Any, label_a: Any, label_b: Any) -> int:
        return self.sign * casefold_compare(value_a, value_b)


def select_comparator(
    sample_value: Optional[Any], natural_sort: bool, sign: int = -1
) -> PairComparator:
    """
    Pick the comparator for a whole sort call.

    Args:
        sample_value: Primary value of the first row of the top-level table
        natural_sort: Whether text values use natural order
        sign: 1 for ascending, -1 for descending

    Returns:
        NumericComparator if the sample is numeric, otherwise
        NaturalComparator or StringComparator depending on natural_sort
    """
    if classify(sample_value) is ValueKind.NUMERIC:
        return NumericComparator(sign)
    if natural_sort:
        return NaturalComparator(sign)
    return StringComparator(sign)
