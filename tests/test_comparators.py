"""Tests for pair comparators and comparator selection."""

from functools import cmp_to_key

import pytest

from report_tables.sorting.comparators import (
    NaturalComparator,
    NumericComparator,
    StringComparator,
    casefold_compare,
    natural_compare,
    select_comparator,
)


def _sorted_values(comparator, values):
    pairs = [(value, None) for value in values]
    return [value for value, _ in sorted(pairs, key=cmp_to_key(comparator))]


class TestStringHelpers:
    """Tests for natural and case-insensitive string comparison."""

    def test_natural_compare_digit_runs(self):
        """Digit runs compare numerically."""
        assert natural_compare("img2", "img10") == -1
        assert natural_compare("img10", "img2") == 1

    def test_natural_compare_leading_zero_runs(self):
        """Runs starting with '0' compare digit by digit."""
        assert natural_compare("img010", "img9") == -1
        assert natural_compare("img9", "img010") == 1
        assert natural_compare("v1.05", "v1.5") == -1
        assert natural_compare("img007", "img01") == -1

    def test_natural_compare_skips_zeros_at_start(self):
        """Zeros at the start of the string are ignored."""
        assert natural_compare("010", "9") == 1
        assert natural_compare("01", "1") == -1

    def test_natural_compare_case_insensitive(self):
        """Case does not matter."""
        assert natural_compare("Page", "page") == 0
        assert natural_compare("apple", "Banana") == -1

    def test_natural_compare_ignores_leading_whitespace(self):
        """Leading whitespace is skipped."""
        assert natural_compare("  b", "a") == 1

    def test_casefold_compare_is_lexicographic(self):
        """Plain comparison orders digits character by character."""
        assert casefold_compare("page10", "page2") == -1
        assert casefold_compare("ABC", "abc") == 0


class TestNullHandling:
    """Tests for the shared null rule."""

    @pytest.mark.parametrize("comparator_class", [NumericComparator, NaturalComparator, StringComparator])
    @pytest.mark.parametrize("sign", [1, -1])
    def test_nulls_sort_last(self, comparator_class, sign):
        """None sorts after values in both directions."""
        comparator = comparator_class(sign)
        assert comparator((None, "a"), (5, "b")) == 1
        assert comparator((5, "a"), (None, "b")) == -1
        assert comparator((None, "a"), (None, "b")) == 0

    def test_invalid_sign(self):
        """Only 1 and -1 are valid signs."""
        with pytest.raises(ValueError):
            NumericComparator(0)


class TestNumericComparator:
    """Tests for numeric ordering and label tiebreak."""

    def test_ascending_and_descending(self):
        """Values order by magnitude with the sign applied."""
        assert _sorted_values(NumericComparator(1), [3, 10, 1]) == [1, 3, 10]
        assert _sorted_values(NumericComparator(-1), [3, 10, 1]) == [10, 3, 1]

    def test_numeric_strings_compare_by_value(self):
        """'9' sorts before '10' ascending."""
        assert _sorted_values(NumericComparator(1), ["10", "9", 2.5]) == [2.5, "9", "10"]

    def test_non_numeric_values_sort_as_missing(self):
        """Text in a numeric sort goes last."""
        assert _sorted_values(NumericComparator(-1), ["n/a", 1, 5]) == [5, 1, "n/a"]

    @pytest.mark.parametrize("sign", [1, -1])
    def test_equal_values_tiebreak_by_label_descending(self, sign):
        """Equal values order by label descending, whatever the direction."""
        comparator = NumericComparator(sign)
        assert comparator((10, "Tokyo"), (10, "Paris")) == -1
        assert comparator((10, "Paris"), (10, "Tokyo")) == 1

    def test_label_tiebreak_is_natural(self):
        """Label tiebreak is digit-run aware."""
        comparator = NumericComparator(1)
        assert comparator((1, "page10"), (1, "page2")) == -1

    def test_missing_label_compares_as_empty(self):
        """A missing label sorts after present labels in the tiebreak."""
        comparator = NumericComparator(1)
        assert comparator((1, None), (1, "a")) == 1
        assert comparator((1, None), (1, None)) == 0


class TestTextComparators:
    """Tests for natural and plain string ordering."""

    def test_natural_ascending(self):
        """Natural sort is digit-run aware."""
        values = ["page2", "page10", "page1"]
        assert _sorted_values(NaturalComparator(1), values) == ["page1", "page2", "page10"]

    def test_string_ascending(self):
        """Plain sort is character based."""
        values = ["page2", "page10", "page1"]
        assert _sorted_values(StringComparator(1), values) == ["page1", "page10", "page2"]

    def test_descending(self):
        """The sign reverses text order."""
        values = ["b", "C", "a"]
        assert _sorted_values(StringComparator(-1), values) == ["C", "b", "a"]
        assert _sorted_values(NaturalComparator(-1), values) == ["C", "b", "a"]

    def test_numbers_compare_as_text(self):
        """Numbers in a text sort compare by their string form."""
        assert _sorted_values(StringComparator(1), ["b", 10.0, "a"]) == [10.0, "a", "b"]


class TestSelectComparator:
    """Tests for choosing the comparator from a sample value."""

    @pytest.mark.parametrize("sample", [5, 2.5, "42"])
    def test_numeric_sample(self, sample):
        """Numeric samples select the numeric comparator regardless of natural_sort."""
        assert isinstance(select_comparator(sample, natural_sort=True), NumericComparator)
        assert isinstance(select_comparator(sample, natural_sort=False), NumericComparator)

    def test_text_sample_natural(self):
        """Text samples select natural order when requested."""
        assert isinstance(select_comparator("page1", natural_sort=True), NaturalComparator)

    def test_text_sample_plain(self):
        """Text samples select plain order otherwise."""
        assert isinstance(select_comparator("page1", natural_sort=False), StringComparator)

    def test_missing_sample_is_text(self):
        """A missing sample is not numeric."""
        assert isinstance(select_comparator(None, natural_sort=False), StringComparator)

    def test_sign_is_passed(self):
        """The direction is carried by the comparator."""
        assert select_comparator(1, natural_sort=True, sign=1).sign == 1
