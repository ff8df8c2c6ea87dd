"""Tests for count extraction and formatting."""

from decimal import Decimal
from fractions import Fraction

import pytest

from pluralchain.counting import format_count, to_count


class TestToCount:
    def test_numbers_pass_through(self):
        assert to_count(0) == 0
        assert to_count(3) == 3
        assert to_count(0.75) == 0.75

    def test_sized_values_use_length(self):
        assert to_count(["Tick", "Trick", "Track"]) == 3
        assert to_count(("Joe",)) == 1
        assert to_count([]) == 0
        assert to_count({"a", "b"}) == 2

    def test_bool_is_rejected(self):
        with pytest.raises(TypeError):
            to_count(True)

    def test_unsized_object_is_rejected(self):
        with pytest.raises(TypeError, match="NoneType"):
            to_count(None)


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, "0"),
        (1, "1"),
        (42, "42"),
        (-3, "-3"),
        (2.0, "2"),
        (1e23, "1e+23"),
        (0.75, "0.75"),
        (1.0000001, "1.0000001"),
        (1.2345, "1.2345"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
        (Fraction(3, 4), "3/4"),
        (Decimal("1.50"), "1.50"),
    ],
)
def test_format_count(count, expected):
    assert format_count(count) == expected
