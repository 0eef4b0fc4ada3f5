"""Unit tests for lenient value coercion."""

import datetime as dt
from decimal import Decimal

import pytest

from chantier_tracker.utils.coercion import (
    coerce_decimal,
    coerce_non_negative_decimal,
    coerce_optional_amount,
    coerce_time_of_day,
)


class TestCoerceDecimal:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("12.50", Decimal("12.50")),
            (" 7 ", Decimal("7")),
            (20, Decimal("20")),
            (0.1, Decimal("0.1")),
            (Decimal("3.3"), Decimal("3.3")),
            ("-4", Decimal("-4")),
        ],
    )
    def test_numeric_values(self, raw, expected):
        assert coerce_decimal(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "abc", "NaN", "Infinity", float("inf"), True, [], {}]
    )
    def test_non_numeric_values_are_zero(self, raw):
        assert coerce_decimal(raw) == Decimal("0")


    @pytest.mark.parametrize(
        "raw", ["1e30", "9e999999", "-1e13", Decimal("1E+13"), 10**20, 1e300]
    )
    def test_oversized_values_are_zero(self, raw):
        assert coerce_decimal(raw) == Decimal("0")

    def test_largest_accepted_value(self):
        assert coerce_decimal("9999999999999.99") == Decimal("9999999999999.99")

    def test_tiny_values_are_kept(self):
        assert coerce_decimal("1e-30") == Decimal("1e-30")


class TestCoerceNonNegativeDecimal:
    def test_clamps_negative(self):
        assert coerce_non_negative_decimal("-0.01") == Decimal("0")

    def test_keeps_positive(self):
        assert coerce_non_negative_decimal("15") == Decimal("15")


class TestCoerceOptionalAmount:
    def test_absent_stays_absent(self):
        assert coerce_optional_amount(None) is None
        assert coerce_optional_amount("") is None

    def test_present_values(self):
        assert coerce_optional_amount("0") == Decimal("0")
        assert coerce_optional_amount(-3) == Decimal("0")
        assert coerce_optional_amount("9.99") == Decimal("9.99")


class TestCoerceTimeOfDay:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("09:30", dt.time(9, 30)),
            ("9:05", dt.time(9, 5)),
            ("17:45:59", dt.time(17, 45)),
            ("06:00:00.250000", dt.time(6, 0)),
            (dt.time(8, 1, 30), dt.time(8, 1)),
            (dt.datetime(2024, 5, 2, 22, 15, 10), dt.time(22, 15)),
        ],
    )
    def test_parses(self, raw, expected):
        assert coerce_time_of_day(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  ", "noon", "25:00", 900, 9.5])
    def test_unparsable_is_none(self, raw):
        assert coerce_time_of_day(raw) is None
