# SPDX-License-Identifier: MIT
"""Unit tests for the date component."""

import datetime

import pytest

from chronver import (
    ComponentRangeError,
    Date,
    IntegerParseError,
    InvalidCalendarDateError,
    InvalidDateIntegerError,
    InvalidMonthError,
    MissingDaySeparatorError,
    MissingMonthSeparatorError,
    ParseDateError,
    days_in_month,
)


class TestParseDate:
    """Tests for Date.parse."""

    def test_basic_date(self):
        """Test parsing a regular date."""
        d = Date.parse("2024.04.03")
        assert d.year == 2024
        assert d.month == 4
        assert d.day == 3

    def test_leap_day(self):
        """Test parsing Feb 29 in a leap year."""
        assert Date.parse("2024.02.29") == Date(2024, 2, 29)

    def test_leap_day_century(self):
        """Test that 2000 is a leap year but 1900 is not."""
        assert Date.parse("2000.02.29") == Date(2000, 2, 29)
        with pytest.raises(InvalidCalendarDateError):
            Date.parse("1900.02.29")

    def test_year_zero(self):
        """Test that year 0 is accepted."""
        assert Date.parse("0000.01.01") == Date(0, 1, 1)

    def test_unpadded_groups(self):
        """Test that groups do not need to be zero padded when parsed alone."""
        assert Date.parse("2024.4.3") == Date(2024, 4, 3)

    def test_missing_month_separator(self):
        """Test a string without any dot."""
        with pytest.raises(MissingMonthSeparatorError):
            Date.parse("20240403")

    def test_missing_day_separator(self):
        """Test a string with only one dot."""
        with pytest.raises(MissingDaySeparatorError):
            Date.parse("2024.0403")

    def test_malformed_integer(self):
        """Test that non-digit groups fail with the integer error as cause."""
        with pytest.raises(InvalidDateIntegerError) as exc_info:
            Date.parse("2024.ab.03")
        assert isinstance(exc_info.value.__cause__, IntegerParseError)
        assert exc_info.value.__cause__.reason == IntegerParseError.INVALID_DIGIT

    def test_sign_rejected(self):
        """Test that a leading plus sign is not a valid integer."""
        with pytest.raises(InvalidDateIntegerError):
            Date.parse("+024.04.03")

    def test_empty_group(self):
        """Test that an empty group is a malformed integer."""
        with pytest.raises(InvalidDateIntegerError) as exc_info:
            Date.parse("2024..03")
        assert exc_info.value.__cause__.reason == IntegerParseError.EMPTY

    def test_extra_dot_belongs_to_day(self):
        """Test that only the first two dots split the date."""
        with pytest.raises(InvalidDateIntegerError):
            Date.parse("2024.04.03.1")

    def test_invalid_month(self):
        """Test that month 13 is rejected with a range cause."""
        with pytest.raises(InvalidMonthError) as exc_info:
            Date.parse("2024.13.01")
        cause = exc_info.value.__cause__
        assert isinstance(cause, ComponentRangeError)
        assert cause.name == "month"
        assert cause.value == 13

    def test_month_zero(self):
        """Test that month 0 is rejected."""
        with pytest.raises(InvalidMonthError):
            Date.parse("2024.00.01")

    def test_invalid_day(self):
        """Test that Feb 30 is rejected."""
        with pytest.raises(InvalidCalendarDateError) as exc_info:
            Date.parse("2024.02.30")
        assert exc_info.value.__cause__.name == "day"

    def test_day_zero(self):
        """Test that day 0 is rejected."""
        with pytest.raises(InvalidCalendarDateError):
            Date.parse("2024.01.00")

    def test_huge_integer(self):
        """Test that overflowing groups are malformed integers."""
        with pytest.raises(InvalidDateIntegerError) as exc_info:
            Date.parse("2024.04." + "9" * 5000)
        assert exc_info.value.__cause__.reason == IntegerParseError.TOO_LARGE

    def test_year_out_of_range(self):
        """Test that years past 9999 are not valid calendar dates."""
        with pytest.raises(InvalidCalendarDateError):
            Date.parse("10000.01.01")

    def test_all_errors_are_parse_date_errors(self):
        """Test that every date failure shares the ParseDateError base."""
        for text in ["2024", "2024.04", "2024.x.01", "2024.13.01", "2024.02.30"]:
            with pytest.raises(ParseDateError):
                Date.parse(text)


class TestDateValue:
    """Tests for Date construction, formatting and ordering."""

    def test_construction_validates(self):
        """Test that direct construction applies calendar rules."""
        with pytest.raises(InvalidCalendarDateError):
            Date(2023, 2, 29)
        with pytest.raises(InvalidMonthError):
            Date(2023, 0, 1)

    @pytest.mark.parametrize(
        "year, month, day",
        [
            (2024.5, 4, 3),
            (2024, 4.0, 3),
            (2024, 4, "3"),
            (True, 4, 3),
        ],
    )
    def test_non_int_components_rejected(self, year, month, day):
        """Test that each component must be a plain int."""
        with pytest.raises(InvalidDateIntegerError):
            Date(year, month, day)

    def test_format_pads(self):
        """Test that formatting pads year to 4 and month/day to 2 digits."""
        assert str(Date(24, 4, 3)) == "0024.04.03"
        assert str(Date(2024, 12, 31)) == "2024.12.31"

    def test_ordering(self):
        """Test lexicographic (year, month, day) ordering."""
        assert Date(2024, 4, 3) < Date(2024, 4, 4)
        assert Date(2024, 4, 30) < Date(2024, 5, 1)
        assert Date(2024, 12, 31) < Date(2025, 1, 1)

    def test_immutable(self):
        """Test that dates cannot be modified."""
        d = Date(2024, 4, 3)
        with pytest.raises(AttributeError):
            d.day = 4  # type: ignore[misc]

    def test_datetime_conversion(self):
        """Test conversion to and from datetime.date."""
        d = Date.from_date(datetime.date(2024, 4, 3))
        assert d == Date(2024, 4, 3)
        assert d.to_date() == datetime.date(2024, 4, 3)

    def test_days_in_month(self):
        """Test month lengths including February."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31
