# SPDX-License-Identifier: MIT
"""Calendar date component of a chronological version.

The date is a pure calendar day (no time of day, no timezone) written as
``YYYY.MM.DD``. Year 0 is accepted; ``datetime.date`` cannot hold it, so the
calendar rules are applied here directly.
"""

from __future__ import annotations

import calendar
import datetime
from dataclasses import dataclass

from .errors import (
    ComponentRangeError,
    IntegerParseError,
    InvalidCalendarDateError,
    InvalidDateIntegerError,
    InvalidMonthError,
    MissingDaySeparatorError,
    MissingMonthSeparatorError,
    is_plain_int,
    parse_uint,
)

MIN_YEAR = 0
MAX_YEAR = 9999

# Widest values the integer groups may hold before range checks apply
_YEAR_INT_MAX = 2**31 - 1
_MONTH_INT_MAX = 255
_DAY_INT_MAX = 255

SEPARATOR = "."


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the proleptic Gregorian calendar."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
    """
    if month == 2 and is_leap_year(year):
        return 29
    return calendar.mdays[month]


@dataclass(frozen=True, order=True, slots=True)
class Date:
    """A validated calendar date.

    Ordering is lexicographic over ``(year, month, day)``.

    Attributes:
        year: Calendar year (0-9999)
        month: Month of the year (1-12)
        day: Day of the month (1-31, bounded by the month's length)

    Raises:
        InvalidDateIntegerError: If a component is not an int
        InvalidMonthError: If the month is outside 1-12
        InvalidCalendarDateError: If the year or day is out of range
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for value in (self.year, self.month, self.day):
            if not is_plain_int(value):
                raise InvalidDateIntegerError(repr(value))
        if not 1 <= self.month <= 12:
            raise InvalidMonthError(str(self.month)) from ComponentRangeError(
                "month", self.month, 1, 12
            )
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidCalendarDateError(str(self.year)) from ComponentRangeError(
                "year", self.year, MIN_YEAR, MAX_YEAR
            )
        last_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            raise InvalidCalendarDateError(str(self.day)) from ComponentRangeError(
                "day", self.day, 1, last_day
            )

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Parse ``YEAR.MONTH.DAY`` into a Date.

        The text is split on the first two dots only; anything after the
        second dot belongs to the day group and must be digits.

        Args:
            text: Date string such as ``"2024.04.03"``

        Returns:
            The parsed Date

        Raises:
            MissingMonthSeparatorError: If there is no dot after the year
            MissingDaySeparatorError: If there is no dot after the month
            InvalidDateIntegerError: If a group is not a plain decimal integer
            InvalidMonthError: If the month is outside 1-12
            InvalidCalendarDateError: If the day does not exist in that month

        Examples:
            >>> Date.parse("2024.02.29")
            Date(year=2024, month=2, day=29)
        """
        year_text, sep, rest = text.partition(SEPARATOR)
        if not sep:
            raise MissingMonthSeparatorError(text)
        month_text, sep, day_text = rest.partition(SEPARATOR)
        if not sep:
            raise MissingDaySeparatorError(text)

        try:
            year = parse_uint(year_text, _YEAR_INT_MAX)
            month = parse_uint(month_text, _MONTH_INT_MAX)
            day = parse_uint(day_text, _DAY_INT_MAX)
        except IntegerParseError as e:
            raise InvalidDateIntegerError(text) from e

        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: datetime.date) -> "Date":
        """Create a Date from a :class:`datetime.date` (or ``datetime``)."""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> datetime.date:
        """Convert to :class:`datetime.date`.

        Raises:
            ValueError: For year 0, which ``datetime.date`` cannot represent
        """
        return datetime.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04}.{self.month:02}.{self.day:02}"
