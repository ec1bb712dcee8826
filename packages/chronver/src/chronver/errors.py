# SPDX-License-Identifier: MIT
"""Errors raised while parsing or constructing chronological versions.

Every error carries a short, machine-stable ``description`` which is also its
string form. The offending input (if any) is kept on ``text``. Wrapped errors
are chained with ``raise ... from cause`` so the full chain is available via
``__cause__`` (see :func:`iter_causes`).

Hierarchy:
    ChronVerError (ValueError)
    ├── IntegerParseError
    ├── ComponentRangeError
    ├── ParseDateError
    │   ├── MissingMonthSeparatorError
    │   ├── MissingDaySeparatorError
    │   ├── InvalidDateIntegerError
    │   ├── InvalidMonthError
    │   └── InvalidCalendarDateError
    ├── ParseChangesetError
    │   ├── InvalidChangesetIntegerError
    │   └── ZeroChangesetError
    ├── ParseKindError
    │   ├── NonAsciiKindError
    │   └── InvalidKindNameError
    └── ParseError
        ├── NonAsciiError
        ├── TooShortError
        ├── InvalidDateError
        ├── InvalidChangesetError
        ├── InvalidKindError
        └── TrailingDataError
"""

from __future__ import annotations

from typing import Iterator, Optional


class ChronVerError(ValueError):
    """Base class for all chronological version errors."""

    description = "chronological version error"

    def __init__(self, text: Optional[str] = None):
        self.text = text
        super().__init__(self.description)

    def __str__(self) -> str:
        return self.description


class IntegerParseError(ChronVerError):
    """A string could not be read as a non-negative decimal integer."""

    description = "invalid integer"

    EMPTY = "empty"
    INVALID_DIGIT = "invalid digit"
    TOO_LARGE = "too large"

    def __init__(self, text: Optional[str], reason: str):
        self.reason = reason
        super().__init__(text)


class ComponentRangeError(ChronVerError):
    """A date component is outside of its valid range."""

    description = "component out of range"

    def __init__(self, name: str, value: int, minimum: int, maximum: int):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(str(value))


# Date errors


class ParseDateError(ChronVerError):
    """Base class for errors of the date component."""

    description = "invalid date"


class MissingMonthSeparatorError(ParseDateError):
    description = "missing separator for the month"


class MissingDaySeparatorError(ParseDateError):
    description = "missing separator for the day"


class InvalidDateIntegerError(ParseDateError):
    description = "malformed integer component"


class InvalidMonthError(ParseDateError):
    description = "invalid month value"


class InvalidCalendarDateError(ParseDateError):
    description = "invalid date value"


# Changeset errors


class ParseChangesetError(ChronVerError):
    """Base class for errors of the changeset component."""

    description = "invalid changeset"


class InvalidChangesetIntegerError(ParseChangesetError):
    description = "string is malformed"


class ZeroChangesetError(ParseChangesetError):
    """A changeset of zero is expressed by its absence, never explicitly."""

    description = "changeset value is zero"


# Kind errors


class ParseKindError(ChronVerError):
    """Base class for errors of the kind component."""

    description = "invalid kind"


class NonAsciiKindError(ParseKindError):
    description = "string contains non-ascii characters"


class InvalidKindNameError(ParseKindError):
    """A feature name is empty, not a string or reserved, or a non-feature kind has a name."""

    description = "invalid kind name"


# Version errors


class ParseError(ChronVerError):
    """Base class for errors raised by :meth:`chronver.Version.parse`."""

    description = "invalid version"


class NonAsciiError(ParseError):
    description = "string contains non-ascii characters"


class TooShortError(ParseError):
    description = "string is too short"


class InvalidDateError(ParseError):
    description = "invalid date component"


class InvalidChangesetError(ParseError):
    description = "invalid changeset component"


class InvalidKindError(ParseError):
    description = "invalid kind component"


class TrailingDataError(ParseError):
    description = "unexpected trailing data"


def iter_causes(error: BaseException) -> Iterator[BaseException]:
    """Yield ``error`` followed by every error in its ``__cause__`` chain."""
    current: Optional[BaseException] = error
    while current is not None:
        yield current
        current = current.__cause__


def is_plain_int(value: object) -> bool:
    """Return True for an ``int`` that is not a ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def parse_uint(text: str, maximum: int) -> int:
    """Parse a plain run of ASCII digits into an integer no larger than ``maximum``.

    Signs, whitespace and underscores are rejected, unlike ``int()``.

    Raises:
        IntegerParseError: If the text is empty, has a non-digit, or overflows
    """
    if not text:
        raise IntegerParseError(text, IntegerParseError.EMPTY)
    if not (text.isascii() and text.isdigit()):
        raise IntegerParseError(text, IntegerParseError.INVALID_DIGIT)
    # int() refuses very long digit strings
    if len(text.lstrip("0")) > len(str(maximum)):
        raise IntegerParseError(text, IntegerParseError.TOO_LARGE)
    value = int(text)
    if value > maximum:
        raise IntegerParseError(text, IntegerParseError.TOO_LARGE)
    return value
