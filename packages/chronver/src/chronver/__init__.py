# SPDX-License-Identifier: MIT
"""Chronological version parsing, formatting and comparison.

A chronological version is a release date, an optional changeset counter for
multiple releases on the same day, and an optional qualifier that marks a
breaking release or names a feature branch.

Example:
    >>> from chronver import Version, FixedClock, Date, compare_versions
    >>>
    >>> version = Version.parse("2024.04.03.1-break")
    >>> version.changeset.value
    1
    >>> version.is_breaking
    True
    >>>
    >>> str(version.increment(FixedClock(Date(2024, 4, 3))))
    '2024.04.03.2'
    >>>
    >>> compare_versions("2024.04.03", "2024.04.03.1")
    -1
"""

__version__ = "0.1.0"

from .changeset import MAX_CHANGESET, Changeset, changeset_rank
from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from .compare import (
    compare_versions,
    is_valid_chronver,
    latest_version,
    parse_version,
    sort_versions,
    version_key,
)
from .date import MAX_YEAR, MIN_YEAR, Date, days_in_month, is_leap_year
from .errors import (
    ChronVerError,
    ComponentRangeError,
    IntegerParseError,
    InvalidCalendarDateError,
    InvalidChangesetError,
    InvalidChangesetIntegerError,
    InvalidDateError,
    InvalidDateIntegerError,
    InvalidKindError,
    InvalidKindNameError,
    InvalidMonthError,
    MissingDaySeparatorError,
    MissingMonthSeparatorError,
    NonAsciiError,
    NonAsciiKindError,
    ParseChangesetError,
    ParseDateError,
    ParseError,
    ParseKindError,
    TooShortError,
    TrailingDataError,
    ZeroChangesetError,
    iter_causes,
)
from .kind import BREAK_KEYWORD, Kind, KindTag
from .model import DateModel, VersionModel, version_from_dict, version_to_dict
from .version import DATE_LENGTH, Version

__all__ = [
    # Components
    "Date",
    "Changeset",
    "Kind",
    "KindTag",
    "Version",
    "BREAK_KEYWORD",
    "DATE_LENGTH",
    "MAX_CHANGESET",
    "MAX_YEAR",
    "MIN_YEAR",
    "changeset_rank",
    "days_in_month",
    "is_leap_year",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    "SYSTEM_CLOCK",
    # Comparison
    "compare_versions",
    "is_valid_chronver",
    "latest_version",
    "parse_version",
    "sort_versions",
    "version_key",
    # Structured representation
    "DateModel",
    "VersionModel",
    "version_from_dict",
    "version_to_dict",
    # Errors
    "ChronVerError",
    "ComponentRangeError",
    "IntegerParseError",
    "InvalidCalendarDateError",
    "InvalidChangesetError",
    "InvalidChangesetIntegerError",
    "InvalidDateError",
    "InvalidDateIntegerError",
    "InvalidKindError",
    "InvalidKindNameError",
    "InvalidMonthError",
    "MissingDaySeparatorError",
    "MissingMonthSeparatorError",
    "NonAsciiError",
    "NonAsciiKindError",
    "ParseChangesetError",
    "ParseDateError",
    "ParseError",
    "ParseKindError",
    "TooShortError",
    "TrailingDataError",
    "ZeroChangesetError",
    "iter_causes",
]
