# SPDX-License-Identifier: MIT
"""Chronological version parsing, formatting and ordering.

Format: ``YYYY.MM.DD[.CHANGESET][-KIND]``

- ``2024.04.03``: first release of the day
- ``2024.04.03.12``: thirteenth release of the day
- ``2024.04.03-break``: release with breaking changes
- ``2024.04.03.12-my-feature``: release of a feature branch
"""

from __future__ import annotations

import datetime
import functools
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .changeset import Changeset, changeset_rank
from .clock import SYSTEM_CLOCK, Clock
from .date import Date
from .errors import (
    InvalidChangesetError,
    InvalidDateError,
    InvalidKindError,
    NonAsciiError,
    ParseChangesetError,
    ParseDateError,
    ParseKindError,
    TooShortError,
    TrailingDataError,
)
from .kind import Kind

logger = logging.getLogger(__name__)

# Length of the YYYY.MM.DD date prefix
DATE_LENGTH = 10

CHANGESET_SEPARATOR = "."
KIND_SEPARATOR = "-"

_DIGITS = re.compile(r"[0-9]*")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """A chronological version.

    Versions sort by date, then changeset (absent before 1), then kind
    (regular before breaking before features). Two versions are equal only
    if all three components are equal.

    Attributes:
        date: Release date
        changeset: Release counter within the day, None for the first release
        kind: Release qualifier
    """

    date: Date
    changeset: Optional[Changeset] = None
    kind: Kind = field(default_factory=Kind.regular)

    def __post_init__(self) -> None:
        if not isinstance(self.date, Date):
            raise InvalidDateError(repr(self.date))
        if self.changeset is not None and not isinstance(self.changeset, Changeset):
            raise InvalidChangesetError(repr(self.changeset))
        if not isinstance(self.kind, Kind):
            raise InvalidKindError(repr(self.kind))

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version string.

        Parsing runs left to right without backtracking: ten characters of
        date, then an optional ``.`` followed by the longest run of digits,
        then an optional ``-`` followed by the kind (the rest of the string).

        Args:
            text: Version string

        Returns:
            The parsed Version

        Raises:
            NonAsciiError: If the string contains non-ASCII characters
            TooShortError: If the string is shorter than a date
            InvalidDateError: If the date component is invalid
            InvalidChangesetError: If the changeset component is invalid
            InvalidKindError: If the kind component is invalid
            TrailingDataError: If characters remain that fit no component

        Examples:
            >>> str(Version.parse("2024.04.03.12-my-feature"))
            '2024.04.03.12-my-feature'
        """
        if not text.isascii():
            raise NonAsciiError(text)
        if len(text) < DATE_LENGTH:
            raise TooShortError(text)

        try:
            date = Date.parse(text[:DATE_LENGTH])
        except ParseDateError as e:
            raise InvalidDateError(text) from e

        rest = text[DATE_LENGTH:]

        changeset: Optional[Changeset] = None
        if rest.startswith(CHANGESET_SEPARATOR):
            rest = rest[len(CHANGESET_SEPARATOR) :]
            end = _DIGITS.match(rest).end()
            try:
                changeset = Changeset.parse(rest[:end])
            except ParseChangesetError as e:
                raise InvalidChangesetError(text) from e
            rest = rest[end:]

        kind = Kind.regular()
        if rest.startswith(KIND_SEPARATOR):
            try:
                kind = Kind.parse(rest[len(KIND_SEPARATOR) :])
            except ParseKindError as e:
                raise InvalidKindError(text) from e
        elif rest:
            raise TrailingDataError(text)

        return cls(date, changeset, kind)

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> "Version":
        """Return the first regular version of the current day."""
        clock = clock or SYSTEM_CLOCK
        return cls(clock.today())

    @classmethod
    def from_date(cls, date: Union[Date, datetime.date]) -> "Version":
        """Return the first regular version of ``date``."""
        if not isinstance(date, Date):
            date = Date.from_date(date)
        return cls(date)

    def increment(self, clock: Optional[Clock] = None) -> "Version":
        """Return the version that follows this one.

        On a new day the changeset is dropped; on the same day it is bumped
        (an absent changeset becomes 1). The kind is always reset to regular.

        Args:
            clock: Source of the current date (defaults to the system clock)

        Returns:
            A new Version; this one is left untouched
        """
        clock = clock or SYSTEM_CLOCK
        today = clock.today()

        changeset: Optional[Changeset]
        if today == self.date:
            changeset = Changeset(1) if self.changeset is None else self.changeset.checked_add(1)
        else:
            if today < self.date:
                logger.warning("Current date %s is before version date %s", today, self.date)
            changeset = None

        incremented = Version(today, changeset, Kind.regular())
        logger.debug("Incremented %s to %s", self, incremented)
        return incremented

    @property
    def is_breaking(self) -> bool:
        """Return True if this release introduces breaking changes."""
        return self.kind.is_breaking

    def sort_key(self) -> tuple[Date, int, tuple[int, str]]:
        """Return the tuple this version is ordered by."""
        return (self.date, changeset_rank(self.changeset), self.kind.sort_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        version = str(self.date)
        if self.changeset is not None:
            version += f"{CHANGESET_SEPARATOR}{self.changeset}"
        if not self.kind.is_regular:
            version += f"{KIND_SEPARATOR}{self.kind}"
        return version

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Accepted as a version string (or an existing Version), dumped as a string
        from_str = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
