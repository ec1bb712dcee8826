# SPDX-License-Identifier: MIT
"""Changeset counter of a chronological version.

A changeset tells apart several releases made on the same day. The first
release of a day has no changeset at all; an explicit changeset is always
positive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import (
    ComponentRangeError,
    IntegerParseError,
    InvalidChangesetIntegerError,
    ZeroChangesetError,
    is_plain_int,
    parse_uint,
)

# Largest representable changeset (unsigned 32 bit)
MAX_CHANGESET = 2**32 - 1


@dataclass(frozen=True, order=True, slots=True)
class Changeset:
    """A strictly positive changeset number.

    Attributes:
        value: Changeset number (1 to MAX_CHANGESET)

    Raises:
        ZeroChangesetError: If value is 0
        InvalidChangesetIntegerError: If value is not an int, is negative or is above
            MAX_CHANGESET
    """

    value: int

    def __post_init__(self) -> None:
        if not is_plain_int(self.value):
            raise InvalidChangesetIntegerError(repr(self.value))
        if self.value == 0:
            raise ZeroChangesetError("0")
        if not 0 < self.value <= MAX_CHANGESET:
            raise InvalidChangesetIntegerError(str(self.value)) from ComponentRangeError(
                "changeset", self.value, 1, MAX_CHANGESET
            )

    @classmethod
    def parse(cls, text: str) -> "Changeset":
        """Parse a plain decimal string into a Changeset.

        Raises:
            InvalidChangesetIntegerError: If the text is not a plain decimal integer
            ZeroChangesetError: If the integer is 0 (including ``"00"``)

        Examples:
            >>> Changeset.parse("12")
            Changeset(value=12)
        """
        try:
            value = parse_uint(text, MAX_CHANGESET)
        except IntegerParseError as e:
            raise InvalidChangesetIntegerError(text) from e

        if value == 0:
            raise ZeroChangesetError(text)

        return cls(value)

    def checked_add(self, amount: int) -> "Changeset":
        """Return a new Changeset increased by ``amount``, saturating at MAX_CHANGESET."""
        return Changeset(max(1, min(self.value + amount, MAX_CHANGESET)))

    def __str__(self) -> str:
        return str(self.value)


def changeset_rank(changeset: Optional[Changeset]) -> int:
    """Return the ordering rank of an optional changeset (absent ranks as 0)."""
    return 0 if changeset is None else changeset.value
