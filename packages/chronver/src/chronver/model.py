# SPDX-License-Identifier: MIT
"""Structured (interchange) representation of chronological versions.

    {"date": {"year": 2024, "month": 4, "day": 3}, "changeset": 12, "kind": "break"}

An absent changeset and a regular kind are omitted rather than written as
null, so converting back yields exactly the same Version.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .changeset import MAX_CHANGESET, Changeset
from .date import MAX_YEAR, MIN_YEAR, Date
from .kind import Kind
from .version import Version


class DateModel(BaseModel):
    """Calendar date components."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(ge=MIN_YEAR, le=MAX_YEAR)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _check_calendar_date(self) -> "DateModel":
        self.to_date()
        return self

    @classmethod
    def from_date(cls, date: Date) -> "DateModel":
        return cls(year=date.year, month=date.month, day=date.day)

    def to_date(self) -> Date:
        return Date(self.year, self.month, self.day)


class VersionModel(BaseModel):
    """A chronological version broken into its components."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date: DateModel
    changeset: Optional[int] = Field(
        default=None,
        gt=0,
        le=MAX_CHANGESET,
        description="Release counter within the day; omitted for the first release",
    )
    kind: Optional[str] = Field(
        default=None,
        min_length=1,
        description='"break" or a feature name; omitted for regular releases',
    )

    @model_validator(mode="after")
    def _check_kind(self) -> "VersionModel":
        if self.kind is not None:
            Kind.parse(self.kind)
        return self

    @classmethod
    def from_version(cls, version: Version) -> "VersionModel":
        return cls(
            date=DateModel.from_date(version.date),
            changeset=None if version.changeset is None else version.changeset.value,
            kind=None if version.kind.is_regular else str(version.kind),
        )

    def to_version(self) -> Version:
        return Version(
            self.date.to_date(),
            None if self.changeset is None else Changeset(self.changeset),
            Kind.regular() if self.kind is None else Kind.parse(self.kind),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the structured form with absent components left out."""
        return self.model_dump(exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(exclude_none=True, indent=indent)


def version_to_dict(version: Version) -> dict[str, Any]:
    """Convert a Version to its structured dictionary form."""
    return VersionModel.from_version(version).to_dict()


def version_from_dict(data: dict[str, Any]) -> Version:
    """Build a Version from its structured dictionary form.

    Raises:
        pydantic.ValidationError: If the data is malformed or out of range
    """
    return VersionModel.model_validate(data).to_version()
