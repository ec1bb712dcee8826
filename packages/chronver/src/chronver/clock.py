# SPDX-License-Identifier: MIT
"""Sources of "today" for version construction and incrementing."""

from __future__ import annotations

import datetime
from typing import Protocol, runtime_checkable

from .date import Date


@runtime_checkable
class Clock(Protocol):
    """Anything that can tell the current calendar date."""

    def today(self) -> Date: ...


class SystemClock:
    """Reads the local calendar date from the wall clock."""

    def today(self) -> Date:
        return Date.from_date(datetime.date.today())

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Always returns the same date. Mostly useful for tests and pinned builds."""

    def __init__(self, date: Date):
        self.date = date

    def today(self) -> Date:
        return self.date

    def __repr__(self) -> str:
        return f"FixedClock({self.date})"


SYSTEM_CLOCK = SystemClock()
