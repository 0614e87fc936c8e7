"""
deathday.core.date
------------------
Proleptic Gregorian calendar dates with explicit validation, free-form
day-first parsing and the little bit of arithmetic the predictor needs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .errors import (
    InvalidDayError,
    InvalidMonthError,
    InvalidPartsCountError,
    InvalidYearError,
    NumberConversionError,
    SeparatorNotFoundError,
)

MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

# Order matters: the first separator found in the text wins.
SEPARATORS: Tuple[str, ...] = (".", "/", "-", " ")

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_DIGITS_RE = re.compile(r"[0-9]+")


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and year % 100 != 0 or year % 400 == 0


def max_day(year: int, month: int) -> int:
    """Number of days in the given month."""
    if not 1 <= month <= 12:
        raise InvalidMonthError()
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _LONG_MONTHS:
        return 31
    return 30


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A valid calendar date. Field order gives the (year, month, day)
    lexicographic ordering used for "is in the future" checks.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise InvalidYearError()
        if not 1 <= self.month <= 12:
            raise InvalidMonthError()
        if not 1 <= self.day <= max_day(self.year, self.month):
            raise InvalidDayError()

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def build(cls, year: int, month: int, day: int) -> "CalendarDate":
        """
        Makes a date from a year, month and day.

        Raises InvalidYearError, InvalidMonthError or InvalidDayError,
        checked in that order.
        """
        return cls(year, month, day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Parses a day-first date such as ``23.10.2015``, ``23/10/2015``,
        ``23-10-2015`` or ``23 10 2015``.

        Only the first separator of SEPARATORS present in the text is used
        to split it, so ``23.10/2015`` fails with InvalidPartsCountError.
        """
        sep = next((s for s in SEPARATORS if s in text), None)
        if sep is None:
            raise SeparatorNotFoundError()

        parts = text.split(sep)
        if len(parts) != 3:
            raise InvalidPartsCountError()

        numbers = []
        for part in parts:
            if not _DIGITS_RE.fullmatch(part):
                raise NumberConversionError()
            numbers.append(int(part))

        day, month, year = numbers
        return cls.build(year, month, day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        """Current local date."""
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    # ---------------------------------------------------------
    # Calendar facts
    # ---------------------------------------------------------

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def max_day(self) -> int:
        return max_day(self.year, self.month)

    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def next_day(self) -> "CalendarDate":
        """The following day, rolling over month and year ends."""
        if self.day < self.max_day():
            return CalendarDate(self.year, self.month, self.day + 1)
        if self.month == 12:
            return CalendarDate(self.year + 1, 1, 1)
        return CalendarDate(self.year, self.month + 1, 1)

    def next_month(self) -> "CalendarDate":
        """
        Same day in the following month. The day is clamped to the new
        month's length, so 31 January becomes 28 or 29 February.
        """
        year, month = (self.year + 1, 1) if self.month == 12 else (self.year, self.month + 1)
        return CalendarDate(year, month, min(self.day, max_day(year, month)))

    def years_from(self, other: "CalendarDate") -> int:
        """Number of full years between two dates, in either order."""
        lo, hi = min(self, other), max(self, other)
        diff = hi.year - lo.year
        if (hi.month, hi.day) < (lo.month, lo.day):
            diff -= 1
        return diff

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def to_display_string(self) -> str:
        return f"{self.day} {self.month_name()} {self.year}"

    def __str__(self) -> str:
        return self.to_display_string()
