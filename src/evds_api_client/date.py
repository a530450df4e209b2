"""Single dates, date ranges and the date preference union."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import TypeAlias

from .config import DATE_RANGE_SEPARATOR
from .core.errors import EvdsValidationError, ReturnError

_DATE_PATTERN = re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(slots=True, frozen=True)
class Date:
    """Calendar day rendered as ``DD-MM-YYYY``."""

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not (1 <= self.year <= 9999 and 1 <= self.month <= 12):
            raise EvdsValidationError(
                ReturnError.INVALID_DATE_VALUE,
                field="date",
                value=self._unchecked_render(),
            )
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise EvdsValidationError(
                ReturnError.INVALID_DATE_VALUE,
                field="date",
                value=self._unchecked_render(),
            )

    @classmethod
    def from_text(cls, text: str, *, field: str = "date") -> "Date":
        if not isinstance(text, str):
            raise EvdsValidationError(ReturnError.INVALID_DATE_FORMAT, field=field, value=text)
        match = _DATE_PATTERN.fullmatch(text)
        if match is None:
            raise EvdsValidationError(ReturnError.INVALID_DATE_FORMAT, field=field, value=text)
        day, month, year = (int(part) for part in match.groups())
        try:
            return cls(day=day, month=month, year=year)
        except EvdsValidationError as exc:
            raise EvdsValidationError(
                ReturnError.INVALID_DATE_VALUE,
                field=field,
                value=text,
            ) from exc

    @classmethod
    def from_date(cls, value: dt.date) -> "Date":
        return cls(day=value.day, month=value.month, year=value.year)

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def render(self) -> str:
        return self._unchecked_render()

    def _unchecked_render(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True, frozen=True)
class DateRange:
    """Inclusive range of two dates; equal start and end is a one-day range."""

    start: Date
    end: Date

    def __post_init__(self) -> None:
        if self.start.to_date() > self.end.to_date():
            raise EvdsValidationError(
                ReturnError.INVALID_DATE_RANGE,
                field="date_range",
                value=f"{self.start} > {self.end}",
            )

    @classmethod
    def from_text(cls, start: str, end: str) -> "DateRange":
        return cls(
            start=Date.from_text(start, field="start_date"),
            end=Date.from_text(end, field="end_date"),
        )

    def render(self) -> str:
        return f"{self.start}{DATE_RANGE_SEPARATOR} {self.end}"

    def __str__(self) -> str:
        return self.render()


DatePreference: TypeAlias = Date | DateRange


def date_bounds(preference: DatePreference) -> tuple[Date, Date]:
    """Return the ``(start, end)`` pair sent to the service."""

    if isinstance(preference, Date):
        return preference, preference
    if isinstance(preference, DateRange):
        return preference.start, preference.end
    raise TypeError(f"date preference must be Date or DateRange, not {type(preference).__name__}")


def parse_date_preference(text: str, *, field: str = "date") -> DatePreference:
    """Parse ``DD-MM-YYYY`` or ``DD-MM-YYYY, DD-MM-YYYY`` text."""

    if not isinstance(text, str):
        raise EvdsValidationError(ReturnError.INVALID_DATE_FORMAT, field=field, value=text)
    parts = [part.strip() for part in text.split(DATE_RANGE_SEPARATOR)]
    if len(parts) == 1:
        return Date.from_text(parts[0], field=field)
    if len(parts) == 2:
        return DateRange.from_text(parts[0], parts[1])
    raise EvdsValidationError(ReturnError.INVALID_DATE_FORMAT, field=field, value=text)


__all__ = [
    "Date",
    "DateRange",
    "DatePreference",
    "is_leap_year",
    "days_in_month",
    "date_bounds",
    "parse_date_preference",
]
