"""Partial temporal values: dates and times known only down to some granularity.

A source may tell us only the year an observation was made, or the year and the
month, or a full timestamp with a UTC offset.  Each shape is modelled as its own
frozen dataclass carrying exactly the fields it knows, so "is this field
present" is answered by the type rather than by a runtime query.  Constructors
validate ranges eagerly; once built, a value is always internally consistent
and the comparison code in this package never has to guard against it.
"""

from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Offsets beyond +/-18h are not representable by any real zone.
MAX_OFFSET_MINUTES = 18 * 60
MIN_YEAR = dt.MINYEAR
MAX_YEAR = dt.MAXYEAR


class InvalidPartialTemporal(ValueError):
    """Raised when a partial temporal value cannot be constructed from its fields."""


class Granularity(str, Enum):
    YEAR = "year"
    YEAR_MONTH = "year_month"
    DATE = "date"
    DATE_TIME = "date_time"
    OFFSET_DATE_TIME = "offset_date_time"


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidPartialTemporal(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise InvalidPartialTemporal(f"{name}={value} outside [{low}, {high}]")


@dataclass(frozen=True)
class Year:
    year: int

    def __post_init__(self) -> None:
        _check_range("year", self.year, MIN_YEAR, MAX_YEAR)

    @property
    def granularity(self) -> Granularity:
        return Granularity.YEAR


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        _check_range("year", self.year, MIN_YEAR, MAX_YEAR)
        _check_range("month", self.month, 1, 12)

    @property
    def granularity(self) -> Granularity:
        return Granularity.YEAR_MONTH


@dataclass(frozen=True)
class Date:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_range("year", self.year, MIN_YEAR, MAX_YEAR)
        _check_range("month", self.month, 1, 12)
        _check_range("day", self.day, 1, calendar.monthrange(self.year, self.month)[1])

    @property
    def granularity(self) -> Granularity:
        return Granularity.DATE


@dataclass(frozen=True)
class DateTime:
    """Naive wall-clock date-time.  ``millisecond`` is None when the source did not give one."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0
    millisecond: Optional[int] = None

    def __post_init__(self) -> None:
        _check_range("year", self.year, MIN_YEAR, MAX_YEAR)
        _check_range("month", self.month, 1, 12)
        _check_range("day", self.day, 1, calendar.monthrange(self.year, self.month)[1])
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        _check_range("second", self.second, 0, 59)
        if self.millisecond is not None:
            _check_range("millisecond", self.millisecond, 0, 999)

    @property
    def granularity(self) -> Granularity:
        return Granularity.DATE_TIME

    def to_naive(self) -> dt.datetime:
        return dt.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            (self.millisecond or 0) * 1000,
        )


@dataclass(frozen=True)
class OffsetDateTime(DateTime):
    """A :class:`DateTime` observed at a fixed UTC offset, expressed in minutes east of UTC."""

    offset_minutes: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_range("offset_minutes", self.offset_minutes, -MAX_OFFSET_MINUTES, MAX_OFFSET_MINUTES)

    @property
    def granularity(self) -> Granularity:
        return Granularity.OFFSET_DATE_TIME

    @property
    def tzinfo(self) -> dt.timezone:
        return dt.timezone(dt.timedelta(minutes=self.offset_minutes))

    def to_aware(self) -> dt.datetime:
        return self.to_naive().replace(tzinfo=self.tzinfo)


PartialTemporal = Union[Year, YearMonth, Date, DateTime, OffsetDateTime]


def year(value: int) -> Year:
    return Year(value)


def year_month(year_value: int, month: int) -> YearMonth:
    return YearMonth(year_value, month)


def date(year_value: int, month: int, day: int) -> Date:
    return Date(year_value, month, day)


def date_time(
    year_value: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int = 0,
    millisecond: Optional[int] = None,
) -> DateTime:
    return DateTime(year_value, month, day, hour, minute, second, millisecond)


def offset_date_time(
    year_value: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int = 0,
    millisecond: Optional[int] = None,
    offset_minutes: int = 0,
) -> OffsetDateTime:
    return OffsetDateTime(year_value, month, day, hour, minute, second, millisecond, offset_minutes)


def from_python(value: Union[dt.date, dt.datetime]) -> PartialTemporal:
    """Adapt a stdlib date or datetime.

    Aware datetimes keep their offset, which must be a whole number of minutes.
    Microseconds are truncated to milliseconds, and a sub-second part below one
    millisecond is treated as "not specified" so that ``datetime(2005, 1, 1, 10, 0)``
    ranks as a plain date-time rather than a millisecond-precise one.
    """
    if isinstance(value, dt.datetime):
        millisecond = value.microsecond // 1000 or None
        offset = value.utcoffset()
        fields = (value.year, value.month, value.day, value.hour, value.minute, value.second, millisecond)
        if offset is None:
            return DateTime(*fields)
        offset_seconds = offset.total_seconds()
        if offset_seconds % 60:
            raise InvalidPartialTemporal(f"offset {offset} is not a whole number of minutes")
        return OffsetDateTime(*fields, offset_minutes=int(offset_seconds // 60))
    if isinstance(value, dt.date):
        return Date(value.year, value.month, value.day)
    raise InvalidPartialTemporal(f"cannot adapt {type(value).__name__} to a partial temporal value")


def from_fields(
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    hour: Optional[int] = None,
    minute: Optional[int] = None,
    second: Optional[int] = None,
    millisecond: Optional[int] = None,
    offset_minutes: Optional[int] = None,
) -> PartialTemporal:
    """Build the narrowest variant holding a contiguous run of fields.

    Fields must be filled from the year downwards: a day without a month, or a
    second without a minute, is rejected.  Time-of-day needs at least hour and
    minute; an offset needs a time-of-day.
    """
    if year is None:
        raise InvalidPartialTemporal("year is required")
    chain = (("month", month), ("day", day), ("hour", hour), ("minute", minute), ("second", second), ("millisecond", millisecond))
    missing: Optional[str] = None
    for name, value in chain:
        if value is None:
            missing = missing or name
        elif missing is not None:
            raise InvalidPartialTemporal(f"{name} given without {missing}")

    if hour is not None and minute is None:
        raise InvalidPartialTemporal("hour given without minute")
    if offset_minutes is not None and hour is None:
        raise InvalidPartialTemporal("offset given without a time of day")

    if month is None:
        return Year(year)
    if day is None:
        return YearMonth(year, month)
    if hour is None:
        return Date(year, month, day)
    if offset_minutes is None:
        return DateTime(year, month, day, hour, minute, second or 0, millisecond)
    return OffsetDateTime(year, month, day, hour, minute, second or 0, millisecond, offset_minutes)


def to_fields(value: PartialTemporal) -> dict:
    """Inverse of :func:`from_fields`: the specified fields only."""
    fields = {"year": value.year}
    for name in ("month", "day", "hour", "minute", "second", "millisecond", "offset_minutes"):
        field_value = getattr(value, name, None)
        if field_value is not None:
            fields[name] = field_value
    return fields
