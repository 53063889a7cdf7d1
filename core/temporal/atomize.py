"""Flatten partial temporal values into nullable field records used for comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from core.temporal.partial import (
    Date,
    DateTime,
    OffsetDateTime,
    PartialTemporal,
    YearMonth,
)


class ResolutionRank(IntEnum):
    """Total order over how much of a point in time a value pins down."""

    YEAR = 1
    YEAR_MONTH = 2
    DATE = 3
    DATE_TIME = 4
    DATE_TIME_MILLIS = 5
    OFFSET_DATE_TIME = 6
    OFFSET_DATE_TIME_MILLIS = 7


@dataclass(frozen=True)
class AtomizedDateTime:
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    hour: Optional[int]
    minute: Optional[int]
    second: Optional[int]
    millisecond: Optional[int]
    resolution: ResolutionRank


@dataclass(frozen=True)
class AtomizedDate:
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None and self.day is not None


COMPARED_FIELDS = ("year", "month", "day", "hour", "minute", "second", "millisecond")


def _rank(value: PartialTemporal) -> ResolutionRank:
    if isinstance(value, OffsetDateTime):
        if value.millisecond is None:
            return ResolutionRank.OFFSET_DATE_TIME
        return ResolutionRank.OFFSET_DATE_TIME_MILLIS
    if isinstance(value, DateTime):
        if value.millisecond is None:
            return ResolutionRank.DATE_TIME
        return ResolutionRank.DATE_TIME_MILLIS
    if isinstance(value, Date):
        return ResolutionRank.DATE
    if isinstance(value, YearMonth):
        return ResolutionRank.YEAR_MONTH
    return ResolutionRank.YEAR


def atomize(value: PartialTemporal) -> AtomizedDateTime:
    """Report every field the value specifies, and None for the rest.

    The offset is not part of the record; values are compared on their
    wall-clock fields only.
    """
    return AtomizedDateTime(
        year=value.year,
        month=getattr(value, "month", None),
        day=getattr(value, "day", None),
        hour=getattr(value, "hour", None),
        minute=getattr(value, "minute", None),
        second=getattr(value, "second", None),
        millisecond=getattr(value, "millisecond", None),
        resolution=_rank(value),
    )


def atomize_date(value: PartialTemporal) -> AtomizedDate:
    """Date-only view; time-of-day fields are dropped."""
    return AtomizedDate(
        year=value.year,
        month=getattr(value, "month", None),
        day=getattr(value, "day", None),
    )
