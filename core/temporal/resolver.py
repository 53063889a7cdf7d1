"""Round partial temporal values down to the earliest instant they can describe.

``2005-03`` becomes 2005-03-01T00:00:00 and ``2005`` becomes 2005-01-01T00:00:00.
Explicit offsets are applied unless the caller asks to ignore them, in which case
the wall-clock fields are read as if they were already UTC.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from core.temporal.partial import (
    Date,
    DateTime,
    OffsetDateTime,
    PartialTemporal,
    Year,
    YearMonth,
)

UTC = dt.timezone.utc
logger = logging.getLogger(__name__)


def to_earliest_local_datetime(
    value: Optional[PartialTemporal], ignore_offset: bool = False
) -> Optional[dt.datetime]:
    """Return the earliest naive UTC datetime consistent with ``value``, or None."""
    if value is None:
        return None

    if not ignore_offset and isinstance(value, OffsetDateTime):
        try:
            return value.to_aware().astimezone(UTC).replace(tzinfo=None)
        except OverflowError:
            # Shifting by the offset left the representable year range.
            logger.debug("Offset %s pushes %r out of range", value.offset_minutes, value)
            return None

    if isinstance(value, DateTime):
        return value.to_naive()

    if isinstance(value, Date):
        day = dt.date(value.year, value.month, value.day)
    elif isinstance(value, YearMonth):
        day = dt.date(value.year, value.month, 1)
    elif isinstance(value, Year):
        day = dt.date(value.year, 1, 1)
    else:
        logger.debug("No usable fields on %r; cannot resolve an instant", value)
        return None
    return dt.datetime.combine(day, dt.time.min)


def to_utc_instant(
    value: Optional[PartialTemporal], ignore_offset: bool = False
) -> Optional[dt.datetime]:
    """Same as :func:`to_earliest_local_datetime` but as an aware UTC datetime."""
    local = to_earliest_local_datetime(value, ignore_offset)
    if local is None:
        return None
    return local.replace(tzinfo=UTC)
