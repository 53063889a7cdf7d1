"""Compare partial temporal values that may describe the same point in time.

Two questions are answered here.  :func:`best_resolution` picks, out of two
values that do not contradict each other, the one that says more (``2005-01``
versus ``2005-01-01`` gives ``2005-01-01``).  :func:`same_or_contained` checks
whether two values name the same calendar date or whether the coarser one
contains the finer one; it never looks below the day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.temporal.atomize import COMPARED_FIELDS, atomize, atomize_date
from core.temporal.partial import PartialTemporal

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    RESOLVED = "RESOLVED"
    ABSENT = "ABSENT"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of :func:`best_resolution`.

    ``value`` is set only when ``outcome`` is RESOLVED and is always one of the
    two inputs.  ``conflicting_field`` names the first field both inputs
    specified with different values.
    """

    outcome: Outcome
    value: Optional[PartialTemporal] = None
    conflicting_field: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.outcome is Outcome.RESOLVED

    def __bool__(self) -> bool:
        return self.is_resolved


ABSENT = ResolutionResult(Outcome.ABSENT)


def best_resolution(
    first: Optional[PartialTemporal], second: Optional[PartialTemporal]
) -> ResolutionResult:
    """Return the more precise of two non-contradicting values.

    A value always beats a missing one.  When both are present, every field
    specified by both must agree, otherwise the result is a CONFLICT.  Between
    agreeing values the higher resolution wins; on a tie ``second`` is returned.
    """
    if first is None and second is None:
        return ABSENT
    if first is None:
        return ResolutionResult(Outcome.RESOLVED, second)
    if second is None:
        return ResolutionResult(Outcome.RESOLVED, first)

    left = atomize(first)
    right = atomize(second)
    for name in COMPARED_FIELDS:
        left_value = getattr(left, name)
        right_value = getattr(right, name)
        if left_value is not None and right_value is not None and left_value != right_value:
            logger.debug("Values %r and %r conflict on %s", first, second, name)
            return ResolutionResult(Outcome.CONFLICT, conflicting_field=name)

    if left.resolution > right.resolution:
        return ResolutionResult(Outcome.RESOLVED, first)
    return ResolutionResult(Outcome.RESOLVED, second)


def same_or_contained(first: Optional[PartialTemporal], second: Optional[PartialTemporal]) -> bool:
    """Return True when both values name the same date or one contains the other.

    Comparison stops at the finest date field both sides specify, so ``2005``
    contains ``2005-03`` and ``2005-01`` contains ``2005-01-15``.  A missing
    value yields False.
    """
    if first is None or second is None:
        return False

    left = atomize_date(first)
    right = atomize_date(second)

    if left.is_complete and right.is_complete:
        return left == right

    if left.year != right.year:
        return False

    if left.month is None or right.month is None:
        return True
    if left.month != right.month:
        return False

    if left.day is None or right.day is None:
        return True
    return left.day == right.day
