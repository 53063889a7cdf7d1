from __future__ import annotations

from core.temporal.atomize import ResolutionRank, atomize, atomize_date
from core.temporal.partial import date, date_time, offset_date_time, year, year_month


def test_atomize_reports_only_specified_fields():
    atoms = atomize(year_month(2005, 1))
    assert (atoms.year, atoms.month) == (2005, 1)
    assert atoms.day is None
    assert atoms.hour is None
    assert atoms.millisecond is None
    assert atoms.resolution is ResolutionRank.YEAR_MONTH


def test_resolution_rank_increases_with_specificity():
    ranks = [
        atomize(year(2005)).resolution,
        atomize(year_month(2005, 1)).resolution,
        atomize(date(2005, 1, 1)).resolution,
        atomize(date_time(2005, 1, 1, 0, 0)).resolution,
        atomize(date_time(2005, 1, 1, 0, 0, 0, 5)).resolution,
        atomize(offset_date_time(2005, 1, 1, 0, 0)).resolution,
        atomize(offset_date_time(2005, 1, 1, 0, 0, 0, 5)).resolution,
    ]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)


def test_atomize_date_drops_time_of_day():
    atoms = atomize_date(date_time(2005, 1, 2, 3, 4))
    assert (atoms.year, atoms.month, atoms.day) == (2005, 1, 2)
    assert atoms.is_complete


def test_partial_dates_are_not_complete():
    assert not atomize_date(year(2005)).is_complete
    assert not atomize_date(year_month(2005, 1)).is_complete
