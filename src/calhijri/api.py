from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from .core.types import CalendarDay, CivilDateTime, DailyDua, Miqaat
from .engines.grid import GridConfig, MonthGrid
from .engines.hijri import HijriDate, SHORT_NAMES, days_in_month

_LOGGER = logging.getLogger(__name__)


def to_hijri(d: Union[date, datetime, CivilDateTime]) -> HijriDate:
    return HijriDate.from_gregorian(d)

def to_gregorian(h: HijriDate) -> CivilDateTime:
    return h.to_gregorian()

def today(now: Optional[datetime] = None) -> HijriDate:
    return HijriDate.today(now)

def month_grid(
    year: Optional[int] = None,
    month: Optional[int] = None,
    *,
    today: Optional[HijriDate] = None,
    miqaats: Iterable[Miqaat] = (),
    daily_duas: Iterable[DailyDua] = (),
    config: Optional[GridConfig] = None,
) -> MonthGrid:
    return MonthGrid(year, month, today=today, miqaats=miqaats, daily_duas=daily_duas, config=config)

def month_weeks(
    year: Optional[int] = None,
    month: Optional[int] = None,
    *,
    today: Optional[HijriDate] = None,
    miqaats: Iterable[Miqaat] = (),
    daily_duas: Iterable[DailyDua] = (),
    config: Optional[GridConfig] = None,
) -> List[List[CalendarDay]]:
    return month_grid(year, month, today=today, miqaats=miqaats, daily_duas=daily_duas, config=config).get_weeks()

def hijri_range(start: HijriDate, end: HijriDate) -> List[HijriDate]:
    """Every date from start to end inclusive, in either argument order."""
    lo, hi = (start, end) if start <= end else (end, start)
    span = int(hi.to_ajd() - lo.to_ajd())
    return [lo.shift(i) for i in range(span + 1)]

def upcoming_miqaats(
    miqaats: Iterable[Miqaat],
    *,
    today: Optional[HijriDate] = None,
    limit: Optional[int] = 10,
) -> List[Miqaat]:
    """
    Important Miqaats still ahead in the current Hijri year, soonest first.
    """
    ref = today if today is not None else HijriDate.today()
    found = []
    for m in miqaats:
        if not m.important or m.date is None or m.month is None:
            continue
        if not (1 <= m.month <= 12 and 1 <= m.date <= days_in_month(m.month - 1, ref.year)):
            _LOGGER.debug("skipping miqaat %s: %s/%s does not exist in %d", m.id, m.date, m.month, ref.year)
            continue
        when = HijriDate.from_miqaat(m, ref.year)
        if when > ref:
            found.append((when, m))
    found.sort(key=lambda t: t[0])
    out = [m for _, m in found]
    return out if limit is None else out[:limit]

def miqaat_label(date: Optional[int], month: Optional[int]) -> str:
    """'10 Rabi I' from a Miqaat's day and 1-based month."""
    if not date or not month or not 1 <= month <= 12:
        return "-"
    return f"{date} {SHORT_NAMES[month - 1]}"
