"""
calhijri.engines.grid
---------------------
Month grid builder. Lays out one Hijri month as complete 7-day weeks,
borrowing filler days from the neighbouring months, and overlays the
yearly-recurring Miqaat and DailyDua records on each day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.errors import ConfigError, InvalidDateError
from ..core.types import CalendarDay, DailyDua, Miqaat
from . import navigator
from .hijri import HijriDate, LONG_NAMES, days_in_month

_LOGGER = logging.getLogger(__name__)

MIN_CALENDAR_YEAR = 1000
MAX_CALENDAR_YEAR = 3000

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
ISO_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class GridConfig:
    min_year: int = MIN_CALENDAR_YEAR
    max_year: int = MAX_CALENDAR_YEAR
    iso8601: bool = False  # weeks start on Monday

    def __post_init__(self) -> None:
        # year 1 has no preceding year to borrow filler days from
        if self.min_year < 2:
            raise ConfigError("min_year must be >= 2")
        if self.min_year > self.max_year:
            raise ConfigError("Require min_year <= max_year")


DayKey = Tuple[int, int]  # (0-based month, day)


def _index_miqaats(miqaats: Iterable[Miqaat]) -> Dict[DayKey, Tuple[Miqaat, ...]]:
    # Miqaat months are 1-based
    out: Dict[DayKey, List[Miqaat]] = {}
    for m in miqaats:
        if m.date is None or m.month is None:
            continue
        out.setdefault((m.month - 1, m.date), []).append(m)
    return {k: tuple(v) for k, v in out.items()}


def _index_daily_duas(daily_duas: Iterable[DailyDua]) -> Dict[DayKey, Tuple[DailyDua, ...]]:
    # DailyDua months are already 0-based
    out: Dict[DayKey, List[DailyDua]] = {}
    for d in daily_duas:
        out.setdefault((d.month, d.date), []).append(d)
    return {k: tuple(v) for k, v in out.items()}


class MonthGrid:
    """
    Renderable view of one Hijri month.

    `today` is the reference used for `is_today`; it is resolved from the
    system clock once if not given. Instances are immutable: navigation
    returns new grids sharing the same event records and reference day.
    """

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        *,
        today: Optional[HijriDate] = None,
        miqaats: Iterable[Miqaat] = (),
        daily_duas: Iterable[DailyDua] = (),
        config: Optional[GridConfig] = None,
    ):
        self.config = config if config is not None else GridConfig()
        self.today = today if today is not None else HijriDate.today()
        self.year = self.today.year if year is None else year
        self.month = self.today.month if month is None else month

        if not (self.config.min_year <= self.year <= self.config.max_year):
            raise InvalidDateError(
                f"year {self.year} outside calendar range {self.config.min_year}..{self.config.max_year}"
            )
        if not (0 <= self.month <= 11):
            raise InvalidDateError(f"month must be in 0..11, got {self.month}")

        self.miqaats: Tuple[Miqaat, ...] = tuple(miqaats)
        self.daily_duas: Tuple[DailyDua, ...] = tuple(daily_duas)
        self._miqaat_index = _index_miqaats(self.miqaats)
        self._dua_index = _index_daily_duas(self.daily_duas)

    def __repr__(self) -> str:
        return f"MonthGrid(year={self.year}, month={self.month}, iso8601={self.config.iso8601})"

    @property
    def iso8601(self) -> bool:
        return self.config.iso8601

    @property
    def date(self) -> HijriDate:
        """First day of the month."""
        return HijriDate(self.year, self.month, 1)

    def days_in_month(self) -> int:
        return days_in_month(self.month, self.year)

    def with_month(self, year: int, month: int) -> "MonthGrid":
        """Same events, reference day and config; another month."""
        return MonthGrid(
            year,
            month,
            today=self.today,
            miqaats=self.miqaats,
            daily_duas=self.daily_duas,
            config=self.config,
        )

    # ---------------------------------------------------------
    # Days
    # ---------------------------------------------------------

    def day_of_week(self, day: int) -> int:
        """Column of `day` in the week row: Sunday = 0, or Monday = 0 under iso8601."""
        return _day_of_week(self.year, self.month, day, self.config.iso8601)

    def _build_days(self, year: int, month: int) -> List[CalendarDay]:
        out: List[CalendarDay] = []
        for day in range(1, days_in_month(month, year) + 1):
            date = HijriDate(year, month, day)
            miqaats = self._miqaat_index.get((month, day), ())
            duas = self._dua_index.get((month, day), ())
            if miqaats:
                _LOGGER.debug("miqaat match on %s: %s", date.key, ", ".join(m.name for m in miqaats))
            if duas:
                _LOGGER.debug("daily dua match on %s: %d record(s)", date.key, len(duas))
            out.append(
                CalendarDay(
                    date=date,
                    gregorian=date.to_gregorian(),
                    is_current_month=True,
                    is_today=date == self.today,
                    filler=False,
                    miqaats=miqaats,
                    daily_duas=duas,
                )
            )
        return out

    def days(self) -> List[CalendarDay]:
        return self._build_days(self.year, self.month)

    @staticmethod
    def _as_filler(days: List[CalendarDay]) -> List[CalendarDay]:
        return [replace(d, filler=True, is_current_month=False) for d in days]

    def previous_days(self) -> List[CalendarDay]:
        """Trailing days of the preceding month that share the first week row."""
        n = self.day_of_week(1)
        if n == 0:
            return []
        # Filler is display-only, so it comes from the real adjacent month
        # even when paging is pinned at min_year.
        y, m = (self.year - 1, 11) if self.month == 0 else (self.year, self.month - 1)
        return self._as_filler(self._build_days(y, m)[-n:])

    def next_days(self) -> List[CalendarDay]:
        """Leading days of the following month that complete the last week row."""
        n = 6 - self.day_of_week(self.days_in_month())
        if n == 0:
            return []
        y, m = (self.year + 1, 0) if self.month == 11 else (self.year, self.month + 1)
        return self._as_filler(self._build_days(y, m)[:n])

    def get_days(self) -> List[CalendarDay]:
        return self.previous_days() + self.days() + self.next_days()

    def get_weeks(self) -> List[List[CalendarDay]]:
        days = self.get_days()
        return [days[i:i + 7] for i in range(0, len(days), 7)]

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def previous_month(self) -> "MonthGrid":
        return navigator.previous_month(self).grid

    def next_month(self) -> "MonthGrid":
        return navigator.next_month(self).grid

    def previous_year(self) -> "MonthGrid":
        return navigator.previous_year(self).grid

    def next_year(self) -> "MonthGrid":
        return navigator.next_year(self).grid

    # ---------------------------------------------------------
    # Labels
    # ---------------------------------------------------------

    @property
    def month_name(self) -> str:
        return LONG_NAMES[self.month]

    @property
    def greg_month(self) -> str:
        """
        Gregorian month(s) spanned by this Hijri month, e.g. "January 2025",
        "January / February 2025" or "December 2024 / January 2025".
        """
        spans: List[Tuple[int, int]] = []
        for day in range(1, self.days_in_month() + 1):
            g = HijriDate(self.year, self.month, day).to_gregorian()
            ym = (g.year, g.month)
            if ym not in spans:
                spans.append(ym)

        years = sorted({y for y, _ in spans})
        if len(years) > 1:
            return " / ".join(f"{GREGORIAN_MONTHS[m - 1]} {y}" for y, m in spans)
        names = " / ".join(GREGORIAN_MONTHS[m - 1] for _, m in spans)
        return f"{names} {years[0]}"


def _day_of_week(year: int, month: int, day: int, iso8601: bool) -> int:
    # `day` may run past the month end; the AJD arithmetic stays linear.
    offset = 0.5 if iso8601 else 1.5
    ajd = HijriDate(year, month, 1).to_ajd() + (day - 1)
    return int((ajd + offset) % 7)
