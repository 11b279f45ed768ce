"""
calhijri.engines.hijri
----------------------
Tabular (arithmetic) Hijri calendar: a fixed 30-year leap cycle with
alternating 30/29-day months, anchored on the AJD epoch 1948083.5.

Months are 0-based (0 = Moharram). Year 0 of the table precedes 1 AH, so
the day-count offsets below are measured from the start of year 0.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.errors import InvalidDateError
from ..core.time import ajd_to_gregorian, datetime_to_ajd
from ..core.types import CivilDateTime, Miqaat

EPOCH_AJD = 1948083.5
DAYS_IN_CYCLE = 10631
YEARS_IN_CYCLE = 30

LEAP_YEAR_REMAINDERS = frozenset({2, 5, 8, 10, 13, 16, 19, 21, 24, 27, 29})

# Days before each month within a year.
MONTH_STARTS = (0, 30, 59, 89, 118, 148, 177, 207, 236, 266, 295, 325)

# Days before each year within a 30-year cycle.
CYCLE_YEAR_STARTS = (
    0, 354, 708, 1063, 1417, 1771, 2126, 2480, 2834, 3189,
    3543, 3898, 4252, 4606, 4961, 5315, 5669, 6024, 6378, 6732,
    7087, 7441, 7796, 8150, 8504, 8859, 9213, 9567, 9922, 10276,
)

LONG_NAMES = (
    "Moharram al-Haraam",
    "Safar al-Muzaffar",
    "Rabi al-Awwal",
    "Rabi al-Aakhar",
    "Jumada al-Ula",
    "Jumada al-Ukhra",
    "Rajab al-Asab",
    "Shabaan al-Karim",
    "Ramadaan al-Moazzam",
    "Shawwal al-Mukarram",
    "Zilqadah al-Haraam",
    "Zilhaj al-Haraam",
)

SHORT_NAMES = (
    "Moharram", "Safar", "Rabi I", "Rabi II", "Jumada I", "Jumada II",
    "Rajab", "Shabaan", "Ramadaan", "Shawwal", "Zilqadah", "Zilhaj",
)

ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_TO_ARABIC = str.maketrans("0123456789", ARABIC_DIGITS)


def is_leap_year(year: int) -> bool:
    """Kabisa year: 355 days, Zilhaj has 30."""
    return year % YEARS_IN_CYCLE in LEAP_YEAR_REMAINDERS


def days_in_month(month: int, year: int) -> int:
    if month == 11 and is_leap_year(year):
        return 30
    return 30 if month % 2 == 0 else 29


def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def arabic_digits(value: Union[int, str]) -> str:
    """ASCII digits -> Arabic-Indic digits; other characters pass through."""
    return str(value).translate(_TO_ARABIC)


def _check_int(name: str, v: object) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidDateError(f"{name} must be an int, got {v!r}")


@dataclass(frozen=True, order=True)
class HijriDate:
    year: int
    month: int  # 0..11
    day: int

    def __post_init__(self) -> None:
        _check_int("year", self.year)
        _check_int("month", self.month)
        _check_int("day", self.day)
        if self.year < 1:
            raise InvalidDateError(f"year must be >= 1, got {self.year}")
        if not (0 <= self.month <= 11):
            raise InvalidDateError(f"month must be in 0..11, got {self.month}")
        dim = days_in_month(self.month, self.year)
        if not (1 <= self.day <= dim):
            raise InvalidDateError(
                f"day must be in 1..{dim} for {SHORT_NAMES[self.month]} {self.year}, got {self.day}"
            )

    # ---------------------------------------------------------
    # Calendar rules
    # ---------------------------------------------------------

    is_leap_year = staticmethod(is_leap_year)

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.month, self.year)

    def day_of_year(self) -> int:
        """1-based ordinal within the year."""
        return MONTH_STARTS[self.month] + self.day

    # ---------------------------------------------------------
    # AJD bridge
    # ---------------------------------------------------------

    def to_ajd(self) -> float:
        cycles, year_in_cycle = divmod(self.year, YEARS_IN_CYCLE)
        return EPOCH_AJD + cycles * DAYS_IN_CYCLE + CYCLE_YEAR_STARTS[year_in_cycle] + self.day_of_year()

    @classmethod
    def from_ajd(cls, ajd: float) -> "HijriDate":
        """
        Inverse of to_ajd. Any time of day inside [x.5, x+1.5) maps to the
        same date.
        """
        # 0-based day offset from the first day of year 0
        k = math.floor(ajd - EPOCH_AJD) - 1
        cycles, k = divmod(k, DAYS_IN_CYCLE)

        year_in_cycle = bisect_right(CYCLE_YEAR_STARTS, k) - 1
        k -= CYCLE_YEAR_STARTS[year_in_cycle]

        month = bisect_right(MONTH_STARTS, k) - 1
        day = k - MONTH_STARTS[month] + 1
        return cls(cycles * YEARS_IN_CYCLE + year_in_cycle, month, day)

    @classmethod
    def from_gregorian(cls, d: Union[date, datetime, CivilDateTime]) -> "HijriDate":
        return cls.from_ajd(datetime_to_ajd(d))

    def to_gregorian(self) -> CivilDateTime:
        return ajd_to_gregorian(self.to_ajd())

    def to_date(self) -> date:
        return self.to_gregorian().to_date()

    def shift(self, days: int) -> "HijriDate":
        return HijriDate.from_ajd(self.to_ajd() + days)

    def weekday(self, iso8601: bool = False) -> int:
        """Sunday = 0, or Monday = 0 when iso8601."""
        offset = 0.5 if iso8601 else 1.5
        return int((self.to_ajd() + offset) % 7)

    # ---------------------------------------------------------
    # "Now"
    # ---------------------------------------------------------

    @classmethod
    def today(cls, now: Optional[datetime] = None) -> "HijriDate":
        """Date at the given wall-clock moment (default: datetime.now())."""
        return cls.from_gregorian(now if now is not None else datetime.now())

    def is_today(self, today: Optional["HijriDate"] = None) -> bool:
        return self == (today if today is not None else HijriDate.today())

    @classmethod
    def from_miqaat(cls, miqaat: Miqaat, year: int) -> "HijriDate":
        if miqaat.date is None or miqaat.month is None:
            raise InvalidDateError(f"Miqaat {miqaat.id} has no date")
        return cls(year, miqaat.month - 1, miqaat.date)

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    @property
    def month_name(self) -> str:
        return SHORT_NAMES[self.month]

    @property
    def month_full_name(self) -> str:
        return LONG_NAMES[self.month]

    def get_month_name(self, month: Optional[int] = None) -> str:
        return LONG_NAMES[self.month if month is None else month]

    def get_short_month_name(self, month: Optional[int] = None) -> str:
        return SHORT_NAMES[self.month if month is None else month]

    def formatted(self) -> str:
        return f"{self.day} {self.month_name} {self.year}"

    def to_arabic(self) -> str:
        return arabic_digits(self.day)

    @property
    def key(self) -> str:
        """Selection key, day-month-year."""
        return f"{self.day}-{self.month}-{self.year}"

    @classmethod
    def from_key(cls, key: str) -> "HijriDate":
        try:
            day, month, year = (int(p) for p in key.split("-"))
        except ValueError as e:
            raise InvalidDateError(f"Malformed date key {key!r}") from e
        return cls(year, month, day)

    def __str__(self) -> str:
        return self.formatted()
