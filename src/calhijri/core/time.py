"""
calhijri.core.time
------------------
Day-count bridge between civil (Julian/Gregorian) dates and the continuous
Astronomical Julian Day (AJD). Wall-clock components in, wall-clock
components out: no timezone shift is applied anywhere.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Union

from .types import CivilDateTime

# First JDN of the Gregorian calendar (1582-10-15).
GREGORIAN_CUTOVER_JDN = 2299161

DateLike = Union[date, datetime, CivilDateTime]


def is_julian(year: int, month: int, day: int) -> bool:
    """True for dates before 1582-10-15 (month is 1-based); the reform gap counts as Julian."""
    if year < 1582:
        return True
    if year == 1582:
        if month < 10:
            return True
        if month == 10 and day < 15:
            return True
    return False


def gregorian_to_ajd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> float:
    """
    Civil date -> AJD (Meeus, ch. 7).

    Dates inside the 1582 reform gap are read as Julian.
    """
    julian = is_julian(year, month, day)
    frac_day = (
        day
        + hour / 24
        + minute / 1440
        + second / 86400
        + microsecond / 86_400_000_000
    )

    y, m = year, month
    if m < 3:
        y -= 1
        m += 12

    if julian:
        b = 0
    else:
        a = y // 100
        b = 2 - a + a // 4

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + frac_day + b - 1524.5


def ajd_to_gregorian(ajd: float) -> CivilDateTime:
    """AJD -> civil date; Julian components before the 1582 cutover."""
    z = math.floor(ajd + 0.5)
    f = ajd + 0.5 - z

    if z < GREGORIAN_CUTOVER_JDN:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(0.25 * alpha)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    # Round the day fraction to whole microseconds; never carry into the next day.
    us = min(round(f * 86_400_000_000), 86_400_000_000 - 1)
    hour, us = divmod(us, 3_600_000_000)
    minute, us = divmod(us, 60_000_000)
    second, microsecond = divmod(us, 1_000_000)

    return CivilDateTime(int(year), int(month), int(day), int(hour), int(minute), int(second), int(microsecond))


def civil_to_ajd(c: CivilDateTime) -> float:
    return gregorian_to_ajd(c.year, c.month, c.day, c.hour, c.minute, c.second, c.microsecond)


def datetime_to_ajd(d: DateLike) -> float:
    """date / datetime / CivilDateTime -> AJD using the wall-clock components."""
    if isinstance(d, CivilDateTime):
        return civil_to_ajd(d)
    return civil_to_ajd(CivilDateTime.from_datetime(d))


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)
