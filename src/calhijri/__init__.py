"""calhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

from .api import (
    to_hijri,
    to_gregorian,
    today,
    month_grid,
    month_weeks,
    hijri_range,
    upcoming_miqaats,
    miqaat_label,
)
from .core.errors import CalhijriError, ConfigError, InvalidDateError, RecordError
from .core.time import ajd_to_gregorian, gregorian_to_ajd
from .core.types import CalendarDay, CivilDateTime, DailyDua, LibraryItem, Miqaat
from .engines.grid import GridConfig, MonthGrid
from .engines.hijri import HijriDate, arabic_digits, days_in_month, is_leap_year
from .engines.navigator import Navigation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "to_hijri",
    "to_gregorian",
    "today",
    "month_grid",
    "month_weeks",
    "hijri_range",
    "upcoming_miqaats",
    "miqaat_label",
    "gregorian_to_ajd",
    "ajd_to_gregorian",
    "HijriDate",
    "is_leap_year",
    "days_in_month",
    "arabic_digits",
    "MonthGrid",
    "GridConfig",
    "Navigation",
    "CalendarDay",
    "CivilDateTime",
    "Miqaat",
    "DailyDua",
    "LibraryItem",
    "CalhijriError",
    "InvalidDateError",
    "ConfigError",
    "RecordError",
]
