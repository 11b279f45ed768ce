# tests/test_time.py

import pytest
import random
from datetime import date, datetime

from calhijri.core.time import (
    ajd_to_gregorian,
    datetime_to_ajd,
    from_jdn,
    gregorian_to_ajd,
    is_julian,
    to_jdn,
)
from calhijri.core.types import CivilDateTime


def test_known_epochs():
    # J2000.0 civil date starts at JD 2451544.5
    assert gregorian_to_ajd(2000, 1, 1) == 2451544.5
    assert gregorian_to_ajd(2000, 1, 1, 12) == 2451545.0
    # Unix epoch
    assert gregorian_to_ajd(1970, 1, 1) == 2440587.5


def test_reform_boundary_is_contiguous():
    last_julian = gregorian_to_ajd(1582, 10, 4)
    first_gregorian = gregorian_to_ajd(1582, 10, 15)
    assert last_julian == 2299159.5
    assert first_gregorian == 2299160.5

    assert ajd_to_gregorian(last_julian) == CivilDateTime(1582, 10, 4)
    assert ajd_to_gregorian(first_gregorian) == CivilDateTime(1582, 10, 15)


def test_gap_dates_are_read_as_julian():
    assert is_julian(1582, 10, 4)
    assert is_julian(1582, 10, 10)
    assert not is_julian(1582, 10, 15)
    assert not is_julian(1583, 1, 1)
    assert gregorian_to_ajd(1582, 10, 10) == gregorian_to_ajd(1582, 10, 4) + 6


def test_gap_dates_continue_the_julian_count():
    base = gregorian_to_ajd(1582, 10, 4)
    for day in range(5, 15):
        assert is_julian(1582, 10, day)
        assert gregorian_to_ajd(1582, 10, day) == base + (day - 4)
    # 1582-10-05 must not collide with Julian 1582-09-25
    assert gregorian_to_ajd(1582, 10, 5) != gregorian_to_ajd(1582, 9, 25)
    assert gregorian_to_ajd(1582, 10, 5) == 2299160.5


def test_julian_leap_day_is_representable():
    # 1500 is a Julian leap year but not a Gregorian one
    ajd = gregorian_to_ajd(1500, 2, 29)
    assert ajd == gregorian_to_ajd(1500, 3, 1) - 1
    assert ajd_to_gregorian(ajd) == CivilDateTime(1500, 2, 29)


def test_gregorian_roundtrip_after_reform():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(2299161, 5373484)
        d = from_jdn(jdn)
        ajd = gregorian_to_ajd(d.year, d.month, d.day)
        assert ajd == jdn - 0.5
        assert ajd_to_gregorian(ajd).to_date() == d


def test_jdn_matches_bridge():
    for d in (date(1600, 3, 1), date(1900, 2, 28), date(2024, 2, 29), date(2100, 12, 31)):
        assert to_jdn(d) - 0.5 == gregorian_to_ajd(d.year, d.month, d.day)


def test_time_of_day_is_fractional():
    ajd = gregorian_to_ajd(2024, 2, 24, 18, 30, 15)
    assert ajd == pytest.approx(2460364.5 + (18 * 3600 + 30 * 60 + 15) / 86400, abs=1e-9)

    back = ajd_to_gregorian(ajd)
    assert (back.year, back.month, back.day) == (2024, 2, 24)
    assert (back.hour, back.minute) == (18, 30)
    assert back.second in (14, 15)


def test_datetime_to_ajd_uses_wall_clock():
    assert datetime_to_ajd(date(2024, 2, 24)) == 2460364.5
    assert datetime_to_ajd(datetime(2024, 2, 24, 6)) == pytest.approx(2460364.75)
    assert datetime_to_ajd(CivilDateTime(2024, 2, 24)) == 2460364.5
