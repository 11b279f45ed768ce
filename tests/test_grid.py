# tests/test_grid.py

import pytest
import random

from calhijri.core.errors import ConfigError, InvalidDateError
from calhijri.core.types import CivilDateTime, DailyDua, LibraryItem, Miqaat
from calhijri.engines.grid import GridConfig, MonthGrid
from calhijri.engines.hijri import HijriDate

TODAY = HijriDate(1445, 7, 15)


@pytest.fixture
def shabaan():
    """Shabaan 1445: 29 days, starts Saturday 2024-02-10."""
    return MonthGrid(1445, 7, today=TODAY)


def test_days_of_current_month(shabaan):
    days = shabaan.days()
    assert len(days) == 29
    assert [d.date.day for d in days] == list(range(1, 30))
    assert all(d.is_current_month and not d.filler for d in days)
    assert days[0].gregorian == CivilDateTime(2024, 2, 10)
    assert days[14].gregorian == CivilDateTime(2024, 2, 24)


def test_is_today_uses_reference_day(shabaan):
    flagged = [d.date for d in shabaan.days() if d.is_today]
    assert flagged == [TODAY]

    other = MonthGrid(1445, 7, today=HijriDate(1445, 8, 15))
    assert not any(d.is_today for d in other.days())


def test_defaults_come_from_today():
    grid = MonthGrid(today=TODAY)
    assert (grid.year, grid.month) == (1445, 7)


def test_day_of_week(shabaan):
    assert shabaan.day_of_week(1) == 6
    assert shabaan.day_of_week(2) == 0
    iso = MonthGrid(1445, 7, today=TODAY, config=GridConfig(iso8601=True))
    assert iso.day_of_week(1) == 5


def test_day_of_week_has_no_side_effects(shabaan):
    before = shabaan.date
    shabaan.day_of_week(20)
    assert shabaan.date == before == HijriDate(1445, 7, 1)


def test_filler_days(shabaan):
    prev = shabaan.previous_days()
    assert [d.date for d in prev] == [HijriDate(1445, 6, day) for day in range(25, 31)]
    assert all(d.filler and not d.is_current_month for d in prev)
    # day 29 is a Saturday: last row already complete
    assert shabaan.next_days() == []


def test_weeks(shabaan):
    weeks = shabaan.get_weeks()
    assert len(weeks) == 5
    assert all(len(w) == 7 for w in weeks)
    assert weeks[0][-1].date == HijriDate(1445, 7, 1)
    assert weeks[-1][-1].date == HijriDate(1445, 7, 29)


def test_next_days_pad_last_row():
    # Ramadaan 1445 starts Sunday 2024-03-10 and has 30 days
    grid = MonthGrid(1445, 8, today=TODAY)
    assert grid.day_of_week(1) == 0
    assert grid.previous_days() == []
    nxt = grid.next_days()
    assert [d.date for d in nxt] == [HijriDate(1445, 9, day) for day in range(1, 6)]
    assert all(d.filler and not d.is_current_month for d in nxt)


def test_grid_completeness_sampled():
    random.seed(7)
    cfg = GridConfig()
    pairs = [(1000, 0), (1000, 11), (3000, 0), (3000, 11)]
    pairs += [(random.randint(cfg.min_year, cfg.max_year), random.randint(0, 11)) for _ in range(300)]
    for iso in (False, True):
        for y, m in pairs:
            grid = MonthGrid(y, m, today=TODAY, config=GridConfig(iso8601=iso))
            flat = [d for w in grid.get_weeks() for d in w]
            assert len(flat) % 7 == 0
            current = [d for d in flat if d.is_current_month]
            assert len(current) == grid.days_in_month()
            for d in flat:
                if d.filler:
                    assert not d.is_current_month
                else:
                    assert d.is_current_month
            # consecutive days throughout the grid
            ajds = [d.date.to_ajd() for d in flat]
            assert ajds == [ajds[0] + i for i in range(len(ajds))]


def test_miqaat_overlay_is_one_based():
    miqaat = Miqaat(id=1, name="Milad", date=10, month=3, important=True)
    march = MonthGrid(1445, 2, today=TODAY, miqaats=[miqaat])
    day10 = march.days()[9]
    assert day10.has_miqaats
    assert day10.miqaats == (miqaat,)
    assert sum(d.has_miqaats for d in march.days()) == 1

    april = MonthGrid(1445, 3, today=TODAY, miqaats=[miqaat])
    assert not any(d.has_miqaats for d in april.days())


def test_daily_dua_overlay_is_zero_based():
    dua = DailyDua(id=1, library_id=9, date=5, month=2, library=LibraryItem(id=9, name="Dua Kumail"))
    grid = MonthGrid(1445, 2, today=TODAY, daily_duas=[dua])
    day5 = grid.days()[4]
    assert day5.has_daily_duas
    assert day5.daily_duas == (dua,)

    assert not any(d.has_daily_duas for d in MonthGrid(1445, 1, today=TODAY, daily_duas=[dua]).days())


def test_events_are_year_independent():
    miqaat = Miqaat(id=1, name="Urs", date=1, month=1)
    for year in (1200, 1445, 2500):
        grid = MonthGrid(year, 0, today=TODAY, miqaats=[miqaat])
        assert grid.days()[0].miqaats == (miqaat,)


def test_undated_miqaat_never_matches():
    grid = MonthGrid(1445, 0, today=TODAY, miqaats=[Miqaat(id=1, name="undated")])
    assert not any(d.has_miqaats for d in grid.get_days())


def test_filler_keeps_event_matches():
    miqaat = Miqaat(id=3, name="Rajab event", date=27, month=7)
    grid = MonthGrid(1445, 7, today=TODAY, miqaats=[miqaat])
    prev = grid.previous_days()
    day27 = next(d for d in prev if d.date.day == 27)
    assert day27.filler
    assert day27.miqaats == (miqaat,)


def test_month_labels():
    assert MonthGrid(1445, 7, today=TODAY).month_name == "Shabaan al-Karim"
    assert MonthGrid(1445, 7, today=TODAY).greg_month == "February / March 2024"
    # Jumada I 1445 runs 2023-11-13 .. 2023-12-12
    assert MonthGrid(1445, 4, today=TODAY).greg_month == "November / December 2023"
    # Jumada II 1445 crosses into 2024
    assert MonthGrid(1445, 5, today=TODAY).greg_month == "December 2023 / January 2024"


def test_constructor_validation():
    with pytest.raises(InvalidDateError):
        MonthGrid(999, 0, today=TODAY)
    with pytest.raises(InvalidDateError):
        MonthGrid(1445, 12, today=TODAY)
    with pytest.raises(ConfigError):
        GridConfig(min_year=2000, max_year=1000)
    with pytest.raises(ConfigError):
        GridConfig(min_year=0)


def test_lowest_allowed_year_keeps_full_weeks():
    with pytest.raises(ConfigError):
        GridConfig(min_year=1, max_year=10)

    cfg = GridConfig(min_year=2, max_year=10)
    for iso in (False, True):
        grid = MonthGrid(2, 0, today=TODAY, config=GridConfig(min_year=2, max_year=10, iso8601=iso))
        weeks = grid.get_weeks()
        assert all(len(w) == 7 for w in weeks)
        assert all(d.date.year == 1 for d in grid.previous_days())
    assert MonthGrid(2, 0, today=TODAY, config=cfg).previous_month().year == 2
