# tests/test_diagnostics.py

import pytest

from calhijri.diagnostics import drift, round_trip


def test_round_trip_tool_passes(capsys):
    assert round_trip.main(["-N", "500", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "hijri:     500/500 ok" in out
    assert "gregorian: 500/500 ok" in out


def test_month_offset_stays_near_new_moon():
    # tabular month starts sit within a few days of the mean conjunction
    for year in (1000, 1445, 2000):
        for month in range(12):
            assert abs(drift.month_offset(year, month)) < 3.0


def test_drift_tool(capsys):
    pytest.importorskip("numpy")
    assert drift.main(["--start-year", "1440", "--end-year", "1450"]) == 0
    assert "tabular mean month  = 29.530555556 d" in capsys.readouterr().out
