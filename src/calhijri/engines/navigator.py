"""
calhijri.engines.navigator
--------------------------
Month/year paging for MonthGrid, bounded by the configured year range.

Hitting a bound is not an error: the grid stays where it is and the
result says so through `clamped`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .grid import MonthGrid

_LOGGER = logging.getLogger(__name__)


def shift_month(year: int, month: int, delta: int, *, min_year: int, max_year: int) -> Tuple[int, int, bool]:
    """(year, month) moved by delta months; pinned to the range boundary if it would leave it."""
    linear = year * 12 + month + delta
    lo = min_year * 12
    hi = max_year * 12 + 11
    if linear < lo:
        return min_year, 0, True
    if linear > hi:
        return max_year, 11, True
    y, m = divmod(linear, 12)
    return y, m, False


def shift_year(year: int, month: int, delta: int, *, min_year: int, max_year: int) -> Tuple[int, int, bool]:
    """Year moved by delta with the month held; the year is pinned to the range."""
    target = year + delta
    if target < min_year:
        return min_year, month, True
    if target > max_year:
        return max_year, month, True
    return target, month, False


@dataclass(frozen=True)
class Navigation:
    grid: "MonthGrid"
    clamped: bool = False


def _move(grid: "MonthGrid", fn, delta: int, what: str) -> Navigation:
    cfg = grid.config
    y, m, clamped = fn(grid.year, grid.month, delta, min_year=cfg.min_year, max_year=cfg.max_year)
    if clamped:
        _LOGGER.debug("%s %+d from %d/%d clamped to %d/%d", what, delta, grid.year, grid.month, y, m)
    return Navigation(grid.with_month(y, m), clamped)


def previous_month(grid: "MonthGrid") -> Navigation:
    return _move(grid, shift_month, -1, "month")


def next_month(grid: "MonthGrid") -> Navigation:
    return _move(grid, shift_month, 1, "month")


def previous_year(grid: "MonthGrid") -> Navigation:
    return _move(grid, shift_year, -1, "year")


def next_year(grid: "MonthGrid") -> Navigation:
    return _move(grid, shift_year, 1, "year")


def goto(grid: "MonthGrid", year: int, month: int) -> Navigation:
    """Jump to (year, month); out-of-range years are pinned to the nearest bound."""
    cfg = grid.config
    y = min(max(year, cfg.min_year), cfg.max_year)
    clamped = y != year
    if clamped:
        _LOGGER.debug("goto %d/%d clamped to %d/%d", year, month, y, month)
    return Navigation(grid.with_month(y, month), clamped)
