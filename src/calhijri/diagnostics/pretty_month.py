from __future__ import annotations

import argparse
import json
from datetime import date
from typing import List, Optional, Tuple

import calhijri
from calhijri.core.types import CalendarDay, DailyDua, Miqaat
from calhijri.engines.grid import ISO_WEEKDAYS, WEEKDAYS, GridConfig, MonthGrid


def load_events(path: str) -> Tuple[List[Miqaat], List[DailyDua]]:
    """Read {"miqaats": [...], "daily_duas": [...]} exported from the data platform."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    miqaats = [Miqaat.from_dict(r) for r in data.get("miqaats", [])]
    duas = [DailyDua.from_dict(r) for r in data.get("daily_duas", [])]
    return miqaats, duas


def dow_header(iso8601: bool, w: int = 6) -> str:
    names = ISO_WEEKDAYS if iso8601 else WEEKDAYS
    return " ".join(n[:2].ljust(w) for n in names)


def cell(day: CalendarDay, *, arabic: bool = False, w: int = 6) -> Tuple[str, str]:
    num = day.date.to_arabic() if arabic else str(day.date.day)
    marks = ("*" if day.has_miqaats else "") + ("+" if day.has_daily_duas else "")
    if day.filler:
        top = f"({num})"
    elif day.is_today:
        top = f"[{num}]"
    else:
        top = f"{num:>2}"
    top += marks
    bot = f"{day.gregorian.month:02d}-{day.gregorian.day:02d}"
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render(grid: MonthGrid, *, arabic: bool = False) -> str:
    header = dow_header(grid.iso8601)
    lines = [
        f"{grid.month_name} {grid.year}   ({grid.greg_month})",
        header,
        "-" * len(header),
    ]
    for wk in grid.get_weeks():
        cells = [cell(d, arabic=arabic) for d in wk]
        lines.append(" ".join(c[0] for c in cells))
        lines.append(" ".join(c[1] for c in cells))
    events = [d for d in grid.days() if d.has_miqaats or d.has_daily_duas]
    if events:
        lines.append("")
    for d in events:
        for m in d.miqaats:
            flag = " !" if m.important else ""
            lines.append(f"  {d.date.formatted():<20} * {m.name}{flag}")
        for dua in d.daily_duas:
            name = dua.library.name if dua.library is not None else f"library #{dua.library_id}"
            lines.append(f"  {d.date.formatted():<20} + {name}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a Hijri month grid with Gregorian equivalents.")
    p.add_argument("month", nargs="*", type=int, metavar="Y M",
                   help="Hijri year and 0-based month (default: current month)")
    p.add_argument("--iso8601", action="store_true", help="Weeks start on Monday")
    p.add_argument("--arabic", action="store_true", help="Arabic-Indic day numerals")
    p.add_argument("--events", help='JSON file {"miqaats": [...], "daily_duas": [...]}')
    p.add_argument("--today", help="Reference day YYYY-MM-DD (default: system clock)")
    p.add_argument("--min-year", type=int, default=1000)
    p.add_argument("--max-year", type=int, default=3000)
    args = p.parse_args(argv)

    if len(args.month) not in (0, 2):
        p.error("expected either no month or Y M")

    ref = None
    if args.today:
        try:
            ref = calhijri.to_hijri(date.fromisoformat(args.today))
        except ValueError as e:
            p.error(f"--today: {e}")
    miqaats, duas = load_events(args.events) if args.events else ([], [])
    cfg = GridConfig(min_year=args.min_year, max_year=args.max_year, iso8601=args.iso8601)

    y, m = args.month if args.month else (None, None)
    grid = MonthGrid(y, m, today=ref, miqaats=miqaats, daily_duas=duas, config=cfg)
    print(render(grid, arabic=args.arabic))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
