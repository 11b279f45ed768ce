from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

from .core.errors import CalhijriError, InvalidDateError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise InvalidDateError(f"malformed date {s!r}: {e}") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri day", description="Gregorian -> Hijri date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--arabic", action="store_true", help="Arabic-Indic day numerals")
    args = p.parse_args(argv)

    h = calhijri.to_hijri(_parse_ymd(args.date))
    day = h.to_arabic() if args.arabic else str(h.day)
    print(f"{day} {h.month_full_name} {h.year}")
    print(f"  year={h.year} month={h.month} day={h.day} leap={h.is_leap} ajd={h.to_ajd()}")
    return 0


def cmd_greg(argv: list[str]) -> int:
    import calhijri

    p = argparse.ArgumentParser(prog="calhijri greg", description="Hijri date -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="0-based month (0 = Moharram)")
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    h = calhijri.HijriDate(args.year, args.month, args.day)
    g = h.to_gregorian()
    cal = "Julian" if g.is_julian else "Gregorian"
    print(f"{h.formatted()} -> {g} ({cal})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calhijri YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="calhijri", description="Tabular Hijri calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hijri date", add_help=False)
    sub.add_parser("greg", help="Hijri -> Gregorian date", add_help=False)
    sub.add_parser("month", help="Print a Hijri month grid", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "drift"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "greg":
            return cmd_greg(rest)

        if args.cmd == "month":
            return _run_module_main("calhijri.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calhijri.diagnostics.round_trip",
                "drift": "calhijri.diagnostics.drift",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalhijriError as e:
        print(f"calhijri: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
