from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

from calhijri.core.time import ajd_to_gregorian, gregorian_to_ajd, to_jdn
from calhijri.engines.hijri import HijriDate, days_in_month


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def random_hijri(min_year: int, max_year: int) -> HijriDate:
    y = random.randint(min_year, max_year)
    m = random.randint(0, 11)
    return HijriDate(y, m, random.randint(1, days_in_month(m, y)))


def hijri_roundtrip(N: int, min_year: int, max_year: int, *, max_failures: int) -> int:
    failures = 0
    for _ in range(N):
        h = random_hijri(min_year, max_year)
        back = HijriDate.from_ajd(h.to_ajd())
        if back != h:
            failures += 1
            print("\nFAIL (hijri)")
            print("h:", h, "ajd:", h.to_ajd(), "back:", back)
            if failures >= max_failures:
                break
    return failures


def gregorian_roundtrip(N: int, start: date, end: date, *, max_failures: int) -> int:
    failures = 0
    for _ in range(N):
        d0 = random_date(start, end)
        ajd = gregorian_to_ajd(d0.year, d0.month, d0.day)
        back = ajd_to_gregorian(ajd)
        # post-reform midnight AJD is JDN - 0.5
        if back.to_date() != d0 or ajd != to_jdn(d0) - 0.5:
            failures += 1
            print("\nFAIL (gregorian)")
            print("d0:", d0, "ajd:", ajd, "jdn:", to_jdn(d0), "back:", back)
            if failures >= max_failures:
                break
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Randomised round-trip checks for the Hijri engine and day-count bridge.")
    p.add_argument("-N", type=int, default=20000)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--min-year", type=int, default=1)
    p.add_argument("--max-year", type=int, default=3000)
    p.add_argument("--start", default="1582-10-15")
    p.add_argument("--end", default="9999-12-31")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    random.seed(args.seed)
    fh = hijri_roundtrip(args.N, args.min_year, args.max_year, max_failures=args.max_failures)
    fg = gregorian_roundtrip(args.N, parse_date(args.start), parse_date(args.end), max_failures=args.max_failures)

    print(f"hijri:     {args.N - fh}/{args.N} ok")
    print(f"gregorian: {args.N - fg}/{args.N} ok")
    return 0 if fh == 0 and fg == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
