#!/usr/bin/env python3
"""
Drift of the tabular month start against the Meeus mean new moon.

The 30-year cycle gives a mean month of 10631/360 days, slightly shorter
than the mean synodic month, so month starts slide slowly against the
mean conjunction. This prints per-year offsets and the fitted trend.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from calhijri.engines.hijri import DAYS_IN_CYCLE, HijriDate

# Meeus: k=0 mean new moon (JDE) and mean synodic month.
MEAN_NEW_MOON_K0 = 2451550.09766
SYNODIC_MONTH = 29.530588861


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calhijri[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calhijri[diagnostics]"') from e


def k_from_ajd(ajd: float) -> int:
    """Index of the mean new moon nearest to ajd."""
    return round((ajd - MEAN_NEW_MOON_K0) / SYNODIC_MONTH)


def month_offset(year: int, month: int) -> float:
    """Days from the nearest mean new moon to the start of the tabular month."""
    ajd = HijriDate(year, month, 1).to_ajd()
    return ajd - (MEAN_NEW_MOON_K0 + SYNODIC_MONTH * k_from_ajd(ajd))


def build_offsets(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs, ys = [], []
    for y in range(start_year, end_year + 1):
        for m in range(12):
            xs.append(y + m / 12)
            ys.append(month_offset(y, m))
    return np.array(xs, dtype=float), np.array(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tabular Hijri month starts vs. mean new moon.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--plot", action="store_true", help="Write a scatter plot (needs matplotlib)")
    p.add_argument("--out", default="hijri_drift.png")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    xs, ys = build_offsets(np, args.start_year, args.end_year)
    slope, intercept = np.polyfit(xs, ys, 1)

    mean_month = DAYS_IN_CYCLE / 360
    print(f"years {args.start_year}..{args.end_year}  ({len(xs)} months)")
    print(f"tabular mean month  = {mean_month:.9f} d")
    print(f"mean synodic month  = {SYNODIC_MONTH:.9f} d")
    print(f"offset mean / std   = {ys.mean():+.4f} / {ys.std():.4f} d")
    print(f"offset min / max    = {ys.min():+.4f} / {ys.max():+.4f} d")
    print(f"trend               = {slope * 100:+.5f} d per century")
    print(f"drift expected      = {(mean_month - SYNODIC_MONTH) * 1200:+.5f} d per century")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.scatter(xs, ys, s=4, color="0.15")
        ax.plot(xs, slope * xs + intercept, lw=1.2, color="tab:red")
        ax.set_xlabel("Hijri year")
        ax.set_ylabel("month start - mean new moon (days)")
        ax.set_title("Tabular Hijri month starts")
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"wrote {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
