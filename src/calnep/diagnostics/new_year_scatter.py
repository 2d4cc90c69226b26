#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional, Tuple

import calnep


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calnep[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calnep[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """AD year, day-of-year of 1 Baisakh and BS year length for each BS year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years)
    doy = np.empty_like(years)
    length = np.empty_like(years)

    for i, Y in enumerate(years):
        d = calnep.new_year_day(int(Y))
        x[i] = d.year
        doy[i] = day_of_year(d)
        length[i] = sum(calnep.days_in_month(int(Y), m) for m in range(12))

    return x, doy, length


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of BS New Year (1 Baisakh) day-of-year.")
    p.add_argument("--start-year", type=int, default=calnep.MIN_BS_YEAR + 1)
    p.add_argument("--end-year", type=int, default=calnep.MAX_BS_YEAR)
    p.add_argument("--outbase", default="bs_new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, doy, length = build_series(np, args.start_year, args.end_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    long_year = length > 365
    ax.scatter(x[~long_year], doy[~long_year], s=16, c="tab:blue", alpha=0.6, label="365-day BS year")
    ax.scatter(x[long_year], doy[long_year], s=16, c="tab:red", alpha=0.6, label="366-day BS year")

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year of 1 Baisakh (Jan 1 = 1)")
    ax.set_title("Bikram Sambat New Year in the Gregorian calendar")
    ax.legend(loc="upper right", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
