from __future__ import annotations

import argparse

import calnep


def year_rows(start: int, end: int) -> list[tuple[int, str, int]]:
    """(BS year, AD date of 1 Baisakh, days in year) for each year in range."""
    rows = []
    for Y in range(start, end + 1):
        d = calnep.new_year_day(Y)
        length = sum(calnep.days_in_month(Y, m) for m in range(12))
        rows.append((Y, d.isoformat(), length))
    return rows


def main(argv: list[str] | None = None) -> int:
    # 1 Baisakh of the first table year precedes the first convertible date
    p = argparse.ArgumentParser(description="Print the AD date of each BS New Year (1 Baisakh).")
    p.add_argument("--start", type=int, default=calnep.MIN_BS_YEAR + 1)
    p.add_argument("--end", type=int, default=calnep.MAX_BS_YEAR)
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    print(f"{'BS':>4}  {'1 Baisakh (AD)':<14}  days")
    print("-" * 28)
    for Y, iso, length in year_rows(args.start, args.end):
        print(f"{Y:>4}  {iso:<14}  {length}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
