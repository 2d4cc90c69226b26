from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import calnep


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def ad_roundtrip(N: int, start: date, end: date, *, max_failures: int) -> int:
    failures = 0
    for _ in range(N):
        d0 = random_date(start, end)
        bs = calnep.ad_to_bs(d0)
        back = calnep.bs_to_ad(bs)
        if back != d0:
            failures += 1
            print("\nFAIL (ad -> bs -> ad)")
            print("d0:", d0)
            print("bs:", bs)
            print("back:", back)
            print("explain:", calnep.explain(d0))
            if failures >= max_failures:
                return failures
    return failures


def bs_roundtrip(N: int, first: calnep.NepaliDate, last: calnep.NepaliDate, *, max_failures: int) -> int:
    failures = 0
    span = last.days_since_epoch() - first.days_since_epoch()
    for _ in range(N):
        bs0 = first.add_days(random.randint(0, span))
        back = calnep.ad_to_bs(bs0.to_ad())
        if back != bs0:
            failures += 1
            print("\nFAIL (bs -> ad -> bs)")
            print("bs0:", bs0)
            print("ad:", bs0.to_ad())
            print("back:", back)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: AD -> BS -> AD and BS -> AD -> BS.")
    p.add_argument("--N", type=int, default=2000, help="Trials per direction.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per direction.")
    args = p.parse_args(argv)

    random.seed(args.seed)
    rng = calnep.supported_range()
    first = calnep.NepaliDate(*rng["first_bs"])
    last = calnep.NepaliDate(*rng["last_bs"])

    print(f"Testing AD {rng['first_ad']} .. {rng['last_ad']} ...")
    total_fail = ad_roundtrip(args.N, rng["first_ad"], rng["last_ad"], max_failures=args.max_failures)
    print(f"Testing BS {first} .. {last} ...")
    total_fail += bs_roundtrip(args.N, first, last, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
