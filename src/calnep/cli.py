from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=_LOG_FORMAT)


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


def cmd_ad2bs(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep ad2bs", description="Gregorian -> Bikram Sambat")
    p.add_argument("date", type=_parse_ymd, help="AD date, YYYY-MM-DD")
    p.add_argument("--format", dest="pattern", default=None, help="output pattern, e.g. 'MMMM do, yyyy'")
    p.add_argument("--locale", default="en", choices=sorted(calnep.CALENDAR))
    args = p.parse_args(argv)

    bs = calnep.ad_to_bs(args.date)
    print(calnep.format(bs, args.pattern, locale=args.locale) if args.pattern else bs.isoformat())
    return 0


def cmd_bs2ad(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep bs2ad", description="Bikram Sambat -> Gregorian")
    p.add_argument("date", help="BS date, YYYY-MM-DD (1-based month)")
    p.add_argument("--format", dest="pattern", default=None, help="output pattern, e.g. 'MMMM do, yyyy'")
    p.add_argument("--locale", default="en", choices=sorted(calnep.CALENDAR))
    args = p.parse_args(argv)

    ad = calnep.NepaliDate.from_string(args.date).to_ad()
    print(calnep.format(ad, args.pattern, locale=args.locale) if args.pattern else ad.isoformat())
    return 0


def cmd_day(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep day", description="Gregorian -> day record")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    info = calnep.day_info(args.date, debug=args.debug)
    print(info)
    return 0


def cmd_range(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep range", description="Print the supported date span")
    p.parse_args(argv)

    rng = calnep.supported_range()
    first = calnep.NepaliDate(*rng["first_bs"])
    last = calnep.NepaliDate(*rng["last_bs"])
    print(f"BS {first.isoformat()} .. {last.isoformat()}")
    print(f"AD {rng['first_ad'].isoformat()} .. {rng['last_ad'].isoformat()}")
    return 0


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `calnep YYYY-MM-DD ...` converts an AD date
    if argv and _DATE_RE.match(argv[0]):
        return cmd_ad2bs(argv)

    p = argparse.ArgumentParser(prog="calnep", description="Bikram Sambat calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("ad2bs", help="Gregorian -> Bikram Sambat", add_help=False)
    sub.add_parser("bs2ad", help="Bikram Sambat -> Gregorian", add_help=False)
    sub.add_parser("day", help="Gregorian -> day record", add_help=False)
    sub.add_parser("range", help="Print the supported date span", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-years", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "ad2bs": cmd_ad2bs,
        "bs2ad": cmd_bs2ad,
        "day": cmd_day,
        "range": cmd_range,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calnep.diagnostics.round_trip",
            "new-years": "calnep.diagnostics.new_years_table",
            "new-year-scatter": "calnep.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    from calnep.core.errors import CalnepError

    if argv is None:
        argv = sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in argv)
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    _setup_logging(verbose)

    try:
        return _dispatch(argv)
    except CalnepError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
