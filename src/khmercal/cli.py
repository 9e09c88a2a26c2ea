from __future__ import annotations

import argparse
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

_PHASES = {"0": 0, "1": 1, "waxing": 0, "waning": 1, "កើត": 0, "រោច": 1}


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """Split YYYY-MM-DD into ints; range checks are left to from_gregorian."""
    from khmercal.core.errors import InvalidDateError

    parts = s.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise InvalidDateError(f"Invalid date '{s}'. Use YYYY-MM-DD.")
    y, m, d = map(int, parts)
    return y, m, d


def _parse_hms(s: str) -> tuple[int, int, int]:
    m = _TIME_RE.match(s)
    if not m:
        raise SystemExit(f"Invalid time '{s}'. Use HH:MM or HH:MM:SS.")
    return int(m.group(1)), int(m.group(2)), int(m.group(3) or 0)


def _parse_phase(s: str) -> int:
    key = s.strip().lower()
    if key not in _PHASES:
        raise SystemExit(f"Invalid moon phase '{s}'. Use 0/1 or waxing/waning.")
    return _PHASES[key]


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
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal day", description="Gregorian -> Khmer lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--time", default=None, help="HH:MM[:SS] wall-clock time (default: midnight)")
    p.add_argument("--format", dest="fmt", default=None, help="format pattern, e.g. 'W d N m b'")
    args = p.parse_args(argv)

    year, month, day = _parse_ymd(args.date)
    hour, minute, second = _parse_hms(args.time) if args.time else (0, 0, 0)
    result = khmercal.from_gregorian(year, month, day, hour, minute, second)
    print(khmercal.format(result, args.fmt))
    return 0


def cmd_khmer(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal khmer", description="Khmer lunar date -> Gregorian")
    p.add_argument("day", type=int, help="lunar day 1..15")
    p.add_argument("phase", help="0/waxing or 1/waning")
    p.add_argument("month", type=int, help="month index 0..13 (0=Mikasar, 5=Pisakh)")
    p.add_argument("be_year", type=int, help="Buddhist Era year")
    args = p.parse_args(argv)

    d = khmercal.from_khmer(args.day, _parse_phase(args.phase), args.month, args.be_year)
    print(d.isoformat())
    return 0


def cmd_new_year(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal new-year", description="Moha Songkran moment of a Gregorian year")
    p.add_argument("year", type=int)
    p.add_argument("--full", action="store_true", help="also print Vanabat / Lerng Sak details")
    args = p.parse_args(argv)

    info = khmercal.new_year_info(args.year)
    print(f"New Year     : {info.new_year_moment:%Y-%m-%d %H:%M}")
    if args.full:
        ls = info.lerng_sak_date
        print(f"Lerng Sak    : {info.lerng_sak_moment:%Y-%m-%d}  "
              f"(lunar day {ls.day_number} of month {int(ls.month_index)}, weekday {int(info.lerng_sak_weekday)})")
        print(f"Vanabat days : {info.number_of_vanabat_days}")
        print(f"Total days   : {info.number_new_year_days}")
        print(f"Overridden   : {info.overridden}")
        for s in info.sotins:
            print(f"  sotin {s.sotin}: R{s.reasey} A{s.angsar} L{s.libda}")
    return 0


def cmd_leap(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal leap", description="Leap classification of BE years")
    p.add_argument("be_year", type=int)
    p.add_argument("--to", type=int, default=None, help="last BE year of the table (inclusive)")
    args = p.parse_args(argv)

    last = args.to if args.to is not None else args.be_year
    if last < args.be_year:
        raise SystemExit("--to must be >= be_year")
    for be in range(args.be_year, last + 1):
        lt = khmercal.leap_type(be)
        print(f"{be}  {lt.name:<10}  {khmercal.days_in_year(be)} days")
    return 0


def main(argv: list[str] | None = None) -> int:
    from khmercal.core.errors import KhmerCalError

    if argv is None:
        argv = sys.argv[1:]

    verbose = False
    if argv and argv[0] in ("-v", "--verbose"):
        verbose, argv = True, argv[1:]
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        return _dispatch(argv)
    except KhmerCalError as e:
        print(f"khmercal: error: {e}", file=sys.stderr)
        return 2


def _dispatch(argv: list[str]) -> int:
    # Shortcut: `khmercal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="khmercal", description="Khmer lunisolar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging (must come first)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Khmer lunar date", add_help=False)
    sub.add_parser("khmer", help="Khmer lunar date -> Gregorian", add_help=False)
    sub.add_parser("new-year", help="Moha Songkran moment of a Gregorian year", add_help=False)
    sub.add_parser("leap", help="Leap classification of BE years", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a Gregorian month grid with lunar days (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "khmer":
        return cmd_khmer(rest)

    if args.cmd == "new-year":
        return cmd_new_year(rest)

    if args.cmd == "leap":
        return cmd_leap(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("khmercal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("khmercal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-years": "khmercal.diagnostics.leap_years",
            "round-trip": "khmercal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
