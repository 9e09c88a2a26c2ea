from __future__ import annotations

import argparse
from datetime import datetime

import khmercal
from khmercal.core import locale


def hhmm(t: datetime) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Khmer New Year (Moha Songkran) and Lerng Sak table for a range of years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=0,
        help="After the table, list years whose New Year falls on this April day (default: off).",
    )
    args = p.parse_args(argv)

    def fmt(t: datetime) -> str:
        return f"{t.month:02d}-{t.day:02d}" if args.dates == "mmdd" else t.date().isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "New Year", "Time", "Lerng Sak", "Weekday", "Days", "Src"]
    colw = [5, 10, 5, 10, 12, 4, 8]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[int, datetime]] = []

    for Y in range(Y0, Y1 + 1):
        info = khmercal.new_year_info(Y)
        ny = info.new_year_moment
        row = [
            str(Y),
            fmt(ny),
            hhmm(ny),
            fmt(info.lerng_sak_moment),
            locale.WEEKDAY_NAMES[info.lerng_sak_weekday],
            str(info.number_new_year_days),
            "table" if info.overridden else "solar",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if ny.month == 4 and ny.day == args.list_day:
            hits.append((Y, ny))

    if args.list_day:
        print(f"\nNew Year on April {args.list_day}:")
        if not hits:
            print("(none)")
        for Y, ny in hits:
            print(f"{ny:%Y-%m-%d %H:%M}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
