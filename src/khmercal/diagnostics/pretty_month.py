from __future__ import annotations

import argparse
from datetime import date

import khmercal
from khmercal.core.locale import MOON_PHASE_SHORT_NAMES
from khmercal.core.time import day_of_week, days_in_gregorian_month


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def gregorian_month_calendar(gy: int, gm: int, *, raw: bool = False) -> None:
    last_day = days_in_gregorian_month(gy, gm)

    days = []
    for d in range(1, last_day + 1):
        r = khmercal.from_gregorian(gy, gm, d)
        k = r.khmer
        phase = "+-"[k.moon_phase] if raw else MOON_PHASE_SHORT_NAMES[k.moon_phase]
        top = f"{d:2d}"
        bot = f"{int(k.month_index):02d}{phase}{k.day:02d}"
        days.append((top, bot))

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = day_of_week(gy, gm, 1)  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    first = khmercal.from_gregorian(gy, gm, 1).khmer
    last = khmercal.from_gregorian(gy, gm, last_day).khmer
    title = f"Gregorian month  {gy}-{gm:02d}   (BE {first.be_year} .. {last.be_year})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month calendar labelled with Khmer lunar month index and day."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 4)")
    p.add_argument("--raw", action="store_true",
                   help="Use +/- instead of Khmer phase abbreviations.")
    args = p.parse_args(argv)

    if not args.greg:
        today = date.today()
        gregorian_month_calendar(today.year, today.month, raw=args.raw)
        return 0

    gy, gm = args.greg
    if not 1 <= gm <= 12:
        raise SystemExit("GM must be in 1..12")
    gregorian_month_calendar(gy, gm, raw=args.raw)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
