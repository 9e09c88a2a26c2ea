from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

import khmercal


def sample_days(n: int, start: date, end: date, seed: int) -> List[date]:
    rng = random.Random(seed)
    span = (end - start).days
    return [start + timedelta(days=rng.randint(0, span)) for _ in range(n)]


def check_day(d0: date) -> Tuple[Optional[date], str]:
    """Convert d0 to Khmer and back; returns (result, error message)."""
    k = khmercal.from_gregorian(d0.year, d0.month, d0.day).khmer
    try:
        return khmercal.from_khmer(k.day, k.moon_phase, k.month_index, k.be_year), ""
    except khmercal.NotFoundError as e:
        return None, str(e)


def run(days: List[date], *, max_failures: int) -> int:
    failures = 0
    for d0 in days:
        back, err = check_day(d0)
        if back == d0:
            continue
        failures += 1
        r = khmercal.from_gregorian(d0.year, d0.month, d0.day)
        print(f"\nFAIL {d0}  ->  {khmercal.format(r, 'dr N m br')}  ->  {back} {err}".rstrip())
        if failures >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip check: Gregorian -> Khmer -> Gregorian.")
    p.add_argument("--N", type=int, default=200, help="Number of sampled days.")
    p.add_argument("--start", type=date.fromisoformat, default=date(1900, 1, 1), help="First day (YYYY-MM-DD).")
    p.add_argument("--end", type=date.fromisoformat, default=date(2100, 12, 31), help="Last day (YYYY-MM-DD).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    print(f"Checking {args.N} days in {args.start} .. {args.end} ...")
    f = run(sample_days(args.N, args.start, args.end, args.seed), max_failures=args.max_failures)

    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
