"""
khmercal.engines.walker
-----------------------
Gregorian -> lunar position by walking from a fixed epoch.

The epoch is a Gregorian date known to be day number 0 (1 waxing) of a given
lunar month. The walker consumes whole Khmer years, then whole months, and
what remains is the day number. Year and month lengths depend on the BE year,
which is approximated from the Gregorian date the epoch has reached
(khmercal.engines.era.maybe_be_year); the overflow guard at the end absorbs
the occasional off-by-one month this approximation causes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..core.time import date_to_jdn, from_jdn, to_jdn
from ..core.types import MonthIndex
from .era import maybe_be_year
from .month import days_in_month, days_in_year, next_month


@dataclass(frozen=True)
class EpochParams:
    """Anchor: `gregorian` is the first day (1 waxing) of lunar month `month_index`."""
    gregorian: date
    month_index: MonthIndex

    @property
    def jdn(self) -> int:
        return date_to_jdn(self.gregorian)


class EpochWalker:
    def __init__(self, params: EpochParams):
        self.p = params

    def lunar_position(self, year: int, month: int, day: int) -> Tuple[MonthIndex, int]:
        """
        Returns (month_index, day_number) of the Gregorian day.
        day_number is 0..29 (waxing 0..14, waning 15..29).
        """
        epoch_jdn = self.p.jdn
        diff = to_jdn(year, month, day) - epoch_jdn
        khmer_month = self.p.month_index

        # 1. Whole Khmer years
        if diff > 0:
            while True:
                g = from_jdn(epoch_jdn)
                year_days = days_in_year(maybe_be_year(g.year + 1, g.month))
                if diff > year_days:
                    diff -= year_days
                    epoch_jdn += year_days
                else:
                    break
        elif diff < 0:
            while diff < 0:
                g = from_jdn(epoch_jdn)
                year_days = days_in_year(maybe_be_year(g.year, g.month))
                diff += year_days
                epoch_jdn -= year_days

        # 2. Whole months
        while diff > 0:
            g = from_jdn(epoch_jdn)
            be = maybe_be_year(g.year, g.month)
            month_days = days_in_month(khmer_month, be)
            if diff > month_days:
                diff -= month_days
                epoch_jdn += month_days
                khmer_month = next_month(khmer_month, be)
            else:
                break

        # 3. Overflow guard, judged against the target's own BE approximation
        day_number = diff
        final_be = maybe_be_year(year, month)
        month_days = days_in_month(khmer_month, final_be)
        if day_number >= month_days:
            if month_days:
                day_number %= month_days
            khmer_month = next_month(khmer_month, final_be)

        return MonthIndex(khmer_month), day_number
