"""
khmercal.engines.specs
----------------------
Calendar configuration as data: the epoch, the New Year override table and
the search bounds used by KhmerCalendar.

DEFAULT_SPEC is the traditional calendar; COMPUTED_SPEC drops the override
table so every New Year comes from the solar routine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Mapping, Tuple

from ..core.types import MonthIndex, NewYearMoment
from .walker import EpochParams


# ============================================================
# TRADITIONAL CONSTANTS
# ============================================================

# 1900-01-01 is 1 waxing of Boss
EPOCH = EpochParams(gregorian=date(1900, 1, 1), month_index=MonthIndex.BOSS)

# Historically verified Moha Songkran moments. The solar routine is off by a
# few hours (or a day) for these years.
NEW_YEAR_OVERRIDES: Mapping[int, NewYearMoment] = {
    1879: NewYearMoment(1879, 4, 12, 11, 36),
    1897: NewYearMoment(1897, 4, 13, 2, 0),
    2011: NewYearMoment(2011, 4, 14, 13, 12),
    2012: NewYearMoment(2012, 4, 14, 19, 11),
    2013: NewYearMoment(2013, 4, 14, 2, 12),
    2014: NewYearMoment(2014, 4, 14, 8, 7),
    2015: NewYearMoment(2015, 4, 14, 14, 2),
    2024: NewYearMoment(2024, 4, 13, 22, 17),
}

# Khmer -> Gregorian lookup
BE_YEAR_RANGE = (2000, 3000)
REVERSE_SEARCH_RADIUS = 2
# Hours tried around the BE transition (15 waxing / 1 waning Pisakh)
BOUNDARY_HOURS: Tuple[int, ...] = (0, 6, 12, 18, 23)

# BE transition scan: Gregorian months searched, at this hour of day
TRANSITION_SCAN_MONTHS: Tuple[int, ...] = (4, 5, 6)
TRANSITION_SCAN_HOUR = 12
TRANSITION_FALLBACK = (4, 15)


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a KhmerCalendar."""
    name: str
    epoch: EpochParams = EPOCH
    new_year_overrides: Mapping[int, NewYearMoment] = field(default_factory=lambda: dict(NEW_YEAR_OVERRIDES))
    be_year_range: Tuple[int, int] = BE_YEAR_RANGE
    reverse_search_radius: int = REVERSE_SEARCH_RADIUS
    boundary_hours: Tuple[int, ...] = BOUNDARY_HOURS
    transition_scan_months: Tuple[int, ...] = TRANSITION_SCAN_MONTHS
    transition_scan_hour: int = TRANSITION_SCAN_HOUR
    transition_fallback: Tuple[int, int] = TRANSITION_FALLBACK

    def __post_init__(self) -> None:
        lo, hi = self.be_year_range
        if lo > hi:
            raise ValueError("be_year_range must be (low, high) with low <= high")
        if self.reverse_search_radius < 0:
            raise ValueError("reverse_search_radius must be >= 0")
        if not self.boundary_hours or any(not 0 <= h <= 23 for h in self.boundary_hours):
            raise ValueError("boundary_hours must be non-empty hours in 0..23")
        if any(not 1 <= m <= 12 for m in self.transition_scan_months):
            raise ValueError("transition_scan_months must be in 1..12")

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


DEFAULT_SPEC = CalendarSpec(name="traditional")

# Computed New Year only, without the historical override table
COMPUTED_SPEC = DEFAULT_SPEC.tweak(name="computed", new_year_overrides={})

ALL_SPECS = {
    DEFAULT_SPEC.name: DEFAULT_SPEC,
    COMPUTED_SPEC.name: COMPUTED_SPEC,
}
