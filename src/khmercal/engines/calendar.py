"""
khmercal.engines.calendar
-------------------------
The Orchestrator. Binds the epoch walker, the New Year resolver and the BE
transition search together and exposes Gregorian <-> Khmer conversion.

Each KhmerCalendar owns two year-keyed caches (New Year info and the BE
transition moment). Entries are pure functions of the year and the CalendarSpec, so
they are never invalidated; concurrent fills may compute twice but only the
first stored value is kept.
"""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime, MAXYEAR, MINYEAR
from typing import Dict, List, Sequence

from ..core.errors import InvalidDateError, InvalidKhmerDateError, NotFoundError
from ..core.time import day_of_week, days_in_gregorian_month
from ..core.types import (
    AnimalYear,
    ConversionResult,
    DayOfWeek,
    GregorianInfo,
    KhmerDate,
    KhmerDateInfo,
    MonthIndex,
    MoonPhase,
    NewYearInfo,
    NewYearMoment,
    Sak,
)
from .era import ad_to_be, be_to_ad, be_to_js, maybe_be_year
from .new_year import resolve_new_year
from .specs import CalendarSpec, DEFAULT_SPEC
from .walker import EpochWalker

log = logging.getLogger(__name__)

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _check_int(name: str, value: object, exc: type) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise exc(f"Invalid {name}: {value!r}. Expected an integer.")


def _check_year(year: int) -> None:
    # the epoch walk may step one lunar year before the target
    lo, hi = MINYEAR + 1, MAXYEAR
    if not lo <= year <= hi:
        raise InvalidDateError(f"Invalid year: {year}. Year must be between {lo} and {hi}.")


class KhmerCalendar:
    """
    Gregorian <-> Khmer lunisolar conversion for one CalendarSpec.
    """
    def __init__(self, spec: CalendarSpec = DEFAULT_SPEC):
        self.spec = spec
        self.walker = EpochWalker(spec.epoch)
        self._new_years: Dict[int, NewYearInfo] = {}
        self._transitions: Dict[int, datetime] = {}
        self._lock = threading.Lock()

    def info(self) -> Dict[str, object]:
        return {
            "name": self.spec.name,
            "epoch": self.spec.epoch.gregorian.isoformat(),
            "be_year_range": self.spec.be_year_range,
            "overrides": sorted(self.spec.new_year_overrides),
        }

    def clear_caches(self) -> None:
        with self._lock:
            self._new_years.clear()
            self._transitions.clear()

    # ---------------------------------------------------------
    # Validation (public boundary only)
    # ---------------------------------------------------------

    @staticmethod
    def _validate_gregorian(year, month, day, hour=0, minute=0, second=0) -> None:
        for name, value in (
            ("year", year), ("month", month), ("day", day),
            ("hour", hour), ("minute", minute), ("second", second),
        ):
            _check_int(name, value, InvalidDateError)

        _check_year(year)
        if not 1 <= month <= 12:
            raise InvalidDateError(f"Invalid month: {month}. Month must be between 1 and 12.")
        dim = days_in_gregorian_month(year, month)
        if not 1 <= day <= dim:
            raise InvalidDateError(f"Invalid day: {day}. {_MONTH_NAMES[month - 1]} {year} has {dim} days.")
        if not 0 <= hour <= 23:
            raise InvalidDateError(f"Invalid hour: {hour}. Hour must be between 0 and 23.")
        if not 0 <= minute <= 59:
            raise InvalidDateError(f"Invalid minute: {minute}. Minute must be between 0 and 59.")
        if not 0 <= second <= 59:
            raise InvalidDateError(f"Invalid second: {second}. Second must be between 0 and 59.")

    def _validate_khmer(self, day, moon_phase, month_index, be_year) -> None:
        for name, value in (
            ("day", day), ("moon_phase", moon_phase),
            ("month_index", month_index), ("be_year", be_year),
        ):
            _check_int(name, value, InvalidKhmerDateError)

        if not 1 <= day <= 15:
            raise InvalidKhmerDateError(f"Invalid day: {day}. Lunar day must be between 1 and 15.")
        if moon_phase not in (MoonPhase.WAXING, MoonPhase.WANING):
            raise InvalidKhmerDateError(
                f"Invalid moon_phase: {moon_phase}. moon_phase must be 0 (Waxing/កើត) or 1 (Waning/រោច)."
            )
        if not MonthIndex.MIKASAR <= month_index <= MonthIndex.TUTIYAK_ASADH:
            raise InvalidKhmerDateError(
                f"Invalid month_index: {month_index}. month_index must be between 0 and 13."
            )
        lo, hi = self.spec.be_year_range
        if not lo <= be_year <= hi:
            raise InvalidKhmerDateError(f"Invalid be_year: {be_year}. be_year must be between {lo} and {hi}.")

    # ---------------------------------------------------------
    # Cached year data
    # ---------------------------------------------------------

    def new_year_info(self, year: int) -> NewYearInfo:
        _check_int("year", year, InvalidDateError)
        _check_year(year)
        hit = self._new_years.get(year)
        if hit is not None:
            return hit
        info = resolve_new_year(year, self.walker, self.spec.new_year_overrides)
        with self._lock:
            info = self._new_years.setdefault(year, info)
        log.debug("New Year %d: %s (overridden=%s)", year, info.new_year_moment, info.overridden)
        return info

    def be_transition(self, year: int) -> datetime:
        """Midnight of 1 waning Pisakh in `year`, when the BE year increments."""
        hit = self._transitions.get(year)
        if hit is not None:
            return hit
        moment = self._scan_be_transition(year)
        with self._lock:
            moment = self._transitions.setdefault(year, moment)
        log.debug("BE transition %d: %s", year, moment)
        return moment

    def _scan_be_transition(self, year: int) -> datetime:
        hour = self.spec.transition_scan_hour
        for month in self.spec.transition_scan_months:
            for day in range(1, days_in_gregorian_month(year, month) + 1):
                r = self._convert(year, month, day, hour, 0, 0, searching=True)
                if r.khmer.month_index == MonthIndex.PISAKH and r.khmer_date.day_number == 15:
                    return datetime(year, month, day)

        month, day = self.spec.transition_fallback
        log.warning("No 1 waning Pisakh found in %d; using %d-%02d-%02d", year, year, month, day)
        return datetime(year, month, day)

    # ---------------------------------------------------------
    # Forward: Gregorian -> Khmer
    # ---------------------------------------------------------

    def _convert(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        searching: bool = False,
    ) -> ConversionResult:
        """
        Unvalidated conversion. In searching mode the BE year is approximated
        from the Gregorian month and no New Year adjustment is made; this is
        the mode used by the BE transition scan and the New Year anchor.
        """
        month_index, day_number = self.walker.lunar_position(year, month, day)
        lunar_day, phase = KhmerDate.split_day_number(day_number)

        if searching:
            be_year = maybe_be_year(year, month)
        else:
            moment = datetime(year, month, day, hour, minute, second)
            transition = self.be_transition(year)
            be_year = ad_to_be(year) if moment >= transition else ad_to_be(year) - 1

        js_year = be_to_js(be_year)
        animal = (be_year + 4) % 12

        if not searching:
            ny = self.new_year_info(year)
            # Between New Year and the BE transition the animal year and Sak
            # have already moved on while the BE year has not.
            if ny.new_year_moment <= moment <= transition:
                animal = (animal + 1) % 12
            if ny.lerng_sak_moment <= moment <= transition:
                js_year += 1

        dow = DayOfWeek(day_of_week(year, month, day))
        return ConversionResult(
            gregorian=GregorianInfo(year, month, day, hour, minute, second, dow),
            khmer=KhmerDateInfo(
                day=lunar_day,
                moon_phase=phase,
                month_index=month_index,
                be_year=be_year,
                js_year=js_year,
                animal_year=AnimalYear(animal),
                sak=Sak(js_year % 10),
                day_of_week=dow,
            ),
        )

    def from_gregorian(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> ConversionResult:
        self._validate_gregorian(year, month, day, hour, minute, second)
        return self._convert(year, month, day, hour, minute, second)

    def from_datetime(self, value: date) -> ConversionResult:
        """Convert a datetime (wall-clock fields, tzinfo ignored) or a date (midnight)."""
        if isinstance(value, datetime):
            return self.from_gregorian(
                value.year, value.month, value.day, value.hour, value.minute, value.second
            )
        if isinstance(value, date):
            return self.from_gregorian(value.year, value.month, value.day)
        raise InvalidDateError(f"Invalid input: expected a datetime or date object, got {type(value).__name__}.")

    # ---------------------------------------------------------
    # Inverse: Khmer -> Gregorian
    # ---------------------------------------------------------

    def _hours_to_check(self, day: int, moon_phase: int, month_index: int) -> Sequence[int]:
        around_transition = month_index == MonthIndex.PISAKH and (
            (day == 15 and moon_phase == MoonPhase.WAXING)
            or (day == 1 and moon_phase == MoonPhase.WANING)
        )
        return self.spec.boundary_hours if around_transition else (0,)

    @staticmethod
    def _matches(r: ConversionResult, day: int, moon_phase: int, month_index: int, be_year: int) -> bool:
        k = r.khmer
        return (
            k.be_year == be_year
            and k.month_index == month_index
            and k.day == day
            and k.moon_phase == moon_phase
        )

    def from_khmer(self, day: int, moon_phase: int, month_index: int, be_year: int) -> date:
        """
        Bounded brute-force search for the Gregorian day of a Khmer date.

        Every day of the years be_year - 544 +/- radius is converted. When
        several days match, the one closest to the approximate year wins,
        then the first that also matches at noon, then the first found.
        """
        self._validate_khmer(day, moon_phase, month_index, be_year)

        approx = be_to_ad(be_year)
        radius = self.spec.reverse_search_radius
        hours = self._hours_to_check(day, moon_phase, month_index)

        candidates: List[date] = []
        for y in range(approx - radius, approx + radius + 1):
            for m in range(1, 13):
                for d in range(1, days_in_gregorian_month(y, m) + 1):
                    for hour in hours:
                        r = self._convert(y, m, d, hour)
                        if self._matches(r, day, moon_phase, month_index, be_year):
                            candidates.append(date(y, m, d))
                            break

        log.debug(
            "Reverse search %d/%d/%d BE %d: %d candidate(s)",
            day, moon_phase, month_index, be_year, len(candidates),
        )

        if not candidates:
            phase_name = "កើត" if moon_phase == MoonPhase.WAXING else "រោច"
            raise NotFoundError(
                f"Could not find Gregorian date for Khmer date: {day} {phase_name} "
                f"month {int(month_index)} BE {be_year}"
            )
        if len(candidates) == 1:
            return candidates[0]

        best = min(abs(c.year - approx) for c in candidates)
        closest = [c for c in candidates if abs(c.year - approx) == best]
        if len(closest) == 1:
            return closest[0]

        for c in closest:
            r = self._convert(c.year, c.month, c.day, 12)
            if self._matches(r, day, moon_phase, month_index, be_year):
                return c
        return closest[0]

    def to_datetime(self, day: int, moon_phase: int, month_index: int, be_year: int) -> datetime:
        d = self.from_khmer(day, moon_phase, month_index, be_year)
        return datetime(d.year, d.month, d.day)

    # ---------------------------------------------------------
    # New Year
    # ---------------------------------------------------------

    def get_new_year(self, year: int) -> NewYearMoment:
        return self.new_year_info(year).moment
