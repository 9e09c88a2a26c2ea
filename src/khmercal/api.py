from __future__ import annotations

from datetime import date, datetime
from types import SimpleNamespace
from typing import Any, Dict, Optional

from .core import locale
from .core.types import ConversionResult, LeapType, NewYearInfo, NewYearMoment
from .engines.calendar import KhmerCalendar
from .engines.leap import leap_type as _leap_type
from .engines.month import days_in_month as _days_in_month, days_in_year as _days_in_year
from .formatting import standard as _standard
from .formatting.registry import render

_calendar: Optional[KhmerCalendar] = None

def set_calendar(cal: KhmerCalendar) -> None:
    global _calendar
    _calendar = cal

def _cal() -> KhmerCalendar:
    if _calendar is None:
        raise RuntimeError("Calendar not initialized")
    return _calendar

def get_calendar(name: str) -> KhmerCalendar:
    """A fresh calendar built from a named spec ("traditional", "computed")."""
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar spec '{name}'. Available: {sorted(ALL_SPECS)}")
    return KhmerCalendar(ALL_SPECS[name])

def calendar_info() -> Dict[str, Any]:
    return _cal().info()

# ============================================================
# Conversion
# ============================================================

def from_gregorian(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> ConversionResult:
    return _cal().from_gregorian(year, month, day, hour, minute, second)

def from_datetime(value: date) -> ConversionResult:
    return _cal().from_datetime(value)

def from_khmer(day: int, moon_phase: int, month_index: int, be_year: int) -> date:
    return _cal().from_khmer(day, moon_phase, month_index, be_year)

def to_datetime(day: int, moon_phase: int, month_index: int, be_year: int) -> datetime:
    return _cal().to_datetime(day, moon_phase, month_index, be_year)

# ============================================================
# New Year
# ============================================================

def get_new_year(year: int) -> NewYearMoment:
    return _cal().get_new_year(year)

def new_year_info(year: int) -> NewYearInfo:
    return _cal().new_year_info(year)

# ============================================================
# Formatting
# ============================================================

def format(result: ConversionResult, pattern: Optional[str] = None) -> str:
    if not pattern:
        return _standard.default_format(result)
    return render(result, pattern)

# ============================================================
# Calendar structure
# ============================================================

def leap_type(be_year: int) -> LeapType:
    return _leap_type(be_year)

def days_in_month(month_index: int, be_year: int) -> int:
    return _days_in_month(month_index, be_year)

def days_in_year(be_year: int) -> int:
    return _days_in_year(be_year)

constants = SimpleNamespace(
    LUNAR_MONTHS=locale.LUNAR_MONTHS,
    LUNAR_MONTH_NAMES=locale.LUNAR_MONTH_NAMES,
    LUNAR_MONTH_ABBREVIATIONS=locale.LUNAR_MONTH_ABBREVIATIONS,
    SOLAR_MONTH_NAMES=locale.SOLAR_MONTH_NAMES,
    SOLAR_MONTH_ABBREVIATIONS=locale.SOLAR_MONTH_ABBREVIATIONS,
    ANIMAL_YEAR_NAMES=locale.ANIMAL_YEAR_NAMES,
    ANIMAL_YEAR_EMOJIS=locale.ANIMAL_YEAR_EMOJIS,
    SAK_NAMES=locale.SAK_NAMES,
    WEEKDAY_NAMES=locale.WEEKDAY_NAMES,
    WEEKDAY_SHORT_NAMES=locale.WEEKDAY_SHORT_NAMES,
    MOON_PHASE_NAMES=locale.MOON_PHASE_NAMES,
    MOON_PHASE_SHORT_NAMES=locale.MOON_PHASE_SHORT_NAMES,
    MOON_DAY_SYMBOLS=locale.MOON_DAY_SYMBOLS,
)
