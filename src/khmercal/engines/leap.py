"""
khmercal.engines.leap
---------------------
Leap-year classification from the traditional correction counters.

Two families of counters are derived from the defining year ratio 292207/800:

* BE-based (aharkun, avoman, bodithey, kromthupul) classify a Buddhist Era
  year as regular (354 days), leap-month (384) or leap-day (355).
* JS-based variants of the same counters (different offsets) drive the
  New Year calculation in khmercal.engines.solar / new_year.
"""

from __future__ import annotations

from functools import lru_cache

from ..core.types import LeapType

YEAR_NUM = 292207
YEAR_DEN = 800


# ---------------------------------------------------------
# BE-year counters
# ---------------------------------------------------------

def aharkun(be_year: int) -> int:
    return (be_year * YEAR_NUM + 499) // YEAR_DEN + 4

def aharkun_mod(be_year: int) -> int:
    return (be_year * YEAR_NUM + 499) % YEAR_DEN

def kromthupul(be_year: int) -> int:
    return YEAR_DEN - aharkun_mod(be_year)

def avoman(be_year: int) -> int:
    return (aharkun(be_year) * 11 + 25) % 692

def bodithey(be_year: int) -> int:
    ahk = aharkun(be_year)
    return ((ahk * 11 + 25) // 692 + ahk + 29) % 30

def is_solar_leap(be_year: int) -> bool:
    """366-day solar year."""
    return kromthupul(be_year) <= 207


def is_leap_month(be_year: int) -> bool:
    """True for an adhikameas year (two extra Asadh months)."""
    b = bodithey(be_year)
    b_next = bodithey(be_year + 1)
    if b == 25 and b_next == 5:
        return False
    return (b == 24 and b_next == 6) or b >= 25 or b < 6


def is_leap_day_by_calculation(be_year: int) -> bool:
    """Raw chantrathimeas test, before the leap-month deferral is applied."""
    av = avoman(be_year)
    if av == 0 and avoman(be_year - 1) == 137:
        return True
    if is_solar_leap(be_year):
        return av < 127
    if av == 137 and avoman(be_year + 1) == 0:
        return False
    return av < 138


@lru_cache(maxsize=None)
def leap_type(be_year: int) -> LeapType:
    """
    Classify a BE year.

    A leap-month year cannot also carry the extra day, so a leap day that
    falls in a run of leap-month years is deferred to the first year after
    the run.
    """
    if is_leap_month(be_year):
        return LeapType.LEAP_MONTH
    if is_leap_day_by_calculation(be_year):
        return LeapType.LEAP_DAY
    if is_leap_month(be_year - 1):
        previous = be_year - 1
        while True:
            if is_leap_day_by_calculation(previous):
                return LeapType.LEAP_DAY
            previous -= 1
            if not is_leap_month(previous):
                return LeapType.REGULAR
    return LeapType.REGULAR


# ---------------------------------------------------------
# JS-year counters (New Year)
# ---------------------------------------------------------

def aharkun_js(js_year: int) -> int:
    return (js_year * YEAR_NUM + 373) // YEAR_DEN + 1

def kromthupul_js(js_year: int) -> int:
    return YEAR_DEN - (js_year * YEAR_NUM + 373) % YEAR_DEN

def avoman_js(js_year: int) -> int:
    return (aharkun_js(js_year) * 11 + 650) % 692

def bodithey_js(js_year: int) -> int:
    ahk = aharkun_js(js_year)
    return (ahk + (11 * ahk + 650) // 692) % 30

def has_366_days(js_year: int) -> bool:
    return kromthupul_js(js_year) <= 207


def is_adhikameas(js_year: int) -> bool:
    b = bodithey_js(js_year)
    b_next = bodithey_js(js_year + 1)
    if b == 24 and b_next == 6:
        return True
    if b == 25 and b_next == 5:
        return False
    return b > 24 or b < 6


def is_chantrathimeas(js_year: int) -> bool:
    av = avoman_js(js_year)
    av_prev = avoman_js(js_year - 1)
    if av == 0 and av_prev == 137:
        return True
    if has_366_days(js_year):
        return av < 127
    if av == 137 and avoman_js(js_year + 1) == 0:
        return False
    return av < 138
