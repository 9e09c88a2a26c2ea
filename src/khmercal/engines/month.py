"""
khmercal.engines.month
----------------------
Khmer month calendar: month lengths, year lengths and month succession.

Months alternate 29/30 days starting from Mikasar (index 0). Jesth gains a
30th day in leap-day years. The two extra Asadh months (indices 12, 13) are
inserted between Jesth and Srap in leap-month years and have 0 days otherwise,
so they are never reached by normal succession.
"""

from __future__ import annotations

from ..core.errors import InvalidKhmerDateError
from ..core.types import KhmerDate, LeapType, MonthIndex
from .leap import leap_type

_YEAR_DAYS = {
    LeapType.REGULAR: 354,
    LeapType.LEAP_MONTH: 384,
    LeapType.LEAP_DAY: 355,
}


def days_in_month(month_index: int, be_year: int) -> int:
    lt = leap_type(be_year)
    if month_index == MonthIndex.JESTH and lt == LeapType.LEAP_DAY:
        return 30
    if month_index in (MonthIndex.BOTHMAK_ASADH, MonthIndex.TUTIYAK_ASADH):
        return 30 if lt == LeapType.LEAP_MONTH else 0
    return 29 if month_index % 2 == 0 else 30


def days_in_year(be_year: int) -> int:
    return _YEAR_DAYS[leap_type(be_year)]


def next_month(month_index: int, be_year: int) -> MonthIndex:
    if month_index == MonthIndex.JESTH and leap_type(be_year) == LeapType.LEAP_MONTH:
        return MonthIndex.BOTHMAK_ASADH
    if month_index == MonthIndex.KADEUK:
        return MonthIndex.MIKASAR
    if month_index == MonthIndex.BOTHMAK_ASADH:
        return MonthIndex.TUTIYAK_ASADH
    if month_index == MonthIndex.TUTIYAK_ASADH:
        return MonthIndex.SRAP
    return MonthIndex(month_index + 1)


def previous_month(month_index: int, be_year: int) -> MonthIndex:
    if month_index == MonthIndex.MIKASAR:
        return MonthIndex.KADEUK
    if month_index == MonthIndex.SRAP and leap_type(be_year) == LeapType.LEAP_MONTH:
        return MonthIndex.TUTIYAK_ASADH
    if month_index == MonthIndex.TUTIYAK_ASADH:
        return MonthIndex.BOTHMAK_ASADH
    if month_index == MonthIndex.BOTHMAK_ASADH:
        return MonthIndex.JESTH
    return MonthIndex(month_index - 1)


# ---------------------------------------------------------
# Lunar date arithmetic
# ---------------------------------------------------------

# BE increments between 15 waxing and 1 waning of Pisakh (day numbers 14 -> 15).
_BE_TRANSITION_DAY = 15


def shift_days(d: KhmerDate, count: int) -> KhmerDate:
    """Move a lunar date by count days (negative moves backward)."""
    dim = days_in_month(d.month_index, d.be_year)
    if not 0 <= d.day_number < dim:
        raise InvalidKhmerDateError(
            f"{d} does not exist: month {int(d.month_index)} of BE {d.be_year} has {dim} days."
        )
    if count == 0:
        return d
    if count > 0:
        month, dn, be = _forward(int(d.month_index), d.day_number, d.be_year, count)
    else:
        month, dn, be = _backward(int(d.month_index), d.day_number, d.be_year, -count)
    return KhmerDate.from_day_number(dn, month, be)


def _forward(month: int, dn: int, be: int, remaining: int) -> tuple[int, int, int]:
    while remaining > 0:
        left = days_in_month(month, be) - 1 - dn
        if remaining <= left:
            new_dn = dn + remaining
            if month == MonthIndex.PISAKH and dn < _BE_TRANSITION_DAY <= new_dn:
                be += 1
            return month, new_dn, be
        remaining -= left + 1
        if month == MonthIndex.PISAKH and dn < _BE_TRANSITION_DAY:
            be += 1
        month = next_month(month, be)
        dn = 0
    return month, dn, be


def _backward(month: int, dn: int, be: int, remaining: int) -> tuple[int, int, int]:
    while remaining > 0:
        if remaining <= dn:
            new_dn = dn - remaining
            if month == MonthIndex.PISAKH and new_dn < _BE_TRANSITION_DAY <= dn:
                be -= 1
            return month, new_dn, be
        remaining -= dn + 1
        if month == MonthIndex.PISAKH and dn >= _BE_TRANSITION_DAY:
            be -= 1
        month = previous_month(month, be)
        dn = days_in_month(month, be) - 1
    return month, dn, be
