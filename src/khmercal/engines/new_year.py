"""
khmercal.engines.new_year
-------------------------
Khmer New Year (Moha Songkran) and Lerng Sak for a Gregorian year.

The New Year day count comes from the solar sotins; the date is anchored on
the lunar date of Lerng Sak (the era-increment day) and located in the
Gregorian calendar by walking back from April 17. A small table of
historically verified moments overrides the computed date and time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from ..core.errors import ComputationInvariantError
from ..core.time import from_jdn, to_jdn
from ..core.types import (
    DayOfWeek,
    LerngSakDate,
    MonthIndex,
    NewYearInfo,
    NewYearMoment,
)
from .era import ad_to_js
from .leap import aharkun_js, bodithey_js, is_adhikameas, is_chantrathimeas
from .solar import new_year_sotins, new_year_time, number_of_vanabat_days
from .walker import EpochWalker

# Gregorian day used to locate the New Year relative to Lerng Sak
ANCHOR_MONTH = 4
ANCHOR_DAY = 17


def lerng_sak_date(js_year: int) -> LerngSakDate:
    b = bodithey_js(js_year)
    if is_adhikameas(js_year - 1) and is_chantrathimeas(js_year - 1):
        b = (b + 1) % 30
    if b >= 6:
        return LerngSakDate(day_number=b - 1, month_index=MonthIndex.CHETR)
    return LerngSakDate(day_number=b, month_index=MonthIndex.PISAKH)


def lerng_sak_weekday(js_year: int) -> DayOfWeek:
    return DayOfWeek((aharkun_js(js_year) - 1) % 7)


def resolve_new_year(
    year: int,
    walker: EpochWalker,
    overrides: Mapping[int, NewYearMoment],
) -> NewYearInfo:
    js_year = ad_to_js(year)
    sotins = new_year_sotins(js_year)
    override = overrides.get(year)

    time = new_year_time(sotins)
    if time is None and override is None:
        raise ComputationInvariantError(
            f"No New Year sotin with angsar 0 for {year} (JS {js_year}): "
            + ", ".join(f"{s.sotin}:R{s.reasey}A{s.angsar}L{s.libda}" for s in sotins)
        )

    vanabat = number_of_vanabat_days(sotins)
    new_year_days = vanabat + 2

    ls = lerng_sak_date(js_year)
    anchor_month, anchor_dn = walker.lunar_position(year, ANCHOR_MONTH, ANCHOR_DAY)
    offset = ((anchor_month - MonthIndex.CHETR) * 29 + anchor_dn) - (
        (ls.month_index - MonthIndex.CHETR) * 29 + ls.day_number
    )
    new_year_jdn = to_jdn(year, ANCHOR_MONTH, ANCHOR_DAY) - (offset + new_year_days - 1)

    if override is not None:
        hour, minute = override.hour, override.minute
        new_year_jdn = to_jdn(override.year, override.month, override.day)
    else:
        hour, minute = time

    d = from_jdn(new_year_jdn)
    moment = NewYearMoment(d.year, d.month, d.day, hour, minute)
    ls_day = from_jdn(new_year_jdn + new_year_days - 1)

    return NewYearInfo(
        moment=moment,
        new_year_moment=moment.to_datetime(),
        lerng_sak_moment=datetime(ls_day.year, ls_day.month, ls_day.day),
        number_of_vanabat_days=vanabat,
        number_new_year_days=new_year_days,
        lerng_sak_date=ls,
        lerng_sak_weekday=lerng_sak_weekday(js_year),
        sotins=tuple(sotins),
        overridden=override is not None,
    )
