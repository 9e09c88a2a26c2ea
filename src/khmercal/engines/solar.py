"""
khmercal.engines.solar
----------------------
Traditional fixed-point solar ephemeris used to time the New Year.

Positions are sexagesimal: 1 reasey (sign) = 30 angsar (degrees),
1 angsar = 60 libda (minutes), so a full circle is 12 * 30 * 60 = 21600 libda.
All arithmetic is integer; floor division and truncated remainders follow the
almanac routine, since a rounding change moves the New Year by hours.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..core.errors import ComputationInvariantError
from ..core.types import SunInfo
from .leap import has_366_days, kromthupul_js

ANGSAR_LIBDA = 60
REASEY_LIBDA = 30 * ANGSAR_LIBDA

# (multiplicity, chhaya) for khan 0..5
CHHAYA_SUN: Tuple[Tuple[int, int], ...] = (
    (35, 0),
    (32, 35),
    (27, 67),
    (22, 94),
    (13, 116),
    (5, 129),
)
CHHAYA_SUN_DEFAULT = (0, 134)

# R2.A20.L0
_LEFT_OVER_BASE = 2 * REASEY_LIBDA + 20 * ANGSAR_LIBDA


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def split_libda(value: int) -> Tuple[int, int, int]:
    """Libda count -> (reasey, angsar, libda)."""
    reasey = value // REASEY_LIBDA
    angsar = _trunc_mod(value, REASEY_LIBDA) // ANGSAR_LIBDA
    libda = _trunc_mod(value, ANGSAR_LIBDA)
    return reasey, angsar, libda


def sun_average_as_libda(js_year: int, sotin: int) -> int:
    """Mean sun (madhyama) after `sotin` days of the JS year, in libda."""
    r2 = 800 * sotin + kromthupul_js(js_year - 1)
    reasey = r2 // 24350
    r3 = r2 % 24350
    angsar = r3 // 811
    r4 = r3 % 811
    libda = r4 // 14 - 3
    return REASEY_LIBDA * reasey + ANGSAR_LIBDA * angsar + libda


def _last_left_over(kaen: int, left_over: int) -> int:
    if kaen in (0, 1, 2):
        return kaen
    if kaen in (3, 4, 5):
        return 6 * REASEY_LIBDA - left_over
    if kaen in (6, 7, 8):
        return left_over - 6 * REASEY_LIBDA
    if kaen in (9, 10, 11):
        # R11.A29.L60
        return 11 * REASEY_LIBDA + 29 * ANGSAR_LIBDA + 60 - left_over
    raise ComputationInvariantError(f"kaen out of range: {kaen}")


def sun_info(js_year: int, sotin: int) -> SunInfo:
    """Sun inauguration (true sun) for a JS year and day count."""
    sun_average = sun_average_as_libda(js_year, sotin)

    left_over = sun_average - _LEFT_OVER_BASE
    if sun_average < _LEFT_OVER_BASE:
        left_over += 12 * REASEY_LIBDA
    kaen = left_over // REASEY_LIBDA

    rs = _last_left_over(kaen, left_over)
    lr, la, ll = split_libda(rs)

    if la >= 15:
        khan = 2 * lr + 1
        pouichalip = ANGSAR_LIBDA * (la - 15) + ll
    else:
        khan = 2 * lr
        pouichalip = ANGSAR_LIBDA * la + ll

    multiplicity, chhaya = CHHAYA_SUN[khan] if 0 <= khan <= 5 else CHHAYA_SUN_DEFAULT
    phol = (pouichalip * multiplicity) // 900 + chhaya

    if kaen <= 5:
        inauguration = sun_average - phol
    else:
        inauguration = sun_average + phol

    reasey, angsar, libda = split_libda(inauguration)
    return SunInfo(
        sotin=sotin,
        sun_inauguration_as_libda=inauguration,
        reasey=reasey,
        angsar=angsar,
        libda=libda,
    )


def new_year_sotins(js_year: int) -> List[SunInfo]:
    """The four candidate New Year days, spanning the end of the previous solar year."""
    if has_366_days(js_year - 1):
        sotins: Sequence[int] = (363, 364, 365, 366)
    else:
        sotins = (362, 363, 364, 365)
    return [sun_info(js_year, s) for s in sotins]


def new_year_time(sotins: Sequence[SunInfo]) -> Tuple[int, int] | None:
    """(hour, minute) of Moha Songkran from the first sotin at angsar 0, if any."""
    for s in sotins:
        if s.angsar == 0:
            # 60 libda of solar motion span one day
            minutes = 24 * 60 - s.libda * 24
            return (minutes // 60) % 24, minutes % 60
    return None


def number_of_vanabat_days(sotins: Sequence[SunInfo]) -> int:
    return 2 if sotins[0].angsar == 0 else 1
