# tests/test_month.py

import random

import pytest

from khmercal.core.errors import InvalidKhmerDateError
from khmercal.core.types import KhmerDate, LeapType, MonthIndex, MoonPhase
from khmercal.engines.leap import leap_type
from khmercal.engines.month import days_in_month, days_in_year, next_month, previous_month


def _reachable(be):
    if leap_type(be) == LeapType.LEAP_MONTH:
        return [m for m in MonthIndex if m != MonthIndex.ASADH]
    return [m for m in MonthIndex if m < MonthIndex.BOTHMAK_ASADH]


def test_days_in_month_invariant():
    for be in range(2000, 3001):
        lt = leap_type(be)
        for m in MonthIndex:
            n = days_in_month(m, be)
            assert n in (0, 29, 30)
            if n == 0:
                assert m in (MonthIndex.BOTHMAK_ASADH, MonthIndex.TUTIYAK_ASADH)
                assert lt != LeapType.LEAP_MONTH


def test_year_length_is_sum_of_reachable_months():
    for be in range(2500, 2600):
        assert sum(days_in_month(m, be) for m in _reachable(be)) == days_in_year(be)


@pytest.mark.parametrize("be, days", [
    (2564, 355),
    (2565, 384),
    (2566, 354),
    (2567, 384),
    (2568, 354),
])
def test_days_in_year(be, days):
    assert days_in_year(be) == days


def test_month_lengths_known_years():
    assert days_in_month(MonthIndex.JESTH, 2564) == 30
    assert days_in_month(MonthIndex.JESTH, 2566) == 29
    assert days_in_month(MonthIndex.BOTHMAK_ASADH, 2565) == 30
    assert days_in_month(MonthIndex.TUTIYAK_ASADH, 2565) == 30
    assert days_in_month(MonthIndex.BOTHMAK_ASADH, 2566) == 0
    assert days_in_month(MonthIndex.PISAKH, 2566) == 30
    assert days_in_month(MonthIndex.CHETR, 2566) == 29


def test_month_succession():
    assert next_month(MonthIndex.JESTH, 2567) == MonthIndex.BOTHMAK_ASADH
    assert next_month(MonthIndex.BOTHMAK_ASADH, 2567) == MonthIndex.TUTIYAK_ASADH
    assert next_month(MonthIndex.TUTIYAK_ASADH, 2567) == MonthIndex.SRAP
    assert next_month(MonthIndex.JESTH, 2568) == MonthIndex.ASADH
    assert next_month(MonthIndex.KADEUK, 2568) == MonthIndex.MIKASAR
    assert previous_month(MonthIndex.MIKASAR, 2568) == MonthIndex.KADEUK
    assert previous_month(MonthIndex.SRAP, 2567) == MonthIndex.TUTIYAK_ASADH
    assert previous_month(MonthIndex.SRAP, 2568) == MonthIndex.ASADH


def test_previous_is_inverse_of_next():
    for be in range(2550, 2600):
        for m in _reachable(be):
            assert previous_month(next_month(m, be), be) == m
            assert next_month(previous_month(m, be), be) == m


# ---------------------------------------------------------
# KhmerDate arithmetic
# ---------------------------------------------------------

def test_day_number_split():
    for dn in range(30):
        day, phase = KhmerDate.split_day_number(dn)
        assert 1 <= day <= 15
        assert KhmerDate(day, phase, MonthIndex.MEAK, 2568).day_number == dn
    assert KhmerDate.from_day_number(15, MonthIndex.PISAKH, 2568) == KhmerDate(1, MoonPhase.WANING, MonthIndex.PISAKH, 2568)


def test_be_increments_entering_waning_pisakh():
    d = KhmerDate(15, MoonPhase.WAXING, MonthIndex.PISAKH, 2567)
    nxt = d.add_days(1)
    assert nxt == KhmerDate(1, MoonPhase.WANING, MonthIndex.PISAKH, 2568)
    assert nxt.subtract_days(1) == d


def test_no_be_change_leaving_chetr():
    d = KhmerDate(1, MoonPhase.WAXING, MonthIndex.CHETR, 2567)
    # Chetr has 29 days
    assert d.add_days(29) == KhmerDate(1, MoonPhase.WAXING, MonthIndex.PISAKH, 2567)
    assert d.add_days(28) == KhmerDate(14, MoonPhase.WANING, MonthIndex.CHETR, 2567)


def test_be_change_when_leaving_pisakh_from_waxing():
    d = KhmerDate(10, MoonPhase.WAXING, MonthIndex.PISAKH, 2567)
    # 5 days to 15 waxing, 15 more to 30 (last day of Pisakh), 1 more to 1 waxing Jesth
    out = d.add_days(21)
    assert out == KhmerDate(1, MoonPhase.WAXING, MonthIndex.JESTH, 2568)
    assert out.subtract_days(21) == d


def test_leap_month_rollover():
    d = KhmerDate(14, MoonPhase.WANING, MonthIndex.JESTH, 2567)
    assert d.add_days(1) == KhmerDate(1, MoonPhase.WAXING, MonthIndex.BOTHMAK_ASADH, 2567)
    assert d.add_days(61) == KhmerDate(1, MoonPhase.WAXING, MonthIndex.SRAP, 2567)
    d = KhmerDate(14, MoonPhase.WANING, MonthIndex.JESTH, 2568)
    assert d.add_days(1) == KhmerDate(1, MoonPhase.WAXING, MonthIndex.ASADH, 2568)


def test_year_rollover():
    d = KhmerDate(15, MoonPhase.WANING, MonthIndex.KADEUK, 2568)
    assert d.add_days(1) == KhmerDate(1, MoonPhase.WAXING, MonthIndex.MIKASAR, 2568)
    assert KhmerDate(1, MoonPhase.WAXING, MonthIndex.MIKASAR, 2568).subtract_days(1) == d


def test_add_subtract_identity():
    random.seed(42)
    start = KhmerDate(1, MoonPhase.WAXING, MonthIndex.CHETR, 2567)
    for _ in range(200):
        n = random.randint(1, 1500)
        assert start.add_days(n).subtract_days(n) == start
        assert start.subtract_days(n).add_days(n) == start


def test_add_days_is_additive():
    random.seed(42)
    start = KhmerDate(7, MoonPhase.WANING, MonthIndex.MEAK, 2560)
    for _ in range(50):
        a, b = random.randint(0, 400), random.randint(0, 400)
        assert start.add_days(a).add_days(b) == start.add_days(a + b)


def test_negative_and_zero_shift():
    d = KhmerDate(3, MoonPhase.WAXING, MonthIndex.BOSS, 2568)
    assert d.add_days(0) is d
    assert d.add_days(-5) == d.subtract_days(5)


def test_shift_of_nonexistent_date_raises():
    with pytest.raises(InvalidKhmerDateError):
        KhmerDate(1, MoonPhase.WAXING, MonthIndex.BOTHMAK_ASADH, 2568).add_days(1)
    with pytest.raises(InvalidKhmerDateError):
        # 2566 Jesth has 29 days, no 15 waning
        KhmerDate(15, MoonPhase.WANING, MonthIndex.JESTH, 2566).add_days(1)


def test_khmer_date_is_immutable():
    d = KhmerDate(3, MoonPhase.WAXING, MonthIndex.BOSS, 2568)
    with pytest.raises(Exception):
        d.day = 4
    d.add_days(10)
    assert d.day == 3
