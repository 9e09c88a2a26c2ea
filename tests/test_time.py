# tests/test_time.py

import random
from datetime import date

import pytest

from khmercal.core import time as kt
from khmercal.engines import era


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = kt.from_jdn(jdn_in)
        assert kt.date_to_jdn(d) == jdn_in


def test_known_epochs():
    assert kt.to_jdn(2000, 1, 1) == 2451545
    assert kt.to_jdn(1970, 1, 1) == 2440588
    assert kt.from_jdn(2451545) == date(2000, 1, 1)


def test_jdn_matches_ordinal():
    random.seed(42)
    offset = kt.date_to_jdn(date(1, 1, 1)) - date(1, 1, 1).toordinal()
    for _ in range(1000):
        d = date.fromordinal(random.randint(1, 3652059))
        assert kt.date_to_jdn(d) == d.toordinal() + offset


@pytest.mark.parametrize("y, m, d, expected", [
    (2000, 1, 1, 6),    # Saturday
    (2024, 4, 14, 0),   # Sunday
    (1900, 1, 1, 1),    # Monday
    (2024, 5, 22, 3),   # Wednesday
])
def test_day_of_week(y, m, d, expected):
    assert kt.day_of_week(y, m, d) == expected


def test_day_of_week_agrees_with_datetime():
    random.seed(42)
    for _ in range(500):
        d = date.fromordinal(random.randint(600000, 800000))
        # date.isoweekday: Monday=1 .. Sunday=7
        assert kt.day_of_week(d.year, d.month, d.day) == d.isoweekday() % 7


def test_gregorian_month_lengths():
    assert kt.days_in_gregorian_month(2024, 2) == 29
    assert kt.days_in_gregorian_month(2023, 2) == 28
    assert kt.days_in_gregorian_month(1900, 2) == 28
    assert kt.days_in_gregorian_month(2000, 2) == 29
    assert kt.days_in_gregorian_month(2024, 4) == 30
    assert kt.days_in_gregorian_month(2024, 12) == 31
    assert kt.is_gregorian_leap(2400)
    assert not kt.is_gregorian_leap(2100)


def test_era_conversions():
    assert era.ad_to_be(2024) == 2568
    assert era.be_to_ad(2568) == 2024
    assert era.ad_to_js(2024) == 1386
    assert era.js_to_ad(1386) == 2024
    assert era.be_to_js(2568) == 1386
    assert era.js_to_be(1386) == 2568


def test_maybe_be_year():
    assert era.maybe_be_year(2024, 4) == 2567
    assert era.maybe_be_year(2024, 5) == 2568
    assert era.maybe_be_year(2024, 1) == 2567
    assert era.maybe_be_year(2024, 12) == 2568
