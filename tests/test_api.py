# tests/test_api.py

from datetime import date

import pytest

import khmercal
from khmercal import api
from khmercal.engines.specs import ALL_SPECS, COMPUTED_SPEC, DEFAULT_SPEC, CalendarSpec


def test_default_calendar_is_bound():
    info = khmercal.calendar_info()
    assert info["name"] == "traditional"
    assert info["epoch"] == "1900-01-01"
    assert 2024 in info["overrides"]


def test_get_calendar_by_name():
    cal = khmercal.get_calendar("computed")
    assert cal.spec is COMPUTED_SPEC
    assert not cal.spec.new_year_overrides
    with pytest.raises(KeyError):
        khmercal.get_calendar("nope")


def test_set_calendar_swaps_binding():
    old = api._calendar
    try:
        khmercal.set_calendar(khmercal.get_calendar("computed"))
        assert not khmercal.new_year_info(2011).overridden
    finally:
        khmercal.set_calendar(old)
    assert khmercal.new_year_info(2011).overridden


def test_uninitialized_calendar():
    old = api._calendar
    api._calendar = None
    try:
        with pytest.raises(RuntimeError, match="not initialized"):
            khmercal.from_gregorian(2024, 4, 14)
    finally:
        api._calendar = old


@pytest.mark.parametrize("year", ["2024", 2024.0, 0, 10000])
def test_new_year_info_validates(year):
    with pytest.raises(khmercal.InvalidDateError):
        khmercal.new_year_info(year)
    with pytest.raises(khmercal.InvalidDateError):
        khmercal.get_calendar("traditional").new_year_info(year)


def test_spec_tweak_and_validation():
    spec = DEFAULT_SPEC.tweak(name="wide", reverse_search_radius=3)
    assert spec.reverse_search_radius == 3
    assert DEFAULT_SPEC.reverse_search_radius == 2
    assert set(ALL_SPECS) == {"traditional", "computed"}

    with pytest.raises(ValueError):
        CalendarSpec(name="bad", be_year_range=(3000, 2000))
    with pytest.raises(ValueError):
        CalendarSpec(name="bad", reverse_search_radius=-1)
    with pytest.raises(ValueError):
        CalendarSpec(name="bad", boundary_hours=(0, 24))
    with pytest.raises(ValueError):
        CalendarSpec(name="bad", transition_scan_months=(13,))


def test_spec_overrides_are_not_shared():
    a, b = CalendarSpec(name="a"), CalendarSpec(name="b")
    assert a.new_year_overrides == b.new_year_overrides
    assert a.new_year_overrides is not b.new_year_overrides


def test_structure_helpers():
    assert khmercal.leap_type(2567) == khmercal.LeapType.LEAP_MONTH
    assert khmercal.days_in_year(2567) == 384
    assert khmercal.days_in_year(2564) == 355
    assert khmercal.days_in_month(khmercal.MonthIndex.JESTH, 2564) == 30
    assert khmercal.days_in_month(khmercal.MonthIndex.PISAKH, 2568) == 30
    assert khmercal.days_in_month(khmercal.MonthIndex.CHETR, 2568) == 29


def test_constants():
    c = khmercal.constants
    assert len(c.LUNAR_MONTHS) == 14
    assert len(c.SOLAR_MONTH_NAMES) == 12
    assert len(c.ANIMAL_YEAR_NAMES) == 12
    assert len(c.SAK_NAMES) == 10
    assert len(c.WEEKDAY_NAMES) == 7
    assert len(c.MOON_DAY_SYMBOLS) == 30


def test_from_datetime_and_to_datetime():
    r = khmercal.from_datetime(date(1900, 1, 1))
    k = r.khmer
    assert (k.day, k.moon_phase, k.month_index) == (1, khmercal.MoonPhase.WAXING, khmercal.MonthIndex.BOSS)
    assert khmercal.to_datetime(k.day, k.moon_phase, k.month_index, k.be_year).date() == date(1900, 1, 1)
