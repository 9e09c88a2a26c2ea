# tests/test_validation.py

from datetime import date

import pytest

from khmercal.core.errors import InvalidDateError, InvalidKhmerDateError, KhmerCalError


@pytest.mark.parametrize("args, message", [
    ((2024, 13, 1), "Month must be between 1 and 12"),
    ((2024, 0, 1), "Month must be between 1 and 12"),
    ((2023, 2, 29), "February 2023 has 28 days"),
    ((2024, 4, 31), "April 2024 has 30 days"),
    ((2024, 4, 0), "April 2024 has 30 days"),
    ((2024, 4, 1, 24), "Hour must be between 0 and 23"),
    ((2024, 4, 1, -1), "Hour must be between 0 and 23"),
    ((2024, 4, 1, 0, 60), "Minute must be between 0 and 59"),
    ((2024, 4, 1, 0, 0, 60), "Second must be between 0 and 59"),
    ((2024, "4", 1), "Invalid month: '4'. Expected an integer"),
    ((2024, 4.0, 1), "Invalid month: 4.0. Expected an integer"),
    ((2024, 4, True), "Invalid day: True. Expected an integer"),
    ((None, 4, 1), "Invalid year: None. Expected an integer"),
    ((0, 4, 1), "Year must be between"),
])
def test_invalid_gregorian(cal, args, message):
    with pytest.raises(InvalidDateError) as ei:
        cal.from_gregorian(*args)
    assert message in str(ei.value)


def test_leap_february_is_valid(cal):
    assert cal.from_gregorian(2024, 2, 29).gregorian.day == 29


@pytest.mark.parametrize("args, message", [
    ((0, 0, 5, 2568), "Lunar day must be between 1 and 15"),
    ((16, 0, 5, 2568), "Lunar day must be between 1 and 15"),
    ((1, 2, 5, 2568), "moon_phase must be 0"),
    ((1, -1, 5, 2568), "moon_phase must be 0"),
    ((1, 0, 14, 2568), "month_index must be between 0 and 13"),
    ((1, 0, -1, 2568), "month_index must be between 0 and 13"),
    ((1, 0, 5, 1999), "be_year must be between 2000 and 3000"),
    ((1, 0, 5, 3001), "be_year must be between 2000 and 3000"),
    ((1.5, 0, 5, 2568), "Invalid day: 1.5. Expected an integer"),
    ((1, 0, 5, "2568"), "Invalid be_year: '2568'. Expected an integer"),
])
def test_invalid_khmer(cal, args, message):
    with pytest.raises(InvalidKhmerDateError) as ei:
        cal.from_khmer(*args)
    assert message in str(ei.value)


def test_error_hierarchy():
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(InvalidKhmerDateError, ValueError)
    assert issubclass(InvalidDateError, KhmerCalError)
    assert issubclass(InvalidKhmerDateError, KhmerCalError)


def test_from_datetime_rejects_other_types(cal):
    with pytest.raises(InvalidDateError):
        cal.from_datetime("2024-04-14")
    with pytest.raises(InvalidDateError):
        cal.from_datetime(None)
    assert cal.from_datetime(date(2024, 4, 14)).gregorian.day == 14


def test_get_new_year_validates(cal):
    with pytest.raises(InvalidDateError):
        cal.get_new_year("2024")
    with pytest.raises(InvalidDateError):
        cal.get_new_year(0)


def test_validation_happens_before_work(cal):
    cal.from_gregorian(2024, 4, 14)
    n_new_years = len(cal._new_years)
    with pytest.raises(InvalidDateError):
        cal.from_gregorian(2031, 2, 30)
    assert len(cal._new_years) == n_new_years
