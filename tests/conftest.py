# tests/conftest.py

import pytest

from khmercal.engines.calendar import KhmerCalendar
from khmercal.engines.specs import COMPUTED_SPEC, DEFAULT_SPEC


@pytest.fixture
def cal():
    """Fresh calendar per test so caches never leak between tests."""
    return KhmerCalendar(DEFAULT_SPEC)


@pytest.fixture
def computed_cal():
    """Calendar without the historical New Year override table."""
    return KhmerCalendar(COMPUTED_SPEC)
