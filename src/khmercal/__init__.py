"""khmercal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    from_gregorian,
    from_datetime,
    from_khmer,
    to_datetime,
    get_new_year,
    new_year_info,
    format,
    leap_type,
    days_in_month,
    days_in_year,
    get_calendar,
    set_calendar,
    calendar_info,
    constants,
)
from .core.errors import (
    KhmerCalError,
    InvalidDateError,
    InvalidKhmerDateError,
    NotFoundError,
    ComputationInvariantError,
)
from .core.types import (
    AnimalYear,
    DayOfWeek,
    KhmerDate,
    LeapType,
    MonthIndex,
    MoonPhase,
    Sak,
)
from .engines.calendar import KhmerCalendar

__version__ = "0.1.0"

__all__ = [
    "from_gregorian",
    "from_datetime",
    "from_khmer",
    "to_datetime",
    "get_new_year",
    "new_year_info",
    "format",
    "leap_type",
    "days_in_month",
    "days_in_year",
    "get_calendar",
    "set_calendar",
    "calendar_info",
    "constants",
    "KhmerCalendar",
    "KhmerDate",
    "MoonPhase",
    "MonthIndex",
    "AnimalYear",
    "Sak",
    "DayOfWeek",
    "LeapType",
    "KhmerCalError",
    "InvalidDateError",
    "InvalidKhmerDateError",
    "NotFoundError",
    "ComputationInvariantError",
]
