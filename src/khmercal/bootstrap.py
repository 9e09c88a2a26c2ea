from __future__ import annotations
from khmercal.engines.calendar import KhmerCalendar
from khmercal.engines.specs import CalendarSpec, DEFAULT_SPEC

def build_calendar(spec: CalendarSpec = DEFAULT_SPEC) -> KhmerCalendar:
    return KhmerCalendar(spec)
