from __future__ import annotations
from worldcal.core.engine import CalendarRegistry
from worldcal.engines.specs import ALL_SPECS, GREGORIAN_SPEC
from worldcal.engines.factory import make_calendar
from worldcal.engines import gregorian

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        # Share the import-time Gregorian instance so its dates validate everywhere.
        calendars[name] = gregorian.CALENDAR if spec is GREGORIAN_SPEC else make_calendar(spec)
    return CalendarRegistry(calendars)
