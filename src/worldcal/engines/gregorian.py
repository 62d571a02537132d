"""The standard Gregorian calendar, built once at import."""

from __future__ import annotations

from . import epoch
from .factory import build_month_calendar
from .month_calendar import MonthCalendar
from .specs import GREGORIAN_FEBRUARY, GREGORIAN_SPEC

CALENDAR: MonthCalendar = build_month_calendar(GREGORIAN_SPEC)
WEEK = CALENDAR.week


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test for a calendar year (1 BC is a leap year)."""
    return GREGORIAN_FEBRUARY.is_leap(epoch.rule_year(year))


def february_days(year: int) -> int:
    return GREGORIAN_FEBRUARY(epoch.rule_year(year))
