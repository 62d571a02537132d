"""worldcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    calendar_info,
    make_calendar,
    register_calendar,
    load_config,
    format_date,
    parse_date,
    day_info,
)
from .core.errors import (
    CalendarError,
    YearZeroError,
    OutOfRangeError,
    UnknownWeekdayError,
    CalendarMismatchError,
    UnsupportedCapabilityError,
    DateParseError,
    FormatSyntaxError,
    ConfigError,
    UnknownCalendarError,
    DuplicateCalendarError,
)
from .core.types import Form, Era, Month, Weekday, YearDay, Date, DayInfo
from .engines.builder import MonthCalendarBuilder, YearCalendarBuilder
from .engines.gregorian import CALENDAR as GREGORIAN, is_leap_year, february_days
from .engines.lengths import LeapCycle, fixed
from .engines.month_calendar import MonthCalendar
from .engines.specs import STANDARD_MONTHS, STANDARD_WEEKDAYS, GREGORIAN_WEEK
from .engines.week import Week
from .engines.year_calendar import YearCalendar
from .formatter import DateFormatter

__all__ = [
    "list_calendars",
    "get_calendar",
    "calendar_info",
    "make_calendar",
    "register_calendar",
    "load_config",
    "format_date",
    "parse_date",
    "day_info",
    "CalendarError",
    "YearZeroError",
    "OutOfRangeError",
    "UnknownWeekdayError",
    "CalendarMismatchError",
    "UnsupportedCapabilityError",
    "DateParseError",
    "FormatSyntaxError",
    "ConfigError",
    "UnknownCalendarError",
    "DuplicateCalendarError",
    "Form",
    "Era",
    "Month",
    "Weekday",
    "YearDay",
    "Date",
    "DayInfo",
    "Week",
    "LeapCycle",
    "fixed",
    "MonthCalendar",
    "YearCalendar",
    "MonthCalendarBuilder",
    "YearCalendarBuilder",
    "GREGORIAN",
    "GREGORIAN_WEEK",
    "STANDARD_MONTHS",
    "STANDARD_WEEKDAYS",
    "is_leap_year",
    "february_days",
    "DateFormatter",
]
