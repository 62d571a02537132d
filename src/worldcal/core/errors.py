class CalendarError(ValueError):
    """Base error."""

class YearZeroError(CalendarError):
    """Raised when a coordinate or length lookup names year 0."""

class OutOfRangeError(CalendarError):
    """Raised when a month, day-of-month or day-of-year is out of range."""

class UnknownWeekdayError(OutOfRangeError):
    """Raised when a weekday is not a member of a week cycle."""

class CalendarMismatchError(CalendarError):
    """Raised when a coordinate is used with a calendar other than its own."""

class UnsupportedCapabilityError(CalendarError):
    """Raised when a month or week operation is invoked on a calendar without months or weeks."""

class DateParseError(CalendarError):
    """Raised when a date string does not match the expected form."""

class FormatSyntaxError(CalendarError):
    """Raised when a date format pattern cannot be compiled."""

class ConfigError(CalendarError):
    """Raised when a declarative calendar configuration is invalid."""

class UnknownCalendarError(CalendarError, KeyError):
    """Raised when a calendar name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""

class DuplicateCalendarError(CalendarError):
    """Raised when a calendar name is already registered and overwrite is off."""
