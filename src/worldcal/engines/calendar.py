"""
worldcal.engines.calendar
-------------------------
The base class shared by year-only and month-cycle calendars.

It owns the era pair, the optional week and the epoch offset, and runs the
shared epoch algorithm against the subclass's ``days_in_year``.  Month and
week operations are present on every calendar and fail fast with
UnsupportedCapabilityError when the calendar lacks the capability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..core.errors import (
    CalendarMismatchError,
    OutOfRangeError,
    UnsupportedCapabilityError,
    YearZeroError,
)
from ..core.types import Date, Era, Month, Weekday, YearDay
from . import epoch
from .week import Week


class AbstractCalendar(ABC):
    def __init__(
        self,
        *,
        era: Era,
        prior_era: Era,
        week: Optional[Week] = None,
        epoch_offset: int = 0,
    ):
        self._era = era
        self._prior_era = prior_era
        self._week = week
        self._epoch_offset = epoch_offset

    # ---------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------

    @property
    def era(self) -> Era:
        return self._era

    @property
    def prior_era(self) -> Era:
        return self._prior_era

    @property
    def epoch_offset(self) -> int:
        """The epoch day of day 1 of year 1 in this calendar."""
        return self._epoch_offset

    def era_for(self, year: int) -> Era:
        if year == 0:
            raise YearZeroError("Year 0 is undefined.")
        return self._era if year > 0 else self._prior_era

    @abstractmethod
    def days_in_year(self, year: int) -> int:
        ...

    def has_months(self) -> bool:
        return False

    def has_weeks(self) -> bool:
        return self._week is not None

    # ---------------------------------------------------------
    # YearDay computations
    # ---------------------------------------------------------

    def year_day(self, year: int, day_of_year: int) -> YearDay:
        yd = YearDay(self, year, day_of_year)
        self.validate_year_day(yd)
        return yd

    def day_to_year_day(self, day: int) -> YearDay:
        year, day_of_year = epoch.day_to_year_day(day - self._epoch_offset, self.days_in_year)
        return YearDay(self, year, day_of_year)

    def year_day_to_day(self, year_day: YearDay) -> int:
        self.validate_year_day(year_day)
        return epoch.year_day_to_day(
            year_day.year, year_day.day_of_year, self.days_in_year
        ) + self._epoch_offset

    def validate_year_day(self, year_day: YearDay) -> None:
        self._check_owner(year_day)

        if year_day.year == 0:
            raise YearZeroError(f'year is 0 in date: "{year_day}".')

        length = self.days_in_year(year_day.year)
        if not 1 <= year_day.day_of_year <= length:
            raise OutOfRangeError(
                f"dayOfYear out of range (1,...,{length}) for year "
                f"{year_day.year} in date: \"{year_day}\""
            )

    # ---------------------------------------------------------
    # Months: unsupported unless overridden
    # ---------------------------------------------------------

    def date(self, year: int, month_of_year: int, day_of_month: int) -> Date:
        raise self._no_months()

    def date_to_day(self, date: Date) -> int:
        raise self._no_months()

    def day_to_date(self, day: int) -> Date:
        raise self._no_months()

    def days_in_month(self, year: int, month_of_year: int) -> int:
        raise self._no_months()

    def month(self, month_of_year: int) -> Month:
        raise self._no_months()

    @property
    def months(self) -> Tuple[Month, ...]:
        raise self._no_months()

    @property
    def month_count(self) -> int:
        raise self._no_months()

    def validate_date(self, date: Date) -> None:
        raise self._no_months()

    # ---------------------------------------------------------
    # Weeks
    # ---------------------------------------------------------

    @property
    def week(self) -> Week:
        if self._week is None:
            raise UnsupportedCapabilityError(f"{self} lacks a weekly cycle.")
        return self._week

    def day_to_weekday(self, day: int) -> Weekday:
        return self.week.day_to_weekday(day)

    def day_to_day_of_week(self, day: int) -> int:
        """0-based position of ``day`` in the weekly cycle."""
        return self.week.day_to_index(day)

    def days_in_week(self) -> int:
        return len(self.week)

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    @abstractmethod
    def format_date(self, day: int) -> str:
        ...

    @abstractmethod
    def parse_date(self, text: str) -> int:
        ...

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------

    def _check_owner(self, value: YearDay | Date) -> None:
        if value.calendar is not self:
            raise CalendarMismatchError(
                f'Calendar mismatch, expected "{self}", got "{value.calendar}"'
            )

    def _no_months(self) -> UnsupportedCapabilityError:
        return UnsupportedCapabilityError(f"{self} lacks a monthly cycle.")
