"""
worldcal.engines.builder
------------------------
Fluent accumulators for calendar configuration.

A builder is the only mutable object in the engine.  It is owned by the code
setting up a calendar, turned into a frozen spec by ``spec()``, and into a
calendar by ``build()``; after that it can be thrown away::

    cal = (MonthCalendarBuilder()
           .era(Era("AR", "After Rising"))
           .month(Month.named("Thaw"), 30)
           .month(Month.named("Bloom"), LeapCycle(30, every=3))
           .week(["Oneday", "Twoday", "Threeday"], offset=1)
           .build())
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..core.errors import ConfigError
from ..core.types import Era, Month, Weekday
from .factory import build_month_calendar, build_year_calendar
from .lengths import YearLength, as_length, fixed
from .month_calendar import MonthCalendar
from .specs import AFTER_EPOCH, BEFORE_EPOCH, MonthCalendarSpec, MonthSpec, YearCalendarSpec
from .week import Week
from .year_calendar import YearCalendar

logger = logging.getLogger(__name__)


class _CalendarBuilder:
    def __init__(self) -> None:
        self._era: Era = AFTER_EPOCH
        self._prior_era: Era = BEFORE_EPOCH
        self._week: Optional[Week] = None
        self._epoch_offset: int = 0

    def era(self, era: Era):
        """Era of positive years.  Defaults to AE, "After Epoch"."""
        self._era = era
        return self

    def prior_era(self, era: Era):
        """Era of negative years.  Defaults to BE, "Before Epoch"."""
        self._prior_era = era
        return self

    def epoch_offset(self, day: int):
        """The epoch day of day 1 of year 1."""
        self._epoch_offset = day
        return self

    def week(self, week: Week | Sequence[str | Weekday], offset: int = 0):
        """Sets the weekly cycle, either as a Week or as weekdays plus an offset from day 0."""
        self._week = week if isinstance(week, Week) else Week.of(week, offset)
        return self


class MonthCalendarBuilder(_CalendarBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._months: List[MonthSpec] = []

    def month(self, month: Month | str, length: int | YearLength):
        """Adds a month of fixed length, or with a length rule of the rule year."""
        if isinstance(month, str):
            month = Month.named(month)
        self._months.append(MonthSpec(month, as_length(length)))
        return self

    def spec(self) -> MonthCalendarSpec:
        if not self._months:
            raise ConfigError("A month calendar needs at least one month.")
        return MonthCalendarSpec(
            era=self._era,
            prior_era=self._prior_era,
            months=tuple(self._months),
            week=self._week,
            epoch_offset=self._epoch_offset,
        )

    def build(self) -> MonthCalendar:
        cal = build_month_calendar(self.spec())
        logger.debug("builder produced %r with %d months", cal, cal.month_count)
        return cal


class YearCalendarBuilder(_CalendarBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._year_length: YearLength = fixed(365)
        self._digits: int = 1

    def year_length(self, length: int | YearLength):
        """A fixed year length, or a rule of the rule year (which has a year 0)."""
        self._year_length = as_length(length)
        return self

    def day_of_year_digits(self, digits: int):
        self._digits = digits
        return self

    def spec(self) -> YearCalendarSpec:
        if self._digits < 1:
            raise ConfigError("day_of_year_digits must be at least 1.")
        return YearCalendarSpec(
            era=self._era,
            prior_era=self._prior_era,
            year_length=self._year_length,
            week=self._week,
            day_of_year_digits=self._digits,
            epoch_offset=self._epoch_offset,
        )

    def build(self) -> YearCalendar:
        cal = build_year_calendar(self.spec())
        logger.debug("builder produced %r", cal)
        return cal
