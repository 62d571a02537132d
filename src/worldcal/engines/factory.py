"""
worldcal.engines.factory
------------------------
Transforms pure data specifications into live, immutable calendars.
"""

from __future__ import annotations

import logging

from .specs import CalendarSpec, MonthCalendarSpec, YearCalendarSpec
from .calendar import AbstractCalendar
from .month_calendar import MonthCalendar
from .year_calendar import YearCalendar

logger = logging.getLogger(__name__)


def build_year_calendar(spec: YearCalendarSpec) -> YearCalendar:
    return YearCalendar(
        era=spec.era,
        prior_era=spec.prior_era,
        year_length=spec.year_length,
        week=spec.week,
        day_of_year_digits=spec.day_of_year_digits,
        epoch_offset=spec.epoch_offset,
    )


def build_month_calendar(spec: MonthCalendarSpec) -> MonthCalendar:
    return MonthCalendar(
        era=spec.era,
        prior_era=spec.prior_era,
        months=spec.months,
        week=spec.week,
        epoch_offset=spec.epoch_offset,
    )


def make_calendar(spec: CalendarSpec) -> AbstractCalendar:
    """The universal entry point."""
    if isinstance(spec, MonthCalendarSpec):
        cal: AbstractCalendar = build_month_calendar(spec)
    elif isinstance(spec, YearCalendarSpec):
        cal = build_year_calendar(spec)
    else:
        raise TypeError(f"Unknown calendar spec type: {type(spec)}")

    logger.debug("built %r (offset=%d, weeks=%s)", cal, cal.epoch_offset, cal.has_weeks())
    return cal
