"""
worldcal.engines.specs
----------------------
Pure data records describing calendars, and the standard ones.

A spec is frozen and carries no behaviour; ``worldcal.engines.factory``
turns it into a live calendar.  Variants of a standard spec are made with
``like(name).tweak(...)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple, Union

from ..core.types import Era, Month, Weekday
from .lengths import LeapCycle, YearLength, fixed
from .week import Week


# ============================================================
# RECORDS
# ============================================================

@dataclass(frozen=True)
class MonthSpec:
    """A month and its length rule (a function of the rule year)."""
    month: Month
    length: YearLength


@dataclass(frozen=True)
class _SpecBase:
    @staticmethod
    def like(name: str) -> "CalendarSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs: Any) -> "CalendarSpec":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class YearCalendarSpec(_SpecBase):
    """A calendar of years and days-of-year, without months."""
    era: Era
    prior_era: Era
    year_length: YearLength
    week: Optional[Week] = None
    day_of_year_digits: int = 1
    epoch_offset: int = 0
    meta: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class MonthCalendarSpec(_SpecBase):
    """A calendar with an ordered cycle of months."""
    era: Era
    prior_era: Era
    months: Tuple[MonthSpec, ...]
    week: Optional[Week] = None
    epoch_offset: int = 0
    meta: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "months", tuple(self.months))


CalendarSpec = Union[YearCalendarSpec, MonthCalendarSpec]


# ============================================================
# STANDARD NAMES
# ============================================================

AFTER_EPOCH = Era("AE", "After Epoch")
BEFORE_EPOCH = Era("BE", "Before Epoch")

ANNO_DOMINI = Era("AD", "Anno Domini")
BEFORE_CHRIST = Era("BC", "Before Christ")

JANUARY = Month("January", "Jan", "Jan", "J")
FEBRUARY = Month("February", "Feb", "Feb", "F")
MARCH = Month("March", "Mar", "Mar", "M")
APRIL = Month("April", "Apr", "Apr", "A")
MAY = Month("May", "May", "May", "M")
JUNE = Month("June", "Jun", "Jun", "J")
JULY = Month("July", "Jul", "Jul", "J")
AUGUST = Month("August", "Aug", "Aug", "A")
SEPTEMBER = Month("September", "Sep", "Sep", "S")
OCTOBER = Month("October", "Oct", "Oct", "O")
NOVEMBER = Month("November", "Nov", "Nov", "N")
DECEMBER = Month("December", "Dec", "Dec", "D")

STANDARD_MONTHS: Tuple[Month, ...] = (
    JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE,
    JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER,
)

STANDARD_WEEKDAYS: Tuple[Weekday, ...] = tuple(
    Weekday(name)
    for name in ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
)

# 1 January 1 AD (proleptic Gregorian) was a Monday.
GREGORIAN_WEEK = Week(STANDARD_WEEKDAYS, 1)


# ============================================================
# GREGORIAN
# ============================================================

# Rule years count the year before 1 AD as 0, which makes it a leap year.
GREGORIAN_FEBRUARY = LeapCycle(28, extra=1, every=4, except_every=100, unless_every=400)

GREGORIAN_SPEC = MonthCalendarSpec(
    era=ANNO_DOMINI,
    prior_era=BEFORE_CHRIST,
    months=tuple(
        MonthSpec(m, GREGORIAN_FEBRUARY if m is FEBRUARY else fixed(days))
        for m, days in zip(STANDARD_MONTHS, (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31))
    ),
    week=GREGORIAN_WEEK,
    meta={"description": "Proleptic Gregorian calendar; epoch day 0 = 1 January 1 AD"},
)


# ============================================================
# BACKBONE
# ============================================================

# A plain day count in 365-day years, sharing the Gregorian epoch and week.
EPOCH_SPEC = YearCalendarSpec(
    era=AFTER_EPOCH,
    prior_era=BEFORE_EPOCH,
    year_length=fixed(365),
    week=GREGORIAN_WEEK,
    day_of_year_digits=3,
    meta={"description": "365-day years counted from epoch day 0"},
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": GREGORIAN_SPEC,
    "epoch": EPOCH_SPEC,
}
