"""
worldcal.formatter.date_formatter
---------------------------------
Compiled date patterns, replayed against any number of days.

    fmt = DateFormatter.define("WWWW', 'MMMM' 'd', 'y' 'E")
    fmt.format(GREGORIAN.date(2024, 2, 20))    # 'Tuesday, February 20, 2024 AD'
    fmt.parse(GREGORIAN, "Friday, March 15, 44 BC")

A formatter does not belong to a calendar; the calendar is taken from the
value being formatted, or passed explicitly for epoch days and parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

from ..core.engine import Calendar
from ..core.errors import DateParseError, UnsupportedCapabilityError
from ..core.types import Date, YearDay
from .compiler import compile_pattern
from .directives import (
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    ERA_NAME,
    MONTH_NAME,
    MONTH_NUMBER,
    NEEDS_MONTHS,
    NEEDS_WEEKS,
    WEEKDAY_NAME,
    YEAR,
    Directive,
    Fields,
    Literal,
    Name,
    Number,
)


@dataclass(frozen=True)
class DateFormatter:
    pattern: str
    directives: Tuple[Directive, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", compile_pattern(self.pattern))

    @classmethod
    def define(cls, pattern: str) -> "DateFormatter":
        """Compiled formatter for ``pattern``, shared between callers."""
        return _define(pattern)

    # ---------------------------------------------------------
    # Capabilities
    # ---------------------------------------------------------

    @property
    def needs_months(self) -> bool:
        return any(_field(d) in NEEDS_MONTHS for d in self.directives)

    @property
    def needs_weeks(self) -> bool:
        return any(_field(d) in NEEDS_WEEKS for d in self.directives)

    def is_compatible_with(self, calendar: Calendar) -> bool:
        if self.needs_months and not calendar.has_months():
            return False
        if self.needs_weeks and not calendar.has_weeks():
            return False
        return True

    def _require(self, calendar: Calendar) -> None:
        if self.needs_months and not calendar.has_months():
            raise UnsupportedCapabilityError(
                f"Pattern {self.pattern!r} uses months, but {calendar} lacks a monthly cycle."
            )
        if self.needs_weeks and not calendar.has_weeks():
            raise UnsupportedCapabilityError(
                f"Pattern {self.pattern!r} uses weekdays, but {calendar} lacks a weekly cycle."
            )

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format(self, value: Date | YearDay) -> str:
        calendar = value.calendar
        if isinstance(value, Date):
            day = calendar.date_to_day(value)
        elif isinstance(value, YearDay):
            day = calendar.year_day_to_day(value)
        else:
            raise TypeError(f"expected Date or YearDay, got {type(value).__name__}")
        return self.format_day(calendar, day)

    def format_day(self, calendar: Calendar, day: int) -> str:
        self._require(calendar)
        fields = Fields(
            day=day,
            year_day=calendar.day_to_year_day(day),
            date=calendar.day_to_date(day) if self.needs_months else None,
            weekday=calendar.day_to_weekday(day) if self.needs_weeks else None,
        )
        return "".join(d.render(fields) for d in self.directives)

    # ---------------------------------------------------------
    # Parsing
    # ---------------------------------------------------------

    def parse(self, calendar: Calendar, text: str) -> int:
        """Epoch day named by ``text``, read through this pattern."""
        self._require(calendar)

        slots: List[Directive] = []
        parts: List[str] = []
        for d in self.directives:
            if isinstance(d, Literal):
                parts.append(d.regex())
                continue
            slots.append(d)
            parts.append(d.regex() if isinstance(d, Number) else Name.regex_for(_names(calendar, d)))

        m = re.fullmatch("".join(parts), text, re.IGNORECASE)
        if m is None:
            raise DateParseError(f'Invalid format, expected "{self.pattern}", got "{text}".')

        values: Dict[str, int] = {}
        for d, raw in zip(slots, m.groups()):
            if isinstance(d, Number):
                key, value = d.field, int(raw)
            else:
                key = MONTH_NUMBER if d.field == MONTH_NAME else d.field
                value = _lookup(calendar, d, raw)
            if values.setdefault(key, value) != value:
                raise DateParseError(f'Conflicting values for "{key}" in "{text}".')

        return self._resolve(calendar, values, text)

    def _resolve(self, calendar: Calendar, values: Dict[str, int], text: str) -> int:
        if YEAR not in values:
            raise DateParseError(f"Pattern {self.pattern!r} has no year field.")
        if values[YEAR] == 0:
            raise DateParseError(f'Year must be positive, got "{text}".')
        year = values[YEAR] * values.get(ERA_NAME, 1)

        if MONTH_NUMBER in values and DAY_OF_MONTH in values:
            day = calendar.date_to_day(
                calendar.date(year, values[MONTH_NUMBER], values[DAY_OF_MONTH])
            )
            if DAY_OF_YEAR in values and calendar.day_to_year_day(day).day_of_year != values[DAY_OF_YEAR]:
                raise DateParseError(f'Day of year disagrees with the date in "{text}".')
        elif DAY_OF_YEAR in values:
            day = calendar.year_day_to_day(calendar.year_day(year, values[DAY_OF_YEAR]))
        else:
            raise DateParseError(f"Pattern {self.pattern!r} does not identify a day.")

        if WEEKDAY_NAME in values and calendar.day_to_day_of_week(day) != values[WEEKDAY_NAME]:
            raise DateParseError(
                f'Weekday disagrees with the date in "{text}": '
                f"expected {calendar.day_to_weekday(day)}."
            )
        return day

    def __str__(self) -> str:
        return self.pattern


@lru_cache(maxsize=256)
def _define(pattern: str) -> DateFormatter:
    return DateFormatter(pattern)


def _field(d: Directive) -> str:
    return "" if isinstance(d, Literal) else d.field


def _options(calendar: Calendar, d: Name) -> Sequence[Tuple[int, Tuple[str, ...], str]]:
    """(value, all name forms, form selected by the directive) per candidate."""
    if d.field == ERA_NAME:
        return [
            (sign, (era.short, era.full), era.form(d.form))
            for sign, era in ((1, calendar.era), (-1, calendar.prior_era))
        ]
    if d.field == MONTH_NAME:
        return [(i, m.names(), m.form(d.form)) for i, m in enumerate(calendar.months, start=1)]
    return [(i, w.names(), w.form(d.form)) for i, w in enumerate(calendar.week.weekdays)]


def _names(calendar: Calendar, d: Name) -> List[str]:
    return [name for _, names, _ in _options(calendar, d) for name in names]


def _lookup(calendar: Calendar, d: Name, raw: str) -> int:
    key = raw.casefold()
    options = _options(calendar, d)

    # The form the pattern asks for wins; "J" in a TINY month field is still ambiguous.
    hits = [value for value, _, selected in options if selected.casefold() == key]
    if not hits:
        hits = [value for value, names, _ in options if key in (n.casefold() for n in names)]

    if len(hits) != 1:
        raise DateParseError(f'Ambiguous or unknown name "{raw}" for field "{d.field}".')
    return hits[0]
