"""
worldcal.engines.month_calendar
-------------------------------
A calendar with an ordered cycle of months and an optional week.

Day 1 of any year is month 1, day 1.  The number of months is the same in
every year; their lengths may depend on the year (leap days).  An epoch
offset lets several month calendars, e.g. regnal reckonings, share one
backbone epoch day 0.

Typical uses:
  * the working calendar of an invented world,
  * a proleptic Gregorian calendar (see ``worldcal.engines.gregorian.CALENDAR``).
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from ..core.errors import DateParseError, OutOfRangeError, YearZeroError
from ..core.types import Date, Era, Month
from . import epoch
from .calendar import AbstractCalendar
from .specs import MonthSpec
from .week import Week

_NUMBER_RE = re.compile(r"[0-9]+")


class MonthCalendar(AbstractCalendar):
    def __init__(
        self,
        *,
        era: Era,
        prior_era: Era,
        months: Sequence[MonthSpec],
        week: Optional[Week] = None,
        epoch_offset: int = 0,
    ):
        super().__init__(era=era, prior_era=prior_era, week=week, epoch_offset=epoch_offset)
        self._records: Tuple[MonthSpec, ...] = tuple(months)
        if not self._records:
            raise ValueError("a month calendar needs at least one month")

    def has_months(self) -> bool:
        return True

    # ---------------------------------------------------------
    # Lengths (all lookups go through epoch.rule_year)
    # ---------------------------------------------------------

    def days_in_year(self, year: int) -> int:
        return sum(self._month_lengths(year))

    def days_in_month(self, year: int, month_of_year: int) -> int:
        self._check_month(month_of_year)
        return self._records[month_of_year - 1].length(epoch.rule_year(year))

    def _month_lengths(self, year: int) -> List[int]:
        ry = epoch.rule_year(year)
        return [rec.length(ry) for rec in self._records]

    # ---------------------------------------------------------
    # Months
    # ---------------------------------------------------------

    @property
    def months(self) -> Tuple[Month, ...]:
        return tuple(rec.month for rec in self._records)

    @property
    def month_count(self) -> int:
        return len(self._records)

    def month(self, month_of_year: int) -> Month:
        self._check_month(month_of_year)
        return self._records[month_of_year - 1].month

    # ---------------------------------------------------------
    # Dates
    # ---------------------------------------------------------

    def date(self, year: int, month_of_year: int, day_of_month: int) -> Date:
        d = Date(self, year, month_of_year, day_of_month)
        self.validate_date(d)
        return d

    def validate_date(self, date: Date) -> None:
        self._check_owner(date)

        if date.year == 0:
            raise YearZeroError(f'year is 0 in date: "{date}".')

        self._check_month(date.month_of_year)

        length = self.days_in_month(date.year, date.month_of_year)
        if not 1 <= date.day_of_month <= length:
            raise OutOfRangeError(
                f"Day is out of range (1,...,{length}) in date: \"{date}\""
            )

    def date_to_day(self, date: Date) -> int:
        self.validate_date(date)
        lengths = self._month_lengths(date.year)
        day_of_year = sum(lengths[: date.month_of_year - 1]) + date.day_of_month
        return epoch.year_day_to_day(date.year, day_of_year, self.days_in_year) + self.epoch_offset

    def day_to_date(self, day: int) -> Date:
        year, day_of_year = epoch.day_to_year_day(day - self.epoch_offset, self.days_in_year)
        month_of_year, day_of_month = epoch.split_day_of_year(day_of_year, self._month_lengths(year))
        return Date(self, year, month_of_year, day_of_month)

    # ---------------------------------------------------------
    # Text: "<year>-<month>-<day>-<ERA>"
    # ---------------------------------------------------------

    def format_date(self, day: int) -> str:
        return self.date_to_string(self.day_to_date(day))

    def parse_date(self, text: str) -> int:
        return self.date_to_day(self.string_to_date(text))

    def date_to_string(self, date: Date) -> str:
        self.validate_date(date)
        return f"{abs(date.year)}-{date.month_of_year}-{date.day_of_month}-{date.era.short}"

    def string_to_date(self, text: str) -> Date:
        tokens = text.strip().split("-")
        if len(tokens) != 4:
            raise self._bad_format(text)

        sym = tokens[3].strip().casefold()
        if sym == self.era.short.casefold():
            sign = 1
        elif sym == self.prior_era.short.casefold():
            sign = -1
        else:
            raise self._bad_format(text)

        if not all(_NUMBER_RE.fullmatch(t) for t in tokens[:3]):
            raise self._bad_format(text)
        year, month_of_year, day_of_month = (int(t) for t in tokens[:3])

        if year <= 0:
            raise self._bad_format(text)

        return self.date(sign * year, month_of_year, day_of_month)

    # ---------------------------------------------------------
    # Object API
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MonthCalendar):
            return NotImplemented
        return (
            self.epoch_offset == other.epoch_offset
            and self.era == other.era
            and self.prior_era == other.prior_era
            and self._records == other._records
            and self._week == other._week
        )

    def __hash__(self) -> int:
        return hash((self.epoch_offset, self.era, self.prior_era, self.months, self._week))

    def __repr__(self) -> str:
        return f"MonthCalendar[{self.era},{self.prior_era},{len(self._records)}]"

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------

    def _check_month(self, month_of_year: int) -> None:
        if not 1 <= month_of_year <= len(self._records):
            raise OutOfRangeError(
                f"Month is out of range (1,...,{len(self._records)}): {month_of_year}"
            )

    def _bad_format(self, text: str) -> DateParseError:
        return DateParseError(
            f'Invalid format, expected "<year>-<monthOfYear>-<dayOfMonth>-'
            f'{self.era}|{self.prior_era}", got "{text}".'
        )
