"""
worldcal.engines.year_calendar
------------------------------
A calendar with years and days but no months.

Used as the backbone epoch for a family of month calendars (which offset
themselves against its day 0), and for coarse time scales where only the
year matters.  Dates read ``<ERA><year>-<day of year>``, e.g. ``AT1-01``.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.errors import DateParseError
from ..core.types import Era
from . import epoch
from .lengths import YearLength
from .calendar import AbstractCalendar
from .week import Week

_BODY_RE = re.compile(r"^([0-9]+)-([0-9]+)$")


class YearCalendar(AbstractCalendar):
    def __init__(
        self,
        *,
        era: Era,
        prior_era: Era,
        year_length: YearLength,
        week: Optional[Week] = None,
        day_of_year_digits: int = 1,
        epoch_offset: int = 0,
    ):
        super().__init__(era=era, prior_era=prior_era, week=week, epoch_offset=epoch_offset)
        if day_of_year_digits < 1:
            raise ValueError("day_of_year_digits must be at least 1")
        self._year_length = year_length
        self._digits = day_of_year_digits

    @property
    def year_length(self) -> YearLength:
        """The raw rule; it counts years with a year 0.  Prefer days_in_year()."""
        return self._year_length

    @property
    def day_of_year_digits(self) -> int:
        return self._digits

    def days_in_year(self, year: int) -> int:
        return self._year_length(epoch.rule_year(year))

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def format_date(self, day: int) -> str:
        yd = self.day_to_year_day(day)
        return f"{yd.era.short}{abs(yd.year)}-{yd.day_of_year:0{self._digits}d}"

    def parse_date(self, text: str) -> int:
        s = text.strip()
        folded = s.casefold()

        # Longest era first, so "AB" is not read as era "A" followed by "B".
        eras = sorted((self.era, self.prior_era), key=lambda e: len(e.short), reverse=True)
        for era in eras:
            if folded.startswith(era.short.casefold()):
                m = _BODY_RE.match(s[len(era.short):])
                if m is None:
                    break
                year = int(m.group(1))
                if year == 0:
                    break
                sign = 1 if era is self.era else -1
                return self.year_day_to_day(self.year_day(sign * year, int(m.group(2))))

        raise self._bad_format(text)

    # ---------------------------------------------------------
    # Object API
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, YearCalendar):
            return NotImplemented
        return (
            self.era == other.era
            and self.prior_era == other.prior_era
            and self._year_length == other._year_length
            and self._week == other._week
            and self._digits == other._digits
            and self.epoch_offset == other.epoch_offset
        )

    def __hash__(self) -> int:
        return hash((self.era, self.prior_era, self._week, self._digits, self.epoch_offset))

    def __repr__(self) -> str:
        return f"YearCalendar[{self.era},{self.prior_era}]"

    def _bad_format(self, text: str) -> DateParseError:
        return DateParseError(
            f'Invalid format, expected "{self.era}|{self.prior_era}'
            f'<year>-<dayOfYear>", got "{text}".'
        )
