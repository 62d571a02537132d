from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Tuple

from .errors import DuplicateCalendarError, UnknownCalendarError
from .types import Date, Era, Month, Weekday, YearDay

if TYPE_CHECKING:
    from ..engines.week import Week

logger = logging.getLogger(__name__)


class Calendar(Protocol):
    """The contract shared by every calendar kind.

    Month and week operations exist on every calendar; on a calendar that
    lacks the capability they raise UnsupportedCapabilityError.
    """
    @property
    def era(self) -> Era: ...
    @property
    def prior_era(self) -> Era: ...
    @property
    def epoch_offset(self) -> int: ...

    def era_for(self, year: int) -> Era: ...
    def days_in_year(self, year: int) -> int: ...
    def has_months(self) -> bool: ...
    def has_weeks(self) -> bool: ...

    def year_day(self, year: int, day_of_year: int) -> YearDay: ...
    def day_to_year_day(self, day: int) -> YearDay: ...
    def year_day_to_day(self, year_day: YearDay) -> int: ...
    def validate_year_day(self, year_day: YearDay) -> None: ...

    def date(self, year: int, month_of_year: int, day_of_month: int) -> Date: ...
    def date_to_day(self, date: Date) -> int: ...
    def day_to_date(self, day: int) -> Date: ...
    def days_in_month(self, year: int, month_of_year: int) -> int: ...
    def month(self, month_of_year: int) -> Month: ...
    @property
    def months(self) -> Tuple[Month, ...]: ...
    @property
    def month_count(self) -> int: ...
    def validate_date(self, date: Date) -> None: ...

    @property
    def week(self) -> "Week": ...
    def day_to_weekday(self, day: int) -> Weekday: ...
    def day_to_day_of_week(self, day: int) -> int: ...
    def days_in_week(self) -> int: ...

    def format_date(self, day: int) -> str: ...
    def parse_date(self, text: str) -> int: ...


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, Calendar]

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise UnknownCalendarError(
                f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}"
            )
        return self._calendars[name]

    def find(self, name: str) -> Optional[Calendar]:
        return self._calendars.get(name)

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise DuplicateCalendarError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
        logger.debug("registered calendar %r as %s", calendar, name)
