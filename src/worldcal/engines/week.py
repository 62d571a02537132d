"""
worldcal.engines.week
---------------------
A repeating cycle of weekdays, independent of months and years.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.errors import UnknownWeekdayError
from ..core.types import Weekday


@dataclass(frozen=True)
class Week:
    """
    ``weekdays`` in cycle order; ``offset`` is the cycle index of epoch day 0.
    """
    weekdays: Tuple[Weekday, ...]
    offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekdays", tuple(self.weekdays))
        if not self.weekdays:
            raise ValueError("a week needs at least one weekday")

    @classmethod
    def of(cls, names: Sequence[str | Weekday], offset: int = 0) -> "Week":
        days = tuple(n if isinstance(n, Weekday) else Weekday(n) for n in names)
        return cls(days, offset)

    def __len__(self) -> int:
        return len(self.weekdays)

    def day_to_index(self, day: int) -> int:
        # Python's % floors, so negative days land in 0..len-1.
        return (day + self.offset) % len(self.weekdays)

    def day_to_weekday(self, day: int) -> Weekday:
        return self.weekdays[self.day_to_index(day)]

    def index_of(self, weekday: Weekday) -> int:
        for i, wd in enumerate(self.weekdays):
            if wd == weekday:
                return i
        raise UnknownWeekdayError(f'Invalid weekday value: "{weekday}"')

    def weekday_to_day(self, weekday: Weekday) -> int:
        """One epoch day falling on ``weekday``; any day congruent modulo the cycle length also does."""
        return self.index_of(weekday) - self.offset

    def next_day(self, weekday: Weekday, day: int) -> int:
        """The first epoch day on or after ``day`` that falls on ``weekday``."""
        return day + (self.index_of(weekday) - self.day_to_index(day)) % len(self.weekdays)

    def previous_day(self, weekday: Weekday, day: int) -> int:
        """The last epoch day on or before ``day`` that falls on ``weekday``."""
        return day - (self.day_to_index(day) - self.index_of(weekday)) % len(self.weekdays)

    def find(self, name: str) -> Weekday:
        """The one weekday any of whose name forms matches ``name``, ignoring case."""
        folded = name.casefold()
        hits = [wd for wd in self.weekdays if any(n.casefold() == folded for n in wd.names())]
        if len(hits) != 1:
            raise UnknownWeekdayError(f'Unknown or ambiguous weekday name: "{name}"')
        return hits[0]
