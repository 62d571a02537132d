from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .engine import Calendar


class Form(Enum):
    """How a month, era or weekday name is rendered."""
    TINY = 1
    UNAMBIGUOUS = 2
    SHORT = 3
    FULL = 4

    @classmethod
    def from_count(cls, count: int) -> "Form":
        """Form selected by a run of `count` directive characters."""
        if count <= 1:
            return cls.TINY
        if count == 2:
            return cls.UNAMBIGUOUS
        if count == 3:
            return cls.SHORT
        return cls.FULL


@dataclass(frozen=True)
class Era:
    short: str
    full: str = ""

    def __post_init__(self) -> None:
        if not self.short:
            raise ValueError("era short form must not be empty")
        if not self.full:
            object.__setattr__(self, "full", self.short)

    def form(self, form: Form) -> str:
        # Eras only carry two texts; everything below FULL is the short one.
        return self.full if form is Form.FULL else self.short

    def __str__(self) -> str:
        return self.short


@dataclass(frozen=True)
class Month:
    full: str
    short: str
    unambiguous: str
    tiny: str

    @classmethod
    def named(
        cls,
        full: str,
        *,
        short: str = "",
        unambiguous: str = "",
        tiny: str = "",
    ) -> "Month":
        """Month whose missing name forms are derived from the full name."""
        short = short or full[:3]
        return cls(
            full=full,
            short=short,
            unambiguous=unambiguous or short,
            tiny=tiny or full[:1],
        )

    def form(self, form: Form) -> str:
        if form is Form.TINY:
            return self.tiny
        if form is Form.UNAMBIGUOUS:
            return self.unambiguous
        if form is Form.SHORT:
            return self.short
        return self.full

    def names(self) -> tuple[str, ...]:
        return (self.full, self.short, self.unambiguous, self.tiny)

    def __str__(self) -> str:
        return self.full


@dataclass(frozen=True)
class Weekday:
    name: str
    short: str = ""
    unambiguous: str = ""
    tiny: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("weekday name must not be empty")
        for attr, width in (("short", 3), ("unambiguous", 2), ("tiny", 1)):
            if not getattr(self, attr):
                object.__setattr__(self, attr, self.name[:width])

    def form(self, form: Form) -> str:
        if form is Form.TINY:
            return self.tiny
        if form is Form.UNAMBIGUOUS:
            return self.unambiguous
        if form is Form.SHORT:
            return self.short
        return self.name

    def names(self) -> tuple[str, ...]:
        return (self.name, self.short, self.unambiguous, self.tiny)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class YearDay:
    """A (year, day-of-year) coordinate; year omits 0, day counts from 1."""
    calendar: "Calendar" = field(repr=False)
    year: int
    day_of_year: int

    @property
    def era(self) -> Era:
        return self.calendar.era_for(self.year)

    def __str__(self) -> str:
        return f"{self.calendar}:{self.year}/{self.day_of_year}"


@dataclass(frozen=True)
class Date:
    """A (year, month, day) coordinate on a calendar with months."""
    calendar: "Calendar" = field(repr=False)
    year: int
    month_of_year: int
    day_of_month: int

    @property
    def era(self) -> Era:
        return self.calendar.era_for(self.year)

    @property
    def month(self) -> Month:
        return self.calendar.month(self.month_of_year)

    @property
    def days_in_month(self) -> int:
        return self.calendar.days_in_month(self.year, self.month_of_year)

    @property
    def day_of_year(self) -> int:
        return sum(
            self.calendar.days_in_month(self.year, m)
            for m in range(1, self.month_of_year)
        ) + self.day_of_month

    @property
    def weekday(self) -> Weekday:
        return self.calendar.day_to_weekday(self.calendar.date_to_day(self))

    @property
    def day_of_week(self) -> int:
        return self.calendar.day_to_day_of_week(self.calendar.date_to_day(self))

    def __str__(self) -> str:
        return f"{self.calendar}:{self.year}-{self.month_of_year}-{self.day_of_month}"


@dataclass(frozen=True)
class DayInfo:
    epoch_day: int
    calendar: str
    year_day: YearDay
    text: str
    date: Optional[Date] = None
    weekday: Optional[Weekday] = None
