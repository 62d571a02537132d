"""
worldcal.engines.lengths
------------------------
Year-length and month-length rules.

A length rule is any callable mapping a *rule year* to a number of days.
Rule years have a year 0: calendars hand a negative calendar year to a rule
as ``year + 1`` (see ``worldcal.engines.epoch.rule_year``), so a rule written
for the astronomical year numbering (e.g. "divisible by 4") keeps its
cadence across the epoch.

The helpers here are frozen dataclasses so that calendars built from them
compare and hash by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Maps a rule year to a day count.
YearLength = Callable[[int], int]


@dataclass(frozen=True)
class Fixed:
    """A length that never varies."""
    days: int

    def __post_init__(self) -> None:
        if self.days < 0:
            raise ValueError("days must be non-negative")

    def __call__(self, year: int) -> int:
        return self.days


@dataclass(frozen=True)
class LeapCycle:
    """
    ``base`` days, plus ``extra`` days in leap years.

    A year is a leap year when it is divisible by ``every``, except when it
    is divisible by ``except_every``, unless it is also divisible by
    ``unless_every``.  The Gregorian February is
    ``LeapCycle(28, every=4, except_every=100, unless_every=400)``.
    """
    base: int
    extra: int = 1
    every: int = 4
    except_every: Optional[int] = None
    unless_every: Optional[int] = None

    def __post_init__(self) -> None:
        if self.base < 0:
            raise ValueError("base must be non-negative")
        for name in ("every", "except_every", "unless_every"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive")

    def is_leap(self, year: int) -> bool:
        if year % self.every != 0:
            return False
        if self.except_every is not None and year % self.except_every == 0:
            return self.unless_every is not None and year % self.unless_every == 0
        return True

    def __call__(self, year: int) -> int:
        return self.base + (self.extra if self.is_leap(year) else 0)


def fixed(days: int) -> Fixed:
    return Fixed(days)


def as_length(value: int | YearLength) -> YearLength:
    """Accepts a day count or a length rule; returns a length rule."""
    if isinstance(value, bool):
        raise TypeError("length must be an int or a callable")
    if isinstance(value, int):
        return Fixed(value)
    if callable(value):
        return value
    raise TypeError(f"length must be an int or a callable, got {type(value).__name__}")
