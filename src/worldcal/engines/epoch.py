"""
worldcal.engines.epoch
----------------------
The epoch-day algorithm shared by every calendar kind.

Epoch day 0 is day 1 of year 1.  Years run ..., -2, -1, 1, 2, ...; there is
no year 0.  Because year lengths vary, conversion is an iterative walk over
whole years rather than a closed form, costing O(|day| / mean year length).

Sign convention: length rules are written on a year scale that *has* a year
0.  Every lookup of a year-dependent length goes through ``rule_year``,
which maps calendar year -1 to rule year 0, -2 to -1, and so on.  Rules are
therefore never called with a calendar year directly.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

from ..core.errors import OutOfRangeError, YearZeroError

DaysInYear = Callable[[int], int]


def rule_year(year: int) -> int:
    """The year handed to a length rule for calendar year ``year``."""
    if year > 0:
        return year
    if year < 0:
        return year + 1
    raise YearZeroError("Year 0 is undefined.")


def day_to_year_day(day: int, days_in_year: DaysInYear) -> Tuple[int, int]:
    """
    Splits a day count from the epoch into (year, day_of_year).

    ``days_in_year`` takes calendar years (no year 0).
    """
    if day >= 0:
        year = 1
        length = _positive(days_in_year(year), year)
        while day >= length:
            day -= length
            year += 1
            length = _positive(days_in_year(year), year)
        return year, day + 1

    year = -1
    day = -day
    length = _positive(days_in_year(year), year)
    while day > length:
        day -= length
        year -= 1
        length = _positive(days_in_year(year), year)
    return year, length - day + 1


def _positive(length: int, year: int) -> int:
    # A zero-length year would never be left by the walk.
    if length <= 0:
        raise OutOfRangeError(f"year {year} has {length} days; years must have at least one day")
    return length


def year_day_to_day(year: int, day_of_year: int, days_in_year: DaysInYear) -> int:
    """Inverse of day_to_year_day.  The coordinate must already be valid."""
    if year > 0:
        day = day_of_year - 1
        for y in range(1, year):
            day += days_in_year(y)
        return day

    if year < 0:
        day = days_in_year(year) - day_of_year + 1
        for y in range(year + 1, 0):
            day += days_in_year(y)
        return -day

    raise YearZeroError("Year 0 is undefined.")


def split_day_of_year(day_of_year: int, month_lengths: Sequence[int]) -> Tuple[int, int]:
    """Decomposes a 1-based day-of-year into (month_of_year, day_of_month)."""
    remaining = day_of_year
    for i, length in enumerate(month_lengths, start=1):
        if remaining <= length:
            return i, remaining
        remaining -= length
    raise OutOfRangeError(
        f"day of year {day_of_year} exceeds year length {sum(month_lengths)}"
    )
