"""
worldcal.formatter.directives
-----------------------------
The compiled pieces of a date pattern.

Each directive renders one field of a resolved day and contributes one
regular-expression fragment for parsing.  Directives are frozen; a compiled
pattern is a tuple of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ..core.types import Date, Form, Weekday, YearDay


@dataclass(frozen=True)
class Fields:
    """Everything a directive may render for one epoch day."""
    day: int
    year_day: YearDay
    date: Optional[Date] = None
    weekday: Optional[Weekday] = None


# Field keys shared by the compiler, the directives and the parser.
DAY_OF_MONTH = "d"
DAY_OF_YEAR = "D"
MONTH_NUMBER = "m"
YEAR = "y"
MONTH_NAME = "M"
ERA_NAME = "E"
WEEKDAY_NAME = "W"

NUMERIC = (DAY_OF_MONTH, DAY_OF_YEAR, MONTH_NUMBER, YEAR)
NAMED = (MONTH_NAME, ERA_NAME, WEEKDAY_NAME)

NEEDS_MONTHS = frozenset({DAY_OF_MONTH, MONTH_NUMBER, MONTH_NAME})
NEEDS_WEEKS = frozenset({WEEKDAY_NAME})


@dataclass(frozen=True)
class Literal:
    text: str

    def render(self, fields: Fields) -> str:
        return self.text

    def regex(self) -> str:
        return re.escape(self.text)


@dataclass(frozen=True)
class Number:
    """A numeric field, zero-padded to at least ``width`` digits."""
    field: str
    width: int

    def value(self, fields: Fields) -> int:
        if self.field == YEAR:
            return abs(fields.year_day.year)
        if self.field == DAY_OF_YEAR:
            return fields.year_day.day_of_year
        assert fields.date is not None
        if self.field == MONTH_NUMBER:
            return fields.date.month_of_year
        return fields.date.day_of_month

    def render(self, fields: Fields) -> str:
        return f"{self.value(fields):0{self.width}d}"

    def regex(self) -> str:
        # Lazy so that adjacent fields such as "yyyymmdd" split by width.
        return r"(\d{%d,}?)" % self.width


@dataclass(frozen=True)
class Name:
    """A month, era or weekday name in one of its four forms."""
    field: str
    form: Form

    def render(self, fields: Fields) -> str:
        if self.field == ERA_NAME:
            return fields.year_day.era.form(self.form)
        if self.field == MONTH_NAME:
            assert fields.date is not None
            return fields.date.month.form(self.form)
        assert fields.weekday is not None
        return fields.weekday.form(self.form)

    @staticmethod
    def regex_for(names: Iterable[str]) -> str:
        # Longest first so that "March" is not cut short by "Mar".
        alternatives = sorted({n for n in names if n}, key=len, reverse=True)
        return "(" + "|".join(re.escape(n) for n in alternatives) + ")"


Directive = Union[Literal, Number, Name]


def merge_literals(directives: Iterable[Directive]) -> Tuple[Directive, ...]:
    """Joins adjacent literals and drops empty ones."""
    out: List[Directive] = []
    for d in directives:
        if isinstance(d, Literal):
            if not d.text:
                continue
            if out and isinstance(out[-1], Literal):
                out[-1] = Literal(out[-1].text + d.text)
                continue
        out.append(d)
    return tuple(out)
