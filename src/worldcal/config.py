"""
worldcal.config
---------------
Declarative calendar definitions, read from a mapping or a JSON file.

The document has five sections, each keyed by a symbol that later sections
refer to::

    {
      "eras":     {"ar": {"short": "AR", "full": "After Rising"}, "BR": "Before Rising"},
      "weekdays": {"one": "Oneday", "two": {"name": "Twoday", "short": "Two"}},
      "weeks":    {"short": {"weekdays": ["one", "two"], "offset": 1}},
      "months":   {"thaw": {"full": "Thaw", "days": 30},
                   "bloom": {"full": "Bloom", "days": {"base": 30, "every": 3}}},
      "calendars": {
        "rising": {"kind": "months", "era": "ar", "prior_era": "BR",
                   "months": ["thaw", "bloom"], "week": "short"},
        "count":  {"kind": "years", "era": "ar", "prior_era": "BR",
                   "year_length": 61, "day_of_year_digits": 2}
      }
    }

A string value for an era is its full name; for a weekday, its name.  An
era's short text defaults to its symbol in upper case.  A calendar without
``kind`` has months.

The document shape is checked by the pydantic models below; references
between sections and the values themselves are checked while building.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .core.engine import CalendarRegistry
from .core.errors import ConfigError
from .core.types import Era, Month, Weekday
from .engines.builder import MonthCalendarBuilder, YearCalendarBuilder
from .engines.calendar import AbstractCalendar
from .engines.lengths import LeapCycle, YearLength, as_length
from .engines.week import Week

logger = logging.getLogger(__name__)

Source = Union[Mapping[str, Any], str, Path]


# ============================================================
# DOCUMENT MODELS
# ============================================================

class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid")


class EraModel(_Model):
    short: Optional[str] = Field(default=None, min_length=1)
    full: str = ""


class WeekdayModel(_Model):
    name: str
    short: str = ""
    unambiguous: str = ""
    tiny: str = ""


class WeekModel(_Model):
    weekdays: List[str] = Field(min_length=1)
    offset: StrictInt = 0


class LeapRuleModel(_Model):
    base: StrictInt
    extra: StrictInt = 1
    every: StrictInt = 4
    except_every: Optional[StrictInt] = None
    unless_every: Optional[StrictInt] = None


# A day count, or a leap rule.
Days = Union[StrictInt, LeapRuleModel]


class MonthModel(_Model):
    full: Optional[str] = None
    short: str = ""
    unambiguous: str = ""
    tiny: str = ""
    days: Days


class MonthCalendarModel(_Model):
    kind: Literal["months"]
    era: Optional[str] = None
    prior_era: Optional[str] = None
    months: List[str]
    week: Optional[str] = None
    epoch_offset: StrictInt = 0


class YearCalendarModel(_Model):
    kind: Literal["years"]
    era: Optional[str] = None
    prior_era: Optional[str] = None
    year_length: Optional[Days] = None
    week: Optional[str] = None
    day_of_year_digits: Optional[StrictInt] = None
    epoch_offset: StrictInt = 0


CalendarModel = Annotated[Union[MonthCalendarModel, YearCalendarModel], Field(discriminator="kind")]


class ConfigModel(_Model):
    eras: Dict[str, Union[str, EraModel]] = Field(default_factory=dict)
    weekdays: Dict[str, Union[str, WeekdayModel]] = Field(default_factory=dict)
    weeks: Dict[str, WeekModel] = Field(default_factory=dict)
    months: Dict[str, MonthModel] = Field(default_factory=dict)
    calendars: Dict[str, CalendarModel] = Field(default_factory=dict)

    @field_validator("calendars", mode="before")
    @classmethod
    def _months_by_default(cls, v: Any) -> Any:
        if not isinstance(v, Mapping):
            return v
        return {sym: {"kind": "months", **c} if isinstance(c, Mapping) else c for sym, c in v.items()}


# ============================================================
# LOADING
# ============================================================

def read_source(source: Source) -> Mapping[str, Any]:
    if isinstance(source, Mapping):
        return source
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as e:
        raise ConfigError(f"Cannot read calendar configuration {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def load_config(
    source: Source,
    *,
    registry: Optional[CalendarRegistry] = None,
    overwrite: bool = False,
) -> Dict[str, AbstractCalendar]:
    """
    Builds every calendar defined in ``source``.

    Returns the calendars by symbol.  With ``registry``, they are also
    registered under their symbols.
    """
    try:
        doc = ConfigModel.model_validate(read_source(source))
    except ValidationError as e:
        raise ConfigError(f"Invalid calendar configuration: {e}") from e

    eras = {sym: _era(sym, m) for sym, m in doc.eras.items()}
    weekdays = {sym: _weekday(sym, m) for sym, m in doc.weekdays.items()}
    weeks = {sym: _week(sym, m, weekdays) for sym, m in doc.weeks.items()}
    months = {sym: _month(sym, m) for sym, m in doc.months.items()}

    calendars: Dict[str, AbstractCalendar] = {}
    for sym, m in doc.calendars.items():
        calendars[sym] = _calendar(sym, m, eras, weeks, months)

    logger.debug(
        "loaded %d eras, %d weekdays, %d weeks, %d months, %d calendars",
        len(eras), len(weekdays), len(weeks), len(months), len(calendars),
    )

    if registry is not None:
        for sym, cal in calendars.items():
            registry.register(sym, cal, overwrite=overwrite)
    return calendars


# ============================================================
# SECTIONS
# ============================================================

def _era(sym: str, m: Union[str, EraModel]) -> Era:
    if isinstance(m, str):
        m = EraModel(full=m)
    try:
        return Era(m.short or sym.upper(), m.full)
    except ValueError as e:
        raise ConfigError(f"era {sym!r}: {e}") from e


def _weekday(sym: str, m: Union[str, WeekdayModel]) -> Weekday:
    if isinstance(m, str):
        m = WeekdayModel(name=m)
    try:
        return Weekday(m.name, m.short, m.unambiguous, m.tiny)
    except ValueError as e:
        raise ConfigError(f"weekday {sym!r}: {e}") from e


def _week(sym: str, m: WeekModel, weekdays: Mapping[str, Weekday]) -> Week:
    days = [_ref(f"week {sym!r}", "weekday", w, weekdays) for w in m.weekdays]
    return Week(tuple(days), m.offset)


def _month(sym: str, m: MonthModel):
    where = f"month {sym!r}"
    month = Month.named(m.full or sym, short=m.short, unambiguous=m.unambiguous, tiny=m.tiny)
    return month, _length(where, m.days)


def _calendar(
    sym: str,
    m: Union[MonthCalendarModel, YearCalendarModel],
    eras: Mapping[str, Era],
    weeks: Mapping[str, Week],
    months: Mapping[str, Any],
) -> AbstractCalendar:
    where = f"calendar {sym!r}"

    builder: Union[MonthCalendarBuilder, YearCalendarBuilder]
    if isinstance(m, MonthCalendarModel):
        builder = MonthCalendarBuilder()
        for ref in m.months:
            month, length = _ref(where, "month", ref, months)
            builder.month(month, length)
    else:
        builder = YearCalendarBuilder()
        if m.year_length is not None:
            builder.year_length(_length(where, m.year_length))
        if m.day_of_year_digits is not None:
            builder.day_of_year_digits(m.day_of_year_digits)

    if m.era is not None:
        builder.era(_ref(where, "era", m.era, eras))
    if m.prior_era is not None:
        builder.prior_era(_ref(where, "era", m.prior_era, eras))
    if m.week is not None:
        builder.week(_ref(where, "week", m.week, weeks))
    builder.epoch_offset(m.epoch_offset)

    return builder.build()


def _length(where: str, days: Days) -> YearLength:
    try:
        if isinstance(days, LeapRuleModel):
            return LeapCycle(**days.model_dump())
        return as_length(days)
    except ValueError as e:
        raise ConfigError(f"{where}: {e}") from e


def _ref(where: str, what: str, sym: str, table: Mapping[str, Any]) -> Any:
    if sym not in table:
        raise ConfigError(f"{where}: unknown {what} {sym!r}. Defined: {sorted(table)}")
    return table[sym]
