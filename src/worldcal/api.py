from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .config import Source, load_config as _load_config
from .core.engine import Calendar, CalendarRegistry
from .core.types import DayInfo
from .core.time import to_epoch_day
from .engines.calendar import AbstractCalendar
from .engines.factory import make_calendar as _make_calendar
from .engines.specs import CalendarSpec
from .formatter import DateFormatter

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> Calendar:
    return _reg().get(name)

def calendar_info(name: str) -> Dict[str, Any]:
    cal = _reg().get(name)
    out: Dict[str, Any] = {
        "name": name,
        "kind": "months" if cal.has_months() else "years",
        "era": cal.era.full,
        "prior_era": cal.prior_era.full,
        "epoch_offset": cal.epoch_offset,
    }
    if cal.has_months():
        out["months"] = [m.full for m in cal.months]
    if cal.has_weeks():
        out["weekdays"] = [w.name for w in cal.week.weekdays]
    return out

def make_calendar(spec: CalendarSpec) -> AbstractCalendar:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: Calendar, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

def load_config(source: Source, *, register: bool = True, overwrite: bool = False) -> Dict[str, AbstractCalendar]:
    """Builds the calendars in ``source`` and, by default, registers them by symbol."""
    return _load_config(source, registry=_reg() if register else None, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def _epoch_day(day: int | date) -> int:
    # Python dates are proleptic Gregorian; epoch day 0 is 1 January 1 AD.
    return to_epoch_day(day) if isinstance(day, date) else day

def format_date(day: int | date, *, calendar: str = "gregorian", pattern: Optional[str] = None) -> str:
    cal = _reg().get(calendar)
    d = _epoch_day(day)
    if pattern is None:
        return cal.format_date(d)
    return DateFormatter.define(pattern).format_day(cal, d)

def parse_date(text: str, *, calendar: str = "gregorian", pattern: Optional[str] = None) -> int:
    cal = _reg().get(calendar)
    if pattern is None:
        return cal.parse_date(text)
    return DateFormatter.define(pattern).parse(cal, text)

def day_info(day: int | date, *, calendar: str = "gregorian") -> DayInfo:
    cal = _reg().get(calendar)
    d = _epoch_day(day)
    return DayInfo(
        epoch_day=d,
        calendar=calendar,
        year_day=cal.day_to_year_day(d),
        text=cal.format_date(d),
        date=cal.day_to_date(d) if cal.has_months() else None,
        weekday=cal.day_to_weekday(d) if cal.has_weeks() else None,
    )
