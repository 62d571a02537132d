# tests/test_year_calendar.py

import pytest
import random

from worldcal.core.errors import (
    CalendarMismatchError,
    DateParseError,
    OutOfRangeError,
    UnsupportedCapabilityError,
    YearZeroError,
)
from worldcal.core.types import Era
from worldcal.engines.builder import YearCalendarBuilder
from worldcal.engines.lengths import LeapCycle


def ten_day_calendar(**kw):
    b = (YearCalendarBuilder()
         .era(Era("AT", "After Time"))
         .prior_era(Era("BT", "Before Time"))
         .year_length(10)
         .day_of_year_digits(2))
    if "offset" in kw:
        b.epoch_offset(kw["offset"])
    return b.build()


@pytest.fixture
def cal():
    return ten_day_calendar()


def test_day_to_year_day(cal):
    yd = cal.day_to_year_day(0)
    assert (yd.year, yd.day_of_year) == (1, 1)
    yd = cal.day_to_year_day(-1)
    assert (yd.year, yd.day_of_year) == (-1, 10)
    assert yd.era.short == "BT"


def test_format_and_parse(cal):
    assert cal.format_date(0) == "AT1-01"
    assert cal.format_date(-1) == "BT1-10"
    assert cal.format_date(123) == "AT13-04"
    assert cal.parse_date("AT1-01") == 0
    assert cal.parse_date("BT1-10") == -1
    assert cal.parse_date("  at13-4 ") == 123


def test_roundtrip(cal):
    random.seed(42)
    for _ in range(2000):
        day = random.randint(-100000, 100000)
        assert cal.year_day_to_day(cal.day_to_year_day(day)) == day
        assert cal.parse_date(cal.format_date(day)) == day


def test_leap_rule_sees_rule_years():
    calls = []

    def length(year):
        calls.append(year)
        return 366 if year % 4 == 0 else 365

    cal = YearCalendarBuilder().year_length(length).build()
    assert cal.days_in_year(-1) == 366
    assert cal.days_in_year(-4) == 365
    assert cal.days_in_year(-5) == 366
    assert cal.days_in_year(4) == 366
    assert 0 in calls and -4 in calls
    assert -1 not in calls


@pytest.mark.parametrize("text", ["AT0-01", "XT1-01", "AT1", "AT1-", "AT-1-01", "AT1-01-02", ""])
def test_parse_rejects_malformed(cal, text):
    with pytest.raises(DateParseError):
        cal.parse_date(text)


def test_parse_out_of_range_day(cal):
    with pytest.raises(OutOfRangeError):
        cal.parse_date("AT1-11")


def test_validation(cal):
    with pytest.raises(YearZeroError):
        cal.year_day(0, 1)
    with pytest.raises(OutOfRangeError):
        cal.year_day(1, 0)
    with pytest.raises(OutOfRangeError):
        cal.year_day(1, 11)
    with pytest.raises(YearZeroError):
        cal.days_in_year(0)


def test_calendar_mismatch(cal):
    other = ten_day_calendar()
    assert other == cal
    with pytest.raises(CalendarMismatchError):
        other.year_day_to_day(cal.year_day(1, 1))


def test_month_and_week_operations_unsupported(cal):
    assert not cal.has_months()
    assert not cal.has_weeks()
    with pytest.raises(UnsupportedCapabilityError):
        cal.date(1, 1, 1)
    with pytest.raises(UnsupportedCapabilityError):
        cal.day_to_date(0)
    with pytest.raises(UnsupportedCapabilityError):
        cal.months
    with pytest.raises(UnsupportedCapabilityError):
        cal.day_to_weekday(0)


def test_epoch_offset():
    shifted = ten_day_calendar(offset=25)
    yd = shifted.day_to_year_day(25)
    assert (yd.year, yd.day_of_year) == (1, 1)
    assert shifted.format_date(24) == "BT1-10"
    assert shifted.parse_date("AT1-01") == 25


def test_leap_cycle_year_calendar():
    cal = YearCalendarBuilder().year_length(LeapCycle(365)).build()
    assert cal.days_in_year(4) == 366
    assert cal.days_in_year(-1) == 366
    assert cal.format_date(365 * 3 + 366) == "AE5-1"
