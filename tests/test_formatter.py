# tests/test_formatter.py

import pytest
import random
from datetime import date

from worldcal.core.errors import DateParseError, FormatSyntaxError, UnsupportedCapabilityError
from worldcal.core.time import to_epoch_day
from worldcal.core.types import Era, Form
from worldcal.engines.builder import YearCalendarBuilder
from worldcal.engines.gregorian import CALENDAR as G
from worldcal.formatter import DateFormatter, compile_pattern
from worldcal.formatter.directives import Literal, Name, Number

ISO_ERA = "yyyy'-'mm'-'dd' 'E"
LONG = "WWWW', 'MMMM' 'd', 'y' 'E"


@pytest.fixture
def ten_day():
    return (YearCalendarBuilder()
            .era(Era("AT", "After Time"))
            .prior_era(Era("BT", "Before Time"))
            .year_length(10)
            .day_of_year_digits(2)
            .build())


def test_compile():
    assert compile_pattern(ISO_ERA) == (
        Number("y", 4), Literal("-"), Number("m", 2), Literal("-"),
        Number("d", 2), Literal(" "), Name("E", Form.TINY),
    )
    assert compile_pattern("MMMMMM") == (Name("M", Form.FULL),)
    assert compile_pattern("d''d") == (Number("d", 1), Number("d", 1))
    assert compile_pattern("'it''s'") == (Literal("its"),)


@pytest.mark.parametrize("pattern", [
    "yyyy-mm-Q", "yyyy'-", "'", "x", "yyyy_mm", "yyyy.mm.dd", "dd,mm", "yyyy:DDD",
])
def test_compile_errors(pattern):
    with pytest.raises(FormatSyntaxError):
        DateFormatter(pattern)


def test_format_scenarios():
    fmt = DateFormatter.define(ISO_ERA)
    assert fmt.format(G.date(2024, 2, 20)) == "2024-02-20 AD"
    assert fmt.format(G.date(-44, 3, 15)) == "0044-03-15 BC"

    fmt = DateFormatter.define(LONG)
    assert fmt.format(G.date(2024, 2, 20)) == "Tuesday, February 20, 2024 AD"
    assert fmt.format(G.date(-44, 3, 15)) == "Friday, March 15, 44 BC"


def test_day_of_year_and_year_day_values():
    fmt = DateFormatter.define("yyyy/DDD")
    assert fmt.format(G.date(2024, 2, 20)) == "2024/051"
    assert fmt.format(G.year_day(2024, 51)) == "2024/051"
    assert fmt.format_day(G, to_epoch_day(date(2024, 12, 31))) == "2024/366"


def test_wide_values_are_not_truncated():
    assert DateFormatter("y").format(G.date(2024, 1, 1)) == "2024"
    assert DateFormatter("yy").format(G.date(12345, 1, 1)) == "12345"
    assert DateFormatter("yyyy''mm").format(G.date(2024, 2, 1)) == "202402"


@pytest.mark.parametrize("pattern, expected", [
    ("M", "F"), ("MM", "Feb"), ("MMM", "Feb"), ("MMMM", "February"),
    ("W", "T"), ("WW", "Tu"), ("WWW", "Tue"), ("WWWWW", "Tuesday"),
    ("E", "AD"), ("EE", "AD"), ("EEE", "AD"), ("EEEE", "Anno Domini"),
])
def test_name_forms(pattern, expected):
    assert DateFormatter(pattern).format(G.date(2024, 2, 20)) == expected


def test_capabilities(ten_day):
    fmt = DateFormatter("yyyy/DDD")
    assert not fmt.needs_months and not fmt.needs_weeks
    assert fmt.is_compatible_with(ten_day)

    fmt = DateFormatter(LONG)
    assert fmt.needs_months and fmt.needs_weeks
    assert fmt.is_compatible_with(G)
    assert not fmt.is_compatible_with(ten_day)
    with pytest.raises(UnsupportedCapabilityError):
        fmt.format_day(ten_day, 0)
    with pytest.raises(UnsupportedCapabilityError):
        DateFormatter("W").format_day(ten_day, 0)


def test_year_only_calendar(ten_day):
    fmt = DateFormatter.define("E y'/'DD")
    assert fmt.format_day(ten_day, 123) == "AT 13/04"
    assert fmt.format_day(ten_day, -1) == "BT 1/10"
    assert fmt.parse(ten_day, "AT 13/04") == 123
    assert fmt.parse(ten_day, "bt 1/10") == -1


def test_define_is_cached():
    assert DateFormatter.define(ISO_ERA) is DateFormatter.define(ISO_ERA)
    assert DateFormatter(ISO_ERA) == DateFormatter.define(ISO_ERA)


def test_parse_scenarios():
    fmt = DateFormatter.define(ISO_ERA)
    assert fmt.parse(G, "2024-02-20 AD") == to_epoch_day(date(2024, 2, 20))
    assert fmt.parse(G, "0044-03-15 BC") == G.date_to_day(G.date(-44, 3, 15))

    fmt = DateFormatter.define(LONG)
    assert fmt.parse(G, "Friday, March 15, 44 BC") == G.date_to_day(G.date(-44, 3, 15))
    assert fmt.parse(G, "tuesday, february 20, 2024 ad") == to_epoch_day(date(2024, 2, 20))


def test_parse_adjacent_numbers():
    assert DateFormatter("yyyymmdd").parse(G, "20240220") == to_epoch_day(date(2024, 2, 20))


def test_parse_without_era_means_current_era():
    assert DateFormatter("d M y").parse(G, "1 F 2024") == to_epoch_day(date(2024, 2, 1))
    assert DateFormatter("yyyy/DDD").parse(G, "2024/051") == to_epoch_day(date(2024, 2, 20))


@pytest.mark.parametrize("pattern, text", [
    (LONG, "Tuesday, March 15, 44 BC"),      # wrong weekday
    ("d M y", "1 J 2024"),                   # January, June or July
    ("m M d y", "2 March 1 2024"),           # conflicting months
    ("yyyy/DDD mm dd", "2024/050 02 20"),    # day of year disagrees
    ("mm'-'dd", "02-20"),                    # no year
    ("yyyy", "2024"),                        # no day
    (ISO_ERA, "2024-02-20"),                 # missing era
    (ISO_ERA, "0000-02-20 AD"),              # year 0
    (ISO_ERA, "2024-02-20 XX"),
])
def test_parse_errors(pattern, text):
    with pytest.raises(DateParseError):
        DateFormatter(pattern).parse(G, text)


@pytest.mark.parametrize("pattern", ["' 'yyyy'/'DDD", "d MMM yyyy' '", " y/DDD "])
def test_spaces_at_the_edges_are_part_of_the_pattern(pattern):
    fmt = DateFormatter(pattern)
    day = to_epoch_day(date(2024, 2, 20))
    text = fmt.format_day(G, day)
    assert text != text.strip()
    assert fmt.parse(G, text) == day
    with pytest.raises(DateParseError):
        fmt.parse(G, text.strip())


def test_format_parse_roundtrip():
    random.seed(42)
    for pattern in (ISO_ERA, LONG, "WWW d MMM yyyy EEEE", "DDD'/'y' 'E"):
        fmt = DateFormatter.define(pattern)
        for _ in range(300):
            day = random.randint(-300000, 300000)
            assert fmt.parse(G, fmt.format_day(G, day)) == day
