# tests/test_config.py

import json
import pytest

from worldcal.config import load_config
from worldcal.core.engine import CalendarRegistry
from worldcal.core.errors import ConfigError, DuplicateCalendarError
from worldcal.core.types import Era
from worldcal.engines.builder import MonthCalendarBuilder, YearCalendarBuilder
from worldcal.engines.gregorian import CALENDAR as G
from worldcal.engines.lengths import LeapCycle
from worldcal.engines.specs import STANDARD_MONTHS


def rising_config():
    return {
        "eras": {"AR": {"full": "After Rising"}, "BR": "Before Rising"},
        "weekdays": {"one": "Oneday", "two": {"name": "Twoday", "short": "Two"}, "three": "Threeday"},
        "weeks": {"short": {"weekdays": ["one", "two", "three"], "offset": 1}},
        "months": {
            "thaw": {"full": "Thaw", "days": 30},
            "bloom": {"full": "Bloom", "short": "Blm", "days": {"base": 30, "every": 3}},
        },
        "calendars": {
            "rising": {"kind": "months", "era": "AR", "prior_era": "BR",
                       "months": ["thaw", "bloom"], "week": "short", "epoch_offset": -100},
            "count": {"kind": "years", "era": "AR", "prior_era": "BR",
                      "year_length": 10, "day_of_year_digits": 2},
        },
    }


def test_config_matches_builder():
    cals = load_config(rising_config())
    built = (MonthCalendarBuilder()
             .era(Era("AR", "After Rising"))
             .prior_era(Era("BR", "Before Rising"))
             .month("Thaw", 30)
             .month(cals["rising"].month(2), LeapCycle(30, every=3))
             .week(cals["rising"].week)
             .epoch_offset(-100)
             .build())
    assert cals["rising"] == built
    for day in range(-500, 500, 7):
        assert cals["rising"].format_date(day) == built.format_date(day)

    count = cals["count"]
    assert count == (YearCalendarBuilder()
                     .era(Era("AR", "After Rising"))
                     .prior_era(Era("BR", "Before Rising"))
                     .year_length(10)
                     .day_of_year_digits(2)
                     .build())
    assert count.format_date(-1) == "BR1-10"


def test_names_from_config():
    cal = load_config(rising_config())["rising"]
    assert cal.month(2).short == "Blm"
    assert cal.month(1).tiny == "T"
    assert cal.week.weekdays[1].short == "Two"
    assert cal.era.full == "After Rising"
    assert cal.prior_era.full == "Before Rising"


def test_gregorian_from_json_file(tmp_path):
    days = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    months = {}
    for m, n in zip(STANDARD_MONTHS, days):
        months[m.short.lower()] = {"full": m.full, "short": m.short, "unambiguous": m.unambiguous,
                                   "tiny": m.tiny, "days": n}
    months["feb"]["days"] = {"base": 28, "extra": 1, "every": 4, "except_every": 100, "unless_every": 400}
    doc = {
        "eras": {"AD": "Anno Domini", "BC": "Before Christ"},
        "weekdays": {w: w for w in ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")},
        "weeks": {"std": {"weekdays": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
                          "offset": 1}},
        "months": months,
        "calendars": {"greg": {"era": "AD", "prior_era": "BC", "months": list(months), "week": "std"}},
    }
    path = tmp_path / "greg.json"
    path.write_text(json.dumps(doc), encoding="utf-8")

    greg = load_config(path)["greg"]
    assert greg == G
    assert greg.days_in_year(-1) == 366


def test_registers_into_registry():
    reg = CalendarRegistry({})
    load_config(rising_config(), registry=reg)
    assert reg.list() == ["count", "rising"]
    with pytest.raises(DuplicateCalendarError):
        load_config(rising_config(), registry=reg)
    load_config(rising_config(), registry=reg, overwrite=True)


@pytest.mark.parametrize("mutate", [
    lambda c: c.update({"bogus": {}}),
    lambda c: c["calendars"]["rising"].update({"era": "XX"}),
    lambda c: c["calendars"]["rising"].update({"months": []}),
    lambda c: c["calendars"]["rising"].update({"months": "thaw"}),
    lambda c: c["calendars"]["rising"].update({"kind": "weeks"}),
    lambda c: c["calendars"]["rising"].update({"year_length": 3}),
    lambda c: c["calendars"]["count"].update({"day_of_year_digits": 0}),
    lambda c: c["months"]["thaw"].pop("days"),
    lambda c: c["months"]["thaw"].update({"days": "thirty"}),
    lambda c: c["months"]["thaw"].update({"days": -1}),
    lambda c: c["months"]["bloom"].update({"days": {"every": 3}}),
    lambda c: c["months"]["bloom"].update({"days": {"base": 30, "every": 0}}),
    lambda c: c["weeks"]["short"].update({"weekdays": ["one", "four"]}),
    lambda c: c["weeks"]["short"].update({"weekdays": []}),
    lambda c: c["weeks"]["short"].update({"offset": 1.5}),
    lambda c: c["eras"].update({"AR": {"long": "x"}}),
    lambda c: c["eras"].update({"AR": {"short": ""}}),
    lambda c: c["weeks"]["short"].update({"offset": "1"}),
    lambda c: c["months"]["thaw"].update({"days": True}),
    lambda c: c["weekdays"].update({"four": 4}),
    lambda c: c.update({"calendars": []}),
])
def test_invalid_config(mutate):
    cfg = rising_config()
    mutate(cfg)
    with pytest.raises(ConfigError):
        load_config(cfg)


def test_unreadable_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad)


def test_era_short_names():
    cfg = rising_config()
    cfg["eras"] = {
        "ar": {"short": "A.R.", "full": "After Rising"},
        "br": {"full": "Before Rising"},
        "ad": "Anno Domini",
    }
    cfg["calendars"]["rising"].update({"era": "ar", "prior_era": "br"})
    cfg["calendars"]["count"].update({"era": "ad", "prior_era": "br"})
    cals = load_config(cfg)

    rising = cals["rising"]
    assert rising.era == Era("A.R.", "After Rising")
    assert rising.prior_era == Era("BR", "Before Rising")
    assert rising.format_date(-100) == "1-1-1-A.R."
    assert cals["count"].era == Era("AD", "Anno Domini")
    assert cals["count"].format_date(0) == "AD1-01"


def test_calendar_kind_defaults_to_months():
    cfg = rising_config()
    del cfg["calendars"]["rising"]["kind"]
    assert load_config(cfg)["rising"].has_months()
