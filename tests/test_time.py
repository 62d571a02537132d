# tests/test_time.py

import random
from datetime import date

from worldcal.core import time as wt
from worldcal.engines.gregorian import CALENDAR as G


def test_epoch_day_zero_is_first_of_january_1_ad():
    assert wt.to_epoch_day(date(1, 1, 1)) == 0
    assert wt.from_epoch_day(0) == date(1, 1, 1)
    d = G.day_to_date(wt.to_epoch_day(date(1, 1, 1)))
    assert (d.year, d.month_of_year, d.day_of_month) == (1, 1, 1)


def test_jdn():
    # JD 2451545 is 1 January 2000; JD 0 is 1 January 4713 BC, Julian.
    assert wt.epoch_day_to_jdn(wt.to_epoch_day(date(2000, 1, 1))) == 2451545
    assert wt.epoch_day_to_jdn(0) == 1721426
    assert wt.jdn_to_epoch_day(2299161) == wt.to_epoch_day(date(1582, 10, 15))
    random.seed(42)
    for _ in range(200):
        day = random.randint(-10**6, 10**6)
        assert wt.jdn_to_epoch_day(wt.epoch_day_to_jdn(day)) == day
