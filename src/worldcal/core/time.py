from __future__ import annotations
from datetime import date

# Epoch day 0 is 1 January 1 AD (proleptic Gregorian), i.e. date.toordinal() == 1.
ORDINAL_OFFSET = 1


def to_epoch_day(d: date) -> int:
    """Convert a Python date to an epoch day of the standard Gregorian calendar."""
    return d.toordinal() - ORDINAL_OFFSET


def from_epoch_day(day: int) -> date:
    """Inverse of to_epoch_day. Only years 1..9999 are representable."""
    return date.fromordinal(day + ORDINAL_OFFSET)


# JDN of epoch day 0 (1 January 1 AD, proleptic Gregorian).
JDN_EPOCH = 1721426


def epoch_day_to_jdn(day: int) -> int:
    return day + JDN_EPOCH


def jdn_to_epoch_day(jdn: int) -> int:
    return jdn - JDN_EPOCH
