"""
Calendar arithmetic on provider-local dates.

Dates here are plain calendar dates with no time or timezone. Arithmetic
that would leave the range of datetime.date raises OverflowError, which is
deliberately not caught: the provider never issues such dates, so hitting
one means the run should stop.
"""

from collections.abc import Iterator
from datetime import date, timedelta
from enum import IntEnum


class Weekday(IntEnum):
    """Day of week, numbered like date.weekday()."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6


def day_of_week(d: date) -> Weekday:
    return Weekday(d.weekday())


def is_weekend(d: date) -> bool:
    """True for Saturday and Sunday."""
    return day_of_week(d) in (Weekday.SAT, Weekday.SUN)


def add_days(d: date, n: int) -> date:
    """Shift d by n calendar days (n may be negative)."""
    return d + timedelta(days=n)


def next_day(d: date) -> date:
    return add_days(d, 1)


def next_business_day(d: date) -> date:
    """First weekday strictly after d."""
    candidate = next_day(d)
    while is_weekend(candidate):
        candidate = next_day(candidate)
    return candidate


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        if current == end:
            # Stop before stepping past date.max
            return
        current = next_day(current)
