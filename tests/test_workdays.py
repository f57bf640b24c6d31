"""Tests for calendar arithmetic."""

from datetime import date

import pytest

from core.workdays import (
    Weekday,
    add_days,
    date_range,
    day_of_week,
    is_weekend,
    next_business_day,
    next_day,
)


def test_day_of_week():
    assert day_of_week(date(2024, 1, 5)) == Weekday.FRI
    assert day_of_week(date(2024, 1, 7)) == Weekday.SUN
    assert day_of_week(date(2024, 1, 8)) == Weekday.MON


@pytest.mark.parametrize(
    "d, expected",
    [
        (date(2024, 1, 5), False),  # Friday
        (date(2024, 1, 6), True),  # Saturday
        (date(2024, 1, 7), True),  # Sunday
        (date(2024, 1, 8), False),  # Monday
    ],
)
def test_is_weekend(d, expected):
    assert is_weekend(d) is expected


def test_next_day_crosses_month_and_year():
    assert next_day(date(2023, 12, 31)) == date(2024, 1, 1)
    assert next_day(date(2024, 2, 28)) == date(2024, 2, 29)


def test_add_days_negative():
    assert add_days(date(2024, 1, 1), -1) == date(2023, 12, 31)


def test_next_business_day_skips_weekend():
    assert next_business_day(date(2024, 1, 5)) == date(2024, 1, 8)
    assert next_business_day(date(2024, 1, 6)) == date(2024, 1, 8)
    assert next_business_day(date(2024, 1, 8)) == date(2024, 1, 9)


def test_date_range_is_inclusive():
    days = list(date_range(date(2024, 1, 5), date(2024, 1, 8)))
    assert days == [date(2024, 1, 5), date(2024, 1, 6), date(2024, 1, 7), date(2024, 1, 8)]


def test_date_range_empty_when_reversed():
    assert list(date_range(date(2024, 1, 8), date(2024, 1, 5))) == []


def test_date_range_stops_at_date_max():
    assert list(date_range(date.max, date.max)) == [date.max]


def test_overflow_is_not_caught():
    with pytest.raises(OverflowError):
        next_day(date.max)
