"""Tests for leave spans and their merge predicates."""

from datetime import date

from models.leave import EmployeeDisplay, MergedRange


def test_overlapping_ranges_touch(make_entry):
    a = make_entry(start="2024-01-08", end="2024-01-10")
    b = make_entry(start="2024-01-09", end="2024-01-12")
    assert a.overlaps_or_touches(b)
    assert b.overlaps_or_touches(a)


def test_adjacent_days_touch(make_entry):
    a = make_entry(start="2024-01-08", end="2024-01-09")
    b = make_entry(start="2024-01-10")
    assert a.overlaps_or_touches(b)


def test_one_day_gap_does_not_touch(make_entry):
    a = make_entry(start="2024-01-08")
    b = make_entry(start="2024-01-10")
    assert not a.overlaps_or_touches(b)


def test_touch_at_date_max_does_not_overflow(make_entry):
    a = make_entry(start="9999-12-30", end="9999-12-31")
    b = make_entry(start="9999-12-31")
    assert a.overlaps_or_touches(b)


def test_friday_to_monday_is_weekend_bridge(make_entry):
    friday = make_entry(start="2024-01-05")
    monday = make_entry(start="2024-01-08", end="2024-01-09")
    assert friday.bridge_is_weekend_only(monday)


def test_saturday_only_gap_is_weekend_bridge(make_entry):
    friday = make_entry(start="2024-01-05")
    sunday = make_entry(start="2024-01-07")
    assert friday.bridge_is_weekend_only(sunday)


def test_weekday_in_gap_is_not_a_bridge(make_entry):
    thursday = make_entry(start="2024-01-04")
    monday = make_entry(start="2024-01-08")
    assert not thursday.bridge_is_weekend_only(monday)


def test_no_gap_is_not_a_bridge(make_entry):
    a = make_entry(start="2024-01-08")
    b = make_entry(start="2024-01-09")
    assert not a.bridge_is_weekend_only(b)


def test_long_gap_is_not_a_bridge(make_entry):
    a = make_entry(start="2024-01-05")
    b = make_entry(start="2024-02-05")
    assert not a.bridge_is_weekend_only(b)


def test_to_entries_one_per_type():
    merged = MergedRange("1", date(2024, 2, 1), date(2024, 2, 2), frozenset({"Vacation", "Sick"}))
    entries = merged.to_entries()
    assert [e.leave_type for e in entries] == ["Sick", "Vacation"]
    assert all(e.start_date == date(2024, 2, 1) and e.end_date == date(2024, 2, 2) for e in entries)


def test_includes():
    merged = MergedRange("1", date(2024, 1, 5), date(2024, 1, 9), frozenset({"Vacation"}))
    assert merged.includes(date(2024, 1, 5))
    assert merged.includes(date(2024, 1, 9))
    assert not merged.includes(date(2024, 1, 10))


def test_display_is_holiday_only_for_holiday_keys():
    holiday = MergedRange("holiday:New Year", date(2024, 1, 1), date(2024, 1, 1), frozenset({"Holiday"}))
    mixed = MergedRange("1", date(2024, 1, 1), date(2024, 1, 1), frozenset({"Holiday", "Vacation"}))
    assert EmployeeDisplay("holiday:New Year", "New Year", [holiday]).is_holiday
    assert not EmployeeDisplay("1", "Ashley", [mixed]).is_holiday
    assert not EmployeeDisplay("1", "Ashley", []).is_holiday


def test_leave_typed_holiday_is_still_personal_leave(make_entry):
    entry = make_entry("7", start="2024-01-08", leave_type="Holiday")
    merged = MergedRange("7", date(2024, 1, 8), date(2024, 1, 8), frozenset({"Holiday"}))
    assert not entry.is_holiday
    assert not merged.is_holiday
    assert not EmployeeDisplay("7", "Dana Smith", [merged]).is_holiday
