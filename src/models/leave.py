"""
Data models for leave entries, merged ranges and report rows.
"""

from dataclasses import dataclass, field
from datetime import date

from core.config import HOLIDAY_KEY_PREFIX
from core.workdays import add_days, date_range, is_weekend, next_day


def is_holiday_key(employee_id: str) -> bool:
    """Holidays are keyed by name, never by an employee id."""
    return employee_id.startswith(HOLIDAY_KEY_PREFIX)


class DateSpan:
    """Mixin for inclusive start_date..end_date spans."""

    start_date: date
    end_date: date

    def includes(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date

    def overlaps_or_touches(self, other: "DateSpan") -> bool:
        """True if the spans share a day or one starts the day after the other ends."""
        # Subtracting dates cannot overflow, unlike adding a day to date.max
        return (
            (other.start_date - self.end_date).days <= 1
            and (self.start_date - other.end_date).days <= 1
        )

    def bridge_is_weekend_only(self, other: "DateSpan") -> bool:
        """
        True if the days strictly between this span's end and other's start
        are all Saturdays or Sundays.

        An empty gap is not a bridge; overlaps_or_touches covers that case.
        """
        if (other.start_date - self.end_date).days <= 1:
            return False
        gap = date_range(next_day(self.end_date), add_days(other.start_date, -1))
        return all(is_weekend(d) for d in gap)


@dataclass(frozen=True)
class LeaveEntry(DateSpan):
    """One approved leave or holiday record from the HR provider."""

    employee_id: str
    start_date: date
    end_date: date
    leave_type: str

    @property
    def is_holiday(self) -> bool:
        return is_holiday_key(self.employee_id)


@dataclass(frozen=True)
class MergedRange(DateSpan):
    """A contiguous absence for one employee, possibly spanning several types."""

    employee_id: str
    start_date: date
    end_date: date
    leave_types: frozenset[str]

    @property
    def is_holiday(self) -> bool:
        return is_holiday_key(self.employee_id)

    def to_entries(self) -> list[LeaveEntry]:
        """Expand back into one entry per leave type, sorted by type."""
        return [
            LeaveEntry(self.employee_id, self.start_date, self.end_date, leave_type)
            for leave_type in sorted(self.leave_types)
        ]


@dataclass(frozen=True)
class Employee:
    """Name data for one employee as fetched from the provider."""

    employee_id: str
    name: str
    preferred_name: str | None = None


@dataclass
class EmployeeDisplay:
    """An employee (or holiday) with its chosen name and merged ranges."""

    employee_id: str
    chosen_name: str
    ranges: list[MergedRange] = field(default_factory=list)

    @property
    def is_holiday(self) -> bool:
        return is_holiday_key(self.employee_id)
