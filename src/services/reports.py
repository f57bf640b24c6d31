"""
Report assembly: merged ranges to ordered Slack message lines.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from core.config import (
    HOLIDAY_KEY_PREFIX,
    HOLIDAYS_HEADING,
    NOBODY_OUT_LINE,
    ON_LEAVE_HEADING,
)
from core.consolidation import group_by_employee
from core.names import resolve_display_name
from core.workdays import next_business_day
from models.leave import Employee, EmployeeDisplay, MergedRange, is_holiday_key


def format_date_short(d: date) -> str:
    """Format date as 'Ddd D Mon' (platform-safe, e.g., 'Fri 5 Jan')."""
    return f"{d.strftime('%a')} {d.day} {d.strftime('%b')}"


def format_span(merged_range: MergedRange) -> str:
    """Single date for one-day ranges, else 'from – to'."""
    start = format_date_short(merged_range.start_date)
    if merged_range.start_date == merged_range.end_date:
        return start
    return f"{start} – {format_date_short(merged_range.end_date)}"


def format_range_line(display: EmployeeDisplay, merged_range: MergedRange) -> str:
    span = format_span(merged_range)

    if display.is_holiday:
        return f"• {display.chosen_name}: {span}"

    leave_types = ", ".join(sorted(merged_range.leave_types))
    back = format_date_short(next_business_day(merged_range.end_date))
    return f"• *{display.chosen_name}*: {span} ({leave_types}), back {back}"


def build_displays(
    ranges: Iterable[MergedRange], employees: Mapping[str, Employee]
) -> list[EmployeeDisplay]:
    """Attach a display name to each employee's ranges."""
    displays = []

    for employee_id, employee_ranges in group_by_employee(ranges).items():
        if is_holiday_key(employee_id):
            chosen_name = employee_id[len(HOLIDAY_KEY_PREFIX):]
        elif employee_id in employees:
            chosen_name = resolve_display_name(employees[employee_id])
        else:
            chosen_name = employee_id

        displays.append(
            EmployeeDisplay(
                employee_id=employee_id,
                chosen_name=chosen_name,
                ranges=sorted(employee_ranges, key=lambda r: r.start_date),
            )
        )

    return displays


def _display_sort_key(display: EmployeeDisplay) -> tuple[str, str]:
    return display.chosen_name.casefold(), display.employee_id


def assemble(employees: Sequence[EmployeeDisplay]) -> list[str]:
    """
    Render displays as message lines.

    Holidays come first under their own heading, then people on leave.
    Both are ordered by name, case-insensitively; each range is one line.
    """
    ordered = sorted(employees, key=_display_sort_key)
    holidays = [d for d in ordered if d.ranges and d.is_holiday]
    people = [d for d in ordered if d.ranges and not d.is_holiday]

    lines = []

    if holidays:
        lines.append(HOLIDAYS_HEADING)
        for display in holidays:
            lines.extend(format_range_line(display, r) for r in display.ranges)

    if people:
        lines.append(ON_LEAVE_HEADING)
        for display in people:
            lines.extend(format_range_line(display, r) for r in display.ranges)

    if not lines:
        lines.append(NOBODY_OUT_LINE)

    return lines
