"""
Leave entry validation.

Leave data is assumed to be well-formed upstream, so anything odd here fails
the whole run rather than being corrected into a misleading range.
"""

from collections.abc import Sequence

from models.leave import LeaveEntry


class MalformedLeaveError(ValueError):
    """One or more leave entries cannot be consolidated."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Malformed leave entries: " + "; ".join(problems))


def describe_entry(entry: LeaveEntry) -> str:
    return f"{entry.employee_id or '<no employee>'} {entry.leave_type} {entry.start_date}..{entry.end_date}"


def validate_entries(entries: Sequence[LeaveEntry]) -> Sequence[LeaveEntry]:
    """
    Check every entry and raise once with all problems found.

    Checks:
    1. Entry belongs to someone (employee or holiday key)
    2. Range is not reversed (end_date >= start_date)
    """
    problems = []

    for entry in entries:
        if not entry.employee_id:
            problems.append(f"{describe_entry(entry)}: missing employee id")
        if entry.end_date < entry.start_date:
            problems.append(f"{describe_entry(entry)}: ends before it starts")

    if problems:
        raise MalformedLeaveError(problems)

    return entries
