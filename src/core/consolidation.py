"""
Consolidation of per-employee leave entries into display ranges.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from datetime import date

from core.validation import validate_entries
from models.leave import DateSpan, LeaveEntry, MergedRange

AdjacencyPredicate = Callable[[DateSpan, DateSpan], bool]


def weekend_adjacent(current: DateSpan, following: DateSpan) -> bool:
    """
    Leave periods belong together if they:
    - Overlap
    - Occur on adjacent days
    - Occur with only a weekend in-between

    Leave starting on a Monday is not treated as starting the Saturday
    before, so a Friday-only gap still splits two blocks.
    """
    return current.overlaps_or_touches(following) or current.bridge_is_weekend_only(following)


def _sort_key(entry: LeaveEntry) -> tuple[date, date, str]:
    return entry.start_date, entry.end_date, entry.leave_type


def _fold(entries: list[LeaveEntry], adjacent: AdjacencyPredicate) -> list[MergedRange]:
    """Merge one employee's sorted entries left to right."""
    merged = []
    current: MergedRange | None = None

    for entry in entries:
        if current is not None and adjacent(current, entry):
            # Compare against the accumulated range, not the entry that opened it
            current = replace(
                current,
                end_date=max(current.end_date, entry.end_date),
                leave_types=current.leave_types | {entry.leave_type},
            )
            continue

        if current is not None:
            merged.append(current)
        current = MergedRange(
            employee_id=entry.employee_id,
            start_date=entry.start_date,
            end_date=entry.end_date,
            leave_types=frozenset({entry.leave_type}),
        )

    if current is not None:
        merged.append(current)
    return merged


def consolidate(
    entries: Sequence[LeaveEntry], adjacent: AdjacencyPredicate = weekend_adjacent
) -> list[MergedRange]:
    """
    Collapse leave entries into the fewest ranges per employee.

    Entries are validated first; a single malformed entry fails the call.
    Output is grouped by employee_id (sorted) and ordered by start_date
    within each employee.
    """
    validate_entries(entries)

    entries_by_employee: dict[str, list[LeaveEntry]] = defaultdict(list)
    for entry in entries:
        entries_by_employee[entry.employee_id].append(entry)

    ranges = []
    for employee_id in sorted(entries_by_employee):
        # The fold relies on entries being sorted
        employee_entries = sorted(entries_by_employee[employee_id], key=_sort_key)
        ranges.extend(_fold(employee_entries, adjacent))

    return ranges


def current_ranges(ranges: Iterable[MergedRange], as_of: date) -> list[MergedRange]:
    """Only the ranges someone is out for on the as-of date."""
    return [r for r in ranges if r.includes(as_of)]


def group_by_employee(ranges: Iterable[MergedRange]) -> dict[str, list[MergedRange]]:
    """Map employee_id to that employee's ranges, keeping their order."""
    grouped: dict[str, list[MergedRange]] = defaultdict(list)
    for merged_range in ranges:
        grouped[merged_range.employee_id].append(merged_range)
    return dict(grouped)
