"""
Leave and holiday fetching from BambooHR.
"""

from datetime import date

import httpx

from core.bamboo_client import get_bamboo_client
from core.config import HOLIDAY_KEY_PREFIX, HOLIDAY_TYPE, LEAVE_LOOKAHEAD_DAYS
from core.workdays import add_days
from models.bamboo import Directory, TimeOffRequest, WhosOutEntry
from models.leave import Employee, LeaveEntry

# Status codes BambooHR uses when the directory is disabled for an API key
DIRECTORY_UNAVAILABLE_STATUSES = {403, 404}


def get_lookahead_range(as_of: date) -> tuple[date, date]:
    """Window of leave to fetch: the as-of date plus a year."""
    return as_of, add_days(as_of, LEAVE_LOOKAHEAD_DAYS)


async def fetch_time_off_requests(start_date: date, end_date: date) -> list[TimeOffRequest]:
    """Fetch approved time off requests overlapping the date range."""
    client = get_bamboo_client()
    response = await client.get(
        "/time_off/requests/",
        params={
            "start": start_date.isoformat(),
            "end": end_date.isoformat(),
            "status": "approved",
        },
    )
    response.raise_for_status()

    requests = [TimeOffRequest.model_validate(item) for item in response.json()]
    print(f"  Found {len(requests)} approved time off request(s)")
    return requests


async def fetch_holidays(start_date: date, end_date: date) -> list[WhosOutEntry]:
    """Fetch company holidays from the who's out feed."""
    client = get_bamboo_client()
    response = await client.get(
        "/time_off/whos_out/",
        params={"start": start_date.isoformat(), "end": end_date.isoformat()},
    )
    response.raise_for_status()

    entries = [WhosOutEntry.model_validate(item) for item in response.json()]
    holidays = [e for e in entries if e.type == "holiday"]
    print(f"  Found {len(holidays)} holiday(s)")
    return holidays


async def fetch_preferred_names() -> dict[str, str]:
    """
    Map employee id to preferred name ("Preferred Last") from the directory.

    Returns an empty map when the directory is disabled for this API key;
    any other failure propagates.
    """
    client = get_bamboo_client()
    response = await client.get("/employees/directory")

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        if e.response.status_code in DIRECTORY_UNAVAILABLE_STATUSES:
            print(f"  Employee directory unavailable ({e.response.status_code}), using legal names")
            return {}
        raise

    directory = Directory.model_validate(response.json())

    preferred_names = {}
    for employee in directory.employees:
        if employee.preferred_name and employee.preferred_name.strip():
            parts = [employee.preferred_name.strip(), (employee.last_name or "").strip()]
            preferred_names[employee.id] = " ".join(p for p in parts if p)

    print(f"  Found {len(preferred_names)} preferred name(s)")
    return preferred_names


def to_leave_entries(
    requests: list[TimeOffRequest], holidays: list[WhosOutEntry]
) -> list[LeaveEntry]:
    """Convert provider records into leave entries."""
    entries = [
        LeaveEntry(
            employee_id=r.employee_id,
            start_date=r.start,
            end_date=r.end,
            leave_type=r.type.name,
        )
        for r in requests
    ]
    entries.extend(
        LeaveEntry(
            employee_id=f"{HOLIDAY_KEY_PREFIX}{h.name}",
            start_date=h.start,
            end_date=h.end,
            leave_type=HOLIDAY_TYPE,
        )
        for h in holidays
    )
    return entries


def to_employees(
    requests: list[TimeOffRequest], preferred_names: dict[str, str]
) -> dict[str, Employee]:
    """Collect name data for every employee with leave."""
    return {
        r.employee_id: Employee(
            employee_id=r.employee_id,
            name=r.name,
            preferred_name=preferred_names.get(r.employee_id),
        )
        for r in requests
    }


async def fetch_leave(as_of: date) -> tuple[list[LeaveEntry], dict[str, Employee]]:
    """Fetch everything needed for a report as of the given date."""
    start_date, end_date = get_lookahead_range(as_of)
    print(f"Fetching leave from {start_date} to {end_date}")

    requests = await fetch_time_off_requests(start_date, end_date)
    holidays = await fetch_holidays(start_date, end_date)
    preferred_names = await fetch_preferred_names()

    return to_leave_entries(requests, holidays), to_employees(requests, preferred_names)
