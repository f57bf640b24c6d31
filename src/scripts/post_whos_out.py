#!/usr/bin/env python3
"""
Post today's who's-out summary from BambooHR to Slack.

Fetches approved leave and holidays, merges each person's leave across
weekends, keeps what is current on the as-of date, and posts one message.

Usage:
    uv run python src/scripts/post_whos_out.py
    uv run python src/scripts/post_whos_out.py --date 2024-01-08
"""

import argparse
import asyncio
import sys
import traceback
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.bamboo_client import close_bamboo_client
from core.consolidation import consolidate, current_ranges
from models.leave import Employee, LeaveEntry
from services.leave import fetch_leave
from services.reports import assemble, build_displays
from services.slack import send_error_message, send_report_message


def parse_as_of_date(as_of_date_str: str | None) -> date:
    """Parse YYYY-MM-DD, or use today if None."""
    if as_of_date_str:
        return datetime.strptime(as_of_date_str, "%Y-%m-%d").date()
    return date.today()


def build_report(
    entries: list[LeaveEntry], employees: dict[str, Employee], as_of: date
) -> list[str]:
    """Consolidate, filter to current leave and render report lines."""
    ranges = consolidate(entries)
    print(f"Consolidated {len(entries)} entries into {len(ranges)} range(s)")

    current = current_ranges(ranges, as_of)
    print(f"Out on {as_of}: {len(current)} range(s)")

    return assemble(build_displays(current, employees))


async def main(as_of_date_str: str | None = None):
    """Main entry point."""
    try:
        # 1. Resolve the as-of date
        as_of = parse_as_of_date(as_of_date_str)
        print(f"Sending leave for {as_of}")

        # 2. Fetch leave, holidays and names
        entries, employees = await fetch_leave(as_of)

        # 3. Consolidate and assemble
        lines = build_report(entries, employees, as_of)

        # 4. Post to Slack
        await send_report_message(lines)

        print("\nDone!")

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        await send_error_message(e)
        raise

    finally:
        await close_bamboo_client()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Post who's out today to Slack")
    parser.add_argument(
        "--date",
        help="As-of date (YYYY-MM-DD). Defaults to today.",
    )
    args = parser.parse_args()

    asyncio.run(main(args.date))
