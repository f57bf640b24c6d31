"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.leave import Employee, LeaveEntry  # noqa: E402

SLACK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"
SLACK_ERROR_URL = "https://hooks.slack.com/services/T000/B000/ERRS"


@pytest.fixture
def make_entry():
    """Build a LeaveEntry from ISO date strings."""

    def _make(employee_id="1", start="2024-01-08", end=None, leave_type="Vacation"):
        return LeaveEntry(
            employee_id=employee_id,
            start_date=date.fromisoformat(start),
            end_date=date.fromisoformat(end or start),
            leave_type=leave_type,
        )

    return _make


@pytest.fixture
def sample_employees():
    """Employees keyed by id, one with a preferred name."""
    return {
        "1": Employee(employee_id="1", name="Charlotte Abbott", preferred_name="Charlie Abbott"),
        "2": Employee(employee_id="2", name="Ashley Adams"),
    }


@pytest.fixture
def bamboo_settings(monkeypatch):
    """Point the BambooHR client at a fake company and reset the shared client."""
    import core.bamboo_client as bamboo_client

    monkeypatch.setattr(bamboo_client, "BAMBOO_COMPANY_DOMAIN", "acme")
    monkeypatch.setattr(bamboo_client, "BAMBOO_API_KEY", "secret-key")
    monkeypatch.setattr(bamboo_client, "_bamboo_client", None)
    yield
    bamboo_client._bamboo_client = None


@pytest.fixture
def slack_settings(monkeypatch):
    """Configure both Slack webhooks."""
    import services.slack as slack

    monkeypatch.setattr(slack, "SLACK_WEBHOOK_URL", SLACK_URL)
    monkeypatch.setattr(slack, "SLACK_ERROR_WEBHOOK_URL", SLACK_ERROR_URL)
