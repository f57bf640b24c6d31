"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(Exception):
    """A required environment variable is missing or empty."""


def require_setting(name: str, value: str) -> str:
    """Return value, or raise if the variable it came from was not set."""
    if not value:
        raise ConfigurationError(f"missing required environment variable: {name}")
    return value


# =============================================================================
# LEAVE CONFIGURATION
# =============================================================================

# If you take more than a year of leave, we might miss it.
LEAVE_LOOKAHEAD_DAYS = 365

# Leave type given to holiday records (BambooHR reports them without a type)
HOLIDAY_TYPE = "Holiday"

# Holidays have no employee, so they are grouped under their own key
HOLIDAY_KEY_PREFIX = "holiday:"

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

HOLIDAYS_HEADING = ":calendar: *Holidays*"
ON_LEAVE_HEADING = ":wave: *On leave*"
NOBODY_OUT_LINE = "*Nobody is on leave today*"

# =============================================================================
# BAMBOOHR CREDENTIALS (from environment)
# =============================================================================

BAMBOO_API_BASE = "https://api.bamboohr.com/api/gateway.php"
BAMBOO_COMPANY_DOMAIN = os.environ.get("BAMBOO_COMPANY_DOMAIN", "")
BAMBOO_API_KEY = os.environ.get("BAMBOO_API_KEY", "")

# =============================================================================
# SLACK CONFIGURATION (from environment)
# =============================================================================

SLACK_WEBHOOK_URL = os.environ.get("SLACK_WEBHOOK_URL", "")
SLACK_ERROR_WEBHOOK_URL = os.environ.get("SLACK_ERROR_WEBHOOK_URL", "")

# Slack rejects section text longer than this
SLACK_SECTION_TEXT_LIMIT = 3000

# Tail of the traceback kept in error notices
ERROR_TRACEBACK_LIMIT = 2000

# =============================================================================
# HTTP CONFIGURATION
# =============================================================================

HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "30"))
