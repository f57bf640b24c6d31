"""
BambooHR HTTP client setup with lazy initialization.
"""

import httpx

from core.config import (
    BAMBOO_API_BASE,
    BAMBOO_API_KEY,
    BAMBOO_COMPANY_DOMAIN,
    HTTP_TIMEOUT_SECONDS,
    require_setting,
)

_bamboo_client: httpx.AsyncClient | None = None


def get_bamboo_client() -> httpx.AsyncClient:
    """Get or create the BambooHR client (lazy initialization)."""
    global _bamboo_client
    if _bamboo_client is None or _bamboo_client.is_closed:
        domain = require_setting("BAMBOO_COMPANY_DOMAIN", BAMBOO_COMPANY_DOMAIN)
        api_key = require_setting("BAMBOO_API_KEY", BAMBOO_API_KEY)
        _bamboo_client = httpx.AsyncClient(
            base_url=f"{BAMBOO_API_BASE}/{domain}/v1",
            # BambooHR takes the API key as the username with any password
            auth=(api_key, "x"),
            headers={"Accept": "application/json"},
            timeout=HTTP_TIMEOUT_SECONDS,
        )
    return _bamboo_client


async def close_bamboo_client() -> None:
    """Close the BambooHR client if one was created."""
    global _bamboo_client
    if _bamboo_client is not None:
        await _bamboo_client.aclose()
        _bamboo_client = None
