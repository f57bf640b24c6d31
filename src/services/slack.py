"""
Slack incoming-webhook posting for reports.
"""

import traceback

import httpx

from core.config import (
    ERROR_TRACEBACK_LIMIT,
    HTTP_TIMEOUT_SECONDS,
    SLACK_ERROR_WEBHOOK_URL,
    SLACK_SECTION_TEXT_LIMIT,
    SLACK_WEBHOOK_URL,
    require_setting,
)


def truncate_text(text: str, limit: int) -> str:
    """Cut text to at most limit characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def chunk_lines(lines: list[str], limit: int = SLACK_SECTION_TEXT_LIMIT) -> list[str]:
    """
    Join lines into newline-separated chunks of at most limit characters.

    Lines are never split across chunks; a single line over the limit is
    truncated.
    """
    chunks = []
    current: list[str] = []
    length = 0

    for line in lines:
        line = truncate_text(line, limit)
        added = len(line) + (1 if current else 0)
        if current and length + added > limit:
            chunks.append("\n".join(current))
            current = []
            length = 0
            added = len(line)
        current.append(line)
        length += added

    if current:
        chunks.append("\n".join(current))
    return chunks


def build_message(lines: list[str]) -> dict:
    """Build a mrkdwn message from report lines, one section block per chunk."""
    return {
        "text": "\n".join(lines),
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": chunk},
            }
            for chunk in chunk_lines(lines)
        ],
    }


def format_error_text(error: Exception) -> str:
    """Error summary plus the tail of the current traceback."""
    trace = traceback.format_exc()
    if len(trace) > ERROR_TRACEBACK_LIMIT:
        trace = "…" + trace[-ERROR_TRACEBACK_LIMIT:]

    # Leave room for the traceback and code fence in one section
    summary_limit = SLACK_SECTION_TEXT_LIMIT - ERROR_TRACEBACK_LIMIT - 10
    summary = truncate_text(f"*Who's out report failed:* {error}", summary_limit)
    return f"{summary}\n```{trace}```"


async def post_message(url: str, message: dict):
    """POST a message to a Slack webhook, raising on a non-2xx response."""
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
        response = await client.post(url, json=message)
        response.raise_for_status()


async def send_report_message(lines: list[str]):
    """Send the report to the team channel."""
    url = require_setting("SLACK_WEBHOOK_URL", SLACK_WEBHOOK_URL)
    message = build_message(lines)
    await post_message(url, message)
    print(f"Sent report to Slack ({len(lines)} line(s), {len(message['blocks'])} block(s))")


async def send_error_message(error: Exception):
    """Send error notification to the error webhook, if one is configured."""
    if not SLACK_ERROR_WEBHOOK_URL:
        print("No SLACK_ERROR_WEBHOOK_URL set, not sending error notification")
        return

    try:
        await post_message(SLACK_ERROR_WEBHOOK_URL, build_message([format_error_text(error)]))
        print("Sent error notification to Slack")
    except httpx.HTTPError as e:
        print(f"Failed to send error notification: {e}")
