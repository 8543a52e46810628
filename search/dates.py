"""
ISO-8601 timestamp parsing for result sorting.
"""
from datetime import datetime, timezone
from typing import Optional

from search.exceptions import InvalidDateFormat


def parse_timestamp(value, page_id: Optional[str] = None) -> datetime:
    """
    Parses an ISO-8601 timestamp into an aware datetime.

    A trailing 'Z' is read as UTC. Timestamps without an offset are taken as
    UTC so that every parsed value can be compared with every other one.

    Args:
        value: The raw last_updated value.
        page_id (Optional[str]): Page the value belongs to, for error reporting.

    Returns:
        datetime: A timezone-aware datetime.

    Raises:
        InvalidDateFormat: If the value is not a string or is not ISO-8601.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateFormat(value, page_id)

    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidDateFormat(value, page_id) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
