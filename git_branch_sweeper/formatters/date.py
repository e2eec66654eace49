"""Date and time formatting utilities."""

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(timestamp: Optional[int]) -> str:
    """
    Format a unix timestamp as a YYYY-MM-DD date (UTC).

    Args:
        timestamp: Unix seconds, or None when unknown

    Returns:
        Formatted date string
    """
    if timestamp is None:
        return "unknown"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
