"""
Timestamp helpers for world metadata.
"""

from __future__ import annotations

from datetime import datetime, timezone

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def from_epoch_millis(millis: float) -> datetime:
    """Convert a JavaScript-style epoch milliseconds value to an aware UTC datetime."""
    return datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc)


def format_created_date(millis: float, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render a stored creation timestamp as a calendar date.

    Always evaluated in UTC so output does not depend on the host timezone.
    """
    return from_epoch_millis(millis).strftime(date_format)
