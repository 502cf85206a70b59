"""
Time-of-day utilities for session filtering.

Bar timestamps come from the host platform and are authoritative; wall-clock
time is never consulted when deciding whether a bar is inside the session.
"""

from datetime import datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo


def parse_time_of_day(value: Union[str, time]) -> time:
    """
    Parse a session boundary given as ``HH:MM`` or ``HH:MM:SS``.

    Args:
        value: Time string or an existing ``datetime.time``

    Returns:
        Parsed time of day

    Raises:
        ValueError: If the string is not a valid time of day
    """
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected HH:MM[:SS] string, got {type(value).__name__}")

    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


def to_session_time(ts: datetime, timezone: Optional[str] = None) -> time:
    """
    Get the session-local time of day for a bar timestamp.

    Aware timestamps are converted to ``timezone`` when one is configured.
    Naive timestamps are used as-is.

    Args:
        ts: Bar timestamp
        timezone: IANA zone name of the session clock

    Returns:
        Time of day without tzinfo
    """
    if timezone and ts.tzinfo is not None:
        ts = ts.astimezone(ZoneInfo(timezone))
    return ts.time().replace(tzinfo=None)


def format_market_time(market_ts: datetime) -> str:
    """Format a bar timestamp for logging (ISO8601)."""
    return market_ts.isoformat()
