"""Session time filter."""

from datetime import datetime, time
from typing import Optional

from ..utils.time import to_session_time


def is_in_session(
    ts: datetime,
    start: time,
    end: time,
    timezone: Optional[str] = None
) -> bool:
    """
    Check whether a bar timestamp falls inside the trading session.

    Only the time of day is compared, at whole-second resolution, and both
    bounds are inclusive.

    Args:
        ts: Bar timestamp
        start: Session open
        end: Session close
        timezone: Session clock zone for aware timestamps

    Returns:
        True if ``start <= time_of_day(ts) <= end``
    """
    tod = to_session_time(ts, timezone).replace(microsecond=0)
    return start <= tod <= end
