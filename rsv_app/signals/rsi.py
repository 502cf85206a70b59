"""RSI precondition check over a fixed lookback window."""

from typing import Optional, Sequence

from ..data.validators import require_history
from .models import RSIExtremes


def check_rsi_extremes(
    rsi: Sequence[Optional[float]],
    lookback: int,
    oversold: float = 20.0,
    overbought: float = 80.0
) -> RSIExtremes:
    """
    Check whether RSI visited either extreme within the last ``lookback`` bars.

    The two flags are independent: both can be set by the same window, and
    the order in which the extremes occurred does not matter.

    Args:
        rsi: RSI history, most recent first
        lookback: Number of bars to inspect, including the current one
        oversold: Strict lower threshold
        overbought: Strict upper threshold

    Returns:
        RSIExtremes flags

    Raises:
        InsufficientDataError: If fewer than ``lookback`` values exist
        InvalidIndicatorError: If the window holds a non-finite value
    """
    window = require_history("rsi", rsi, lookback)
    return RSIExtremes(
        was_oversold=any(value < oversold for value in window),
        was_overbought=any(value > overbought for value in window),
    )
