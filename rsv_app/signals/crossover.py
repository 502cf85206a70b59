"""
Threshold cross detection.

A cross is an edge, not a level: it is reported only on the bar where the
series moves through the threshold and never on the bars that follow.
"""

from typing import Optional, Sequence

from ..data.validators import require_history
from .models import StochCross


def crossed_above(series: Sequence[Optional[float]], threshold: float, name: str = "series") -> bool:
    """True if ``series[1] <= threshold`` and ``series[0] > threshold``."""
    current, previous = require_history(name, series, 2)
    return previous <= threshold and current > threshold


def crossed_below(series: Sequence[Optional[float]], threshold: float, name: str = "series") -> bool:
    """True if ``series[1] >= threshold`` and ``series[0] < threshold``."""
    current, previous = require_history(name, series, 2)
    return previous >= threshold and current < threshold


def detect_stoch_cross(
    stoch_k: Sequence[Optional[float]],
    cross_up_level: float = 20.0,
    cross_down_level: float = 80.0
) -> StochCross:
    """
    Detect Stochastics %K crossing up through the oversold level or down
    through the overbought level on the current bar.

    Args:
        stoch_k: %K history, most recent first
        cross_up_level: Level %K must cross above for a long trigger
        cross_down_level: Level %K must cross below for a short trigger

    Returns:
        StochCross flags

    Raises:
        InsufficientDataError: If fewer than two values exist
        InvalidIndicatorError: If either value is not finite
    """
    return StochCross(
        cross_up=crossed_above(stoch_k, cross_up_level, name="stoch_k"),
        cross_down=crossed_below(stoch_k, cross_down_level, name="stoch_k"),
    )
