"""
Indicator value validation.

Helpers that check snapshot values before they reach a comparison. A NaN
compares false against everything, so letting one through would silently
veto or license a signal instead of marking the bar as not ready.
"""

import math
from typing import Optional, Sequence

from ..errors import InsufficientDataError, InvalidIndicatorError, MissingDataError


def require_value(name: str, value: Optional[float]) -> float:
    """
    Ensure a scalar indicator value is present and finite.

    Raises:
        MissingDataError: If the value is None
        InvalidIndicatorError: If the value is NaN or infinite
    """
    if value is None:
        raise MissingDataError(f"{name} value is missing", data_type=name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidIndicatorError(
            f"{name} value must be numeric, got {type(value).__name__}",
            indicator=name,
        )
    if not math.isfinite(value):
        raise InvalidIndicatorError(f"{name} value is not finite", indicator=name, value=value)
    return float(value)


def require_history(name: str, series: Sequence[Optional[float]], count: int) -> list[float]:
    """
    Ensure the ``count`` most recent values of a series are present and finite.

    Args:
        name: Indicator name for error reporting
        series: History ordered most recent first
        count: Number of values required

    Returns:
        The first ``count`` values as floats

    Raises:
        InsufficientDataError: If fewer than ``count`` values exist
        MissingDataError: If a value in the window is None
        InvalidIndicatorError: If a value in the window is not finite
    """
    if len(series) < count:
        raise InsufficientDataError(
            f"{name} history too short: need {count}, have {len(series)}",
            required_count=count,
            available_count=len(series),
        )
    return [require_value(f"{name}[{i}]", series[i]) for i in range(count)]
