"""EMA location filter relative to the VWAP standard deviation band."""

from typing import Optional

from ..data.validators import require_value
from ..errors import InvalidIndicatorError
from .models import LocationFilter


def check_location(
    ema: Optional[float],
    vwap: Optional[float],
    vwap_sd: Optional[float]
) -> LocationFilter:
    """
    Locate the EMA within the one-standard-deviation VWAP band.

    Long requires ``vwap < ema < vwap + sd`` and short requires
    ``vwap - sd < ema < vwap``. All bounds are strict, so an EMA sitting
    exactly on VWAP or on a band edge licenses neither side.

    Raises:
        MissingDataError: If a value is missing
        InvalidIndicatorError: If a value is not finite or sd is negative
    """
    ema = require_value("ema", ema)
    vwap = require_value("vwap", vwap)
    sd = require_value("vwap_sd", vwap_sd)
    if sd < 0:
        raise InvalidIndicatorError("vwap_sd must be non-negative", indicator="vwap_sd", value=sd)

    return LocationFilter(
        long_ok=vwap < ema < vwap + sd,
        short_ok=vwap - sd < ema < vwap,
    )
