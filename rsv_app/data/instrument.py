"""
Instrument price grid.

Order prices must sit on the instrument's tick grid or the broker rejects
them. Rounding goes through ``Decimal`` so that repeated rounding is stable
and float noise such as 0.30000000000000004 never reaches an order.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.defaults import InstrumentParams


def decimals_from_step(step: float) -> int:
    """Number of decimal places implied by a price step."""
    exponent = Decimal(str(step)).normalize().as_tuple().exponent
    return max(0, -int(exponent))


@dataclass(frozen=True)
class Instrument:
    """Tradable instrument with its minimum price increment."""
    symbol: str
    tick_size: float = 0.25
    point_value: float = 1.0

    def __post_init__(self):
        if self.tick_size <= 0:
            raise ValueError(f"tick_size must be positive, got {self.tick_size}")
        if self.point_value <= 0:
            raise ValueError(f"point_value must be positive, got {self.point_value}")

    @classmethod
    def from_params(cls, symbol: str, params: "InstrumentParams") -> "Instrument":
        """Build an instrument from configuration parameters."""
        return cls(symbol=symbol, tick_size=params.tick_size, point_value=params.point_value)

    def round_to_tick(self, value: float) -> float:
        """
        Round a price or distance to the nearest multiple of tick size.

        Halves round away from zero.

        Args:
            value: Raw price or price distance

        Returns:
            Value on the tick grid
        """
        step = Decimal(str(self.tick_size))
        ticks = (Decimal(str(value)) / step).to_integral_value(rounding=ROUND_HALF_UP)
        decimals = decimals_from_step(self.tick_size)
        snapped = (ticks * step).quantize(Decimal(1).scaleb(-decimals))
        return float(snapped)

    def is_on_tick(self, price: float) -> bool:
        """Check whether a price already sits on the tick grid."""
        return (Decimal(str(price)) % Decimal(str(self.tick_size))) == 0
