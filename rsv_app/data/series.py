"""
Rolling indicator store.

The host's indicator library appends one row of values per closed bar; the
evaluator reads an immutable snapshot. Past values are never revised, and
bar indices must strictly increase.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from ..config.defaults import DataStoreParams
from ..errors import TemporalDataError
from ..signals.models import IndicatorSnapshot


@dataclass
class IndicatorSeriesStore:
    """Bounded per-series history for the indicators the evaluator reads."""

    config: DataStoreParams = field(default_factory=DataStoreParams)

    # Rolling histories, oldest first
    rsi: deque = None
    stoch_k: deque = None

    # Current scalar values
    ema: Optional[float] = None
    vwap: Optional[float] = None
    vwap_sd: Optional[float] = None
    atr: Optional[float] = None

    last_bar_index: Optional[int] = None
    bars_seen: int = 0

    def __post_init__(self):
        """Initialize collections if not provided."""
        if self.rsi is None:
            self.rsi = deque(maxlen=self.config.window_size)
        if self.stoch_k is None:
            self.stoch_k = deque(maxlen=self.config.window_size)

    def append(
        self,
        bar_index: int,
        rsi: Optional[float],
        stoch_k: Optional[float],
        ema: Optional[float],
        vwap: Optional[float],
        vwap_sd: Optional[float],
        atr: Optional[float]
    ) -> None:
        """
        Record indicator values for a newly closed bar.

        Missing or NaN values are stored as given; the evaluator treats them
        as "not ready" when they fall inside a window it reads.

        Raises:
            TemporalDataError: If ``bar_index`` does not advance
        """
        if self.last_bar_index is not None and bar_index <= self.last_bar_index:
            raise TemporalDataError(
                f"Bar index must increase: got {bar_index} after {self.last_bar_index}",
                bar_index=bar_index,
                last_bar_index=self.last_bar_index,
            )

        self.rsi.append(rsi)
        self.stoch_k.append(stoch_k)
        self.ema = ema
        self.vwap = vwap
        self.vwap_sd = vwap_sd
        self.atr = atr
        self.last_bar_index = bar_index
        self.bars_seen += 1

    def snapshot(self) -> IndicatorSnapshot:
        """Freeze the current values, most recent first."""
        return IndicatorSnapshot(
            rsi=tuple(reversed(self.rsi)),
            stoch_k=tuple(reversed(self.stoch_k)),
            ema=self.ema,
            vwap=self.vwap,
            vwap_sd=self.vwap_sd,
            atr=self.atr,
        )

    def __len__(self) -> int:
        return len(self.rsi)
