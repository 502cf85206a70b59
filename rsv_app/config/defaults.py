"""Default configuration parameters for the entry signal engine."""

from dataclasses import dataclass, field
from datetime import time
from typing import Optional

from ..utils.time import parse_time_of_day


@dataclass(frozen=True)
class StrategyParams:
    """Position sizing and ATR multiples for stop/targets."""
    lookback_bars: int = 20                          # RSI extreme lookback window
    contracts: int = 2                               # Entry quantity
    target1_mult: float = 3.0                        # First target, ATR multiple (not attached)
    target2_mult: float = 6.0                        # Profit target, ATR multiple
    stop_mult: float = 2.5                           # Stop loss, ATR multiple
    entries_per_direction: int = 1                   # Must stay 1, entries only when flat
    long_label: str = "LongEntry"
    short_label: str = "ShortEntry"


@dataclass(frozen=True)
class ThresholdParams:
    """Oscillator thresholds."""
    rsi_oversold: float = 20.0                       # RSI[i] < this marks oversold
    rsi_overbought: float = 80.0                     # RSI[i] > this marks overbought
    stoch_cross_up: float = 20.0                     # %K cross above arms long
    stoch_cross_down: float = 80.0                   # %K cross below arms short


@dataclass(frozen=True)
class SessionParams:
    """Intraday trading window, inclusive on both ends."""
    start: time = time(9, 30)
    end: time = time(13, 30)
    timezone: Optional[str] = None                   # Convert aware timestamps first

    def __post_init__(self):
        # Unparseable values are left for ConfigValidator to report
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, str):
                try:
                    object.__setattr__(self, name, parse_time_of_day(value))
                except ValueError:
                    pass


@dataclass(frozen=True)
class WarmupParams:
    """Bars required before any evaluation."""
    min_bars: int = 50


@dataclass(frozen=True)
class IndicatorParams:
    """Settings the indicator provider is expected to use."""
    ema_period: int = 34
    rsi_period: int = 14
    rsi_smooth: int = 3
    stoch_period_d: int = 3
    stoch_period_k: int = 14
    stoch_smooth: int = 3
    atr_period: int = 14


@dataclass(frozen=True)
class InstrumentParams:
    """Instrument price grid."""
    tick_size: float = 0.25
    point_value: float = 1.0


@dataclass(frozen=True)
class DataStoreParams:
    """Rolling indicator store parameters."""
    window_size: int = 256             # Historical values retained per series


@dataclass(frozen=True)
class StrategyConfig:
    """Complete, immutable strategy configuration."""
    strategy: StrategyParams = field(default_factory=StrategyParams)
    thresholds: ThresholdParams = field(default_factory=ThresholdParams)
    session: SessionParams = field(default_factory=SessionParams)
    warmup: WarmupParams = field(default_factory=WarmupParams)
    indicators: IndicatorParams = field(default_factory=IndicatorParams)
    instrument: InstrumentParams = field(default_factory=InstrumentParams)
    datastore: DataStoreParams = field(default_factory=DataStoreParams)


def get_default_config() -> StrategyConfig:
    """Get the default configuration instance."""
    return StrategyConfig(
        strategy=StrategyParams(),
        thresholds=ThresholdParams(),
        session=SessionParams(),
        warmup=WarmupParams(),
        indicators=IndicatorParams(),
        instrument=InstrumentParams(),
        datastore=DataStoreParams(),
    )
