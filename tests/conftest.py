"""Pytest configuration and shared fixtures."""

from datetime import datetime
from typing import Callable, Optional

import pytest

from rsv_app.config.defaults import get_default_config, StrategyConfig
from rsv_app.data.instrument import Instrument
from rsv_app.signals.models import BarContext, IndicatorSnapshot


@pytest.fixture
def default_config() -> StrategyConfig:
    """Default strategy configuration (lookback 20, stop 2.5 ATR, target2 6 ATR)."""
    return get_default_config()


@pytest.fixture
def es_instrument() -> Instrument:
    """Quarter-point tick instrument."""
    return Instrument(symbol="ES", tick_size=0.25, point_value=50.0)


@pytest.fixture
def session_ts() -> datetime:
    """Timestamp inside the 09:30-13:30 session."""
    return datetime(2024, 3, 4, 10, 15, 0)


@pytest.fixture
def make_bar(session_ts) -> Callable[..., BarContext]:
    """Factory for bar contexts."""
    def _make(bar_index: int = 60, close: float = 4500.0,
              timestamp: Optional[datetime] = None) -> BarContext:
        return BarContext(timestamp=timestamp or session_ts, bar_index=bar_index, close=close)
    return _make


@pytest.fixture
def long_snapshot() -> IndicatorSnapshot:
    """Snapshot meeting every long condition.

    RSI dipped to 15 five bars ago, %K moved 19 -> 22, EMA sits between VWAP
    and VWAP + 1 sd, ATR is 10.
    """
    rsi = [50.0] * 20
    rsi[5] = 15.0
    return IndicatorSnapshot(
        rsi=tuple(rsi),
        stoch_k=(22.0, 19.0, 12.0),
        ema=4500.0,
        vwap=4490.0,
        vwap_sd=15.0,
        atr=10.0,
    )


@pytest.fixture
def short_snapshot() -> IndicatorSnapshot:
    """Snapshot meeting every short condition."""
    rsi = [55.0] * 20
    rsi[3] = 85.0
    return IndicatorSnapshot(
        rsi=tuple(rsi),
        stoch_k=(78.0, 81.0, 88.0),
        ema=4480.0,
        vwap=4490.0,
        vwap_sd=15.0,
        atr=10.0,
    )
