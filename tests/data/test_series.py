"""Tests for the rolling indicator store."""

import math

import pytest

from rsv_app.config.defaults import DataStoreParams
from rsv_app.data.series import IndicatorSeriesStore
from rsv_app.errors import TemporalDataError


def feed(store, start, count, rsi=50.0, stoch_k=50.0):
    for i in range(start, start + count):
        store.append(i, rsi, stoch_k, ema=4500.0, vwap=4490.0, vwap_sd=15.0, atr=10.0)


class TestIndicatorSeriesStore:
    """Test appending and snapshotting indicator history."""

    def test_snapshot_most_recent_first(self):
        store = IndicatorSeriesStore()
        for i, (rsi, k) in enumerate([(40.0, 10.0), (45.0, 18.0), (50.0, 25.0)]):
            store.append(i, rsi, k, ema=1.0, vwap=1.0, vwap_sd=1.0, atr=1.0)

        snapshot = store.snapshot()
        assert snapshot.rsi == (50.0, 45.0, 40.0)
        assert snapshot.stoch_k == (25.0, 18.0, 10.0)

    def test_scalars_reflect_latest_bar(self):
        store = IndicatorSeriesStore()
        store.append(0, 50.0, 50.0, ema=1.0, vwap=2.0, vwap_sd=3.0, atr=4.0)
        store.append(1, 50.0, 50.0, ema=5.0, vwap=6.0, vwap_sd=7.0, atr=8.0)

        snapshot = store.snapshot()
        assert (snapshot.ema, snapshot.vwap, snapshot.vwap_sd, snapshot.atr) == (5.0, 6.0, 7.0, 8.0)

    def test_window_is_bounded(self):
        store = IndicatorSeriesStore(config=DataStoreParams(window_size=30))
        feed(store, 0, 100)
        assert len(store) == 30
        assert store.bars_seen == 100
        assert store.last_bar_index == 99

    def test_bar_index_must_increase(self):
        store = IndicatorSeriesStore()
        feed(store, 0, 5)
        with pytest.raises(TemporalDataError) as exc_info:
            store.append(4, 50.0, 50.0, ema=1.0, vwap=1.0, vwap_sd=1.0, atr=1.0)
        assert exc_info.value.bar_index == 4
        assert exc_info.value.last_bar_index == 4
        assert len(store) == 5

    def test_gaps_allowed(self):
        store = IndicatorSeriesStore()
        store.append(0, 50.0, 50.0, ema=1.0, vwap=1.0, vwap_sd=1.0, atr=1.0)
        store.append(10, 50.0, 50.0, ema=1.0, vwap=1.0, vwap_sd=1.0, atr=1.0)
        assert store.last_bar_index == 10

    def test_nan_values_kept(self):
        store = IndicatorSeriesStore()
        store.append(0, math.nan, None, ema=None, vwap=1.0, vwap_sd=1.0, atr=math.nan)
        snapshot = store.snapshot()
        assert math.isnan(snapshot.rsi[0])
        assert snapshot.stoch_k == (None,)
        assert snapshot.ema is None

    def test_snapshot_is_detached(self):
        store = IndicatorSeriesStore()
        feed(store, 0, 3)
        snapshot = store.snapshot()
        feed(store, 3, 2, rsi=10.0)
        assert len(snapshot.rsi) == 3
        assert 10.0 not in snapshot.rsi
