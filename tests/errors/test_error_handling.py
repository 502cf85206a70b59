"""
Error handling tests for the entry signal engine.

Tests cover the error hierarchy and the rule that data problems on a bar
degrade to a no-action decision instead of escaping the evaluator.
"""

import math
from dataclasses import replace

import pytest

from rsv_app.errors import (
    ConfigurationError,
    DataQualityError,
    ExecutionError,
    InsufficientDataError,
    InvalidIndicatorError,
    MissingDataError,
    SystemFailureError,
    TemporalDataError,
)
from rsv_app.signals.evaluator import SignalEvaluator
from rsv_app.signals.models import IndicatorSnapshot, NoEntryReason, PositionState


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        temporal_error = TemporalDataError("out of order", bar_index=5, last_bar_index=7)
        assert isinstance(temporal_error, DataQualityError)
        assert temporal_error.last_bar_index == 7

        missing_error = MissingDataError("missing", data_type="atr")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "atr"

        invalid_error = InvalidIndicatorError("nan", indicator="ema", value=math.nan)
        assert isinstance(invalid_error, DataQualityError)
        assert invalid_error.indicator == "ema"

        insufficient_error = InsufficientDataError("short", required_count=20, available_count=3)
        assert insufficient_error.required_count == 20

    def test_context_passthrough(self):
        error = MissingDataError("missing", data_type="vwap", context={"bar_index": 12})
        assert error.context == {"bar_index": 12}

    def test_system_failure_hierarchy(self):
        execution_error = ExecutionError("rejected", label="LongEntry", bar_index=60)
        assert isinstance(execution_error, SystemFailureError)
        assert execution_error.recoverable is False
        assert execution_error.label == "LongEntry"

    def test_configuration_error(self):
        error = ConfigurationError("bad", errors=["x"])
        assert error.recoverable is False
        assert error.errors == ["x"]


class TestGracefulDegradation:
    """Data problems never escape the evaluator."""

    @pytest.fixture
    def evaluator(self, default_config, es_instrument):
        return SignalEvaluator(default_config, es_instrument)

    def test_every_field_nan(self, evaluator, make_bar, long_snapshot):
        for name in ("ema", "vwap", "vwap_sd", "atr"):
            snapshot = replace(long_snapshot, **{name: math.nan})
            decision = evaluator.evaluate(make_bar(), snapshot, PositionState.FLAT)
            assert decision.reason == NoEntryReason.NOT_READY, name

    def test_nan_inside_rsi_window(self, evaluator, make_bar, long_snapshot):
        rsi = list(long_snapshot.rsi)
        rsi[10] = math.nan
        snapshot = replace(long_snapshot, rsi=tuple(rsi))
        decision = evaluator.evaluate(make_bar(), snapshot, PositionState.FLAT)
        assert decision.reason == NoEntryReason.NOT_READY

    def test_empty_snapshot(self, evaluator, make_bar):
        decision = evaluator.evaluate(make_bar(), IndicatorSnapshot(), PositionState.FLAT)
        assert decision.reason == NoEntryReason.NOT_READY
