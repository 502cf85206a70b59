"""Tests for indicator value validation."""

import math

import pytest

from rsv_app.data.validators import require_history, require_value
from rsv_app.errors import (
    DataQualityError,
    InsufficientDataError,
    InvalidIndicatorError,
    MissingDataError,
)


class TestRequireValue:
    """Test scalar value checks."""

    def test_valid(self):
        assert require_value("atr", 10) == 10.0

    def test_none(self):
        with pytest.raises(MissingDataError) as exc_info:
            require_value("atr", None)
        assert exc_info.value.data_type == "atr"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        with pytest.raises(InvalidIndicatorError):
            require_value("atr", value)

    @pytest.mark.parametrize("value", ["10", True])
    def test_non_numeric(self, value):
        with pytest.raises(InvalidIndicatorError):
            require_value("atr", value)


class TestRequireHistory:
    """Test history window checks."""

    def test_returns_window(self):
        assert require_history("rsi", (1.0, 2.0, 3.0, 4.0), 2) == [1.0, 2.0]

    def test_short_history(self):
        with pytest.raises(InsufficientDataError):
            require_history("rsi", (1.0,), 2)

    def test_errors_are_data_quality(self):
        with pytest.raises(DataQualityError):
            require_history("rsi", (1.0, math.nan), 2)
