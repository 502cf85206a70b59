"""Tests for threshold cross detection."""

import math

import pytest

from rsv_app.errors import InsufficientDataError, InvalidIndicatorError, MissingDataError
from rsv_app.signals.crossover import crossed_above, crossed_below, detect_stoch_cross


def most_recent_first(history, end):
    """Window of a chronological history ending at `end`, newest first."""
    return list(reversed(history[: end + 1]))


class TestCrossedAbove:
    """Test upward threshold crosses."""

    def test_cross_from_below(self):
        assert crossed_above([25.0, 18.0], 20.0) is True

    def test_cross_from_exact_threshold(self):
        """Previous bar at the threshold counts as below."""
        assert crossed_above([21.0, 20.0], 20.0) is True

    def test_landing_on_threshold_is_not_cross(self):
        assert crossed_above([20.0, 15.0], 20.0) is False

    def test_staying_above(self):
        assert crossed_above([30.0, 25.0], 20.0) is False

    def test_staying_below(self):
        assert crossed_above([19.0, 10.0], 20.0) is False


class TestCrossedBelow:
    """Test downward threshold crosses."""

    def test_cross_from_above(self):
        assert crossed_below([78.0, 81.0], 80.0) is True

    def test_cross_from_exact_threshold(self):
        assert crossed_below([79.0, 80.0], 80.0) is True

    def test_landing_on_threshold_is_not_cross(self):
        assert crossed_below([80.0, 85.0], 80.0) is False

    def test_staying_below(self):
        assert crossed_below([70.0, 75.0], 80.0) is False


class TestDetectStochCross:
    """Test the Stochastics %K edge trigger over a bar sequence."""

    def test_fires_only_on_transition_bar(self):
        history = [30.0, 15.0, 18.0, 25.0, 30.0, 35.0]
        results = [
            detect_stoch_cross(most_recent_first(history, end)).cross_up
            for end in range(1, len(history))
        ]
        assert results == [False, False, True, False, False]

    def test_cross_down_sequence(self):
        history = [70.0, 85.0, 82.0, 75.0, 60.0]
        results = [
            detect_stoch_cross(most_recent_first(history, end)).cross_down
            for end in range(1, len(history))
        ]
        assert results == [False, False, True, False]

    def test_levels_are_configurable(self):
        result = detect_stoch_cross([31.0, 29.0], cross_up_level=30.0, cross_down_level=70.0)
        assert result.cross_up is True
        assert result.cross_down is False

    def test_requires_two_values(self):
        with pytest.raises(InsufficientDataError):
            detect_stoch_cross([25.0])

    def test_nan_value(self):
        with pytest.raises(InvalidIndicatorError):
            detect_stoch_cross([25.0, math.nan])

    def test_missing_value(self):
        with pytest.raises(MissingDataError):
            detect_stoch_cross([None, 18.0])
