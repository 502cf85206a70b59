"""
Data quality error classifications for indicator snapshots.

These exceptions describe why a bar cannot be evaluated. None of them is
fatal: the evaluator reports them as a "not ready" decision.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Bar index sequencing issues in indicator data."""

    def __init__(self, message: str, bar_index: Optional[int] = None,
                 last_bar_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.bar_index = bar_index
        self.last_bar_index = last_bar_index


class MissingDataError(DataQualityError):
    """Required indicator value is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class InvalidIndicatorError(DataQualityError):
    """Indicator value exists but is not a finite number."""

    def __init__(self, message: str, indicator: Optional[str] = None,
                 value: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
        self.value = value


class InsufficientDataError(DataQualityError):
    """Not enough historical values for the lookback window."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
