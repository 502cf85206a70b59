"""
Error classification system for the entry signal engine.

Data quality errors describe bars that cannot be evaluated yet and are turned
into a "no action" decision. Configuration errors are raised eagerly at
construction time. System failures come from collaborators such as the
execution sink.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    InvalidIndicatorError,
    InsufficientDataError,
)
from .configuration import ConfigurationError
from .system_failures import (
    SystemFailureError,
    ExecutionError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "InvalidIndicatorError",
    "InsufficientDataError",
    # Configuration
    "ConfigurationError",
    # System Failures
    "SystemFailureError",
    "ExecutionError",
]
