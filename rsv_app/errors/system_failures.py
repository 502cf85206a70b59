"""
System failure error classifications.

These exceptions originate outside the decision logic, in collaborators the
engine hands decisions to.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ExecutionError(SystemFailureError):
    """Execution sink failed to accept an entry bracket."""

    def __init__(self, message: str, label: Optional[str] = None,
                 bar_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.label = label
        self.bar_index = bar_index
