"""Configuration error raised when strategy parameters fail validation."""

from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """Invalid strategy configuration, rejected before any evaluation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
