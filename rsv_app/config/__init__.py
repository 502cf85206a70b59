"""
Configuration module.

Default parameters, YAML overrides with 3-tier precedence and validation.
"""
from .defaults import StrategyConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError, validate_or_raise

__all__ = [
    "StrategyConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "validate_or_raise",
]
