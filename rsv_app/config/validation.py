"""Configuration validation utilities."""

from dataclasses import asdict, dataclass, fields, is_dataclass
from typing import Any, Union
from zoneinfo import ZoneInfo

from ..errors import ConfigurationError
from ..utils.time import parse_time_of_day
from .defaults import (
    DataStoreParams,
    IndicatorParams,
    InstrumentParams,
    SessionParams,
    StrategyConfig,
    StrategyParams,
    ThresholdParams,
    WarmupParams,
)


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_unknown(params: dict[str, Any], known: type, section: str) -> list[ValidationError]:
    allowed = {f.name for f in fields(known)}
    return [
        ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
        for key, value in params.items() if key not in allowed
    ]


def _check_positive_int(params: dict[str, Any], name: str, section: str) -> list[ValidationError]:
    if name in params:
        value = params[name]
        if not _is_int(value) or value <= 0:
            return [ValidationError(
                field=f"{section}.{name}",
                message="Must be a positive integer",
                value=value
            )]
    return []


def _check_positive_number(params: dict[str, Any], name: str, section: str) -> list[ValidationError]:
    if name in params:
        value = params[name]
        if not _is_number(value) or value <= 0:
            return [ValidationError(
                field=f"{section}.{name}",
                message="Must be a positive number",
                value=value
            )]
    return []


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_strategy_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate lookback, sizing and ATR multiples."""
        errors = _check_unknown(params, StrategyParams, "strategy")

        for name in ("lookback_bars", "contracts", "entries_per_direction"):
            errors.extend(_check_positive_int(params, name, "strategy"))

        for name in ("target1_mult", "target2_mult", "stop_mult"):
            errors.extend(_check_positive_number(params, name, "strategy"))

        # No pyramiding: one open entry at a time
        if params.get("entries_per_direction", 1) != 1:
            errors.append(ValidationError(
                field="strategy.entries_per_direction",
                message="Only a single entry per direction is supported",
                value=params["entries_per_direction"]
            ))

        # Validate order labels
        for name in ("long_label", "short_label"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(ValidationError(
                        field=f"strategy.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        if (
            "long_label" in params and "short_label" in params
            and params["long_label"] == params["short_label"]
        ):
            errors.append(ValidationError(
                field="strategy.short_label",
                message="Must differ from long_label",
                value=params["short_label"]
            ))

        return errors

    @staticmethod
    def validate_threshold_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate oscillator thresholds."""
        errors = _check_unknown(params, ThresholdParams, "thresholds")

        for name in ("rsi_oversold", "rsi_overbought", "stoch_cross_up", "stoch_cross_down"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=f"thresholds.{name}",
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        if not errors:
            if "rsi_oversold" in params and "rsi_overbought" in params:
                if params["rsi_oversold"] >= params["rsi_overbought"]:
                    errors.append(ValidationError(
                        field="thresholds.rsi_oversold",
                        message="Must be below rsi_overbought",
                        value=params["rsi_oversold"]
                    ))
            if "stoch_cross_up" in params and "stoch_cross_down" in params:
                if params["stoch_cross_up"] >= params["stoch_cross_down"]:
                    errors.append(ValidationError(
                        field="thresholds.stoch_cross_up",
                        message="Must be below stoch_cross_down",
                        value=params["stoch_cross_up"]
                    ))

        return errors

    @staticmethod
    def validate_session_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate session window and timezone."""
        errors = _check_unknown(params, SessionParams, "session")
        parsed = {}

        for name in ("start", "end"):
            if name in params:
                value = params[name]
                try:
                    parsed[name] = parse_time_of_day(value)
                except ValueError:
                    errors.append(ValidationError(
                        field=f"session.{name}",
                        message="Must be a time of day (HH:MM or HH:MM:SS)",
                        value=value
                    ))

        if "start" in parsed and "end" in parsed and parsed["start"] > parsed["end"]:
            errors.append(ValidationError(
                field="session.end",
                message="Must not be earlier than session start",
                value=params["end"]
            ))

        if "timezone" in params:
            value = params["timezone"]
            if value is not None:
                try:
                    ZoneInfo(value)
                except (TypeError, ValueError, KeyError, OSError):
                    errors.append(ValidationError(
                        field="session.timezone",
                        message="Must be an IANA timezone name",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_warmup_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate warm-up parameters."""
        errors = _check_unknown(params, WarmupParams, "warmup")
        errors.extend(_check_positive_int(params, "min_bars", "warmup"))
        return errors

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator periods."""
        errors = _check_unknown(params, IndicatorParams, "indicators")
        for f in fields(IndicatorParams):
            errors.extend(_check_positive_int(params, f.name, "indicators"))
        return errors

    @staticmethod
    def validate_instrument_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate instrument price grid."""
        errors = _check_unknown(params, InstrumentParams, "instrument")
        errors.extend(_check_positive_number(params, "tick_size", "instrument"))
        errors.extend(_check_positive_number(params, "point_value", "instrument"))
        return errors

    @staticmethod
    def validate_datastore_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rolling store parameters."""
        errors = _check_unknown(params, DataStoreParams, "datastore")
        errors.extend(_check_positive_int(params, "window_size", "datastore"))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "strategy": ConfigValidator.validate_strategy_params,
            "thresholds": ConfigValidator.validate_threshold_params,
            "session": ConfigValidator.validate_session_params,
            "warmup": ConfigValidator.validate_warmup_params,
            "indicators": ConfigValidator.validate_indicator_params,
            "instrument": ConfigValidator.validate_instrument_params,
            "datastore": ConfigValidator.validate_datastore_params,
        }

        for section, value in config.items():
            if section not in validators:
                errors.append(ValidationError(field=section, message="Unknown section", value=value))
            elif not isinstance(value, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=value))
            else:
                errors.extend(validators[section](value))

        if errors:
            return errors

        # Cross-section rules
        lookback = config.get("strategy", {}).get("lookback_bars")
        window = config.get("datastore", {}).get("window_size")
        if lookback is not None and window is not None and window < lookback:
            errors.append(ValidationError(
                field="datastore.window_size",
                message="Must be at least strategy.lookback_bars",
                value=window
            ))

        return errors


def validate_or_raise(config: Union[StrategyConfig, dict[str, Any]]) -> None:
    """
    Validate a configuration and raise on the first failing batch.

    Raises:
        ConfigurationError: Carrying every ValidationError found
    """
    config_dict = asdict(config) if is_dataclass(config) else config
    errors = ConfigValidator.validate_config(config_dict)
    if errors:
        details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
        raise ConfigurationError(f"Invalid strategy configuration: {details}", errors=errors)
