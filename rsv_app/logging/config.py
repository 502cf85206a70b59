"""
Centralized logging configuration for the entry signal engine.

This module provides standardized logging configuration using structlog
for all components. Every gate evaluated on a bar and every entry decision
is logged through the helpers below so a run can be audited bar by bar.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    instrument: Optional[str] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Route engine logs through structlog on top of stdlib logging.

    Gate results are emitted at DEBUG and failed gates and entries at INFO,
    so ``level="DEBUG"`` gives a full per-bar audit trail while the default
    only shows decisions. When ``instrument`` is given it is bound as a
    context variable and appears on every event, which keeps interleaved
    output from several engines in one process apart.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise console rendering
        include_timestamp: Add an ISO wall-clock timestamp to each event
        include_caller: Include caller information (filename, line number)
        instrument: Symbol bound to every event
        extra_processors: Additional structlog processors to include
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.contextvars.clear_contextvars()
    if instrument:
        structlog.contextvars.bind_contextvars(instrument=instrument)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_gating_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for per-bar gate evaluations.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with the gating subsystem context
    """
    return get_logger(name).bind(
        subsystem="gating",
        audit_trail=True
    )


def get_decision_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for emitted entry decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with the entry decision subsystem context
    """
    return get_logger(name).bind(
        subsystem="entry_decision",
        audit_trail=True
    )


def log_gate_decision(
    logger: FilteringBoundLogger,
    gate_name: str,
    passed: bool,
    bar_index: int,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a gate result with standardized format.

    Passing gates are logged at debug level since most bars pass the
    warm-up and session gates; failures are logged at info level.

    Args:
        logger: Structlog logger instance
        gate_name: Name of the gate being evaluated
        passed: Whether the gate passed or failed
        bar_index: Ordinal of the bar being evaluated
        reason: Detailed reason for the result
        context: Additional context data
    """
    bound_logger = logger.bind(
        gate_name=gate_name,
        gate_result="PASS" if passed else "FAIL",
        bar_index=bar_index,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.debug("Gate passed")
    else:
        bound_logger.info("Gate failed")


def log_entry_decision(
    logger: FilteringBoundLogger,
    action: str,
    bar_index: int,
    label: str,
    contracts: int,
    close: float,
    stop_price: float,
    target_price: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an emitted entry decision.

    Args:
        logger: Structlog logger instance
        action: Decision action value (enter_long / enter_short)
        bar_index: Ordinal of the bar that produced the decision
        label: Order label the bracket is keyed by
        contracts: Entry quantity
        close: Close price of the signal bar
        stop_price: Stop loss price
        target_price: Attached profit target price
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        bar_index=bar_index,
        label=label,
        contracts=contracts,
        close=close,
        stop_price=stop_price,
        target_price=target_price,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Entry decision")
