"""
Entry signal module.

Session filter, RSI precondition, EMA/VWAP location filter, Stochastics %K
cross detection and the evaluator that assembles them into an entry decision.
"""
from .evaluator import SignalEvaluator
from .models import (
    BarContext,
    EntryAction,
    EntryDecision,
    IndicatorSnapshot,
    PositionState,
)

__all__ = [
    "SignalEvaluator",
    "BarContext",
    "EntryAction",
    "EntryDecision",
    "IndicatorSnapshot",
    "PositionState",
]
