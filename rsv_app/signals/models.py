"""
Entry signal data models.

This module defines immutable data structures passed into and out of the
signal evaluator. Indicator history is owned by the host's indicator
library; the evaluator only ever sees a frozen snapshot of it.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence


class PositionState(str, Enum):
    """Current market position as reported by the execution side."""
    FLAT = "flat"
    LONG = "long"
    SHORT = "short"


class EntryAction(str, Enum):
    """Outcome of a bar evaluation."""
    NONE = "none"
    ENTER_LONG = "enter_long"
    ENTER_SHORT = "enter_short"


class NoEntryReason(str, Enum):
    """Why a bar produced no entry."""
    WARMUP = "warmup"
    OUT_OF_SESSION = "out_of_session"
    NOT_READY = "not_ready"
    IN_POSITION = "in_position"
    NO_SIGNAL = "no_signal"


@dataclass(frozen=True)
class BarContext:
    """The bar being evaluated."""
    timestamp: datetime         # Bar close time from the host platform
    bar_index: int              # Bars since strategy start
    close: float                # Close price of the bar


@dataclass(frozen=True)
class IndicatorSnapshot:
    """
    Read-only view of indicator values at one bar close.

    Series are ordered most recent first: ``rsi[0]`` is the bar being
    evaluated, ``rsi[1]`` the bar before it, and so on.
    """
    rsi: tuple[float, ...] = ()
    stoch_k: tuple[float, ...] = ()
    ema: Optional[float] = None
    vwap: Optional[float] = None
    vwap_sd: Optional[float] = None
    atr: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "rsi", tuple(self.rsi))
        object.__setattr__(self, "stoch_k", tuple(self.stoch_k))

    @classmethod
    def from_history(
        cls,
        rsi: Sequence[float],
        stoch_k: Sequence[float],
        ema: Optional[float],
        vwap: Optional[float],
        vwap_sd: Optional[float],
        atr: Optional[float],
        oldest_first: bool = False
    ) -> "IndicatorSnapshot":
        """
        Build a snapshot from plain sequences.

        Args:
            rsi: RSI history
            stoch_k: Stochastics %K history
            ema: Current EMA value
            vwap: Current VWAP value
            vwap_sd: Current VWAP standard deviation
            atr: Current ATR value
            oldest_first: Set when the sequences are in chronological order

        Returns:
            Snapshot with series ordered most recent first
        """
        if oldest_first:
            rsi = list(reversed(rsi))
            stoch_k = list(reversed(stoch_k))
        return cls(rsi=tuple(rsi), stoch_k=tuple(stoch_k), ema=ema,
                   vwap=vwap, vwap_sd=vwap_sd, atr=atr)


@dataclass(frozen=True)
class RSIExtremes:
    """RSI extremes seen within the lookback window."""
    was_oversold: bool
    was_overbought: bool


@dataclass(frozen=True)
class LocationFilter:
    """EMA position relative to the VWAP band."""
    long_ok: bool
    short_ok: bool


@dataclass(frozen=True)
class StochCross:
    """Stochastics %K threshold cross on the current bar."""
    cross_up: bool
    cross_down: bool


@dataclass(frozen=True)
class EntryDecision:
    """Result of evaluating one bar. Produced fresh on every call."""

    action: EntryAction
    contracts: int = 0
    stop_price: Optional[float] = None
    target1_price: Optional[float] = None           # Computed, not attached to an order
    target2_price: Optional[float] = None           # Attached profit target
    label: Optional[str] = None                     # Order label for the bracket
    bar_index: Optional[int] = None
    risk_per_contract: Optional[float] = None       # Stop distance x point value
    reason: Optional[NoEntryReason] = None

    @property
    def is_entry(self) -> bool:
        return self.action != EntryAction.NONE

    @property
    def is_long(self) -> bool:
        return self.action == EntryAction.ENTER_LONG

    @property
    def is_short(self) -> bool:
        return self.action == EntryAction.ENTER_SHORT

    @classmethod
    def none(cls, reason: NoEntryReason, bar_index: Optional[int] = None) -> "EntryDecision":
        """Create a no-action decision."""
        return cls(action=EntryAction.NONE, reason=reason, bar_index=bar_index)
