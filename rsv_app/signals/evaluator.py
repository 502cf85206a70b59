"""
Entry decision assembly.

Runs the per-bar gates in order (warm-up, session, indicator checks, position)
and turns a qualifying long or short setup into an entry decision with
ATR-derived stop and target prices on the instrument's tick grid.
"""

from typing import Optional

from ..config.defaults import StrategyConfig
from ..config.validation import validate_or_raise
from ..data.instrument import Instrument
from ..data.validators import require_value
from ..errors import DataQualityError, InvalidIndicatorError
from ..logging.config import get_decision_logger, get_gating_logger, log_entry_decision, log_gate_decision
from ..utils.time import format_market_time
from .crossover import detect_stoch_cross
from .location import check_location
from .models import (
    BarContext,
    EntryAction,
    EntryDecision,
    IndicatorSnapshot,
    NoEntryReason,
    PositionState,
)
from .rsi import check_rsi_extremes
from .session import is_in_session

gating_logger = get_gating_logger(__name__)
decision_logger = get_decision_logger(__name__)


class SignalEvaluator:
    """
    Evaluates one closed bar at a time.

    The evaluator holds only its configuration and instrument. Every input
    that changes between bars is passed into ``evaluate``, so the same inputs
    always produce the same decision.
    """

    def __init__(self, config: StrategyConfig, instrument: Optional[Instrument] = None) -> None:
        validate_or_raise(config)
        self.config = config
        self.instrument = instrument or Instrument.from_params("DEFAULT", config.instrument)
        self.gating_logger = gating_logger
        self.decision_logger = decision_logger

    def evaluate(
        self,
        bar: BarContext,
        snapshot: IndicatorSnapshot,
        position: PositionState
    ) -> EntryDecision:
        """
        Evaluate a closed bar.

        Args:
            bar: Bar being evaluated
            snapshot: Indicator values at the bar close
            position: Current market position

        Returns:
            EntryDecision; its action is NONE unless every gate passed
        """
        index = bar.bar_index
        cfg = self.config

        # 1) Warm-up
        warmed_up = index >= cfg.warmup.min_bars
        log_gate_decision(
            self.gating_logger, "warmup", warmed_up, index,
            f"bar_index={index} min_bars={cfg.warmup.min_bars}"
        )
        if not warmed_up:
            return EntryDecision.none(NoEntryReason.WARMUP, index)

        # 2) Session
        in_session = is_in_session(bar.timestamp, cfg.session.start, cfg.session.end, cfg.session.timezone)
        log_gate_decision(
            self.gating_logger, "session", in_session, index,
            f"{format_market_time(bar.timestamp)} vs "
            f"{cfg.session.start.isoformat()}-{cfg.session.end.isoformat()}"
        )
        if not in_session:
            return EntryDecision.none(NoEntryReason.OUT_OF_SESSION, index)

        # 3) Independent indicator checks
        try:
            close = require_value("close", bar.close)
            atr = require_value("atr", snapshot.atr)
            if atr <= 0:
                raise InvalidIndicatorError("atr must be positive", indicator="atr", value=atr)
            location = check_location(snapshot.ema, snapshot.vwap, snapshot.vwap_sd)
            extremes = check_rsi_extremes(
                snapshot.rsi,
                cfg.strategy.lookback_bars,
                cfg.thresholds.rsi_oversold,
                cfg.thresholds.rsi_overbought,
            )
            cross = detect_stoch_cross(
                snapshot.stoch_k,
                cfg.thresholds.stoch_cross_up,
                cfg.thresholds.stoch_cross_down,
            )
        except DataQualityError as e:
            log_gate_decision(
                self.gating_logger, "data_ready", False, index, str(e),
                context={"error_type": type(e).__name__, **e.context}
            )
            return EntryDecision.none(NoEntryReason.NOT_READY, index)

        long_setup = location.long_ok and extremes.was_oversold and cross.cross_up
        short_setup = location.short_ok and extremes.was_overbought and cross.cross_down

        log_gate_decision(
            self.gating_logger, "setup", long_setup or short_setup, index,
            "long" if long_setup else "short" if short_setup else "no setup",
            context={
                "long_filter": location.long_ok,
                "short_filter": location.short_ok,
                "rsi_was_oversold": extremes.was_oversold,
                "rsi_was_overbought": extremes.was_overbought,
                "stoch_cross_up": cross.cross_up,
                "stoch_cross_down": cross.cross_down,
            }
        )
        if not (long_setup or short_setup):
            return EntryDecision.none(NoEntryReason.NO_SIGNAL, index)

        # 4) One position at a time
        is_flat = position == PositionState.FLAT
        log_gate_decision(self.gating_logger, "position", is_flat, index, f"position={position.value}")
        if not is_flat:
            return EntryDecision.none(NoEntryReason.IN_POSITION, index)

        # Location filters are mutually exclusive, so at most one side is set
        if long_setup:
            return self._build_entry(EntryAction.ENTER_LONG, index, close, atr)
        return self._build_entry(EntryAction.ENTER_SHORT, index, close, atr)

    def _build_entry(self, action: EntryAction, index: int, close: float, atr: float) -> EntryDecision:
        """
        Derive stop and target prices from ATR multiples.

        Each distance is rounded to the tick grid first, then the final
        ``close +/- distance`` is rounded again. For a close on the grid this
        equals the plain sum; an off-grid close is snapped to the nearest
        tick, so prices can differ from ``close - stop_distance`` by up to
        half a tick.
        """
        params = self.config.strategy
        round_to_tick = self.instrument.round_to_tick

        stop_dist = round_to_tick(params.stop_mult * atr)
        target1_dist = round_to_tick(params.target1_mult * atr)
        target2_dist = round_to_tick(params.target2_mult * atr)

        if action == EntryAction.ENTER_LONG:
            sign, label = 1, params.long_label
        else:
            sign, label = -1, params.short_label

        decision = EntryDecision(
            action=action,
            contracts=params.contracts,
            stop_price=round_to_tick(close - sign * stop_dist),
            target1_price=round_to_tick(close + sign * target1_dist),
            target2_price=round_to_tick(close + sign * target2_dist),
            label=label,
            bar_index=index,
            risk_per_contract=stop_dist * self.instrument.point_value,
        )

        log_entry_decision(
            self.decision_logger,
            action=action.value,
            bar_index=index,
            label=label,
            contracts=decision.contracts,
            close=close,
            stop_price=decision.stop_price,
            target_price=decision.target2_price,
            context={
                "atr": atr,
                "stop_distance": stop_dist,
                "target1_distance": target1_dist,
                "target2_distance": target2_dist,
                "tick_size": self.instrument.tick_size,
            }
        )
        return decision
