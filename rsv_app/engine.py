"""
Main evaluation engine coordinator.

Host-facing entry point invoked once per bar close. Reads the current
position from the execution sink, runs the signal evaluator and hands any
entry decision to the sink as an order bracket.
"""

from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import StrategyConfig
from .config.loader import ConfigLoader
from .data.instrument import Instrument
from .data.series import IndicatorSeriesStore
from .errors import ExecutionError, TemporalDataError
from .execution.orders import BaseExecutionSink, InMemoryExecutionSink, OrderBracket
from .signals.evaluator import SignalEvaluator
from .signals.models import (
    BarContext,
    EntryAction,
    EntryDecision,
    IndicatorSnapshot,
    NoEntryReason,
)

logger = structlog.get_logger(__name__)


class SignalEvaluationEngine:
    """
    Coordinator for the RSI / Stochastics / VWAP entry strategy.

    Manages the per-bar pipeline:
    Bar close → Snapshot → Evaluator → Decision → Order bracket
    """

    def __init__(
        self,
        config: StrategyConfig,
        instrument: Optional[Instrument] = None,
        sink: Optional[BaseExecutionSink] = None
    ) -> None:
        """
        Initialize the engine.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.logger = logger
        self.config = config
        self.evaluator = SignalEvaluator(config, instrument)
        self.instrument = self.evaluator.instrument
        self.sink = sink or InMemoryExecutionSink()

        self.last_bar_index: Optional[int] = None
        self.bars_processed = 0
        self.decision_counts = {action: 0 for action in EntryAction}

        self.logger.info(
            "Signal evaluation engine initialized",
            instrument=self.instrument.symbol,
            tick_size=self.instrument.tick_size,
            lookback_bars=config.strategy.lookback_bars,
            warmup_bars=config.warmup.min_bars
        )

    @classmethod
    def create(
        cls,
        instrument_id: str,
        overrides: Optional[dict[str, Any]] = None,
        config_dir: Optional[Path] = None,
        sink: Optional[BaseExecutionSink] = None
    ) -> "SignalEvaluationEngine":
        """Build an engine from defaults, instrument YAML and overrides."""
        loader = ConfigLoader.create(config_dir)
        config = loader.build_config(instrument_id, overrides)
        instrument = Instrument.from_params(instrument_id, config.instrument)
        return cls(config, instrument, sink)

    def new_series_store(self) -> IndicatorSeriesStore:
        """Create an indicator store sized for this configuration."""
        return IndicatorSeriesStore(config=self.config.datastore)

    def on_bar_close(self, bar: BarContext, snapshot: IndicatorSnapshot) -> EntryDecision:
        """
        Evaluate a closed bar and submit any resulting entry.

        Args:
            bar: Closed bar
            snapshot: Indicator values at the bar close

        Returns:
            The decision for this bar

        Raises:
            ExecutionError: If the sink rejects an entry bracket
        """
        try:
            self._check_bar_sequence(bar)
            position = self.sink.position_state()
            decision = self.evaluator.evaluate(bar, snapshot, position)

        except TemporalDataError as e:
            self.logger.warning(
                "Out-of-sequence bar skipped",
                error=str(e),
                bar_index=e.bar_index,
                last_bar_index=e.last_bar_index
            )
            return EntryDecision.none(NoEntryReason.NOT_READY, bar.bar_index)

        except Exception as e:
            self.logger.error(
                "Unexpected error during bar evaluation",
                error=str(e),
                error_type=type(e).__name__,
                bar_index=bar.bar_index
            )
            decision = EntryDecision.none(NoEntryReason.NOT_READY, bar.bar_index)

        self.last_bar_index = bar.bar_index
        self.bars_processed += 1
        self.decision_counts[decision.action] += 1

        if decision.is_entry:
            self._submit(decision)

        return decision

    def on_bar_close_from_store(self, bar: BarContext, store: IndicatorSeriesStore) -> EntryDecision:
        """Evaluate a closed bar using the latest values in an indicator store."""
        return self.on_bar_close(bar, store.snapshot())

    def _check_bar_sequence(self, bar: BarContext) -> None:
        if self.last_bar_index is not None and bar.bar_index <= self.last_bar_index:
            raise TemporalDataError(
                f"Bar index must increase: got {bar.bar_index} after {self.last_bar_index}",
                bar_index=bar.bar_index,
                last_bar_index=self.last_bar_index,
            )

    def _submit(self, decision: EntryDecision) -> None:
        bracket = OrderBracket.from_decision(decision)
        try:
            self.sink.submit(bracket)
        except ExecutionError as e:
            self.logger.error(
                "Execution sink rejected entry",
                label=bracket.label,
                bar_index=bracket.bar_index,
                error=str(e)
            )
            raise

        self.logger.info(
            "Submitted entry bracket",
            label=bracket.label,
            bar_index=bracket.bar_index,
            contracts=bracket.entry.quantity,
            stop_price=bracket.stop_loss.price,
            target_price=bracket.profit_target.price
        )

    def get_runtime_stats(self) -> dict[str, Any]:
        """Get runtime statistics."""
        return {
            'bars_processed': self.bars_processed,
            'last_bar_index': self.last_bar_index,
            'long_entries': self.decision_counts[EntryAction.ENTER_LONG],
            'short_entries': self.decision_counts[EntryAction.ENTER_SHORT],
            'no_action': self.decision_counts[EntryAction.NONE],
        }
