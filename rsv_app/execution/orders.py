"""Order brackets and the execution sink interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

from ..signals.models import EntryDecision, PositionState

logger = structlog.get_logger(__name__)


class OrderSide(str, Enum):
    """Order side."""
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Order type."""
    MARKET = "market"
    STOP = "stop"
    LIMIT = "limit"


@dataclass(frozen=True)
class Order:
    """Single broker-facing order."""
    label: str
    side: OrderSide
    quantity: int
    order_type: OrderType
    price: Optional[float] = None     # None for market orders


@dataclass(frozen=True)
class OrderBracket:
    """Market entry with its protective stop and profit target, keyed by label."""

    label: str
    entry: Order
    stop_loss: Order
    profit_target: Order
    bar_index: Optional[int] = None

    @classmethod
    def from_decision(cls, decision: EntryDecision) -> "OrderBracket":
        """
        Build the bracket for an entry decision.

        Only the second target is attached as the profit target; the first
        target stays on the decision for the host to use.

        Raises:
            ValueError: If the decision is not an entry
        """
        if not decision.is_entry:
            raise ValueError("Cannot build an order bracket for a no-action decision")

        if decision.is_long:
            entry_side, exit_side = OrderSide.BUY, OrderSide.SELL
        else:
            entry_side, exit_side = OrderSide.SELL, OrderSide.BUY

        return cls(
            label=decision.label,
            entry=Order(decision.label, entry_side, decision.contracts, OrderType.MARKET),
            stop_loss=Order(decision.label, exit_side, decision.contracts, OrderType.STOP,
                            decision.stop_price),
            profit_target=Order(decision.label, exit_side, decision.contracts, OrderType.LIMIT,
                                decision.target2_price),
            bar_index=decision.bar_index,
        )


class BaseExecutionSink(ABC):
    """Interface the host platform implements to receive entries."""

    @abstractmethod
    def position_state(self) -> PositionState:
        """Current market position for the strategy's instrument."""
        pass

    @abstractmethod
    def submit(self, bracket: OrderBracket) -> None:
        """
        Place an entry bracket.

        Raises:
            ExecutionError: If the bracket could not be placed
        """
        pass


class InMemoryExecutionSink(BaseExecutionSink):
    """
    Sink that records brackets instead of routing them.

    The position is whatever the host last set; submitting a bracket does
    not change it since fills happen outside the decision engine.
    """

    def __init__(self, position: PositionState = PositionState.FLAT) -> None:
        self._position = position
        self.submitted: list[OrderBracket] = []
        self.logger = logger

    def position_state(self) -> PositionState:
        return self._position

    def set_position(self, position: PositionState) -> None:
        """Update the position after an external fill or exit."""
        self._position = position

    def submit(self, bracket: OrderBracket) -> None:
        self.submitted.append(bracket)
        self.logger.debug(
            "Recorded order bracket",
            label=bracket.label,
            bar_index=bracket.bar_index,
            stop_price=bracket.stop_loss.price,
            target_price=bracket.profit_target.price
        )
