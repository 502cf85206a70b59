"""
Execution hand-off module.

Translates entry decisions into entry/stop/target order brackets and defines
the sink interface the host platform implements to place them.
"""
from .orders import (
    BaseExecutionSink,
    InMemoryExecutionSink,
    Order,
    OrderBracket,
    OrderSide,
    OrderType,
)

__all__ = [
    "BaseExecutionSink",
    "InMemoryExecutionSink",
    "Order",
    "OrderBracket",
    "OrderSide",
    "OrderType",
]
