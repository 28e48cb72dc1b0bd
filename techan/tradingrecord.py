"""Trading records: executed trades and the position currently held."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from techan.order import Order
from techan.position import Position


@dataclass
class TradingRecord:
    """Closed trades plus the current, possibly open, position."""

    trades: List[Position] = field(default_factory=list)
    current_position: Position = field(default_factory=Position)

    def last_trade(self) -> Optional[Position]:
        """The most recently closed trade, or None."""
        return self.trades[-1] if self.trades else None

    def operate(self, order: Order) -> None:
        """Apply an order to the current position.

        An open position is closed by the order unless it predates the
        entrance; a new position is entered unless the order predates the
        exit of the last trade. Out-of-order orders are ignored.
        """
        position = self.current_position
        if position.is_open():
            if order.execution_time < position.entrance_order.execution_time:
                return
            position.exit(order)
            self.trades.append(position)
            self.current_position = Position()
        elif position.is_new():
            last = self.last_trade()
            if last is not None and order.execution_time < last.exit_order.execution_time:
                return
            position.enter(order)