"""Positions: an entrance order paired with an optional exit order."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from techan.order import Order, OrderSide


@dataclass
class Position:
    """A pair of orders: one that opens the position and one that closes it."""

    entrance_order: Optional[Order] = None
    exit_order: Optional[Order] = None

    def enter(self, order: Order) -> None:
        """Set the entrance order."""
        self.entrance_order = order

    def exit(self, order: Order) -> None:
        """Set the exit order."""
        self.exit_order = order

    def is_long(self) -> bool:
        """True if the entrance order is a buy."""
        return self.entrance_order is not None and self.entrance_order.side is OrderSide.BUY

    def is_short(self) -> bool:
        """True if the entrance order is a sell."""
        return self.entrance_order is not None and self.entrance_order.side is OrderSide.SELL

    def is_open(self) -> bool:
        """True if entered but not yet exited."""
        return self.entrance_order is not None and self.exit_order is None

    def is_closed(self) -> bool:
        """True if both entered and exited."""
        return self.entrance_order is not None and self.exit_order is not None

    def is_new(self) -> bool:
        """True if neither entered nor exited."""
        return self.entrance_order is None and self.exit_order is None

    def cost_basis(self) -> Decimal:
        """Amount times price of the entrance order, or zero."""
        if self.entrance_order is None:
            return Decimal(0)
        return self.entrance_order.amount * self.entrance_order.price

    def exit_value(self) -> Decimal:
        """Amount times price of the exit order once closed, or zero."""
        if not self.is_closed():
            return Decimal(0)
        return self.exit_order.amount * self.exit_order.price