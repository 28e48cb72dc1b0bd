"""Orders: single buy or sell executions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from techan.numeric import to_decimal

EPOCH_ZERO = datetime(1, 1, 1, tzinfo=timezone.utc)


class OrderSide(Enum):
    """Side of an order."""

    BUY = 0
    SELL = 1


@dataclass(frozen=True)
class Order:
    """A trade execution with its associated metadata.

    Naive execution times are taken as local time and made timezone-aware,
    so that all orders can be compared with one another.
    """

    side: OrderSide = OrderSide.BUY
    security: str = ""
    price: Decimal = field(default_factory=Decimal)
    amount: Decimal = field(default_factory=Decimal)
    execution_time: datetime = EPOCH_ZERO

    def __post_init__(self) -> None:
        for name in ("price", "amount"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        if self.execution_time.tzinfo is None:
            object.__setattr__(self, "execution_time", self.execution_time.astimezone())