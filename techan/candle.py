"""Candles: market summary for one security over one time period."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from techan.numeric import Number, format_decimal, to_decimal
from techan.timeperiod import TimePeriod


@dataclass
class Candle:
    """Open, close, high, low and volume over a time period."""

    period: TimePeriod
    open_price: Decimal = field(default_factory=Decimal)
    close_price: Decimal = field(default_factory=Decimal)
    max_price: Decimal = field(default_factory=Decimal)
    min_price: Decimal = field(default_factory=Decimal)
    volume: Decimal = field(default_factory=Decimal)
    trade_count: int = 0

    def __post_init__(self) -> None:
        self.open_price = to_decimal(self.open_price)
        self.close_price = to_decimal(self.close_price)
        self.max_price = to_decimal(self.max_price)
        self.min_price = to_decimal(self.min_price)
        self.volume = to_decimal(self.volume)

    def add_trade(self, amount: Number, price: Number) -> None:
        """Record a trade, updating prices, volume and the trade count."""
        amount = to_decimal(amount)
        price = to_decimal(price)

        if not self.open_price:
            self.open_price = price
        self.close_price = price

        if not self.max_price or price > self.max_price:
            self.max_price = price
        if not self.min_price or price < self.min_price:
            self.min_price = price

        self.volume += amount
        self.trade_count += 1

    def __str__(self) -> str:
        return "\n".join(
            [
                f"Time:\t{self.period}",
                f"Open:\t{format_decimal(self.open_price, 2)}",
                f"Close:\t{format_decimal(self.close_price, 2)}",
                f"High:\t{format_decimal(self.max_price, 2)}",
                f"Low:\t{format_decimal(self.min_price, 2)}",
                f"Volume:\t{format_decimal(self.volume, 2)}",
            ]
        )