"""Worked examples of building indicators and strategies."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from techan.averages import EMAIndicator
from techan.candle import Candle
from techan.indicators import ClosePriceIndicator, ConstantIndicator, Indicator
from techan.rules import (
    CrossDownIndicatorRule,
    CrossUpIndicatorRule,
    PositionNewRule,
    PositionOpenRule,
)
from techan.strategy import RuleStrategy
from techan.timeperiod import TimePeriod
from techan.timeseries import TimeSeries
from techan.tradingrecord import TradingRecord

# Timestamp, open, close, high, low, volume; normally fetched from an exchange.
_DATASET = [
    ("1234567", "1", "2", "3", "5", "6"),
]


def basic_ema() -> Indicator:
    """An exponential moving average (window 10) of a series' close prices."""
    series = TimeSeries()
    for timestamp, open_, close, high, low, _volume in _DATASET:
        start = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
        candle = Candle(
            TimePeriod.spanning(start, timedelta(hours=24)),
            open_price=open_,
            close_price=close,
            max_price=high,
            min_price=low,
        )
        series.add_candle(candle)

    return EMAIndicator(ClosePriceIndicator(series), 10)


def strategy_example() -> bool:
    """Build a simple crossing strategy and ask whether to enter at index 0.

    A position is opened when the EMA rises above 30 with nothing held, and
    closed when it falls below 10 with a position open.
    """
    indicator = basic_ema()
    record = TradingRecord()

    entry_constant = ConstantIndicator(30)
    exit_constant = ConstantIndicator(10)

    entry_rule = CrossUpIndicatorRule(entry_constant, indicator) & PositionNewRule()
    exit_rule = CrossDownIndicatorRule(indicator, exit_constant) & PositionOpenRule()

    strategy = RuleStrategy(
        entry_rule=entry_rule,
        exit_rule=exit_rule,
        unstable_period=10,
    )
    return strategy.should_enter(0, record)