"""Rules: criteria evaluated at an index against a trading record."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from techan.gains import PercentChangeIndicator
from techan.indicators import ClosePriceIndicator, Indicator
from techan.numeric import Number, to_decimal
from techan.timeseries import TimeSeries
from techan.tradingrecord import TradingRecord


class Rule(ABC):
    """A condition that may be satisfied at a given index."""

    @abstractmethod
    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        """True if the rule holds at ``index``."""

    def __and__(self, other: "Rule") -> "Rule":
        return AndRule(self, other)

    def __or__(self, other: "Rule") -> "Rule":
        return OrRule(self, other)


@dataclass(frozen=True)
class AndRule(Rule):
    """Satisfied when both rules are satisfied."""

    first: Rule
    second: Rule

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return self.first.is_satisfied(index, record) and self.second.is_satisfied(
            index, record
        )


@dataclass(frozen=True)
class OrRule(Rule):
    """Satisfied when either rule is satisfied."""

    first: Rule
    second: Rule

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return self.first.is_satisfied(index, record) or self.second.is_satisfied(
            index, record
        )


@dataclass(frozen=True)
class OverIndicatorRule(Rule):
    """Satisfied when the first indicator is greater than the second."""

    first: Indicator
    second: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return self.first.calculate(index) > self.second.calculate(index)


@dataclass(frozen=True)
class UnderIndicatorRule(Rule):
    """Satisfied when the first indicator is less than the second."""

    first: Indicator
    second: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return self.first.calculate(index) < self.second.calculate(index)


@dataclass(frozen=True)
class PercentChangeRule(Rule):
    """Satisfied when the indicator moved by more than ``percent`` (a fraction)."""

    indicator: Indicator
    percent: Number
    _change: Indicator = field(init=False, repr=False, compare=False)
    _threshold: Decimal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_change", PercentChangeIndicator(self.indicator))
        object.__setattr__(self, "_threshold", abs(to_decimal(self.percent)))

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return abs(self._change.calculate(index)) > self._threshold


def _compare(left: Decimal, right: Decimal) -> int:
    return (left > right) - (left < right)


def _crossed(upper: Indicator, lower: Indicator, direction: int, index: int) -> bool:
    if index == 0:
        return False
    current = _compare(lower.calculate(index), upper.calculate(index))
    if current not in (0, direction):
        return False
    return any(
        _compare(lower.calculate(i), upper.calculate(i)) in (0, -direction)
        for i in range(index, -1, -1)
    )


@dataclass(frozen=True)
class CrossUpIndicatorRule(Rule):
    """Satisfied when ``lower`` has crossed above ``upper``."""

    upper: Indicator
    lower: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return _crossed(self.upper, self.lower, 1, index)


@dataclass(frozen=True)
class CrossDownIndicatorRule(Rule):
    """Satisfied when ``upper`` has crossed below ``lower``."""

    upper: Indicator
    lower: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return _crossed(self.lower, self.upper, -1, index)


@dataclass(frozen=True)
class IncreaseRule(Rule):
    """Satisfied when the indicator is greater than at the previous index."""

    indicator: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        if index == 0:
            return False
        return self.indicator.calculate(index) > self.indicator.calculate(index - 1)


@dataclass(frozen=True)
class DecreaseRule(Rule):
    """Satisfied when the indicator is less than at the previous index."""

    indicator: Indicator

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        if index == 0:
            return False
        return self.indicator.calculate(index) < self.indicator.calculate(index - 1)


@dataclass(frozen=True)
class PositionNewRule(Rule):
    """Satisfied when the record's current position is new."""

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return record.current_position.is_new()


@dataclass(frozen=True)
class PositionOpenRule(Rule):
    """Satisfied when the record's current position is open."""

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        return record.current_position.is_open()


@dataclass(frozen=True)
class StopLossRule(Rule):
    """Satisfied when an open position has lost at least ``loss_tolerance``.

    The tolerance is a fraction, e.g. ``-0.05`` for a five percent loss.
    """

    series: TimeSeries
    loss_tolerance: Number
    _close: Indicator = field(init=False, repr=False, compare=False)
    _tolerance: Decimal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_close", ClosePriceIndicator(self.series))
        object.__setattr__(self, "_tolerance", to_decimal(self.loss_tolerance))

    def is_satisfied(self, index: int, record: Optional[TradingRecord]) -> bool:
        position = record.current_position
        if not position.is_open():
            return False
        loss = self._close.calculate(index) / position.cost_basis() - 1
        return loss <= self._tolerance