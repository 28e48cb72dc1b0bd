"""Indicators: values derived from a time series at a given index."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from techan.numeric import Number, to_decimal
from techan.timeseries import TimeSeries


class Indicator(ABC):
    """Something that yields a decimal value for each index of a series."""

    @abstractmethod
    def calculate(self, index: int) -> Decimal:
        """Value of the indicator at ``index``."""


@dataclass(frozen=True)
class _CandleFieldIndicator(Indicator, ABC):
    """Base for indicators that read one attribute of the candle at each index."""

    series: TimeSeries


class VolumeIndicator(_CandleFieldIndicator):
    """Volume of the candle at each index."""

    def calculate(self, index: int) -> Decimal:
        return self.series.get_candle(index).volume


class ClosePriceIndicator(_CandleFieldIndicator):
    """Close price of the candle at each index."""

    def calculate(self, index: int) -> Decimal:
        return self.series.get_candle(index).close_price


class HighPriceIndicator(_CandleFieldIndicator):
    """High price of the candle at each index."""

    def calculate(self, index: int) -> Decimal:
        return self.series.get_candle(index).max_price


class LowPriceIndicator(_CandleFieldIndicator):
    """Low price of the candle at each index."""

    def calculate(self, index: int) -> Decimal:
        return self.series.get_candle(index).min_price


class OpenPriceIndicator(_CandleFieldIndicator):
    """Open price of the candle at each index."""

    def calculate(self, index: int) -> Decimal:
        return self.series.get_candle(index).open_price


@dataclass(frozen=True)
class TypicalPriceIndicator(Indicator):
    """Average of the high, low and close prices of the candle at each index."""

    series: TimeSeries

    def calculate(self, index: int) -> Decimal:
        candle = self.series.get_candle(index)
        return (candle.max_price + candle.min_price + candle.close_price) / Decimal(3)


@dataclass(frozen=True)
class ConstantIndicator(Indicator):
    """The same value at every index; handy as a threshold."""

    constant: Number

    def calculate(self, index: int) -> Decimal:
        return to_decimal(self.constant)


class FixedIndicator(Indicator):
    """A fixed list of values, looked up by index."""

    def __init__(self, *values: Number) -> None:
        self.values: Tuple[Decimal, ...] = tuple(to_decimal(value) for value in values)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"FixedIndicator{self.values!r}"

    def calculate(self, index: int) -> Decimal:
        if index < 0:
            raise IndexError(f"index out of range: {index}")
        return self.values[index]


@dataclass(frozen=True)
class DerivativeIndicator(Indicator):
    """Difference between the value at an index and the value just before it.

    The derivative at index 0 is always zero.
    """

    indicator: Indicator

    def calculate(self, index: int) -> Decimal:
        if index == 0:
            return Decimal(0)
        return self.indicator.calculate(index) - self.indicator.calculate(index - 1)


@dataclass(frozen=True)
class DifferenceIndicator(Indicator):
    """Minuend minus subtrahend at each index."""

    minuend: Indicator
    subtrahend: Indicator

    def calculate(self, index: int) -> Decimal:
        return self.minuend.calculate(index) - self.subtrahend.calculate(index)