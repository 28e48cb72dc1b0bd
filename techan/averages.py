"""Moving averages and the dispersion indicators built on them."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property
from typing import Dict, Iterable

from techan.indicators import (
    ClosePriceIndicator,
    DifferenceIndicator,
    Indicator,
    TypicalPriceIndicator,
)
from techan.numeric import to_decimal
from techan.timeseries import TimeSeries

_CCI_CONSTANT = Decimal("0.015")


def _total(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal(0))


@dataclass(frozen=True)
class SimpleMovingAverage(Indicator):
    """Mean of the current value and the preceding values within ``window``."""

    indicator: Indicator
    window: int

    def calculate(self, index: int) -> Decimal:
        start = max(0, index - self.window + 1)
        total = _total(self.indicator.calculate(i) for i in range(start, index + 1))
        return total / Decimal(min(self.window, index + 1))


class EMAIndicator(Indicator):
    """Exponential moving average, weighting recent values more heavily.

    Before a full window is available the simple moving average is used.
    Results are cached, so repeated and sequential lookups are cheap.
    """

    def __init__(self, indicator: Indicator, window: int) -> None:
        self.indicator = indicator
        self.window = window
        self._sma = SimpleMovingAverage(indicator, window)
        self._multiplier = to_decimal(2.0 / float(window + 1))
        self._cache: Dict[int, Decimal] = {}

    def __repr__(self) -> str:
        return f"EMAIndicator({self.indicator!r}, {self.window})"

    def calculate(self, index: int) -> Decimal:
        if index == 0:
            return self.indicator.calculate(0)
        if index + 1 < self.window:
            return self._sma.calculate(index)
        cached = self._cache.get(index)
        if cached is not None:
            return cached

        start = index - 1
        while start > 0 and start + 1 >= self.window and start not in self._cache:
            start -= 1

        previous = self.calculate(start)
        for i in range(start + 1, index + 1):
            previous = (self.indicator.calculate(i) - previous) * self._multiplier + previous
            self._cache[i] = previous
        return previous


def macd_indicator(base_indicator: Indicator, short_window: int, long_window: int) -> Indicator:
    """Short-window EMA minus long-window EMA of ``base_indicator``."""
    return DifferenceIndicator(
        EMAIndicator(base_indicator, short_window),
        EMAIndicator(base_indicator, long_window),
    )


def macd_histogram_indicator(macd: Indicator, signal_window: int) -> Indicator:
    """MACD minus its own signal-line EMA."""
    return DifferenceIndicator(macd, EMAIndicator(macd, signal_window))


@dataclass(frozen=True)
class MeanDeviationIndicator(Indicator):
    """Mean absolute deviation from the moving average within ``window``."""

    indicator: Indicator
    window: int

    @cached_property
    def _average(self) -> SimpleMovingAverage:
        return SimpleMovingAverage(self.indicator, self.window)

    def calculate(self, index: int) -> Decimal:
        average = self._average.calculate(index)
        start = max(0, index - self.window + 1)
        deviations = _total(
            abs(average - self.indicator.calculate(i)) for i in range(start, index + 1)
        )
        return deviations / Decimal(min(self.window, index - start + 1))


@dataclass(frozen=True)
class CCIIndicator(Indicator):
    """Commodity channel index over ``window`` candles."""

    series: TimeSeries
    window: int

    @cached_property
    def _typical(self) -> Indicator:
        return TypicalPriceIndicator(self.series)

    @cached_property
    def _typical_sma(self) -> Indicator:
        return SimpleMovingAverage(self._typical, self.window)

    @cached_property
    def _mean_deviation(self) -> Indicator:
        return MeanDeviationIndicator(ClosePriceIndicator(self.series), self.window)

    def calculate(self, index: int) -> Decimal:
        spread = self._typical.calculate(index) - self._typical_sma.calculate(index)
        return spread / (self._mean_deviation.calculate(index) * _CCI_CONSTANT)


@dataclass(frozen=True)
class VarianceIndicator(Indicator):
    """Population variance of all values up to and including ``index``."""

    indicator: Indicator

    def calculate(self, index: int) -> Decimal:
        if index < 1:
            return Decimal(0)
        average = SimpleMovingAverage(self.indicator, index + 1).calculate(index)
        squares = _total(
            (self.indicator.calculate(i) - average) ** 2 for i in range(index + 1)
        )
        return squares / Decimal(index + 1)


@dataclass(frozen=True)
class StandardDeviationIndicator(Indicator):
    """Square root of the variance of the base indicator."""

    indicator: Indicator

    @cached_property
    def _variance(self) -> VarianceIndicator:
        return VarianceIndicator(self.indicator)

    def calculate(self, index: int) -> Decimal:
        return self._variance.calculate(index).sqrt()