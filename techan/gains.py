"""Gains, losses and relative strength indicators."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property
from typing import ClassVar

from techan.indicators import Indicator

_ONE_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class CumulativeGainsIndicator(Indicator):
    """Sum of all upward moves of the base indicator within ``window``."""

    indicator: Indicator
    window: int

    _sign: ClassVar[int] = 1

    def calculate(self, index: int) -> Decimal:
        start = max(1, index - self.window + 1)
        total = Decimal(0)
        for i in range(start, index + 1):
            diff = self.indicator.calculate(i) - self.indicator.calculate(i - 1)
            if diff * self._sign > 0:
                total += abs(diff)
        return total


class CumulativeLossesIndicator(CumulativeGainsIndicator):
    """Sum of all downward moves of the base indicator within ``window``."""

    _sign = -1


@dataclass(frozen=True)
class PercentChangeIndicator(Indicator):
    """Fractional change of the base indicator from the previous index.

    The change at index 0 is always zero.
    """

    indicator: Indicator

    def calculate(self, index: int) -> Decimal:
        if index == 0:
            return Decimal(0)
        current = self.indicator.calculate(index)
        previous = self.indicator.calculate(index - 1)
        return current / previous - 1


@dataclass(frozen=True)
class AverageGainsIndicator(Indicator):
    """Cumulative gains within ``window`` divided by the number of values seen."""

    indicator: Indicator
    window: int

    _cumulative_type: ClassVar[type] = CumulativeGainsIndicator

    @cached_property
    def _cumulative(self) -> Indicator:
        return self._cumulative_type(self.indicator, self.window)

    def calculate(self, index: int) -> Decimal:
        return self._cumulative.calculate(index) / Decimal(min(index + 1, self.window))


class AverageLossesIndicator(AverageGainsIndicator):
    """Cumulative losses within ``window`` divided by the number of values seen."""

    _cumulative_type = CumulativeLossesIndicator


@dataclass(frozen=True)
class RelativeStrengthIndicator(Indicator):
    """Average gain divided by average loss over ``timeframe``."""

    indicator: Indicator
    timeframe: int

    @cached_property
    def _average_gain(self) -> Indicator:
        return AverageGainsIndicator(self.indicator, self.timeframe)

    @cached_property
    def _average_loss(self) -> Indicator:
        return AverageLossesIndicator(self.indicator, self.timeframe)

    def calculate(self, index: int) -> Decimal:
        return self._average_gain.calculate(index) / self._average_loss.calculate(index)


@dataclass(frozen=True)
class RelativeStrengthIndexIndicator(Indicator):
    """Relative strength index, scaled from 0 to 100; zero at index 0."""

    indicator: Indicator
    timeframe: int

    @cached_property
    def _strength(self) -> Indicator:
        return RelativeStrengthIndicator(self.indicator, self.timeframe)

    def calculate(self, index: int) -> Decimal:
        if index == 0:
            return Decimal(0)
        strength = self._strength.calculate(index)
        return _ONE_HUNDRED - _ONE_HUNDRED / (1 + strength)