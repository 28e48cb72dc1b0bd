"""Relative vigor index and its signal line."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import cached_property

from techan.indicators import (
    ClosePriceIndicator,
    DifferenceIndicator,
    HighPriceIndicator,
    Indicator,
    LowPriceIndicator,
    OpenPriceIndicator,
)
from techan.timeseries import TimeSeries

_WEIGHTS = (1, 2, 2, 1)


def _weighted(indicator: Indicator, index: int) -> Decimal:
    """Symmetric 1-2-2-1 weighted average of the last four values."""
    total = sum(
        (indicator.calculate(index - back) * weight for back, weight in enumerate(_WEIGHTS)),
        Decimal(0),
    )
    return total / Decimal(sum(_WEIGHTS))


@dataclass(frozen=True)
class RelativeVigorIndexIndicator(Indicator):
    """Smoothed close-minus-open divided by smoothed high-minus-low.

    Zero for the first three indices.
    """

    series: TimeSeries

    @cached_property
    def _numerator(self) -> Indicator:
        return DifferenceIndicator(
            ClosePriceIndicator(self.series), OpenPriceIndicator(self.series)
        )

    @cached_property
    def _denominator(self) -> Indicator:
        return DifferenceIndicator(
            HighPriceIndicator(self.series), LowPriceIndicator(self.series)
        )

    def calculate(self, index: int) -> Decimal:
        if index < 3:
            return Decimal(0)
        return _weighted(self._numerator, index) / _weighted(self._denominator, index)


@dataclass(frozen=True)
class RelativeVigorSignalLine(Indicator):
    """Weighted average of the last four relative vigor index values."""

    series: TimeSeries

    @cached_property
    def _vigor(self) -> Indicator:
        return RelativeVigorIndexIndicator(self.series)

    def calculate(self, index: int) -> Decimal:
        if index < 3:
            return Decimal(0)
        return _weighted(self._vigor, index)