"""Analyses: summary figures computed from a trading record."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import TextIO

from techan.numeric import Number, decimal_string, to_decimal
from techan.order import Order, OrderSide
from techan.position import Position
from techan.timeseries import TimeSeries
from techan.tradingrecord import TradingRecord

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _ratio(numerator: float, denominator: float) -> float:
    """Float division that yields infinity or NaN on a zero denominator."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _rfc822_utc(moment: datetime) -> str:
    utc = moment.astimezone(timezone.utc)
    return f"{utc.day:02d} {_MONTHS[utc.month - 1]} {utc.year % 100:02d} {utc.hour:02d}:{utc.minute:02d} UTC"


class Analysis(ABC):
    """A measure of a trading record's performance."""

    @abstractmethod
    def analyze(self, record: TradingRecord) -> float:
        """The measure for ``record``."""


@dataclass(frozen=True)
class TotalProfitAnalysis(Analysis):
    """Total profit over all closed trades, long and short."""

    def analyze(self, record: TradingRecord) -> float:
        total = Decimal(0)
        for trade in record.trades:
            if not trade.is_closed():
                continue
            change = trade.exit_value() - trade.cost_basis()
            if trade.is_long():
                total += change
            elif trade.is_short():
                total -= change
        return float(total)


@dataclass(frozen=True)
class PercentGainAnalysis(Analysis):
    """Last exit value relative to the first cost basis, minus one."""

    def analyze(self, record: TradingRecord) -> float:
        if record.trades and record.trades[0].is_closed():
            first, last = record.trades[0], record.trades[-1]
            return float(last.exit_value() / first.cost_basis() - 1)
        return 0.0


@dataclass(frozen=True)
class NumTradesAnalysis(Analysis):
    """Number of trades executed."""

    def analyze(self, record: TradingRecord) -> float:
        return float(len(record.trades))


@dataclass(frozen=True)
class LogTradesAnalysis(Analysis):
    """Writes every closed trade to ``writer``; always returns zero."""

    writer: TextIO

    def _log(self, trade: Position) -> None:
        entry, exit_ = trade.entrance_order, trade.exit_order
        print(
            f"{_rfc822_utc(entry.execution_time)} - enter with buy {entry.security} "
            f"({decimal_string(entry.amount)} @ ${decimal_string(entry.price)})",
            file=self.writer,
        )
        print(
            f"{_rfc822_utc(exit_.execution_time)} - exit with sell {exit_.security} "
            f"({decimal_string(exit_.amount)} @ ${decimal_string(exit_.price)})",
            file=self.writer,
        )
        profit = trade.exit_value() - trade.cost_basis()
        print(f"Profit: ${decimal_string(profit)}", file=self.writer)

    def analyze(self, record: TradingRecord) -> float:
        for trade in record.trades:
            if trade.is_closed():
                self._log(trade)
        return 0.0


@dataclass(frozen=True)
class PeriodProfitAnalysis(Analysis):
    """Total profit divided by the number of whole ``period`` spans traded."""

    period: timedelta

    def analyze(self, record: TradingRecord) -> float:
        total = TotalProfitAnalysis().analyze(record)
        elapsed = (
            record.trades[-1].exit_order.execution_time
            - record.trades[0].entrance_order.execution_time
        )
        unit = timedelta(microseconds=1)
        elapsed_us, period_us = elapsed // unit, self.period // unit
        periods = abs(elapsed_us) // abs(period_us)
        if (elapsed_us < 0) != (period_us < 0):
            periods = -periods
        return _ratio(total, float(periods))


@dataclass(frozen=True)
class ProfitableTradesAnalysis(Analysis):
    """Number of trades whose exit value exceeds their cost."""

    def analyze(self, record: TradingRecord) -> float:
        return float(
            sum(
                1
                for trade in record.trades
                if trade.exit_order.amount * trade.exit_order.price
                > trade.entrance_order.amount * trade.entrance_order.price
            )
        )


@dataclass(frozen=True)
class AverageProfitAnalysis(Analysis):
    """Total profit divided by the number of trades."""

    def analyze(self, record: TradingRecord) -> float:
        return _ratio(TotalProfitAnalysis().analyze(record), float(len(record.trades)))


@dataclass(frozen=True)
class BuyAndHoldAnalysis(Analysis):
    """Profit from buying at the first close and selling at the last close.

    Useful as a baseline for a strategy's results; zero if nothing was traded.
    """

    time_series: TimeSeries
    starting_money: Number

    def analyze(self, record: TradingRecord) -> float:
        if not record.trades:
            return 0.0
        first = self.time_series.first_candle().close_price
        last = self.time_series.last_candle().close_price
        amount = to_decimal(self.starting_money) / first
        position = Position(Order(side=OrderSide.BUY, amount=amount, price=first))
        position.exit(Order(side=OrderSide.SELL, amount=amount, price=last))
        return float(position.exit_value() - position.cost_basis())