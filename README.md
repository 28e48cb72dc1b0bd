# techan

A small technical-analysis toolkit for building and back-testing trading
strategies on price data. Prices, amounts and indicator values are
`decimal.Decimal`; the analysis classes report their results as `float`.

## What it gives you

- **Market data** (`techan.candle`, `techan.timeseries`, `techan.timeperiod`):
  `Candle` holds open, close, high and low prices, volume and a trade count for
  one `TimePeriod`; `TimeSeries` keeps candles in chronological order.
- **Indicators**, each with a `calculate(index)` method returning a `Decimal`:
  - `techan.indicators`: `ClosePriceIndicator`, `OpenPriceIndicator`,
    `HighPriceIndicator`, `LowPriceIndicator`, `VolumeIndicator`,
    `TypicalPriceIndicator`, `ConstantIndicator`, `FixedIndicator`,
    `DerivativeIndicator`, `DifferenceIndicator`.
  - `techan.averages`: `SimpleMovingAverage`, `EMAIndicator` (results cached),
    `macd_indicator`, `macd_histogram_indicator`, `MeanDeviationIndicator`,
    `CCIIndicator`, `VarianceIndicator`, `StandardDeviationIndicator`.
  - `techan.gains`: `CumulativeGainsIndicator`, `CumulativeLossesIndicator`,
    `AverageGainsIndicator`, `AverageLossesIndicator`, `PercentChangeIndicator`,
    `RelativeStrengthIndicator`, `RelativeStrengthIndexIndicator`.
  - `techan.vigor`: `RelativeVigorIndexIndicator`, `RelativeVigorSignalLine`.
- **Rules** (`techan.rules`), each with `is_satisfied(index, record)`:
  `AndRule`, `OrRule`, `OverIndicatorRule`, `UnderIndicatorRule`,
  `CrossUpIndicatorRule`, `CrossDownIndicatorRule`, `IncreaseRule`,
  `DecreaseRule`, `PercentChangeRule`, `PositionNewRule`, `PositionOpenRule`,
  `StopLossRule`. Rules can also be combined with `&` and `|`.
- **Strategies** (`techan.strategy`): `RuleStrategy` combines an entry rule, an
  exit rule and an unstable period.
- **Orders and records** (`techan.order`, `techan.position`,
  `techan.tradingrecord`): `Order` with an `OrderSide`, `Position` and
  `TradingRecord`.
- **Analysis** (`techan.analysis`): `TotalProfitAnalysis`,
  `PercentGainAnalysis`, `NumTradesAnalysis`, `ProfitableTradesAnalysis`,
  `AverageProfitAnalysis`, `PeriodProfitAnalysis`, `BuyAndHoldAnalysis` and
  `LogTradesAnalysis`.
- **Helpers** (`techan.numeric`): `to_decimal`, `format_decimal`,
  `decimal_string`, `int_pow`, `int_abs`.

## Installation

```
pip install techan
```

No third-party libraries are needed. Python 3.10 or newer.

## A quick look

Build a series of daily candles and compute an exponential moving average of
the close prices:

```python
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from techan.averages import EMAIndicator
from techan.candle import Candle
from techan.indicators import ClosePriceIndicator
from techan.timeperiod import TimePeriod
from techan.timeseries import TimeSeries

series = TimeSeries()
start = datetime(2024, 1, 1, tzinfo=timezone.utc)
for day, close in enumerate(["10", "11", "12", "11", "13", "14"]):
    candle = Candle(TimePeriod.spanning(start + timedelta(days=day), timedelta(days=1)))
    candle.add_trade(Decimal("1"), Decimal(close))
    series.add_candle(candle)

ema = EMAIndicator(ClosePriceIndicator(series), 3)
print(ema.calculate(series.last_index()))
```

`TimeSeries.add_candle` only accepts a candle whose period starts at or after
the end of the last one; it returns `False` for an out-of-order candle and
raises `ValueError` for `None`.

`Candle` fields accept ints, floats, numeric strings or `Decimal`s; floats are
converted through their shortest representation.

## Rules and strategies

```python
from techan.indicators import ConstantIndicator
from techan.rules import CrossDownIndicatorRule, CrossUpIndicatorRule
from techan.rules import PositionNewRule, PositionOpenRule
from techan.strategy import RuleStrategy
from techan.tradingrecord import TradingRecord

entry = CrossUpIndicatorRule(ConstantIndicator(12), ema) & PositionNewRule()
exit_ = CrossDownIndicatorRule(ema, ConstantIndicator(11)) & PositionOpenRule()
strategy = RuleStrategy(entry, exit_, 2)

record = TradingRecord()
for index in range(series.last_index() + 1):
    if strategy.should_enter(index, record):
        ...  # build an Order and pass it to record.operate
    elif strategy.should_exit(index, record):
        ...  # build an Order and pass it to record.operate
```

An index at or below the unstable period never triggers entry or exit.
`should_enter` only considers entering when the record holds no position, and
`should_exit` only when a position is open. A `RuleStrategy` without an entry
or exit rule raises `ValueError` when asked.

## Measuring results

Feed `Order`s (side, security, price, amount and execution time) to
`TradingRecord.operate`. When no position is held the order opens one (a buy
opens a long position, a sell a short one); when a position is open the order
closes it and it is appended to `record.trades`. Orders executed before the
open position's entrance, or before the exit of the last closed trade, are
ignored. Naive execution times are taken as local time.

```python
from techan.analysis import PercentGainAnalysis, TotalProfitAnalysis

print(TotalProfitAnalysis().analyze(record))
print(PercentGainAnalysis().analyze(record))
```

`PeriodProfitAnalysis(period)` takes a `timedelta`; `BuyAndHoldAnalysis`
takes a `TimeSeries` and the starting money; `LogTradesAnalysis(writer)`
writes three lines per closed trade to any text stream and returns `0.0`.

## Time periods

`techan.timeperiod.parse` reads a range written as `MM/DD/YYYY:MM/DD/YYYY` or
`MM/DD/YYYYTHH:MM:SS:MM/DD/YYYYTHH:MM:SS`; leaving out the end means "until
now". Parsed times are in UTC. A malformed range raises
`TimePeriodParseError`, a subclass of `ValueError`.

## Examples

`techan.examples.basic_ema()` and `techan.examples.strategy_example()` show
the smallest working setups for an indicator and a strategy.

## What it does not do

This is a library only. It does not fetch market data, place orders with a
broker or exchange, store anything, or provide a command-line tool; candles
and orders are built and fed in by your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```