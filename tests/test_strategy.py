from decimal import Decimal

import pytest

from techan.order import Order, OrderSide
from techan.rules import Rule
from techan.strategy import RuleStrategy
from techan.tradingrecord import TradingRecord


class AlwaysSatisfied(Rule):
    def is_satisfied(self, index, record):
        return True


def _open_record():
    record = TradingRecord()
    record.operate(Order(side=OrderSide.BUY, amount=Decimal(1), price=Decimal(1)))
    return record


def _strategy():
    return RuleStrategy(AlwaysSatisfied(), AlwaysSatisfied(), 5)


def test_should_enter_false_within_unstable_period():
    assert _strategy().should_enter(0, TradingRecord()) is False


def test_should_enter_false_when_position_open():
    assert _strategy().should_enter(6, _open_record()) is False


def test_should_enter_true_when_position_new():
    assert _strategy().should_enter(6, TradingRecord()) is True


def test_should_enter_raises_without_entry_rule():
    strategy = RuleStrategy(exit_rule=AlwaysSatisfied(), unstable_period=10)
    with pytest.raises(ValueError, match="entry rule cannot be None"):
        strategy.should_enter(0, None)


def test_should_exit_false_within_unstable_period():
    assert _strategy().should_exit(0, _open_record()) is False


def test_should_exit_false_when_no_position_open():
    assert _strategy().should_exit(6, TradingRecord()) is False


def test_should_exit_true_when_position_open():
    assert _strategy().should_exit(6, _open_record()) is True


def test_should_exit_raises_without_exit_rule():
    strategy = RuleStrategy(entry_rule=AlwaysSatisfied(), unstable_period=10)
    with pytest.raises(ValueError, match="exit rule cannot be None"):
        strategy.should_exit(0, None)