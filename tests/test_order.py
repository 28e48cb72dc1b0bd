import dataclasses
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from techan.order import Order, OrderSide


def test_numbers_become_decimals():
    order = Order(side=OrderSide.SELL, price=2.5, amount="3")
    assert order.price == Decimal("2.5")
    assert order.amount == Decimal("3")
    assert order.side is OrderSide.SELL


def test_defaults():
    order = Order()
    assert order.side is OrderSide.BUY
    assert order.security == ""
    assert order.price == Decimal(0)
    assert order.amount == Decimal(0)


def test_naive_time_becomes_aware_same_instant():
    naive = datetime(2020, 5, 17, 12, 30)
    order = Order(execution_time=naive)
    assert order.execution_time.tzinfo is not None
    assert order.execution_time == naive.astimezone()


def test_aware_time_kept():
    when = datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert Order(execution_time=when).execution_time == when


def test_default_time_precedes_real_times():
    now = datetime.now(timezone.utc)
    assert Order().execution_time < Order(execution_time=now).execution_time


def test_order_is_immutable():
    order = Order()
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.price = Decimal(1)


def test_invalid_price_raises():
    with pytest.raises(ValueError):
        Order(price="not a number")