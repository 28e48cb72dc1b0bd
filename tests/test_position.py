from datetime import datetime, timezone
from decimal import Decimal

import pytest

from techan.numeric import decimal_string, format_decimal
from techan.order import Order, OrderSide
from techan.position import Position


def _order(side=OrderSide.BUY, price="2", **extra):
    return Order(side=side, amount=Decimal(1), price=Decimal(price), **extra)


def test_no_orders_is_new():
    assert Position().is_new() is True


def test_new_position_is_open():
    position = Position(_order())
    assert (position.is_open(), position.is_new(), position.is_closed()) == (
        True,
        False,
        False,
    )


@pytest.mark.parametrize(
    "side, long, short",
    [(OrderSide.BUY, True, False), (OrderSide.SELL, False, True)],
)
def test_direction_follows_entrance_side(side, long, short):
    position = Position(_order(side))
    assert position.is_long() is long
    assert position.is_short() is short


def test_enter_and_exit():
    position = Position()
    entrance = _order()
    position.enter(entrance)
    assert position.is_open() is True
    assert position.entrance_order == entrance

    exit_order = _order(
        OrderSide.SELL, "4", execution_time=datetime.now(timezone.utc)
    )
    position.exit(exit_order)

    assert position.is_closed() is True
    assert position.exit_order == exit_order
    assert position.exit_order.execution_time == exit_order.execution_time


def test_cost_basis_without_entrance_is_zero():
    assert decimal_string(Position().cost_basis()) == "0"


@pytest.mark.parametrize(
    "exit_price, method, expected",
    [
        (None, "cost_basis", "2.00"),
        (None, "exit_value", "0.00"),
        ("12", "exit_value", "12.00"),
    ],
)
def test_values(exit_price, method, expected):
    position = Position()
    position.enter(_order())
    if exit_price is not None:
        position.exit(_order(OrderSide.SELL, exit_price))
    assert format_decimal(getattr(position, method)(), 2) == expected