from datetime import datetime, timedelta, timezone
from decimal import Decimal

from techan.candle import Candle
from techan.timeperiod import TimePeriod


def _candle():
    now = datetime.now(timezone.utc)
    return Candle(TimePeriod(now, now + timedelta(minutes=1)))


def test_add_trade():
    candle = _candle()
    candle.add_trade(Decimal(1), Decimal(2))  # open
    candle.add_trade(Decimal(1), Decimal(5))  # high
    candle.add_trade(Decimal(1), Decimal(1))  # low
    candle.add_trade(Decimal(1), Decimal(3))  # no difference
    candle.add_trade(Decimal(1), Decimal(3))  # close

    assert candle.open_price == 2
    assert candle.max_price == 5
    assert candle.min_price == 1
    assert candle.close_price == 3
    assert candle.volume == 5
    assert candle.trade_count == 5


def test_add_trade_accepts_plain_numbers():
    candle = _candle()
    candle.add_trade(1, "2.5")
    assert candle.close_price == Decimal("2.5")
    assert candle.volume == Decimal(1)


def test_string():
    candle = _candle()
    candle.close_price = Decimal("1")
    candle.open_price = Decimal("2")
    candle.max_price = Decimal("3")
    candle.min_price = Decimal("0")
    candle.volume = Decimal("10")

    expected = (
        f"Time:\t{candle.period}\n"
        "Open:\t2.00\n"
        "Close:\t1.00\n"
        "High:\t3.00\n"
        "Low:\t0.00\n"
        "Volume:\t10.00"
    )
    assert str(candle) == expected