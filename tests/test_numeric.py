from decimal import Decimal

import pytest

from techan.numeric import decimal_string, format_decimal, int_abs, int_pow, to_decimal


def test_pow():
    assert int_pow(4, 5) == 1024


def test_pow_with_zero_exponent_is_one():
    assert int_pow(7, 0) == 1


def test_pow_with_negative_exponent_is_one():
    assert int_pow(7, -3) == 1


def test_abs_positive():
    assert int_abs(100) == 100


def test_abs_negative():
    assert int_abs(-100) == 100


def test_to_decimal_from_float_uses_shortest_repr():
    assert to_decimal(1.25) == Decimal("1.25")
    assert str(to_decimal(0.1)) == "0.1"


def test_to_decimal_from_string_and_int():
    assert to_decimal("0.5") == Decimal("0.5")
    assert to_decimal(3) == Decimal(3)


def test_to_decimal_keeps_decimal():
    value = Decimal("1.2080")
    assert to_decimal(value) is value


def test_to_decimal_rejects_garbage():
    with pytest.raises(ValueError):
        to_decimal("abc")


def test_to_decimal_rejects_bool():
    with pytest.raises(TypeError):
        to_decimal(True)


def test_format_decimal_rounds_to_precision():
    assert format_decimal(Decimal("1.2080"), 3) == "1.208"


def test_format_decimal_pads_zeros():
    assert format_decimal(Decimal("2"), 2) == "2.00"
    assert format_decimal("12", 2) == "12.00"


def test_format_decimal_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_decimal(Decimal("1"), -1)


def test_decimal_string_zero():
    assert decimal_string(Decimal("0")) == "0"
    assert decimal_string(Decimal("-0.00")) == "0"


def test_decimal_string_drops_trailing_zeros():
    assert decimal_string(Decimal("1.2500")) == "1.25"
    assert decimal_string(Decimal("100")) == "100"


def test_decimal_string_round_trips():
    for text in ["1", "2", "-1", "0.25", "1.25", "13"]:
        assert decimal_string(to_decimal(text)) == text