"""Decimal helpers and small integer utilities shared across the package."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from typing import Union

Number = Union[Decimal, int, float, str]

_MIN_PRECISION = 28


def to_decimal(value: Number) -> Decimal:
    """Convert an int, float, numeric string or Decimal into a Decimal.

    Floats are converted through their shortest representation, so ``0.1``
    becomes ``Decimal("0.1")`` rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not numeric values")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal value {value!r}") from exc
    raise TypeError(f"cannot convert {type(value).__name__} to Decimal")


def format_decimal(value: Number, precision: int) -> str:
    """Render a value in fixed-point notation with ``precision`` decimal places."""
    if precision < 0:
        raise ValueError("precision cannot be negative")
    number = to_decimal(value)
    if not number.is_finite():
        raise ValueError(f"cannot format non-finite value {number}")
    with localcontext() as ctx:
        ctx.prec = max(_MIN_PRECISION, number.adjusted() + precision + 2)
        quantized = number.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_EVEN)
    if quantized == 0:
        quantized = quantized.copy_abs()
    return f"{quantized:f}"


def decimal_string(value: Number) -> str:
    """Render a value in its shortest fixed-point form, without trailing zeros."""
    number = to_decimal(value)
    if number == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(_MIN_PRECISION, len(number.as_tuple().digits))
        normalized = number.normalize()
    return f"{normalized:f}"


def int_pow(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; a non-positive exponent yields 1."""
    if exponent <= 0:
        return 1
    return base**exponent


def int_abs(value: int) -> int:
    """Return the absolute value of an integer."""
    return -value if value < 0 else value