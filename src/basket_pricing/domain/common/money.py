from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Money = Decimal
MoneyLike = Union[Decimal, int, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_money(value: MoneyLike) -> Decimal:
    """Convert a price, percentage or amount to an exact Decimal.

    Floats are rejected: ``Decimal(0.65)`` carries the binary representation
    error into every discount computed from it.
    """
    if isinstance(value, float):
        raise TypeError(f"float {value!r} is not an exact amount; pass a str or Decimal")
    if isinstance(value, Decimal):
        return value
    return Decimal(value)


def percent_of(amount: Decimal, percent: Decimal) -> Decimal:
    return amount * percent / HUNDRED


def quantize_money(amount: Decimal, places: int = 2) -> Decimal:
    return amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
