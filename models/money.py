"""
models/money.py
---------------
Conversions between dollar amounts and the integer cents the store keeps.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from errors import ValidationError

Number = Union[int, float, Decimal, str]


def dollars_to_cents(amount: Number) -> int:
    """
    Convert a dollar amount to whole cents, rounding half-up (e.g. 19.995 -> 2000).

    Raises:
        ValidationError: If the amount is not a finite number.
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Not a dollar amount: {amount!r}")
    try:
        # str() first so floats like 0.1 are taken at face value
        dollars = Decimal(str(amount).strip())
        cents = (dollars * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP) if dollars.is_finite() else None
    except InvalidOperation as e:
        raise ValidationError(f"Not a dollar amount: {amount!r}") from e
    if cents is None:
        raise ValidationError(f"Not a dollar amount: {amount!r}")
    return int(cents)


def cents_to_dollars(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))
