"""Decimal helpers shared by the computation services."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .exceptions import InvalidAmountError

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Single inputs must stay below 10^15 rupees. Products that outgrow the
# 28-digit context are caught when quantized.
MAX_AMOUNT = Decimal("1E15")


def to_decimal(value, field: str) -> Decimal:
    """Coerce ``value`` to an exact Decimal or raise ``InvalidAmountError``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(field, "must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(field, "must be a number") from None
    else:
        raise InvalidAmountError(field, "must be a number")

    if not result.is_finite():
        raise InvalidAmountError(field, "must be a finite number")
    if abs(result) >= MAX_AMOUNT:
        raise InvalidAmountError(field, "amount out of range")
    return result


def money2(value: Decimal, field: str = "amount") -> Decimal:
    try:
        return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(field, "amount out of range") from None


def non_negative(value, field: str) -> Decimal:
    amount = to_decimal(value, field)
    if amount < 0:
        raise InvalidAmountError(field, "must not be negative")
    return amount
