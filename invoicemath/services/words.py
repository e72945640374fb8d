"""Amount-in-words rendering with Indian numbering (crore, lakh, thousand)."""

from __future__ import annotations

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

from .exceptions import InvalidAmountError
from .money import HUNDRED, non_negative

_INDIAN_SCALE = [
    (10000000, "Crore"),
    (100000, "Lakh"),
    (1000, "Thousand"),
]

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]


def group_to_words(value: int) -> str:
    """Words for ``0 <= value < 1000``; zero yields an empty string."""
    if value < 0 or value >= 1000:
        raise ValueError(f"group out of range: {value}")
    if value < 20:
        return _ONES[value]
    if value < 100:
        tens = _TENS[value // 10]
        return f"{tens} {_ONES[value % 10]}" if value % 10 else tens
    words = f"{_ONES[value // 100]} Hundred"
    if value % 100:
        words += " " + group_to_words(value % 100)
    return words


def split_amount(amount: Decimal) -> tuple[int, int]:
    """Split into whole units and hundredths, carrying a rounded-up 100."""
    whole = int(amount.to_integral_value(rounding=ROUND_DOWN))
    fraction = int(
        ((amount - whole) * HUNDRED).to_integral_value(rounding=ROUND_HALF_UP)
    )
    if fraction == 100:
        return whole + 1, 0
    return whole, fraction


def integer_to_words(value: int) -> str:
    if value == 0:
        return "Zero"

    parts = []
    remaining = value
    for divider, label in _INDIAN_SCALE:
        current, remaining = divmod(remaining, divider)
        if current >= 1000:
            raise InvalidAmountError("amount", "amount exceeds the crore scale")
        if current:
            parts.append(f"{group_to_words(current)} {label}")

    if remaining:
        parts.append(group_to_words(remaining))
    return " ".join(parts)


def to_words(amount, unit: str = "Rupees", subunit: str = "Paise") -> str:
    """Render ``amount`` the way the invoice's words line prints it.

    >>> to_words(1475.59)
    'One Thousand Four Hundred Seventy Five Rupees and Fifty Nine Paise Only'
    """
    value = non_negative(amount, "amount")
    whole, fraction = split_amount(value)

    words = f"{integer_to_words(whole)} {unit}"
    if fraction:
        words += f" and {group_to_words(fraction)} {subunit}"
    return words + " Only"
