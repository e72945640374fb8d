"""Locale-aware money formatting with explicit prefix and grouping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.logging import get_logger
from .money import money2, to_decimal

logger = get_logger(__name__)

INDIAN_LOCALES = {"en-IN", "hi-IN"}


def _group_indian(digits: str) -> List[str]:
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)
    return groups


def _group_western(digits: str) -> List[str]:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return groups


def group_digits(digits: str, locale: str = "en-IN") -> str:
    if len(digits) <= 3:
        return digits
    if locale in INDIAN_LOCALES:
        return ",".join(_group_indian(digits))
    return ",".join(_group_western(digits))


@dataclass(frozen=True)
class CurrencyFormatter:
    """Fixed two-decimal, digit-grouped amounts behind a currency marker.

    Generated PDFs use the ASCII ``Rs.`` prefix; their default fonts lack
    the rupee sign.
    """

    prefix: str = "Rs."
    locale: str = "en-IN"

    def format(self, amount) -> str:
        value = money2(to_decimal(amount, "amount"))
        sign = ""
        if value < 0:
            logger.warning("negative_amount_formatted", amount=str(value))
            sign = "-"

        whole, _, fraction = f"{abs(value):f}".partition(".")
        body = f"{group_digits(whole, self.locale)}.{fraction}"
        if not self.prefix:
            return f"{sign}{body}"
        return f"{sign}{self.prefix} {body}"


PDF_FORMATTER = CurrencyFormatter(prefix="Rs.", locale="en-IN")
DISPLAY_FORMATTER = CurrencyFormatter(prefix="₹", locale="en-IN")

FORMATTER_TARGETS = ("pdf", "display")


def formatter_for(target: str, settings) -> CurrencyFormatter:
    """Build the formatter configured for a rendering target."""
    if target == "pdf":
        return CurrencyFormatter(prefix=settings.pdf_currency_prefix, locale=settings.locale)
    if target == "display":
        return CurrencyFormatter(prefix=settings.display_currency_prefix, locale=settings.locale)
    raise ValueError(f"Unknown formatter target: {target}")
