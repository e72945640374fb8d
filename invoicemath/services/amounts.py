"""Line-item math for invoices and proposals.

Derived values are never stored; callers pass the raw line items and rate
configuration and get every money field recomputed, each rounded half-up to
two places exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional

from .exceptions import InvalidAmountError
from .money import HUNDRED, ZERO, money2, non_negative, to_decimal


class DiscountType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


@dataclass(frozen=True)
class LineItem:
    description: str
    quantity: object
    unit_price: object


@dataclass(frozen=True)
class DocumentAmounts:
    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    balance_due: Optional[Decimal] = None

    def as_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "discount_amount": self.discount_amount,
            "taxable_base": self.taxable_base,
            "tax_amount": self.tax_amount,
            "total_amount": self.total_amount,
            "balance_due": self.balance_due,
        }


def _line_values(item: LineItem, field: str) -> tuple[Decimal, Decimal]:
    quantity = to_decimal(item.quantity, f"{field}.quantity")
    if quantity <= 0:
        raise InvalidAmountError(f"{field}.quantity", "quantity must be positive")
    unit_price = non_negative(item.unit_price, f"{field}.unit_price")
    return quantity, unit_price


def line_total(item: LineItem, field: str = "line_item") -> Decimal:
    """Return ``quantity * unit_price`` rounded half-up to two places."""
    quantity, unit_price = _line_values(item, field)
    return money2(quantity * unit_price, field)


def _discount_type(value) -> DiscountType:
    try:
        return DiscountType(value)
    except ValueError:
        raise InvalidAmountError(
            "discount_type", f"unknown discount type {value!r}"
        ) from None


def compute(
    line_items: Iterable[LineItem],
    discount=0,
    discount_type=DiscountType.FIXED,
    tax_rate_percent=0,
    amount_paid=None,
) -> DocumentAmounts:
    """Derive subtotal, discount, tax, total and balance due.

    ``amount_paid`` is only meaningful for invoices; leaving it as ``None``
    marks the document as a proposal and ``balance_due`` stays ``None``.

    The subtotal sums the unrounded line products and rounds once. Each
    later field is computed from the rounded field before it, so
    ``taxable_base + tax_amount == total_amount`` holds to the paisa.
    """
    raw_subtotal = ZERO
    for index, item in enumerate(line_items):
        quantity, unit_price = _line_values(item, f"line_items[{index}]")
        raw_subtotal += quantity * unit_price

    discount_value = non_negative(discount, "discount")
    kind = _discount_type(discount_type)
    tax_rate = non_negative(tax_rate_percent, "tax_rate_percent")
    paid = None if amount_paid is None else non_negative(amount_paid, "amount_paid")

    subtotal = money2(raw_subtotal, "line_items")

    if kind is DiscountType.PERCENTAGE:
        raw_discount = subtotal * discount_value / HUNDRED
    else:
        raw_discount = discount_value
    discount_amount = min(money2(raw_discount, "discount"), subtotal)

    taxable_base = subtotal - discount_amount
    tax_amount = money2(taxable_base * tax_rate / HUNDRED, "tax_rate_percent")
    total_amount = taxable_base + tax_amount

    balance_due = None
    if paid is not None:
        balance_due = money2(max(ZERO, total_amount - paid), "amount_paid")

    return DocumentAmounts(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_base=taxable_base,
        tax_amount=tax_amount,
        total_amount=total_amount,
        balance_due=balance_due,
    )
