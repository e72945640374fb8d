"""Recording payments against an invoice and deriving its status."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from .exceptions import InvalidAmountError
from .money import TWOPLACES, ZERO, money2, non_negative


class InvoiceStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "BANK_TRANSFER"
    UPI = "UPI"
    CASH = "CASH"
    CARD = "CARD"
    OTHER = "OTHER"


@dataclass(frozen=True)
class PaymentOutcome:
    amount_paid: Decimal
    balance_due: Decimal
    status: InvoiceStatus


def derive_status(
    balance_due: Decimal,
    amount_paid: Decimal,
    due_date: date,
    today: date,
    current: InvoiceStatus = InvoiceStatus.SENT,
) -> InvoiceStatus:
    """Status after money has moved; unpaid invoices keep ``current``."""
    if balance_due <= 0:
        return InvoiceStatus.PAID
    if amount_paid > 0:
        if today > due_date:
            return InvoiceStatus.OVERDUE
        return InvoiceStatus.PARTIALLY_PAID
    return current


def apply_payment(
    total_amount,
    amount_paid,
    payment_amount,
    due_date: date,
    today: date,
    current: InvoiceStatus = InvoiceStatus.SENT,
) -> PaymentOutcome:
    total = money2(non_negative(total_amount, "total_amount"))
    paid = money2(non_negative(amount_paid, "amount_paid"))
    payment = money2(non_negative(payment_amount, "payment.amount"))

    balance = max(ZERO, total - paid)
    if payment < TWOPLACES:
        raise InvalidAmountError("payment.amount", "amount must be greater than 0")
    if payment > balance:
        raise InvalidAmountError(
            "payment.amount", f"amount cannot exceed balance due of {balance}"
        )

    new_paid = paid + payment
    new_balance = max(ZERO, total - new_paid)
    status = derive_status(new_balance, new_paid, due_date, today, current)

    return PaymentOutcome(amount_paid=new_paid, balance_due=new_balance, status=status)
