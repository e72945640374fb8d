"""Dashboard money totals across invoices and payments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from .money import ZERO, money2, non_negative
from .payments import InvoiceStatus


@dataclass(frozen=True)
class InvoiceRecord:
    total_amount: object
    amount_paid: object
    status: InvoiceStatus
    created_at: date


@dataclass(frozen=True)
class PaymentRecord:
    amount: object
    payment_date: date


@dataclass(frozen=True)
class DashboardSummary:
    total_invoiced: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    this_month_invoiced: Decimal
    this_month_collected: Decimal
    count_overdue_invoices: int


def _same_month(day: date, today: date) -> bool:
    return day.year == today.year and day.month == today.month


def summarize_dashboard(
    invoices: Iterable[InvoiceRecord],
    payments: Iterable[PaymentRecord],
    today: date,
) -> DashboardSummary:
    total_invoiced = ZERO
    total_paid = ZERO
    total_outstanding = ZERO
    this_month_invoiced = ZERO
    overdue = 0

    for index, invoice in enumerate(invoices):
        total = non_negative(invoice.total_amount, f"invoices[{index}].total_amount")
        paid = non_negative(invoice.amount_paid, f"invoices[{index}].amount_paid")
        total_invoiced += total
        total_paid += paid
        # outstanding is recomputed, never read from a stored balance
        total_outstanding += max(ZERO, total - paid)
        if _same_month(invoice.created_at, today):
            this_month_invoiced += total
        if InvoiceStatus(invoice.status) is InvoiceStatus.OVERDUE:
            overdue += 1

    this_month_collected = ZERO
    for index, payment in enumerate(payments):
        amount = non_negative(payment.amount, f"payments[{index}].amount")
        if _same_month(payment.payment_date, today):
            this_month_collected += amount

    return DashboardSummary(
        total_invoiced=money2(total_invoiced),
        total_paid=money2(total_paid),
        total_outstanding=money2(total_outstanding),
        this_month_invoiced=money2(this_month_invoiced),
        this_month_collected=money2(this_month_collected),
        count_overdue_invoices=overdue,
    )
