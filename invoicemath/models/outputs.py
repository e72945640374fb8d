"""Response models; money fields serialize as fixed two-place strings."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..services.amounts import LineItem
from ..services.dashboard import DashboardSummary
from ..services.documents import DocumentSummary
from ..services.payments import InvoiceStatus, PaymentOutcome


class AmountsOut(BaseModel):
    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    balance_due: Optional[Decimal] = None


class LineTotalOut(BaseModel):
    description: str
    line_total: Decimal


class ScheduledPaymentOut(BaseModel):
    milestone: str
    percentage: Decimal
    amount: Decimal


class DocumentSummaryOut(BaseModel):
    amounts: AmountsOut
    line_items: List[LineTotalOut]
    amount_in_words: str
    effective_tax_rate: str
    formatted: Dict[str, str]
    payment_schedule: List[ScheduledPaymentOut] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: DocumentSummary, items: List[LineItem]) -> "DocumentSummaryOut":
        return cls(
            amounts=AmountsOut(**summary.amounts.as_dict()),
            line_items=[
                LineTotalOut(description=item.description, line_total=total)
                for item, total in zip(items, summary.line_totals)
            ],
            amount_in_words=summary.amount_in_words,
            effective_tax_rate=summary.effective_tax_rate,
            formatted=summary.formatted,
            payment_schedule=[
                ScheduledPaymentOut(
                    milestone=part.milestone, percentage=part.percentage, amount=part.amount
                )
                for part in summary.payment_schedule
            ],
        )


class WordsResponse(BaseModel):
    amount: Decimal
    words: str


class CurrencyFormatResponse(BaseModel):
    target: str
    formatted: str


class PaymentOutcomeResponse(BaseModel):
    amount_paid: Decimal
    balance_due: Decimal
    status: InvoiceStatus

    @classmethod
    def from_outcome(cls, outcome: PaymentOutcome) -> "PaymentOutcomeResponse":
        return cls(
            amount_paid=outcome.amount_paid,
            balance_due=outcome.balance_due,
            status=outcome.status,
        )


class UPIDeeplinkResponse(BaseModel):
    deeplink: str
    qr_payload: str


class DocumentNumberResponse(BaseModel):
    number: str


class DashboardResponse(BaseModel):
    total_invoiced: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    this_month_invoiced: Decimal
    this_month_collected: Decimal
    count_overdue_invoices: int

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "DashboardResponse":
        return cls(
            total_invoiced=summary.total_invoiced,
            total_paid=summary.total_paid,
            total_outstanding=summary.total_outstanding,
            this_month_invoiced=summary.this_month_invoiced,
            this_month_collected=summary.this_month_collected,
            count_overdue_invoices=summary.count_overdue_invoices,
        )
