"""Pydantic request models carrying raw document inputs.

Only raw inputs are accepted; any pre-computed totals a caller sends are
dropped and recomputed. Sign and range constraints are checked by the
services so errors name the offending field the same way in-process and
over HTTP.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..services.amounts import DiscountType, LineItem
from ..services.dashboard import InvoiceRecord, PaymentRecord
from ..services.payments import InvoiceStatus, PaymentMethod


class LineItemIn(BaseModel):
    description: str = ""
    quantity: Decimal
    unit_price: Decimal

    def to_line_item(self) -> LineItem:
        return LineItem(
            description=self.description,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )


class _DocumentIn(BaseModel):
    line_items: List[LineItemIn] = Field(default_factory=list)
    discount: Decimal = Decimal("0")
    discount_type: DiscountType = DiscountType.FIXED
    tax_rate_percent: Decimal = Decimal("0")
    target: str = "pdf"

    def items(self) -> List[LineItem]:
        return [item.to_line_item() for item in self.line_items]


class InvoiceComputeRequest(_DocumentIn):
    amount_paid: Decimal = Decimal("0")


class SchedulePartIn(BaseModel):
    milestone: str
    percentage: Decimal


class ProposalComputeRequest(_DocumentIn):
    payment_schedule: List[SchedulePartIn] = Field(default_factory=list)


class WordsRequest(BaseModel):
    amount: Decimal


class CurrencyFormatRequest(BaseModel):
    amount: Decimal
    target: str = "display"


class PaymentIn(BaseModel):
    amount: Decimal
    method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    payment_date: date
    reference: str = ""
    notes: str = ""


class PaymentApplyRequest(BaseModel):
    total_amount: Decimal
    amount_paid: Decimal = Decimal("0")
    due_date: date
    status: InvoiceStatus = InvoiceStatus.SENT
    payment: PaymentIn


class UPIDeeplinkRequest(BaseModel):
    upi_id: str
    payee_name: str
    amount: Optional[Decimal] = None
    currency: str = "INR"
    note: Optional[str] = None
    invoice_number: Optional[str] = None
    txn_ref: Optional[str] = None


class DocumentNumberRequest(BaseModel):
    kind: Literal["invoice", "proposal"]
    sequence: int = Field(ge=1)


class InvoiceRecordIn(BaseModel):
    total_amount: Decimal
    amount_paid: Decimal = Decimal("0")
    status: InvoiceStatus = InvoiceStatus.DRAFT
    created_at: date

    def to_record(self) -> InvoiceRecord:
        return InvoiceRecord(
            total_amount=self.total_amount,
            amount_paid=self.amount_paid,
            status=self.status,
            created_at=self.created_at,
        )


class PaymentRecordIn(BaseModel):
    amount: Decimal
    payment_date: date

    def to_record(self) -> PaymentRecord:
        return PaymentRecord(amount=self.amount, payment_date=self.payment_date)


class DashboardRequest(BaseModel):
    invoices: List[InvoiceRecordIn] = Field(default_factory=list)
    payments: List[PaymentRecordIn] = Field(default_factory=list)
    today: Optional[date] = None
