from datetime import date
from decimal import Decimal

import pytest

from invoicemath.services.exceptions import InvalidAmountError
from invoicemath.services.payments import InvoiceStatus, apply_payment, derive_status

DUE = date(2024, 3, 31)


def test_partial_payment_before_due_date():
    outcome = apply_payment("1475.59", 0, 500, due_date=DUE, today=date(2024, 3, 10))

    assert outcome.amount_paid == Decimal("500.00")
    assert outcome.balance_due == Decimal("975.59")
    assert outcome.status is InvoiceStatus.PARTIALLY_PAID


def test_partial_payment_after_due_date_is_overdue():
    outcome = apply_payment("1475.59", 0, 500, due_date=DUE, today=date(2024, 4, 2))

    assert outcome.status is InvoiceStatus.OVERDUE


def test_settling_payment_marks_paid():
    outcome = apply_payment("1475.59", "500.00", "975.59", due_date=DUE, today=date(2024, 4, 2))

    assert outcome.balance_due == Decimal("0.00")
    assert outcome.status is InvoiceStatus.PAID


def test_payment_cannot_exceed_balance():
    with pytest.raises(InvalidAmountError) as excinfo:
        apply_payment(1000, 900, "100.01", due_date=DUE, today=DUE)

    assert excinfo.value.field == "payment.amount"


@pytest.mark.parametrize("amount", [0, "0.001", -5])
def test_payment_must_be_positive(amount):
    with pytest.raises(InvalidAmountError):
        apply_payment(1000, 0, amount, due_date=DUE, today=DUE)


def test_unpaid_invoice_keeps_current_status():
    status = derive_status(Decimal("10"), Decimal("0"), DUE, DUE, InvoiceStatus.DRAFT)

    assert status is InvoiceStatus.DRAFT
