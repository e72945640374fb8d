"""Invoice payment recording endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ...core.logging import get_logger
from ...models.document_models import PaymentApplyRequest
from ...models.outputs import PaymentOutcomeResponse
from ...services.payments import apply_payment

router = APIRouter()
logger = get_logger(__name__)


@router.post("/invoices/payments/apply", response_model=PaymentOutcomeResponse)
async def apply_invoice_payment(payload: PaymentApplyRequest) -> PaymentOutcomeResponse:
    """Apply a payment and return the recomputed balance and status.

    The status is evaluated as of the payment date.
    """
    outcome = apply_payment(
        total_amount=payload.total_amount,
        amount_paid=payload.amount_paid,
        payment_amount=payload.payment.amount,
        due_date=payload.due_date,
        today=payload.payment.payment_date,
        current=payload.status,
    )
    logger.info(
        "payment_recorded",
        method=payload.payment.method.value,
        status=outcome.status.value,
    )
    return PaymentOutcomeResponse.from_outcome(outcome)
