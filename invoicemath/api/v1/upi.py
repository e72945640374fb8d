"""UPI deeplink endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ...models.document_models import UPIDeeplinkRequest
from ...models.outputs import UPIDeeplinkResponse
from ...services.upi import generate_upi_deeplink, generate_upi_qr_payload, invoice_payment_note

router = APIRouter()


@router.post("/upi/deeplink", response_model=UPIDeeplinkResponse)
async def create_upi_deeplink(payload: UPIDeeplinkRequest) -> UPIDeeplinkResponse:
    fields = dict(
        upi_id=payload.upi_id,
        payee_name=payload.payee_name,
        amount=payload.amount,
        currency=payload.currency,
        note=payload.note or invoice_payment_note(payload.invoice_number),
        txn_ref=payload.txn_ref,
    )
    return UPIDeeplinkResponse(
        deeplink=generate_upi_deeplink(**fields),
        qr_payload=generate_upi_qr_payload(**fields),
    )
