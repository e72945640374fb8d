"""Document number endpoint."""

from fastapi import APIRouter, Depends

from ...core.config import Settings, get_settings
from ...models.document_models import DocumentNumberRequest
from ...models.outputs import DocumentNumberResponse
from ...services.numbering import format_document_number

router = APIRouter()


@router.post("/documents/number", response_model=DocumentNumberResponse)
async def document_number(
    payload: DocumentNumberRequest,
    settings: Settings = Depends(get_settings),
) -> DocumentNumberResponse:
    if payload.kind == "invoice":
        prefix = settings.invoice_number_prefix
    else:
        prefix = settings.proposal_number_prefix
    return DocumentNumberResponse(number=format_document_number(prefix, payload.sequence))
