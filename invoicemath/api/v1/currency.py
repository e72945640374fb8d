"""Currency formatting endpoint."""

from typing import Dict

from fastapi import APIRouter, Depends

from ...models.document_models import CurrencyFormatRequest
from ...models.outputs import CurrencyFormatResponse
from ...services.currency import CurrencyFormatter
from ..deps import get_formatters, select_formatter

router = APIRouter()


@router.post("/format/currency", response_model=CurrencyFormatResponse)
async def format_currency(
    payload: CurrencyFormatRequest,
    formatters: Dict[str, CurrencyFormatter] = Depends(get_formatters),
) -> CurrencyFormatResponse:
    formatter = select_formatter(formatters, payload.target)
    return CurrencyFormatResponse(target=payload.target, formatted=formatter.format(payload.amount))
