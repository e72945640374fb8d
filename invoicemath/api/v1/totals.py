"""Invoice and proposal totals endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from ...core.logging import get_logger
from ...models.document_models import InvoiceComputeRequest, ProposalComputeRequest
from ...models.outputs import DocumentSummaryOut
from ...services.currency import CurrencyFormatter
from ...services.documents import summarize_invoice, summarize_proposal
from ..deps import get_formatters, select_formatter

router = APIRouter()
logger = get_logger(__name__)


@router.post("/compute/invoice", response_model=DocumentSummaryOut)
async def compute_invoice(
    payload: InvoiceComputeRequest,
    formatters: Dict[str, CurrencyFormatter] = Depends(get_formatters),
) -> DocumentSummaryOut:
    formatter = select_formatter(formatters, payload.target)
    items = payload.items()
    summary = summarize_invoice(
        items,
        discount=payload.discount,
        discount_type=payload.discount_type,
        tax_rate_percent=payload.tax_rate_percent,
        amount_paid=payload.amount_paid,
        formatter=formatter,
    )
    logger.info("invoice_computed", line_items=len(items), total=str(summary.amounts.total_amount))
    return DocumentSummaryOut.from_summary(summary, items)


@router.post("/compute/proposal", response_model=DocumentSummaryOut)
async def compute_proposal(
    payload: ProposalComputeRequest,
    formatters: Dict[str, CurrencyFormatter] = Depends(get_formatters),
) -> DocumentSummaryOut:
    formatter = select_formatter(formatters, payload.target)
    items = payload.items()
    summary = summarize_proposal(
        items,
        discount=payload.discount,
        discount_type=payload.discount_type,
        tax_rate_percent=payload.tax_rate_percent,
        payment_schedule=[(part.milestone, part.percentage) for part in payload.payment_schedule],
        formatter=formatter,
    )
    logger.info("proposal_computed", line_items=len(items), total=str(summary.amounts.total_amount))
    return DocumentSummaryOut.from_summary(summary, items)
