"""Dashboard aggregation endpoint."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter

from ...models.document_models import DashboardRequest
from ...models.outputs import DashboardResponse
from ...services.dashboard import summarize_dashboard

router = APIRouter()


@router.post("/dashboard/summary", response_model=DashboardResponse)
async def dashboard_summary(payload: DashboardRequest) -> DashboardResponse:
    summary = summarize_dashboard(
        [invoice.to_record() for invoice in payload.invoices],
        [payment.to_record() for payment in payload.payments],
        today=payload.today or date.today(),
    )
    return DashboardResponse.from_summary(summary)
