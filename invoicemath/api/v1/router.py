"""Versioned API router registration."""

from fastapi import APIRouter

from .health import router as health_router
from .totals import router as totals_router
from .words import router as words_router
from .currency import router as currency_router
from .payments import router as payments_router
from .upi import router as upi_router
from .numbering import router as numbering_router
from .dashboard import router as dashboard_router


def create_v1_router() -> APIRouter:
    """Create and configure v1 API router"""
    router = APIRouter(prefix="/v1")

    router.include_router(health_router, tags=["health"])
    router.include_router(totals_router, tags=["totals"])
    router.include_router(words_router, tags=["totals"])
    router.include_router(currency_router, tags=["formatting"])
    router.include_router(payments_router, tags=["payments"])
    router.include_router(upi_router, tags=["payments"])
    router.include_router(numbering_router, tags=["documents"])
    router.include_router(dashboard_router, tags=["dashboard"])

    return router
