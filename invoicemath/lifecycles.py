"""Application lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .core.config import get_settings
from .core.logging import get_logger
from .services.currency import FORMATTER_TARGETS, formatter_for

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("application_startup", locale=settings.locale, currency=settings.currency)

    app.state.formatters = {
        target: formatter_for(target, settings) for target in FORMATTER_TARGETS
    }

    try:
        yield
    finally:
        logger.info("application_shutdown")
