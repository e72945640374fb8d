"""Request-scoped dependencies"""
from typing import Dict

from fastapi import Request

from ..services.currency import CurrencyFormatter
from .errors import APIError


def get_formatters(request: Request) -> Dict[str, CurrencyFormatter]:
    """Formatters built at startup, keyed by rendering target"""
    return request.app.state.formatters


def select_formatter(formatters: Dict[str, CurrencyFormatter], target: str) -> CurrencyFormatter:
    formatter = formatters.get(target)
    if formatter is None:
        raise APIError(
            code="UNKNOWN_TARGET",
            message=f"No currency formatter configured for target {target}",
            status_code=400,
            details={"target": target, "available": sorted(formatters)},
        )
    return formatter
