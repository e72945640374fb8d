"""Renderer-facing summaries of invoices and proposals.

The PDF templates only place scalar values; everything they print is
assembled here from raw document inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple

from .amounts import DiscountType, DocumentAmounts, LineItem, compute, line_total
from .currency import PDF_FORMATTER, CurrencyFormatter
from .money import HUNDRED
from .schedule import ScheduledPayment, schedule_amounts
from .words import to_words


@dataclass(frozen=True)
class DocumentSummary:
    amounts: DocumentAmounts
    line_totals: List[Decimal]
    amount_in_words: str
    effective_tax_rate: str
    formatted: Dict[str, str]
    payment_schedule: List[ScheduledPayment] = field(default_factory=list)


def effective_tax_rate(amounts: DocumentAmounts) -> str:
    """Whole-percent tax rate as printed next to the tax line."""
    if amounts.subtotal <= 0:
        return "0"
    rate = (amounts.tax_amount / amounts.subtotal * HUNDRED).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    return str(rate)


def _format_amounts(amounts: DocumentAmounts, formatter: CurrencyFormatter) -> Dict[str, str]:
    return {
        name: formatter.format(value)
        for name, value in amounts.as_dict().items()
        if value is not None
    }


def _line_totals(items: List[LineItem]) -> List[Decimal]:
    return [line_total(item, f"line_items[{index}]") for index, item in enumerate(items)]


def summarize_invoice(
    line_items: Iterable[LineItem],
    discount=0,
    discount_type=DiscountType.FIXED,
    tax_rate_percent=0,
    amount_paid=0,
    formatter: CurrencyFormatter = PDF_FORMATTER,
) -> DocumentSummary:
    items = list(line_items)
    amounts = compute(items, discount, discount_type, tax_rate_percent, amount_paid or 0)
    return DocumentSummary(
        amounts=amounts,
        line_totals=_line_totals(items),
        # invoices print the outstanding balance in words
        amount_in_words=to_words(amounts.balance_due),
        effective_tax_rate=effective_tax_rate(amounts),
        formatted=_format_amounts(amounts, formatter),
    )


def summarize_proposal(
    line_items: Iterable[LineItem],
    discount=0,
    discount_type=DiscountType.FIXED,
    tax_rate_percent=0,
    payment_schedule: Optional[Iterable[Tuple[str, object]]] = None,
    formatter: CurrencyFormatter = PDF_FORMATTER,
) -> DocumentSummary:
    items = list(line_items)
    amounts = compute(items, discount, discount_type, tax_rate_percent)
    schedule = schedule_amounts(amounts.total_amount, payment_schedule or [])
    return DocumentSummary(
        amounts=amounts,
        line_totals=_line_totals(items),
        amount_in_words=to_words(amounts.total_amount),
        effective_tax_rate=effective_tax_rate(amounts),
        formatted=_format_amounts(amounts, formatter),
        payment_schedule=schedule,
    )
