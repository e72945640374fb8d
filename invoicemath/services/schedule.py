"""Proposal payment schedules split by milestone percentage."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Tuple

from .exceptions import InvalidAmountError
from .money import HUNDRED, money2, non_negative


@dataclass(frozen=True)
class ScheduledPayment:
    milestone: str
    percentage: Decimal
    amount: Decimal


def schedule_amounts(total_amount, parts: Iterable[Tuple[str, object]]) -> List[ScheduledPayment]:
    """Split ``total_amount`` across milestones.

    Percentages must add up to exactly 100. Amounts are the differences of
    rounded cumulative shares, so they sum to the total to the paisa.
    """
    total = money2(non_negative(total_amount, "total_amount"))
    parts = list(parts)
    if not parts:
        return []

    percentages = []
    for index, (_, percentage) in enumerate(parts):
        field = f"payment_schedule[{index}].percentage"
        value = non_negative(percentage, field)
        if value > HUNDRED:
            raise InvalidAmountError(field, "percentage must be between 0 and 100")
        percentages.append(value)

    if sum(percentages) != HUNDRED:
        raise InvalidAmountError(
            "payment_schedule", f"percentages add up to {sum(percentages)}, expected 100"
        )

    schedule = []
    allocated = Decimal("0")
    cumulative = Decimal("0")
    for (milestone, _), percentage in zip(parts, percentages):
        cumulative += percentage
        reached = money2(total * cumulative / HUNDRED)
        schedule.append(
            ScheduledPayment(milestone=milestone, percentage=percentage, amount=reached - allocated)
        )
        allocated = reached
    return schedule
