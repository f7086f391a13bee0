"""Derived progress statistics. Pure functions, no I/O."""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class ProgressSummary:
    total: int
    completed: int
    incomplete: int
    percentage: float


def percentage(total: int, completed: int) -> float:
    """Completion percentage rounded half-up to two decimal places.

    Returns 0.0 for an empty project.
    """
    if total == 0:
        return 0.0
    value = Decimal(completed * 100) / Decimal(total)
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def is_overdue(due_date: date | None, completed: bool, today: date) -> bool:
    """A task is overdue when it has a due date strictly before today and is still open."""
    return due_date is not None and due_date < today and not completed


def progress_summary(total: int, completed: int) -> ProgressSummary:
    return ProgressSummary(
        total=total,
        completed=completed,
        incomplete=total - completed,
        percentage=percentage(total, completed),
    )
