"""Per-person and per-category totals over normalized amounts."""
from collections import defaultdict
from typing import Iterable, Sequence

from tripsplit.errors import ConfigurationError
from tripsplit.schemas import ExpenseRecord


def totals_by_person(records: Iterable[ExpenseRecord], participants: Sequence[str]) -> dict[str, float]:
    """
    participant -> sum of normalized_amount over the records they paid.
    Every participant is present, in participant order.
    """
    paid: dict[str, float] = defaultdict(float)
    for r in records:
        paid[r.payer] += r.normalized_amount
    return {p: paid.get(p, 0.0) for p in participants}


def totals_by_category(records: Iterable[ExpenseRecord], categories: Sequence[str]) -> dict[str, float]:
    spent: dict[str, float] = defaultdict(float)
    for r in records:
        spent[r.category] += r.normalized_amount
    return {c: spent.get(c, 0.0) for c in categories}


def total_spend(totals: dict[str, float]) -> float:
    return sum(totals.values())


def average_per_person(totals: dict[str, float], participants: Sequence[str]) -> float:
    if not participants:
        raise ConfigurationError("Participant set is empty")
    return total_spend(totals) / len(participants)
