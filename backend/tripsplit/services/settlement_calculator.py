"""Minimize number of transfers so everyone is settled (who owes whom)."""
import logging
import math
from typing import Sequence

from tripsplit.schemas import Transfer
from tripsplit.services.aggregator import average_per_person

logger = logging.getLogger(__name__)

# Entries whose remaining balance drops below one whole unit are settled.
SETTLE_TOLERANCE = 1.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_balances(totals: dict[str, float], participants: Sequence[str]) -> dict[str, float]:
    """
    participant -> average - paid.
    Positive = net creditor, negative = net debtor. Sums to zero.
    """
    average = average_per_person(totals, participants)
    return {p: average - totals.get(p, 0.0) for p in participants}


def compute_settlements(totals: dict[str, float], participants: Sequence[str]) -> list[Transfer]:
    """
    totals: participant -> normalized amount paid.
    Greedy largest-to-largest matching. Ties keep participant order (stable sort).
    """
    balances = compute_balances(totals, participants)

    creditors = [[p, bal] for p, bal in balances.items() if bal > 0]
    debtors = [[p, bal] for p, bal in balances.items() if bal < 0]
    creditors.sort(key=lambda x: -x[1])
    debtors.sort(key=lambda x: x[1])

    out: list[Transfer] = []
    while creditors and debtors:
        creditor, debtor = creditors[0], debtors[0]
        amount = min(creditor[1], -debtor[1])
        rounded = round_half_up(amount)
        if rounded > 0:
            out.append(Transfer(from_person=debtor[0], to_person=creditor[0], amount=rounded))
        creditor[1] -= amount
        debtor[1] += amount
        if abs(creditor[1]) < SETTLE_TOLERANCE:
            creditors.pop(0)
        if abs(debtor[1]) < SETTLE_TOLERANCE:
            debtors.pop(0)

    logger.debug("Computed %d transfers for %d participants", len(out), len(participants))
    return out
