"""Recompute every derived value from the current records and settings."""
import logging
from typing import Sequence

from tripsplit.config import TripSettings
from tripsplit.schemas import ExpenseRecord, SettlementSummary
from tripsplit.services.aggregator import (
    average_per_person, total_spend, totals_by_category, totals_by_person,
)
from tripsplit.services.settlement_calculator import compute_balances, compute_settlements

logger = logging.getLogger(__name__)


def summarize(records: Sequence[ExpenseRecord], settings: TripSettings) -> SettlementSummary:
    """Pure and idempotent: same records and settings give the same summary."""
    participants = settings.participants
    totals = totals_by_person(records, participants)
    summary = SettlementSummary(
        totals=totals,
        total_spend=total_spend(totals),
        average_per_person=average_per_person(totals, participants),
        balances=compute_balances(totals, participants),
        category_totals=totals_by_category(records, settings.categories),
        transfers=compute_settlements(totals, participants),
    )
    logger.debug("Summarized %d records, total %s", len(records), summary.total_spend)
    return summary
