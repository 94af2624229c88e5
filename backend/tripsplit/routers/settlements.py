"""Settlements: who owes whom for the trip, plus dashboard totals."""
from fastapi import APIRouter, Depends, HTTPException

from tripsplit.errors import ConfigurationError
from tripsplit.schemas import (
    DashboardStats, HOME_CURRENCY, SettlementResponse, SettlementSummary, TransferView,
)
from tripsplit.services.formatter import format_amount
from tripsplit.services.summary import summarize
from tripsplit.state import TripState, get_state

router = APIRouter(prefix="/settlements", tags=["settlements"])


def _summary(state: TripState) -> SettlementSummary:
    try:
        return summarize(state.ledger.records, state.settings)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=SettlementResponse)
def get_settlements(state: TripState = Depends(get_state)):
    settings = state.settings
    summary = _summary(state)
    return SettlementResponse(
        home_currency=HOME_CURRENCY,
        display_currency=settings.display_currency,
        totals=summary.totals,
        total_spend=summary.total_spend,
        average_per_person=summary.average_per_person,
        balances=summary.balances,
        transfers=[
            TransferView(**t.model_dump(), display_amount=format_amount(t.amount, settings))
            for t in summary.transfers
        ],
        display_totals={p: format_amount(v, settings) for p, v in summary.totals.items()},
        display_total_spend=format_amount(summary.total_spend, settings),
        display_average=format_amount(summary.average_per_person, settings),
    )


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(state: TripState = Depends(get_state)):
    summary = _summary(state)
    member_spending = [
        {"name": p, "paid": round(paid, 2), "balance": round(summary.balances[p], 2)}
        for p, paid in summary.totals.items()
    ]
    return DashboardStats(
        total_expenses=round(summary.total_spend, 2),
        expense_count=len(state.ledger),
        average_per_person=round(summary.average_per_person, 2),
        category_totals={c: round(v, 2) for c, v in summary.category_totals.items()},
        member_spending=member_spending,
    )
