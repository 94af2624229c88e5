"""Expenses: create, list, get, delete, export."""
import csv
import io
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from tripsplit.errors import NotFoundError, ValidationError
from tripsplit.schemas import ExpenseCreate, ExpenseRecord, ExpenseResponse, HOME_CURRENCY
from tripsplit.services.formatter import format_amount, format_original
from tripsplit.state import TripState, get_state

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _expense_response(exp: ExpenseRecord, state: TripState) -> ExpenseResponse:
    return ExpenseResponse(
        **exp.model_dump(),
        display_amount=format_original(exp),
        display_normalized=format_amount(exp.normalized_amount, state.settings),
    )


@router.post("", response_model=ExpenseResponse)
def create_expense(data: ExpenseCreate, state: TripState = Depends(get_state)):
    try:
        expense = state.ledger.add_expense(data, state.settings)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _expense_response(expense, state)


@router.get("", response_model=list[ExpenseResponse])
def list_expenses(
    category: Optional[str] = Query(None),
    payer: Optional[str] = Query(None),
    state: TripState = Depends(get_state),
):
    expenses = state.ledger.sorted_records()
    if category:
        expenses = [e for e in expenses if e.category == category]
    if payer:
        expenses = [e for e in expenses if e.payer == payer]
    return [_expense_response(e, state) for e in expenses]


@router.delete("", status_code=204)
def clear_expenses(state: TripState = Depends(get_state)):
    state.ledger.clear()


@router.get("/export")
def export_expenses(state: TripState = Depends(get_state)):
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "Date", "Paid By", "Category", "Description", "Amount", "Currency",
        f"Amount ({HOME_CURRENCY.value})",
    ])
    for e in state.ledger.sorted_records():
        writer.writerow([
            e.date.isoformat(),
            e.payer,
            e.category,
            e.description,
            f"{e.amount:.2f}",
            e.currency.value,
            f"{e.normalized_amount:.2f}",
        ])

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=trip-expenses.csv"},
    )


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(expense_id: int, state: TripState = Depends(get_state)):
    try:
        expense = state.ledger.get_expense(expense_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Expense not found")
    return _expense_response(expense, state)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: int, state: TripState = Depends(get_state)):
    state.ledger.remove_expense(expense_id)
