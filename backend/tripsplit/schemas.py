"""Pydantic schemas for the ledger core and request/response."""
from datetime import date as dt_date
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# ----- Currency -----
class Currency(str, Enum):
    KRW = "KRW"
    JPY = "JPY"


HOME_CURRENCY = Currency.KRW
FOREIGN_CURRENCY = Currency.JPY

CURRENCY_SYMBOLS = {
    Currency.KRW: "₩",
    Currency.JPY: "¥",
}


# ----- Expense -----
class ExpenseCreate(BaseModel):
    """Unvalidated input for a new expense. Amount may be text such as "12,000"."""
    payer: str
    amount: Optional[Union[float, str]] = None
    currency: Currency = HOME_CURRENCY
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt_date] = None


class ExpenseRecord(BaseModel):
    id: int
    date: dt_date
    payer: str
    amount: float
    currency: Currency
    category: str
    description: str
    # home-currency value at the rate in effect when the record was created
    normalized_amount: float

    class Config:
        frozen = True


class ExpenseResponse(ExpenseRecord):
    display_amount: str
    display_normalized: str


# ----- Settlement -----
class Transfer(BaseModel):
    from_person: str
    to_person: str
    amount: int = Field(gt=0)

    class Config:
        frozen = True


class SettlementSummary(BaseModel):
    totals: dict[str, float]
    total_spend: float
    average_per_person: float
    balances: dict[str, float]
    category_totals: dict[str, float]
    transfers: list[Transfer]


class TransferView(Transfer):
    display_amount: str


class SettlementResponse(BaseModel):
    home_currency: Currency
    display_currency: Currency
    totals: dict[str, float]
    total_spend: float
    average_per_person: float
    balances: dict[str, float]
    transfers: list[TransferView]
    display_totals: dict[str, str]
    display_total_spend: str
    display_average: str


# ----- Settings -----
class SettingsUpdate(BaseModel):
    exchange_rate: Optional[float] = None
    display_currency: Optional[Currency] = None


class SettingsResponse(BaseModel):
    exchange_rate: float
    display_currency: Currency
    home_currency: Currency
    foreign_currency: Currency
    participants: list[str]
    categories: list[str]


# ----- Dashboard -----
class DashboardStats(BaseModel):
    total_expenses: float
    expense_count: int
    average_per_person: float
    category_totals: dict[str, float]
    member_spending: list[dict]
