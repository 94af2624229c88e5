"""Display strings for amounts. Presentation only; nothing here feeds back into the ledger."""
import math

from tripsplit.config import TripSettings
from tripsplit.schemas import Currency, CURRENCY_SYMBOLS, ExpenseRecord
from tripsplit.services.normalizer import convert_for_display


def format_money(amount: float, currency: Currency) -> str:
    whole = math.floor(amount + 0.5)
    sign = "-" if whole < 0 else ""
    return f"{sign}{CURRENCY_SYMBOLS[currency]}{abs(whole):,}"


def format_amount(home_amount: float, settings: TripSettings) -> str:
    """Render a home-currency amount in the configured display currency at the live rate."""
    currency = settings.display_currency
    return format_money(
        convert_for_display(home_amount, currency, settings.exchange_rate), currency
    )


def format_original(record: ExpenseRecord) -> str:
    """Render a record in the currency it was entered in."""
    return format_money(record.amount, record.currency)
