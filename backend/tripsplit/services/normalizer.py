"""Convert amounts between the foreign and home currency."""
from tripsplit.schemas import Currency, HOME_CURRENCY


def normalize(amount: float, currency: Currency, rate: float) -> float:
    """Amount in home units. rate = home units per one foreign unit, assumed > 0."""
    if currency == HOME_CURRENCY:
        return amount
    return amount * rate


def convert_for_display(home_amount: float, currency: Currency, rate: float) -> float:
    """Inverse of normalize, used only for rendering."""
    if currency == HOME_CURRENCY:
        return home_amount
    return home_amount / rate
