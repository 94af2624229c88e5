import pytest

from tripsplit.config import TripSettings, settings_from_env
from tripsplit.errors import ConfigurationError
from tripsplit.schemas import Currency, ExpenseCreate
from tripsplit.services.aggregator import (
    average_per_person, total_spend, totals_by_category, totals_by_person,
)
from tripsplit.services.formatter import format_amount, format_money, format_original
from tripsplit.services.normalizer import convert_for_display, normalize
from tripsplit.services.summary import summarize


def test_normalize():
    assert normalize(400, Currency.KRW, 100) == 400
    assert normalize(10, Currency.JPY, 100) == 1000
    assert normalize(3, Currency.JPY, 9.5) == pytest.approx(28.5)


def test_convert_for_display():
    assert convert_for_display(1000, Currency.KRW, 100) == 1000
    assert convert_for_display(1000, Currency.JPY, 100) == 10


def test_totals(ledger, settings):
    ledger.add_expense(ExpenseCreate(payer="A", amount=400, description="Hotel", category="lodging"), settings)
    ledger.add_expense(ExpenseCreate(payer="A", amount=10, currency="JPY", description="Ramen"), settings)
    ledger.add_expense(ExpenseCreate(payer="C", amount=200, description="Bus", category="transport"), settings)

    totals = totals_by_person(ledger.records, settings.participants)
    assert totals == {"A": 1400.0, "B": 0.0, "C": 200.0, "D": 0.0}
    assert total_spend(totals) == 1600
    assert average_per_person(totals, settings.participants) == 400
    assert totals_by_category(ledger.records, settings.categories) == {
        "food": 1000.0, "lodging": 400.0, "transport": 200.0, "other": 0.0,
    }


def test_average_requires_participants():
    with pytest.raises(ConfigurationError):
        average_per_person({}, ())


def test_summarize_empty(settings):
    summary = summarize([], settings)
    assert summary.transfers == []
    assert summary.total_spend == 0
    assert summary.average_per_person == 0
    assert set(summary.totals.values()) == {0.0}


def test_summarize_is_idempotent(ledger, settings):
    ledger.add_expense(ExpenseCreate(payer="B", amount=777, description="Gifts"), settings)
    ledger.add_expense(ExpenseCreate(payer="D", amount=31, currency="JPY", description="Tea"), settings)
    assert summarize(ledger.records, settings) == summarize(ledger.records, settings)


def test_summary_ignores_later_rate_change(ledger, settings):
    ledger.add_expense(ExpenseCreate(payer="A", amount=10, currency="JPY", description="Sushi"), settings)
    before = summarize(ledger.records, settings)
    after = summarize(ledger.records, settings.with_exchange_rate(5))
    assert before.totals == after.totals
    assert before.transfers == after.transfers


def test_format_money():
    assert format_money(1234567.4, Currency.KRW) == "₩1,234,567"
    assert format_money(2.5, Currency.JPY) == "¥3"
    assert format_money(-300, Currency.KRW) == "-₩300"


def test_format_amount_uses_display_currency(settings):
    assert format_amount(12300, settings) == "₩12,300"
    yen = settings.with_display_currency(Currency.JPY)
    assert format_amount(12300, yen) == "¥123"


def test_format_original(ledger, settings):
    record = ledger.add_expense(ExpenseCreate(payer="A", amount=1500, currency="JPY", description="Park"), settings)
    assert format_original(record) == "¥1,500"


@pytest.mark.parametrize("rate", [0, -1, "abc", None, float("nan"), float("inf"), "1e999"])
def test_invalid_rate_rejected(settings, rate):
    with pytest.raises(ConfigurationError):
        settings.with_exchange_rate(rate)
    assert settings.exchange_rate == 100


def test_invalid_display_currency(settings):
    with pytest.raises(ConfigurationError):
        settings.with_display_currency("USD")


@pytest.mark.parametrize("participants", [[], ["", "  "], ["A", "A"]])
def test_invalid_participants(participants):
    with pytest.raises(ConfigurationError):
        TripSettings.create(participants=participants)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TRIPSPLIT_EXCHANGE_RATE", "9.2")
    monkeypatch.setenv("TRIPSPLIT_PARTICIPANTS", "Kim, Lee ,Park")
    monkeypatch.delenv("TRIPSPLIT_CATEGORIES", raising=False)
    settings = settings_from_env()
    assert settings.exchange_rate == 9.2
    assert settings.participants == ("Kim", "Lee", "Park")
    assert settings.categories[0] == "food"


def test_settings_from_env_bad_rate(monkeypatch):
    monkeypatch.setenv("TRIPSPLIT_EXCHANGE_RATE", "-3")
    with pytest.raises(ConfigurationError):
        settings_from_env()


@pytest.mark.parametrize("raw", ["inf", "1e999", "nan"])
def test_settings_from_env_non_finite_rate(monkeypatch, raw):
    monkeypatch.setenv("TRIPSPLIT_EXCHANGE_RATE", raw)
    with pytest.raises(ConfigurationError):
        settings_from_env()
