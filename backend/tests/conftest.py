import pytest
from fastapi.testclient import TestClient

from tripsplit.config import TripSettings
from tripsplit.main import app
from tripsplit.services.ledger import Ledger
from tripsplit.state import TripState, get_state

PARTICIPANTS = ("A", "B", "C", "D")
CATEGORIES = ("food", "lodging", "transport", "other")


@pytest.fixture
def settings():
    return TripSettings.create(exchange_rate=100, participants=PARTICIPANTS, categories=CATEGORIES)


@pytest.fixture
def ledger():
    return Ledger()


@pytest.fixture
def state(settings):
    return TripState(settings)


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_expense(client):
    def _add(payer="A", amount=100, currency="KRW", category="food", description="Lunch", **extra):
        res = client.post("/api/expenses", json={
            "payer": payer, "amount": amount, "currency": currency,
            "category": category, "description": description, **extra,
        })
        assert res.status_code == 200, res.text
        return res.json()
    return _add
