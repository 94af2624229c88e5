"""In-memory trip state shared by the routers."""
from tripsplit.config import TripSettings, settings_from_env
from tripsplit.services.ledger import Ledger


class TripState:
    """One ledger and the settings currently in effect."""

    def __init__(self, settings: TripSettings):
        self.settings = settings
        self.ledger = Ledger()


_state = None


def get_state() -> TripState:
    global _state
    if _state is None:
        _state = TripState(settings_from_env())
    return _state
