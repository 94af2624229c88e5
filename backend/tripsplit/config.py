"""Trip settings: exchange rate, display currency and the fixed vocabularies."""
import logging
import math
import os
from typing import Optional

from pydantic import BaseModel

from tripsplit.errors import ConfigurationError
from tripsplit.schemas import Currency, HOME_CURRENCY, FOREIGN_CURRENCY, SettingsResponse

logger = logging.getLogger(__name__)

DEFAULT_EXCHANGE_RATE = 100.0  # 1 JPY = 100 KRW
DEFAULT_PARTICIPANTS = ("Seokho", "Namseop", "Seunghwan", "Dohyeong")
DEFAULT_CATEGORIES = ("food", "lodging", "transport", "sightseeing", "shopping", "other")


def _check_rate(rate) -> float:
    try:
        rate = float(rate)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Exchange rate must be a number, got {rate!r}")
    if not math.isfinite(rate) or rate <= 0:
        raise ConfigurationError(f"Exchange rate must be a positive finite number, got {rate}")
    return rate


def _check_names(names, label: str) -> tuple:
    cleaned = tuple(n.strip() for n in names if n and n.strip())
    if not cleaned:
        raise ConfigurationError(f"At least one {label} is required")
    if len(set(cleaned)) != len(cleaned):
        raise ConfigurationError(f"Duplicate {label} names: {', '.join(cleaned)}")
    return cleaned


class TripSettings(BaseModel):
    """Immutable; every change produces a new object or raises ConfigurationError."""
    exchange_rate: float = DEFAULT_EXCHANGE_RATE
    display_currency: Currency = HOME_CURRENCY
    participants: tuple[str, ...] = DEFAULT_PARTICIPANTS
    categories: tuple[str, ...] = DEFAULT_CATEGORIES

    class Config:
        frozen = True

    @classmethod
    def create(
        cls,
        exchange_rate=DEFAULT_EXCHANGE_RATE,
        display_currency: Currency = HOME_CURRENCY,
        participants=DEFAULT_PARTICIPANTS,
        categories=DEFAULT_CATEGORIES,
    ) -> "TripSettings":
        return cls(
            exchange_rate=_check_rate(exchange_rate),
            display_currency=display_currency,
            participants=_check_names(participants, "participant"),
            categories=_check_names(categories, "category"),
        )

    def with_exchange_rate(self, rate) -> "TripSettings":
        rate = _check_rate(rate)
        logger.info("Exchange rate changed from %s to %s", self.exchange_rate, rate)
        return self.model_copy(update={"exchange_rate": rate})

    def with_display_currency(self, currency) -> "TripSettings":
        try:
            currency = Currency(currency)
        except ValueError:
            raise ConfigurationError(f"Unsupported currency: {currency!r}")
        return self.model_copy(update={"display_currency": currency})

    def to_response(self) -> SettingsResponse:
        return SettingsResponse(
            exchange_rate=self.exchange_rate,
            display_currency=self.display_currency,
            home_currency=HOME_CURRENCY,
            foreign_currency=FOREIGN_CURRENCY,
            participants=list(self.participants),
            categories=list(self.categories),
        )


def _split_env(name: str) -> Optional[list[str]]:
    raw = os.getenv(name, "")
    if not raw.strip():
        return None
    return [part.strip() for part in raw.split(",")]


def settings_from_env() -> TripSettings:
    """Build settings from TRIPSPLIT_* environment variables, falling back to defaults."""
    rate = os.getenv("TRIPSPLIT_EXCHANGE_RATE") or DEFAULT_EXCHANGE_RATE
    participants = _split_env("TRIPSPLIT_PARTICIPANTS") or DEFAULT_PARTICIPANTS
    categories = _split_env("TRIPSPLIT_CATEGORIES") or DEFAULT_CATEGORIES
    settings = TripSettings.create(
        exchange_rate=rate,
        participants=participants,
        categories=categories,
    )
    logger.info(
        "Loaded settings: rate=%s participants=%s",
        settings.exchange_rate, ", ".join(settings.participants),
    )
    return settings
