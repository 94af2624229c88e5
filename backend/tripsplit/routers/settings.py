"""Settings: exchange rate and display currency."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from tripsplit.errors import ConfigurationError
from tripsplit.schemas import SettingsResponse, SettingsUpdate
from tripsplit.state import TripState, get_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
def get_settings(state: TripState = Depends(get_state)):
    return state.settings.to_response()


@router.patch("", response_model=SettingsResponse)
def update_settings(data: SettingsUpdate, state: TripState = Depends(get_state)):
    settings = state.settings
    try:
        if data.exchange_rate is not None:
            settings = settings.with_exchange_rate(data.exchange_rate)
        if data.display_currency is not None:
            settings = settings.with_display_currency(data.display_currency)
    except ConfigurationError as e:
        logger.warning("Rejected settings update: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    # only swapped in once every field is valid
    state.settings = settings
    return settings.to_response()
