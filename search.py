import logging

from models import SearchState
from weather_api import WeatherLookupError

EMPTY_CITY_MESSAGE = "Por favor, ingresa una ciudad. No se permiten números ni caracteres especiales"

logger = logging.getLogger(__name__)


# Runs one query cycle: validate, look up the weather, then ask for advice.
def run_search(city, fetch_weather, get_advice, state=None):
    """
    `fetch_weather(city)` returns a WeatherResult or raises WeatherLookupError.
    `get_advice(description)` always returns a string.
    The advice step only runs after a successful lookup.
    """
    state = state if state is not None else SearchState()
    city = (city or "").strip()
    if not city:
        state.reject(EMPTY_CITY_MESSAGE)
        return state

    state.begin(city)
    try:
        result = fetch_weather(city)
    except WeatherLookupError as e:
        state.fail(e.message)
        return state

    state.set_weather(result)
    state.set_advice(get_advice(result.description))
    logger.debug("Search for %r done: %r", city, result)
    return state
