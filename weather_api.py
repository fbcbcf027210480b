import logging

import requests
from requests.exceptions import RequestException

from models import WeatherResult

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 20

NOT_FOUND_MESSAGE = "Ciudad no encontrada. Por favor, verifica el nombre."
SERVICE_ERROR_MESSAGE = "Error al obtener datos del clima."

logger = logging.getLogger(__name__)


class WeatherLookupError(RuntimeError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CityNotFound(WeatherLookupError):
    def __init__(self, status_code=404):
        super().__init__(NOT_FOUND_MESSAGE, status_code)


class WeatherServiceError(WeatherLookupError):
    def __init__(self, status_code=None):
        super().__init__(SERVICE_ERROR_MESSAGE, status_code)


# Queries the current-weather endpoint once and returns a WeatherResult.
def fetch_current_weather(city: str, api_key: str | None, url: str = WEATHER_URL, timeout: float = DEFAULT_TIMEOUT):
    """
    Metric units and Spanish descriptions. A 404 raises CityNotFound; any
    other non-2xx status, transport failure or unreadable body raises
    WeatherServiceError. No retries.
    """
    params = {"q": city, "appid": api_key, "units": "metric", "lang": "es"}
    logger.info("Fetching current weather for %r", city)
    try:
        response = requests.get(url, params=params, timeout=timeout)
    except RequestException as e:
        logger.warning("Weather request for %r failed: %s", city, e)
        raise WeatherServiceError() from e

    status = response.status_code
    if status == 404:
        logger.warning("Weather provider does not know %r", city)
        raise CityNotFound()
    if not 200 <= status < 300:
        logger.warning("Weather provider answered HTTP %s for %r", status, city)
        raise WeatherServiceError(status)

    try:
        return WeatherResult.from_payload(response.json())
    except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
        logger.warning("Unreadable weather payload for %r: %s", city, e)
        raise WeatherServiceError(status) from e
