"""Client for the Open-Meteo hourly forecast API."""
import logging
from typing import Any, Dict, List

import requests

from backend.config import settings
from weather_analysis.config import HOURLY_VARIABLES
from weather_analysis.models.observation import HourlyObservation
from weather_analysis.services.payload_parser import parse_hourly_payload

logger = logging.getLogger(__name__)


class WeatherProviderError(Exception):
    """Raised when the forecast provider cannot be reached or answers badly."""


class WeatherClient:
    """Client fetching hourly forecasts for the charter base."""

    def __init__(
        self,
        base_url: str = None,
        latitude: float = None,
        longitude: float = None,
        timezone: str = None,
        timeout: float = None,
        session: requests.Session = None,
    ):
        self.base_url = base_url or settings.provider_url
        self.latitude = settings.latitude if latitude is None else latitude
        self.longitude = settings.longitude if longitude is None else longitude
        self.timezone = timezone or settings.timezone
        self.timeout = timeout or settings.request_timeout
        self.session = session or requests.Session()

    def _params(self, forecast_days: int) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "hourly": ",".join(HOURLY_VARIABLES),
            "timezone": self.timezone,
            "forecast_days": forecast_days,
            "wind_speed_unit": "kmh",
        }

    def fetch_payload(self, forecast_days: int) -> Dict[str, Any]:
        """
        Fetch the raw hourly forecast.

        Raises:
            WeatherProviderError: On connection errors, timeouts, non-2xx
                responses or a body that is not JSON
        """
        try:
            response = self.session.get(
                self.base_url,
                params=self._params(forecast_days),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise WeatherProviderError(f"Forecast request failed: {e}") from e
        except ValueError as e:
            raise WeatherProviderError(f"Forecast response is not JSON: {e}") from e

    def fetch_hourly(self, forecast_days: int) -> List[HourlyObservation]:
        """
        Fetch and parse the hourly forecast.

        Raises:
            WeatherProviderError: If the request fails
            MalformedPayloadError: If the response lacks the hourly envelope
        """
        payload = self.fetch_payload(forecast_days)
        observations = parse_hourly_payload(payload)
        logger.info(
            "Fetched %d hourly observations for %.4f, %.4f",
            len(observations), self.latitude, self.longitude,
        )
        return observations
