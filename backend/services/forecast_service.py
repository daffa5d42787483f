"""Service building the forecast calendar from provider data."""
import logging
from datetime import date
from typing import Dict, List, Optional

import attrs
import pandas as pd

from backend.config import settings
from backend.data.weather_client import WeatherClient, WeatherProviderError
from weather_analysis.models.observation import HourlyObservation
from weather_analysis.models.weather import DailyWeather
from weather_analysis.services.day_analyzer import DayAnalyzer, classify_day
from weather_analysis.services.fallback_generator import FallbackGenerator
from weather_analysis.services.payload_parser import FIELD_MAP, MalformedPayloadError
from weather_analysis.services.special_events import special_event
from weather_analysis.services.window_segmenter import hour_metrics
from weather_analysis.services.condition_classifier import classify
from weather_analysis.utils.descriptors import (
    compass_point,
    weather_category,
    wind_speed_category,
)

logger = logging.getLogger(__name__)


class ForecastService:
    """Service for forecast calendar operations."""

    def __init__(
        self,
        client: WeatherClient = None,
        analyzer: DayAnalyzer = None,
        fallback: FallbackGenerator = None,
        forecast_days: int = None,
        timezone: str = None,
        include_analysis: bool = None,
    ):
        self.client = client or WeatherClient()
        self.analyzer = analyzer or DayAnalyzer()
        self.fallback = fallback or FallbackGenerator(seed=settings.fallback_seed)
        self.forecast_days = forecast_days or settings.forecast_days
        self.timezone = timezone or settings.timezone
        self.include_analysis = (
            settings.include_analysis if include_analysis is None else include_analysis
        )

    def _today(self) -> date:
        """Current date at the charter base."""
        return pd.Timestamp.now(tz=self.timezone).date()

    def _fetch_observations(self) -> Optional[List[HourlyObservation]]:
        """Hourly forecast, or None when the provider fails."""
        try:
            observations = self.client.fetch_hourly(self.forecast_days)
        except (WeatherProviderError, MalformedPayloadError) as e:
            logger.warning("Weather provider unavailable, using fallback data: %s", e)
            return None
        if not observations:
            logger.warning("Weather provider returned no hourly data, using fallback data")
            return None
        return observations

    def get_days(self) -> List[DailyWeather]:
        """
        Daily summaries for the forecast horizon.

        Falls back to synthetic records covering the same horizon when the
        provider fails, so callers always receive well-formed days.
        """
        observations = self._fetch_observations()
        if observations is None:
            return self.fallback.generate(self._today(), self.forecast_days)

        if self.include_analysis:
            return self.analyzer.build_days(observations)
        return self.analyzer.aggregator.aggregate(observations)

    def _day_to_dict(self, day: DailyWeather) -> Dict:
        """Calendar cell data: summary, condition badge and descriptors."""
        result = attrs.asdict(day, recurse=True)
        result["condition"] = attrs.asdict(classify_day(day))
        result["weather_category"] = weather_category(day.weather_code)
        result["compass_point"] = compass_point(day.wind_direction_10m_dominant)
        result["wind_speed_category"] = wind_speed_category(day.wind_speed_10m_max)
        result["special_event"] = special_event(date.fromisoformat(day.date))
        return result

    def get_forecast(self) -> Dict:
        """
        Get the forecast calendar.

        Returns:
            Dict with location, timezone and one entry per forecast day
        """
        days = self.get_days()
        return {
            "location": settings.location_name,
            "latitude": settings.latitude,
            "longitude": settings.longitude,
            "timezone": self.timezone,
            "days": [self._day_to_dict(day) for day in days],
        }

    def get_hourly(self, day: str) -> Optional[Dict]:
        """
        Get hourly series of one forecast day, for charting.

        Returns:
            Dict with aligned arrays per variable and per-hour levels, or
            None when the day is outside the horizon or the provider failed
        """
        observations = self._fetch_observations()
        if observations is None:
            return None

        hours = self.analyzer.aggregator.group_by_day(observations).get(day)
        if not hours:
            return None

        series = {
            variable: [getattr(hour, field_name) for hour in hours]
            for field_name, variable in FIELD_MAP.items()
        }
        return {
            "date": day,
            "time": [hour.time for hour in hours],
            **series,
            "weather_code": [hour.weather_code for hour in hours],
            "level": [classify(hour_metrics(hour)).level for hour in hours],
        }
