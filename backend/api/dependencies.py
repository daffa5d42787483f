"""FastAPI dependencies for dependency injection."""
from functools import lru_cache
from typing import Optional

from backend.config import settings
from backend.data.weather_client import WeatherClient
from backend.services.forecast_service import ForecastService
from weather_analysis.services.day_analyzer import DayAnalyzer
from weather_analysis.services.daylight_service import DaylightService
from weather_analysis.services.hourly_aggregator import HourlyAggregator
from weather_analysis.services.window_segmenter import WindowSegmenter


@lru_cache()
def get_weather_client() -> WeatherClient:
    """Get cached weather client instance."""
    return WeatherClient()


@lru_cache()
def get_daylight_service() -> Optional[DaylightService]:
    """Get cached daylight service, None when daylight is disabled."""
    if not settings.include_daylight:
        return None
    return DaylightService(
        latitude=settings.latitude,
        longitude=settings.longitude,
        timezone=settings.timezone,
    )


def get_day_analyzer() -> DayAnalyzer:
    """Get day analyzer instance for the configured timezone."""
    return DayAnalyzer(
        aggregator=HourlyAggregator(timezone=settings.timezone),
        segmenter=WindowSegmenter(timezone=settings.timezone),
        daylight_service=get_daylight_service(),
    )


def get_forecast_service() -> ForecastService:
    """Get forecast service instance (stateless per request)."""
    return ForecastService(
        client=get_weather_client(),
        analyzer=get_day_analyzer(),
    )
