"""Synthetic daily weather used when the forecast provider is unavailable."""
from datetime import date, timedelta
from typing import List, Optional

import numpy as np

from weather_analysis.config import (
    FALLBACK_BASE_PRESSURE,
    FALLBACK_BASE_TEMPERATURE,
    FALLBACK_WIND_RANGE,
    GUST_FACTOR,
)
from weather_analysis.models.weather import DailyWeather


class FallbackGenerator:
    """Service for plausible summer weather around the charter base.

    Records have the same fields and invariants as real daily summaries
    (min <= max temperature, gusts >= wind) so downstream classification
    never needs to special-case them.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize generator.

        Args:
            seed: Seed for reproducible output, None for fresh randomness
        """
        self.rng = np.random.default_rng(seed)

    def _weather_code(self) -> int:
        """Mostly clear skies, sometimes partly cloudy or overcast."""
        draw = self.rng.random()
        if draw > 0.8:
            return 3
        if draw > 0.5:
            return 1
        return 0

    def generate_day(self, day: date) -> DailyWeather:
        """Synthetic summary for one date."""
        temp_max = round(
            FALLBACK_BASE_TEMPERATURE
            + (self.rng.random() - 0.5) * 6
            + self.rng.random() * 5
        )
        temp_min = round(temp_max - 5 - self.rng.random() * 3)

        wind_low, wind_high = FALLBACK_WIND_RANGE
        wind = round(self.rng.uniform(wind_low, wind_high))
        gust = round(wind * GUST_FACTOR * (1 + self.rng.random() * 0.25))

        return DailyWeather(
            date=day.isoformat(),
            temperature_2m_max=float(temp_max),
            temperature_2m_min=float(min(temp_min, temp_max)),
            wind_speed_10m_max=float(wind),
            wind_gusts_10m_max=float(max(gust, wind)),
            wind_direction_10m_dominant=float(round(self.rng.random() * 360) % 360),
            weather_code=self._weather_code(),
            surface_pressure=float(round(FALLBACK_BASE_PRESSURE + (self.rng.random() - 0.5) * 20)),
        )

    def generate(self, start: date, days: int) -> List[DailyWeather]:
        """
        Synthetic summaries for ``days`` consecutive dates from ``start``.

        Returns:
            DailyWeather list without analysis, in ascending date order
        """
        return [self.generate_day(start + timedelta(days=offset)) for offset in range(days)]
