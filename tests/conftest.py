"""Shared fixtures for all tests."""
from datetime import datetime, timedelta

import pytest

from weather_analysis.models.observation import HourlyObservation


def build_hours(day: str = "2024-07-01", hours=range(24), **values):
    """
    Hourly observations for one local day.

    Each keyword is either a constant or a callable hour -> value.
    """
    start = datetime.fromisoformat(day)
    observations = []
    for hour in hours:
        fields = {
            name: (value(hour) if callable(value) else value)
            for name, value in values.items()
        }
        observations.append(HourlyObservation(time=start + timedelta(hours=hour), **fields))
    return observations


@pytest.fixture
def make_hours():
    """Factory fixture for one day of hourly observations."""
    return build_hours


@pytest.fixture
def fair_day():
    """24 identical light-breeze, sunny hours (an ideal sailing day)."""
    return build_hours(
        temperature=24.0,
        wind_speed=10.0,
        wind_gust=12.0,
        wind_direction=315.0,
        humidity=60.0,
        pressure=1016.0,
        visibility=20000.0,
        precipitation=0.0,
        rain=0.0,
        showers=0.0,
        weather_code=1,
    )


@pytest.fixture
def calm_morning_windy_afternoon():
    """Excellent conditions 06-11, strong wind and gusts from 12:00."""
    return build_hours(
        temperature=24.0,
        wind_speed=lambda h: 8.0 if h < 12 else 45.0,
        wind_gust=lambda h: 10.0 if h < 12 else 55.0,
        wind_direction=200.0,
        rain=0.0,
        showers=0.0,
        weather_code=1,
    )
