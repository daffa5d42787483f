"""Categorical descriptors for weather codes, wind direction and wind speed."""
import math
from enum import Enum
from typing import Optional

from weather_analysis.config import VARIABLE_DIRECTION_STD


class WeatherCategory(str, Enum):
    """Coarse family of a WMO weather interpretation code."""

    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    RAIN_SHOWERS = "rain_showers"
    SNOW_SHOWERS = "snow_showers"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


class WindSpeedCategory(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


class NamedWind(str, Enum):
    """Winds of the Mediterranean rose, named by the direction they blow from."""

    TRAMONTANE = "tramontane"  # N
    GREGAL = "gregal"          # NE
    LEVANT = "levant"          # E
    SIROCCO = "sirocco"        # SE
    OSTRO = "ostro"            # S
    LIBECCIO = "libeccio"      # SW
    PONANT = "ponant"          # W
    MISTRAL = "mistral"        # NW
    VARIABLE = "variable"
    UNKNOWN = "unknown"


COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

_WIND_ROSE = [
    NamedWind.TRAMONTANE,
    NamedWind.GREGAL,
    NamedWind.LEVANT,
    NamedWind.SIROCCO,
    NamedWind.OSTRO,
    NamedWind.LIBECCIO,
    NamedWind.PONANT,
    NamedWind.MISTRAL,
]

# (highest code in family, category), WMO code table order
_WEATHER_CODE_LIMITS = [
    (0, WeatherCategory.CLEAR),
    (3, WeatherCategory.PARTLY_CLOUDY),
    (48, WeatherCategory.FOG),
    (57, WeatherCategory.DRIZZLE),
    (67, WeatherCategory.RAIN),
    (77, WeatherCategory.SNOW),
    (82, WeatherCategory.RAIN_SHOWERS),
    (86, WeatherCategory.SNOW_SHOWERS),
    (99, WeatherCategory.THUNDERSTORM),
]


def weather_category(code: Optional[int]) -> WeatherCategory:
    """Map a WMO weather code (0-99) to its family."""
    if code is None or code < 0:
        return WeatherCategory.UNKNOWN
    for upper, category in _WEATHER_CODE_LIMITS:
        if code <= upper:
            return category
    return WeatherCategory.UNKNOWN


def _sector(degrees: float) -> int:
    """Index of the 45° sector centred on N, NE, ... NW."""
    return int(((degrees % 360.0) + 22.5) // 45.0) % 8


def compass_point(degrees: float) -> Optional[str]:
    """8-point compass label for a direction, None without data."""
    if degrees is None or not math.isfinite(degrees):
        return None
    return COMPASS_POINTS[_sector(degrees)]


def wind_speed_category(speed_kmh: float) -> Optional[WindSpeedCategory]:
    if speed_kmh is None or not math.isfinite(speed_kmh):
        return None
    if speed_kmh < 5:
        return WindSpeedCategory.LIGHT
    if speed_kmh < 15:
        return WindSpeedCategory.MODERATE
    if speed_kmh < 25:
        return WindSpeedCategory.STRONG
    return WindSpeedCategory.VERY_STRONG


def named_wind(mean_direction: float, variability: float) -> NamedWind:
    """
    Name the day's dominant wind.

    Args:
        mean_direction: Circular mean direction (FROM), NaN without data
        variability: Circular standard deviation in degrees

    Returns:
        Wind of the rose, VARIABLE when the direction keeps shifting
    """
    if mean_direction is None or not math.isfinite(mean_direction):
        return NamedWind.UNKNOWN
    if variability >= VARIABLE_DIRECTION_STD:
        return NamedWind.VARIABLE
    return _WIND_ROSE[_sector(mean_direction)]
