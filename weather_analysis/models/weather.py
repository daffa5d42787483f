"""Daily weather summary and day analysis models."""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from attrs import define, field

from weather_analysis.models.condition import SailingLevel, ConditionReason
from weather_analysis.utils.descriptors import NamedWind


class WindComment(str, Enum):
    GUSTY = "gusty"
    SHIFTING = "shifting"
    LIGHT = "light"
    STEADY_BREEZE = "steady_breeze"
    FRESH = "fresh"
    UNKNOWN = "unknown"


class ComfortComment(str, Enum):
    POOR_VISIBILITY = "poor_visibility"
    HOT = "hot"
    COOL = "cool"
    HUMID = "humid"
    WIDE_SWING = "wide_swing"
    PLEASANT = "pleasant"


class OverviewComment(str, Enum):
    STAY_ASHORE = "stay_ashore"
    SUNNY_DAY = "sunny_day"
    MIXED_SKIES = "mixed_skies"
    OVERCAST = "overcast"


@define(frozen=True)
class DayWindow:
    """Maximal run of in-span hours sharing one sailing level."""

    start: datetime
    end: datetime  # start of the next window, or the last in-span hour
    level: SailingLevel
    reason: ConditionReason  # reason of the hour that opened the window
    hour_count: int


@define(frozen=True)
class DayPeriodBest:
    """Least severe hour of a day part."""

    period: str  # "morning", "afternoon" or "evening"
    level: SailingLevel
    reason: ConditionReason
    time: Optional[datetime] = None  # None when the period has no data


@define(frozen=True)
class Daylight:
    """Sun times at the charter base (local time)."""

    dawn: datetime
    sunrise: datetime
    sunset: datetime
    dusk: datetime


@define(frozen=True)
class DayStatistics:
    """Hourly statistics of one local day, beyond the calendar fields."""

    mean_direction: float  # NaN without direction samples
    direction_variability: float
    mean_wind_speed: float
    peak_gust: float
    peak_gust_time: Optional[datetime]
    sunny_hours: int
    mean_visibility: float
    mean_humidity: float
    thermal_amplitude: float


@define(frozen=True)
class DayAnalysis:
    """Derived analysis attached to one DailyWeather."""

    mean_direction: float
    dominant_wind: NamedWind
    direction_variability: float
    mean_wind_speed: float
    peak_gust: float
    peak_gust_time: Optional[datetime]
    sunny_hours: int
    mean_visibility: float
    mean_humidity: float
    thermal_amplitude: float
    wind_comment: WindComment
    comfort_comment: ComfortComment
    overview_comment: OverviewComment
    windows: List[DayWindow] = field(factory=list)
    best_periods: List[DayPeriodBest] = field(factory=list)
    daylight: Optional[Daylight] = None


@define(frozen=True)
class DailyWeather:
    """
    Calendar summary of one local day.

    Field names follow the provider's daily variables so the presentation
    layer can use either source interchangeably.
    """

    date: str  # "YYYY-MM-DD", local
    temperature_2m_max: float
    temperature_2m_min: float
    wind_speed_10m_max: float
    wind_gusts_10m_max: float
    wind_direction_10m_dominant: float
    weather_code: Optional[int]
    surface_pressure: float
    analysis: Optional[DayAnalysis] = None
