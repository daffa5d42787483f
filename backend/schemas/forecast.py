"""Pydantic schemas for forecast calendar data."""
from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional

from weather_analysis.models.condition import (
    Activity,
    BeaufortBand,
    ConditionReason,
    SailingLevel,
)
from weather_analysis.models.weather import ComfortComment, OverviewComment, WindComment
from weather_analysis.services.special_events import SpecialEvent
from weather_analysis.utils.descriptors import NamedWind, WeatherCategory, WindSpeedCategory


class SailingConditionSchema(BaseModel):
    """Sailing condition of a day or an hour."""

    level: SailingLevel
    activity: Activity
    reason: ConditionReason
    beaufort_scale: Optional[int] = None  # null without wind data
    beaufort_description: Optional[str] = None
    band: Optional[BeaufortBand] = None
    wind_speed: float  # km/h
    wind_gust: float  # km/h
    effective_wind: float  # km/h


class DayWindowSchema(BaseModel):
    start: datetime
    end: datetime
    level: SailingLevel
    reason: ConditionReason
    hour_count: int


class DayPeriodBestSchema(BaseModel):
    period: str  # "morning", "afternoon", "evening"
    level: SailingLevel
    reason: ConditionReason
    time: Optional[datetime] = None


class DaylightSchema(BaseModel):
    dawn: datetime
    sunrise: datetime
    sunset: datetime
    dusk: datetime


class DayAnalysisSchema(BaseModel):
    """Hourly analysis of one day. NaN statistics serialize as null."""

    mean_direction: float
    dominant_wind: NamedWind
    direction_variability: float
    mean_wind_speed: float
    peak_gust: float
    peak_gust_time: Optional[datetime] = None
    sunny_hours: int
    mean_visibility: float  # meters
    mean_humidity: float  # %
    thermal_amplitude: float  # °C
    wind_comment: WindComment
    comfort_comment: ComfortComment
    overview_comment: OverviewComment
    windows: List[DayWindowSchema]
    best_periods: List[DayPeriodBestSchema]
    daylight: Optional[DaylightSchema] = None


class ForecastDay(BaseModel):
    """A single calendar day of the forecast."""

    date: str  # "YYYY-MM-DD"
    temperature_2m_max: float
    temperature_2m_min: float
    wind_speed_10m_max: float
    wind_gusts_10m_max: float
    wind_direction_10m_dominant: float
    weather_code: Optional[int] = None
    surface_pressure: float
    condition: SailingConditionSchema
    weather_category: WeatherCategory
    compass_point: Optional[str] = None
    wind_speed_category: Optional[WindSpeedCategory] = None
    special_event: Optional[SpecialEvent] = None
    analysis: Optional[DayAnalysisSchema] = None


class ForecastResponse(BaseModel):
    """Response schema for the forecast calendar."""

    location: str
    latitude: float
    longitude: float
    timezone: str
    days: List[ForecastDay]


class HourlySeriesResponse(BaseModel):
    """Response schema for one day's hourly values, aligned by index."""

    date: str
    time: List[datetime]
    temperature_2m: List[float]
    wind_speed_10m: List[float]
    wind_gusts_10m: List[float]
    wind_direction_10m: List[float]
    relative_humidity_2m: List[float]
    pressure_msl: List[float]
    visibility: List[float]
    precipitation: List[float]
    rain: List[float]
    showers: List[float]
    weather_code: List[Optional[int]]
    level: List[SailingLevel]


class SpecialEventResponse(BaseModel):
    date: str
    special_event: Optional[SpecialEvent] = None
