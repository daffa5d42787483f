"""Hourly observation model."""
from datetime import datetime
from attrs import define
from typing import Optional

NAN = float("nan")


@define(frozen=True)
class HourlyObservation:
    """
    One hourly forecast instant for the charter base.

    Missing samples are NaN (None for the weather code), never zero:
    zero is a valid physical value.
    """

    time: datetime  # local wall-clock time (naive) or timezone-aware
    temperature: float = NAN  # °C at 2 m
    wind_speed: float = NAN  # km/h, 10 m sustained
    wind_gust: float = NAN  # km/h, 10 m
    wind_direction: float = NAN  # degrees, direction the wind blows FROM
    humidity: float = NAN  # % relative humidity
    pressure: float = NAN  # hPa, mean sea level
    visibility: float = NAN  # meters
    precipitation: float = NAN  # mm
    rain: float = NAN  # mm
    showers: float = NAN  # mm
    weather_code: Optional[int] = None  # WMO 0-99

    @property
    def is_dry(self) -> bool:
        """No rain and no showers recorded (missing samples do not count)."""
        return not (self.rain > 0) and not (self.showers > 0)
