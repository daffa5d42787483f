"""Parsing of the provider's hourly forecast envelope."""
import math
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from weather_analysis.models.observation import HourlyObservation

NAN = float("nan")

# Observation field -> provider hourly variable
FIELD_MAP = {
    "temperature": "temperature_2m",
    "wind_speed": "wind_speed_10m",
    "wind_gust": "wind_gusts_10m",
    "wind_direction": "wind_direction_10m",
    "humidity": "relative_humidity_2m",
    "pressure": "pressure_msl",
    "visibility": "visibility",
    "precipitation": "precipitation",
    "rain": "rain",
    "showers": "showers",
}


class MalformedPayloadError(ValueError):
    """Raised when the payload lacks the hourly time-series envelope."""


def _sample(values: Optional[Sequence[Any]], index: int) -> float:
    """Value at index, NaN when the array is absent, short, null or non-numeric."""
    if values is None or index >= len(values):
        return NAN
    value = values[index]
    if value is None or isinstance(value, bool):
        return NAN
    try:
        value = float(value)
    except (TypeError, ValueError):
        return NAN
    return value if math.isfinite(value) else NAN


def _code(values: Optional[Sequence[Any]], index: int) -> Optional[int]:
    value = _sample(values, index)
    return None if math.isnan(value) else int(value)


def parse_hourly_payload(payload: Dict[str, Any]) -> List[HourlyObservation]:
    """
    Convert a decoded provider response into hourly observations.

    Every hourly variable is an array aligned by index with ``hourly.time``
    (local ISO-8601 timestamps). Missing or short arrays yield missing
    samples, not zeros.

    Raises:
        MalformedPayloadError: If ``hourly.time`` is missing or not a list,
            or a timestamp cannot be parsed
    """
    if not isinstance(payload, dict):
        raise MalformedPayloadError("Payload is not a JSON object")
    hourly = payload.get("hourly")
    if not isinstance(hourly, dict) or not isinstance(hourly.get("time"), list):
        raise MalformedPayloadError("Payload has no hourly time series")

    arrays = {}
    for field_name, variable in FIELD_MAP.items():
        values = hourly.get(variable)
        arrays[field_name] = values if isinstance(values, list) else None
    codes = hourly.get("weather_code")
    codes = codes if isinstance(codes, list) else None

    observations = []
    for index, raw_time in enumerate(hourly["time"]):
        try:
            time = datetime.fromisoformat(raw_time)
        except (TypeError, ValueError) as e:
            raise MalformedPayloadError(f"Invalid timestamp {raw_time!r}") from e

        observations.append(HourlyObservation(
            time=time,
            weather_code=_code(codes, index),
            **{name: _sample(values, index) for name, values in arrays.items()},
        ))

    return observations
