"""API routes for ad-hoc sailing condition classification."""
from typing import Optional

import attrs
from fastapi import APIRouter, Query

from backend.schemas.forecast import SailingConditionSchema
from weather_analysis.models.condition import ConditionMetrics
from weather_analysis.services.condition_classifier import classify

router = APIRouter(prefix="/conditions", tags=["conditions"])


@router.get("/classify", response_model=SailingConditionSchema)
async def classify_conditions(
    wind_speed: float = Query(..., ge=0, description="Sustained wind in km/h"),
    wind_gust: float = Query(0, ge=0, description="Gust in km/h"),
    weather_code: Optional[int] = Query(None, ge=0, le=99, description="WMO weather code"),
    temperature: float = Query(..., description="Temperature in °C"),
) -> SailingConditionSchema:
    """
    Classify a set of metrics into a sailing level.

    Same rules as the calendar: gust and weather-code rules take
    precedence over the sustained wind.
    """
    condition = classify(ConditionMetrics(
        wind_speed=wind_speed,
        wind_gust=wind_gust,
        weather_code=weather_code,
        temperature=temperature,
    ))
    return attrs.asdict(condition)
