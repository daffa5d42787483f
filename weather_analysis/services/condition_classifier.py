"""Sailing condition classifier based on Beaufort force, gusts and weather code."""
import math
from typing import Tuple

from weather_analysis.config import (
    CALM_BEAUFORT,
    CALM_EFFECTIVE_WIND,
    CLEAR_CODES,
    DANGEROUS_BEAUFORT,
    DANGEROUS_GUST,
    DIFFICULT_BEAUFORT,
    DIFFICULT_GUST,
    EXCELLENT_MIN_TEMPERATURE,
    EXCELLENT_WIND_RANGE,
    GOOD_CLEAR_MIN_TEMPERATURE,
    GOOD_WIND_MIN_TEMPERATURE,
    GOOD_WIND_RANGE,
    GUST_FACTOR,
    GUST_WEIGHT,
    MODERATE_BEAUFORT,
    MODERATE_EFFECTIVE_WIND,
    MODERATE_GUST,
    RAIN_SNOW_CODES,
    SHOWER_STORM_CODES,
)
from weather_analysis.models.condition import (
    Activity,
    ConditionMetrics,
    ConditionReason,
    SailingCondition,
    SailingLevel,
)
from weather_analysis.utils.beaufort import beaufort, beaufort_band


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def effective_wind(wind_speed: float, wind_gust: float) -> float:
    """Sustained wind, raised by strong gusts: max(wind, round(0.7 * gust))."""
    return max(wind_speed, round_half_up(GUST_WEIGHT * wind_gust))


def _in_range(value: float, bounds: Tuple[float, float]) -> bool:
    return bounds[0] <= value <= bounds[1]


def no_data_condition(wind_gust: float = float("nan")) -> SailingCondition:
    """Neutral result for metrics without a sustained wind sample."""
    return SailingCondition(
        level=SailingLevel.MODERATE,
        activity=Activity.SHELTERED_SAILING,
        reason=ConditionReason.NO_DATA,
        beaufort_scale=None,
        beaufort_description=None,
        band=None,
        wind_speed=float("nan"),
        wind_gust=wind_gust,
        effective_wind=float("nan"),
    )


def classify(metrics: ConditionMetrics) -> SailingCondition:
    """
    Classify one set of metrics into a sailing level.

    The same rules apply to whole-day maxima and to a single hour's
    values. Rules are evaluated in order and the first match wins, so
    gust and weather-code rules override otherwise calm wind.

    Args:
        metrics: Wind, gust, weather code and temperature; negative values
            are clamped before classification. Without a wind sample the
            result is moderate with reason NO_DATA. A missing gust is
            estimated from the wind

    Returns:
        SailingCondition with level, activity, reason code and the numbers
        needed to render it
    """
    metrics = metrics.clamped()
    wind = metrics.wind_speed
    gust = metrics.wind_gust
    if not math.isfinite(wind):
        return no_data_condition(gust)
    if not math.isfinite(gust):
        gust = wind * GUST_FACTOR
    code = metrics.weather_code
    temperature = metrics.temperature

    force = beaufort(wind)
    scale = force.scale
    effective = effective_wind(wind, gust)

    # NaN temperatures fail every comparison and fall through to the
    # wind-only rules.
    if gust >= DANGEROUS_GUST:
        level, activity, reason = SailingLevel.DANGEROUS, Activity.STAY_IN_PORT, ConditionReason.EXTREME_GUSTS
    elif scale >= DANGEROUS_BEAUFORT:
        level, activity, reason = SailingLevel.DANGEROUS, Activity.STAY_IN_PORT, ConditionReason.STORM_FORCE
    elif scale >= DIFFICULT_BEAUFORT:
        level, activity, reason = SailingLevel.DIFFICULT, Activity.EXPERIENCED_CREW_ONLY, ConditionReason.STRONG_WIND
    elif gust >= DIFFICULT_GUST:
        level, activity, reason = SailingLevel.DIFFICULT, Activity.EXPERIENCED_CREW_ONLY, ConditionReason.STRONG_GUSTS
    elif code in SHOWER_STORM_CODES:
        level, activity, reason = SailingLevel.DIFFICULT, Activity.EXPERIENCED_CREW_ONLY, ConditionReason.SQUALLS
    elif scale >= MODERATE_BEAUFORT:
        level, activity, reason = SailingLevel.MODERATE, Activity.SHELTERED_SAILING, ConditionReason.FRESH_WIND
    elif effective >= MODERATE_EFFECTIVE_WIND:
        level, activity, reason = SailingLevel.MODERATE, Activity.SHELTERED_SAILING, ConditionReason.GUSTY_BREEZE
    elif gust >= MODERATE_GUST:
        level, activity, reason = SailingLevel.MODERATE, Activity.SHELTERED_SAILING, ConditionReason.GUSTS
    elif code in RAIN_SNOW_CODES:
        level, activity, reason = SailingLevel.MODERATE, Activity.SHELTERED_SAILING, ConditionReason.PRECIPITATION
    elif (
        _in_range(effective, EXCELLENT_WIND_RANGE)
        and code in CLEAR_CODES
        and temperature > EXCELLENT_MIN_TEMPERATURE
    ):
        level, activity, reason = SailingLevel.EXCELLENT, Activity.SAILING, ConditionReason.IDEAL_BREEZE
    elif _in_range(effective, GOOD_WIND_RANGE) and temperature > GOOD_WIND_MIN_TEMPERATURE:
        level, activity, reason = SailingLevel.GOOD, Activity.SAILING, ConditionReason.STEADY_BREEZE
    elif code in CLEAR_CODES and temperature >= GOOD_CLEAR_MIN_TEMPERATURE:
        level, activity, reason = SailingLevel.GOOD, Activity.CRUISING, ConditionReason.FAIR_WEATHER
    elif effective < CALM_EFFECTIVE_WIND or scale <= CALM_BEAUFORT:
        level, activity, reason = SailingLevel.MODERATE, Activity.SWIM_AND_RELAX, ConditionReason.CALM
    else:
        level, activity, reason = SailingLevel.GOOD, Activity.CRUISING, ConditionReason.FAIR_CONDITIONS

    return SailingCondition(
        level=level,
        activity=activity,
        reason=reason,
        beaufort_scale=scale,
        beaufort_description=force.description,
        band=beaufort_band(scale),
        wind_speed=wind,
        wind_gust=gust,
        effective_wind=float(effective),
    )
