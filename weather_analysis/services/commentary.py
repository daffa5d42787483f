"""Threshold rules producing the day commentary codes."""
import math

from weather_analysis.config import (
    BREEZE_MEAN_WIND,
    COOL_TEMPERATURE,
    GUSTY_DAY_GUST,
    HOT_TEMPERATURE,
    HUMID_PERCENT,
    LIGHT_MEAN_WIND,
    MIXED_SKIES_HOURS,
    POOR_VISIBILITY_M,
    SHIFTING_DIRECTION_STD,
    SUNNY_DAY_HOURS,
    WIDE_THERMAL_AMPLITUDE,
)
from weather_analysis.models.condition import SailingLevel
from weather_analysis.models.weather import (
    ComfortComment,
    DayStatistics,
    OverviewComment,
    WindComment,
)


def wind_comment(stats: DayStatistics) -> WindComment:
    if not math.isfinite(stats.mean_wind_speed):
        return WindComment.UNKNOWN
    if stats.peak_gust >= GUSTY_DAY_GUST:
        return WindComment.GUSTY
    if stats.direction_variability >= SHIFTING_DIRECTION_STD:
        return WindComment.SHIFTING
    if stats.mean_wind_speed < LIGHT_MEAN_WIND:
        return WindComment.LIGHT
    if stats.mean_wind_speed <= BREEZE_MEAN_WIND:
        return WindComment.STEADY_BREEZE
    return WindComment.FRESH


def comfort_comment(stats: DayStatistics, temperature_max: float) -> ComfortComment:
    """Comfort on board; NaN inputs never trigger a rule."""
    if stats.mean_visibility < POOR_VISIBILITY_M:
        return ComfortComment.POOR_VISIBILITY
    if temperature_max >= HOT_TEMPERATURE:
        return ComfortComment.HOT
    if temperature_max < COOL_TEMPERATURE:
        return ComfortComment.COOL
    if stats.mean_humidity >= HUMID_PERCENT:
        return ComfortComment.HUMID
    if stats.thermal_amplitude >= WIDE_THERMAL_AMPLITUDE:
        return ComfortComment.WIDE_SWING
    return ComfortComment.PLEASANT


def overview_comment(stats: DayStatistics, level: SailingLevel) -> OverviewComment:
    if level in (SailingLevel.DIFFICULT, SailingLevel.DANGEROUS):
        return OverviewComment.STAY_ASHORE
    if stats.sunny_hours >= SUNNY_DAY_HOURS:
        return OverviewComment.SUNNY_DAY
    if stats.sunny_hours >= MIXED_SKIES_HOURS:
        return OverviewComment.MIXED_SKIES
    return OverviewComment.OVERCAST
