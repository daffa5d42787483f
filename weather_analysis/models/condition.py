"""Sailing condition value objects and their closed vocabularies."""
from enum import Enum
from typing import Iterable, Optional, TypeVar
from attrs import define

NAN = float("nan")


class SailingLevel(str, Enum):
    """Five-level sailing suitability, from least to most severe."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    DIFFICULT = "difficult"
    DANGEROUS = "dangerous"

    @property
    def severity(self) -> int:
        """Rank on the total order excellent < good < moderate < difficult < dangerous."""
        return _SEVERITY_ORDER.index(self)

    def is_less_severe_than(self, other: "SailingLevel") -> bool:
        return self.severity < other.severity


_SEVERITY_ORDER = [
    SailingLevel.EXCELLENT,
    SailingLevel.GOOD,
    SailingLevel.MODERATE,
    SailingLevel.DIFFICULT,
    SailingLevel.DANGEROUS,
]

T = TypeVar("T")


def least_severe(items: Iterable[T], key=lambda item: item) -> Optional[T]:
    """
    Pick the item whose level is least severe.

    The first item wins ties. ``key`` maps an item to its SailingLevel.

    Returns:
        The selected item, or None for an empty iterable
    """
    best = None
    for item in items:
        if best is None or key(item).is_less_severe_than(key(best)):
            best = item
    return best


class BeaufortBand(str, Enum):
    """Colour band derived from the Beaufort scale alone."""

    CALM = "calm"          # 0-1
    LIGHT = "light"        # 2-3
    MODERATE = "moderate"  # 4-5
    STRONG = "strong"      # 6-7
    GALE = "gale"          # 8+


class Activity(str, Enum):
    """Activity suggested for a sailing level."""

    STAY_IN_PORT = "stay_in_port"
    EXPERIENCED_CREW_ONLY = "experienced_crew_only"
    SHELTERED_SAILING = "sheltered_sailing"
    SAILING = "sailing"
    CRUISING = "cruising"
    SWIM_AND_RELAX = "swim_and_relax"


class ConditionReason(str, Enum):
    """Reason code for a classification, used as a translation key."""

    EXTREME_GUSTS = "extreme_gusts"
    STORM_FORCE = "storm_force"
    STRONG_WIND = "strong_wind"
    STRONG_GUSTS = "strong_gusts"
    SQUALLS = "squalls"
    FRESH_WIND = "fresh_wind"
    GUSTY_BREEZE = "gusty_breeze"
    GUSTS = "gusts"
    PRECIPITATION = "precipitation"
    IDEAL_BREEZE = "ideal_breeze"
    STEADY_BREEZE = "steady_breeze"
    FAIR_WEATHER = "fair_weather"
    CALM = "calm"
    FAIR_CONDITIONS = "fair_conditions"
    NO_DATA = "no_data"


@define(frozen=True)
class BeaufortForce:
    """Beaufort force with its standard description."""

    scale: int
    description: str


@define(frozen=True)
class ConditionMetrics:
    """Inputs of the classifier, for a whole day or a single hour."""

    wind_speed: float  # km/h, sustained (daily max or hourly value)
    wind_gust: float  # km/h
    weather_code: Optional[int]
    temperature: float  # °C

    def clamped(self) -> "ConditionMetrics":
        """Return metrics with negative wind zeroed and out-of-range codes dropped.

        Missing (NaN) wind stays NaN so it is never read as a calm.
        """
        code = self.weather_code
        if code is not None and not 0 <= code <= 99:
            code = None
        return ConditionMetrics(
            wind_speed=_non_negative(self.wind_speed),
            wind_gust=_non_negative(self.wind_gust),
            weather_code=code,
            temperature=self.temperature,
        )


def _non_negative(value: float) -> float:
    if value is None:
        return NAN
    if value < 0:
        return 0.0
    return float(value)


@define(frozen=True)
class SailingCondition:
    """Result of classifying one set of metrics."""

    level: SailingLevel
    activity: Activity
    reason: ConditionReason
    beaufort_scale: Optional[int]  # None without wind data
    beaufort_description: Optional[str]
    band: Optional[BeaufortBand]
    wind_speed: float
    wind_gust: float
    effective_wind: float
