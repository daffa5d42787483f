"""Beaufort scale lookup and colour banding."""
import math

from weather_analysis.config import BEAUFORT_LIMITS, BEAUFORT_DESCRIPTIONS
from weather_analysis.models.condition import BeaufortForce, BeaufortBand


def beaufort_scale(speed_kmh: float) -> int:
    """
    Beaufort force for a sustained wind speed.

    Force 0 is below 1 km/h; every other band includes its upper bound
    (5 km/h is force 1, 5.1 km/h is force 2). Negative or non-finite
    speeds are clamped to 0.
    """
    if speed_kmh is None or not math.isfinite(speed_kmh) or speed_kmh < 0:
        speed_kmh = 0.0

    if speed_kmh < BEAUFORT_LIMITS[0]:
        return 0
    for scale, upper in enumerate(BEAUFORT_LIMITS[1:], start=1):
        if speed_kmh <= upper:
            return scale
    return 12


def beaufort(speed_kmh: float) -> BeaufortForce:
    """Beaufort force and description for a wind speed in km/h."""
    scale = beaufort_scale(speed_kmh)
    return BeaufortForce(scale=scale, description=BEAUFORT_DESCRIPTIONS[scale])


def beaufort_band(scale: int) -> BeaufortBand:
    """Colour band for a Beaufort force, independent of the sailing level."""
    if scale <= 1:
        return BeaufortBand.CALM
    if scale <= 3:
        return BeaufortBand.LIGHT
    if scale <= 5:
        return BeaufortBand.MODERATE
    if scale <= 7:
        return BeaufortBand.STRONG
    return BeaufortBand.GALE
