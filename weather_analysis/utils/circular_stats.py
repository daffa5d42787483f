"""Circular statistics for compass directions."""
from typing import Iterable
import numpy as np

EMPTY_MEAN_DIRECTION = 180.0


def _finite_radians(angles: Iterable[float]) -> np.ndarray:
    values = np.asarray(list(angles), dtype=np.float64)
    values = values[np.isfinite(values)]
    return np.radians(values)


def circular_mean(angles: Iterable[float]) -> float:
    """
    Mean direction of angular samples.

    Averages the unit vectors of each angle, so 350° and 10° average to 0°
    rather than 180°.

    Args:
        angles: Directions in degrees (non-finite samples are ignored)

    Returns:
        Mean direction in degrees [0, 360). Empty input returns 180, which
        callers must treat as "no data".
    """
    radians = _finite_radians(angles)
    if len(radians) == 0:
        return EMPTY_MEAN_DIRECTION

    mean = np.degrees(np.arctan2(np.sin(radians).mean(), np.cos(radians).mean()))
    # Normalize to [0, 360)
    return float((mean + 360.0) % 360.0)


def circular_std(angles: Iterable[float], mean_angle: float) -> float:
    """
    Spread of angular samples around a mean direction.

    Sample standard deviation (n - 1) of the wrapped differences to
    ``mean_angle``, in degrees. Returns 0 for fewer than two samples.
    """
    radians = _finite_radians(angles)
    if len(radians) <= 1:
        return 0.0

    diffs = (radians - np.radians(mean_angle)) % (2 * np.pi)
    diffs = np.where(diffs > np.pi, diffs - 2 * np.pi, diffs)
    return float(np.degrees(np.std(diffs, ddof=1)))
