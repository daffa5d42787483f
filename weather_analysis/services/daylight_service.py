"""Service for sun times at the charter base."""
import logging
from datetime import date
from typing import Dict, Optional

from astral import Observer
from astral.sun import sun

from weather_analysis.config import DAYLIGHT_CACHE_SIZE, DAYLIGHT_DEPRESSION_ANGLE
from weather_analysis.models.weather import Daylight

logger = logging.getLogger(__name__)


class DaylightService:
    """
    Service for dawn, sunrise, sunset and dusk at a fixed location.

    Uses the astral library; times are returned as timezone-aware
    datetimes in the base's timezone.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        timezone: str = "Europe/Paris",
        depression_angle: float = DAYLIGHT_DEPRESSION_ANGLE,
        cache_size: int = DAYLIGHT_CACHE_SIZE,
    ):
        """
        Initialize the daylight service.

        Args:
            latitude: Latitude in degrees (-90 to 90)
            longitude: Longitude in degrees (-180 to 180)
            timezone: IANA timezone for the returned times
            depression_angle: Sun depression angle for dawn/dusk.
                              6 = civil twilight (enough light to rig and sail)
            cache_size: Dates kept in the cache; the oldest entry is evicted first
        """
        self.observer = Observer(latitude=latitude, longitude=longitude)
        self.timezone = timezone
        self.depression_angle = depression_angle
        self.cache_size = cache_size
        self._cache: Dict[date, Optional[Daylight]] = {}

    def get_daylight(self, day: date) -> Optional[Daylight]:
        """
        Sun times for a date.

        Returns:
            Daylight, or None when the sun does not rise or set (polar day
            or night)
        """
        if day in self._cache:
            return self._cache[day]

        try:
            sun_times = sun(
                self.observer,
                date=day,
                tzinfo=self.timezone,
                dawn_dusk_depression=self.depression_angle,
            )
            result = Daylight(
                dawn=sun_times["dawn"],
                sunrise=sun_times["sunrise"],
                sunset=sun_times["sunset"],
                dusk=sun_times["dusk"],
            )
        except ValueError:
            logger.debug("No sunrise/sunset on %s", day)
            result = None

        if len(self._cache) >= self.cache_size:
            self._cache.pop(next(iter(self._cache)))
        self._cache[day] = result
        return result

    def clear_cache(self) -> None:
        """Clear the sun times cache."""
        self._cache.clear()
