"""Service for reducing hourly forecasts to daily summaries."""
import logging
from collections import Counter
from datetime import datetime
from typing import Callable, Dict, List, Optional

import attrs
import numpy as np
import pandas as pd

from weather_analysis.config import CLEAR_CODES, GUST_FACTOR
from weather_analysis.models.observation import HourlyObservation
from weather_analysis.models.weather import DailyWeather, DayStatistics
from weather_analysis.utils.circular_stats import circular_mean, circular_std

logger = logging.getLogger(__name__)

NAN = float("nan")

DayKeyFunc = Callable[[datetime, str], str]


def local_day_key(timestamp: datetime, timezone: str) -> str:
    """
    Local calendar date ("YYYY-MM-DD") of a timestamp.

    Naive timestamps are already local wall-clock time for ``timezone``
    (the provider is queried with that timezone) and are used as-is.
    Aware timestamps are converted into ``timezone`` first.
    """
    ts = pd.Timestamp(timestamp)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(timezone)
    return ts.strftime("%Y-%m-%d")


def local_hour(timestamp: datetime, timezone: str) -> int:
    """Local wall-clock hour of a timestamp, same convention as local_day_key."""
    ts = pd.Timestamp(timestamp)
    if ts.tzinfo is not None:
        ts = ts.tz_convert(timezone)
    return ts.hour


def dominant_code(codes: List[Optional[int]]) -> Optional[int]:
    """Most frequent weather code; the first one seen wins ties."""
    counts = Counter(code for code in codes if code is not None)
    if not counts:
        return None
    # most_common keeps first-encountered order among equal counts
    return counts.most_common(1)[0][0]


def _finite(series: pd.Series) -> pd.Series:
    return series[np.isfinite(series.astype(np.float64))]


def _reduce(series: pd.Series, how: str) -> float:
    """Reduce finite samples; NaN when there are none."""
    values = _finite(series)
    if values.empty:
        return NAN
    return float(getattr(values, how)())


class HourlyAggregator:
    """Service for grouping hourly observations into local days.

    Each day keeps its own hourly observations so later stages (window
    segmentation, commentary) can work on the same groups.
    """

    def __init__(
        self,
        timezone: str = "Europe/Paris",
        day_key: DayKeyFunc = local_day_key,
    ):
        """
        Initialize aggregator.

        Args:
            timezone: IANA timezone the local days are taken in
            day_key: Function mapping (timestamp, timezone) to "YYYY-MM-DD"
        """
        self.timezone = timezone
        self.day_key = day_key

    def _to_frame(self, hours: List[HourlyObservation]) -> pd.DataFrame:
        """Convert observations to a frame with one row per hour."""
        frame = pd.DataFrame(
            [attrs.asdict(hour, recurse=False) for hour in hours],
            columns=[a.name for a in attrs.fields(HourlyObservation)],
        )
        numeric = frame.columns.drop(["time", "weather_code"])
        frame[numeric] = frame[numeric].astype(np.float64)
        return frame

    def group_by_day(
        self, observations: List[HourlyObservation],
    ) -> Dict[str, List[HourlyObservation]]:
        """
        Group observations by local date.

        Returns:
            Dict mapping "YYYY-MM-DD" to that day's observations, in
            ascending date order and input order within a day
        """
        if not observations:
            return {}

        keys = pd.Series([self.day_key(o.time, self.timezone) for o in observations])
        groups: Dict[str, List[HourlyObservation]] = {}
        for day, group in keys.groupby(keys, sort=True):
            groups[day] = [observations[i] for i in group.index]
        return groups

    def summarize_day(self, date: str, hours: List[HourlyObservation]) -> DailyWeather:
        """
        Build the calendar summary of one day.

        Wind and gust maxima are taken independently. Without gust samples
        the gust maximum is estimated as 1.3x the wind maximum; gusts are
        never reported below the sustained maximum.
        """
        frame = self._to_frame(hours)

        wind_max = _reduce(frame["wind_speed"], "max")
        gust_max = _reduce(frame["wind_gust"], "max")
        if np.isnan(gust_max):
            gust_max = wind_max * GUST_FACTOR
        elif not np.isnan(wind_max):
            gust_max = max(gust_max, wind_max)

        return DailyWeather(
            date=date,
            temperature_2m_max=_reduce(frame["temperature"], "max"),
            temperature_2m_min=_reduce(frame["temperature"], "min"),
            wind_speed_10m_max=wind_max,
            wind_gusts_10m_max=gust_max,
            wind_direction_10m_dominant=self._mean_direction(frame),
            weather_code=dominant_code([hour.weather_code for hour in hours]),
            surface_pressure=_reduce(frame["pressure"], "mean"),
        )

    def _mean_direction(self, frame: pd.DataFrame) -> float:
        directions = _finite(frame["wind_direction"])
        if directions.empty:
            return NAN
        return circular_mean(directions.values)

    def day_statistics(self, hours: List[HourlyObservation]) -> DayStatistics:
        """Compute the hourly statistics used by the day analysis."""
        frame = self._to_frame(hours)

        directions = _finite(frame["wind_direction"])
        if directions.empty:
            mean_direction = NAN
            variability = NAN
        else:
            mean_direction = circular_mean(directions.values)
            variability = circular_std(directions.values, mean_direction)

        gusts = _finite(frame["wind_gust"])
        if gusts.empty:
            peak_gust = NAN
            peak_gust_time = None
        else:
            # idxmax returns the first hour attaining the maximum
            peak_index = gusts.idxmax()
            peak_gust = float(gusts[peak_index])
            peak_gust_time = hours[peak_index].time

        sunny_hours = sum(
            1 for hour in hours
            if hour.weather_code in CLEAR_CODES and hour.is_dry
        )

        temp_max = _reduce(frame["temperature"], "max")
        temp_min = _reduce(frame["temperature"], "min")

        return DayStatistics(
            mean_direction=mean_direction,
            direction_variability=variability,
            mean_wind_speed=_reduce(frame["wind_speed"], "mean"),
            peak_gust=peak_gust,
            peak_gust_time=peak_gust_time,
            sunny_hours=sunny_hours,
            mean_visibility=_reduce(frame["visibility"], "mean"),
            mean_humidity=_reduce(frame["humidity"], "mean"),
            thermal_amplitude=temp_max - temp_min,
        )

    def aggregate(self, observations: List[HourlyObservation]) -> List[DailyWeather]:
        """
        Reduce a flat hourly series to one DailyWeather per local day.

        Returns:
            Daily summaries in ascending date order (without analysis)
        """
        groups = self.group_by_day(observations)
        logger.debug("Aggregating %d hours into %d days", len(observations), len(groups))
        return [self.summarize_day(day, hours) for day, hours in groups.items()]
