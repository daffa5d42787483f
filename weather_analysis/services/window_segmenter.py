"""Service for splitting a day into windows of equal sailing level."""
import math
from typing import Dict, List, Tuple

from attrs import define

from weather_analysis.config import (
    DAY_PERIODS,
    GUST_FACTOR,
    WINDOW_END_HOUR,
    WINDOW_START_HOUR,
)
from weather_analysis.models.condition import (
    ConditionMetrics,
    ConditionReason,
    SailingCondition,
    SailingLevel,
    least_severe,
)
from weather_analysis.models.observation import HourlyObservation
from weather_analysis.models.weather import DayPeriodBest, DayWindow
from weather_analysis.services.condition_classifier import classify
from weather_analysis.services.hourly_aggregator import local_hour


@define(frozen=True)
class HourCondition:
    """Classification of a single hour."""

    hour: HourlyObservation
    condition: SailingCondition


def hour_metrics(hour: HourlyObservation) -> ConditionMetrics:
    """Instantaneous classifier metrics of one hour.

    A missing gust sample is estimated from the sustained wind, as for
    daily summaries.
    """
    gust = hour.wind_gust
    if not math.isfinite(gust):
        gust = hour.wind_speed * GUST_FACTOR
    return ConditionMetrics(
        wind_speed=hour.wind_speed,
        wind_gust=gust,
        weather_code=hour.weather_code,
        temperature=hour.temperature,
    )


class WindowSegmenter:
    """Service for intra-day sailing windows and best times per day part."""

    def __init__(
        self,
        start_hour: int = WINDOW_START_HOUR,
        end_hour: int = WINDOW_END_HOUR,
        periods: Dict[str, Tuple[int, int]] = DAY_PERIODS,
        timezone: str = "Europe/Paris",
    ):
        """
        Initialize segmenter.

        Args:
            start_hour: First local hour of the span (inclusive)
            end_hour: End of the span (exclusive)
            periods: Day parts as name -> (start hour, end hour)
            timezone: Zone that aware timestamps are read in
        """
        self.start_hour = start_hour
        self.end_hour = end_hour
        self.periods = periods
        self.timezone = timezone

    def classify_hours(self, hours: List[HourlyObservation]) -> List[HourCondition]:
        """Classify every hour inside the daytime span, in time order."""
        in_span = [
            hour for hour in hours
            if self.start_hour <= local_hour(hour.time, self.timezone) < self.end_hour
        ]
        in_span.sort(key=lambda hour: hour.time)
        return [HourCondition(hour=hour, condition=classify(hour_metrics(hour))) for hour in in_span]

    def build_windows(self, classified: List[HourCondition]) -> List[DayWindow]:
        """
        Merge consecutive hours of equal level into windows.

        A window closes at the start of the first hour with a different
        level; the last window closes at the last hour present, so partial
        days are not stretched to the end of the span. Missing hours are
        not reconstructed.
        """
        windows: List[DayWindow] = []
        if not classified:
            return windows

        opening = classified[0]
        count = 1
        for current in classified[1:]:
            if current.condition.level != opening.condition.level:
                windows.append(DayWindow(
                    start=opening.hour.time,
                    end=current.hour.time,
                    level=opening.condition.level,
                    reason=opening.condition.reason,
                    hour_count=count,
                ))
                opening = current
                count = 1
            else:
                count += 1

        windows.append(DayWindow(
            start=opening.hour.time,
            end=classified[-1].hour.time,
            level=opening.condition.level,
            reason=opening.condition.reason,
            hour_count=count,
        ))
        return windows

    def best_periods(self, classified: List[HourCondition]) -> List[DayPeriodBest]:
        """Least severe hour of each day part; moderate/no_data when a part is empty."""
        results = []
        for name, (start, end) in self.periods.items():
            candidates = [
                c for c in classified
                if start <= local_hour(c.hour.time, self.timezone) < end
            ]
            best = least_severe(candidates, key=lambda c: c.condition.level)
            if best is None:
                results.append(DayPeriodBest(
                    period=name,
                    level=SailingLevel.MODERATE,
                    reason=ConditionReason.NO_DATA,
                ))
            else:
                results.append(DayPeriodBest(
                    period=name,
                    level=best.condition.level,
                    reason=best.condition.reason,
                    time=best.hour.time,
                ))
        return results

    def segment(self, hours: List[HourlyObservation]) -> Tuple[List[DayWindow], List[DayPeriodBest]]:
        """Windows and best periods for one day's hourly observations."""
        classified = self.classify_hours(hours)
        return self.build_windows(classified), self.best_periods(classified)
