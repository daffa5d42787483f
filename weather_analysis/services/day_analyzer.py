"""Service assembling the day analysis and daily sailing condition."""
import logging
from datetime import date
from typing import List, Optional

import attrs

from weather_analysis.models.condition import ConditionMetrics, SailingCondition
from weather_analysis.models.observation import HourlyObservation
from weather_analysis.models.weather import DailyWeather, DayAnalysis
from weather_analysis.services.commentary import comfort_comment, overview_comment, wind_comment
from weather_analysis.services.condition_classifier import classify
from weather_analysis.services.daylight_service import DaylightService
from weather_analysis.services.hourly_aggregator import HourlyAggregator
from weather_analysis.services.window_segmenter import WindowSegmenter
from weather_analysis.utils.descriptors import named_wind

logger = logging.getLogger(__name__)


def daily_metrics(day: DailyWeather) -> ConditionMetrics:
    """Classifier metrics of a whole day (maxima and dominant code)."""
    return ConditionMetrics(
        wind_speed=day.wind_speed_10m_max,
        wind_gust=day.wind_gusts_10m_max,
        weather_code=day.weather_code,
        temperature=day.temperature_2m_max,
    )


def classify_day(day: DailyWeather) -> SailingCondition:
    """Sailing condition for the calendar badge of a day."""
    return classify(daily_metrics(day))


class DayAnalyzer:
    """Service turning hourly observations into analysed daily summaries."""

    def __init__(
        self,
        aggregator: HourlyAggregator = None,
        segmenter: WindowSegmenter = None,
        daylight_service: Optional[DaylightService] = None,
    ):
        self.aggregator = aggregator or HourlyAggregator()
        self.segmenter = segmenter or WindowSegmenter(timezone=self.aggregator.timezone)
        self.daylight_service = daylight_service

    def analyze_day(self, day: DailyWeather, hours: List[HourlyObservation]) -> DayAnalysis:
        """Build the DayAnalysis of one day from its hourly observations."""
        stats = self.aggregator.day_statistics(hours)
        windows, best_periods = self.segmenter.segment(hours)
        level = classify_day(day).level

        daylight = None
        if self.daylight_service is not None:
            daylight = self.daylight_service.get_daylight(date.fromisoformat(day.date))

        return DayAnalysis(
            mean_direction=stats.mean_direction,
            dominant_wind=named_wind(stats.mean_direction, stats.direction_variability),
            direction_variability=stats.direction_variability,
            mean_wind_speed=stats.mean_wind_speed,
            peak_gust=stats.peak_gust,
            peak_gust_time=stats.peak_gust_time,
            sunny_hours=stats.sunny_hours,
            mean_visibility=stats.mean_visibility,
            mean_humidity=stats.mean_humidity,
            thermal_amplitude=stats.thermal_amplitude,
            wind_comment=wind_comment(stats),
            comfort_comment=comfort_comment(stats, day.temperature_2m_max),
            overview_comment=overview_comment(stats, level),
            windows=windows,
            best_periods=best_periods,
            daylight=daylight,
        )

    def build_days(self, observations: List[HourlyObservation]) -> List[DailyWeather]:
        """
        Aggregate an hourly series and attach a DayAnalysis to every day.

        Returns:
            Analysed daily summaries in ascending date order
        """
        days = []
        for date_key, hours in self.aggregator.group_by_day(observations).items():
            summary = self.aggregator.summarize_day(date_key, hours)
            analysis = self.analyze_day(summary, hours)
            logger.debug(
                "%s: %d windows, %d sunny hours",
                date_key, len(analysis.windows), analysis.sunny_hours,
            )
            days.append(attrs.evolve(summary, analysis=analysis))
        return days
