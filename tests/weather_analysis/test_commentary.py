"""Tests for the day commentary rules."""
import pytest

from weather_analysis.models.condition import SailingLevel
from weather_analysis.models.weather import (
    ComfortComment,
    DayStatistics,
    OverviewComment,
    WindComment,
)
from weather_analysis.services.commentary import comfort_comment, overview_comment, wind_comment

NAN = float("nan")


def stats(**overrides):
    values = dict(
        mean_direction=315.0,
        direction_variability=10.0,
        mean_wind_speed=12.0,
        peak_gust=20.0,
        peak_gust_time=None,
        sunny_hours=12,
        mean_visibility=20000.0,
        mean_humidity=60.0,
        thermal_amplitude=8.0,
    )
    values.update(overrides)
    return DayStatistics(**values)


class TestWindComment:

    @pytest.mark.parametrize("overrides, expected", [
        ({}, WindComment.STEADY_BREEZE),
        ({"peak_gust": 55.0, "direction_variability": 80.0}, WindComment.GUSTY),
        ({"direction_variability": 70.0}, WindComment.SHIFTING),
        ({"mean_wind_speed": 4.0}, WindComment.LIGHT),
        ({"mean_wind_speed": 20.0}, WindComment.STEADY_BREEZE),
        ({"mean_wind_speed": 26.0}, WindComment.FRESH),
        ({"mean_wind_speed": NAN}, WindComment.UNKNOWN),
    ])
    def test_rules(self, overrides, expected):
        assert wind_comment(stats(**overrides)) == expected


class TestComfortComment:

    def test_pleasant(self):
        assert comfort_comment(stats(), 25.0) == ComfortComment.PLEASANT

    def test_poor_visibility_first(self):
        assert comfort_comment(stats(mean_visibility=3000.0), 33.0) == ComfortComment.POOR_VISIBILITY

    def test_hot(self):
        assert comfort_comment(stats(), 31.0) == ComfortComment.HOT

    def test_cool(self):
        assert comfort_comment(stats(), 12.0) == ComfortComment.COOL

    def test_humid(self):
        assert comfort_comment(stats(mean_humidity=85.0), 25.0) == ComfortComment.HUMID

    def test_wide_swing(self):
        assert comfort_comment(stats(thermal_amplitude=14.0), 25.0) == ComfortComment.WIDE_SWING

    def test_missing_data_never_triggers(self):
        missing = stats(mean_visibility=NAN, mean_humidity=NAN, thermal_amplitude=NAN)
        assert comfort_comment(missing, NAN) == ComfortComment.PLEASANT


class TestOverviewComment:

    @pytest.mark.parametrize("level", [SailingLevel.DIFFICULT, SailingLevel.DANGEROUS])
    def test_hard_days_stay_ashore(self, level):
        assert overview_comment(stats(sunny_hours=16), level) == OverviewComment.STAY_ASHORE

    @pytest.mark.parametrize("sunny_hours, expected", [
        (8, OverviewComment.SUNNY_DAY),
        (5, OverviewComment.MIXED_SKIES),
        (2, OverviewComment.OVERCAST),
    ])
    def test_sunshine(self, sunny_hours, expected):
        assert overview_comment(stats(sunny_hours=sunny_hours), SailingLevel.GOOD) == expected
