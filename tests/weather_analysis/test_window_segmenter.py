"""Tests for intra-day window segmentation."""
from datetime import datetime

from weather_analysis.models.condition import ConditionReason, SailingLevel
from weather_analysis.services.window_segmenter import WindowSegmenter, hour_metrics


class TestWindowSegmenter:
    """Tests for WindowSegmenter."""

    def test_uniform_day_is_one_window(self, fair_day):
        windows, best = WindowSegmenter().segment(fair_day)

        assert len(windows) == 1
        window = windows[0]
        assert window.level == SailingLevel.EXCELLENT
        assert window.reason == ConditionReason.IDEAL_BREEZE
        assert window.start == datetime(2024, 7, 1, 6)
        # Closed at the last in-span hour present
        assert window.end == datetime(2024, 7, 1, 21)
        assert window.hour_count == 16

        assert [period.period for period in best] == ["morning", "afternoon", "evening"]
        assert all(period.level == SailingLevel.EXCELLENT for period in best)

    def test_level_change_splits_windows(self, calm_morning_windy_afternoon):
        windows, best = WindowSegmenter().segment(calm_morning_windy_afternoon)

        assert len(windows) >= 2
        assert windows[0].level == SailingLevel.EXCELLENT
        assert windows[0].start == datetime(2024, 7, 1, 6)
        assert windows[0].end == datetime(2024, 7, 1, 12)
        assert windows[0].hour_count == 6
        assert windows[1].level == SailingLevel.DIFFICULT
        assert windows[1].reason == ConditionReason.STRONG_WIND
        assert windows[1].start == datetime(2024, 7, 1, 12)

        by_period = {period.period: period for period in best}
        assert by_period["morning"].level.is_less_severe_than(by_period["afternoon"].level)
        assert by_period["morning"].level.is_less_severe_than(by_period["evening"].level)

    def test_windows_cover_in_span_hours_once(self, make_hours):
        # Alternating conditions every few hours, across the whole day
        hours = make_hours(
            temperature=24.0,
            wind_speed=lambda h: [8.0, 25.0, 45.0, 3.0][(h // 3) % 4],
            wind_gust=lambda h: [10.0, 30.0, 55.0, 4.0][(h // 3) % 4],
            weather_code=lambda h: 1 if h % 5 else 95,
        )
        segmenter = WindowSegmenter()
        windows, _ = segmenter.segment(hours)

        in_span = [hour for hour in hours if 6 <= hour.time.hour < 22]
        assert sum(window.hour_count for window in windows) == len(in_span)
        assert windows[0].start == in_span[0].time
        assert windows[-1].end == in_span[-1].time
        for previous, current in zip(windows, windows[1:]):
            assert previous.level != current.level
            assert previous.end == current.start
            assert previous.start < current.start

    def test_hours_outside_span_ignored(self, make_hours):
        hours = make_hours(hours=[0, 1, 2, 3, 4, 5, 22, 23], wind_speed=10.0, temperature=24.0)
        windows, best = WindowSegmenter().segment(hours)

        assert windows == []
        assert all(period.level == SailingLevel.MODERATE for period in best)
        assert all(period.reason == ConditionReason.NO_DATA for period in best)
        assert all(period.time is None for period in best)

    def test_partial_day(self, make_hours):
        hours = make_hours(
            hours=range(6, 10),
            temperature=24.0, wind_speed=10.0, wind_gust=12.0, weather_code=1,
        )
        windows, best = WindowSegmenter().segment(hours)

        assert len(windows) == 1
        assert windows[0].end == datetime(2024, 7, 1, 9)
        by_period = {period.period: period for period in best}
        assert by_period["morning"].level == SailingLevel.EXCELLENT
        assert by_period["afternoon"].reason == ConditionReason.NO_DATA

    def test_missing_hours_not_reconstructed(self, make_hours):
        hours = make_hours(
            hours=[6, 7, 10, 11],
            temperature=24.0, wind_speed=10.0, wind_gust=12.0, weather_code=1,
        )
        windows, _ = WindowSegmenter().segment(hours)
        assert len(windows) == 1
        assert windows[0].hour_count == 4

    def test_best_period_first_hour_wins_ties(self, make_hours):
        hours = make_hours(temperature=16.0, wind_speed=15.0, wind_gust=20.0, weather_code=3)
        _, best = WindowSegmenter().segment(hours)
        evening = [period for period in best if period.period == "evening"][0]
        assert evening.level == SailingLevel.GOOD
        assert evening.time == datetime(2024, 7, 1, 18)

    def test_best_period_picks_least_severe_hour(self, make_hours):
        # Only 15:00 is excellent in the afternoon
        hours = make_hours(
            temperature=24.0,
            wind_speed=lambda h: 10.0 if h == 15 else 30.0,
            wind_gust=lambda h: 12.0 if h == 15 else 35.0,
            weather_code=1,
        )
        _, best = WindowSegmenter().segment(hours)
        afternoon = [period for period in best if period.period == "afternoon"][0]
        assert afternoon.level == SailingLevel.EXCELLENT
        assert afternoon.time == datetime(2024, 7, 1, 15)

    def test_missing_gust_estimated_from_wind(self, make_hours):
        hour = make_hours(hours=[10], wind_speed=20.0)[0]
        assert hour_metrics(hour).wind_gust == 20.0 * 1.3

    def test_hours_without_wind_are_no_data(self, make_hours):
        hours = make_hours(temperature=24.0, weather_code=1)
        windows, best = WindowSegmenter().segment(hours)

        assert len(windows) == 1
        assert windows[0].level == SailingLevel.MODERATE
        assert windows[0].reason == ConditionReason.NO_DATA
        assert windows[0].hour_count == 16
        assert all(period.reason == ConditionReason.NO_DATA for period in best)
