"""Tests for the synthetic fallback generator."""
from datetime import date

from weather_analysis.services.fallback_generator import FallbackGenerator


class TestFallbackGenerator:
    """Tests for FallbackGenerator."""

    def test_horizon_and_dates(self):
        days = FallbackGenerator(seed=1).generate(date(2024, 7, 30), 7)
        assert [day.date for day in days] == [
            "2024-07-30", "2024-07-31", "2024-08-01", "2024-08-02",
            "2024-08-03", "2024-08-04", "2024-08-05",
        ]

    def test_invariants(self):
        days = FallbackGenerator(seed=7).generate(date(2024, 7, 1), 200)
        for day in days:
            assert day.temperature_2m_min <= day.temperature_2m_max
            assert day.wind_gusts_10m_max >= day.wind_speed_10m_max
            assert 8 <= day.wind_speed_10m_max <= 20
            assert 1005 <= day.surface_pressure <= 1025
            assert 0 <= day.wind_direction_10m_dominant < 360
            assert day.weather_code in (0, 1, 3)
            assert day.analysis is None

    def test_seed_is_reproducible(self):
        first = FallbackGenerator(seed=3).generate(date(2024, 7, 1), 5)
        second = FallbackGenerator(seed=3).generate(date(2024, 7, 1), 5)
        assert first == second

    def test_zero_days(self):
        assert FallbackGenerator(seed=0).generate(date(2024, 7, 1), 0) == []
