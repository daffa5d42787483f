"""Tests for the daylight service."""
from datetime import date, timedelta

from weather_analysis.services.daylight_service import DaylightService

AGDE = (43.3167, 3.4667)


class TestDaylightService:
    """Tests for DaylightService."""

    def test_summer_day_at_base(self):
        service = DaylightService(*AGDE, timezone="Europe/Paris")
        daylight = service.get_daylight(date(2024, 7, 1))

        assert daylight is not None
        assert daylight.dawn < daylight.sunrise < daylight.sunset < daylight.dusk
        # Local summer time: sunrise around 06:00, sunset around 21:30
        assert 5 <= daylight.sunrise.hour <= 7
        assert 20 <= daylight.sunset.hour <= 22
        assert daylight.sunrise.utcoffset() == timedelta(hours=2)

    def test_winter_day_is_shorter(self):
        service = DaylightService(*AGDE)
        summer = service.get_daylight(date(2024, 6, 21))
        winter = service.get_daylight(date(2024, 12, 21))

        assert winter.sunrise.utcoffset() == timedelta(hours=1)
        assert (winter.sunset - winter.sunrise) < (summer.sunset - summer.sunrise)

    def test_deeper_depression_angle_moves_dawn_earlier(self):
        nautical = DaylightService(*AGDE, depression_angle=12).get_daylight(date(2024, 7, 1))
        civil = DaylightService(*AGDE, depression_angle=6).get_daylight(date(2024, 7, 1))
        assert nautical.dawn < civil.dawn
        assert civil.sunrise == nautical.sunrise

    def test_polar_day_returns_none(self):
        # Tromsø, Norway: the sun does not set around the summer solstice
        service = DaylightService(69.65, 18.96, timezone="Europe/Oslo")
        assert service.get_daylight(date(2024, 6, 21)) is None

    def test_results_are_cached(self):
        service = DaylightService(*AGDE)
        first = service.get_daylight(date(2024, 7, 1))
        assert service.get_daylight(date(2024, 7, 1)) is first

        service.clear_cache()
        assert service._cache == {}

    def test_cache_is_bounded(self):
        service = DaylightService(*AGDE, cache_size=3)
        days = [date(2024, 7, 1) + timedelta(days=offset) for offset in range(5)]
        for day in days:
            service.get_daylight(day)

        assert len(service._cache) == 3
        assert list(service._cache) == days[2:]
        # Evicted dates are recomputed
        assert service.get_daylight(days[0]) is not None
        assert len(service._cache) == 3
