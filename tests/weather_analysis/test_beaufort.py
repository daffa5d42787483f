"""Tests for the Beaufort scale lookup."""
import numpy as np
import pytest

from weather_analysis.models.condition import BeaufortBand
from weather_analysis.utils.beaufort import beaufort, beaufort_band, beaufort_scale


class TestBeaufort:
    """Tests for beaufort and beaufort_scale."""

    @pytest.mark.parametrize("speed, expected", [
        (0, 0),
        (0.9, 0),
        (1, 1),
        (5, 1),
        (5.1, 2),
        (11, 2),
        (19, 3),
        (28, 4),
        (38, 5),
        (49, 6),
        (61, 7),
        (74, 8),
        (88, 9),
        (102, 10),
        (117, 11),
        (118, 12),
        (250, 12),
    ])
    def test_band_boundaries(self, speed, expected):
        assert beaufort(speed).scale == expected

    def test_non_decreasing(self):
        scales = [beaufort_scale(speed) for speed in np.arange(0, 150, 0.25)]
        assert scales == sorted(scales)
        assert set(scales) == set(range(13))

    def test_description(self):
        assert beaufort(0).description == "Calm"
        assert beaufort(15).description == "Gentle breeze"
        assert beaufort(130).description == "Hurricane force"

    def test_negative_and_nan_clamped(self):
        assert beaufort(-3).scale == 0
        assert beaufort(float("nan")).scale == 0


class TestBeaufortBand:
    """Tests for the colour band."""

    @pytest.mark.parametrize("scale, band", [
        (0, BeaufortBand.CALM),
        (1, BeaufortBand.CALM),
        (2, BeaufortBand.LIGHT),
        (3, BeaufortBand.LIGHT),
        (4, BeaufortBand.MODERATE),
        (5, BeaufortBand.MODERATE),
        (6, BeaufortBand.STRONG),
        (7, BeaufortBand.STRONG),
        (8, BeaufortBand.GALE),
        (12, BeaufortBand.GALE),
    ])
    def test_bands(self, scale, band):
        assert beaufort_band(scale) == band
