"""Tests for height-based profile interpolation and thermodynamic helpers."""

import pytest

from skewt_charts.calculations import (
    cardinal_direction,
    dry_adiabat_temperature,
    interpolate_at_height,
    mixing_ratio_dewpoint,
    moist_adiabat_temperature,
    ms_to_kmh,
)
from skewt_charts.profile import Level, Profile


class TestInterpolateAtHeight:

    def test_midpoint(self, simple_profile):
        level = interpolate_at_height(simple_profile, 750)
        assert level.height == 750
        assert level.pressure == pytest.approx(925)
        assert level.temperature == pytest.approx(15)
        assert level.dewpoint == pytest.approx(10)
        assert level.wind_direction == pytest.approx(225)
        assert level.wind_speed == pytest.approx(15)

    def test_exact_sample_reproduced(self, simple_profile):
        level = interpolate_at_height(simple_profile, 1500)
        assert level.temperature == 10
        assert level.dewpoint == 5
        assert level.pressure == 850

    def test_missing_field_stays_missing(self):
        profile = Profile.from_records([
            {"pressure": 1000, "height": 0, "temperature": 20, "dewpoint": None},
            {"pressure": 900, "height": 1000, "temperature": 12, "dewpoint": 4},
        ])
        level = interpolate_at_height(profile, 500)
        assert level.dewpoint is None
        assert level.temperature == pytest.approx(16)

    def test_outside_range_returns_nearest(self, simple_profile):
        level = interpolate_at_height(simple_profile, 5000)
        assert level == simple_profile.levels[-1]
        level = interpolate_at_height(simple_profile, -200)
        assert level == simple_profile.levels[0]

    def test_descending_heights(self, simple_profile):
        profile = Profile(levels=tuple(reversed(simple_profile.levels)))
        level = interpolate_at_height(profile, 2250)
        assert level.pressure == pytest.approx(775)
        assert level.temperature == pytest.approx(5)

    def test_equal_heights_take_lower_level(self):
        profile = Profile.from_records([
            {"pressure": 1000, "height": 100, "temperature": 20},
            {"pressure": 999, "height": 100, "temperature": 19},
        ])
        level = interpolate_at_height(profile, 100)
        assert level.temperature == 20

    def test_level_without_height_is_skipped(self):
        profile = Profile.from_records([
            {"pressure": 1000, "height": 0, "temperature": 20},
            {"pressure": 950, "temperature": 18},
            {"pressure": 900, "height": 1000, "temperature": 12},
        ])
        # No adjacent pair with both heights brackets 500 m
        assert interpolate_at_height(profile, 500).height == 0

    def test_empty_profile(self):
        assert interpolate_at_height(Profile(), 1000) is None
        assert interpolate_at_height(None, 1000) is None

    def test_no_heights(self):
        profile = Profile(levels=(Level(pressure=1000, temperature=20),))
        assert interpolate_at_height(profile, 1000) is None


class TestThermo:

    def test_dry_adiabat_at_reference_pressure(self):
        assert dry_adiabat_temperature(300.0, 1000.0) == pytest.approx(26.85)

    def test_dry_adiabat_cools_with_height(self):
        assert dry_adiabat_temperature(300.0, 500.0) < dry_adiabat_temperature(300.0, 850.0)

    def test_moist_adiabat_correction(self):
        dry = dry_adiabat_temperature(300.0, 850.0)
        assert moist_adiabat_temperature(300.0, 850.0) == pytest.approx(dry - 4.0)

    def test_mixing_ratio_dewpoint(self):
        # 10 g/kg at 1000 hPa has a dewpoint near 14 °C
        assert mixing_ratio_dewpoint(10.0, 1000.0) == pytest.approx(14.0, abs=0.5)
        assert mixing_ratio_dewpoint(2.0, 1000.0) < mixing_ratio_dewpoint(8.0, 1000.0)

    def test_ms_to_kmh(self):
        assert ms_to_kmh(10) == pytest.approx(36)

    @pytest.mark.parametrize("degrees, expected", [
        (0, "N"),
        (11.25, "NNE"),
        (90, "E"),
        (225, "SW"),
        (270, "W"),
        (348.75, "N"),
        (360, "N"),
    ])
    def test_cardinal_direction(self, degrees, expected):
        assert cardinal_direction(degrees) == expected
