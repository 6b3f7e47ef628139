"""Tests for reference curve generators and sounding traces."""

import pytest

from skewt_charts.calculations.thermo import dry_adiabat_temperature
from skewt_charts.constants import MIXING_RATIOS
from skewt_charts.profile import Profile
from skewt_charts.rendering.curves import (
    dry_adiabat,
    dry_adiabat_family,
    is_major_isotherm,
    isotherm_family,
    mixing_ratio_line,
    moist_adiabat,
    pressure_sweep,
    profile_trace,
)
from skewt_charts.rendering.frame import CoordinateFrame, PlotRect, ViewBounds


@pytest.fixture
def frame(simple_profile):
    return CoordinateFrame(ViewBounds(), PlotRect.from_canvas(1000, 800), simple_profile)


class TestPressureSweep:

    def test_inclusive_of_both_ends(self):
        assert list(pressure_sweep(20, 10, 5)) == [20, 15, 10]

    def test_full_adiabat_sweep(self):
        pressures = list(pressure_sweep(1050, 100, 5))
        assert len(pressures) == 191
        assert pressures[0] == 1050
        assert pressures[-1] == 100

    def test_uneven_step_stops_above_limit(self):
        assert list(pressure_sweep(1050, 600, 100)) == [1050, 950, 850, 750, 650]


class TestIsotherms:

    def test_family_respects_tolerance(self, frame):
        temperatures = [iso.temperature for iso in isotherm_family(frame)]
        # t_min - 20 = -80, t_max + 20 = 70
        assert temperatures == list(range(-80, 51, 10))

    def test_major_every_twenty_degrees(self, frame):
        majors = [iso.temperature for iso in isotherm_family(frame) if iso.is_major]
        assert majors == [-80, -60, -40, -20, 0, 20, 40]
        assert not is_major_isotherm(10)

    def test_endpoints(self, frame):
        iso = next(i for i in isotherm_family(frame) if i.temperature == 0)
        assert iso.start == pytest.approx((frame.temp_to_x(0, 1050), frame.pressure_to_y(1050)))
        assert iso.end == pytest.approx((frame.temp_to_x(0, 100), frame.pressure_to_y(100)))


class TestAdiabats:

    def test_first_vertex_at_bottom_pressure(self, frame):
        x, y = next(iter(dry_adiabat(frame, 300)))
        assert x == pytest.approx(frame.temp_to_x(float(dry_adiabat_temperature(300, 1050)), 1050))
        assert y == pytest.approx(frame.pressure_to_y(1050))

    def test_cold_samples_are_skipped(self, frame):
        # θ = 200 K drops below t_min - 20 long before 100 hPa
        vertices = list(dry_adiabat(frame, 200))
        assert 0 < len(vertices) < 191

    def test_warm_samples_are_skipped(self, frame):
        # θ = 500 K is far above t_max + 40 near the surface
        vertices = list(dry_adiabat(frame, 500))
        assert 0 < len(vertices) < 191
        assert vertices[-1][0] == pytest.approx(
            frame.temp_to_x(float(dry_adiabat_temperature(500, 100)), 100)
        )

    def test_moist_adiabat_is_colder_than_dry(self, frame):
        dry = list(dry_adiabat(frame, 300))
        moist = list(moist_adiabat(frame, 300))
        # Same pressure sweep, so the second vertex is at 1045 hPa in both
        assert moist[1][0] < dry[1][0]

    def test_generators_are_restartable(self, frame):
        assert list(dry_adiabat(frame, 300)) == list(dry_adiabat(frame, 300))

    def test_family_values(self, frame):
        thetas = [theta for theta, _ in dry_adiabat_family(frame)]
        assert thetas[0] == 200
        assert thetas[-1] == 500
        assert len(thetas) == 31


class TestMixingRatioLines:

    @pytest.mark.parametrize("mixing_ratio", MIXING_RATIOS)
    def test_vertices_inside_plot(self, frame, mixing_ratio):
        rect = frame.rect
        vertices = list(mixing_ratio_line(frame, mixing_ratio))
        assert len(vertices) <= 46
        for x, _ in vertices:
            assert rect.left <= x <= rect.right

    def test_stops_at_600_hpa(self, frame):
        vertices = list(mixing_ratio_line(frame, 8))
        assert vertices[-1][1] == pytest.approx(frame.pressure_to_y(600))


class TestProfileTrace:

    def test_uses_measured_heights(self, frame, simple_profile):
        vertices = list(profile_trace(frame, simple_profile, "temperature"))
        assert len(vertices) == 3
        assert vertices[1] == pytest.approx((frame.temp_to_x(10, 850), frame.height_to_y(1500)))

    def test_missing_values_are_omitted(self, frame):
        profile = Profile.from_records([
            {"pressure": 1000, "height": 0, "temperature": 20, "dewpoint": 15},
            {"pressure": 925, "height": 750, "temperature": 16, "dewpoint": float("nan")},
            {"pressure": 850, "height": 1500, "temperature": 10, "dewpoint": 5},
        ])
        assert len(list(profile_trace(frame, profile, "dewpoint"))) == 2
        assert len(list(profile_trace(frame, profile, "temperature"))) == 3

    def test_levels_outside_height_range_are_omitted(self, simple_profile):
        view = ViewBounds().with_height_range(500, 4500)
        frame = CoordinateFrame(view, PlotRect.from_canvas(1000, 800), simple_profile)
        ys = [y for _, y in profile_trace(frame, simple_profile, "temperature")]
        assert ys == pytest.approx([575.0, 312.5])

    def test_no_profile(self, frame):
        assert list(profile_trace(frame, None, "temperature")) == []
