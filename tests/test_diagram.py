"""Tests for the diagram renderer, layer helpers and zoom/hover state."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from skewt_charts import Config, SkewTDiagram
from skewt_charts.exceptions import InvalidParameterError
from skewt_charts.profile import Profile
from skewt_charts.rendering import diagram as diagram_module
from skewt_charts.rendering.diagram import (
    DrawRequest,
    default_height_range,
    render_diagram,
    validate_height_range,
)
from skewt_charts.rendering.frame import CoordinateFrame, PlotRect, ViewBounds
from skewt_charts.rendering.layers import (
    barb_height_spacing,
    height_tick_interval,
    height_ticks,
    select_wind_barb_levels,
    visible_isobars,
)


def _windy_profile(heights):
    return Profile.from_records([
        {"pressure": 1000 - i * 10, "height": h, "temperature": 20 - i,
         "wind_direction": 270, "wind_speed": 10}
        for i, h in enumerate(heights)
    ])


class TestHeightTicks:

    @pytest.mark.parametrize("span, interval", [
        (1500, 200),
        (2000, 200),
        (4500, 500),
        (8000, 1000),
        (15000, 2000),
        (30000, 5000),
    ])
    def test_interval(self, span, interval):
        assert height_tick_interval(span) == interval

    def test_ticks_are_multiples_within_range(self):
        ticks = height_ticks(ViewBounds(h_min=500, h_max=4500))
        assert ticks == [500, 1000, 1500, 2000, 2500, 3000, 3500, 4000, 4500]

    def test_ticks_round_up_from_lower_bound(self):
        assert height_ticks(ViewBounds(h_min=150, h_max=1000)) == [200, 400, 600, 800, 1000]


class TestIsobarVisibility:

    def test_zoom_hides_isobars_below_range(self, simple_profile):
        view = ViewBounds().with_height_range(500, 4500)
        frame = CoordinateFrame(view, PlotRect.from_canvas(1000, 800), simple_profile)
        pressures = [p for p, _ in visible_isobars(frame, [1000, 925, 850])]
        assert pressures == [925, 850]

    def test_pressure_bounds(self, simple_profile):
        frame = CoordinateFrame(ViewBounds(p_min=200), PlotRect.from_canvas(1000, 800), simple_profile)
        pressures = [p for p, _ in visible_isobars(frame, [1000, 150])]
        assert pressures == [1000]


class TestWindBarbSelection:

    def test_narrow_view_spacing(self):
        profile = _windy_profile([0, 100, 300, 600, 650, 900])
        frame = CoordinateFrame(ViewBounds(), PlotRect.from_canvas(1000, 800), profile)
        assert barb_height_spacing(frame.view) == 250
        heights = [lvl.height for lvl in select_wind_barb_levels(frame, profile)]
        assert heights == [0, 300, 600, 900]

    def test_wide_view_spacing(self):
        profile = _windy_profile([0, 100, 300, 600, 650, 900])
        frame = CoordinateFrame(ViewBounds(h_max=6000), PlotRect.from_canvas(1000, 800), profile)
        assert barb_height_spacing(frame.view) == 500
        heights = [lvl.height for lvl in select_wind_barb_levels(frame, profile)]
        assert heights == [0, 600]

    def test_levels_without_wind_are_skipped(self):
        profile = Profile.from_records([
            {"pressure": 1000, "height": 0},
            {"pressure": 950, "height": 400, "wind_direction": 90, "wind_speed": 5},
        ])
        frame = CoordinateFrame(ViewBounds(), PlotRect.from_canvas(1000, 800), profile)
        assert [lvl.height for lvl in select_wind_barb_levels(frame, profile)] == [400]


class TestZoomValidation:

    def test_valid(self):
        assert validate_height_range(500, "4500") == (500.0, 4500.0)

    @pytest.mark.parametrize("h_min, h_max", [
        (4500, 500),
        (1000, 1000),
        ("abc", 100),
        (None, 100),
        (float("nan"), 100),
        (0, float("inf")),
    ])
    def test_invalid(self, h_min, h_max):
        with pytest.raises(InvalidParameterError):
            validate_height_range(h_min, h_max)

    def test_default_range_rounds_down(self, station_profile):
        assert default_height_range(station_profile) == (100.0, 4500.0)

    def test_default_range_without_heights(self):
        assert default_height_range(Profile.from_records([{"pressure": 1000}])) is None
        assert default_height_range(None) is None


class TestRenderDiagram:

    def test_all_layers_present(self, station_profile):
        diagram = SkewTDiagram()
        diagram.draw(station_profile)
        layers = diagram.get_rendered_layers()
        for name in ("background", "height_axis", "isobars", "isotherms", "dry_adiabats",
                     "moist_adiabats", "mixing_ratio_lines", "border", "temperature",
                     "dewpoint", "wind_barbs", "annotations"):
            assert layers[name] is not None, name
        assert layers["annotations"]["title"].get_text() == "Nottingham"
        assert layers["temperature"].get_gid() == "temperature"

    def test_zoom_filters_trace_and_keeps_profile(self, simple_profile):
        diagram = SkewTDiagram()
        diagram.set_height_range(500, 4500)
        diagram.draw(simple_profile)

        line = diagram.get_rendered_layers()["temperature"]
        assert np.allclose(line.get_ydata(), [575.0, 312.5])
        assert len(diagram.profile) == 3
        assert diagram.profile is simple_profile

    def test_empty_profile_draws_frame_only(self):
        diagram = SkewTDiagram()
        diagram.draw(Profile())
        layers = diagram.get_rendered_layers()
        assert layers["border"] is not None
        assert layers["isobars"] is not None
        assert "temperature" not in layers
        assert "wind_barbs" not in layers

    def test_failing_layer_does_not_stop_others(self, simple_profile, monkeypatch):
        def broken(*args):
            raise RuntimeError("boom")

        monkeypatch.setattr(diagram_module, "render_isotherms", broken)
        diagram = SkewTDiagram()
        diagram.draw(simple_profile)
        layers = diagram.get_rendered_layers()
        assert layers["isotherms"] is None
        assert layers["temperature"] is not None

    def test_surface_coordinates(self, simple_profile):
        fig, ax = plt.subplots()
        config = Config()
        request = DrawRequest(profile=simple_profile, view=config.default_view())
        render_diagram(ax, request, PlotRect.from_canvas(1000, 800), config)
        assert ax.get_xlim() == (0, 1000)
        assert ax.get_ylim() == (800, 0)

    def test_redraw_reuses_figure(self, simple_profile):
        diagram = SkewTDiagram()
        fig, _ = diagram.draw(simple_profile)
        fig_again, _ = diagram.draw(simple_profile)
        assert fig is fig_again

    def test_figure_size_matches_canvas(self, simple_profile):
        fig, _ = SkewTDiagram(Config(canvas_width=1200, canvas_height=900, default_dpi=100)).draw(simple_profile)
        assert tuple(fig.get_size_inches()) == pytest.approx((12.0, 9.0))


class TestSkewTDiagram:

    def test_invalid_zoom_keeps_view(self):
        diagram = SkewTDiagram()
        with pytest.raises(InvalidParameterError, match="less than"):
            diagram.set_height_range(4500, 500)
        assert (diagram.view.h_min, diagram.view.h_max) == (0.0, 4500.0)

    def test_reset_zoom(self, station_profile):
        diagram = SkewTDiagram()
        diagram.set_height_range(2000, 3000)
        diagram.reset_zoom(station_profile)
        assert (diagram.view.h_min, diagram.view.h_max) == (100.0, 4500.0)

    def test_query_inside_plot(self, simple_profile):
        diagram = SkewTDiagram()
        diagram.draw(simple_profile)
        level = diagram.query_at(400, 400)  # 2250 m
        assert level.height == pytest.approx(2250)
        assert level.pressure == pytest.approx(775)

    def test_query_outside_plot(self, simple_profile):
        diagram = SkewTDiagram()
        diagram.draw(simple_profile)
        assert diagram.query_at(20, 400) is None
        assert diagram.query_at(400, 790) is None

    def test_query_before_draw(self):
        assert SkewTDiagram().query_at(400, 400) is None

    def test_save(self, simple_profile, tmp_path):
        diagram = SkewTDiagram()
        diagram.draw(simple_profile)
        path = diagram.save(str(tmp_path / "skewt.png"))
        assert (tmp_path / "skewt.png").stat().st_size > 0
        assert path.endswith("skewt.png")
        diagram.close()
        assert diagram.fig is None

    def test_save_before_draw(self, tmp_path):
        with pytest.raises(ValueError):
            SkewTDiagram().save(str(tmp_path / "skewt.png"))

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            SkewTDiagram(Config(canvas_width=200))
