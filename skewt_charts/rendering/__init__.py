"""
Rendering subsystem for SkewT Charts.

This module provides the coordinate frame, reference curve generators, wind
barb encoder and matplotlib drawing layers that together render a Skew-T
Log-P diagram.

The drawing surface is a matplotlib Figure holding a single full-figure Axes
whose data coordinates are surface units: origin at the top-left, y growing
downwards, plot rectangle inset by the configured margins.

Main Classes:
    SkewTDiagram: Stateful diagram (view bounds, last profile, hover queries)
    CoordinateFrame: Pure projection for one view/profile
    ViewBounds, PlotRect: View extents and plot rectangle

Example:
    >>> from skewt_charts.rendering import SkewTDiagram
    >>> from skewt_charts import Config
    >>>
    >>> diagram = SkewTDiagram(Config(canvas_width=1200, canvas_height=900))
    >>> diagram.set_height_range(0, 6000)
    >>> fig, ax = diagram.draw(profile)
    >>> fig.savefig("skewt.png")
"""

from .frame import ViewBounds, PlotRect, CoordinateFrame
from .curves import (
    isotherm_family,
    dry_adiabat,
    moist_adiabat,
    mixing_ratio_line,
    profile_trace
)
from .barbs import BarbCounts, decompose, layout, encode_wind_barb
from .layers import (
    render_height_axis,
    render_isobars,
    render_isotherms,
    render_dry_adiabats,
    render_moist_adiabats,
    render_mixing_ratio_lines,
    render_profile_trace,
    render_wind_barbs
)
from .annotations import annotate_diagram, format_level_readout
from .diagram import DrawRequest, SkewTDiagram, render_diagram

__all__ = [
    "ViewBounds",
    "PlotRect",
    "CoordinateFrame",
    "isotherm_family",
    "dry_adiabat",
    "moist_adiabat",
    "mixing_ratio_line",
    "profile_trace",
    "BarbCounts",
    "decompose",
    "layout",
    "encode_wind_barb",
    "render_height_axis",
    "render_isobars",
    "render_isotherms",
    "render_dry_adiabats",
    "render_moist_adiabats",
    "render_mixing_ratio_lines",
    "render_profile_trace",
    "render_wind_barbs",
    "annotate_diagram",
    "format_level_readout",
    "DrawRequest",
    "SkewTDiagram",
    "render_diagram",
]
