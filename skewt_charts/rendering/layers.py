"""
Individual rendering functions for Skew-T diagram layers.

This module provides low-level rendering functions for drawing each phase
of a Skew-T diagram (height axis, isobars, reference curve families,
border, sounding traces, wind barbs) on a matplotlib axes whose data
coordinates are surface units with y growing downwards. Each function
handles its own filtering and styling and returns the artists it created.

The pure helpers (``height_ticks``, ``visible_isobars``,
``select_wind_barb_levels``) contain the filtering rules and can be used
without a figure.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import Polygon, Rectangle

from .barbs import Circle, Segment, Triangle, Primitive, encode_wind_barb
from .curves import (
    isotherm_family,
    dry_adiabat_family,
    moist_adiabat_family,
    mixing_ratio_family,
    profile_trace,
)
from .frame import CoordinateFrame, PlotRect, ViewBounds
from ..constants import (
    MAJOR_ISOBARS,
    MINOR_ISOBARS,
    HEIGHT_TICK_INTERVALS,
    HEIGHT_TICK_LENGTH,
    BARB_COLUMN_OFFSET,
    BARB_SPACING_NARROW,
    BARB_SPACING_WIDE,
    BARB_WIDE_VIEW_SPAN,
    TEXT_COLOR,
    HEIGHT_TICK_COLOR,
    MAJOR_ISOBAR_COLOR,
    MINOR_ISOBAR_COLOR,
    MAJOR_ISOTHERM_COLOR,
    MINOR_ISOTHERM_COLOR,
    ISOTHERM_LABEL_COLOR,
    DRY_ADIABAT_COLOR,
    MOIST_ADIABAT_COLOR,
    MIXING_RATIO_COLOR,
    BORDER_COLOR,
    BARB_COLOR,
    REFERENCE_LINEWIDTH,
    BORDER_LINEWIDTH,
    PROFILE_LINEWIDTH,
    BARB_LINEWIDTH,
    AXIS_FONT_SIZE,
    ISOTHERM_FONT_SIZE,
)
from ..profile import Level, Profile

logger = logging.getLogger("skewt_charts.rendering.layers")


def _format_number(value: float) -> str:
    return f"{int(value)}" if float(value).is_integer() else f"{value:g}"


def _plot_clip(ax: plt.Axes, rect: PlotRect) -> Rectangle:
    """Clip path matching the plot rectangle in data coordinates."""
    return Rectangle(
        (rect.left, rect.top), rect.width, rect.height,
        transform=ax.transData,
        facecolor='none',
        edgecolor='none',
    )


def _polyline(ax: plt.Axes, vertices: Sequence[Tuple[float, float]], **kwargs) -> Any:
    xs = [v[0] for v in vertices]
    ys = [v[1] for v in vertices]
    line, = ax.plot(xs, ys, **kwargs)
    return line


# ============================================================================
# Pure helpers
# ============================================================================

def height_tick_interval(height_span: float) -> float:
    """
    Spacing between height-axis ticks for a visible height span.

    Example:
        >>> height_tick_interval(4500)
        500.0
    """
    for max_span, interval in HEIGHT_TICK_INTERVALS:
        if height_span <= max_span:
            return interval
    return HEIGHT_TICK_INTERVALS[-1][1]


def height_ticks(view: ViewBounds) -> List[float]:
    """Heights labelled on the axis: multiples of the interval within range."""
    interval = height_tick_interval(view.height_span)
    ticks = []
    h = math.ceil(view.h_min / interval) * interval
    while h <= view.h_max:
        ticks.append(float(h))
        h += interval
    return ticks


def visible_isobars(frame: CoordinateFrame, pressures: Sequence[float]) -> List[Tuple[float, float]]:
    """
    Isobars that can be drawn in the current view, as (pressure, y) pairs.

    An isobar is kept when it lies within the pressure bounds, its height
    (from the sounding) lies within the height range, and its y falls
    inside the plot rectangle.
    """
    view = frame.view
    rect = frame.rect
    kept = []
    for pressure in pressures:
        if pressure < view.p_min or pressure > view.p_max:
            continue
        height = frame.pressure_to_height(pressure)
        if height < view.h_min or height > view.h_max:
            continue
        y = frame.height_to_y(height)
        if y < rect.top or y > rect.bottom:
            continue
        kept.append((pressure, y))
    return kept


def barb_height_spacing(view: ViewBounds) -> float:
    """Minimum height difference between consecutive plotted barbs."""
    return BARB_SPACING_NARROW if view.height_span < BARB_WIDE_VIEW_SPAN else BARB_SPACING_WIDE


def select_wind_barb_levels(frame: CoordinateFrame, profile: Optional[Profile]) -> List[Level]:
    """
    Levels that get a wind barb.

    Only levels within the pressure and height bounds with both wind
    fields present are considered; of those, a level is kept when its
    height differs from the last kept level by at least the barb spacing.
    """
    if profile is None:
        return []

    view = frame.view
    spacing = barb_height_spacing(view)
    selected: List[Level] = []
    last_height = None

    for level in profile.levels:
        if not level.has("pressure", "height", "wind_direction", "wind_speed"):
            continue
        if level.pressure < view.p_min or level.pressure > view.p_max:
            continue
        if level.height < view.h_min or level.height > view.h_max:
            continue
        if last_height is None or abs(level.height - last_height) >= spacing:
            selected.append(level)
            last_height = level.height

    return selected


# ============================================================================
# Frame layers
# ============================================================================

def render_background(ax: plt.Axes, canvas_width: float, canvas_height: float, color: str) -> Any:
    """Fill the whole surface with the background color."""
    patch = Rectangle((0, 0), canvas_width, canvas_height, facecolor=color, edgecolor='none', zorder=0)
    ax.add_patch(patch)
    return patch


def render_height_axis(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    """
    Draw height ticks and "<h> m" labels along the left edge of the plot.

    Args:
        ax: Matplotlib axes in surface coordinates
        frame: Coordinate frame of the current view

    Returns:
        List of tick lines and label texts
    """
    x = frame.rect.left
    ticks = height_ticks(frame.view)
    artists = []

    for h in ticks:
        y = frame.height_to_y(h)
        line, = ax.plot([x, x + HEIGHT_TICK_LENGTH], [y, y], color=HEIGHT_TICK_COLOR, linewidth=1, zorder=2)
        label = ax.text(
            x - 5, y + 4, f"{_format_number(h)} m",
            ha='right', va='baseline',
            fontsize=AXIS_FONT_SIZE, fontweight='bold', color=TEXT_COLOR,
            zorder=6,
        )
        artists.extend([line, label])

    logger.debug(f"Rendered {len(ticks)} height ticks (interval {height_tick_interval(frame.view.height_span):.0f} m)")
    return artists


def render_isobars(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    """
    Draw major (labelled) and minor isobars across the plot rectangle.

    Returns:
        List of line and label artists
    """
    rect = frame.rect
    artists = []

    major = visible_isobars(frame, MAJOR_ISOBARS)
    for pressure, y in major:
        line, = ax.plot([rect.left, rect.right], [y, y], color=MAJOR_ISOBAR_COLOR, linewidth=1, zorder=2)
        label = ax.text(
            rect.right + 5, y + 4, f"{_format_number(pressure)} mb",
            ha='left', va='baseline',
            fontsize=AXIS_FONT_SIZE, color=MAJOR_ISOBAR_COLOR,
            zorder=6,
        )
        artists.extend([line, label])

    minor = visible_isobars(frame, MINOR_ISOBARS)
    for pressure, y in minor:
        line, = ax.plot([rect.left, rect.right], [y, y], color=MINOR_ISOBAR_COLOR, linewidth=1, zorder=1)
        artists.append(line)

    logger.debug(f"Rendered {len(major)} major and {len(minor)} minor isobars")
    return artists


def render_isotherms(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    """
    Draw skewed isotherms; major ones (every 20 °C) get a rotated label
    below the bottom of the plot.
    """
    artists = []
    count = 0

    for iso in isotherm_family(frame):
        color = MAJOR_ISOTHERM_COLOR if iso.is_major else MINOR_ISOTHERM_COLOR
        line = _polyline(ax, [iso.start, iso.end], color=color, linewidth=REFERENCE_LINEWIDTH, zorder=1)
        line.set_clip_path(_plot_clip(ax, frame.rect))
        artists.append(line)
        count += 1

        if iso.is_major:
            x1, y1 = iso.start
            label = ax.text(
                x1, y1 + 20, f"{_format_number(iso.temperature)}°C",
                rotation=45, rotation_mode='anchor',
                ha='left', va='baseline',
                fontsize=ISOTHERM_FONT_SIZE, color=ISOTHERM_LABEL_COLOR,
                zorder=6,
            )
            artists.append(label)

    logger.debug(f"Rendered {count} isotherms")
    return artists


def _render_family(ax: plt.Axes, frame: CoordinateFrame, family, color, name: str) -> List[Any]:
    lines = []
    for value, vertices in family(frame):
        vertices = list(vertices)
        if not vertices:
            continue
        line = _polyline(ax, vertices, color=color, linewidth=REFERENCE_LINEWIDTH, zorder=1)
        line.set_clip_path(_plot_clip(ax, frame.rect))
        line.set_gid(f"{name}:{_format_number(value)}")
        lines.append(line)
    logger.debug(f"Rendered {len(lines)} {name} lines")
    return lines


def render_dry_adiabats(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    return _render_family(ax, frame, dry_adiabat_family, DRY_ADIABAT_COLOR, "dry_adiabat")


def render_moist_adiabats(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    return _render_family(ax, frame, moist_adiabat_family, MOIST_ADIABAT_COLOR, "moist_adiabat")


def render_mixing_ratio_lines(ax: plt.Axes, frame: CoordinateFrame) -> List[Any]:
    return _render_family(ax, frame, mixing_ratio_family, MIXING_RATIO_COLOR, "mixing_ratio")


def render_border(ax: plt.Axes, rect: PlotRect) -> Any:
    border = Rectangle(
        (rect.left, rect.top), rect.width, rect.height,
        fill=False, edgecolor=BORDER_COLOR, linewidth=BORDER_LINEWIDTH, zorder=3,
    )
    ax.add_patch(border)
    return border


# ============================================================================
# Sounding layers
# ============================================================================

def render_profile_trace(
    ax: plt.Axes,
    frame: CoordinateFrame,
    profile: Profile,
    field: str,
    color: str
) -> Any:
    """
    Draw one sounding trace (temperature or dewpoint) as a single polyline.

    Args:
        ax: Matplotlib axes in surface coordinates
        frame: Coordinate frame of the current view
        profile: Sounding profile
        field: Level field to trace
        color: Line color

    Returns:
        Line2D of the trace (possibly without vertices)
    """
    vertices = list(profile_trace(frame, profile, field))
    line = _polyline(ax, vertices, color=color, linewidth=PROFILE_LINEWIDTH, zorder=4)
    line.set_gid(field)
    logger.debug(f"Rendered {field} trace with {len(vertices)} of {len(profile)} levels")
    return line


def render_primitives(ax: plt.Axes, primitives: Sequence[Primitive]) -> List[Any]:
    """Turn wind barb primitives into matplotlib artists."""
    artists = []
    for primitive in primitives:
        if isinstance(primitive, Circle):
            patch = CirclePatch(
                primitive.center, primitive.radius,
                fill=False, edgecolor=BARB_COLOR, linewidth=BARB_LINEWIDTH, zorder=5,
            )
            ax.add_patch(patch)
            artists.append(patch)
        elif isinstance(primitive, Triangle):
            patch = Polygon(
                [primitive.a, primitive.b, primitive.c], closed=True,
                facecolor=BARB_COLOR, edgecolor='none', zorder=5,
            )
            ax.add_patch(patch)
            artists.append(patch)
        elif isinstance(primitive, Segment):
            line, = ax.plot(
                [primitive.start[0], primitive.end[0]],
                [primitive.start[1], primitive.end[1]],
                color=BARB_COLOR, linewidth=BARB_LINEWIDTH, solid_capstyle='butt', zorder=5,
            )
            artists.append(line)
    return artists


def render_wind_barbs(ax: plt.Axes, frame: CoordinateFrame, profile: Profile) -> Dict[float, List[Any]]:
    """
    Draw decimated wind barbs in a column right of the plot rectangle.

    Returns:
        Dictionary mapping each plotted level height to its glyph artists
    """
    x = frame.rect.right + BARB_COLUMN_OFFSET
    levels = select_wind_barb_levels(frame, profile)
    glyphs = {}

    for level in levels:
        anchor = (x, frame.height_to_y(level.height))
        primitives = encode_wind_barb(anchor, level.wind_direction, level.wind_speed)
        glyphs[level.height] = render_primitives(ax, primitives)

    logger.debug(f"Rendered {len(glyphs)} wind barbs (spacing {barb_height_spacing(frame.view):.0f} m)")
    return glyphs
