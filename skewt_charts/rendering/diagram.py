"""
Orchestration module for complete Skew-T diagram creation.

This module provides the pure ``render_diagram`` function, which draws one
full frame from an immutable DrawRequest, and the SkewTDiagram class, which
owns the per-diagram state (current view bounds and last drawn profile),
handles zooming, and answers hover queries between draws.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import matplotlib.pyplot as plt

from .annotations import annotate_diagram
from .frame import CoordinateFrame, PlotRect, ViewBounds
from .layers import (
    render_background,
    render_height_axis,
    render_isobars,
    render_isotherms,
    render_dry_adiabats,
    render_moist_adiabats,
    render_mixing_ratio_lines,
    render_border,
    render_profile_trace,
    render_wind_barbs,
)
from ..calculations.interpolation import interpolate_at_height
from ..config import Config
from ..constants import DEFAULT_H_MAX, TEMPERATURE_COLOR, DEWPOINT_COLOR
from ..exceptions import InvalidParameterError
from ..profile import Level, Profile

logger = logging.getLogger("skewt_charts.rendering.diagram")


@dataclass(frozen=True)
class DrawRequest:
    """Everything one draw depends on besides the surface layout."""

    profile: Optional[Profile]
    view: ViewBounds


def validate_height_range(h_min: float, h_max: float) -> Tuple[float, float]:
    """
    Validate a zoom request.

    Args:
        h_min: Lower height bound in meters
        h_max: Upper height bound in meters

    Returns:
        The bounds as floats

    Raises:
        InvalidParameterError: If either bound is not a finite number or
            h_min is not below h_max
    """
    try:
        h_min = float(h_min)
        h_max = float(h_max)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError("Please enter valid height values") from e

    if not (math.isfinite(h_min) and math.isfinite(h_max)):
        raise InvalidParameterError("Please enter valid height values")

    if h_min >= h_max:
        raise InvalidParameterError("Minimum height must be less than maximum height")

    return h_min, h_max


def default_height_range(profile: Optional[Profile], h_max: float = DEFAULT_H_MAX) -> Optional[Tuple[float, float]]:
    """
    Initial zoom for a freshly loaded profile.

    The lower bound is the lowest sounding height rounded down to 100 m; the
    upper bound is fixed (4500 m by default). Returns None when the profile
    has no heights or the rounded floor is not below h_max.
    """
    if profile is None:
        return None
    heights = profile.height_range()
    if heights is None:
        return None
    h_min = math.floor(heights[0] / 100.0) * 100.0
    if h_min >= h_max:
        return None
    return h_min, float(h_max)


def setup_surface(ax: plt.Axes, config: Config) -> None:
    """Map the axes' data coordinates onto surface units (y down)."""
    ax.clear()
    ax.set_xlim(0, config.canvas_width)
    ax.set_ylim(config.canvas_height, 0)
    ax.set_axis_off()


def _render_layer(name: str, func: Callable, *args) -> Any:
    try:
        return func(*args)
    except Exception as e:
        logger.error(f"Failed to render {name} layer: {e}", exc_info=True)
        return None


def render_diagram(
    ax: plt.Axes,
    request: DrawRequest,
    rect: PlotRect,
    config: Config
) -> Dict[str, Any]:
    """
    Render one complete Skew-T diagram.

    The rendering workflow:
    1. Clear the surface and fill the background
    2. Height axis ticks and labels
    3. Major and minor isobars
    4. Isotherms, dry adiabats, moist adiabats, mixing-ratio lines
    5. Plot border
    6. Temperature and dewpoint traces (non-empty profile only)
    7. Wind barbs (non-empty profile only)
    8. Title, metadata line and legend

    Missing values only drop their own vertex or barb. A layer that fails
    is logged and skipped; the remaining layers are still drawn.

    Args:
        ax: Matplotlib axes to draw on (cleared first)
        request: Profile and view bounds for this draw
        rect: Plot rectangle on the surface
        config: Configuration (surface size, background color)

    Returns:
        Dictionary of rendered artists keyed by layer name
    """
    profile = request.profile
    frame = CoordinateFrame(request.view, rect, profile)
    has_profile = profile is not None and not profile.is_empty

    logger.info(
        f"Rendering Skew-T diagram: heights {request.view.h_min:.0f}-{request.view.h_max:.0f} m, "
        f"{len(profile) if profile is not None else 0} levels"
    )

    setup_surface(ax, config)
    layers: Dict[str, Any] = {}

    layers['background'] = _render_layer(
        'background', render_background, ax, config.canvas_width, config.canvas_height, config.background_color
    )
    layers['height_axis'] = _render_layer('height_axis', render_height_axis, ax, frame)
    layers['isobars'] = _render_layer('isobars', render_isobars, ax, frame)
    layers['isotherms'] = _render_layer('isotherms', render_isotherms, ax, frame)
    layers['dry_adiabats'] = _render_layer('dry_adiabats', render_dry_adiabats, ax, frame)
    layers['moist_adiabats'] = _render_layer('moist_adiabats', render_moist_adiabats, ax, frame)
    layers['mixing_ratio_lines'] = _render_layer('mixing_ratio_lines', render_mixing_ratio_lines, ax, frame)
    layers['border'] = _render_layer('border', render_border, ax, rect)

    if has_profile:
        layers['temperature'] = _render_layer(
            'temperature', render_profile_trace, ax, frame, profile, 'temperature', TEMPERATURE_COLOR
        )
        layers['dewpoint'] = _render_layer(
            'dewpoint', render_profile_trace, ax, frame, profile, 'dewpoint', DEWPOINT_COLOR
        )
        layers['wind_barbs'] = _render_layer('wind_barbs', render_wind_barbs, ax, frame, profile)
    else:
        logger.warning("No profile levels to draw, rendering reference frame only")

    metadata = profile.metadata if profile is not None else None
    layers['annotations'] = _render_layer('annotations', annotate_diagram, ax, rect, metadata)

    logger.info("Skew-T diagram rendering complete")

    return layers


class SkewTDiagram:
    """
    One Skew-T diagram instance.

    Holds the only state that survives between draws: the current view
    bounds and the most recently drawn profile. Both are replaced wholesale
    by ``set_height_range`` and ``draw``. Hover queries read the same state
    without changing it.

    Attributes:
        config: Configuration object with surface and view settings
        rect: Plot rectangle, fixed at construction
        view: Current ViewBounds
        profile: Most recently drawn Profile (None until draw is called)
        fig: Matplotlib Figure (None until draw called)
        ax: Matplotlib Axes (None until draw called)

    Example:
        >>> from skewt_charts import SkewTDiagram, load_profile
        >>>
        >>> profile = load_profile("sounding.json")
        >>> diagram = SkewTDiagram()
        >>> diagram.reset_zoom(profile)
        >>> fig, ax = diagram.draw(profile)
        >>> diagram.set_height_range(500, 4500)
        >>> fig, ax = diagram.draw(profile)
        >>> diagram.save("sounding.png")
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.config.validate()

        self.rect = PlotRect.from_canvas(
            self.config.canvas_width,
            self.config.canvas_height,
            self.config.margins(),
        )
        self.view = self.config.default_view()
        self.profile: Optional[Profile] = None

        self.fig = None
        self.ax = None
        self._rendered_layers: Dict[str, Any] = {}

        logger.info(
            f"Initialized SkewTDiagram ({self.config.canvas_width}x{self.config.canvas_height}, "
            f"plot {self.rect.width:.0f}x{self.rect.height:.0f})"
        )

    def set_height_range(self, h_min: float, h_max: float) -> None:
        """
        Zoom to a height range.

        Raises:
            InvalidParameterError: If the range is empty, inverted or not finite
        """
        h_min, h_max = validate_height_range(h_min, h_max)
        self.view = self.view.with_height_range(h_min, h_max)
        logger.info(f"Height range set to {h_min:.0f}-{h_max:.0f} m")

    def reset_zoom(self, profile: Optional[Profile] = None) -> None:
        """Zoom to the default range for a profile (or the current one)."""
        if profile is None:
            profile = self.profile
        height_range = default_height_range(profile, self.config.h_max)
        if height_range is None:
            logger.debug("No usable heights for zoom reset, keeping current range")
            return
        self.set_height_range(*height_range)

    def frame(self) -> CoordinateFrame:
        """Coordinate frame for the current view and profile."""
        return CoordinateFrame(self.view, self.rect, self.profile)

    def draw(self, profile: Optional[Profile] = None) -> Tuple[plt.Figure, plt.Axes]:
        """
        Draw the full diagram for a profile.

        Args:
            profile: Sounding profile; None or empty draws only the
                reference frame

        Returns:
            Tuple of (figure, axes) holding the rendered diagram
        """
        self.profile = profile

        if self.fig is None:
            dpi = self.config.default_dpi
            self.fig = plt.figure(
                figsize=(self.config.canvas_width / dpi, self.config.canvas_height / dpi),
                dpi=dpi,
                facecolor=self.config.background_color,
            )
            self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])

        request = DrawRequest(profile=profile, view=self.view)
        self._rendered_layers = render_diagram(self.ax, request, self.rect, self.config)

        return self.fig, self.ax

    def interpolate_at_height(self, height: float) -> Optional[Level]:
        """Interpolated level of the current profile at a height."""
        return interpolate_at_height(self.profile, height)

    def query_at(self, x: float, y: float) -> Optional[Level]:
        """
        Hover query at a surface position.

        Returns:
            Interpolated Level at the height under the cursor, or None when
            the position is outside the plot rectangle or no profile is loaded
        """
        if self.profile is None or not self.rect.contains(x, y):
            return None
        height = self.frame().y_to_height(y)
        return self.interpolate_at_height(height)

    def get_rendered_layers(self) -> Dict[str, Any]:
        """
        Get dictionary of rendered layers for external access.

        Returns:
            Copy of the artists from the last draw, keyed by layer name
        """
        return self._rendered_layers.copy()

    def save(self, output_path: str, dpi: Optional[int] = None) -> str:
        """
        Save rendered diagram to file.

        Args:
            output_path: Path or string for output file
            dpi: Optional DPI override (uses config.default_dpi if None)

        Returns:
            Path to saved file

        Raises:
            ValueError: If the diagram has not been drawn yet
        """
        if self.fig is None:
            raise ValueError("Diagram has not been drawn yet. Call draw() first.")

        if dpi is None:
            dpi = self.config.default_dpi

        logger.info(f"Saving diagram to {output_path} (dpi={dpi})")
        self.fig.savefig(output_path, dpi=dpi, facecolor=self.fig.get_facecolor())

        try:
            file_size = os.path.getsize(output_path)
            logger.info(f"Diagram saved: {output_path} ({file_size / 1024:.1f} KB)")
        except OSError:
            logger.info(f"Diagram saved: {output_path}")

        return str(output_path)

    def close(self) -> None:
        """Release the matplotlib figure."""
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
