"""
Coordinate frame for Skew-T Log-P diagrams.

This module maps physical quantities onto the drawing surface. Height is
the primary vertical coordinate (it is what the user zooms), while the
reference curves are defined in pressure; every pressure is therefore
converted to height through the current sounding before it is placed.

Surface coordinates have their origin at the top-left corner with y growing
downwards, matching the figure set up by the diagram renderer.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Mapping, Optional

import numpy as np

from ..calculations.thermo import standard_atmosphere_height
from ..constants import (
    DEFAULT_MARGINS,
    DEFAULT_P_MIN,
    DEFAULT_P_MAX,
    DEFAULT_H_MIN,
    DEFAULT_H_MAX,
    DEFAULT_T_MIN,
    DEFAULT_T_MAX,
    DEFAULT_SKEW,
)
from ..profile import Profile

logger = logging.getLogger("skewt_charts.rendering.frame")


@dataclass(frozen=True)
class ViewBounds:
    """Axis extents for one diagram view.

    Attributes:
        p_min: Top of the pressure axis (hPa)
        p_max: Bottom of the pressure axis (hPa)
        h_min: Lower bound of the visible height range (m)
        h_max: Upper bound of the visible height range (m)
        t_min: Left end of the temperature axis (°C)
        t_max: Right end of the temperature axis (°C)
        skew: Isotherm lean in surface units per natural-log unit of pressure
    """

    p_min: float = DEFAULT_P_MIN
    p_max: float = DEFAULT_P_MAX
    h_min: float = DEFAULT_H_MIN
    h_max: float = DEFAULT_H_MAX
    t_min: float = DEFAULT_T_MIN
    t_max: float = DEFAULT_T_MAX
    skew: float = DEFAULT_SKEW

    def with_height_range(self, h_min: float, h_max: float) -> "ViewBounds":
        """Return a copy with a new height range (no validation)."""
        return replace(self, h_min=float(h_min), h_max=float(h_max))

    @property
    def height_span(self) -> float:
        return self.h_max - self.h_min


@dataclass(frozen=True)
class PlotRect:
    """Region of the surface reserved for the coordinate grid."""

    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_canvas(
        cls,
        canvas_width: float,
        canvas_height: float,
        margins: Optional[Mapping[str, float]] = None
    ) -> "PlotRect":
        """Derive the plot rectangle from the surface size and margins."""
        m = dict(DEFAULT_MARGINS)
        if margins:
            m.update(margins)
        return cls(
            left=m["left"],
            top=m["top"],
            width=canvas_width - m["left"] - m["right"],
            height=canvas_height - m["top"] - m["bottom"],
        )

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class CoordinateFrame:
    """
    Projection from (pressure, temperature) and height to surface coordinates.

    A frame is built for one view, one plot rectangle and (optionally) one
    profile, and is never mutated afterwards. The profile's usable
    (pressure, height) pairs are sorted by pressure once here, so the
    pressure-to-height lookup works whether the sounding is listed
    surface-up or top-down.

    Attributes:
        view: ViewBounds in effect
        rect: PlotRect of the drawing surface
        profile: Profile defining the pressure/height relation, or None

    Example:
        >>> frame = CoordinateFrame(ViewBounds(), PlotRect.from_canvas(1000, 800), profile)
        >>> x, y = frame.temp_to_x(20.0, 850.0), frame.pressure_to_y(850.0)
    """

    def __init__(
        self,
        view: ViewBounds,
        rect: PlotRect,
        profile: Optional[Profile] = None
    ):
        self.view = view
        self.rect = rect
        self.profile = profile

        self._log_p_max = math.log(view.p_max)
        self._pressures = None
        self._heights = None

        if profile is not None:
            pairs = [
                (lvl.pressure, lvl.height)
                for lvl in profile.levels
                if lvl.pressure is not None and lvl.height is not None
            ]
            if pairs:
                pairs.sort(key=lambda pair: pair[0])
                self._pressures = np.array([p for p, _ in pairs], dtype=float)
                self._heights = np.array([h for _, h in pairs], dtype=float)
            else:
                logger.debug("Profile has no (pressure, height) pairs, using standard atmosphere")

    @property
    def uses_standard_atmosphere(self) -> bool:
        return self._pressures is None

    def height_to_y(self, height: float) -> float:
        """Surface y for a height; greater heights sit higher on the surface."""
        view = self.view
        ratio = (height - view.h_min) / (view.h_max - view.h_min)
        return self.rect.top + self.rect.height * (1.0 - ratio)

    def y_to_height(self, y: float) -> float:
        """Height represented by a surface y (inverse of height_to_y)."""
        view = self.view
        ratio = 1.0 - (y - self.rect.top) / self.rect.height
        return view.h_min + ratio * (view.h_max - view.h_min)

    def pressure_to_height(self, pressure: float) -> float:
        """
        Height for a pressure, taken from the sounding.

        Interpolates linearly between the bracketing (pressure, height)
        pairs of the profile. Pressures outside the covered range take the
        height of the nearest endpoint. Without a profile the international
        barometric formula is used.
        """
        if self._pressures is None:
            return float(standard_atmosphere_height(pressure))
        return float(np.interp(pressure, self._pressures, self._heights))

    def pressure_to_y(self, pressure: float) -> float:
        return self.height_to_y(self.pressure_to_height(pressure))

    def skew_offset(self, pressure: float) -> float:
        """Horizontal shift applied to temperatures at a given pressure."""
        return self.view.skew * (self._log_p_max - math.log(pressure))

    def temp_to_x(self, temperature: float, pressure: float) -> float:
        """Surface x for a temperature at a given pressure (skewed)."""
        view = self.view
        ratio = (temperature - view.t_min) / (view.t_max - view.t_min)
        base_x = self.rect.left + self.rect.width * ratio
        return base_x + self.skew_offset(pressure)
