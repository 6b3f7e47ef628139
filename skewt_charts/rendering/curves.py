"""
Reference curve generators for Skew-T diagrams.

Each generator lazily yields the (x, y) vertices of one polyline, projected
through a CoordinateFrame. Generators keep no state between calls, so they
are simply re-run for every draw. Samples that fall outside the tolerance
band around the temperature axis are skipped rather than clamped, which
leaves gaps instead of bending curves onto the plot edge.

Families:
    - Isotherms: -100..50 °C every 10 °C, major every 20 °C
    - Dry adiabats: θ = 200..500 K every 10 K
    - Moist adiabats: θe = 280..380 K every 10 K (simplified pseudo-adiabats)
    - Mixing-ratio lines: 0.5, 1, 2, 4, 8, 16, 32 g/kg up to 600 hPa
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .frame import CoordinateFrame
from ..calculations.thermo import (
    dry_adiabat_temperature,
    moist_adiabat_temperature,
    mixing_ratio_dewpoint,
)
from ..constants import (
    ISOTHERM_TEMPERATURES,
    ISOTHERM_MAJOR_STEP,
    ISOTHERM_TOLERANCE,
    DRY_ADIABAT_THETAS,
    MOIST_ADIABAT_THETAS,
    ADIABAT_PRESSURE_STEP,
    ADIABAT_COLD_TOLERANCE,
    ADIABAT_WARM_TOLERANCE,
    MIXING_RATIOS,
    MIXING_RATIO_PRESSURE_STEP,
    MIXING_RATIO_TOP_PRESSURE,
    MIXING_RATIO_TOLERANCE,
)
from ..profile import Profile

logger = logging.getLogger("skewt_charts.rendering.curves")

Vertex = Tuple[float, float]


@dataclass(frozen=True)
class Isotherm:
    temperature: float
    is_major: bool
    start: Vertex  # at p_max
    end: Vertex  # at p_min


def pressure_sweep(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start, start - step, ... down to and including stop."""
    i = 0
    while True:
        pressure = start - i * step
        if pressure < stop:
            return
        yield pressure
        i += 1


def is_major_isotherm(temperature: float) -> bool:
    return temperature % ISOTHERM_MAJOR_STEP == 0


def isotherm(frame: CoordinateFrame, temperature: float) -> Iterator[Vertex]:
    """Vertices of one isotherm, from p_max to p_min."""
    view = frame.view
    for pressure in (view.p_max, view.p_min):
        yield frame.temp_to_x(temperature, pressure), frame.pressure_to_y(pressure)


def isotherm_family(frame: CoordinateFrame) -> Iterator[Isotherm]:
    """Isotherms within the tolerance band of the temperature axis."""
    view = frame.view
    for temperature in ISOTHERM_TEMPERATURES:
        if temperature < view.t_min - ISOTHERM_TOLERANCE or temperature > view.t_max + ISOTHERM_TOLERANCE:
            continue
        start, end = isotherm(frame, temperature)
        yield Isotherm(temperature, is_major_isotherm(temperature), start, end)


def _adiabat(frame: CoordinateFrame, temperature_at) -> Iterator[Vertex]:
    view = frame.view
    for pressure in pressure_sweep(view.p_max, view.p_min, ADIABAT_PRESSURE_STEP):
        temperature = float(temperature_at(pressure))
        if (
            temperature < view.t_min - ADIABAT_COLD_TOLERANCE
            or temperature > view.t_max + ADIABAT_WARM_TOLERANCE
        ):
            continue
        yield frame.temp_to_x(temperature, pressure), frame.pressure_to_y(pressure)


def dry_adiabat(frame: CoordinateFrame, theta: float) -> Iterator[Vertex]:
    """
    Vertices of the dry adiabat for potential temperature θ (K).

    Pressure is swept from p_max to p_min in 5 hPa steps.
    """
    return _adiabat(frame, lambda p: dry_adiabat_temperature(theta, p))


def moist_adiabat(frame: CoordinateFrame, theta_e: float) -> Iterator[Vertex]:
    """
    Vertices of the simplified moist adiabat for θe (K).

    See calculations.thermo.moist_adiabat_temperature for the approximation.
    """
    return _adiabat(frame, lambda p: moist_adiabat_temperature(theta_e, p))


def mixing_ratio_line(frame: CoordinateFrame, mixing_ratio: float) -> Iterator[Vertex]:
    """
    Vertices of the constant mixing-ratio line for w (g/kg).

    Pressure is swept from p_max up to 600 hPa in 10 hPa steps. Points whose
    x falls outside the plot rectangle are dropped as well.
    """
    view = frame.view
    rect = frame.rect
    for pressure in pressure_sweep(view.p_max, MIXING_RATIO_TOP_PRESSURE, MIXING_RATIO_PRESSURE_STEP):
        dewpoint = float(mixing_ratio_dewpoint(mixing_ratio, pressure))
        if dewpoint < view.t_min - MIXING_RATIO_TOLERANCE or dewpoint > view.t_max + MIXING_RATIO_TOLERANCE:
            continue
        x = frame.temp_to_x(dewpoint, pressure)
        if x < rect.left or x > rect.right:
            continue
        yield x, frame.pressure_to_y(pressure)


def dry_adiabat_family(frame: CoordinateFrame) -> Iterator[Tuple[float, Iterator[Vertex]]]:
    for theta in DRY_ADIABAT_THETAS:
        yield theta, dry_adiabat(frame, theta)


def moist_adiabat_family(frame: CoordinateFrame) -> Iterator[Tuple[float, Iterator[Vertex]]]:
    for theta_e in MOIST_ADIABAT_THETAS:
        yield theta_e, moist_adiabat(frame, theta_e)


def mixing_ratio_family(frame: CoordinateFrame) -> Iterator[Tuple[float, Iterator[Vertex]]]:
    for mixing_ratio in MIXING_RATIOS:
        yield mixing_ratio, mixing_ratio_line(frame, mixing_ratio)


def profile_trace(
    frame: CoordinateFrame,
    profile: Optional[Profile],
    field: str
) -> Iterator[Vertex]:
    """
    Vertices of a sounding trace (temperature or dewpoint).

    A level contributes a vertex only when the field, its pressure and its
    height are all present, the pressure lies within [p_min, p_max] and the
    height within [h_min, h_max]. Vertices are placed at the level's
    measured height rather than the height derived from its pressure.

    Args:
        frame: Coordinate frame of the current view
        profile: Sounding profile (None yields nothing)
        field: Level field to plot, e.g. "temperature" or "dewpoint"
    """
    if profile is None:
        return
    view = frame.view
    for level in profile.levels:
        value = level.get(field)
        if value is None or level.pressure is None or level.height is None:
            continue
        if level.pressure < view.p_min or level.pressure > view.p_max:
            continue
        if level.height < view.h_min or level.height > view.h_max:
            continue
        yield frame.temp_to_x(value, level.pressure), frame.height_to_y(level.height)
