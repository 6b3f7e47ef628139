"""
Thermodynamic calculations and profile interpolation for SkewT Charts.

This module provides the closed-form relations behind the diagram's
reference curves and the height-based interpolation used for hover
readouts:
- Dry adiabats from Poisson's equation
- Simplified pseudo-adiabatic (moist) curves
- Mixing-ratio dewpoints via the inverted Magnus formula
- Standard-atmosphere height for pressure
- Linear interpolation of a Level at an arbitrary height

Main Functions:
    From thermo module:
        - dry_adiabat_temperature: Temperature along a dry adiabat
        - moist_adiabat_temperature: Temperature along a simplified moist adiabat
        - mixing_ratio_dewpoint: Dewpoint for a mixing ratio and pressure
        - standard_atmosphere_height: Barometric height fallback

    From interpolation module:
        - interpolate_at_height: Interpolated Level at a height

Example:
    >>> from skewt_charts.calculations import dry_adiabat_temperature
    >>> round(float(dry_adiabat_temperature(300.0, 1000.0)), 2)
    26.85
"""

from .thermo import (
    dry_adiabat_temperature,
    moist_adiabat_temperature,
    vapor_pressure_from_mixing_ratio,
    dewpoint_from_vapor_pressure,
    mixing_ratio_dewpoint,
    standard_atmosphere_height,
    ms_to_kmh,
    cardinal_direction
)
from .interpolation import interpolate_at_height

__all__ = [
    "dry_adiabat_temperature",
    "moist_adiabat_temperature",
    "vapor_pressure_from_mixing_ratio",
    "dewpoint_from_vapor_pressure",
    "mixing_ratio_dewpoint",
    "standard_atmosphere_height",
    "ms_to_kmh",
    "cardinal_direction",
    "interpolate_at_height",
]
