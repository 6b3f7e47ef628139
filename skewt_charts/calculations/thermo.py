"""
Thermodynamic approximations for Skew-T reference curves.

This module provides the closed-form relations used to generate the
diagram's reference curve families (dry adiabats, simplified moist
adiabats, mixing-ratio lines), the standard-atmosphere height fallback, and
small display-only conversions used by the hover readout.

All functions accept scalars or numpy arrays.
"""

import logging

import numpy as np

from ..constants import (
    KELVIN_OFFSET,
    POISSON_EXPONENT,
    REFERENCE_PRESSURE,
    SEA_LEVEL_PRESSURE,
    MS_TO_KMH,
)

logger = logging.getLogger("skewt_charts.calculations.thermo")

# Magnus formula coefficients (over water)
MAGNUS_A = 17.67
MAGNUS_B = 243.5  # °C
MAGNUS_E0 = 6.112  # hPa

# Ratio of gas constants expressed in g/kg
EPSILON_G_PER_KG = 621.97

CARDINAL_DIRECTIONS = [
    'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
]


def dry_adiabat_temperature(theta, pressure):
    """
    Temperature on a dry adiabat (Poisson's equation).

    T = θ (p / 1000)^(R/cp) - 273.15, with R/cp ≈ 0.286.

    Args:
        theta: Potential temperature in K
        pressure: Pressure in hPa

    Returns:
        Temperature in °C

    Example:
        >>> round(dry_adiabat_temperature(300.0, 1000.0), 2)
        26.85
    """
    return theta * np.power(np.asarray(pressure, dtype=float) / REFERENCE_PRESSURE, POISSON_EXPONENT) - KELVIN_OFFSET


def moist_adiabat_temperature(theta_e, pressure):
    """
    Temperature on a simplified pseudo-adiabat.

    Uses the dry-adiabat relation with a linear cooling correction of
    0.02 °C per hPa below 1050 hPa. This is an approximation for drawing
    reference curves, not a saturation-adjustment solution.

    Args:
        theta_e: Equivalent potential temperature in K
        pressure: Pressure in hPa

    Returns:
        Temperature in °C
    """
    pressure = np.asarray(pressure, dtype=float)
    return dry_adiabat_temperature(theta_e, pressure) - (1050.0 - pressure) * 0.02


def vapor_pressure_from_mixing_ratio(mixing_ratio, pressure):
    """Vapor pressure (hPa) for a mixing ratio in g/kg at pressure p in hPa."""
    return mixing_ratio * np.asarray(pressure, dtype=float) / (EPSILON_G_PER_KG + mixing_ratio)


def dewpoint_from_vapor_pressure(vapor_pressure):
    """Dewpoint in °C from vapor pressure in hPa (inverted Magnus formula)."""
    log_ratio = np.log(np.asarray(vapor_pressure, dtype=float) / MAGNUS_E0)
    return MAGNUS_B * log_ratio / (MAGNUS_A - log_ratio)


def mixing_ratio_dewpoint(mixing_ratio, pressure):
    """
    Dewpoint of air holding a given mixing ratio at a given pressure.

    Args:
        mixing_ratio: Mixing ratio in g/kg
        pressure: Pressure in hPa

    Returns:
        Dewpoint in °C
    """
    return dewpoint_from_vapor_pressure(vapor_pressure_from_mixing_ratio(mixing_ratio, pressure))


def standard_atmosphere_height(pressure):
    """Height in m for a pressure in hPa (international barometric formula)."""
    return 44330.0 * (1.0 - np.power(np.asarray(pressure, dtype=float) / SEA_LEVEL_PRESSURE, 0.1903))


def ms_to_kmh(speed_ms):
    """Convert a wind speed from m/s to km/h."""
    return speed_ms * MS_TO_KMH


def cardinal_direction(degrees: float) -> str:
    """
    Name of the 16-point compass direction nearest to a bearing.

    Example:
        >>> cardinal_direction(225)
        'SW'
    """
    # Halves round up, so 11.25° is NNE
    index = int(np.floor(degrees / 22.5 + 0.5)) % 16
    return CARDINAL_DIRECTIONS[index]
