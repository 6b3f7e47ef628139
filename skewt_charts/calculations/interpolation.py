"""
Height-based interpolation over a sounding profile.

Used for hover readouts: given an arbitrary height, return a Level whose
attributes are linearly interpolated between the bracketing samples.
"""

import logging
from typing import Optional

from ..profile import Level, Profile

logger = logging.getLogger("skewt_charts.calculations.interpolation")

INTERPOLATED_FIELDS = ("pressure", "temperature", "dewpoint", "wind_speed", "wind_direction")


def _blend(lower: Optional[float], upper: Optional[float], ratio: float) -> Optional[float]:
    # Written as a weighted sum so ratio 0 and 1 reproduce the samples exactly
    if lower is None or upper is None:
        return None
    return lower * (1.0 - ratio) + upper * ratio


def interpolate_at_height(profile: Optional[Profile], target_height: float) -> Optional[Level]:
    """
    Interpolate every level attribute at an arbitrary height.

    Scans adjacent level pairs for the first whose height interval (taken
    order-agnostically as [min(h1, h2), max(h1, h2)]) contains the target,
    then interpolates pressure, temperature, dewpoint, wind speed and wind
    direction by the same height ratio. Wind direction is interpolated
    linearly in degrees, without wrapping around north.

    A field missing at either end of the pair is missing in the result; the
    other fields are still interpolated. When no pair brackets the target,
    the level nearest in height is returned as-is.

    Args:
        profile: Sounding profile (may be None or empty)
        target_height: Height in meters

    Returns:
        Interpolated Level with ``height == target_height``, the nearest
        Level when the target is not bracketed, or None if the profile has
        no level with a height

    Example:
        >>> level = interpolate_at_height(profile, 1200.0)
        >>> print(f"{level.temperature:.1f}°C at {level.height:.0f} m")
    """
    if profile is None or profile.is_empty:
        return None

    levels = profile.levels
    for lower, upper in zip(levels, levels[1:]):
        if lower.height is None or upper.height is None:
            continue

        low_h = min(lower.height, upper.height)
        high_h = max(lower.height, upper.height)
        if not (low_h <= target_height <= high_h):
            continue

        span = upper.height - lower.height
        if span == 0:
            values = {name: lower.get(name) for name in INTERPOLATED_FIELDS}
        else:
            ratio = (target_height - lower.height) / span
            values = {
                name: _blend(lower.get(name), upper.get(name), ratio)
                for name in INTERPOLATED_FIELDS
            }
        return Level(height=target_height, **values)

    closest = None
    min_distance = float("inf")
    for level in levels:
        if level.height is None:
            continue
        distance = abs(level.height - target_height)
        if distance < min_distance:
            min_distance = distance
            closest = level

    if closest is None:
        logger.debug("No level with a height available for interpolation")
    return closest
