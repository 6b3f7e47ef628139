"""
Wind barb encoding.

Wind speed is converted to km/h and decomposed greedily into pennants
(50 km/h), full barbs (10 km/h) and at most one half barb (5 km/h), using
thresholds 2.5 km/h below each unit so the speed is effectively rounded to
the nearest 5 km/h. Speeds under 2.5 km/h are drawn as a calm circle.

The encoder is split into two pure steps: ``decompose`` produces counts and
``layout`` turns counts into vector primitives. Neither draws anything;
rendering.layers turns the primitives into matplotlib artists.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple, Union

from ..calculations.thermo import ms_to_kmh
from ..constants import (
    BARB_STAFF_LENGTH,
    BARB_FLAG_WIDTH,
    BARB_PENNANT_BASE,
    BARB_PENNANT_SPACING,
    BARB_SPACING,
    BARB_CALM_RADIUS,
    PENNANT_KMH,
    FULL_BARB_KMH,
    PENNANT_THRESHOLD_KMH,
    FULL_BARB_THRESHOLD_KMH,
    HALF_BARB_THRESHOLD_KMH,
    CALM_THRESHOLD_KMH,
)

logger = logging.getLogger("skewt_charts.rendering.barbs")

Point = Tuple[float, float]


@dataclass(frozen=True)
class BarbCounts:
    calm: bool
    pennants: int
    full_barbs: int
    half_barb: bool


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    kind: str  # "staff", "barb" or "half_barb"


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point


Primitive = Union[Circle, Segment, Triangle]


def decompose(speed_kmh: float) -> BarbCounts:
    """
    Split a wind speed into barb units.

    Args:
        speed_kmh: Wind speed in km/h

    Returns:
        BarbCounts with the number of pennants, full barbs and whether a
        half barb is drawn

    Example:
        >>> decompose(25.0)
        BarbCounts(calm=False, pennants=0, full_barbs=2, half_barb=True)
        >>> decompose(52.0)
        BarbCounts(calm=False, pennants=1, full_barbs=0, half_barb=False)
    """
    if speed_kmh < CALM_THRESHOLD_KMH:
        return BarbCounts(calm=True, pennants=0, full_barbs=0, half_barb=False)

    remaining = speed_kmh
    pennants = 0
    while remaining >= PENNANT_THRESHOLD_KMH:
        remaining -= PENNANT_KMH
        pennants += 1

    full_barbs = 0
    while remaining >= FULL_BARB_THRESHOLD_KMH:
        remaining -= FULL_BARB_KMH
        full_barbs += 1

    return BarbCounts(
        calm=False,
        pennants=pennants,
        full_barbs=full_barbs,
        half_barb=remaining >= HALF_BARB_THRESHOLD_KMH,
    )


def layout(anchor: Point, direction: float, counts: BarbCounts) -> List[Primitive]:
    """
    Convert barb counts into vector primitives.

    The staff points toward the direction the wind comes from (0° up,
    clockwise). Pennants, then full barbs, then the half barb are placed
    from the free end of the staff toward the anchor, on the clockwise
    side of the staff.

    Args:
        anchor: Surface position of the observation (x, y)
        direction: Meteorological wind direction in degrees
        counts: Output of decompose()

    Returns:
        Ordered list of primitives: a single Circle for calm winds, otherwise
        the staff Segment followed by Triangles and barb Segments
    """
    x, y = anchor

    if counts.calm:
        return [Circle(center=(x, y), radius=BARB_CALM_RADIUS)]

    angle = math.radians(direction)
    perp = angle - math.pi / 2
    sin_a, cos_a = math.sin(angle), math.cos(angle)
    sin_p, cos_p = math.sin(perp), math.cos(perp)

    def along(dist: float) -> Point:
        return x + sin_a * dist, y - cos_a * dist

    def across(point: Point, length: float) -> Point:
        return point[0] + sin_p * length, point[1] - cos_p * length

    primitives: List[Primitive] = [Segment(anchor, along(BARB_STAFF_LENGTH), "staff")]
    dist = BARB_STAFF_LENGTH

    for _ in range(counts.pennants):
        outer = along(dist)
        inner = along(dist - BARB_PENNANT_BASE)
        primitives.append(Triangle(outer, across(inner, BARB_FLAG_WIDTH), inner))
        dist -= BARB_PENNANT_SPACING

    for _ in range(counts.full_barbs):
        base = along(dist)
        primitives.append(Segment(base, across(base, BARB_FLAG_WIDTH), "barb"))
        dist -= BARB_SPACING

    if counts.half_barb:
        base = along(dist)
        primitives.append(Segment(base, across(base, BARB_FLAG_WIDTH / 2), "half_barb"))

    return primitives


def encode_wind_barb(anchor: Point, direction: float, speed_ms: float) -> List[Primitive]:
    """
    Encode one wind observation as barb primitives.

    Args:
        anchor: Surface position (x, y)
        direction: Direction the wind blows from, in degrees
        speed_ms: Wind speed in m/s

    Returns:
        List of Circle/Segment/Triangle primitives describing the glyph

    Example:
        >>> glyph = encode_wind_barb((870.0, 400.0), 270.0, 10.0)  # 36 km/h
        >>> [p.kind for p in glyph if isinstance(p, Segment)]
        ['staff', 'barb', 'barb', 'barb', 'half_barb']
    """
    return layout(anchor, direction, decompose(ms_to_kmh(speed_ms)))
