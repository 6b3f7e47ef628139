"""
Annotation module for Skew-T diagram text and legend.

This module provides functions for adding the title, station/observation
line and trace legend to a rendered diagram, plus formatting of the hover
readout shown for an interpolated level. All annotations use consistent
styling from constants.
"""

import logging
from typing import Any, Dict, Optional

import matplotlib.pyplot as plt

from .frame import PlotRect
from ..calculations.thermo import ms_to_kmh, cardinal_direction
from ..constants import (
    TEXT_COLOR,
    TEMPERATURE_COLOR,
    DEWPOINT_COLOR,
    PROFILE_LINEWIDTH,
    TITLE_FONT_SIZE,
    INFO_FONT_SIZE,
    LEGEND_FONT_SIZE,
    TITLE_BASELINE,
    INFO_BASELINE,
    LEGEND_OFFSET_X,
    LEGEND_OFFSET_Y,
    LEGEND_LINE_LENGTH,
    LEGEND_ROW_SPACING,
    DEFAULT_TITLE,
)
from ..profile import Level, Metadata

logger = logging.getLogger("skewt_charts.rendering.annotations")

MISSING_TEXT = "N/A"


def metadata_line(metadata: Optional[Metadata]) -> str:
    """
    Second title line: observation time and station position.

    Example:
        >>> metadata_line(Metadata(latitude=52.1, longitude=-1.5, observation_time="12Z 05 Jun 2024"))
        '12Z 05 Jun 2024  Lat: 52.10° Lon: -1.50°'
    """
    if metadata is None:
        return ""

    parts = []
    if metadata.observation_time:
        parts.append(f"{metadata.observation_time}  ")
    if metadata.latitude is not None and metadata.longitude is not None:
        parts.append(f"Lat: {metadata.latitude:.2f}° Lon: {metadata.longitude:.2f}°")
    return "".join(parts).rstrip()


def add_title_annotation(
    ax: plt.Axes,
    rect: PlotRect,
    metadata: Optional[Metadata] = None
) -> Dict[str, Any]:
    """
    Add the title and metadata line above the plot rectangle.

    The station name is used as title when known; otherwise a generic
    "Skew-T Log-P Diagram" title is drawn.

    Args:
        ax: Matplotlib axes in surface coordinates
        rect: Plot rectangle (text is aligned with its left edge)
        metadata: Optional station/observation metadata

    Returns:
        Dictionary with 'title' and 'info' text artists ('info' is None
        when there is no metadata)
    """
    title = DEFAULT_TITLE
    if metadata is not None and metadata.station_name:
        title = metadata.station_name

    title_artist = ax.text(
        rect.left, TITLE_BASELINE, title,
        ha='left', va='baseline',
        fontsize=TITLE_FONT_SIZE, fontweight='bold', color=TEXT_COLOR,
        zorder=6,
    )

    info_artist = None
    if metadata is not None:
        info_artist = ax.text(
            rect.left, INFO_BASELINE, metadata_line(metadata),
            ha='left', va='baseline',
            fontsize=INFO_FONT_SIZE, color=TEXT_COLOR,
            zorder=6,
        )

    logger.debug(f"Title annotation added: {title!r}")

    return {'title': title_artist, 'info': info_artist}


def add_legend(ax: plt.Axes, rect: PlotRect) -> Dict[str, Any]:
    """
    Draw the Temperature / Dew Point legend inside the top-right of the plot.

    Returns:
        Dictionary mapping legend entry name to (line, text) artists
    """
    x = rect.right - LEGEND_OFFSET_X
    y = rect.top + LEGEND_OFFSET_Y
    entries = {}

    for row, (name, label, color) in enumerate([
        ('temperature', 'Temperature', TEMPERATURE_COLOR),
        ('dewpoint', 'Dew Point', DEWPOINT_COLOR),
    ]):
        row_y = y + row * LEGEND_ROW_SPACING
        line, = ax.plot(
            [x, x + LEGEND_LINE_LENGTH], [row_y, row_y],
            color=color, linewidth=PROFILE_LINEWIDTH, zorder=6,
        )
        text = ax.text(
            x + LEGEND_LINE_LENGTH + 5, row_y + 4, label,
            ha='left', va='baseline',
            fontsize=LEGEND_FONT_SIZE, color='black',
            zorder=6,
        )
        entries[name] = (line, text)

    return entries


def annotate_diagram(
    ax: plt.Axes,
    rect: PlotRect,
    metadata: Optional[Metadata] = None
) -> Dict[str, Any]:
    """
    Add all annotations to a diagram (convenience function).

    Returns:
        Dictionary with keys 'title', 'info' and 'legend'
    """
    annotations = add_title_annotation(ax, rect, metadata)
    annotations['legend'] = add_legend(ax, rect)
    return annotations


def format_level_readout(level: Optional[Level]) -> Dict[str, str]:
    """
    Format an interpolated level for a hover readout.

    Wind speed is shown in km/h and wind direction with its 16-point
    compass name. Missing values are shown as "N/A".

    Args:
        level: Level returned by an interpolation query (None gives an
            all-"N/A" readout)

    Returns:
        Dictionary with 'height', 'temperature', 'dewpoint', 'wind',
        'wind_direction' and 'pressure' display strings

    Example:
        >>> readout = format_level_readout(Level(pressure=850, height=1500, temperature=12.34))
        >>> readout['temperature'], readout['wind']
        ('12.3°C', 'N/A')
    """
    if level is None:
        level = Level()

    def _fmt(value: Optional[float], template: str) -> str:
        return MISSING_TEXT if value is None else template.format(value)

    if level.wind_direction is None:
        wind_direction = MISSING_TEXT
    else:
        wind_direction = f"{int(round(level.wind_direction))}° ({cardinal_direction(level.wind_direction)})"

    return {
        'height': _fmt(level.height, "{:.0f} m"),
        'temperature': _fmt(level.temperature, "{:.1f}°C"),
        'dewpoint': _fmt(level.dewpoint, "{:.1f}°C"),
        'wind': MISSING_TEXT if level.wind_speed is None else f"{ms_to_kmh(level.wind_speed):.1f} km/h",
        'wind_direction': wind_direction,
        'pressure': _fmt(level.pressure, "{:.1f} mb"),
    }
