"""
Main API module for SkewT Charts package.

This module provides simplified user-facing functions that abstract away the
diagram object. The primary function `create_diagram()` handles the complete
workflow from a loaded profile to a rendered image in a single call.

Example:
    >>> from skewt_charts import create_diagram, load_profile
    >>>
    >>> profile = load_profile("sounding.json")
    >>>
    >>> # Save to file
    >>> create_diagram(profile, output_path="skewt.png")
    >>>
    >>> # Interactive use (returns figure and axes)
    >>> fig, ax = create_diagram(profile, height_range=(0, 8000))
    >>> plt.show()
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt

from .calculations.interpolation import interpolate_at_height
from .config import Config
from .exceptions import InvalidParameterError, ProfileError, RenderError
from .profile import Level, Profile, load_profile
from .rendering import SkewTDiagram

logger = logging.getLogger(__name__)


def create_diagram(
    profile: Optional[Profile],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
    height_range: Optional[Tuple[float, float]] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Create a Skew-T diagram from a sounding profile.

    This is the primary API function that handles the complete workflow:
    1. Initialize SkewTDiagram with the configuration
    2. Zoom to the requested height range (or the profile's default range)
    3. Render the diagram
    4. Save to file or return figure/axes for interactive use

    Args:
        profile: Sounding profile; None or empty renders the reference frame only
        output_path: Output file path; if None, returns (fig, ax) for interactive use
        config: Optional Config object; if None, uses default configuration
        height_range: Optional (min, max) height in meters

    Returns:
        If output_path provided: path to saved diagram file
        If output_path is None: tuple of (figure, axes) for interactive use

    Raises:
        InvalidParameterError: If the configuration or height range is invalid
        RenderError: If rendering or saving fails
    """
    if config is None:
        config = Config()
        logger.debug("Using default configuration")

    try:
        diagram = SkewTDiagram(config=config)
    except ValueError as e:
        raise InvalidParameterError(f"Invalid configuration: {e}") from e

    if height_range is not None:
        diagram.set_height_range(*height_range)
    else:
        diagram.reset_zoom(profile)

    logger.info("Rendering diagram")
    try:
        fig, ax = diagram.draw(profile)
    except Exception as e:
        diagram.close()
        raise RenderError(f"Failed to render diagram: {e}") from e

    if output_path is None:
        logger.info("Returning figure and axes for interactive use")
        return fig, ax

    output_path = config.resolve_output_path(output_path)
    logger.info(f"Saving diagram to {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        saved_path = diagram.save(str(output_path))
    except Exception as e:
        raise RenderError(f"Failed to save diagram to {output_path}: {e}") from e
    finally:
        diagram.close()

    logger.info(f"Diagram saved successfully to {saved_path}")
    return saved_path


def create_diagram_from_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
    height_range: Optional[Tuple[float, float]] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Load a profile file (JSON or CSV) and render it.

    Raises:
        ProfileError: If the profile cannot be loaded
        InvalidParameterError: If the configuration or height range is invalid
        RenderError: If rendering or saving fails
    """
    profile = load_profile(input_path)
    return create_diagram(profile, output_path=output_path, config=config, height_range=height_range)


def query_profile(profile: Profile, height: float) -> Optional[Level]:
    """
    Interpolated level of a profile at a height (hover readout).

    Raises:
        ProfileError: If the profile has no levels
    """
    if profile is None or profile.is_empty:
        raise ProfileError("Cannot query an empty profile")
    return interpolate_at_height(profile, height)
