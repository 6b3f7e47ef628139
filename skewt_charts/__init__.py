"""
SkewT Charts - Skew-T Log-P diagram rendering for atmospheric soundings.

This package maps sounding profiles onto a skewed, log-pressure drawing
surface, draws the standard reference curve families (isotherms, dry and
moist adiabats, mixing-ratio lines), traces temperature and dewpoint, and
encodes winds as meteorological barbs.

Quick Start:
    >>> from skewt_charts import create_diagram, load_profile
    >>>
    >>> profile = load_profile("sounding.json")
    >>> create_diagram(profile, output_path="skewt.png")

Advanced Usage:
    >>> from skewt_charts import Config, SkewTDiagram
    >>>
    >>> diagram = SkewTDiagram(Config(canvas_width=1200, canvas_height=900))
    >>> diagram.set_height_range(500, 4500)
    >>> fig, ax = diagram.draw(profile)
    >>> level = diagram.query_at(400, 300)  # hover readout
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import setup_logging
setup_logging()

from .config import Config
from .profile import Level, Metadata, Profile, load_profile

# Rendering components
from .rendering import (
    ViewBounds,
    PlotRect,
    CoordinateFrame,
    DrawRequest,
    SkewTDiagram,
    render_diagram
)

# Calculations
from . import calculations

# User-facing API
from .api import create_diagram, create_diagram_from_file, query_profile

# Exceptions
from .exceptions import (
    SkewTChartsError,
    ProfileError,
    RenderError,
    InvalidParameterError
)

__all__ = [
    "__version__",
    "Config",
    "Level",
    "Metadata",
    "Profile",
    "load_profile",
    "ViewBounds",
    "PlotRect",
    "CoordinateFrame",
    "DrawRequest",
    "SkewTDiagram",
    "render_diagram",
    "calculations",
    "create_diagram",
    "create_diagram_from_file",
    "query_profile",
    "SkewTChartsError",
    "ProfileError",
    "RenderError",
    "InvalidParameterError",
]
