"""
Constants and fixed parameters for SkewT Charts package.

This module defines the reference curve families, standard isobar levels,
wind barb geometry, styling constants, and physical constants used
throughout the package.
"""

import numpy as np

# ============================================================================
# Default View
# ============================================================================

DEFAULT_P_MIN = 100.0   # hPa
DEFAULT_P_MAX = 1050.0  # hPa
DEFAULT_H_MIN = 0.0     # m
DEFAULT_H_MAX = 4500.0  # m
DEFAULT_T_MIN = -60.0   # °C
DEFAULT_T_MAX = 50.0    # °C
DEFAULT_SKEW = 35.0     # surface units per ln(hPa)

# Margins around the plot rectangle (surface units)
DEFAULT_MARGINS = {"top": 50, "right": 150, "bottom": 50, "left": 100}

# ============================================================================
# Isobars
# ============================================================================

MAJOR_ISOBARS = [1000, 925, 850, 700, 500, 400, 300, 250, 200, 150, 100]
MINOR_ISOBARS = [
    975, 950, 900, 875, 825, 800, 775, 750, 725, 675, 650, 625, 600,
    575, 550, 525, 475, 450, 425, 375, 350, 325, 275, 225, 175, 125,
]

# ============================================================================
# Height Axis
# ============================================================================

# (max visible range in m, tick interval in m); last entry catches the rest
HEIGHT_TICK_INTERVALS = [
    (2000.0, 200.0),
    (5000.0, 500.0),
    (10000.0, 1000.0),
    (20000.0, 2000.0),
    (float("inf"), 5000.0),
]
HEIGHT_TICK_LENGTH = 10

# ============================================================================
# Reference Curve Families
# ============================================================================

ISOTHERM_TEMPERATURES = np.arange(-100, 51, 10).tolist()  # °C
ISOTHERM_MAJOR_STEP = 20
ISOTHERM_TOLERANCE = 20.0  # °C beyond each axis limit

DRY_ADIABAT_THETAS = np.arange(200, 501, 10).tolist()  # K
MOIST_ADIABAT_THETAS = np.arange(280, 381, 10).tolist()  # K
ADIABAT_PRESSURE_STEP = 5.0  # hPa
ADIABAT_COLD_TOLERANCE = 20.0  # °C below t_min
ADIABAT_WARM_TOLERANCE = 40.0  # °C above t_max

MIXING_RATIOS = [0.5, 1, 2, 4, 8, 16, 32]  # g/kg
MIXING_RATIO_PRESSURE_STEP = 10.0  # hPa
MIXING_RATIO_TOP_PRESSURE = 600.0  # hPa
MIXING_RATIO_TOLERANCE = 20.0  # °C beyond each axis limit

# ============================================================================
# Wind Barbs
# ============================================================================

BARB_STAFF_LENGTH = 30.0
BARB_FLAG_WIDTH = 10.0
BARB_PENNANT_BASE = 8.0
BARB_PENNANT_SPACING = 10.0
BARB_SPACING = 6.0
BARB_CALM_RADIUS = 4.0
BARB_COLUMN_OFFSET = 20.0  # right of the plot rectangle

# km/h decomposition units and their rounding thresholds
PENNANT_KMH = 50.0
FULL_BARB_KMH = 10.0
PENNANT_THRESHOLD_KMH = 47.5
FULL_BARB_THRESHOLD_KMH = 7.5
HALF_BARB_THRESHOLD_KMH = 2.5
CALM_THRESHOLD_KMH = 2.5

# Minimum height separation between plotted barbs (m)
BARB_SPACING_NARROW = 250.0
BARB_SPACING_WIDE = 500.0
BARB_WIDE_VIEW_SPAN = 5000.0

# ============================================================================
# Styling Constants
# ============================================================================

TEXT_COLOR = "#1a202c"
HEIGHT_TICK_COLOR = "#cbd5e0"
MAJOR_ISOBAR_COLOR = "#333333"
MINOR_ISOBAR_COLOR = "#cccccc"
MAJOR_ISOTHERM_COLOR = "#00aa00"
MINOR_ISOTHERM_COLOR = "#90EE90"
ISOTHERM_LABEL_COLOR = "#006600"
DRY_ADIABAT_COLOR = (1.0, 140 / 255, 0.0, 0.4)
MOIST_ADIABAT_COLOR = (0.0, 100 / 255, 1.0, 0.3)
MIXING_RATIO_COLOR = (150 / 255, 75 / 255, 0.0, 0.3)
BORDER_COLOR = "#000000"
TEMPERATURE_COLOR = "#ff0000"
DEWPOINT_COLOR = "#00aa00"
BARB_COLOR = "#000000"

REFERENCE_LINEWIDTH = 1.0
BORDER_LINEWIDTH = 2.0
PROFILE_LINEWIDTH = 2.5
BARB_LINEWIDTH = 1.5

# Font Sizes (points)
TITLE_FONT_SIZE = 14
INFO_FONT_SIZE = 9
AXIS_FONT_SIZE = 9
ISOTHERM_FONT_SIZE = 8
LEGEND_FONT_SIZE = 9

# Annotation Positioning (surface units)
TITLE_BASELINE = 25
INFO_BASELINE = 42
LEGEND_OFFSET_X = 200
LEGEND_OFFSET_Y = 20
LEGEND_LINE_LENGTH = 30
LEGEND_ROW_SPACING = 20
DEFAULT_TITLE = "Skew-T Log-P Diagram"

# ============================================================================
# Physical Constants
# ============================================================================

KELVIN_OFFSET = 273.15
POISSON_EXPONENT = 0.286  # R/cp
REFERENCE_PRESSURE = 1000.0  # hPa
SEA_LEVEL_PRESSURE = 1013.25  # hPa
MS_TO_KMH = 3.6
