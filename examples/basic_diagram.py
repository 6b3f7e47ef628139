"""
Basic Diagram Generation Example

This example demonstrates how to create a Skew-T Log-P diagram using the
SkewT Charts package. It shows the simplest workflow: build (or load) a
sounding profile, then render it to an image. It also shows how to zoom to a
height range and how to read interpolated values at a height.

Output: PNG files showing isobars, skewed isotherms, dry/moist adiabats,
mixing-ratio lines, the temperature and dewpoint traces, and wind barbs.
"""

import logging
from pathlib import Path

from skewt_charts import (
    Config,
    InvalidParameterError,
    Metadata,
    Profile,
    RenderError,
    SkewTDiagram,
    create_diagram,
    query_profile,
)
from skewt_charts.rendering.annotations import format_level_readout

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ============================================================================
# Sample Sounding
# ============================================================================

# 12Z radiosonde ascent (pressure hPa, height m, temperature/dewpoint °C,
# wind direction degrees, wind speed m/s). The 925 hPa dewpoint is missing.
LEVELS = [
    (1000, 110, 24.2, 18.0, 200, 3),
    (975, 330, 22.0, 17.1, 205, 5),
    (950, 560, 20.4, 16.0, 210, 7),
    (925, 800, 19.5, None, 220, 8),
    (900, 1030, 17.8, 13.2, 225, 9),
    (850, 1540, 15.1, 9.3, 240, 12),
    (800, 2070, 11.6, 4.8, 245, 13),
    (750, 2620, 7.9, 0.1, 250, 15),
    (700, 3100, 4.0, -6.5, 260, 18),
    (600, 4370, -4.1, -17.0, 265, 22),
    (500, 5750, -14.3, -30.1, 270, 26),
    (400, 7330, -26.7, -41.0, 275, 31),
    (300, 9320, -42.5, -55.2, 280, 38),
]

profile = Profile.from_records(
    [
        {
            "pressure": p,
            "height": h,
            "temperature": t,
            "dewpoint": td,
            "wind_direction": wd,
            "wind_speed": ws,
        }
        for p, h, t, td, wd, ws in LEVELS
    ],
    metadata=Metadata(
        station="03354",
        station_name="Nottingham Watnall",
        latitude=53.0,
        longitude=-1.25,
        elevation=117.0,
        observation_time="12Z 05 Jun 2024",
    ),
)

print("Creating Skew-T diagram:")
print(f"  Station: {profile.metadata.station_name}")
print(f"  Levels: {len(profile)}")
print(f"  Heights: {profile.height_range()[0]:.0f}-{profile.height_range()[1]:.0f} m")
print()

# ============================================================================
# Basic Diagram Generation
# ============================================================================

try:
    config = Config(canvas_width=1200, canvas_height=900, default_dpi=100)

    # Default zoom: lowest height (rounded down to 100 m) up to 4500 m
    output_path = create_diagram(
        profile,
        output_path=Path("output/basic_diagram.png"),
        config=config,
    )
    print(f"Success! Diagram saved to: {output_path}")

    # Whole troposphere
    tall_path = create_diagram(
        profile,
        output_path=Path("output/basic_diagram_tall.png"),
        config=config,
        height_range=(0, 10000),
    )
    print(f"Saved full-height diagram to: {tall_path}")
    print()

except InvalidParameterError as e:
    print(f"Error creating diagram (invalid parameters): {e}")

except RenderError as e:
    print(f"Error creating diagram (render failed): {e}")

# ============================================================================
# Hover Readout
# ============================================================================

print("Interpolated readouts:")
for height in (500, 1500, 3000):
    readout = format_level_readout(query_profile(profile, height))
    print(
        f"  {readout['height']:>7}: {readout['pressure']:>9}  T {readout['temperature']:>8}  "
        f"Td {readout['dewpoint']:>8}  wind {readout['wind']} from {readout['wind_direction']}"
    )

# Same readout driven by a surface position, as a mouse-move handler would
diagram = SkewTDiagram(config)
diagram.reset_zoom(profile)
diagram.draw(profile)
level = diagram.query_at(500, 450)
if level is not None:
    print(f"  Cursor at (500, 450) -> {format_level_readout(level)['height']}")
diagram.close()


# ============================================================================
# Interactive Display (Optional)
# ============================================================================

# Uncomment the following section to display the diagram interactively
# instead of saving to file:

"""
import matplotlib.pyplot as plt

fig, ax = create_diagram(profile, height_range=(0, 6000))
print("Displaying diagram... (close window to continue)")
plt.show()
"""
