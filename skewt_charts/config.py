"""
Configuration management for SkewT Charts package.

This module provides configuration options for diagram generation including
surface sizing, margins, DPI, output directories, and the default view
bounds used when a diagram is created.
"""

import json
import math
import yaml
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Union

from .constants import (
    DEFAULT_MARGINS,
    DEFAULT_P_MIN,
    DEFAULT_P_MAX,
    DEFAULT_H_MIN,
    DEFAULT_H_MAX,
    DEFAULT_T_MIN,
    DEFAULT_T_MAX,
    DEFAULT_SKEW,
)


@dataclass
class Config:
    """Configuration for Skew-T diagram generation.

    Attributes:
        canvas_width: Width of the drawing surface in surface units (pixels
            at ``default_dpi``).
        canvas_height: Height of the drawing surface in surface units.
        margin_top: Space above the plot rectangle (title, metadata line).
        margin_right: Space right of the plot rectangle (isobar labels,
            wind barb column).
        margin_bottom: Space below the plot rectangle (isotherm labels).
        margin_left: Space left of the plot rectangle (height labels).
        default_dpi: Resolution for output images (dots per inch).
        background_color: Figure background color (any Matplotlib color spec).
        output_dir: Directory that relative output paths are resolved against.
        p_min: Top of the pressure axis in hPa.
        p_max: Bottom of the pressure axis in hPa.
        h_min: Initial lower bound of the height axis in meters.
        h_max: Initial upper bound of the height axis in meters.
        t_min: Left end of the temperature axis in °C.
        t_max: Right end of the temperature axis in °C.
        skew: Isotherm lean in surface units per natural-log unit of pressure.
    """

    canvas_width: int = 1000
    canvas_height: int = 800
    margin_top: int = DEFAULT_MARGINS["top"]
    margin_right: int = DEFAULT_MARGINS["right"]
    margin_bottom: int = DEFAULT_MARGINS["bottom"]
    margin_left: int = DEFAULT_MARGINS["left"]
    default_dpi: int = 100
    background_color: str = "#ffffff"
    output_dir: Path = field(default_factory=lambda: Path("."))
    p_min: float = DEFAULT_P_MIN
    p_max: float = DEFAULT_P_MAX
    h_min: float = DEFAULT_H_MIN
    h_max: float = DEFAULT_H_MAX
    t_min: float = DEFAULT_T_MIN
    t_max: float = DEFAULT_T_MAX
    skew: float = DEFAULT_SKEW

    def __post_init__(self):
        """Convert string paths to Path objects if necessary."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json).

        Returns:
            Config instance with loaded settings.

        Raises:
            ValueError: If file format is not supported.
            FileNotFoundError: If file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

        data = data or {}
        if 'output_dir' in data:
            data['output_dir'] = Path(data['output_dir'])

        return cls(**data)

    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.

        Args:
            path: Path where configuration should be saved.

        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)
        data['output_dir'] = str(data['output_dir'])

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            elif path.suffix == '.json':
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

    def validate(self) -> bool:
        """Validate configuration parameters.

        Returns:
            True if configuration is valid.

        Raises:
            ValueError: If any configuration parameter is invalid.
        """
        if self.default_dpi <= 0:
            raise ValueError("default_dpi must be positive")

        margins = (self.margin_top, self.margin_right, self.margin_bottom, self.margin_left)
        if any(m < 0 for m in margins):
            raise ValueError("Margins must be non-negative")

        if self.canvas_width <= self.margin_left + self.margin_right:
            raise ValueError("canvas_width must exceed the left and right margins")

        if self.canvas_height <= self.margin_top + self.margin_bottom:
            raise ValueError("canvas_height must exceed the top and bottom margins")

        if not isinstance(self.background_color, str) or not self.background_color:
            raise ValueError("background_color must be a non-empty string")

        if not (0 < self.p_min < self.p_max):
            raise ValueError("Pressure bounds must satisfy 0 < p_min < p_max")

        if not (math.isfinite(self.h_min) and math.isfinite(self.h_max)) or self.h_min >= self.h_max:
            raise ValueError("Height bounds must be finite with h_min < h_max")

        if self.t_min >= self.t_max:
            raise ValueError("Temperature bounds must satisfy t_min < t_max")

        if self.skew < 0:
            raise ValueError("skew must be non-negative")

        return True

    def default_view(self):
        """Build the initial ViewBounds described by this configuration."""
        from .rendering.frame import ViewBounds

        return ViewBounds(
            p_min=self.p_min,
            p_max=self.p_max,
            h_min=self.h_min,
            h_max=self.h_max,
            t_min=self.t_min,
            t_max=self.t_max,
            skew=self.skew,
        )

    def margins(self) -> dict:
        """Return the margins as a dict keyed by side."""
        return {
            "top": self.margin_top,
            "right": self.margin_right,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
        }

    def resolve_output_path(self, path: Union[str, Path]) -> Path:
        """Place a relative output path under ``output_dir``; absolute paths are kept."""
        path = Path(path)
        if path.is_absolute():
            return path
        return self.output_dir / path

    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """
    Get a Config instance with default settings.

    Returns:
        Config instance initialized with default values.
    """
    return Config()
