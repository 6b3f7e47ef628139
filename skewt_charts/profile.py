"""
Sounding profile data model for SkewT Charts.

This module defines the Level, Metadata, and Profile types consumed by the
rendering engine, together with loaders for structured profile files (JSON
and CSV). Missing sensor values are represented as ``None``; NaN values
handed in by callers are normalized to ``None`` when a Level is built.

Example:
    >>> from skewt_charts.profile import Level, Profile
    >>>
    >>> profile = Profile.from_records([
    ...     {"pressure": 1000, "height": 110, "temperature": 24.2, "dewpoint": 18.0},
    ...     {"pressure": 850, "height": 1540, "temperature": 15.1, "dewpoint": 9.3},
    ... ])
    >>> len(profile)
    2
"""

import json
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from .exceptions import ProfileError

logger = logging.getLogger("skewt_charts.profile")

LEVEL_FIELDS = ("pressure", "height", "temperature", "dewpoint", "wind_direction", "wind_speed")

# Alternative spellings accepted in profile files
_LEVEL_ALIASES = {
    "pres": "pressure",
    "hght": "height",
    "temp": "temperature",
    "dwpt": "dewpoint",
    "winddir": "wind_direction",
    "wind_dir": "wind_direction",
    "drct": "wind_direction",
    "windspeed": "wind_speed",
    "speed": "wind_speed",
}

_METADATA_ALIASES = {
    "stationname": "station_name",
    "observationtime": "observation_time",
    "lat": "latitude",
    "lon": "longitude",
    "elev": "elevation",
}


def _as_optional_float(value: Any) -> Optional[float]:
    """Coerce a raw value to float, mapping None/NaN/blank to None."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


@dataclass(frozen=True)
class Level:
    """One atmospheric sample.

    Attributes:
        pressure: Pressure in hPa.
        height: Height above sea level in meters.
        temperature: Air temperature in °C.
        dewpoint: Dewpoint in °C.
        wind_direction: Direction the wind blows from, degrees (0-360).
        wind_speed: Wind speed in m/s.
    """

    pressure: Optional[float] = None
    height: Optional[float] = None
    temperature: Optional[float] = None
    dewpoint: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_speed: Optional[float] = None

    def __post_init__(self):
        for name in LEVEL_FIELDS:
            object.__setattr__(self, name, _as_optional_float(getattr(self, name)))

    def get(self, name: str) -> Optional[float]:
        """Return a field by name, e.g. ``level.get("dewpoint")``."""
        if name not in LEVEL_FIELDS:
            raise KeyError(f"Unknown level field '{name}'")
        return getattr(self, name)

    def has(self, *names: str) -> bool:
        """True when every named field is present."""
        return all(self.get(name) is not None for name in names)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Level":
        """Build a Level from a mapping, accepting common key aliases."""
        values = {}
        for key, value in data.items():
            name = _normalize_key(key, _LEVEL_ALIASES)
            if name in LEVEL_FIELDS:
                values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class Metadata:
    """Station and observation details shown in the diagram title."""

    station: Optional[str] = None
    station_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[float] = None
    observation_time: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Metadata":
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _normalize_key(key, _METADATA_ALIASES)
            if name not in known:
                continue
            if name in ("latitude", "longitude", "elevation"):
                value = _as_optional_float(value)
            elif value is not None:
                value = str(value)
            values[name] = value
        return cls(**values)


def _normalize_key(key: str, aliases: Mapping[str, str]) -> str:
    key = str(key).strip()
    flat = key.lower().replace("-", "_")
    return aliases.get(flat.replace("_", ""), aliases.get(flat, flat))


@dataclass(frozen=True)
class Profile:
    """Ordered sequence of Levels from one sounding.

    Levels are kept in the order supplied (conventionally surface to top);
    no monotonicity in pressure or height is assumed.
    """

    levels: Tuple[Level, ...] = ()
    metadata: Optional[Metadata] = None

    def __post_init__(self):
        object.__setattr__(self, "levels", tuple(self.levels))

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.levels)

    @property
    def is_empty(self) -> bool:
        return len(self.levels) == 0

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        metadata: Optional[Union[Metadata, Mapping[str, Any]]] = None
    ) -> "Profile":
        """Build a Profile from an iterable of level mappings."""
        if metadata is not None and not isinstance(metadata, Metadata):
            metadata = Metadata.from_mapping(metadata)
        return cls(levels=tuple(Level.from_mapping(r) for r in records), metadata=metadata)

    def height_range(self) -> Optional[Tuple[float, float]]:
        """Return (min, max) of present heights, or None if there are none."""
        heights = [lvl.height for lvl in self.levels if lvl.height is not None]
        if not heights:
            return None
        return min(heights), max(heights)

    def validate(self) -> bool:
        """Check the pressure and height invariants.

        Returns:
            True if the profile is valid.

        Raises:
            ProfileError: If a present pressure is not finite and positive,
                or a present height is not finite.
        """
        for index, level in enumerate(self.levels):
            if level.pressure is not None and not (math.isfinite(level.pressure) and level.pressure > 0):
                raise ProfileError(f"Level {index}: pressure must be finite and positive, got {level.pressure}")
            if level.height is not None and not math.isfinite(level.height):
                raise ProfileError(f"Level {index}: height must be finite, got {level.height}")
            if (
                level.temperature is not None
                and level.dewpoint is not None
                and level.dewpoint > level.temperature
            ):
                logger.debug(
                    f"Level {index}: dewpoint {level.dewpoint} exceeds temperature {level.temperature}"
                )
        return True


def _load_json(path: Path) -> Tuple[List[Mapping[str, Any]], Optional[Mapping[str, Any]]]:
    with open(path, 'r') as f:
        data = json.load(f)

    if isinstance(data, list):
        records, metadata = data, None
    elif isinstance(data, dict):
        records = data.get("levels", data.get("data"))
        if not isinstance(records, list):
            raise ProfileError(f"{path}: expected a 'levels' list")
        metadata = data.get("metadata")
        if metadata is not None and not isinstance(metadata, Mapping):
            raise ProfileError(f"{path}: 'metadata' must be an object, got {type(metadata).__name__}")
    else:
        raise ProfileError(f"{path}: unsupported JSON layout")

    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ProfileError(f"{path}: level {index} must be an object, got {type(record).__name__}")
    return records, metadata


def _load_csv(path: Path) -> List[Mapping[str, Any]]:
    table = np.genfromtxt(
        path,
        delimiter=",",
        names=True,
        dtype=float,
        encoding="utf-8",
        missing_values="",
        filling_values=np.nan,
        ndmin=1,
    )
    names = table.dtype.names or ()
    return [{name: row[name] for name in names} for row in table]


def load_profile(path: Union[str, Path]) -> Profile:
    """
    Load a sounding profile from a structured JSON or CSV file.

    JSON files hold ``{"metadata": {...}, "levels": [{...}, ...]}`` or a bare
    list of level objects. CSV files need a header row naming the level
    columns (pressure, height, temperature, dewpoint, wind_direction,
    wind_speed); empty cells are treated as missing.

    Args:
        path: Path to a .json or .csv file

    Returns:
        Validated Profile with at least one level

    Raises:
        ProfileError: If the file is missing, unreadable, has an unsupported
            suffix, or yields no valid levels

    Example:
        >>> profile = load_profile("sounding.json")
        >>> print(f"Loaded {len(profile)} levels")
    """
    path = Path(path)
    logger.info(f"Loading profile from {path}")

    if not path.exists():
        raise ProfileError(f"Profile file not found: {path}")

    metadata = None
    try:
        if path.suffix == '.json':
            records, metadata = _load_json(path)
        elif path.suffix == '.csv':
            records = _load_csv(path)
        else:
            raise ProfileError(f"Unsupported profile format: {path.suffix}. Use .json or .csv")
    except ProfileError:
        raise
    except (OSError, ValueError) as e:
        raise ProfileError(f"Failed to read profile {path}: {e}") from e

    profile = Profile.from_records(records, metadata=metadata)
    if profile.is_empty:
        raise ProfileError(f"No levels found in {path}")

    profile.validate()
    logger.info(f"Loaded {len(profile)} levels from {path}")

    return profile
