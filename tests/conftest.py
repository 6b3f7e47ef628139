import json

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from skewt_charts.profile import Metadata, Profile


@pytest.fixture
def simple_profile():
    """Three levels with a linear pressure/height relation between samples."""
    return Profile.from_records([
        {"pressure": 1000, "height": 0, "temperature": 20, "dewpoint": 15,
         "wind_direction": 180, "wind_speed": 10},
        {"pressure": 850, "height": 1500, "temperature": 10, "dewpoint": 5,
         "wind_direction": 270, "wind_speed": 20},
        {"pressure": 700, "height": 3000, "temperature": 0, "dewpoint": -10,
         "wind_direction": 300, "wind_speed": 30},
    ])


@pytest.fixture
def station_profile():
    """Profile with metadata and a gap in the dewpoint record."""
    return Profile.from_records(
        [
            {"pressure": 1000, "height": 110, "temperature": 24.2, "dewpoint": 18.0,
             "wind_direction": 200, "wind_speed": 3},
            {"pressure": 925, "height": 800, "temperature": 19.5, "dewpoint": None,
             "wind_direction": 220, "wind_speed": 8},
            {"pressure": 850, "height": 1540, "temperature": 15.1, "dewpoint": 9.3,
             "wind_direction": 240, "wind_speed": 12},
            {"pressure": 700, "height": 3100, "temperature": 4.0, "dewpoint": -6.5,
             "wind_direction": 260, "wind_speed": 18},
            {"pressure": 500, "height": 5750, "temperature": -14.3, "dewpoint": -30.1,
             "wind_direction": 270, "wind_speed": 26},
        ],
        metadata=Metadata(
            station="03354",
            station_name="Nottingham",
            latitude=53.0,
            longitude=-1.25,
            observation_time="12Z 05 Jun 2024",
        ),
    )


@pytest.fixture
def profile_json(tmp_path):
    """Write a JSON profile file and return its path."""
    path = tmp_path / "sounding.json"
    path.write_text(json.dumps({
        "metadata": {"stationName": "Nottingham", "lat": 53.0, "lon": -1.25,
                     "observationTime": "12Z 05 Jun 2024"},
        "levels": [
            {"pressure": 1000, "height": 0, "temperature": 20, "dewpoint": 15,
             "wind_direction": 180, "wind_speed": 10},
            {"pressure": 850, "height": 1500, "temperature": 10, "dewpoint": 5,
             "wind_direction": 270, "wind_speed": 20},
            {"pressure": 700, "height": 3000, "temperature": 0, "dewpoint": -10,
             "wind_direction": 300, "wind_speed": 30},
        ],
    }))
    return path


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
