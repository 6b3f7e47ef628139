"""Tests for the profile data model and file loaders."""

import json

import pytest

from skewt_charts.exceptions import ProfileError
from skewt_charts.profile import Level, Metadata, Profile, load_profile


class TestLevel:

    def test_nan_becomes_missing(self):
        level = Level(pressure=850, temperature=float("nan"))
        assert level.temperature is None
        assert level.pressure == 850.0

    def test_get_unknown_field(self):
        with pytest.raises(KeyError):
            Level().get("humidity")

    def test_has(self):
        level = Level(pressure=850, height=1500)
        assert level.has("pressure", "height")
        assert not level.has("pressure", "wind_speed")

    def test_from_mapping_aliases(self):
        level = Level.from_mapping({"pres": "850", "hght": 1500, "temp": 10.5, "dwpt": "",
                                    "windDir": 270, "speed": 12, "extra": "ignored"})
        assert level == Level(pressure=850, height=1500, temperature=10.5,
                              wind_direction=270, wind_speed=12)
        assert level.dewpoint is None


class TestProfile:

    def test_height_range(self, station_profile):
        assert station_profile.height_range() == (110.0, 5750.0)
        assert Profile().height_range() is None

    def test_validate_rejects_bad_pressure(self):
        profile = Profile.from_records([{"pressure": -5, "height": 0}])
        with pytest.raises(ProfileError, match="pressure"):
            profile.validate()

    def test_validate_allows_supersaturation(self):
        profile = Profile.from_records([{"pressure": 1000, "height": 0, "temperature": 10, "dewpoint": 12}])
        assert profile.validate()

    def test_metadata_mapping(self):
        profile = Profile.from_records([], metadata={"stationName": "Nottingham", "lat": "53.0"})
        assert profile.metadata == Metadata(station_name="Nottingham", latitude=53.0)
        assert profile.is_empty


class TestLoadProfile:

    def test_json(self, profile_json):
        profile = load_profile(profile_json)
        assert len(profile) == 3
        assert profile.levels[1].temperature == 10
        assert profile.metadata.station_name == "Nottingham"
        assert profile.metadata.longitude == -1.25

    def test_json_bare_list(self, tmp_path):
        path = tmp_path / "levels.json"
        path.write_text(json.dumps([{"pressure": 1000, "height": 0, "temperature": 20}]))
        profile = load_profile(path)
        assert len(profile) == 1
        assert profile.metadata is None

    def test_csv_with_missing_cells(self, tmp_path):
        path = tmp_path / "sounding.csv"
        path.write_text(
            "pressure,height,temperature,dewpoint,wind_direction,wind_speed\n"
            "1000,0,20,15,180,10\n"
            "850,1500,10,,270,20\n"
        )
        profile = load_profile(path)
        assert len(profile) == 2
        assert profile.levels[1].dewpoint is None
        assert profile.levels[1].wind_speed == 20

    def test_csv_single_row(self, tmp_path):
        path = tmp_path / "one.csv"
        path.write_text("pressure,height,temperature\n1000,0,20\n")
        assert len(load_profile(path)) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileError, match="not found"):
            load_profile(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "sounding.txt"
        path.write_text("1000 0 20")
        with pytest.raises(ProfileError, match="Unsupported"):
            load_profile(path)

    def test_empty_levels(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"levels": []}))
        with pytest.raises(ProfileError, match="No levels"):
            load_profile(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ProfileError):
            load_profile(path)

    def test_non_object_levels(self, tmp_path):
        path = tmp_path / "numbers.json"
        path.write_text(json.dumps({"levels": [1000, 850]}))
        with pytest.raises(ProfileError, match="level 0 must be an object"):
            load_profile(path)

    def test_non_object_metadata(self, tmp_path):
        path = tmp_path / "bad_metadata.json"
        path.write_text(json.dumps({"metadata": "x", "levels": [{"pressure": 1000, "height": 0}]}))
        with pytest.raises(ProfileError, match="'metadata' must be an object"):
            load_profile(path)
