"""Tests for configuration loading, saving and validation."""

from pathlib import Path

import pytest

from skewt_charts.config import Config, get_default_config


class TestConfig:

    def test_defaults(self):
        config = get_default_config()
        assert (config.canvas_width, config.canvas_height) == (1000, 800)
        assert config.margins() == {"top": 50, "right": 150, "bottom": 50, "left": 100}
        assert config.validate()

    def test_default_view(self):
        view = Config(h_max=6000, skew=20).default_view()
        assert (view.p_min, view.p_max) == (100.0, 1050.0)
        assert view.h_max == 6000
        assert view.skew == 20

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_round_trip(self, tmp_path, suffix):
        path = tmp_path / f"config{suffix}"
        Config(canvas_width=1200, background_color="#f0f0f0", output_dir="renders").save_to_file(path)
        loaded = Config.load_from_file(path)
        assert loaded.canvas_width == 1200
        assert loaded.background_color == "#f0f0f0"
        assert loaded.output_dir == Path("renders")

    def test_partial_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("default_dpi: 150\n")
        config = Config.load_from_file(path)
        assert config.default_dpi == 150
        assert config.canvas_width == 1000

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load_from_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("")
        with pytest.raises(ValueError):
            Config.load_from_file(path)

    @pytest.mark.parametrize("overrides", [
        {"default_dpi": 0},
        {"margin_left": -1},
        {"canvas_height": 100},
        {"background_color": ""},
        {"p_min": 1100},
        {"h_min": 5000},
        {"t_min": 60},
        {"skew": -1},
    ])
    def test_validate_rejects(self, overrides):
        with pytest.raises(ValueError):
            Config(**overrides).validate()

    def test_ensure_directories(self, tmp_path):
        config = Config(output_dir=tmp_path / "out" / "nested")
        config.ensure_directories()
        assert config.output_dir.is_dir()

    def test_resolve_output_path(self, tmp_path):
        config = Config(output_dir=tmp_path / "renders")
        assert config.resolve_output_path("skewt.png") == tmp_path / "renders" / "skewt.png"
        assert config.resolve_output_path(tmp_path / "abs.png") == tmp_path / "abs.png"
        assert get_default_config().resolve_output_path("skewt.png") == Path("skewt.png")
