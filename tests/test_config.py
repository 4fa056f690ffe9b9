"""Tests for LayoutConfig validation and loading."""

import json
import os

import pytest
from pydantic import ValidationError

from arrange import DEFAULT_CONFIG, Archetype, Category, LayoutConfig, load_config


class TestLayoutConfig:
    def test_defaults(self):
        config = LayoutConfig()
        assert config.gap_meters == 0.18
        assert config.bounds == (-2.4, 2.4, -3.0, -0.8)
        assert config.iterations == 120
        assert config.damping == 0.65
        assert (config.min_radius, config.max_radius) == (0.20, 1.50)
        assert config.base_radii[Category.COUCH] == 0.85
        assert [r.archetype for r in config.archetype_rules] == [
            Archetype.LIVING, Archetype.DINING, Archetype.WORK_REST,
        ]

    def test_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.gap_meters = 0.5

    @pytest.mark.parametrize("overrides", [
        {"min_x": 1.0, "max_x": 1.0},
        {"min_z": 0.0, "max_z": -1.0},
        {"damping": 0.0},
        {"damping": 1.5},
        {"iterations": -1},
        {"min_radius": 2.0, "max_radius": 1.0},
        {"base_radii": {"chair": 0.3}},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValidationError):
            LayoutConfig(**overrides)


class TestLoadConfig:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("ARRANGE_GAP_METERS", "ARRANGE_ITERATIONS", "ARRANGE_DAMPING"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults_without_overrides(self):
        assert load_config() == LayoutConfig()

    def test_json_file(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({
            "gap_meters": 0.3,
            "archetype_rules": [{"archetype": "dining", "keywords": ["cafe"]}],
        }))
        config = load_config(str(path))
        assert config.gap_meters == 0.3
        assert config.archetype_rules[0].archetype == Archetype.DINING
        assert config.archetype_rules[0].keywords == ("cafe",)

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"gap_meters": 0.3, "iterations": 10}))
        monkeypatch.setenv("ARRANGE_GAP_METERS", "0.25")
        monkeypatch.setenv("ARRANGE_DAMPING", "0.5")
        config = load_config(str(path))
        assert config.gap_meters == 0.25
        assert config.damping == 0.5
        assert config.iterations == 10

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("ARRANGE_ITERATIONS=42\n")
        try:
            assert load_config().iterations == 42
        finally:
            os.environ.pop("ARRANGE_ITERATIONS", None)

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("ARRANGE_DAMPING", "2.0")
        with pytest.raises(ValidationError):
            load_config()
