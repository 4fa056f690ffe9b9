"""Tests for asset classification and footprint radii."""

import pytest

from arrange import Category, LayoutConfig, classify_asset, footprint_radius, scale_factor


class TestClassifyAsset:
    @pytest.mark.parametrize("name,expected", [
        ("Leather_Sofa_01.glb", Category.COUCH),
        ("OfficeChair.glb", Category.CHAIR),
        ("RoundTable.glb", Category.TABLE),
        ("Lamp.glb", Category.OTHER),
        ("/sdcard/Download/models/BIG_COUCH.GLB", Category.COUCH),
        ("ArmChair.glb", Category.CHAIR),
    ])
    def test_examples(self, name, expected):
        assert classify_asset(name) == expected

    def test_couch_wins_over_table(self):
        assert classify_asset("sofa_table.glb") == Category.COUCH

    def test_chair_wins_over_table(self):
        assert classify_asset("table_chair_set.glb") == Category.CHAIR

    def test_empty_and_none_are_other(self):
        assert classify_asset("") == Category.OTHER
        assert classify_asset(None) == Category.OTHER


class TestFootprintRadius:
    def test_unit_scale_uses_base_radius(self, config):
        assert footprint_radius(Category.CHAIR, (1, 1, 1), config) == pytest.approx(0.33)
        assert footprint_radius(Category.TABLE, (1, 1, 1), config) == pytest.approx(0.55)
        assert footprint_radius(Category.COUCH, (1, 1, 1), config) == pytest.approx(0.85)
        assert footprint_radius(Category.OTHER, (1, 1, 1), config) == pytest.approx(0.45)

    def test_scale_factor_ignores_height(self):
        assert scale_factor((2.0, 9.0, 1.0)) == pytest.approx(1.5)

    def test_scaled_radius(self, config):
        assert footprint_radius(Category.CHAIR, (2.0, 1.0, 1.0), config) == pytest.approx(0.33 * 1.5)

    def test_clamped_to_max(self, config):
        assert footprint_radius(Category.COUCH, (10.0, 1.0, 10.0), config) == 1.5

    def test_clamped_to_min(self, config):
        assert footprint_radius(Category.CHAIR, (0.1, 1.0, 0.1), config) == 0.2

    def test_custom_base_radii(self):
        config = LayoutConfig(base_radii={Category.CHAIR: 0.4, Category.OTHER: 0.3})
        assert footprint_radius(Category.CHAIR, (1, 1, 1), config) == pytest.approx(0.4)
        # Categories missing from the table fall back to 'other'
        assert footprint_radius(Category.TABLE, (1, 1, 1), config) == pytest.approx(0.3)
