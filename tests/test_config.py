"""Tests for front-end configuration and the material library."""

import pytest

from beamcalc.config import CalculatorConfig, DisplaySettings, FormDefaults, config
from beamcalc.errors import UnsupportedLoadTypeError
from beamcalc.materials import get_youngs_modulus, load_materials


def test_default_config_is_valid():
    config.validate()
    assert config.form.LENGTH == "10"
    assert config.display.MOMENT_SIGNIFICANT_DIGITS == 6


def test_round_trip_dict():
    cfg = CalculatorConfig.from_dict(
        {"form_defaults": {"LENGTH": 6}, "display": {"DEFLECTION_SIGNIFICANT_DIGITS": 3}}
    )
    assert cfg.form.LENGTH == "6"
    assert cfg.display.DEFLECTION_SIGNIFICANT_DIGITS == 3
    assert CalculatorConfig.from_dict(cfg.to_dict()).to_dict() == cfg.to_dict()


def test_unknown_keys_ignored():
    cfg = CalculatorConfig.from_dict({"display": {"COLOR": "blue"}})
    assert cfg.display.MOMENT_SIGNIFICANT_DIGITS == 6


def test_invalid_display_settings():
    with pytest.raises(ValueError, match="MOMENT_SIGNIFICANT_DIGITS"):
        DisplaySettings(MOMENT_SIGNIFICANT_DIGITS=0)
    with pytest.raises(ValueError):
        CalculatorConfig.from_dict({"display": {"DEFLECTION_SIGNIFICANT_DIGITS": 40}})


def test_invalid_form_defaults():
    with pytest.raises(ValueError, match="LENGTH"):
        FormDefaults(LENGTH=" ")
    with pytest.raises(UnsupportedLoadTypeError):
        FormDefaults(LOAD_TYPE="cantilever")


def test_from_yaml(tmp_path):
    path = tmp_path / "beamcalc.yaml"
    path.write_text("form_defaults:\n  LOAD: '250'\ndisplay:\n  MOMENT_SIGNIFICANT_DIGITS: 4\n")
    cfg = CalculatorConfig.from_yaml(path)
    assert cfg.form.LOAD == "250"
    assert cfg.display.format_moment(1234.5678) == "1235"


def test_from_yaml_requires_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="mapping"):
        CalculatorConfig.from_yaml(path)


def test_display_formatting():
    display = DisplaySettings(DEFLECTION_SIGNIFICANT_DIGITS=3)
    assert display.format_deflection(0.0104166667) == "0.0104"


class TestMaterials:
    def test_library_entries(self):
        materials = load_materials()
        assert "structural_steel" in materials
        for props in materials.values():
            assert props["youngs_modulus_pa"] > 0

    def test_get_youngs_modulus(self):
        assert get_youngs_modulus("aluminum_6061_t6") == pytest.approx(68.9e9)

    def test_unknown_material_lists_available(self):
        with pytest.raises(KeyError, match="structural_steel"):
            get_youngs_modulus("balsa")

    def test_custom_library(self, tmp_path):
        path = tmp_path / "materials.yaml"
        path.write_text("glass:\n  youngs_modulus_pa: 70.0e+9\n")
        assert get_youngs_modulus("glass", path) == pytest.approx(70e9)
