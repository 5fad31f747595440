"""Front-end configuration for beamcalc."""

from .settings import CalculatorConfig, DisplaySettings, FormDefaults, config

__all__ = ["CalculatorConfig", "DisplaySettings", "FormDefaults", "config"]
