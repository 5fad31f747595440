"""
Configuration settings for the beam calculator front end.

This module contains the default form values and display options used by the
command-line interface. The calculation core takes no configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger

from ..models import LoadType


@dataclass
class FormDefaults:
    """Default text of the input fields (restored on reset)."""

    LENGTH: str = "10"
    LOAD: str = "1000"
    YOUNGS_MODULUS: str = "200e9"
    MOMENT_OF_INERTIA: str = "1e-6"
    LOAD_TYPE: str = LoadType.POINT_LOAD_CENTER.value

    def __post_init__(self):
        """Validate defaults."""
        for name in ("LENGTH", "LOAD", "YOUNGS_MODULUS", "MOMENT_OF_INERTIA"):
            if not str(getattr(self, name)).strip():
                raise ValueError(f"{name} default must not be blank")
        # Raises UnsupportedLoadTypeError for an unknown load type
        LoadType.from_value(self.LOAD_TYPE)


@dataclass
class DisplaySettings:
    """Formatting of results for presentation."""

    MOMENT_SIGNIFICANT_DIGITS: int = 6
    DEFLECTION_SIGNIFICANT_DIGITS: int = 6

    def __post_init__(self):
        """Validate display settings."""
        if not 1 <= self.MOMENT_SIGNIFICANT_DIGITS <= 17:
            raise ValueError("MOMENT_SIGNIFICANT_DIGITS must be between 1 and 17")
        if not 1 <= self.DEFLECTION_SIGNIFICANT_DIGITS <= 17:
            raise ValueError("DEFLECTION_SIGNIFICANT_DIGITS must be between 1 and 17")

    def format_moment(self, value: float) -> str:
        return f"{value:.{self.MOMENT_SIGNIFICANT_DIGITS}g}"

    def format_deflection(self, value: float) -> str:
        return f"{value:.{self.DEFLECTION_SIGNIFICANT_DIGITS}g}"


class CalculatorConfig:
    """Global configuration for the calculator front end."""

    def __init__(self):
        self.form = FormDefaults()
        self.display = DisplaySettings()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "form_defaults": dict(self.form.__dict__),
            "display": dict(self.display.__dict__),
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "CalculatorConfig":
        """Create configuration from dictionary."""
        instance = cls()

        if "form_defaults" in config_dict:
            new_form = FormDefaults()
            for k, v in config_dict["form_defaults"].items():
                if hasattr(new_form, k):
                    setattr(new_form, k, str(v))
                else:
                    logger.warning(f"Ignoring unknown form default: {k}")
            new_form.__post_init__()  # Validate
            instance.form = new_form

        if "display" in config_dict:
            new_display = DisplaySettings()
            for k, v in config_dict["display"].items():
                if hasattr(new_display, k):
                    setattr(new_display, k, int(v))
                else:
                    logger.warning(f"Ignoring unknown display setting: {k}")
            new_display.__post_init__()  # Validate
            instance.display = new_display

        return instance

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CalculatorConfig":
        """Load configuration overrides from a YAML file."""
        path = Path(path)
        logger.debug(f"Loading configuration from {path}")
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")
        return cls.from_dict(data)

    def validate(self):
        """Validate entire configuration."""
        self.form.__post_init__()
        self.display.__post_init__()


# Default configuration instance
config = CalculatorConfig()
config.validate()  # Ensure default configuration is valid
