"""Conversion of external data into calculator inputs.

Two entry points feed the core:
- BeamRequest: structured data (JSON files, dicts)
- BeamForm: free text typed by a user, one string per field

Neither replaces the validator; the calculator re-checks every input.
"""

import math
from typing import Dict, Optional, Union

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    model_validator,
)

from .config.settings import FormDefaults, config
from .materials import get_youngs_modulus
from .models import BeamInput, LoadType


class BeamRequest(BaseModel):
    """Beam calculation request as read from JSON or a dict.

    Only types are checked here. Physical limits belong to the validator.
    load_type is strict so JSON booleans and floats are rejected, not
    coerced to a discriminant.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(description="Distance between supports")
    load_type: Union[StrictInt, StrictStr] = Field(
        description="Load case name, value or integer discriminant"
    )
    load: float = Field(description="P for a point load, w for a uniform load")
    youngs_modulus: Optional[float] = Field(
        None, description="Young's modulus E (defaults from material)"
    )
    moment_of_inertia: float = Field(description="Second moment of area I")
    material: Optional[str] = Field(
        None, description="Material library entry supplying E"
    )

    @model_validator(mode="after")
    def require_stiffness(self) -> "BeamRequest":
        if self.youngs_modulus is None and self.material is None:
            raise ValueError("either youngs_modulus or material is required")
        return self

    def resolved_youngs_modulus(self) -> float:
        """Explicit E wins over the material library."""
        if self.youngs_modulus is not None:
            return self.youngs_modulus
        E = get_youngs_modulus(self.material)
        logger.debug(f"Using E={E:g} from material '{self.material}'")
        return E

    def to_input(self) -> BeamInput:
        """Build a BeamInput, raising UnsupportedLoadTypeError for unknown load types."""
        return BeamInput(
            length=self.length,
            load_type=LoadType.from_value(self.load_type),
            load=self.load,
            youngs_modulus=self.resolved_youngs_modulus(),
            moment_of_inertia=self.moment_of_inertia,
        )


def parse_positive(text: Optional[str]) -> Optional[float]:
    """Parse a strictly positive, finite number; None means not ready."""
    if text is None or not text.strip():
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


FIELD_MESSAGES = {
    "length": "Length must be a number greater than 0.",
    "load": "Load must be a number greater than 0.",
    "youngs_modulus": "E must be a number greater than 0.",
    "moment_of_inertia": "I must be a number greater than 0.",
}


class BeamForm:
    """Text entry state for a beam calculation.

    Mirrors a data-entry form: each field holds raw text, blank or
    non-positive entries make the form not ready, and reset restores
    the configured defaults.
    """

    def __init__(self, defaults: Optional[FormDefaults] = None):
        self._defaults = defaults or config.form
        self.reset()

    def reset(self):
        """Restore default text and load type."""
        self.length_text = self._defaults.LENGTH
        self.load_text = self._defaults.LOAD
        self.youngs_modulus_text = self._defaults.YOUNGS_MODULUS
        self.moment_of_inertia_text = self._defaults.MOMENT_OF_INERTIA
        self.load_type = LoadType.from_value(self._defaults.LOAD_TYPE)

    def _values(self) -> Dict[str, Optional[float]]:
        return {
            "length": parse_positive(self.length_text),
            "load": parse_positive(self.load_text),
            "youngs_modulus": parse_positive(self.youngs_modulus_text),
            "moment_of_inertia": parse_positive(self.moment_of_inertia_text),
        }

    def errors(self) -> Dict[str, str]:
        """Message per field that is not ready, empty when all are."""
        return {
            name: FIELD_MESSAGES[name]
            for name, value in self._values().items()
            if value is None
        }

    @property
    def can_calculate(self) -> bool:
        return not self.errors()

    def to_input(self) -> BeamInput:
        """Build a BeamInput from the current text."""
        values = self._values()
        missing = [name for name, value in values.items() if value is None]
        if missing:
            raise ValueError(f"Form is not ready, invalid fields: {', '.join(missing)}")
        return BeamInput(
            length=values["length"],
            load_type=self.load_type,
            load=values["load"],
            youngs_modulus=values["youngs_modulus"],
            moment_of_inertia=values["moment_of_inertia"],
        )
