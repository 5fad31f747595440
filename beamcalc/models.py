"""Value types for simply supported beam calculations.

Units are not tracked. Inputs must use one consistent system, for example
SI: length in m, point load in N, uniform load in N/m, E in Pa, I in m^4.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import UnsupportedLoadTypeError


class LoadType(str, Enum):
    """Supported load cases on a simply supported beam."""

    POINT_LOAD_CENTER = "point_load_center"  # Single concentrated load at mid-span
    UNIFORM_LOAD = "uniform_load"  # Uniform load over the full span

    @classmethod
    def from_value(cls, value: Any) -> "LoadType":
        """Convert external data into a load type.

        Accepts a member, its value, its name (case-insensitive) or the
        integer discriminant (0 or 1). Anything else raises
        UnsupportedLoadTypeError.
        """
        if isinstance(value, cls):
            return value

        # bool is an int subclass but never a valid discriminant
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise UnsupportedLoadTypeError(value)

        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value or key.upper() == member.name:
                    return member

        raise UnsupportedLoadTypeError(value)


@dataclass(frozen=True)
class BeamInput:
    """Geometry, stiffness and load of a simply supported prismatic beam.

    Physical admissibility is checked by the validator, not here, so that
    invalid records can still be built and rejected with a reason.
    """

    length: float
    load_type: LoadType
    load: float  # P for a point load, w for a uniform load
    youngs_modulus: float
    moment_of_inertia: float


@dataclass(frozen=True)
class BeamResult:
    """Mid-span response of the beam."""

    max_moment: float
    max_deflection: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "max_moment": self.max_moment,
            "max_deflection": self.max_deflection,
        }
