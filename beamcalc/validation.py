"""Physical admissibility checks for beam inputs."""

from dataclasses import dataclass
from typing import List

from .errors import InvalidInputError
from .models import BeamInput


@dataclass(frozen=True)
class Violation:
    """A single failed precondition."""

    field: str
    reason: str


def find_violations(beam_input: BeamInput) -> List[Violation]:
    """Return every violated precondition, in reporting order.

    Comparisons are negated so that NaN is never admissible.
    """
    violations = []

    if not beam_input.length > 0:
        violations.append(Violation("length", "length must be positive"))
    if not beam_input.youngs_modulus > 0:
        violations.append(
            Violation("youngs_modulus", "Young's modulus must be positive")
        )
    if not beam_input.moment_of_inertia > 0:
        violations.append(
            Violation("moment_of_inertia", "moment of inertia must be positive")
        )
    if not beam_input.load >= 0:
        violations.append(Violation("load", "load must be non-negative"))

    return violations


def validate_input(beam_input: BeamInput) -> BeamInput:
    """Return the input unchanged, or raise InvalidInputError for the first violation."""
    violations = find_violations(beam_input)
    if violations:
        first = violations[0]
        raise InvalidInputError(first.field, first.reason)
    return beam_input
