"""Beam calculator facade: validate, then dispatch to the formula table."""

from .formulas import compute
from .models import BeamInput, BeamResult
from .validation import validate_input


class BeamCalculator:
    """Maximum moment and deflection of a simply supported beam.

    Scope and assumptions:
    - simply supported at both ends
    - small deflections, linear elastic material
    - prismatic beam (constant E and I along the span)
    - center point load or full-span uniform load

    Intended for quick checks, not as a structural analysis program.
    Instances hold no state and may be shared between threads.
    """

    def calculate(self, beam_input: BeamInput) -> BeamResult:
        """Calculate the mid-span moment and deflection.

        Raises:
            InvalidInputError: if the input is not physically admissible
            UnsupportedLoadTypeError: if the load type has no formula
        """
        return compute(validate_input(beam_input))


_calculator = BeamCalculator()


def calculate(beam_input: BeamInput) -> BeamResult:
    """Calculate with the shared calculator instance."""
    return _calculator.calculate(beam_input)
