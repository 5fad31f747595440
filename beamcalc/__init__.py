"""Closed-form moment and deflection of simply supported beams.

This package provides a pure calculation core (validation plus a load-case
formula table) and a command-line front end.
"""

from .models import LoadType, BeamInput, BeamResult
from .errors import BeamCalculationError, InvalidInputError, UnsupportedLoadTypeError
from .validation import Violation, find_violations, validate_input
from .formulas import FORMULA_TABLE, LoadCaseFormula, compute
from .calculator import BeamCalculator, calculate

__all__ = [
    "LoadType",
    "BeamInput",
    "BeamResult",
    "BeamCalculationError",
    "InvalidInputError",
    "UnsupportedLoadTypeError",
    "Violation",
    "find_violations",
    "validate_input",
    "FORMULA_TABLE",
    "LoadCaseFormula",
    "compute",
    "BeamCalculator",
    "calculate",
]
