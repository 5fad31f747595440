"""Closed-form formulas for a simply supported beam.

Euler-Bernoulli theory, linear elastic, small deflections, prismatic span.
The critical section is at mid-span for both load cases:

    Point load P at center:   M = P*L/4      d = P*L^3 / (48*E*I)
    Uniform load w:           M = w*L^2/8    d = 5*w*L^4 / (384*E*I)

Powers are written as products, so overflow gives inf rather than
OverflowError.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict

from .models import BeamInput, BeamResult, LoadType

# (load, length, youngs_modulus, moment_of_inertia) -> value
BeamFormula = Callable[[float, float, float, float], float]


@dataclass(frozen=True)
class LoadCaseFormula:
    """Moment and deflection expressions for one load case."""

    description: str
    moment_expr: str
    deflection_expr: str
    max_moment: BeamFormula
    max_deflection: BeamFormula


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division for a non-negative numerator: x/0 is inf, 0/0 is 0."""
    if denominator == 0.0:
        return 0.0 if numerator == 0.0 else math.inf
    return numerator / denominator


def _point_load_moment(P: float, L: float, E: float, I: float) -> float:
    return P * L / 4.0


def _point_load_deflection(P: float, L: float, E: float, I: float) -> float:
    return _divide(P * L * L * L, 48.0 * E * I)


def _uniform_load_moment(w: float, L: float, E: float, I: float) -> float:
    return w * L * L / 8.0


def _uniform_load_deflection(w: float, L: float, E: float, I: float) -> float:
    return _divide(5.0 * w * L * L * L * L, 384.0 * E * I)


FORMULA_TABLE: Dict[LoadType, LoadCaseFormula] = {
    LoadType.POINT_LOAD_CENTER: LoadCaseFormula(
        description="Concentrated load P at mid-span",
        moment_expr="P*L/4",
        deflection_expr="P*L^3/(48*E*I)",
        max_moment=_point_load_moment,
        max_deflection=_point_load_deflection,
    ),
    LoadType.UNIFORM_LOAD: LoadCaseFormula(
        description="Uniform load w over the full span",
        moment_expr="w*L^2/8",
        deflection_expr="5*w*L^4/(384*E*I)",
        max_moment=_uniform_load_moment,
        max_deflection=_uniform_load_deflection,
    ),
}


def compute(beam_input: BeamInput) -> BeamResult:
    """Evaluate the formula pair for an already validated input.

    load_type goes through LoadType.from_value, so members, values, names
    and integer discriminants dispatch alike; anything else raises
    UnsupportedLoadTypeError.
    """
    formula = FORMULA_TABLE[LoadType.from_value(beam_input.load_type)]

    args = (
        float(beam_input.load),
        float(beam_input.length),
        float(beam_input.youngs_modulus),
        float(beam_input.moment_of_inertia),
    )
    return BeamResult(
        max_moment=formula.max_moment(*args),
        max_deflection=formula.max_deflection(*args),
    )
