"""Exceptions raised by the beam calculator core."""

from typing import Any


class BeamCalculationError(Exception):
    """Base exception for beam calculation failures."""

    pass


class InvalidInputError(BeamCalculationError, ValueError):
    """Raised when an input violates a physical precondition.

    These are user-correctable: the reason is meant to be shown as-is.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(reason)


class UnsupportedLoadTypeError(BeamCalculationError, NotImplementedError):
    """Raised when a load type is outside the supported set.

    Signals a caller defect (bad discriminant, stale data) rather than a
    user input problem.
    """

    def __init__(self, load_type: Any):
        self.load_type = load_type
        super().__init__(f"Unsupported load type: {load_type!r}")
