"""
Core infrastructure for pymatrix.

Shared abstractions used by the matrix kernel and the analysis pipeline.

Key components:
    exceptions: Exception hierarchy
    validation: Dimension validator and input conversion
    precision: Machine epsilon and closeness helpers
    tolerances: Thresholds and tolerance tiers
    result: Generic Result[P] envelope
    timing: Section timer
    protocols: Backend protocol
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    NotAVectorError,
    NotA3DVectorError,
    OutOfBoundsError,
    NumericalError,
    SingularMatrixError,
    ZeroMagnitudeError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Timing
    "Timer",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "NotAVectorError",
    "NotA3DVectorError",
    "OutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
    "ZeroMagnitudeError",
]
