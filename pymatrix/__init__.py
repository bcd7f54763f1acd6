"""
pymatrix: a dense linear-algebra kernel for small real matrices.

Matrices are flat float64 arrays in row-major order with explicit row and
column counts. The kernel provides dimension-checked element-wise and
scalar arithmetic, matrix multiplication, vector geometry, and the
structural operations determinant (cofactor expansion), inverse (adjugate
method), rank (Gaussian elimination) and trace.

Submodules:
    matrix: The Matrix type and the arithmetic/structural engines
    analysis: One-call structural analysis with timing and diagnostics
    core: Exceptions, validation, tolerances and shared infrastructure
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
from pymatrix.analysis import analyze
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
    "__version__",
    "Matrix",
    "analyze",
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
