"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape problems derive from DimensionError,
numeric failures from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Direct element or row indexing outside the matrix is NOT part of this
hierarchy: it raises the built-in IndexError, since it is a programming
error rather than a recoverable condition.
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incompatible for the requested operation.

    Attributes:
        left_shape: Shape of the receiver (or only operand), if known
        right_shape: Shape of the other operand, if any
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Raised by determinant, minor, inverse and trace.
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, left_shape=shape)
        self.shape = shape


class NotAVectorError(DimensionError):
    """Operation requires a row (1 x n) or column (n x 1) vector."""

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message, left_shape=shape)
        self.shape = shape


class NotA3DVectorError(NotAVectorError):
    """Operation requires a 3 x 1 or 1 x 3 vector."""
    pass


class OutOfBoundsError(ValidationError):
    """
    Row or column index lies outside the matrix.

    Raised by minor extraction, which is reachable with caller-supplied
    indices.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when inversion is requested but the absolute determinant falls
    below the singularity threshold.

    Attributes:
        determinant: The determinant that failed the check, if computed
        threshold: The threshold it was compared against
    """

    def __init__(
        self,
        message: str,
        determinant: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.determinant = determinant
        self.threshold = threshold


class ZeroMagnitudeError(NumericalError):
    """Cannot normalize a zero-length vector."""
    pass
