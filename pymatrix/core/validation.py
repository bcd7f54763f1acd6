"""
Dimension and input validation for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or guessing at user intent. Every engine operation calls the
relevant check before it touches any element.

Design principles:
    - Each function validates ONE thing
    - Messages report actual and expected shapes
    - The boolean predicates (is_vector, is_3d_vector) never raise
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSquareError,
    NotAVectorError,
    NotA3DVectorError,
    OutOfBoundsError,
)

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def check_array(values: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    return result.astype(np.float64)


def check_data_length(data: NDArray[Any], rows: int, columns: int) -> None:
    """
    Verify a flat element array fills a rows x columns matrix exactly.

    Args:
        data: Flat element array
        rows: Declared row count
        columns: Declared column count

    Raises:
        DimensionError: If the array is not 1-D, a count is negative,
            or len(data) != rows * columns
    """
    if rows < 0 or columns < 0:
        raise DimensionError(
            f"Matrix dimensions must be non-negative, got {rows}x{columns}"
        )
    if data.ndim != 1:
        raise DimensionError(
            f"Matrix data must be a flat sequence, got {data.ndim}D "
            f"array with shape {data.shape}"
        )
    if data.shape[0] != rows * columns:
        raise DimensionError(
            f"Data length {data.shape[0]} does not match {rows}x{columns} "
            f"matrix (expected {rows * columns} elements)"
        )


def check_multiplication_compatible(a: Matrix, b: Matrix) -> None:
    """
    Verify a @ b is defined (a.columns == b.rows).

    Raises:
        DimensionError: Reporting both shapes if incompatible
    """
    if a.columns != b.rows:
        raise DimensionError(
            f"Matrix dimensions incompatible for multiplication: "
            f"{a.rows}x{a.columns} vs {b.rows}x{b.columns}",
            left_shape=a.shape,
            right_shape=b.shape,
        )


def check_dimensions(m: Matrix, rows: int, columns: int) -> None:
    """
    Verify a matrix has exactly the given shape.

    Raises:
        DimensionError: If the shape differs
    """
    if m.rows != rows or m.columns != columns:
        raise DimensionError(
            f"Expected {rows}x{columns} matrix, got {m.rows}x{m.columns}",
            left_shape=m.shape,
            right_shape=(rows, columns),
        )


def check_dimensions_match(a: Matrix, b: Matrix) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if a.rows != b.rows or a.columns != b.columns:
        raise DimensionError(
            f"Dimension mismatch: self is {a.rows}x{a.columns}, "
            f"other is {b.rows}x{b.columns}",
            left_shape=a.shape,
            right_shape=b.shape,
        )


def check_square(m: Matrix) -> None:
    """
    Verify rows == columns.

    Raises:
        NotSquareError: For rectangular matrices
    """
    if m.rows != m.columns:
        raise NotSquareError(
            f"Matrix is not square: {m.rows}x{m.columns}",
            shape=m.shape,
        )


def is_vector(m: Matrix) -> bool:
    """True for row (1 x n) or column (n x 1) vectors."""
    return m.rows == 1 or m.columns == 1


def is_3d_vector(m: Matrix) -> bool:
    """True iff the matrix is 3x1 or 1x3 and holds exactly 3 elements."""
    return (
        ((m.rows == 3 and m.columns == 1) or (m.rows == 1 and m.columns == 3))
        and m.data.shape[0] == 3
    )


def check_vector(m: Matrix, name: str) -> None:
    """
    Verify a matrix is a row or column vector.

    Args:
        m: Matrix to check
        name: Operand name for error messages

    Raises:
        NotAVectorError: If neither dimension is 1
    """
    if not is_vector(m):
        raise NotAVectorError(
            f"{name}: must be a vector (1xN or Nx1), got {m.rows}x{m.columns}",
            shape=m.shape,
        )


def check_3d_vector(m: Matrix, name: str) -> None:
    """
    Verify a matrix is a 3-element row or column vector.

    Args:
        m: Matrix to check
        name: Operand name for error messages

    Raises:
        NotA3DVectorError: Otherwise
    """
    if not is_3d_vector(m):
        raise NotA3DVectorError(
            f"{name}: cross product only defined for 3D vectors "
            f"(3x1 or 1x3), got {m.rows}x{m.columns}",
            shape=m.shape,
        )


def check_index(m: Matrix, row: int, col: int) -> None:
    """
    Verify (row, col) addresses an element of the matrix.

    Raises:
        OutOfBoundsError: If either index is negative or too large
    """
    if not (0 <= row < m.rows and 0 <= col < m.columns):
        raise OutOfBoundsError(
            f"Row {row} or column {col} out of bounds for "
            f"{m.rows}x{m.columns} matrix",
            row=row,
            col=col,
            shape=m.shape,
        )
