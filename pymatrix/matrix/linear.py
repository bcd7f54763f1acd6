"""
Linear engine: matrix product, transpose and vector geometry.

Every operation validates shapes first and then hands the arithmetic to
numpy or to the elementwise engine. Vectors are ordinary matrices with
one row or one column; the vector operations check for that shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pymatrix.core.exceptions import ZeroMagnitudeError
from pymatrix.core.validation import (
    check_multiplication_compatible,
    check_dimensions_match,
    check_vector,
    check_3d_vector,
)
from pymatrix.matrix.elementwise import scalar_divide, scalar_multiply

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Standard matrix product.

    result[i][j] = sum_k a[i][k] * b[k][j]. Cost is
    O(a.rows * a.columns * b.columns).

    Args:
        a: Left operand (m x k)
        b: Right operand (k x n)

    Returns:
        New m x n matrix

    Raises:
        DimensionError: If a.columns != b.rows
    """
    check_multiplication_compatible(a, b)
    left = a.data.reshape(a.rows, a.columns)
    right = b.data.reshape(b.rows, b.columns)
    product = left @ right
    return type(a)(product.ravel(), a.rows, b.columns)


def transpose(a: Matrix) -> Matrix:
    """Swap rows and columns: result[j][i] = a[i][j]. Always succeeds."""
    flipped = a.data.reshape(a.rows, a.columns).T
    return type(a)(flipped.ravel(), a.columns, a.rows)


def dot(a: Matrix, b: Matrix) -> float:
    """
    Dot product of two vectors of the same shape.

    Raises:
        NotAVectorError: If either operand is not a vector
        DimensionError: If the shapes differ (a 1x3 and a 3x1 do not match)
    """
    check_vector(a, 'self')
    check_vector(b, 'other')
    check_dimensions_match(a, b)
    return float(np.dot(a.data, b.data))


def cross(a: Matrix, b: Matrix) -> Matrix:
    """
    Cross product of two 3D vectors.

    Returns:
        New 3x1 column vector, orthogonal to both inputs

    Raises:
        NotA3DVectorError: If either operand is not 3x1 or 1x3
    """
    check_3d_vector(a, 'self')
    check_3d_vector(b, 'other')
    u, v = a.data, b.data
    data = np.array([
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    ])
    return type(a)(data, 3, 1)


def magnitude(a: Matrix) -> float:
    """
    Euclidean length of a vector, sqrt(a . a).

    Raises:
        NotAVectorError: If a is not a vector
    """
    check_vector(a, 'self')
    return float(np.sqrt(dot(a, a)))


def _nonzero_magnitude(a: Matrix) -> float:
    mag = magnitude(a)
    if mag == 0.0:
        raise ZeroMagnitudeError("Cannot normalize zero-length vector")
    return mag


def unit_vector(a: Matrix) -> Matrix:
    """
    Unit vector in the direction of a.

    Unlike scalar division, a zero-length vector is rejected instead of
    producing nan.

    Raises:
        NotAVectorError: If a is not a vector
        ZeroMagnitudeError: If a has zero length
    """
    return scalar_divide(a, _nonzero_magnitude(a))


def normalize(a: Matrix) -> None:
    """
    Scale a to unit length in place.

    The receiver is left unchanged when an error is raised.

    Raises:
        NotAVectorError: If a is not a vector
        ZeroMagnitudeError: If a has zero length
    """
    mag = _nonzero_magnitude(a)
    a.data /= mag


def scalar_projection(a: Matrix, b: Matrix) -> float:
    """
    Signed length of a projected onto b: (a . b) / |b|.

    Projection onto a zero vector gives nan rather than raising.
    """
    d = dot(a, b)
    b_mag = magnitude(b)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(d, b_mag))


def vector_projection(a: Matrix, b: Matrix) -> Matrix:
    """
    Projection of a onto b: ((a . b) / |b|^2) * b.

    Returns:
        New matrix with the shape of b
    """
    d = dot(a, b)
    b_mag_squared = dot(b, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        scale = float(np.divide(d, b_mag_squared))
    return scalar_multiply(b, scale)
