"""
Structural engine: minor, determinant, cofactor, adjugate, inverse, rank
and trace.

Algorithms:
    determinant: closed forms up to order 3 (Rule of Sarrus for 3x3),
        Laplace expansion along the first row above that. O(n!).
    inverse: adjugate (transposed cofactor matrix) divided by the
        determinant. O(n^2 * n!), so practical only for small orders.
    rank: Gaussian elimination with full reduction on a private copy.

Minors are fresh matrices at each recursion level; no sub-matrix views
are shared between levels. Recursion depth equals the matrix order.

The public determinant/cofactor/adjugate/inverse functions emit a single
RuntimeWarning when the order makes the factorial cost significant; the
internal recursion never warns. Their stacklevel argument has the meaning
it has for warnings.warn: 2, the default, attributes the warning to the
direct caller, and wrappers add one level per frame they introduce.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import numpy as np

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.tolerances import (
    SINGULARITY_THRESHOLD,
    PIVOT_THRESHOLD,
    FACTORIAL_WARNING_ORDER,
)
from pymatrix.core.validation import check_square, check_index
from pymatrix.matrix.elementwise import scalar_divide

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def _warn_if_expensive(order: int, operation: str, stacklevel: int) -> None:
    if order > FACTORIAL_WARNING_ORDER:
        warnings.warn(
            f"{operation} of a {order}x{order} matrix uses cofactor expansion "
            f"with O(n!) cost; expect long run times above order "
            f"{FACTORIAL_WARNING_ORDER}",
            RuntimeWarning,
            # one extra frame for this helper
            stacklevel=stacklevel + 1,
        )


def minor(a: Matrix, row: int, col: int) -> Matrix:
    """
    Sub-matrix with one row and one column removed.

    Args:
        a: Square matrix of order n
        row: Row to exclude (0-based)
        col: Column to exclude (0-based)

    Returns:
        New (n-1) x (n-1) matrix, remaining elements in their original order

    Raises:
        NotSquareError: If a is not square
        OutOfBoundsError: If row or col lies outside a
    """
    check_square(a)
    check_index(a, row, col)
    grid = a.data.reshape(a.rows, a.columns)
    kept = np.delete(np.delete(grid, row, axis=0), col, axis=1)
    return type(a)(kept.ravel(), a.rows - 1, a.columns - 1)


def _determinant(a: Matrix) -> float:
    n = a.rows
    d = a.data
    if n == 0:
        # Empty product; keeps the 1x1 adjugate equal to [[1]]
        return 1.0
    if n == 1:
        return float(d[0])
    if n == 2:
        return float(d[0] * d[3] - d[1] * d[2])
    if n == 3:
        # Rule of Sarrus
        return float(
            d[0] * d[4] * d[8]
            + d[1] * d[5] * d[6]
            + d[2] * d[3] * d[7]
            - d[2] * d[4] * d[6]
            - d[1] * d[3] * d[8]
            - d[0] * d[5] * d[7]
        )

    # Laplace expansion along row 0
    det = 0.0
    for col in range(n):
        sign = 1.0 if col % 2 == 0 else -1.0
        det += float(d[col]) * sign * _determinant(minor(a, 0, col))
    return det


def determinant(a: Matrix, *, stacklevel: int = 2) -> float:
    """
    Determinant by cofactor expansion.

    Orders 1-3 use closed forms; larger orders expand along the first
    row with signs alternating from +1 at column 0. Cost grows as n!,
    so this is suited to small matrices only.

    Args:
        a: Square matrix
        stacklevel: Frame the large-order RuntimeWarning is attributed to

    Returns:
        The determinant (1.0 for the empty 0x0 matrix)

    Raises:
        NotSquareError: If a is not square
    """
    check_square(a)
    _warn_if_expensive(a.rows, 'determinant', stacklevel)
    return _determinant(a)


def _cofactor(a: Matrix, row: int, col: int) -> float:
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * _determinant(minor(a, row, col))


def cofactor(a: Matrix, row: int, col: int, *, stacklevel: int = 2) -> float:
    """
    Signed minor determinant, (-1)^(row+col) * det(minor(row, col)).

    Raises:
        NotSquareError: If a is not square
        OutOfBoundsError: If row or col lies outside a
    """
    check_square(a)
    check_index(a, row, col)
    _warn_if_expensive(a.rows - 1, 'cofactor', stacklevel)
    return _cofactor(a, row, col)


def _adjugate(a: Matrix) -> Matrix:
    n = a.rows
    data = np.empty(n * n, dtype=np.float64)
    for row in range(n):
        for col in range(n):
            # Written at [col][row]: transposes while building
            data[col * n + row] = _cofactor(a, row, col)
    return type(a)(data, n, n)


def adjugate(a: Matrix, *, stacklevel: int = 2) -> Matrix:
    """
    Adjugate: transpose of the cofactor matrix.

    Raises:
        NotSquareError: If a is not square
    """
    check_square(a)
    _warn_if_expensive(a.rows, 'adjugate', stacklevel)
    return _adjugate(a)


def _inverse(a: Matrix, det: float) -> Matrix:
    """Adjugate inverse of square a, given its already computed determinant."""
    if abs(det) < SINGULARITY_THRESHOLD:
        raise SingularMatrixError(
            f"Matrix is singular (determinant = {det!r}), cannot invert",
            determinant=det,
            threshold=SINGULARITY_THRESHOLD,
        )
    return scalar_divide(_adjugate(a), det)


def inverse(a: Matrix, *, stacklevel: int = 2) -> Matrix:
    """
    Inverse via the adjugate method: inv(A) = adj(A) / det(A).

    A matrix is rejected as singular when |det| falls below
    SINGULARITY_THRESHOLD (machine epsilon), which also catches
    near-singular input at the cost of refusing matrices whose
    legitimate determinant is that small.

    Cost is O(n^2 * n!); use a factorization-based routine for
    anything beyond small orders.

    Args:
        a: Square matrix
        stacklevel: Frame the large-order RuntimeWarning is attributed to

    Returns:
        New matrix B with a @ B close to the identity

    Raises:
        NotSquareError: If a is not square
        SingularMatrixError: If |det(a)| < SINGULARITY_THRESHOLD
    """
    check_square(a)
    _warn_if_expensive(a.rows, 'inverse', stacklevel)
    return _inverse(a, _determinant(a))


def rank(a: Matrix) -> int:
    """
    Number of linearly independent rows, by Gaussian elimination.

    Works on a private copy; a is never modified. Each pivot is the first
    row at or below the current rank whose entry in the column exceeds
    PIVOT_THRESHOLD in magnitude. The pivot row is swapped into place and
    the column is cleared in every other row, above and below. Columns
    without a pivot are skipped.

    Only the first min(rows, columns) columns are scanned, so a wide
    matrix whose pivots lie in its trailing columns reports fewer pivots
    than its true rank: [[1, 2, 3], [2, 4, 7]] gives 1.

    Returns:
        The pivot count, 0 <= rank <= min(rows, columns). Never fails.
    """
    work = a.copy()
    grid = work.data.reshape(work.rows, work.columns)
    result = 0

    for col in range(min(work.rows, work.columns)):
        candidates = np.flatnonzero(np.abs(grid[result:, col]) > PIVOT_THRESHOLD)
        if candidates.size == 0:
            continue

        pivot_row = result + int(candidates[0])
        if pivot_row != result:
            work.swap_rows(pivot_row, result)

        for row in range(work.rows):
            if row == result:
                continue
            factor = grid[row, col] / grid[result, col]
            if abs(factor) > PIVOT_THRESHOLD:
                grid[row, col:] -= factor * grid[result, col:]

        result += 1

    return result


def trace(a: Matrix) -> float:
    """
    Sum of the diagonal elements.

    Raises:
        NotSquareError: If a is not square
    """
    check_square(a)
    return float(np.sum(a.data[:: a.columns + 1]))
