"""
Matrix constructors.

Factory classmethods mixed into Matrix. They are the validating boundary:
everything built here satisfies len(data) == rows * columns, and the
engines trust that invariant from then on.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import check_array

M = TypeVar('M', bound='MatrixConstructors')


class MatrixConstructors:
    """Factory classmethods for Matrix."""

    @classmethod
    def zeros(cls: type[M], rows: int, columns: int) -> M:
        """rows x columns matrix of zeros."""
        return cls(np.zeros(rows * columns), rows, columns)

    @classmethod
    def ones(cls: type[M], rows: int, columns: int) -> M:
        """rows x columns matrix of ones."""
        return cls(np.ones(rows * columns), rows, columns)

    @classmethod
    def identity(cls: type[M], size: int) -> M:
        """size x size identity matrix."""
        return cls(np.eye(size).ravel(), size, size)

    @classmethod
    def diagonal(cls: type[M], values: ArrayLike) -> M:
        """
        Square matrix with values on the diagonal and zeros elsewhere.

        Raises:
            ValidationError: If values is empty
        """
        diag = check_array(values, 'values').ravel()
        if diag.size == 0:
            raise ValidationError(
                "values: cannot create diagonal matrix from empty sequence"
            )
        size = diag.size
        return cls(np.diag(diag).ravel(), size, size)

    @classmethod
    def random(
        cls: type[M],
        rows: int,
        columns: int,
        rng: np.random.Generator | None = None,
    ) -> M:
        """
        rows x columns matrix of uniform samples from [0, 1).

        Args:
            rows: Row count
            columns: Column count
            rng: Generator to draw from; a fresh default_rng() if None
        """
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.random(rows * columns), rows, columns)

    @classmethod
    def from_rows(cls: type[M], rows: Sequence[Sequence[float]]) -> M:
        """
        Build a matrix from a nested sequence of rows.

        Example:
            >>> Matrix.from_rows([[1, 2], [3, 4]])

        Raises:
            DimensionError: If an item is not a row sequence, or the rows
                have different lengths
        """
        rows = list(rows)
        if not rows:
            return cls(np.empty(0), 0, 0)
        for i, r in enumerate(rows):
            if np.ndim(r) != 1:
                raise DimensionError(
                    f"rows: item {i} is not a row sequence "
                    f"(got {type(r).__name__}); expected nested rows such as [[1, 2], [3, 4]]"
                )
        lengths = [len(r) for r in rows]
        if len(set(lengths)) > 1:
            raise DimensionError(
                f"rows: ragged input, row lengths are {lengths}"
            )
        grid = check_array(rows, 'rows')
        return cls(grid.ravel(), len(rows), lengths[0])

    @classmethod
    def from_array(cls: type[M], array: ArrayLike) -> M:
        """
        Build a matrix from a 1-D or 2-D array-like.

        A 1-D input becomes a column vector.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input has more than two dimensions
        """
        arr = check_array(array, 'array')
        if arr.ndim == 1:
            return cls(arr, arr.shape[0], 1)
        if arr.ndim == 2:
            return cls(arr.ravel(), arr.shape[0], arr.shape[1])
        raise DimensionError(
            f"array: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )

    @classmethod
    def column_vector(cls: type[M], values: ArrayLike) -> M:
        """n x 1 matrix holding values."""
        data = check_array(values, 'values').ravel()
        return cls(data, data.size, 1)

    @classmethod
    def row_vector(cls: type[M], values: ArrayLike) -> M:
        """1 x n matrix holding values."""
        data = check_array(values, 'values').ravel()
        return cls(data, 1, data.size)
