"""
The Matrix value type.

A Matrix is a flat float64 array in row-major order plus explicit row and
column counts, so element (r, c) sits at data[r * columns + c]. There is no
separate vector type: a vector is a matrix with one row or one column.

Matrices are values. Every operation returns a new Matrix except
swap_rows(), normalize() and item assignment, which mutate the receiver.
Construction copies the input, so no two matrices share storage.

The named methods and the arithmetic operators are thin forwards to the
engines in elementwise, linear and structural.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_array, check_data_length
from pymatrix.matrix import elementwise, linear, structural
from pymatrix.matrix.constructors import MatrixConstructors


def _format_element(value: float) -> str:
    # Integral values print without a fractional part: 1.0 -> "1"
    return np.format_float_positional(value, trim='-')


@dataclass(eq=False)
class Matrix(MatrixConstructors):
    """
    Dense real matrix stored row-major.

    Attributes:
        data: Flat float64 array of length rows * columns
        rows: Number of rows
        columns: Number of columns

    Examples:
        >>> a = Matrix([1, 2, 3, 4], rows=2, columns=2)
        >>> a.determinant()
        -2.0
        >>> print(a @ a)
        [[7, 10]
         [15, 22]]

    Raises (on construction):
        ValidationError: If data is not numeric
        DimensionError: If len(data) != rows * columns
    """
    data: NDArray[np.float64]
    rows: int
    columns: int

    # Make numpy scalars defer to the reflected operators below
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        self.data = check_array(self.data, 'data')
        self.rows = int(self.rows)
        self.columns = int(self.columns)
        check_data_length(self.data, self.rows, self.columns)

    # === Shape ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self.rows * self.columns

    @property
    def T(self) -> Matrix:
        return linear.transpose(self)

    # === Element access ===

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(
                f"index ({row}, {col}) out of range for "
                f"{self.rows}x{self.columns} matrix"
            )
        return row * self.columns + col

    def _row_slice(self, row: int) -> slice:
        if not 0 <= row < self.rows:
            raise IndexError(
                f"row {row} out of range for {self.rows}x{self.columns} matrix"
            )
        start = row * self.columns
        return slice(start, start + self.columns)

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        """m[r] returns a copy of row r; m[r, c] returns one element."""
        if isinstance(key, tuple):
            row, col = key
            return float(self.data[self._offset(row, col)])
        return self.data[self._row_slice(key)].copy()

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        """m[r] = values replaces row r; m[r, c] = x sets one element."""
        if isinstance(key, tuple):
            row, col = key
            self.data[self._offset(row, col)] = float(value)
            return
        values = check_array(value, 'value').ravel()
        if values.shape[0] != self.columns:
            raise DimensionError(
                f"row assignment needs {self.columns} values, got {values.shape[0]}",
                left_shape=(1, self.columns),
                right_shape=(1, values.shape[0]),
            )
        self.data[self._row_slice(key)] = values

    def get(self, row: int, col: int) -> float:
        return self[row, col]

    def set(self, row: int, col: int, value: float) -> None:
        self[row, col] = value

    def swap_rows(self, row1: int, row2: int) -> None:
        """
        Exchange two rows in place.

        Out-of-range indices make this a silent no-op.
        """
        if not (0 <= row1 < self.rows and 0 <= row2 < self.rows):
            return
        grid = self.data.reshape(self.rows, self.columns)
        grid[[row1, row2]] = grid[[row2, row1]]

    def copy(self) -> Matrix:
        return type(self)(self.data, self.rows, self.columns)

    def to_numpy(self) -> NDArray[np.float64]:
        """2-D copy of the elements with shape (rows, columns)."""
        return self.data.reshape(self.rows, self.columns).copy()

    # === Comparison and display ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def __str__(self) -> str:
        if self.data.size == 0:
            return "[]"
        lines = []
        for row in range(self.rows):
            values = ", ".join(_format_element(x) for x in self.data[self._row_slice(row)])
            lines.append(f"[{values}]")
        return "[" + "\n ".join(lines) + "]"

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.rows}, columns={self.columns}, "
            f"data={self.data.tolist()})"
        )

    # === Elementwise/scalar engine ===

    def apply(self, func: Callable[[float], float]) -> Matrix:
        return elementwise.apply(self, func)

    def add(self, other: Matrix) -> Matrix:
        return elementwise.add(self, other)

    def subtract(self, other: Matrix) -> Matrix:
        return elementwise.subtract(self, other)

    def hadamard_multiply(self, other: Matrix) -> Matrix:
        return elementwise.hadamard_multiply(self, other)

    def hadamard_divide(self, other: Matrix) -> Matrix:
        return elementwise.hadamard_divide(self, other)

    def scalar_add(self, value: float) -> Matrix:
        return elementwise.scalar_add(self, value)

    def scalar_subtract(self, value: float) -> Matrix:
        return elementwise.scalar_subtract(self, value)

    def scalar_multiply(self, value: float) -> Matrix:
        return elementwise.scalar_multiply(self, value)

    def scalar_divide(self, value: float) -> Matrix:
        return elementwise.scalar_divide(self, value)

    # === Linear engine ===

    def multiply(self, other: Matrix) -> Matrix:
        return linear.multiply(self, other)

    def transpose(self) -> Matrix:
        return linear.transpose(self)

    def dot(self, other: Matrix) -> float:
        return linear.dot(self, other)

    def cross(self, other: Matrix) -> Matrix:
        return linear.cross(self, other)

    def magnitude(self) -> float:
        return linear.magnitude(self)

    def unit_vector(self) -> Matrix:
        return linear.unit_vector(self)

    def normalize(self) -> None:
        linear.normalize(self)

    def scalar_projection(self, other: Matrix) -> float:
        return linear.scalar_projection(self, other)

    def vector_projection(self, other: Matrix) -> Matrix:
        return linear.vector_projection(self, other)

    # === Structural engine ===
    # stacklevel=3 skips this frame so cost warnings point at user code

    def minor(self, row: int, col: int) -> Matrix:
        return structural.minor(self, row, col)

    def cofactor(self, row: int, col: int) -> float:
        return structural.cofactor(self, row, col, stacklevel=3)

    def adjugate(self) -> Matrix:
        return structural.adjugate(self, stacklevel=3)

    def determinant(self) -> float:
        return structural.determinant(self, stacklevel=3)

    def inverse(self) -> Matrix:
        return structural.inverse(self, stacklevel=3)

    def rank(self) -> int:
        return structural.rank(self)

    def trace(self) -> float:
        return structural.trace(self)

    # === Operators ===

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return elementwise.add(self, other)
        if isinstance(other, numbers.Real):
            return elementwise.scalar_add(self, other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            return elementwise.scalar_add(self, other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return elementwise.subtract(self, other)
        if isinstance(other, numbers.Real):
            return elementwise.scalar_subtract(self, other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            return elementwise.scalar_rsubtract(self, other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return elementwise.hadamard_multiply(self, other)
        if isinstance(other, numbers.Real):
            return elementwise.scalar_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            return elementwise.scalar_multiply(self, other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return elementwise.hadamard_divide(self, other)
        if isinstance(other, numbers.Real):
            return elementwise.scalar_divide(self, other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Matrix:
        if isinstance(other, numbers.Real):
            return elementwise.scalar_rdivide(self, other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return linear.multiply(self, other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return elementwise.scalar_multiply(self, -1.0)


def as_matrix(value: Matrix | ArrayLike) -> Matrix:
    """Return value unchanged if it is a Matrix, else build one from an array-like."""
    if isinstance(value, Matrix):
        return value
    return Matrix.from_array(value)
