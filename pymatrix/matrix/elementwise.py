"""
Elementwise/scalar engine.

Two primitives carry all per-element arithmetic: elementwise() combines two
same-shaped matrices, scalar() combines a matrix with a scalar. Both cost
O(elements) and preserve the operand's shape. Addition, subtraction,
Hadamard product/division and all scalar variants are one-line wrappers.

Operators passed to the primitives receive the flat float64 element
arrays, so numpy ufuncs (np.add, np.maximum, ...) and arithmetic lambdas
both work.

Division follows IEEE semantics: x / 0 gives inf or nan without raising.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.validation import check_dimensions_match

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix

BinaryOp = Callable[[NDArray[np.float64], Any], Any]


def elementwise(a: Matrix, b: Matrix, op: BinaryOp) -> Matrix:
    """
    Apply a binary operator element by element across two matrices.

    Args:
        a: Left operand
        b: Right operand, same shape as a
        op: Operator called as op(a.data, b.data)

    Returns:
        New matrix whose i-th element is op(a[i], b[i])

    Raises:
        DimensionError: If the shapes differ
    """
    check_dimensions_match(a, b)
    data = np.asarray(op(a.data, b.data), dtype=np.float64)
    return type(a)(data, a.rows, a.columns)


def scalar(a: Matrix, value: float, op: BinaryOp) -> Matrix:
    """
    Apply a binary operator between every element and a scalar.

    Never fails: there is no shape to validate.

    Args:
        a: Matrix operand
        value: Scalar operand
        op: Operator called as op(a.data, value)

    Returns:
        New matrix whose i-th element is op(a[i], value)
    """
    data = np.asarray(op(a.data, float(value)), dtype=np.float64)
    return type(a)(data, a.rows, a.columns)


def apply(a: Matrix, func: Callable[[float], float]) -> Matrix:
    """
    Map a scalar function over every element.

    Args:
        a: Matrix operand
        func: Called once per element with a Python float

    Returns:
        New matrix of the same shape
    """
    data = np.fromiter(
        (func(float(x)) for x in a.data), dtype=np.float64, count=a.size
    )
    return type(a)(data, a.rows, a.columns)


def add(a: Matrix, b: Matrix) -> Matrix:
    return elementwise(a, b, np.add)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    return elementwise(a, b, np.subtract)


def hadamard_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Element-by-element product of two equal-shaped matrices."""
    return elementwise(a, b, np.multiply)


def hadamard_divide(a: Matrix, b: Matrix) -> Matrix:
    """Element-by-element quotient; zero divisors yield inf/nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return elementwise(a, b, np.divide)


def scalar_add(a: Matrix, value: float) -> Matrix:
    return scalar(a, value, np.add)


def scalar_subtract(a: Matrix, value: float) -> Matrix:
    return scalar(a, value, np.subtract)


def scalar_multiply(a: Matrix, value: float) -> Matrix:
    return scalar(a, value, np.multiply)


def scalar_divide(a: Matrix, value: float) -> Matrix:
    """Divide every element by value; value == 0 yields inf/nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return scalar(a, value, np.divide)


def scalar_rsubtract(a: Matrix, value: float) -> Matrix:
    """value - a[i] for every element."""
    return scalar(a, value, lambda x, s: s - x)


def scalar_rdivide(a: Matrix, value: float) -> Matrix:
    """value / a[i] for every element; zero elements yield inf/nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return scalar(a, value, lambda x, s: s / x)
