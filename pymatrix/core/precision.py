"""
Numerical precision constants and utilities.

Provides machine epsilon and closeness helpers shared by the kernel,
the analysis backend and the test suite.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


# Machine epsilon for float64, the element type of every Matrix
EPSILON_64: float = machine_epsilon(np.float64)  # ~2.22e-16


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float,
    atol: float,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: Computed value(s)
        b: Reference value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def frobenius_norm(data: NDArray[np.floating[Any]]) -> float:
    """Frobenius norm of a flat element array."""
    return float(np.sqrt(np.sum(data * data)))
