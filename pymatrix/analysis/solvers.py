"""
Solver dispatch for structural analysis.

This module provides the analyze() function (public API) and backend
selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pymatrix.matrix.matrix import Matrix, as_matrix
from pymatrix.analysis.solution import StructureSolution
from pymatrix.analysis.backends.cpu import CPUCofactorBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_cofactor']


def analyze(
    matrix: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    verify: bool = True,
) -> StructureSolution:
    """
    Compute the structural properties of a matrix in one pass.

    Rank is always computed. For square input the trace, determinant and
    (when non-singular) inverse are computed as well. Singularity is
    reported on the solution rather than raised.

    Args:
        matrix: A Matrix, or any 2-D array-like (1-D becomes a column vector)
        backend: Computational backend to use:
            - 'auto': Select the best available (currently 'cpu_cofactor')
            - 'cpu': Alias for 'cpu_cofactor'
            - 'cpu_cofactor': Cofactor expansion and Gaussian elimination
        verify: If True, check A @ inv(A) against the identity

    Returns:
        StructureSolution with rank, determinant, inverse and summary()

    Raises:
        ValidationError: If the input is not numeric
        DimensionError: If the input has more than two dimensions
        ValueError: If an unknown backend is requested

    Example:
        >>> from pymatrix.analysis import analyze
        >>> result = analyze([[4, 7], [2, 6]])
        >>> result.determinant
        10.0
        >>> print(result.summary())
    """
    # Validate at the boundary, trust everywhere else
    m = as_matrix(matrix)

    backend_impl = _get_backend(backend, verify)
    result = backend_impl.solve(m)

    return StructureSolution(_result=result, _matrix=m)


def _get_backend(choice: BackendChoice, verify: bool) -> CPUCofactorBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_cofactor'):
        return CPUCofactorBackend(verify=verify)

    raise ValueError(f"Unknown backend: {choice!r}")
