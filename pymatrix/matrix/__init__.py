"""
Dense matrix kernel.

Submodules:
    matrix: The Matrix value type, indexing, display and operators
    constructors: zeros/ones/identity/diagonal/random/from_rows/from_array
    elementwise: Per-element and scalar arithmetic
    linear: Product, transpose and vector geometry
    structural: Minor, determinant, cofactor, adjugate, inverse, rank, trace

Example:
    >>> from pymatrix.matrix import Matrix
    >>> a = Matrix.from_rows([[4, 7], [2, 6]])
    >>> a.inverse() @ a
"""

from pymatrix.matrix.matrix import Matrix, as_matrix
from pymatrix.matrix.elementwise import (
    apply,
    add,
    subtract,
    hadamard_multiply,
    hadamard_divide,
    scalar_add,
    scalar_subtract,
    scalar_multiply,
    scalar_divide,
)
from pymatrix.matrix.linear import (
    multiply,
    transpose,
    dot,
    cross,
    magnitude,
    unit_vector,
    normalize,
    scalar_projection,
    vector_projection,
)
from pymatrix.matrix.structural import (
    minor,
    cofactor,
    adjugate,
    determinant,
    inverse,
    rank,
    trace,
)

__all__ = [
    "Matrix",
    "as_matrix",
    # Elementwise/scalar engine
    "apply",
    "add",
    "subtract",
    "hadamard_multiply",
    "hadamard_divide",
    "scalar_add",
    "scalar_subtract",
    "scalar_multiply",
    "scalar_divide",
    # Linear engine
    "multiply",
    "transpose",
    "dot",
    "cross",
    "magnitude",
    "unit_vector",
    "normalize",
    "scalar_projection",
    "vector_projection",
    # Structural engine
    "minor",
    "cofactor",
    "adjugate",
    "determinant",
    "inverse",
    "rank",
    "trace",
]
