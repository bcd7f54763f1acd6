"""
Structural analysis of a matrix in one call.

Public API:
    analyze(matrix, ...) -> StructureSolution

Example:
    >>> from pymatrix.analysis import analyze
    >>> result = analyze([[1, 2], [3, 4]])
    >>> result.rank, result.determinant
    (2, -2.0)
    >>> print(result.summary())
"""

from pymatrix.analysis.solution import StructureParams, StructureSolution
from pymatrix.analysis.solvers import analyze

__all__ = [
    "analyze",
    "StructureParams",
    "StructureSolution",
]
