"""
Generic result container for pymatrix batch computations.

The Result class is the envelope that the analysis backends return. It
carries the computed payload together with timing, provenance and any
non-fatal warnings, so callers get one immutable record per run.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (order, singularity, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    from pymatrix import __version__
    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The payload type produced by the backend

    Attributes:
        params: Computed quantities (determinant, rank, inverse, ...)
        info: Structured metadata (method, order, singularity)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used for the computation

    Examples:
        >>> Result(
        ...     params=StructureParams(...),
        ...     info={'method': 'cofactor', 'order': 3},
        ...     timing={'total_seconds': 0.001, 'determinant': 0.0004},
        ...     backend_name='cpu_cofactor'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
