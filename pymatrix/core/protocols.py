"""
Core protocols for pymatrix.

Structural interfaces that backend implementations must satisfy. Protocol
(structural typing) rather than ABC keeps backends free of a shared base
class.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.result import Result
    from pymatrix.matrix.matrix import Matrix

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.

    A backend takes a validated Matrix and produces a Result envelope with
    a backend-specific payload. Backends are stateless, so they are cheap
    to construct and easy to swap in tests.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_cofactor'.
        """
        ...

    def solve(self, matrix: 'Matrix') -> 'Result[P]':
        """
        Execute the computation.

        Args:
            matrix: Input matrix

        Returns:
            Result envelope containing the payload and metadata
        """
        ...
