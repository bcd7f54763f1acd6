"""
CPU cofactor backend for structural analysis.

Runs the structural engine (Gaussian elimination for rank, cofactor
expansion for determinant and inverse) and packages the results with
per-stage timings.
"""

import warnings
from typing import Any
import numpy as np

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.precision import frobenius_norm, is_close
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer
from pymatrix.core.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix import structural, linear
from pymatrix.analysis.solution import StructureParams


class CPUCofactorBackend:
    """
    CPU backend using the cofactor/adjugate algorithms.

    Implements the Backend protocol for Matrix -> StructureParams.
    """

    def __init__(self, verify: bool = True):
        """
        Args:
            verify: If True, check A @ inv(A) against the identity and
                    report a warning when it falls outside tolerance.
        """
        self._verify = verify

    @property
    def name(self) -> str:
        return 'cpu_cofactor'

    def solve(self, matrix: Matrix) -> Result[StructureParams]:
        """
        Compute rank, and for square input trace, determinant and inverse.

        A singular matrix is not an error here: it is reported through
        info['is_singular'] and a warning, with inverse left as None.
        The determinant is evaluated once and reused for the inverse.
        RuntimeWarnings raised by the structural engine (large-order cost)
        are captured into Result.warnings instead of propagating.

        Args:
            matrix: Input matrix

        Returns:
            Result containing StructureParams
        """
        timer = Timer()
        timer.start()
        messages: list[str] = []

        is_square = matrix.rows == matrix.columns
        det = trace = None
        inv = None
        condition = roundtrip_error = None
        is_singular = None

        with timer.section('rank'):
            rank = structural.rank(matrix)

        if is_square:
            with timer.section('trace'):
                trace = structural.trace(matrix)

            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter('always')
                with timer.section('determinant'):
                    det = structural.determinant(matrix)
            messages.extend(str(w.message) for w in caught)

            with timer.section('inverse'):
                try:
                    inv = structural._inverse(matrix, det)
                except SingularMatrixError as e:
                    messages.append(str(e))
            is_singular = inv is None

        if inv is not None and matrix.rows > 0:
            condition = frobenius_norm(matrix.data) * frobenius_norm(inv.data)
            is_ill_conditioned = not condition < ILL_CONDITIONED_THRESHOLD
            if is_ill_conditioned:
                messages.append(
                    f"Matrix is ill-conditioned (Frobenius condition estimate "
                    f"{condition:.3g} > {ILL_CONDITIONED_THRESHOLD:.0e})"
                )

            if self._verify:
                with timer.section('verify'):
                    product = linear.multiply(matrix, inv)
                    identity = Matrix.identity(matrix.rows)
                    roundtrip_error = float(np.max(np.abs(product.data - identity.data)))
                tier = select_tolerance(is_ill_conditioned)
                if not np.all(is_close(product.data, identity.data, tier.rtol, tier.atol)):
                    messages.append(
                        f"Inverse round-trip error {roundtrip_error:.3g} exceeds "
                        f"{tier.name} tolerance (rtol={tier.rtol:.0e}, atol={tier.atol:.0e})"
                    )

        timer.stop()

        params = StructureParams(
            shape=matrix.shape,
            rank=rank,
            determinant=det,
            trace=trace,
            inverse=inv,
            condition_estimate=condition,
            max_roundtrip_error=roundtrip_error,
        )

        info: dict[str, Any] = {
            'method': 'cofactor',
            'is_square': is_square,
            'is_singular': is_singular,
            'order': matrix.rows if is_square else None,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(messages),
        )
