"""
Structural analysis solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.result import Result
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class StructureParams:
    """
    Parameter payload for structural analysis.

    This is the immutable data computed by backends. Square-only
    quantities are None for rectangular input; inverse is also None
    when the matrix is singular.
    """
    shape: tuple[int, int]
    rank: int
    determinant: float | None
    trace: float | None
    inverse: Matrix | None
    condition_estimate: float | None
    max_roundtrip_error: float | None


@dataclass
class StructureSolution:
    """
    User-facing structural analysis results.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[StructureParams]
    _matrix: Matrix

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self._result.params.shape

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_square(self) -> bool:
        rows, columns = self.shape
        return rows == columns

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self.shape)

    @property
    def determinant(self) -> float | None:
        return self._result.params.determinant

    @property
    def trace(self) -> float | None:
        return self._result.params.trace

    @property
    def inverse(self) -> Matrix | None:
        return self._result.params.inverse

    @property
    def is_singular(self) -> bool | None:
        """None for rectangular input."""
        return self._result.info.get('is_singular')

    @property
    def condition_estimate(self) -> float | None:
        """Frobenius estimate |A|_F * |inv(A)|_F, if an inverse exists."""
        return self._result.params.condition_estimate

    @property
    def max_roundtrip_error(self) -> float | None:
        """Largest |A @ inv(A) - I| element, if verified."""
        return self._result.params.max_roundtrip_error

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary of the analysis."""
        rows, columns = self.shape
        lines = [
            "Matrix Structure",
            "=" * 40,
            f"Shape:        {rows} x {columns}",
            f"Rank:         {self.rank}"
            + (" (full rank)" if self.is_full_rank else ""),
        ]

        if self.is_square:
            lines.append(f"Trace:        {self.trace:.6g}")
            lines.append(f"Determinant:  {self.determinant:.6g}")
            if self.is_singular:
                lines.append("Inverse:      none (singular)")
            else:
                lines.append("Inverse:      computed")
                if self.condition_estimate is not None:
                    lines.append(f"Condition:    {self.condition_estimate:.3g} (Frobenius estimate)")
                if self.max_roundtrip_error is not None:
                    lines.append(f"Round-trip:   {self.max_roundtrip_error:.3g} max |A inv(A) - I|")
        else:
            lines.append("Square-only quantities not computed (rectangular input)")

        lines.append("")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing is not None:
            lines.append(f"Elapsed: {self.timing['total_seconds']:.6f}s")

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  - {w}")

        return "\n".join(lines)
