"""
Tolerance tiers and numeric thresholds.

This module is the configuration surface of the kernel: the thresholds
the structural engine compares against, and the tolerance tiers used to
verify inverses.

- Well-conditioned problems: inverse round-trip within 1e-10 per element
- Ill-conditioned problems (condition estimate > 1e8): relaxed tier

Used by the structural engine, the analysis backend and the test suite.
"""

from dataclasses import dataclass

from pymatrix.core.precision import EPSILON_64


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Inverse round-trip for well-conditioned input: A @ inv(A) == I per element
CPU_FP64 = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='cpu_fp64',
    description='CPU double precision, absolute 1e-10 per element',
)

# Ill-conditioned input (condition estimate above ILL_CONDITIONED_THRESHOLD)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e8)',
)

# |det| below this is treated as singular by inverse()
SINGULARITY_THRESHOLD: float = EPSILON_64

# Entries at or below this magnitude are not accepted as rank pivots
PIVOT_THRESHOLD: float = EPSILON_64

# Cofactor expansion is O(n!); orders above this emit a RuntimeWarning.
FACTORIAL_WARNING_ORDER: int = 9

# Frobenius condition estimate |A|_F * |inv(A)|_F above which the
# problem is treated as ill-conditioned
ILL_CONDITIONED_THRESHOLD: float = 1e8


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for an inverse round-trip check."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
