"""
Tolerance constants for elimination and numerical comparison.

PIVOT_TOLERANCE decides which columns elimination treats as zero, and so
which matrices are classified singular. Changing it changes results; keep
it fixed.

The comparison tiers are used by Matrix.allclose() and by the test suite.
"""

from dataclasses import dataclass


# Pivot magnitudes strictly below this are treated as zero.
PIVOT_TOLERANCE: float = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Results that should agree to machine precision (transpose, add, products
# of small integer matrices).
EXACT_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact_fp64',
    description='Double precision, no accumulated rounding expected',
)

# Results of elimination (inverse, determinant) on well-conditioned input.
ELIMINATION_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='elimination_fp64',
    description='Double precision after row reduction',
)
