"""
multrix: dense matrices and elimination-based linear algebra.

Row-major float64 matrices with Gauss and Gauss-Jordan elimination,
determinant, rank and inverse (partial pivoting, fixed pivot tolerance),
and a dense multiply that runs either sequentially or on a thread pool
with bit-identical results.

Submodules:
    core: Exceptions, validation, tolerances, timing, kernels
    matrix: Matrix type and public operations
"""

__version__ = "0.1.0"

from multrix.core.exceptions import (
    MultrixError,
    ValidationError,
    DimensionError,
    NotSquareError,
    IndexOutOfRangeError,
    ParseError,
    NumericalError,
    SingularMatrixError,
)
from multrix.core.compute.tolerances import PIVOT_TOLERANCE
from multrix.matrix import (
    Matrix,
    determinant,
    gauss,
    gauss_jordan,
    inverse,
    multiply,
    rank,
    read_matrix,
    write_matrix,
)

__all__ = [
    "__version__",
    # Matrix API
    "Matrix",
    "multiply",
    "gauss",
    "gauss_jordan",
    "determinant",
    "rank",
    "inverse",
    "read_matrix",
    "write_matrix",
    "PIVOT_TOLERANCE",
    # Exceptions
    "MultrixError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "IndexOutOfRangeError",
    "ParseError",
    "NumericalError",
    "SingularMatrixError",
]
