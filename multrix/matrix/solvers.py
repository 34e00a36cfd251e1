"""
Public linear-algebra operations on Matrix.

Elimination family (all built on core.compute.linalg.row_reduce):
    gauss(m)          in place, row-echelon form
    gauss_jordan(m)   in place, reduced row-echelon form
    determinant(m)    -> float
    rank(m)           -> int
    inverse(m)        -> Matrix

Multiply:
    multiply(a, b, backend='auto'|'sequential'|'parallel')

Inputs are validated here, before anything is mutated. The kernels
trust what they are given.
"""

from typing import Literal
import logging

import numpy as np

from multrix.core.compute.device import resolve_n_jobs
from multrix.core.compute.linalg.elimination import row_reduce
from multrix.core.exceptions import SingularMatrixError
from multrix.core.protocols import ProductBackend
from multrix.core.validation import check_conformable, check_square
from multrix.matrix.matrix import Matrix
from multrix.matrix.backends.sequential import SequentialBackend
from multrix.matrix.backends.parallel import ParallelBackend, PARALLEL_MIN_CELLS

logger = logging.getLogger(__name__)


# Type alias for backend selection
BackendChoice = Literal['auto', 'sequential', 'parallel']


def _check_matrix(m: object, name: str) -> Matrix:
    if not isinstance(m, Matrix):
        raise TypeError(f"{name}: expected Matrix, got {type(m).__name__}")
    return m


# === Elimination ===

def gauss(m: Matrix) -> None:
    """
    Reduce m to row-echelon form in place.

    Each pivot is scaled to 1.0 and everything below it is zeroed.
    Columns whose best pivot is below PIVOT_TOLERANCE are skipped.
    """
    _check_matrix(m, 'm')
    row_reduce(m._view(), reduced=False)


def gauss_jordan(m: Matrix) -> None:
    """
    Reduce m to reduced row-echelon form in place.

    Each pivot is 1.0 and is the only nonzero entry in its column.
    """
    _check_matrix(m, 'm')
    row_reduce(m._view(), reduced=True)


def determinant(m: Matrix) -> float:
    """
    Determinant by Gaussian elimination with partial pivoting.

    The determinant is the product of the pivots, negated once per row
    swap. If elimination finds fewer pivots than rows the matrix is
    singular and the result is exactly 0.0.

    Raises:
        NotSquareError: If m is not square
    """
    _check_matrix(m, 'm')
    check_square(m.shape, 'determinant')

    work = m.to_numpy()
    result = row_reduce(work, reduced=False)
    if not result.is_full_rank(m.rows):
        return 0.0
    return result.pivot_product


def rank(m: Matrix) -> int:
    """Number of pivots found by Gaussian elimination. Any shape."""
    _check_matrix(m, 'm')
    work = m.to_numpy()
    return row_reduce(work, reduced=False).pivots


def inverse(m: Matrix) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination on [m | I].

    The identity companion receives every row operation applied to m;
    once m is reduced to the identity the companion holds m^-1.

    Raises:
        NotSquareError: If m is not square
        SingularMatrixError: If elimination finds fewer than n pivots
    """
    _check_matrix(m, 'm')
    check_square(m.shape, 'inverse')

    n = m.rows
    work = m.to_numpy()
    companion = np.eye(n, dtype=np.float64)
    result = row_reduce(work, reduced=True, companion=companion)

    if not result.is_full_rank(n):
        raise SingularMatrixError(
            f"Matrix is singular: rank={result.pivots}, expected={n}.",
            matrix_name='m',
            rank=result.pivots,
            expected_rank=n,
        )

    return Matrix._from_buffer(companion.ravel(), n, n)


# === Multiply ===

def multiply(
    a: Matrix,
    b: Matrix,
    *,
    backend: BackendChoice = 'auto',
    n_jobs: int | None = None,
) -> Matrix:
    """
    Matrix product a @ b.

    Every backend returns bit-identical results; they differ only in
    scheduling.

    Args:
        a: Left operand (n x m)
        b: Right operand (m x p)
        backend: Computational backend to use:
            - 'auto': parallel when more than one worker is available
              and the output has at least PARALLEL_MIN_CELLS cells,
              else sequential
            - 'sequential': single thread
            - 'parallel': joblib thread pool
        n_jobs: Worker limit for the parallel backend (None = all)

    Returns:
        Fresh (n x p) Matrix

    Raises:
        DimensionError: If a.cols != b.rows
        ValueError: If backend is unknown or n_jobs is not a positive
            integer (n_jobs is checked for every backend)
    """
    _check_matrix(a, 'a')
    _check_matrix(b, 'b')
    check_conformable(a.shape, b.shape, 'multiply')
    n_workers = resolve_n_jobs(n_jobs)

    backend_impl = _get_backend(backend, a.rows * b.cols, n_workers)
    logger.debug("multiply: backend=%s n_workers=%d", backend_impl.name, n_workers)
    return backend_impl.multiply(a, b)


def _get_backend(
    choice: BackendChoice,
    n_cells: int,
    n_workers: int,
) -> ProductBackend:
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference
        n_cells: Size of the output (used by 'auto')
        n_workers: Resolved worker count (used by 'auto' and passed to
            ParallelBackend)

    Raises:
        ValueError: If unknown backend specified
    """
    if choice == 'auto':
        if n_cells >= PARALLEL_MIN_CELLS and n_workers > 1:
            return ParallelBackend(n_workers)
        return SequentialBackend()

    elif choice == 'sequential':
        return SequentialBackend()

    elif choice == 'parallel':
        return ParallelBackend(n_workers)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
