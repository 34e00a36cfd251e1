"""
Row reduction with partial pivoting.

One procedure serves Gauss (row-echelon), Gauss-Jordan (reduced
row-echelon), determinant, rank and inverse. The caller chooses:

    reduced=False   eliminate below the pivot only (row-echelon form)
    reduced=True    eliminate above and below (reduced row-echelon form)
    companion=C     apply every row operation to C as well

All arrays are modified in place. Callers that must not mutate their
input pass a copy.
"""

from dataclasses import dataclass
from typing import Any
import logging

import numpy as np
from numpy.typing import NDArray

from multrix.core.compute.tolerances import PIVOT_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationResult:
    """
    Summary of one row reduction.
    
    Attributes:
        pivots: Number of pivots consumed (the numerical rank)
        pivot_columns: Column index of each pivot, in pivot order
        swaps: Number of row interchanges performed
        pivot_product: Product of the pivots before normalisation, with
            one sign flip per row swap. For a square matrix with a full
            set of pivots this is the determinant.
    """
    pivots: int
    pivot_columns: tuple[int, ...]
    swaps: int
    pivot_product: float
    
    def is_full_rank(self, n: int) -> bool:
        """True if at least n pivots were consumed."""
        return self.pivots >= n


def select_pivot(work: NDArray[np.floating[Any]], i: int, j: int) -> int:
    """
    Row index in i..rows-1 with the largest |work[row, j]|.
    
    Ties go to the earliest row.
    """
    return i + int(np.argmax(np.abs(work[i:, j])))


def swap_rows(work: NDArray[np.floating[Any]], i: int, k: int) -> None:
    """Interchange rows i and k in place."""
    if i != k:
        work[[i, k]] = work[[k, i]]


def row_reduce(
    work: NDArray[np.floating[Any]],
    *,
    reduced: bool,
    companion: NDArray[np.floating[Any]] | None = None,
    tol: float = PIVOT_TOLERANCE,
) -> EliminationResult:
    """
    Reduce a matrix to (reduced) row-echelon form in place.
    
    Algorithm, with pivot row i and pivot column j starting at 0:
        1. Pick the row at or below i with the largest |value| in column j.
        2. If that magnitude is below tol, column j has no pivot:
           advance j and retry the same i.
        3. Swap the chosen row into position i.
        4. Divide row i by the pivot so the pivot becomes 1.0.
        5. Subtract multiples of row i from the rows below it
           (all other rows if reduced=True) to zero column j.
        6. Advance i and j.
    
    Args:
        work: 2D float array (rows x cols), modified in place
        reduced: If True, eliminate above the pivot as well
        companion: Optional 2D array with the same number of rows,
            transformed in lockstep (e.g. identity -> inverse)
        tol: Pivot magnitudes below this count as zero
        
    Returns:
        EliminationResult with pivot count, pivot columns, swap count
        and the signed pivot product
    """
    rows, cols = work.shape
    i = 0
    j = 0
    swaps = 0
    product = 1.0
    pivot_columns: list[int] = []
    
    while i < rows and j < cols:
        p = select_pivot(work, i, j)
        if abs(work[p, j]) < tol:
            logger.debug("column %d has no pivot (max |value| %.3g)", j, abs(work[p, j]))
            j += 1
            continue
        
        if p != i:
            swap_rows(work, i, p)
            if companion is not None:
                swap_rows(companion, i, p)
            swaps += 1
            product = -product
        
        pivot = work[i, j]
        product *= pivot
        work[i] /= pivot
        if companion is not None:
            companion[i] /= pivot
        
        if reduced:
            targets = np.r_[0:i, i + 1:rows]
        else:
            targets = np.arange(i + 1, rows)
        
        if targets.size:
            factors = work[targets, j].copy()
            work[targets] -= np.outer(factors, work[i])
            if companion is not None:
                companion[targets] -= np.outer(factors, companion[i])
        
        pivot_columns.append(j)
        i += 1
        j += 1
    
    result = EliminationResult(
        pivots=len(pivot_columns),
        pivot_columns=tuple(pivot_columns),
        swaps=swaps,
        pivot_product=float(product),
    )
    logger.debug(
        "row_reduce %dx%d reduced=%s: %d pivots, %d swaps",
        rows, cols, reduced, result.pivots, result.swaps,
    )
    return result
