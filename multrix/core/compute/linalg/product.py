"""
Dense matrix multiply kernels.

Both entry points produce bit-identical results. Every output cell
(row, col) is accumulated as

    acc = 0.0
    for k in range(inner):
        acc = acc + a[row, k] * b[k, col]

with one rounded multiply and one rounded add per step, in ascending k.
product_block() vectorises this over a contiguous range of flat output
indices without changing the per-cell operation order, so how the
output is partitioned never changes the numbers.
"""

from typing import Any
import logging

import numpy as np
from numpy.typing import NDArray
from joblib import Parallel, delayed

from multrix.core.compute.timing import Timer

logger = logging.getLogger(__name__)


def partition_cells(n_cells: int, n_blocks: int) -> list[tuple[int, int]]:
    """
    Split range(n_cells) into at most n_blocks contiguous, disjoint ranges.
    
    Block sizes differ by at most one. No block is empty.
    
    Returns:
        List of (start, stop) pairs covering 0..n_cells in order
    """
    n_blocks = max(1, min(n_blocks, n_cells))
    base, extra = divmod(n_cells, n_blocks)
    bounds = []
    start = 0
    for block in range(n_blocks):
        stop = start + base + (1 if block < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def product_block(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    start: int,
    stop: int,
) -> NDArray[np.float64]:
    """
    Compute flat output cells start..stop-1 of a @ b.
    
    Flat index i maps to (i // b.cols, i % b.cols).
    
    Args:
        a: Left operand (n x m)
        b: Right operand (m x p)
        start: First flat output index
        stop: One past the last flat output index
        
    Returns:
        1D float64 array of length stop - start
    """
    cols = b.shape[1]
    cells = np.arange(start, stop)
    out_rows = cells // cols
    out_cols = cells % cols
    acc = np.zeros(stop - start, dtype=np.float64)
    for k in range(a.shape[1]):
        acc += a[out_rows, k] * b[k, out_cols]
    return acc


def product_sequential(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.float64]:
    """
    Multiply on the calling thread.
    
    Operands must already be conformable (a.shape[1] == b.shape[0]).
    
    Returns:
        Flat row-major buffer of the (a.rows x b.cols) product
    """
    return product_block(a, b, 0, a.shape[0] * b.shape[1])


def product_parallel(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    n_jobs: int,
    *,
    timer: Timer | None = None,
) -> NDArray[np.float64]:
    """
    Multiply with output cells split across a thread pool.
    
    The flat output range is cut into at most n_jobs contiguous blocks.
    Each worker computes one block from read-only operands and returns
    it; the blocks are concatenated in order once every worker has
    finished. The call blocks until then.
    
    Operands must already be conformable (a.shape[1] == b.shape[0]).
    
    Args:
        a: Left operand (n x m)
        b: Right operand (m x p)
        n_jobs: Maximum number of worker threads (positive)
        timer: If given, receives 'partition', 'dispatch' and
            'concatenate' sections
        
    Returns:
        Flat row-major buffer of the (a.rows x b.cols) product
    """
    if timer is None:
        timer = Timer()
    n_cells = a.shape[0] * b.shape[1]
    
    with timer.section('partition'):
        bounds = partition_cells(n_cells, n_jobs)
    
    with timer.section('dispatch'):
        if len(bounds) == 1:
            blocks = [product_block(a, b, 0, n_cells)]
        else:
            logger.debug("product_parallel: %d cells in %d blocks", n_cells, len(bounds))
            blocks = Parallel(n_jobs=len(bounds), prefer="threads")(
                delayed(product_block)(a, b, start, stop)
                for start, stop in bounds
            )
    
    with timer.section('concatenate'):
        return np.concatenate(blocks)
