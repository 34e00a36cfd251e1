"""
Parallel multiply backend.

Splits the flat output range into contiguous blocks and computes them on
a joblib thread pool. Each block is produced by exactly one worker from
read-only operands; the call returns once every block is done.
"""

import logging

from multrix.core.compute.device import resolve_n_jobs
from multrix.core.compute.linalg.product import product_parallel
from multrix.core.compute.timing import Timer
from multrix.core.validation import check_conformable
from multrix.matrix.matrix import Matrix

logger = logging.getLogger(__name__)

# Outputs smaller than this are not worth a thread pool under 'auto'.
PARALLEL_MIN_CELLS = 4096


class ParallelBackend:
    """
    Thread-pool multiply.
    
    Implements the ProductBackend protocol.
    
    Args:
        n_jobs: Maximum number of worker threads. None uses every
            available CPU worker.
    """
    
    def __init__(self, n_jobs: int | None = None):
        self._n_jobs = resolve_n_jobs(n_jobs)
    
    @property
    def name(self) -> str:
        return 'parallel'
    
    @property
    def n_jobs(self) -> int:
        return self._n_jobs
    
    def multiply(self, a: Matrix, b: Matrix) -> Matrix:
        """
        Multiply a (n x m) by b (m x p).
        
        Raises:
            DimensionError: If a.cols != b.rows
        """
        check_conformable(a.shape, b.shape, 'parallel product')
        
        timer = Timer()
        timer.start()
        data = product_parallel(a._view(), b._view(), self._n_jobs, timer=timer)
        timer.stop()
        
        logger.debug(
            "%s product %dx%d @ %dx%d on %d workers: %s",
            self.name, a.rows, a.cols, b.rows, b.cols, self._n_jobs,
            timer.summary(),
        )
        return Matrix._from_buffer(data, a.rows, b.cols)
