"""
Sequential multiply backend.

Computes every output cell on the calling thread. This is the reference
the parallel backend must match bit for bit.
"""

import logging

from multrix.core.compute.linalg.product import product_sequential
from multrix.core.compute.timing import Timer
from multrix.core.validation import check_conformable
from multrix.matrix.matrix import Matrix

logger = logging.getLogger(__name__)


class SequentialBackend:
    """
    Single-threaded multiply.
    
    Implements the ProductBackend protocol.
    """
    
    @property
    def name(self) -> str:
        return 'sequential'
    
    def multiply(self, a: Matrix, b: Matrix) -> Matrix:
        """
        Multiply a (n x m) by b (m x p).
        
        Raises:
            DimensionError: If a.cols != b.rows
        """
        check_conformable(a.shape, b.shape, 'product')
        
        timer = Timer()
        timer.start()
        data = product_sequential(a._view(), b._view())
        timer.stop()
        
        logger.debug(
            "%s product %dx%d @ %dx%d: %s",
            self.name, a.rows, a.cols, b.rows, b.cols, timer.summary(),
        )
        return Matrix._from_buffer(data, a.rows, b.cols)
