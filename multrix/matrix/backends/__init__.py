"""
Multiply backends.

Available backends:
    SequentialBackend: Single-threaded reference
    ParallelBackend: joblib thread pool over output-cell blocks
"""

from multrix.matrix.backends.sequential import SequentialBackend
from multrix.matrix.backends.parallel import ParallelBackend, PARALLEL_MIN_CELLS

__all__ = [
    "SequentialBackend",
    "ParallelBackend",
    "PARALLEL_MIN_CELLS",
]
