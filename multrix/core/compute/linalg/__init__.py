"""
Linear algebra kernels for multrix.

Kernels operate on plain numpy arrays and trust their inputs: shape
checks belong to the public API in multrix.matrix.

Submodules:
    elimination: Row reduction with partial pivoting
    product: Sequential and parallel dense multiply
"""

from multrix.core.compute.linalg.elimination import (
    EliminationResult,
    row_reduce,
    select_pivot,
    swap_rows,
)
from multrix.core.compute.linalg.product import (
    partition_cells,
    product_block,
    product_parallel,
    product_sequential,
)

__all__ = [
    # Elimination
    "EliminationResult",
    "row_reduce",
    "select_pivot",
    "swap_rows",
    # Product
    "partition_cells",
    "product_block",
    "product_parallel",
    "product_sequential",
]
