"""
Core protocols for multrix.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from multrix.matrix.matrix import Matrix


@runtime_checkable
class ProductBackend(Protocol):
    """
    Protocol for matrix-multiply backends.
    
    Every backend computes the same numbers: each output cell is the sum
    of a[row, k] * b[k, col] accumulated in ascending k. Backends differ
    only in how output cells are scheduled.
    
    Backends are stateless apart from construction-time configuration
    (e.g. a worker count). This makes them easy to test and swap.
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Examples: 'sequential', 'parallel'
        """
        ...
    
    def multiply(self, a: 'Matrix', b: 'Matrix') -> 'Matrix':
        """
        Multiply two conformable matrices.
        
        Returns:
            A fresh (a.rows x b.cols) Matrix
            
        Raises:
            DimensionError: If a.cols != b.rows
        """
        ...
