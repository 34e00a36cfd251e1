"""
Core infrastructure for multrix.

This module provides shared abstractions and utilities used by the
matrix package.

Key components:
    protocols: ProductBackend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, timing, tolerances, linear algebra kernels
"""

from multrix.core.protocols import ProductBackend
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

__all__ = [
    # Protocols
    "ProductBackend",
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
