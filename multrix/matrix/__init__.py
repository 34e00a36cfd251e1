"""
Dense matrices.

Public API:
    Matrix                      value type (construction, access, operators)
    multiply(a, b, ...)         product with backend selection
    gauss(m), gauss_jordan(m)   in-place elimination
    determinant(m), rank(m), inverse(m)
    read_matrix / write_matrix / parse_matrix / format_matrix

Example:
    >>> from multrix.matrix import Matrix, inverse
    >>> a = Matrix.from_nested([[2, 0], [0, 2]])
    >>> a.determinant()
    4.0
    >>> inverse(a).to_nested()
    [[0.5, 0.0], [0.0, 0.5]]
"""

from multrix.matrix.matrix import Matrix
from multrix.matrix.solvers import (
    determinant,
    gauss,
    gauss_jordan,
    inverse,
    multiply,
    rank,
)
from multrix.matrix.io import format_matrix, parse_matrix, read_matrix, write_matrix

__all__ = [
    "Matrix",
    "multiply",
    "gauss",
    "gauss_jordan",
    "determinant",
    "rank",
    "inverse",
    "format_matrix",
    "parse_matrix",
    "read_matrix",
    "write_matrix",
]
