"""
Exception hierarchy for multrix.

All exceptions inherit from MultrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MultrixError(Exception):
    """Base exception for all multrix errors."""
    pass


class ValidationError(MultrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.
    
    Raised when shapes don't permit an operation (add, multiply), or when
    a flat buffer does not hold exactly rows x cols values.
    
    Attributes:
        shape: Shape of the (first) offending operand, if known
        other_shape: Shape of the second operand, if any
    """
    
    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        other_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.other_shape = other_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.
    
    Raised by determinant and inverse on rectangular input.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access outside the matrix bounds.
    
    Attributes:
        row: Requested row index
        col: Requested column index
        shape: Shape of the accessed matrix
    """
    
    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class ParseError(ValidationError):
    """
    Text matrix source could not be parsed.
    
    Attributes:
        line: 1-based line number of the bad token
        token: The token that failed to parse
    """
    
    def __init__(
        self,
        message: str,
        line: int | None = None,
        token: str | None = None
    ):
        super().__init__(message)
        self.line = line
        self.token = token


class NumericalError(MultrixError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when a matrix operation requires invertibility but elimination
    consumed fewer pivots than the matrix has rows.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the matrix dimension)
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
