"""
Input validation utilities for multrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from multrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating ragged, mixed or non-numeric
    data). The result never aliases the input.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of dtype float64
        
    Raises:
        DimensionError: If nested input is ragged
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except ValueError as e:
        # numpy refuses inhomogeneous nested sequences
        raise DimensionError(f"{name}: rows have inconsistent lengths: {e}") from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a positive integer.
    
    Args:
        value: Candidate row or column count
        name: Parameter name for error messages
        
    Returns:
        The dimension as a plain int
        
    Raises:
        ValidationError: If value is not an integer or is not positive
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be positive, got {value}")
    return int(value)


def check_flat_length(
    data: NDArray[np.float64],
    rows: int,
    cols: int,
    name: str,
) -> None:
    """
    Verify a flat buffer holds exactly rows x cols values.
    
    Raises:
        DimensionError: If the length does not match
    """
    if data.size != rows * cols:
        raise DimensionError(
            f"{name}: {data.size} values cannot fill a {rows}x{cols} matrix "
            f"(expected {rows * cols})",
            shape=(rows, cols),
        )


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify (row, col) addresses an element of a matrix of the given shape.
    
    Negative indices are out of range; there is no wrap-around.
    
    Returns:
        (row, col) as plain ints
        
    Raises:
        IndexOutOfRangeError: If either index is outside the bounds
        TypeError: If either index is not an integer
    """
    for label, value in (('row', row), ('col', col)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"{label} index must be an integer, got {type(value).__name__}"
            )
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexOutOfRangeError(
            f"index ({row}, {col}) out of range for {rows}x{cols} matrix",
            row=int(row),
            col=int(col),
            shape=shape,
        )
    return int(row), int(col)


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.
    
    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            shape=shape,
        )


def check_same_shape(
    shape: tuple[int, int],
    other_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.
    
    Raises:
        DimensionError: If shapes differ
    """
    if shape != other_shape:
        raise DimensionError(
            f"{operation}: shapes {shape[0]}x{shape[1]} and "
            f"{other_shape[0]}x{other_shape[1]} differ",
            shape=shape,
            other_shape=other_shape,
        )


def check_conformable(
    shape: tuple[int, int],
    other_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands can be multiplied (left cols == right rows).
    
    Raises:
        DimensionError: If the inner dimensions differ
    """
    if shape[1] != other_shape[0]:
        raise DimensionError(
            f"{operation}: cannot multiply {shape[0]}x{shape[1]} by "
            f"{other_shape[0]}x{other_shape[1]} "
            f"(left has {shape[1]} columns, right has {other_shape[0]} rows)",
            shape=shape,
            other_shape=other_shape,
        )
