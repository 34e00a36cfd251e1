"""
Dense matrix value type.

A Matrix owns a flat, contiguous float64 buffer holding rows x cols
values in row-major order: element (r, c) lives at index r * cols + c.
Every operation that returns a matrix returns a fresh buffer; only
set() and the in-place eliminations (gauss, gauss_jordan) mutate.

Construct via the classmethods:
    Matrix.identity(3)
    Matrix.random(2, 4, seed=0)
    Matrix.from_flat([1, 2, 3, 4], 2, 2)
    Matrix.from_nested([[1, 2], [3, 4]])
    Matrix.from_file("a.txt")
"""

from __future__ import annotations

from os import PathLike
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from multrix.core.compute.tolerances import EXACT_FP64
from multrix.core.validation import (
    check_array,
    check_dimension,
    check_finite,
    check_flat_length,
    check_index,
    check_ndim,
    check_same_shape,
)
from multrix.core.exceptions import ValidationError


class Matrix:
    """
    Row-major dense matrix of float64 values.

    Attributes:
        rows: Number of rows (positive)
        cols: Number of columns (positive)

    Matrices are mutable (set, gauss, gauss_jordan) and therefore not
    hashable. Equality is exact: same shape and identical elements.
    """

    __slots__ = ('_data', '_rows', '_cols')
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: ArrayLike, rows: int, cols: int):
        """
        Build a matrix from a flat row-major sequence.

        Args:
            data: rows * cols numbers, row after row
            rows: Number of rows (positive integer)
            cols: Number of columns (positive integer)

        Raises:
            ValidationError: If dimensions are not positive integers or
                data is not finite numeric
            DimensionError: If len(data) != rows * cols
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        arr = check_array(data, 'data')
        check_ndim(arr, 1, 'data')
        check_flat_length(arr, rows, cols, 'data')
        check_finite(arr, 'data')
        self._data = np.ascontiguousarray(arr, dtype=np.float64)
        self._rows = rows
        self._cols = cols

    @classmethod
    def _from_buffer(cls, data: NDArray[np.float64], rows: int, cols: int) -> Matrix:
        """Wrap an owned flat float64 buffer without validation."""
        m = cls.__new__(cls)
        m._data = data
        m._rows = rows
        m._cols = cols
        return m

    # === Constructors ===

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Square identity matrix of dimension n."""
        n = check_dimension(n, 'n')
        return cls._from_buffer(np.eye(n, dtype=np.float64).ravel(), n, n)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Matrix of the given shape filled with 0.0."""
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        return cls._from_buffer(np.zeros(rows * cols, dtype=np.float64), rows, cols)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> Matrix:
        """
        Matrix of whole numbers drawn uniformly from 0..9.

        Args:
            rows: Number of rows
            cols: Number of columns
            rng: Generator to draw from. Mutually exclusive with seed.
            seed: Seed for a fresh numpy default_rng

        Raises:
            ValueError: If both rng and seed are given
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        if rng is None:
            rng = np.random.default_rng(seed)
        values = rng.integers(0, 10, size=rows * cols).astype(np.float64)
        return cls._from_buffer(values, rows, cols)

    @classmethod
    def from_flat(cls, data: ArrayLike, rows: int, cols: int) -> Matrix:
        """
        Matrix from a flat row-major sequence of rows * cols numbers.

        Raises:
            DimensionError: If the sequence length is not rows * cols
        """
        return cls(data, rows, cols)

    @classmethod
    def from_nested(cls, data: ArrayLike) -> Matrix:
        """
        Matrix from a sequence of equal-length rows (or any 2D array-like).

        Raises:
            ValidationError: If data is empty or not numeric
            DimensionError: If rows have different lengths or data is not 2D
        """
        arr = check_array(data, 'data')
        check_ndim(arr, 2, 'data')
        rows, cols = arr.shape
        if rows == 0 or cols == 0:
            raise ValidationError(f"data: matrix must not be empty, got shape {arr.shape}")
        return cls(arr.ravel(), rows, cols)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Matrix:
        """Read a matrix from a comma-separated text file."""
        from multrix.matrix.io import read_matrix
        return read_matrix(path)

    # === Shape ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_conformable(self, other: Matrix) -> bool:
        """True if self @ other is defined (self.cols == other.rows)."""
        return self._cols == other._rows

    # === Element access ===

    def get(self, row: int, col: int) -> float:
        """
        Value at (row, col).

        Raises:
            IndexOutOfRangeError: If row >= rows, col >= cols, or either
                index is negative
        """
        row, col = check_index(row, col, self.shape)
        return float(self._data[row * self._cols + col])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Store value at (row, col).

        Raises:
            IndexOutOfRangeError: If the position is outside the matrix
            ValidationError: If value is not a finite number
        """
        row, col = check_index(row, col, self.shape)
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"value: expected a number, got {value!r}") from e
        if not np.isfinite(value):
            raise ValidationError(f"value: must be finite, got {value}")
        self._data[row * self._cols + col] = value

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    # === Conversion ===

    def copy(self) -> Matrix:
        return Matrix._from_buffer(self._data.copy(), self._rows, self._cols)

    def to_flat(self) -> list[float]:
        """Row-major list of all values."""
        return self._data.tolist()

    def to_nested(self) -> list[list[float]]:
        """List of rows."""
        return self._view().tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent (rows x cols) copy of the data."""
        return self._view().copy()

    def _view(self) -> NDArray[np.float64]:
        """2D view sharing this matrix's buffer."""
        return self._data.reshape(self._rows, self._cols)

    # === Structure ===

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped."""
        data = self._view().T.flatten()
        return Matrix._from_buffer(data, self._cols, self._rows)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum.

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._from_buffer(self._data + other._data, self._rows, self._cols)

    def negate(self) -> Matrix:
        """Element-wise sign flip."""
        return Matrix._from_buffer(-self._data, self._rows, self._cols)

    def subtract(self, other: Matrix) -> Matrix:
        """
        self + (-other).

        Raises:
            DimensionError: If shapes differ
        """
        check_same_shape(self.shape, other.shape, 'subtract')
        return self.add(other.negate())

    def product(self, other: Matrix) -> Matrix:
        """
        Matrix product computed on the calling thread.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        from multrix.matrix.solvers import multiply
        return multiply(self, other, backend='sequential')

    def parallel_product(self, other: Matrix, *, n_jobs: int | None = None) -> Matrix:
        """
        Matrix product with output cells split across worker threads.

        Bit-for-bit identical to product().

        Raises:
            DimensionError: If self.cols != other.rows
        """
        from multrix.matrix.solvers import multiply
        return multiply(self, other, backend='parallel', n_jobs=n_jobs)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from multrix.matrix.solvers import multiply
        return multiply(self, other)

    __mul__ = __matmul__

    # === Elimination ===

    def gauss(self) -> None:
        """Reduce to row-echelon form in place."""
        from multrix.matrix.solvers import gauss
        gauss(self)

    def gauss_jordan(self) -> None:
        """Reduce to reduced row-echelon form in place."""
        from multrix.matrix.solvers import gauss_jordan
        gauss_jordan(self)

    def determinant(self) -> float:
        from multrix.matrix.solvers import determinant
        return determinant(self)

    def inverse(self) -> Matrix:
        from multrix.matrix.solvers import inverse
        return inverse(self)

    def rank(self) -> int:
        from multrix.matrix.solvers import rank
        return rank(self)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        *,
        rtol: float = EXACT_FP64.rtol,
        atol: float = EXACT_FP64.atol,
    ) -> bool:
        """
        True if shapes match and every pair of elements satisfies
        |a - b| <= atol + rtol * |b|.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # === Text ===

    def write_to_file(self, path: str | PathLike[str]) -> None:
        """Write in the comma-separated text format."""
        from multrix.matrix.io import write_matrix
        write_matrix(self, path)

    def __str__(self) -> str:
        from multrix.matrix.io import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self.to_nested()!r})"


def _split_key(key: Any) -> tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"matrix index must be a (row, col) pair, got {key!r}")
    return key

