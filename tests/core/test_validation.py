"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from multrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NotSquareError,
    ValidationError,
)
from multrix.core.validation import (
    check_array,
    check_conformable,
    check_dimension,
    check_finite,
    check_flat_length,
    check_index,
    check_ndim,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "data")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "data")
        assert result.dtype == np.float64

    def test_result_does_not_alias_input(self):
        source = np.array([1.0, 2.0, 3.0])
        result = check_array(source, "data")
        result[0] = 99.0
        assert source[0] == 1.0

    def test_ragged_rows_raise_dimension_error(self):
        with pytest.raises(DimensionError, match="inconsistent lengths"):
            check_array([[1, 2], [3]], "data")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "data")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "data")

    def test_object_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, None], "data")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "data")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_array(["x"], "my_param")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_ndim
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "data")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf]), "data")


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 2)), 2, "data")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_ndim(np.zeros((2, 2)), 1, "data")


# ═══════════════════════════════════════════════════════════════════════
# Dimensions and lengths
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_positive_int(self):
        assert check_dimension(3, "rows") == 3

    def test_numpy_int_accepted(self):
        result = check_dimension(np.int64(4), "rows")
        assert result == 4
        assert type(result) is int

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            check_dimension(value, "rows")

    @pytest.mark.parametrize("value", [2.0, "2", True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="positive integer"):
            check_dimension(value, "cols")


class TestCheckFlatLength:

    def test_exact_length_passes(self):
        check_flat_length(np.zeros(6), 2, 3, "data")

    def test_mismatch_raises_with_shape(self):
        with pytest.raises(DimensionError, match="expected 6") as exc_info:
            check_flat_length(np.zeros(5), 2, 3, "data")
        assert exc_info.value.shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(1, 2, (2, 3)) == (1, 2)

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, col):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(row, col, (2, 3))
        assert exc_info.value.row == row
        assert exc_info.value.col == col
        assert exc_info.value.shape == (2, 3)

    def test_float_index_is_type_error(self):
        with pytest.raises(TypeError, match="row index"):
            check_index(1.0, 0, (2, 2))


# ═══════════════════════════════════════════════════════════════════════
# Shape relations
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_square_passes(self):
        check_square((3, 3), "inverse")

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="inverse: requires a square matrix, got 2x3"):
            check_square((2, 3), "inverse")

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), "add")

    def test_different_shapes(self):
        with pytest.raises(DimensionError, match="add") as exc_info:
            check_same_shape((2, 3), (3, 2), "add")
        assert exc_info.value.shape == (2, 3)
        assert exc_info.value.other_shape == (3, 2)

    def test_conformable_passes(self):
        check_conformable((2, 3), (3, 5), "multiply")

    def test_not_conformable(self):
        with pytest.raises(DimensionError, match="left has 3 columns, right has 2 rows"):
            check_conformable((2, 3), (2, 3), "multiply")
