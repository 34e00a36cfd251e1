"""
Tests for the elimination family: gauss, gauss_jordan, determinant,
rank and inverse.

scipy.linalg provides reference values for determinant and inverse.
"""

import numpy as np
import pytest
import scipy.linalg

from multrix import Matrix, determinant, gauss, gauss_jordan, inverse, rank
from multrix.core.compute.tolerances import ELIMINATION_FP64
from multrix.core.exceptions import (
    DimensionError,
    NotSquareError,
    SingularMatrixError,
)


ELIM = ELIMINATION_FP64


# ═══════════════════════════════════════════════════════════════════════
# Gauss / Gauss-Jordan (in place)
# ═══════════════════════════════════════════════════════════════════════


class TestGauss:

    def test_row_echelon_form(self, a22):
        gauss(a22)
        assert a22.get(0, 0) == 1.0
        assert a22.get(1, 0) == 0.0
        assert a22.get(1, 1) == 1.0
        assert a22.get(0, 1) == pytest.approx(4.0 / 3.0)

    def test_method_mutates_receiver(self, a22):
        result = a22.gauss()
        assert result is None
        assert a22.get(1, 0) == 0.0

    def test_leading_entries_move_right(self):
        m = Matrix.from_nested([[0, 0, 1], [0, 2, 4], [3, 6, 9]])
        gauss(m)
        values = m.to_numpy()
        leads = [int(np.flatnonzero(np.abs(row) > 1e-12)[0]) for row in values]
        assert leads == sorted(leads)
        assert len(set(leads)) == 3

    def test_singular_leaves_zero_row(self, singular22):
        gauss(singular22)
        assert singular22.to_nested()[1] == [0.0, 0.0]


class TestGaussJordan:

    def test_nonsingular_becomes_identity(self, well_conditioned):
        gauss_jordan(well_conditioned)
        assert well_conditioned.allclose(Matrix.identity(6), rtol=ELIM.rtol, atol=ELIM.atol)

    def test_reduced_row_echelon_rank_deficient(self):
        m = Matrix.from_nested([[1, 2, 3], [2, 4, 6], [1, 1, 1]])
        m.gauss_jordan()
        expected = Matrix.from_nested([[1, 0, -1], [0, 1, 2], [0, 0, 0]])
        assert m.allclose(expected, rtol=ELIM.rtol, atol=ELIM.atol)

    def test_augmented_system_solves_in_place(self):
        # x + y = 3, x - y = 1  ->  x = 2, y = 1
        m = Matrix.from_nested([[1, 1, 3], [1, -1, 1]])
        m.gauss_jordan()
        assert m.get(0, 2) == pytest.approx(2.0)
        assert m.get(1, 2) == pytest.approx(1.0)


# ═══════════════════════════════════════════════════════════════════════
# Determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    @pytest.mark.parametrize("n", [1, 2, 3, 10])
    def test_identity_is_exactly_one(self, n):
        assert determinant(Matrix.identity(n)) == 1.0

    def test_diagonal(self):
        assert determinant(Matrix.from_nested([[2, 0], [0, 2]])) == 4.0

    def test_swap_flips_sign(self):
        assert determinant(Matrix.from_nested([[0, 1], [1, 0]])) == -1.0

    def test_two_by_two(self, a22):
        assert determinant(a22) == pytest.approx(-2.0)

    def test_zero_row_is_exactly_zero(self):
        m = Matrix.from_nested([[1, 2, 3], [0, 0, 0], [4, 5, 6]])
        assert determinant(m) == 0.0

    def test_zero_column_is_exactly_zero(self):
        m = Matrix.from_nested([[1, 0, 3], [2, 0, 5], [4, 0, 6]])
        assert determinant(m) == 0.0

    def test_singular_is_exactly_zero(self, singular22):
        assert singular22.determinant() == 0.0

    def test_matches_scipy(self, well_conditioned):
        expected = scipy.linalg.det(well_conditioned.to_numpy())
        assert determinant(well_conditioned) == pytest.approx(expected, rel=ELIM.rtol)

    def test_receiver_untouched(self, a22):
        before = a22.copy()
        determinant(a22)
        assert a22 == before

    def test_not_square(self):
        m = Matrix.zeros(2, 3)
        with pytest.raises(NotSquareError) as exc_info:
            determinant(m)
        assert exc_info.value.shape == (2, 3)

    def test_not_square_is_dimension_error(self):
        with pytest.raises(DimensionError):
            Matrix.zeros(3, 1).determinant()


# ═══════════════════════════════════════════════════════════════════════
# Rank
# ═══════════════════════════════════════════════════════════════════════


class TestRank:

    @pytest.mark.parametrize("n", [1, 2, 4, 9])
    def test_identity(self, n):
        assert rank(Matrix.identity(n)) == n

    def test_singular(self, singular22):
        assert rank(singular22) == 1

    def test_zero_matrix(self):
        assert rank(Matrix.zeros(3, 4)) == 0

    def test_rectangular(self):
        assert rank(Matrix.from_nested([[1, 2, 3], [4, 5, 6]])) == 2
        assert Matrix.from_nested([[1], [2], [3]]).rank() == 1

    def test_matches_numpy(self, rng):
        base = rng.standard_normal((6, 3))
        m = Matrix.from_nested(base @ rng.standard_normal((3, 5)))
        assert rank(m) == np.linalg.matrix_rank(m.to_numpy()) == 3

    def test_receiver_untouched(self, a22):
        before = a22.copy()
        rank(a22)
        assert a22 == before


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_diagonal(self):
        result = inverse(Matrix.from_nested([[2, 0], [0, 2]]))
        assert result == Matrix.from_nested([[0.5, 0], [0, 0.5]])

    def test_times_original_is_identity(self, well_conditioned):
        inv = well_conditioned.inverse()
        product = inv.product(well_conditioned)
        assert product.allclose(Matrix.identity(6), rtol=ELIM.rtol, atol=ELIM.atol)

    def test_matches_scipy(self, well_conditioned):
        expected = scipy.linalg.inv(well_conditioned.to_numpy())
        np.testing.assert_allclose(
            inverse(well_conditioned).to_numpy(), expected, rtol=ELIM.rtol, atol=ELIM.atol
        )

    def test_needs_row_swaps(self):
        m = Matrix.from_nested([[0, 1], [1, 0]])
        assert inverse(m) == m

    def test_singular(self, singular22):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(singular22)
        assert exc_info.value.rank == 1
        assert exc_info.value.expected_rank == 2

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            inverse(Matrix.zeros(2, 3))

    def test_receiver_untouched(self, well_conditioned):
        before = well_conditioned.copy()
        inverse(well_conditioned)
        assert well_conditioned == before

    def test_non_matrix_argument(self):
        with pytest.raises(TypeError, match="expected Matrix"):
            inverse([[1, 0], [0, 1]])
