"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from multrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a22():
    """[[1, 2], [3, 4]], nonsingular with determinant -2."""
    return Matrix.from_nested([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def singular22():
    """[[1, 2], [2, 4]], rank 1."""
    return Matrix.from_nested([[1.0, 2.0], [2.0, 4.0]])


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 6x6 matrix (always invertible)."""
    n = 6
    values = rng.standard_normal((n, n)) + n * np.eye(n)
    return Matrix.from_nested(values)
