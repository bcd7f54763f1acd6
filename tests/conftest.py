"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]: det -2, trace 5."""
    return Matrix([1.0, 2.0, 3.0, 4.0], 2, 2)


@pytest.fixture
def singular_2x2():
    """[[1, 2], [2, 4]]: second row is twice the first."""
    return Matrix([1.0, 2.0, 2.0, 4.0], 2, 2)


@pytest.fixture
def invertible_4x4():
    """Well-conditioned 4x4 with a known determinant of -193."""
    return Matrix.from_rows([
        [2.0, 0.0, 1.0, 3.0],
        [1.0, 4.0, 0.0, 2.0],
        [0.0, 1.0, 5.0, 1.0],
        [3.0, 2.0, 1.0, 0.0],
    ])


@pytest.fixture
def random_square(rng):
    """Random 5x5 with entries in [-1, 1); invertible with probability 1."""
    return Matrix(rng.uniform(-1.0, 1.0, 25), 5, 5)
