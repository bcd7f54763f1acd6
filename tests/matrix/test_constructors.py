"""
Tests for the Matrix factory classmethods.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, PyMatrixError, ValidationError


class TestFilledConstructors:

    def test_zeros(self):
        m = Matrix.zeros(3, 2)
        assert m.shape == (3, 2)
        np.testing.assert_array_equal(m.data, np.zeros(6))

    def test_ones(self):
        m = Matrix.ones(2, 3)
        np.testing.assert_array_equal(m.data, np.ones(6))

    def test_identity(self):
        np.testing.assert_array_equal(
            Matrix.identity(3).data,
            [1, 0, 0, 0, 1, 0, 0, 0, 1],
        )

    def test_identity_empty(self):
        assert Matrix.identity(0).shape == (0, 0)

    def test_diagonal(self):
        m = Matrix.diagonal([1.0, 2.0, 3.0])
        assert m.shape == (3, 3)
        np.testing.assert_array_equal(m.data, [1, 0, 0, 0, 2, 0, 0, 0, 3])

    def test_diagonal_empty_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            Matrix.diagonal([])


class TestRandom:

    def test_shape_and_range(self, rng):
        m = Matrix.random(4, 5, rng=rng)
        assert m.shape == (4, 5)
        assert np.all(m.data >= 0.0)
        assert np.all(m.data < 1.0)

    def test_seeded_is_reproducible(self):
        a = Matrix.random(3, 3, rng=np.random.default_rng(7))
        b = Matrix.random(3, 3, rng=np.random.default_rng(7))
        assert a == b

    def test_default_generator(self):
        assert Matrix.random(2, 2).shape == (2, 2)


class TestFromRows:

    def test_nested_lists(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.data, [1, 2, 3, 4, 5, 6])

    def test_empty(self):
        assert Matrix.from_rows([]).shape == (0, 0)

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match="ragged"):
            Matrix.from_rows([[1, 2], [3]])

    def test_flat_list_rejected(self):
        with pytest.raises(DimensionError, match="item 0 is not a row sequence"):
            Matrix.from_rows([1, 2])

    def test_mixed_rows_and_scalars_rejected(self):
        with pytest.raises(DimensionError, match="item 1"):
            Matrix.from_rows([[1, 2], 3])

    def test_errors_stay_in_library_hierarchy(self):
        with pytest.raises(PyMatrixError):
            Matrix.from_rows([1.5])


class TestFromArray:

    def test_2d(self):
        m = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.data, [0, 1, 2, 3, 4, 5])

    def test_1d_becomes_column(self):
        m = Matrix.from_array([1, 2, 3])
        assert m.shape == (3, 1)

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D or 2D"):
            Matrix.from_array(np.zeros((2, 2, 2)))

    def test_round_trip_through_numpy(self, rng):
        arr = rng.standard_normal((3, 4))
        np.testing.assert_array_equal(Matrix.from_array(arr).to_numpy(), arr)


class TestVectors:

    def test_column_vector(self):
        v = Matrix.column_vector([1, 2, 3])
        assert v.shape == (3, 1)

    def test_row_vector(self):
        v = Matrix.row_vector([1, 2, 3])
        assert v.shape == (1, 3)
        np.testing.assert_array_equal(v.data, [1, 2, 3])
