"""
Tests for the Matrix value type.

Covers construction invariants, value semantics (no shared storage),
indexing, equality, display formatting and the operator forwards.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionError, ValidationError


class TestConstruction:

    def test_fields(self):
        m = Matrix([1, 2, 3, 4, 5, 6], 2, 3)
        assert m.rows == 2
        assert m.columns == 3
        assert m.shape == (2, 3)
        assert m.size == 6
        assert m.data.dtype == np.float64
        np.testing.assert_array_equal(m.data, [1, 2, 3, 4, 5, 6])

    def test_keyword_construction(self):
        m = Matrix(data=[1.0, 2.0], rows=2, columns=1)
        assert m.shape == (2, 1)

    def test_length_mismatch_fails_fast(self):
        with pytest.raises(DimensionError, match="does not match 2x2"):
            Matrix([1, 2, 3], 2, 2)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(["a", "b"], 1, 2)

    def test_input_is_copied(self):
        source = np.array([1.0, 2.0, 3.0, 4.0])
        m = Matrix(source, 2, 2)
        source[0] = 100.0
        assert m[0, 0] == 1.0

    def test_copy_is_independent(self, square_2x2):
        clone = square_2x2.copy()
        clone[0, 0] = -1.0
        assert square_2x2[0, 0] == 1.0
        assert clone == Matrix([-1, 2, 3, 4], 2, 2)

    def test_results_never_alias_operands(self, square_2x2):
        result = square_2x2 + 0.0
        result[0, 0] = 50.0
        assert square_2x2[0, 0] == 1.0


class TestIndexing:

    def test_element_read(self, square_2x2):
        assert square_2x2[0, 1] == 2.0
        assert square_2x2[1, 0] == 3.0
        assert square_2x2.get(1, 1) == 4.0

    def test_row_read(self, square_2x2):
        np.testing.assert_array_equal(square_2x2[1], [3.0, 4.0])

    def test_row_read_is_copy(self, square_2x2):
        row = square_2x2[0]
        row[0] = 99.0
        assert square_2x2[0, 0] == 1.0

    def test_element_write(self):
        m = Matrix.zeros(2, 2)
        m[0, 0] = 1.0
        m.set(1, 1, 1)
        assert m == Matrix.identity(2)

    def test_row_write(self):
        m = Matrix.zeros(2, 3)
        m[1] = [7, 8, 9]
        np.testing.assert_array_equal(m.data, [0, 0, 0, 7, 8, 9])

    def test_row_write_wrong_length(self):
        m = Matrix.zeros(2, 3)
        with pytest.raises(DimensionError, match="needs 3 values, got 2") as exc_info:
            m[0] = [1, 2]
        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (1, 2)
        assert m == Matrix.zeros(2, 3)

    @pytest.mark.parametrize("key", [2, -1, (2, 0), (0, 2), (-1, 0)])
    def test_out_of_range_is_index_error(self, square_2x2, key):
        with pytest.raises(IndexError):
            square_2x2[key]

    def test_out_of_range_write_is_index_error(self, square_2x2):
        with pytest.raises(IndexError):
            square_2x2[5, 5] = 1.0

    def test_to_numpy(self, square_2x2):
        arr = square_2x2.to_numpy()
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4]])
        arr[0, 0] = 10.0
        assert square_2x2[0, 0] == 1.0


class TestSwapRows:

    def test_swap(self):
        m = Matrix.diagonal([1.0, 2.0])
        m.swap_rows(0, 1)
        np.testing.assert_array_equal(m.data, [0.0, 2.0, 1.0, 0.0])

    def test_swap_same_row(self, square_2x2):
        square_2x2.swap_rows(1, 1)
        assert square_2x2 == Matrix([1, 2, 3, 4], 2, 2)

    @pytest.mark.parametrize("r1,r2", [(0, 2), (5, 0), (-1, 0)])
    def test_out_of_range_is_noop(self, square_2x2, r1, r2):
        square_2x2.swap_rows(r1, r2)
        assert square_2x2 == Matrix([1, 2, 3, 4], 2, 2)


class TestEquality:

    def test_equal(self):
        assert Matrix([1, 2], 1, 2) == Matrix([1.0, 2.0], 1, 2)

    def test_same_data_different_shape(self):
        assert Matrix([1, 2], 1, 2) != Matrix([1, 2], 2, 1)

    def test_different_data(self):
        assert Matrix([1, 2], 1, 2) != Matrix([1, 3], 1, 2)

    def test_not_equal_to_other_types(self, square_2x2):
        assert square_2x2 != [1, 2, 3, 4]

    def test_unhashable(self, square_2x2):
        with pytest.raises(TypeError):
            hash(square_2x2)


class TestDisplay:

    def test_square(self, square_2x2):
        assert str(square_2x2) == "[[1, 2]\n [3, 4]]"

    def test_rectangular(self):
        m = Matrix([1, 2, 3, 4, 5, 6], 2, 3)
        assert str(m) == "[[1, 2, 3]\n [4, 5, 6]]"

    def test_column_vector(self):
        assert str(Matrix([1, 2, 3], 3, 1)) == "[[1]\n [2]\n [3]]"

    def test_fractions(self):
        assert str(Matrix([0.5, -1.25], 1, 2)) == "[[0.5, -1.25]]"

    def test_empty(self):
        assert str(Matrix.zeros(0, 0)) == "[]"
        assert str(Matrix.zeros(0, 3)) == "[]"

    def test_non_finite(self):
        m = Matrix([np.inf, -np.inf], 1, 2)
        assert str(m) == "[[inf, -inf]]"

    def test_repr(self, square_2x2):
        assert repr(square_2x2) == "Matrix(rows=2, columns=2, data=[1.0, 2.0, 3.0, 4.0])"


class TestOperators:
    """Operators forward to the named operations."""

    def test_add(self, square_2x2):
        assert square_2x2 + Matrix.ones(2, 2) == Matrix([2, 3, 4, 5], 2, 2)

    def test_add_mismatch(self, square_2x2):
        with pytest.raises(DimensionError):
            square_2x2 + Matrix.ones(3, 3)

    def test_scalar_add_both_sides(self, square_2x2):
        expected = Matrix([2, 3, 4, 5], 2, 2)
        assert square_2x2 + 1.0 == expected
        assert 1 + square_2x2 == expected

    def test_subtract(self, square_2x2):
        assert square_2x2 - Matrix.identity(2) == Matrix([0, 2, 3, 3], 2, 2)

    def test_scalar_subtract_both_sides(self, square_2x2):
        assert square_2x2 - 1 == Matrix([0, 1, 2, 3], 2, 2)
        assert 10 - square_2x2 == Matrix([9, 8, 7, 6], 2, 2)

    def test_multiply_by_scalar(self, square_2x2):
        expected = Matrix([2, 4, 6, 8], 2, 2)
        assert square_2x2 * 2 == expected
        assert 2.0 * square_2x2 == expected

    def test_numpy_scalar_on_left(self, square_2x2):
        assert np.float64(2.0) * square_2x2 == Matrix([2, 4, 6, 8], 2, 2)

    def test_star_between_matrices_is_hadamard(self, square_2x2):
        assert square_2x2 * square_2x2 == Matrix([1, 4, 9, 16], 2, 2)

    def test_matmul(self, square_2x2):
        assert square_2x2 @ square_2x2 == Matrix([7, 10, 15, 22], 2, 2)

    def test_divide_by_scalar(self, square_2x2):
        assert square_2x2 / 2 == Matrix([0.5, 1.0, 1.5, 2.0], 2, 2)

    def test_scalar_divided_by_matrix(self):
        m = Matrix.diagonal([2.0, 4.0])
        result = 4.0 / m
        assert result[0, 0] == 2.0
        assert result[1, 1] == 1.0
        assert np.isinf(result[0, 1])

    def test_hadamard_division(self):
        a = Matrix.diagonal([4.0, 9.0])
        b = Matrix([2.0, 1.0, 1.0, 3.0], 2, 2)
        assert a / b == Matrix([2, 0, 0, 3], 2, 2)

    def test_negation(self):
        m = Matrix.diagonal([1.0, -2.0])
        assert -m == Matrix([-1, 0, 0, 2], 2, 2)

    def test_in_place_add_rebinds(self, square_2x2):
        original = square_2x2
        square_2x2 += Matrix.identity(2)
        assert square_2x2 == Matrix([2, 2, 3, 5], 2, 2)
        assert original == Matrix([1, 2, 3, 4], 2, 2)

    def test_unsupported_operand(self, square_2x2):
        with pytest.raises(TypeError):
            square_2x2 + "x"

    def test_transpose_property(self):
        m = Matrix([1, 2, 3, 4, 5, 6], 2, 3)
        assert m.T == m.transpose()
