"""
Tests for Gauss-Jordan row reduction.

Validates the row primitives, pivot search, the reference examples and
the structural properties of reduced row-echelon form for both float32
and float64 matrices.
"""

import numpy as np
import pytest

from pylsoe.core.exceptions import IndexOutOfRangeError, PivotInvariantError
from pylsoe.matrix import Matrix, ReductionTrace
from pylsoe.matrix import reduction


def leading_columns(m: Matrix) -> list[int]:
    """Column of the first non-zero entry of each non-zero row."""
    leads = []
    for r in range(m.rows):
        nonzero = np.flatnonzero(m.get_row(r))
        if nonzero.size:
            leads.append(int(nonzero[0]))
    return leads


def assert_rref(m: Matrix) -> None:
    """Check the defining properties of reduced row-echelon form."""
    A = m.to_array()
    leads = leading_columns(m)
    assert leads == sorted(set(leads)), "leading entries must move strictly right"
    for r, c in enumerate(leads):
        assert A[r, c] == 1
        assert np.count_nonzero(A[:, c]) == 1
    # zero rows sit at the bottom
    for r in range(len(leads), m.rows):
        assert not np.any(A[r])


# ═══════════════════════════════════════════════════════════════════════
# Row primitives
# ═══════════════════════════════════════════════════════════════════════


class TestRowPrimitives:

    def test_multiply_row_by_constant(self, dtype):
        m = Matrix(2, 2, [[1, 2], [3, 4]], dtype=dtype)
        m.multiply_row_by_constant(1, 0.5)
        np.testing.assert_array_equal(m.to_array(), [[1, 2], [1.5, 2]])
        assert m.dtype == dtype

    def test_add_row_multiple(self):
        m = Matrix(2, 3, [[1, 2, 3], [10, 10, 10]])
        m.add_row_multiple(0, 1, -2.0)
        np.testing.assert_array_equal(m.get_row(1), [8, 6, 4])
        np.testing.assert_array_equal(m.get_row(0), [1, 2, 3])

    def test_add_row_multiple_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(2, 2).add_row_multiple(0, 5, 1.0)

    def test_eliminate_column_clears_rows_above_and_below(self):
        m = Matrix(3, 2, [[2, 1], [1, 1], [4, 3]])
        m.eliminate_column(1, 0)
        np.testing.assert_array_equal(m.get_column(0), [0, 1, 0])
        np.testing.assert_array_equal(m.get_row(1), [1, 1])

    def test_eliminate_skips_zero_entries(self):
        m = Matrix(2, 2, [[1, 5], [0, 7]])
        m.eliminate_column(0, 0)
        np.testing.assert_array_equal(m.get_row(1), [0, 7])

    def test_float32_arithmetic_stays_single_precision(self):
        m = Matrix(1, 1, [[1.0]], dtype=np.float32)
        m.multiply_row_by_constant(0, 1.0 / 3.0)
        assert m[0, 0] == np.float32(1.0) * np.float32(1.0 / 3.0)


class TestGetPivot:

    def test_first_nonzero(self):
        m = Matrix(4, 1, [[0], [0], [3], [5]])
        assert m.get_pivot(0) == 2

    def test_search_starts_at_cursor(self):
        m = Matrix(3, 1, [[1], [0], [2]])
        assert m.get_pivot(0, start=1) == 2

    def test_no_pivot(self):
        m = Matrix(2, 2, [[0, 1], [0, 1]])
        assert m.get_pivot(0) is None

    def test_start_past_last_row(self):
        assert Matrix(2, 2, [[1, 1], [1, 1]]).get_pivot(0, start=2) is None

    def test_tiny_value_is_a_pivot(self):
        m = Matrix(2, 1, [[0.0], [1e-300]])
        assert m.get_pivot(0) == 1


class TestPivotInvariant:

    def test_normalizing_zero_pivot_raises(self):
        elements = np.array([[0.0, 1.0]])
        with pytest.raises(PivotInvariantError) as excinfo:
            reduction.normalize_row(elements, 0, 0)
        assert excinfo.value.row == 0
        assert excinfo.value.column == 0

    def test_normalize(self):
        elements = np.array([[4.0, 2.0]])
        reduction.normalize_row(elements, 0, 0)
        np.testing.assert_array_equal(elements, [[1.0, 0.5]])


# ═══════════════════════════════════════════════════════════════════════
# Reference examples
# ═══════════════════════════════════════════════════════════════════════


class TestExamples:

    def test_two_by_three(self, dtype):
        m = Matrix(2, 3, [[2, 4, 6], [1, 1, 1]], dtype=dtype)
        trace = m.reduce_in_place()
        assert m == Matrix(2, 3, [[1, 0, -1], [0, 1, 2]], dtype=dtype)
        assert trace.pivot_columns == (0, 1)
        assert trace.pivot_values == (2.0, -1.0)

    def test_swap_path_gives_identity(self, dtype):
        m = Matrix(2, 2, [[0, 1], [1, 0]], dtype=dtype)
        m.reduce_in_place()
        assert m == Matrix(2, 2, [[1, 0], [0, 1]], dtype=dtype)

    def test_zero_column_is_skipped(self):
        m = Matrix(2, 3, [[1, 0, 2], [3, 0, 4]])
        trace = m.reduce_in_place()
        assert trace.pivot_columns == (0, 2)
        assert 1 not in trace.pivot_columns
        assert trace.rank == 2
        assert trace.rank < m.columns
        assert m == Matrix(2, 3, [[1, 0, 0], [0, 0, 1]])

    def test_zero_matrix(self):
        m = Matrix(2, 2)
        trace = m.reduce_in_place()
        assert trace == ReductionTrace(pivot_columns=(), pivot_values=())
        assert m == Matrix(2, 2)

    def test_empty_matrix(self):
        m = Matrix(0, 3)
        assert m.reduce_in_place().rank == 0

    def test_singular_square(self):
        m = Matrix(3, 3, [[1, 2, 3], [2, 4, 6], [1, 0, 1]])
        trace = m.reduce_in_place()
        assert trace.rank == 2
        assert_rref(m)
        np.testing.assert_array_equal(m.get_row(2), [0, 0, 0])


# ═══════════════════════════════════════════════════════════════════════
# Structural properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    @pytest.fixture(params=[(3, 3), (3, 5), (5, 3), (1, 4), (4, 1)])
    def random_matrix(self, request, rng, dtype):
        rows, columns = request.param
        return Matrix.from_array(rng.integers(-5, 6, size=(rows, columns)), dtype=dtype)

    def test_dimensions_preserved(self, random_matrix):
        shape = random_matrix.shape
        random_matrix.reduce_in_place()
        assert random_matrix.shape == shape

    def test_result_is_rref(self, random_matrix):
        random_matrix.reduce_in_place()
        assert_rref(random_matrix)

    def test_pivot_columns_strictly_increase(self, random_matrix):
        trace = random_matrix.reduce_in_place()
        assert list(trace.pivot_columns) == sorted(set(trace.pivot_columns))
        assert leading_columns(random_matrix) == list(trace.pivot_columns)

    def test_idempotent(self, random_matrix):
        random_matrix.reduce_in_place()
        once = random_matrix.clone()
        random_matrix.reduce_in_place()
        assert random_matrix == once

    def test_exact_pivots_and_zeros_despite_rounding(self):
        # 49 * (1 / 49) rounds to 0.9999999999999999 in float64
        m = Matrix(2, 2, [[49, 1], [7, 3]])
        m.reduce_in_place()
        assert m[0, 0] == 1
        assert m[1, 0] == 0
        assert m[1, 1] == 1
        assert m[0, 1] == 0

    def test_reduced_leaves_original(self):
        m = Matrix(2, 3, [[2, 4, 6], [1, 1, 1]])
        before = m.clone()
        result = m.reduced()
        assert m == before
        assert result == Matrix(2, 3, [[1, 0, -1], [0, 1, 2]])
        assert result != m

    def test_reduced_of_reduced_matrix_is_equal(self):
        m = Matrix(2, 3, [[1, 0, -1], [0, 1, 2]])
        assert m.reduced() == m

    def test_float32_reduction_keeps_dtype(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 4)), dtype=np.float32)
        assert m.reduced().dtype == np.float32
