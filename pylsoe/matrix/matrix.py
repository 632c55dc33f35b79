"""
Dense matrix container.

Matrix stores a rows x columns grid of float32 or float64 values and
exposes bounds-checked element access, row and column copies, the row
operations used by Gauss-Jordan elimination, and the reduction itself.

Construction:
    Matrix(2, 3)                                  # zero-filled, float64
    Matrix(2, 3, dtype=np.float32)                # zero-filled, float32
    Matrix(2, 3, [[2, 4, 6], [1, 1, 1]])          # explicit, shape-checked
    Matrix.from_array(np.eye(3, dtype=np.float32))

Matrices are mutable and not thread-safe. Hand a clone() to another thread
instead of sharing an instance.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsoe.core.exceptions import ValidationError
from pylsoe.core.precision import SUPPORTED_DTYPES, resolve_dtype
from pylsoe.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_finite,
    check_index,
    check_shape,
)
from pylsoe.matrix import reduction
from pylsoe.matrix.reduction import ReductionTrace


class Matrix:
    """
    Dense rows x columns matrix over a floating point element type.

    Equality is structural and exact: two matrices are equal when they have
    the same dtype, the same dimensions and pairwise equal elements.
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        rows: int,
        columns: int,
        elements: ArrayLike | None = None,
        *,
        dtype: Any = None,
    ):
        """
        Args:
            rows: Number of rows (fixed for the lifetime of the matrix)
            columns: Number of columns (fixed for the lifetime of the matrix)
            elements: Optional grid of values with shape (rows, columns).
                Copied, never aliased. Zero-filled when omitted.
            dtype: np.float32 or np.float64. Defaults to the dtype of
                `elements` when that is supported, else float64.

        Raises:
            ValidationError: Negative dimensions, non-numeric or non-finite
                elements, unsupported dtype
            DimensionError: If elements do not have shape (rows, columns)
        """
        self._rows = check_dimension(rows, 'rows')
        self._columns = check_dimension(columns, 'columns')

        if elements is None:
            self._elements = np.zeros((self._rows, self._columns), dtype=resolve_dtype(dtype))
            return

        grid = check_array(elements, 'elements')
        if dtype is None and grid.dtype in SUPPORTED_DTYPES:
            dtype = grid.dtype
        dtype = resolve_dtype(dtype)

        # An empty grid carries no column information ([] for 0 x n)
        if grid.size == 0 and self._rows * self._columns == 0:
            grid = grid.reshape(self._rows, self._columns)

        check_2d(grid, 'elements')
        check_shape(grid, (self._rows, self._columns), 'elements')

        # Checked after the cast: large doubles overflow to inf in float32
        with np.errstate(over='ignore'):
            stored = np.array(grid, dtype=dtype)
        check_finite(stored, 'elements')

        self._elements: NDArray[np.floating[Any]] = stored

    @classmethod
    def from_array(cls, elements: ArrayLike, *, dtype: Any = None) -> Matrix:
        """Build a matrix whose dimensions are taken from a 2D grid."""
        grid = check_array(elements, 'elements')
        check_2d(grid, 'elements')
        rows, columns = grid.shape
        return cls(rows, columns, grid, dtype=dtype)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def dtype(self) -> np.dtype:
        return self._elements.dtype

    # === Element access ===

    def _check_cell(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be a (row, column) pair, got {key!r}")
        row = check_index(key[0], self._rows, 'row')
        column = check_index(key[1], self._columns, 'column')
        return row, column

    def __getitem__(self, key: tuple[int, int]) -> np.floating[Any]:
        row, column = self._check_cell(key)
        return self._elements[row, column]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, column = self._check_cell(key)
        scalar = check_array(value, 'value')
        if scalar.ndim != 0:
            raise ValidationError(f"value: expected a single number, got shape {scalar.shape}")
        with np.errstate(over='ignore'):
            cast = scalar.astype(self.dtype)[()]
        if not np.isfinite(cast):
            raise ValidationError(
                f"value: expected a finite {self.dtype} number, got {value!r}"
            )
        self._elements[row, column] = cast

    def get_row(self, row: int) -> NDArray[np.floating[Any]]:
        """Copy of row `row` (length = columns)."""
        row = check_index(row, self._rows, 'row')
        return self._elements[row, :].copy()

    def get_column(self, column: int) -> NDArray[np.floating[Any]]:
        """Copy of column `column` (length = rows)."""
        column = check_index(column, self._columns, 'column')
        return self._elements[:, column].copy()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the full element grid."""
        return self._elements.copy()

    # === Row operations ===

    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange two rows in place. Swapping a row with itself is a no-op."""
        row1 = check_index(row1, self._rows, 'row')
        row2 = check_index(row2, self._rows, 'row')
        reduction.swap_rows(self._elements, row1, row2)

    def multiply_row_by_constant(self, row: int, factor: Any) -> None:
        """Scale every entry of a row by `factor`."""
        row = check_index(row, self._rows, 'row')
        reduction.multiply_row_by_constant(self._elements, row, factor)

    def add_row_multiple(self, source: int, dest: int, factor: Any) -> None:
        """Add `factor` times row `source` to row `dest`."""
        source = check_index(source, self._rows, 'row')
        dest = check_index(dest, self._rows, 'row')
        reduction.add_row_multiple(self._elements, source, dest, factor)

    def get_pivot(self, column: int, start: int = 0) -> int | None:
        """First row at or after `start` whose entry in `column` is non-zero."""
        column = check_index(column, self._columns, 'column')
        if start == self._rows:
            return None
        start = check_index(start, self._rows, 'row')
        return reduction.get_pivot(self._elements, column, start)

    def eliminate_column(self, pivot_row: int, column: int) -> None:
        """Zero `column` in every row other than `pivot_row`."""
        pivot_row = check_index(pivot_row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        reduction.eliminate_column(self._elements, pivot_row, column)

    # === Reduction ===

    def reduce_in_place(self) -> ReductionTrace:
        """
        Bring this matrix into reduced row-echelon form.

        Returns:
            ReductionTrace listing the pivot columns; its rank is the final
            pivot-row cursor
        """
        return reduction.reduce_in_place(self._elements)

    def reduced(self) -> Matrix:
        """Reduced row-echelon form of a copy. This matrix is left untouched."""
        result = self.clone()
        result.reduce_in_place()
        return result

    # === Copying and comparison ===

    def clone(self) -> Matrix:
        """Deep copy sharing no storage with this matrix."""
        clone = Matrix.__new__(Matrix)
        clone._rows = self._rows
        clone._columns = self._columns
        clone._elements = self._elements.copy()
        return clone

    def __copy__(self) -> Matrix:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.shape == other.shape
            and bool(np.array_equal(self._elements, other._elements))
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, dtype={self.dtype})"

    def __str__(self) -> str:
        lines = [f"{'Matrix':<10}|" + "".join(f"{j + 1:<9}|" for j in range(self._columns))]
        for i in range(self._rows):
            cells = "".join(f"{str(value):<9}|" for value in self._elements[i])
            lines.append(f"Row: {i + 1:<5}|" + cells)
        return "\n".join(lines) + "\n"
