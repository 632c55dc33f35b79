"""
Gauss-Jordan row reduction kernels.

Operate in place on a 2D NumPy array holding float32 or float64 elements.
All arithmetic stays in the array's dtype: factors are cast to the element
type before they touch a row, so a single precision matrix is reduced in
single precision.

Pivot selection is "first non-zero entry in the column at or below the
cursor", compared exactly against zero. Entries that are tiny but non-zero
are accepted as pivots, which can amplify rounding error on badly scaled
input. No tolerance is applied here; see GaussJordanBackend for the
diagnostic warning raised in that situation.

The entries a step is meant to produce are stored exactly: the normalized
pivot is set to one and eliminated entries to zero, so the result is in
reduced row-echelon form regardless of rounding in the rest of the row,
and reducing it again changes nothing.

Kernels trust their indices. Bounds checking happens in Matrix.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylsoe.core.exceptions import PivotInvariantError
from pylsoe.core.precision import one


@dataclass(frozen=True)
class ReductionTrace:
    """
    Record of a Gauss-Jordan reduction.

    Attributes:
        pivot_columns: Columns that received a pivot, in the order processed
        pivot_values: Pivot entries before normalization, one per pivot column
    """
    pivot_columns: tuple[int, ...]
    pivot_values: tuple[float, ...]

    @property
    def rank(self) -> int:
        """Number of pivots found; equals the final pivot-row cursor."""
        return len(self.pivot_columns)


def get_pivot(elements: NDArray[np.floating[Any]], column: int, start: int) -> int | None:
    """
    Find the first row at or after `start` with a non-zero entry in `column`.

    Returns:
        Row index, or None if every candidate entry is exactly zero
    """
    candidates = np.flatnonzero(elements[start:, column])
    if candidates.size == 0:
        return None
    return start + int(candidates[0])


def swap_rows(elements: NDArray[np.floating[Any]], row1: int, row2: int) -> None:
    """Exchange two rows in place."""
    if row1 != row2:
        elements[[row1, row2]] = elements[[row2, row1]]


def multiply_row_by_constant(
    elements: NDArray[np.floating[Any]],
    row: int,
    factor: Any,
) -> None:
    """Scale every entry of `row` by `factor`."""
    elements[row] *= elements.dtype.type(factor)


def add_row_multiple(
    elements: NDArray[np.floating[Any]],
    source: int,
    dest: int,
    factor: Any,
) -> None:
    """dest[i] += source[i] * factor for every column i."""
    elements[dest] += elements[source] * elements.dtype.type(factor)


def normalize_row(elements: NDArray[np.floating[Any]], row: int, column: int) -> None:
    """
    Scale `row` so that its entry in `column` becomes exactly one.

    Raises:
        PivotInvariantError: If the entry is zero. The pivot search never
            selects a zero entry, so reaching this is a caller bug.
    """
    pivot = elements[row, column]
    if pivot == 0:
        raise PivotInvariantError(
            f"cannot normalize row {row}: pivot in column {column} is zero",
            row=row, column=column,
        )
    multiply_row_by_constant(elements, row, one(elements.dtype) / pivot)
    # pivot * (1 / pivot) can round to 1 - ulp
    elements[row, column] = 1


def eliminate_column(
    elements: NDArray[np.floating[Any]],
    pivot_row: int,
    column: int,
) -> None:
    """
    Zero `column` in every row except `pivot_row`.

    Rows above the pivot row are cleared too (Gauss-Jordan, not just
    forward elimination).
    """
    for row in range(elements.shape[0]):
        if row == pivot_row:
            continue
        if elements[row, column] != 0:
            factor = -elements[row, column] / elements[pivot_row, column]
            add_row_multiple(elements, pivot_row, row, factor)
            elements[row, column] = 0


def reduce_in_place(elements: NDArray[np.floating[Any]]) -> ReductionTrace:
    """
    Transform `elements` into reduced row-echelon form.

    Algorithm:
        For each column, left to right:
            1. Find the first non-zero entry at or below the pivot-row cursor.
               If there is none, move on without advancing the cursor.
            2. Swap that row into the cursor position.
            3. Normalize it so the pivot is one.
            4. Eliminate the column from every other row.
            5. Advance the cursor.

    Args:
        elements: 2D float array, modified in place

    Returns:
        ReductionTrace with the pivot columns and pre-normalization pivots
    """
    n_rows, n_cols = elements.shape
    pivot_columns: list[int] = []
    pivot_values: list[float] = []
    pivot_row = 0

    for column in range(n_cols):
        if pivot_row >= n_rows:
            break

        found = get_pivot(elements, column, pivot_row)
        if found is None:
            continue

        swap_rows(elements, found, pivot_row)
        pivot_values.append(float(elements[pivot_row, column]))

        normalize_row(elements, pivot_row, column)
        eliminate_column(elements, pivot_row, column)

        pivot_columns.append(column)
        pivot_row += 1

    return ReductionTrace(
        pivot_columns=tuple(pivot_columns),
        pivot_values=tuple(pivot_values),
    )
