"""
Linear system design.

A LinearSystem holds the augmented matrix [A | b] of a system A x = b,
together with how many of its columns are unknowns. It knows it is a
linear system; Matrix does not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsoe.core.exceptions import DimensionError
from pylsoe.core.precision import SUPPORTED_DTYPES, resolve_dtype
from pylsoe.core.validation import check_array, check_2d, check_finite, check_consistent_length
from pylsoe.matrix import Matrix


@dataclass(frozen=True)
class LinearSystem:
    """
    Linear system specification.

    Immutable after construction: the augmented matrix is copied in, and
    the `augmented` property hands out copies.

    Construction:
        LinearSystem.from_arrays(A, b)                # b of shape (m,) or (m, k)
        LinearSystem.from_augmented(M)                # last column is b
        LinearSystem.from_augmented(M, n_unknowns=2)  # columns 2.. are b
    """
    _augmented: Matrix
    _n_unknowns: int
    _vector_rhs: bool

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike, *, dtype: Any = None) -> LinearSystem:
        """
        Build from a coefficient matrix and right-hand side(s).

        Args:
            A: Coefficients (m x n)
            b: Right-hand side, shape (m,) or (m, k)
            dtype: Element type; defaults to float32 only when both inputs
                are float32, otherwise float64

        Raises:
            ValidationError: Non-numeric or non-finite input
            DimensionError: A not 2D, or b row count differs from A
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        check_2d(A_arr, 'A')

        vector_rhs = b_arr.ndim == 1
        if vector_rhs:
            b_arr = b_arr.reshape(-1, 1)
        check_2d(b_arr, 'b')

        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        if dtype is None:
            common = np.result_type(A_arr, b_arr)
            dtype = common if common in SUPPORTED_DTYPES else None
        dtype = resolve_dtype(dtype)

        augmented = Matrix.from_array(np.hstack([A_arr, b_arr]), dtype=dtype)
        return cls(_augmented=augmented, _n_unknowns=A_arr.shape[1], _vector_rhs=vector_rhs)

    @classmethod
    def from_augmented(cls, matrix: Matrix, *, n_unknowns: int | None = None) -> LinearSystem:
        """
        Build from an already assembled augmented matrix.

        Args:
            matrix: [A | b]; copied
            n_unknowns: Number of leading coefficient columns. Defaults to
                all but the last column.

        Raises:
            DimensionError: If no column is left for the right-hand side
        """
        if n_unknowns is None:
            n_unknowns = matrix.columns - 1
        if not 0 <= n_unknowns < matrix.columns:
            raise DimensionError(
                f"n_unknowns: must leave at least one right-hand side column, "
                f"got {n_unknowns} for a matrix with {matrix.columns} columns"
            )
        n_rhs = matrix.columns - n_unknowns
        return cls(_augmented=matrix.clone(), _n_unknowns=n_unknowns, _vector_rhs=n_rhs == 1)

    # === Properties ===

    @property
    def augmented(self) -> Matrix:
        """Copy of the augmented matrix [A | b]."""
        return self._augmented.clone()

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (m x n)."""
        return self._augmented.to_array()[:, :self._n_unknowns]

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side, (m,) for a single system, else (m x k)."""
        rhs = self._augmented.to_array()[:, self._n_unknowns:]
        return rhs[:, 0] if self._vector_rhs else rhs

    @property
    def n_equations(self) -> int:
        return self._augmented.rows

    @property
    def n_unknowns(self) -> int:
        return self._n_unknowns

    @property
    def n_rhs(self) -> int:
        return self._augmented.columns - self._n_unknowns

    @property
    def vector_rhs(self) -> bool:
        """True when the right-hand side is a single vector."""
        return self._vector_rhs

    @property
    def dtype(self) -> np.dtype:
        return self._augmented.dtype
