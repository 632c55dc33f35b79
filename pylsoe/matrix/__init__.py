"""
Dense matrices and Gauss-Jordan row reduction.

Public API:
    Matrix: rows x columns float32/float64 container with row operations
    ReductionTrace: pivot columns found by a reduction

Example:
    >>> from pylsoe.matrix import Matrix
    >>> m = Matrix(2, 3, [[2, 4, 6], [1, 1, 1]])
    >>> trace = m.reduce_in_place()
    >>> m == Matrix(2, 3, [[1, 0, -1], [0, 1, 2]])
    True
    >>> trace.pivot_columns
    (0, 1)
"""

from pylsoe.matrix.matrix import Matrix
from pylsoe.matrix.reduction import ReductionTrace

__all__ = [
    "Matrix",
    "ReductionTrace",
]
