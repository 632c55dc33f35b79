"""
Exception hierarchy for PyLSoE.

All exceptions inherit from PyLSoEError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from pathlib import Path


class PyLSoEError(Exception):
    """Base exception for all PyLSoE errors."""
    pass


class ValidationError(PyLSoEError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an element grid does not match the declared rows x columns,
    or when a right-hand side has a different number of rows than the
    coefficient matrix.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the matrix.

    A caller contract violation. Indices are never clamped or wrapped
    (negative indices are rejected as well).

    Attributes:
        axis: 'row' or 'column'
        index: The offending index
        size: Number of rows or columns on that axis
    """

    def __init__(self, message: str, axis: str, index: int, size: int):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.size = size


class NumericalError(PyLSoEError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class PivotInvariantError(NumericalError):
    """
    A row was normalized by a pivot that is exactly zero.

    The pivot search never selects a zero entry, so this indicates a caller
    bypassing the search (or a bug), not bad user data.

    Attributes:
        row: Row that was being normalized
        column: Pivot column
    """

    def __init__(self, message: str, row: int, column: int):
        super().__init__(message)
        self.row = row
        self.column = column


class SingularMatrixError(NumericalError):
    """
    Coefficient matrix is rank-deficient, so the system has no unique solution.

    Attributes:
        rank: Number of pivot columns found in the coefficient block
        expected_rank: Rank required for a unique solution (number of unknowns)
    """

    def __init__(
        self,
        message: str,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.rank = rank
        self.expected_rank = expected_rank


class InconsistentSystemError(NumericalError):
    """
    Linear system has no solution.

    The reduced augmented matrix contains a row of the form [0 ... 0 | c]
    with c != 0.

    Attributes:
        row: Index of the first contradictory row in the reduced matrix
    """

    def __init__(self, message: str, row: int | None = None):
        super().__init__(message)
        self.row = row


class PersistenceError(PyLSoEError):
    """
    Loading or saving a matrix file failed.

    Attributes:
        path: The path involved, if known
    """

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path


class MatrixFileNotFoundError(PersistenceError, FileNotFoundError):
    """Matrix file does not exist."""
    pass


class MissingDirectoryError(PersistenceError):
    """Save path has no resolvable parent directory."""
    pass


class MalformedDataError(PersistenceError, ValueError):
    """File contents do not deserialize into a usable matrix."""
    pass
