"""
Core infrastructure for PyLSoE.

This module provides shared abstractions and utilities used by the
matrix, io and linsys submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Supported element types and machine epsilon
    tolerances: Tolerance tiers for comparing results
    timing: Section timer
    result: Generic Result[P] envelope
    protocols: Backend protocol
"""

from pylsoe.core.protocols import Backend
from pylsoe.core.result import Result
from pylsoe.core.exceptions import (
    PyLSoEError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    PivotInvariantError,
    SingularMatrixError,
    InconsistentSystemError,
    PersistenceError,
    MatrixFileNotFoundError,
    MissingDirectoryError,
    MalformedDataError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLSoEError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "PivotInvariantError",
    "SingularMatrixError",
    "InconsistentSystemError",
    "PersistenceError",
    "MatrixFileNotFoundError",
    "MissingDirectoryError",
    "MalformedDataError",
]
