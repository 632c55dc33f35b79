"""
Solver dispatch for linear systems.

This module provides the solve() functions (public API) and backend selection.
"""

from typing import Any, Literal
from numpy.typing import ArrayLike

from pylsoe.core.protocols import Backend
from pylsoe.linsys.design import LinearSystem
from pylsoe.linsys.solution import LinearSystemSolution, SystemParams
from pylsoe.linsys.backends.cpu import GaussJordanBackend
from pylsoe.matrix import Matrix


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    dtype: Any = None,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve the linear system A x = b.

    This is the primary public API. Input validation, design construction,
    backend selection and result wrapping all happen here.

    Args:
        A: Coefficient matrix (m x n). Any array-like.
        b: Right-hand side, shape (m,) or (m, k) for k systems sharing A.
        dtype: np.float32 or np.float64. Defaults to float32 only when both
            inputs are float32.
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_gauss_jordan': Gauss-Jordan elimination

    Returns:
        LinearSystemSolution describing the solution set. Inconsistent and
        underdetermined systems do not raise here; accessing `.solution`
        does.
        With several right-hand sides consistency is joint: if any column
        of b has no solution, the whole system is reported inconsistent and
        no particular solution is returned for the other columns.

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        DimensionError: If A and b have inconsistent row counts
        ValueError: If backend is unknown

    Example:
        >>> result = solve([[1, 1], [1, -1]], [3, 1])
        >>> result.solution
        array([2., 1.])
    """
    design = LinearSystem.from_arrays(A, b, dtype=dtype)
    return _solve_design(design, backend)


def solve_augmented(
    matrix: Matrix,
    *,
    n_unknowns: int | None = None,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve a system given as an augmented matrix [A | b].

    Args:
        matrix: Augmented matrix (not modified)
        n_unknowns: Number of coefficient columns. Defaults to all but the
            last column.
        backend: See solve()

    Returns:
        LinearSystemSolution
    """
    design = LinearSystem.from_augmented(matrix, n_unknowns=n_unknowns)
    return _solve_design(design, backend)


def _solve_design(design: LinearSystem, backend: BackendChoice) -> LinearSystemSolution:
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend[LinearSystem, SystemParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return GaussJordanBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
