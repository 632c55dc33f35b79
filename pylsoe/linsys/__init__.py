"""
Systems of linear equations.

Solves A x = b by reducing the augmented matrix [A | b] to reduced
row-echelon form.

Public API:
    solve(A, b, ...) -> LinearSystemSolution
    solve_augmented(matrix, ...) -> LinearSystemSolution

Example:
    >>> from pylsoe.linsys import solve
    >>> result = solve([[2, 1], [1, 3]], [4, 7])
    >>> result.solution
    array([1., 2.])
    >>> print(result.summary())
"""

from pylsoe.linsys.design import LinearSystem
from pylsoe.linsys.solution import LinearSystemSolution, SystemParams
from pylsoe.linsys.solvers import solve, solve_augmented

__all__ = [
    "solve",
    "solve_augmented",
    "LinearSystem",
    "LinearSystemSolution",
    "SystemParams",
]
