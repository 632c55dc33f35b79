"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylsoe.core.exceptions import InconsistentSystemError, SingularMatrixError
from pylsoe.core.result import Result
from pylsoe.core.tolerances import select_tolerance
from pylsoe.matrix import Matrix

if TYPE_CHECKING:
    from pylsoe.linsys.design import LinearSystem


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a reduced linear system.

    This is the immutable data computed by backends.

    Attributes:
        reduced: Reduced row-echelon form of [A | b]
        pivot_columns: Pivot columns of the coefficient block
        rank: Rank of A (number of coefficient pivots)
        inconsistent_row: First reduced row reading 0 = c with c != 0, or None
        particular: n x k solution with free variables set to zero, or None
            when the system is inconsistent
        nullspace: n x (n - rank) basis of the null space of A
    """
    reduced: Matrix
    pivot_columns: tuple[int, ...]
    rank: int
    inconsistent_row: int | None
    particular: NDArray[np.floating[Any]] | None
    nullspace: NDArray[np.floating[Any]]

    @property
    def consistent(self) -> bool:
        return self.inconsistent_row is None


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides accessors for the reduced matrix,
    the solution vector, and the structure of the solution set.
    """
    _result: Result[SystemParams]
    _design: 'LinearSystem'

    @property
    def reduced(self) -> Matrix:
        """Copy of the reduced augmented matrix."""
        return self._result.params.reduced.clone()

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def free_variables(self) -> tuple[int, ...]:
        """Unknowns whose column holds no pivot."""
        pivots = set(self.pivot_columns)
        return tuple(c for c in range(self._design.n_unknowns) if c not in pivots)

    @property
    def is_consistent(self) -> bool:
        return self._result.params.consistent

    @property
    def is_unique(self) -> bool:
        return self.is_consistent and self.rank == self._design.n_unknowns

    @property
    def particular_solution(self) -> NDArray[np.floating[Any]]:
        """
        One solution of the system, with every free variable set to zero.

        Shape (n,) for a vector right-hand side, else (n, k).

        Raises:
            InconsistentSystemError: If the system has no solution
        """
        self._require_consistent()
        x = self._result.params.particular
        return x[:, 0].copy() if self._design.vector_rhs else x.copy()

    @property
    def nullspace(self) -> NDArray[np.floating[Any]]:
        """Basis of the null space of A, one column per free variable."""
        return self._result.params.nullspace.copy()

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        """
        The unique solution.

        Raises:
            InconsistentSystemError: If the system has no solution
            SingularMatrixError: If the system has infinitely many solutions
        """
        self._require_consistent()
        if not self.is_unique:
            n = self._design.n_unknowns
            raise SingularMatrixError(
                f"System has infinitely many solutions: rank {self.rank} < {n} unknowns "
                f"(free variables {list(self.free_variables)})",
                rank=self.rank,
                expected_rank=n,
            )
        return self.particular_solution

    def residual_ok(self) -> bool:
        """
        Check that A @ particular_solution reproduces b.

        Uses the tolerance tier of the system's element type.

        Raises:
            InconsistentSystemError: If the system has no solution
        """
        tier = select_tolerance(self._design.dtype)
        A = self._design.A.astype(np.float64)
        b = self._design.b.astype(np.float64)
        x = self.particular_solution.astype(np.float64)
        return bool(np.allclose(A @ x, b, rtol=tier.rtol, atol=tier.atol))

    def _require_consistent(self) -> None:
        row = self._result.params.inconsistent_row
        if row is not None:
            raise InconsistentSystemError(
                f"System has no solution: reduced row {row} reads 0 = nonzero",
                row=row,
            )

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable summary of the solution set."""
        if not self.is_consistent:
            status = "inconsistent (no solution)"
        elif self.is_unique:
            status = "unique solution"
        else:
            status = f"infinitely many solutions ({len(self.free_variables)} free)"

        lines = [
            "Linear System Results",
            "=" * 60,
            f"Equations: {self._design.n_equations}",
            f"Unknowns: {self._design.n_unknowns}",
            f"Rank: {self.rank}",
            f"Element type: {self._design.dtype}",
            f"Status: {status}",
        ]

        if self.is_consistent and self._design.vector_rhs:
            lines.extend(["", "Solution:", "-" * 60])
            free = set(self.free_variables)
            for i, value in enumerate(self.particular_solution):
                suffix = "  (free)" if i in free else ""
                lines.append(f"  x[{i}]: {value:14.6f}{suffix}")

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(m={self._design.n_equations}, n={self._design.n_unknowns}, "
            f"rank={self.rank}, consistent={self.is_consistent})"
        )
