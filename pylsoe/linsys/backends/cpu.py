"""
CPU backend for linear systems.

Reduces the augmented matrix [A | b] with Gauss-Jordan elimination and reads
the solution set off the reduced row-echelon form.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylsoe.core.precision import machine_epsilon
from pylsoe.core.result import Result
from pylsoe.core.timing import Timer
from pylsoe.linsys.design import LinearSystem
from pylsoe.linsys.solution import SystemParams
from pylsoe.matrix import ReductionTrace


class GaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for LinearSystem -> SystemParams.

    The reduction accepts any exactly non-zero pivot. When an accepted pivot
    is small enough relative to the input that it is plausibly rounding
    noise, a RuntimeWarning is issued and recorded on the result. The
    reduction itself is not altered.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: LinearSystem) -> Result[SystemParams]:
        """
        Reduce [A | b] and extract the solution set.

        Algorithm:
            1. Reduce a copy of the augmented matrix to RREF
            2. A pivot in a right-hand side column means 0 = c: inconsistent
            3. Otherwise each coefficient pivot row gives one basic variable;
               free variables are zero in the particular solution
            4. Each free column yields one null space basis vector

        Args:
            design: Validated linear system

        Returns:
            Result containing SystemParams
        """
        timer = Timer()
        timer.start()
        warn_list: list[str] = []

        n = design.n_unknowns

        # === Reduction ===
        with timer.section('reduction'):
            reduced = design.augmented
            trace = reduced.reduce_in_place()

        coefficient_pivots = [c for c in trace.pivot_columns if c < n]
        inconsistent_row = len(coefficient_pivots) if len(coefficient_pivots) < trace.rank else None

        with timer.section('diagnostics'):
            for msg in _small_pivot_messages(design, trace):
                warnings.warn(msg, RuntimeWarning, stacklevel=2)
                warn_list.append(msg)

        # === Solution Set ===
        with timer.section('extraction'):
            R = reduced.to_array()
            particular = None
            if inconsistent_row is None:
                particular = _particular_solution(R, coefficient_pivots, n)
            nullspace = _nullspace_basis(R, coefficient_pivots, n)

        timer.stop()

        params = SystemParams(
            reduced=reduced,
            pivot_columns=tuple(coefficient_pivots),
            rank=len(coefficient_pivots),
            inconsistent_row=inconsistent_row,
            particular=particular,
            nullspace=nullspace,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'rank': params.rank,
            'pivot_columns': params.pivot_columns,
            'n_equations': design.n_equations,
            'n_unknowns': n,
            'dtype': str(design.dtype),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_list),
        )


def _particular_solution(
    R: NDArray[np.floating[Any]],
    pivots: list[int],
    n: int,
) -> NDArray[np.floating[Any]]:
    """Basic variables from the pivot rows, free variables zero."""
    x = np.zeros((n, R.shape[1] - n), dtype=R.dtype)
    for row, column in enumerate(pivots):
        x[column] = R[row, n:]
    return x


def _nullspace_basis(
    R: NDArray[np.floating[Any]],
    pivots: list[int],
    n: int,
) -> NDArray[np.floating[Any]]:
    """One basis vector per free column: x_free = 1, basic = -R[row, free]."""
    pivot_set = set(pivots)
    free = [c for c in range(n) if c not in pivot_set]
    N = np.zeros((n, len(free)), dtype=R.dtype)
    for j, f in enumerate(free):
        N[f, j] = 1
        for row, column in enumerate(pivots):
            N[column, j] = -R[row, f]
    return N


def _small_pivot_messages(design: LinearSystem, trace: ReductionTrace) -> list[str]:
    """Describe coefficient pivots that are within rounding noise of zero."""
    A = design.A
    if A.size == 0:
        return []
    scale = max(1.0, float(np.max(np.abs(A))))
    threshold = machine_epsilon(design.dtype) * scale * max(A.shape)

    messages = []
    for column, value in zip(trace.pivot_columns, trace.pivot_values):
        if column < design.n_unknowns and abs(value) < threshold:
            messages.append(
                f"Pivot {value:.3e} in column {column} is below {threshold:.3e}; "
                f"the solution may be dominated by rounding error"
            )
    return messages
