"""
PyLSoE: dense matrices and Gauss-Jordan elimination for linear systems.

Submodules:
    matrix: Matrix container and row reduction
    io: JSON persistence for matrices
    linsys: Solving A x = b from the reduced augmented matrix
    core: Exceptions, validation, precision and shared infrastructure
"""

__version__ = "0.1.0"

from pylsoe import matrix
from pylsoe import io
from pylsoe import linsys
from pylsoe.matrix import Matrix, ReductionTrace
from pylsoe.io import load_matrix, save_matrix, append_extension
from pylsoe.linsys import solve, solve_augmented

__all__ = [
    "__version__",
    "matrix",
    "io",
    "linsys",
    "Matrix",
    "ReductionTrace",
    "load_matrix",
    "save_matrix",
    "append_extension",
    "solve",
    "solve_augmented",
]
