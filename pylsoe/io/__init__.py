"""
Matrix persistence.

Public API:
    load_matrix(path, dtype=np.float64) -> Matrix
    save_matrix(path, matrix)
    append_extension(name) -> str
"""

from pylsoe.io.fileio import (
    DEFAULT_INDENT,
    JSON_EXTENSION,
    append_extension,
    load_matrix,
    matrix_from_dict,
    matrix_to_dict,
    save_matrix,
)

__all__ = [
    "load_matrix",
    "save_matrix",
    "append_extension",
    "matrix_to_dict",
    "matrix_from_dict",
    "JSON_EXTENSION",
    "DEFAULT_INDENT",
]
