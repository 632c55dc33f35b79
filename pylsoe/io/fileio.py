"""
JSON persistence for matrices.

File format (indented JSON object):

    {
      "Rows": 2,
      "Columns": 2,
      "Matrix": [
        [1.0, 2.0],
        [3.0, 4.0]
      ]
    }

The element type is not stored; the caller chooses it when loading.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pylsoe.core.exceptions import (
    MalformedDataError,
    MatrixFileNotFoundError,
    MissingDirectoryError,
    ValidationError,
)
from pylsoe.core.precision import DEFAULT_DTYPE
from pylsoe.matrix import Matrix

JSON_EXTENSION = ".json"

# Indentation of saved files
DEFAULT_INDENT = 2

_FIELDS = ("Rows", "Columns", "Matrix")


def append_extension(file_name: str) -> str:
    """Append the matrix file extension to a base name."""
    return file_name + JSON_EXTENSION


def matrix_to_dict(matrix: Matrix) -> dict[str, Any]:
    """Serializable representation of a matrix."""
    return {
        "Rows": matrix.rows,
        "Columns": matrix.columns,
        "Matrix": matrix.to_array().tolist(),
    }


def matrix_from_dict(data: Any, dtype: Any = DEFAULT_DTYPE) -> Matrix:
    """
    Rebuild a matrix from its serialized representation.

    Raises:
        MalformedDataError: If data is not an object with integer Rows and
            Columns and a numeric grid of that shape
    """
    if not isinstance(data, dict):
        raise MalformedDataError(
            f"expected a JSON object with fields {', '.join(_FIELDS)}, "
            f"got {type(data).__name__}"
        )

    missing = [name for name in _FIELDS if name not in data]
    if missing:
        raise MalformedDataError(f"missing field(s): {', '.join(missing)}")

    rows, columns = data["Rows"], data["Columns"]
    if not isinstance(data["Matrix"], list):
        raise MalformedDataError(
            f"Matrix: expected a list of rows, got {type(data['Matrix']).__name__}"
        )

    try:
        return Matrix(rows, columns, data["Matrix"], dtype=dtype)
    except ValidationError as e:
        raise MalformedDataError(f"unusable matrix data: {e}") from e


def load_matrix(file_path: str | Path, dtype: Any = DEFAULT_DTYPE) -> Matrix:
    """
    Read a matrix from a JSON file.

    Args:
        file_path: Path to the file
        dtype: Element type of the returned matrix (np.float32 or np.float64)

    Returns:
        The loaded Matrix

    Raises:
        MatrixFileNotFoundError: If the file does not exist
        MalformedDataError: If the contents are not a usable matrix
    """
    path = Path(file_path)
    if not path.is_file():
        raise MatrixFileNotFoundError(f"matrix file not found: {path}", path=path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise MalformedDataError(f"{path}: not UTF-8 text: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise MalformedDataError(f"{path}: invalid JSON: {e}", path=path) from e

    try:
        return matrix_from_dict(data, dtype=dtype)
    except MalformedDataError as e:
        raise MalformedDataError(f"{path}: {e}", path=path) from e


def save_matrix(file_path: str | Path, matrix: Matrix) -> None:
    """
    Write a matrix to a JSON file, creating parent directories as needed.

    Args:
        file_path: Destination file
        matrix: Matrix to save

    Raises:
        MissingDirectoryError: If the path has no file name or no parent
            directory (e.g. a filesystem root)
    """
    path = Path(file_path)
    if path.name == "" or path.parent == path:
        raise MissingDirectoryError(
            f"cannot resolve a parent directory for {str(file_path)!r}", path=path
        )

    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(matrix_to_dict(matrix), indent=DEFAULT_INDENT)
    path.write_text(text + "\n", encoding="utf-8")
