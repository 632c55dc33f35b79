"""
Element types and numerical precision constants.

A Matrix stores either single or double precision floats. Everything that
depends on the element type (the literal one, machine epsilon) is looked up
here from the NumPy dtype, so the reduction algorithm is written once.
"""

import numpy as np
from typing import Any

from pylsoe.core.exceptions import ValidationError


# Element types a Matrix may hold
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (np.dtype(np.float32), np.dtype(np.float64))

# Element type used when none is requested
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """
    Normalize a dtype specification to one of SUPPORTED_DTYPES.

    Args:
        dtype: None (default dtype), a NumPy dtype, a scalar type such as
            np.float32, or a name such as 'float32'

    Returns:
        The matching numpy.dtype

    Raises:
        ValidationError: If dtype is not single or double precision float
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e
    if resolved not in SUPPORTED_DTYPES:
        supported = ", ".join(str(d) for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"dtype: {resolved} is not supported, expected one of {supported}"
        )
    return resolved


def one(dtype: np.dtype | type) -> np.floating[Any]:
    """The multiplicative identity in the given element type."""
    return np.dtype(dtype).type(1)


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)
