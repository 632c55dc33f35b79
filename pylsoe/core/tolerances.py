"""
Tolerance tiers for numerical validation.

The reduction itself compares against zero exactly. These tiers are for
comparing computed solutions against independent references:
- FP64: double precision reduction
- FP32: relaxed for single-precision arithmetic

Used by the test suite and by LinearSystemSolution.residual_ok().
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision Gauss-Jordan on well-conditioned input',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision Gauss-Jordan on well-conditioned input',
)


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select the tolerance tier matching an element type."""
    if np.dtype(dtype) == np.dtype(np.float32):
        return FP32
    return FP64
