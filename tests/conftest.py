"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[np.float32, np.float64], ids=['fp32', 'fp64'])
def dtype(request):
    """Both supported element types."""
    return np.dtype(request.param)


@pytest.fixture
def well_conditioned_system(rng):
    """Square diagonally dominant system with a known solution."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def rank_deficient_system():
    """Consistent system whose third column is the sum of the first two."""
    A = np.array([
        [1.0, 2.0, 3.0],
        [2.0, 0.0, 2.0],
        [0.0, 1.0, 1.0],
    ])
    b = A @ np.array([1.0, 1.0, 0.0])
    return A, b
