"""
Linear system backends.

Available backends:
    GaussJordanBackend: CPU Gauss-Jordan elimination on the augmented matrix
"""

from pylsoe.linsys.backends.cpu import GaussJordanBackend

__all__ = [
    "GaussJordanBackend",
]
