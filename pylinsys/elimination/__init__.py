"""
Row reduction and linear system solving.

Public API:
    rref(matrix, *, zero_threshold=None) -> Result[None]
    gauss_jordan(matrix, *, zero_threshold=None) -> Result[Vector]
"""

from pylinsys.elimination.rref import rref
from pylinsys.elimination.solvers import gauss_jordan

__all__ = [
    "rref",
    "gauss_jordan",
]
