"""
Dense containers: Matrix, Row, Vector and Plane.
"""

from pylinsys.dense.vector import Vector
from pylinsys.dense.matrix import Matrix, Row
from pylinsys.dense.plane import Plane

__all__ = [
    "Matrix",
    "Row",
    "Vector",
    "Plane",
]
