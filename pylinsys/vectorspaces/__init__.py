"""
Vector-space predicates built on Vector, Matrix and rref.
"""

from pylinsys.vectorspaces.predicates import (
    are_linearly_dependent,
    cosine_angle,
    cross,
    is_normal_to_plane,
    linear_independence_of_system,
)

__all__ = [
    "are_linearly_dependent",
    "cosine_angle",
    "cross",
    "is_normal_to_plane",
    "linear_independence_of_system",
]
