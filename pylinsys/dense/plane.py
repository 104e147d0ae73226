"""
Plane in three dimensions.

A plane is stored as its coefficient tuple (a, b, c, k) for ax + by + cz = k,
together with the normal (a, b, c) and one representative point on it.
"""

from __future__ import annotations

from typing import Any, Iterable

from pylinsys.core.exceptions import DimensionError, ValidationError
from pylinsys.core.validation import check_scalar
from pylinsys.dense.vector import Vector


class Plane:
    """
    Plane ax + by + cz = k.

    Build with one of the classmethods:
        Plane.from_coefficients(1, 2, 3, 7)
        Plane.from_normal_and_point([1, 2, 3], [7, 0, 0])
    """

    def __init__(self, normal: Vector, point: Vector, constant: Any):
        self._normal = normal
        self._point = point
        self._constant = constant

    @classmethod
    def from_coefficients(cls, a: Any, b: Any, c: Any, k: Any) -> Plane:
        """
        Plane from the coefficients of ax + by + cz = k.

        The representative point lies on the first axis whose coefficient is
        non-zero: (k/a, 0, 0), else (0, k/b, 0), else (0, 0, k/c).

        Raises:
            ValidationError: If a, b and c are all zero, or any value is not
                a scalar
        """
        for name, value in (('a', a), ('b', b), ('c', c), ('k', k)):
            check_scalar(value, name)
        if a == 0 and b == 0 and c == 0:
            raise ValidationError(
                "Plane coefficients a, b, c cannot all be zero"
            )

        zero = type(k)(0)
        if a != 0:
            point = [k / a, zero, zero]
        elif b != 0:
            point = [zero, k / b, zero]
        else:
            point = [zero, zero, k / c]

        return cls(Vector.from_values([a, b, c]), Vector.from_values(point), k)

    @classmethod
    def from_normal_and_point(
        cls,
        normal: Vector | Iterable[Any],
        point: Vector | Iterable[Any],
    ) -> Plane:
        """
        Plane through ``point`` perpendicular to ``normal``.

        Raises:
            DimensionError: If normal or point is not 3-dimensional
            ValidationError: If normal is the zero vector
        """
        n = normal if isinstance(normal, Vector) else Vector.from_values(normal)
        p = point if isinstance(point, Vector) else Vector.from_values(point)
        for name, vec in (('normal', n), ('point', p)):
            if vec.size != 3:
                raise DimensionError(
                    f"{name}: a plane needs a 3 dimensional vector, got {vec.size}",
                    expected=3,
                    actual=vec.size,
                )
        if all(v == 0 for v in n):
            raise ValidationError("normal: plane normal cannot be the zero vector")

        normal_copy = Vector.from_values(n.tolist(), scalar_type=n.scalar_type)
        point_copy = Vector.from_values(p.tolist(), scalar_type=p.scalar_type)
        return cls(normal_copy, point_copy, n.dot(p))

    @property
    def normal(self) -> Vector:
        """Normal vector (a, b, c). Shares storage with the plane."""
        return self._normal

    @property
    def point(self) -> Vector:
        """Representative point on the plane."""
        return self._point

    @property
    def coefficients(self) -> tuple[Any, Any, Any, Any]:
        a, b, c = self._normal.tolist()
        return (a, b, c, self._constant)

    def contains(self, point: Vector | Iterable[Any]) -> bool:
        """
        True iff ax + by + cz == k exactly for the given point.

        Raises:
            DimensionError: If point is not 3-dimensional
        """
        p = point if isinstance(point, Vector) else Vector.from_values(point)
        if p.size != 3:
            raise DimensionError(
                f"point: expected a 3 dimensional vector, got {p.size}",
                expected=3,
                actual=p.size,
            )
        return self._normal.dot(p) == self._constant

    def __repr__(self) -> str:
        a, b, c, k = self.coefficients
        return f"Plane({a}x + {b}y + {c}z = {k})"
