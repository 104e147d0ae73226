"""
Fixed-length numeric vector.

A Vector owns a 1-D numpy buffer whose length is fixed at construction.
Vectors are not duplicable: copy.copy / copy.deepcopy raise TypeError.
Build a new one with Vector.from_values when a second instance is needed.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import DimensionError
from pylinsys.core.validation import (
    check_index,
    check_positive_size,
    check_scalar,
    check_scalar_type,
    check_values,
    infer_scalar_type,
)
from pylinsys.dense import _storage


class Vector:
    """
    Fixed-length owned array of scalars.

    Construction:
        Vector(3)                                  # zero vector, float
        Vector(3, scalar_type=Fraction)            # exact zero vector
        Vector.from_values([1, 2, 3])              # float
        Vector.from_values([Fraction(1, 3), 2])    # exact (Fraction)

    Indexing is bounds-checked; negative indices are rejected.
    """

    def __init__(self, length: int, *, scalar_type: type = float):
        n = check_positive_size(length, 'length')
        self._scalar_type = check_scalar_type(scalar_type)
        self._data = _storage.zeros((n,), self._scalar_type)

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        *,
        scalar_type: type | None = None,
    ) -> Vector:
        """
        Build a Vector from a non-empty sequence of scalars.

        Args:
            values: Elements of the vector
            scalar_type: Storage scalar type. Inferred if None: any Fraction
                makes the vector exact, plain reals are stored as float.

        Raises:
            ValidationError: If values is empty or holds non-scalar entries
        """
        flat = check_values(values, 'values')
        for v in flat:
            check_scalar(v, 'values')
        if scalar_type is None:
            stype = infer_scalar_type(flat)
        else:
            stype = check_scalar_type(scalar_type)
        return cls._from_array(_storage.from_nested(flat, stype, 'values'), stype)

    @classmethod
    def _from_array(cls, array: NDArray[Any], scalar_type: type) -> Vector:
        """Wrap an existing 1-D buffer without validation. Takes ownership."""
        vec = cls.__new__(cls)
        vec._scalar_type = scalar_type
        vec._data = _storage.cast(array, scalar_type)
        return vec

    # === Properties ===

    @property
    def size(self) -> int:
        return self._data.shape[0]

    @property
    def scalar_type(self) -> type:
        return self._scalar_type

    def __len__(self) -> int:
        return self._data.shape[0]

    # === Element access ===

    def __getitem__(self, index: int) -> Any:
        i = check_index(index, self.size, 'element')
        return _storage.element(self._data[i], self._scalar_type)

    def __setitem__(self, index: int, value: Any) -> None:
        i = check_index(index, self.size, 'element')
        self._data[i] = _storage.coerce(value, self._scalar_type, 'value')

    def __iter__(self) -> Iterator[Any]:
        for v in self._data:
            yield _storage.element(v, self._scalar_type)

    def tolist(self) -> list[Any]:
        return list(self)

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the elements as a numpy array."""
        return self._data.copy()

    # === Vector operations ===

    def dot(self, other: Vector) -> Any:
        """
        Dot product.

        Raises:
            DimensionError: If the vectors have different lengths
        """
        if self.size != other.size:
            raise DimensionError(
                "Cannot compute dot product of vectors with different dimensions "
                f"({self.size} vs {other.size})",
                expected=self.size,
                actual=other.size,
            )
        stype = _storage.promote(self._scalar_type, other._scalar_type)
        lhs = _storage.cast(self._data, stype)
        rhs = _storage.cast(other._data, stype)
        return _storage.element(np.dot(lhs, rhs), stype)

    def squared_magnitude(self) -> Any:
        """Sum of squared elements, in the vector's scalar type."""
        return self.dot(self)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(float(self.squared_magnitude()))

    def scale(self, factor: Any) -> Vector:
        """Multiply every element by factor in place. Returns self."""
        self._data *= _storage.coerce(factor, self._scalar_type, 'factor')
        return self

    # === Arithmetic (new vectors) ===

    def _check_same_size(self, other: Vector, operation: str) -> None:
        if self.size != other.size:
            raise DimensionError(
                f"{operation}: vectors have different dimensions ({self.size} vs {other.size})",
                expected=self.size,
                actual=other.size,
            )

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, 'Vector addition')
        stype = _storage.promote(self._scalar_type, other._scalar_type)
        return Vector._from_array(
            _storage.cast(self._data, stype) + _storage.cast(other._data, stype), stype
        )

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, 'Vector subtraction')
        stype = _storage.promote(self._scalar_type, other._scalar_type)
        return Vector._from_array(
            _storage.cast(self._data, stype) - _storage.cast(other._data, stype), stype
        )

    def __neg__(self) -> Vector:
        return Vector._from_array(-self._data, self._scalar_type)

    def __mul__(self, scalar: Any) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        check_scalar(scalar, 'scalar')
        stype = _storage.promote(self._scalar_type, infer_scalar_type([scalar]))
        return Vector._from_array(
            _storage.cast(self._data, stype) * _storage.coerce(scalar, stype, 'scalar'), stype
        )

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Any:
        # Matrix operands are handled by Matrix.__rmatmul__
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(a == b for a, b in zip(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    # === Ownership ===

    def __copy__(self):
        raise TypeError(
            "Vector objects cannot be copied; build a new one with Vector.from_values()"
        )

    def __deepcopy__(self, memo):
        raise TypeError(
            "Vector objects cannot be copied; build a new one with Vector.from_values()"
        )

    def __repr__(self) -> str:
        return f"Vector({self.tolist()!r}, scalar_type={self._scalar_type.__name__})"
