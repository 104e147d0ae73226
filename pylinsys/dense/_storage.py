"""
Backing-buffer helpers shared by Matrix and Vector.

Float data lives in float64 arrays. Every other scalar type (Fraction in
practice) lives in object arrays so numpy defers element arithmetic to the
Python type and exactness is preserved.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.validation import check_scalar


def zeros(shape: tuple[int, ...], scalar_type: type) -> NDArray[Any]:
    """Zero-filled buffer whose elements are exact zeros of scalar_type."""
    if scalar_type is float:
        return np.zeros(shape, dtype=np.float64)
    return np.full(shape, scalar_type(0), dtype=object)


def coerce(value: Any, scalar_type: type, name: str) -> Any:
    """Validate one element and convert it to the storage scalar type."""
    check_scalar(value, name)
    if scalar_type is float:
        return float(value)
    if scalar_type is Fraction and not isinstance(value, Fraction):
        return Fraction(value)
    return value


def from_nested(values: list[Any], scalar_type: type, name: str) -> NDArray[Any]:
    """
    Build a buffer from a validated (rectangular) nested list.

    Works for 1-D lists of scalars and 2-D lists of rows.
    """
    if values and isinstance(values[0], list):
        data = [[coerce(v, scalar_type, name) for v in row] for row in values]
        shape: tuple[int, ...] = (len(data), len(data[0]))
    else:
        data = [coerce(v, scalar_type, name) for v in values]
        shape = (len(data),)

    if scalar_type is float:
        return np.array(data, dtype=np.float64)

    out = np.empty(shape, dtype=object)
    if len(shape) == 2:
        for i, row in enumerate(data):
            for j, v in enumerate(row):
                out[i, j] = v
    else:
        for i, v in enumerate(data):
            out[i] = v
    return out


def cast(array: NDArray[Any], scalar_type: type) -> NDArray[Any]:
    """Return array converted to the storage layout of scalar_type."""
    if scalar_type is float:
        return np.asarray(array, dtype=np.float64)
    if array.dtype == object and scalar_type is not Fraction:
        return array
    out = np.empty(array.shape, dtype=object)
    for idx, v in np.ndenumerate(array):
        out[idx] = scalar_type(v)
    return out


def promote(lhs: type, rhs: type) -> type:
    """Scalar type of an operation mixing two storage types."""
    if lhs is rhs:
        return lhs
    return float


def element(value: Any, scalar_type: type) -> Any:
    """Unwrap a value read from a buffer into the public scalar type."""
    if scalar_type is float:
        return float(value)
    return value
