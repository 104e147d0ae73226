"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent repair of ragged or empty input
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import operator
from fractions import Fraction
from numbers import Integral, Real
from typing import Any, Sequence

from pylinsys.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pylinsys.core.protocols import Scalar


def check_index(index: Any, size: int, axis: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are rejected; there is no wrap-around.

    Args:
        index: Index to validate (anything supporting __index__)
        size: Number of valid positions
        axis: Axis name for error messages ('row', 'column', 'element')

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If index is outside [0, size)
        TypeError: If index is not an integer
    """
    i = operator.index(index)
    if i < 0 or i >= size:
        raise IndexOutOfRangeError(
            f"{axis} index {i} out of range for size {size}",
            index=i,
            size=size,
            axis=axis,
        )
    return i


def check_positive_size(size: Any, name: str) -> int:
    """
    Verify a dimension is an integer >= 1.

    Raises:
        ValidationError: If size is not a positive integer
    """
    try:
        n = operator.index(size)
    except TypeError as e:
        raise ValidationError(f"{name}: expected an integer, got {size!r}") from e
    if n < 1:
        raise ValidationError(f"{name}: must be at least 1, got {n}")
    return n


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value satisfies the Scalar protocol.

    Raises:
        ValidationError: If value lacks the required arithmetic
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Scalar):
        raise ValidationError(
            f"{name}: {value!r} of type {type(value).__name__} does not support "
            f"scalar arithmetic (+, -, *, /, ==, float())"
        )


def check_grid(rows: Any, name: str) -> list[list[Any]]:
    """
    Verify a nested sequence is a non-empty rectangular grid.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        The grid as a list of lists

    Raises:
        ValidationError: On zero rows, a zero-length row, or unequal rows
    """
    try:
        grid = [list(row) for row in rows]
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of rows: {e}") from e

    if len(grid) == 0:
        raise ValidationError(f"{name}: matrix cannot have 0 rows")
    ncols = len(grid[0])
    if ncols == 0:
        raise ValidationError(f"{name}: matrix cannot have a row with 0 elements")
    for i, row in enumerate(grid):
        if len(row) != ncols:
            raise ValidationError(
                f"{name}: all rows must have the same length; row 0 has {ncols} "
                f"elements, row {i} has {len(row)}"
            )
    return grid


def check_values(values: Any, name: str) -> list[Any]:
    """
    Verify a flat sequence is non-empty.

    Raises:
        ValidationError: If values is not iterable or is empty
    """
    try:
        flat = list(values)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of scalars: {e}") from e
    if len(flat) == 0:
        raise ValidationError(f"{name}: vector cannot have 0 elements")
    return flat


def check_same_shape(
    lhs: tuple[int, ...],
    rhs: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If shapes differ
    """
    if lhs != rhs:
        raise DimensionError(
            f"{operation}: operands have shapes {lhs} and {rhs}",
            expected=lhs,
            actual=rhs,
        )


def check_inner_dimension(lhs: int, rhs: int, operation: str) -> None:
    """
    Verify the contracted dimensions of a product agree.

    Raises:
        DimensionError: If lhs != rhs
    """
    if lhs != rhs:
        raise DimensionError(
            f"{operation}: inner dimensions differ ({lhs} vs {rhs})",
            expected=lhs,
            actual=rhs,
        )


def check_zero_threshold(threshold: float | None) -> float | None:
    """
    Verify a zero-rounding threshold is None or a finite positive number.

    Raises:
        ValidationError: If threshold is non-positive, NaN or infinite
    """
    if threshold is None:
        return None
    if not isinstance(threshold, Real):
        raise ValidationError(
            f"zero_threshold: expected a real number, got {type(threshold).__name__}"
        )
    value = float(threshold)
    if not math.isfinite(value) or value <= 0.0:
        raise ValidationError(
            f"zero_threshold: must be finite and > 0, got {threshold!r}"
        )
    return value


def infer_scalar_type(values: Sequence[Any]) -> type:
    """
    Pick the storage scalar type for a collection of validated scalars.

    Any Fraction makes the whole collection exact (Fraction); plain real
    numbers are stored as float; anything else conforming to Scalar keeps
    the type of its first element.
    """
    if any(isinstance(v, Fraction) for v in values):
        return Fraction
    if all(isinstance(v, Real) for v in values):
        return float
    return type(values[0])


def check_scalar_type(scalar_type: Any) -> type:
    """
    Verify a storage scalar type and return the type actually stored.

    Integer types are not closed under division, so they are stored as
    float.

    Raises:
        ValidationError: If scalar_type is not a type
    """
    if not isinstance(scalar_type, type):
        raise ValidationError(
            f"scalar_type: expected a type, got {type(scalar_type).__name__}"
        )
    if issubclass(scalar_type, Integral):
        return float
    return scalar_type
