"""
Numerical precision constants and utilities.

Holds the default zero threshold used to scrub elimination residue and the
helpers that apply it to scalars and row buffers. This module is the single
source of truth for those constants.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Suggested threshold for rref(..., zero_threshold=...) on float data
DEFAULT_ZERO_THRESHOLD: float = 1e-10


def round_off_to_zero(value: Any, threshold: float) -> Any:
    """
    Replace a near-zero scalar with an exact zero of the same type.

    The comparison is made on float(value), so exact types such as Fraction
    are rounded on their double approximation.

    Args:
        value: Scalar to inspect
        threshold: Values with abs(float(value)) < threshold become zero

    Returns:
        value unchanged, or type(value)(0)
    """
    if -threshold < float(value) < threshold:
        return type(value)(0)
    return value


def round_row_to_zero(row: NDArray[Any], threshold: float) -> None:
    """
    Round every near-zero element of a 1-D buffer in place.

    Float buffers are handled with a vectorized mask. Object buffers
    (Fraction and other exact types) are walked element by element so each
    zero keeps the element's own type.

    Args:
        row: Row buffer (usually a view into matrix storage)
        threshold: Rounding threshold, > 0
    """
    if row.dtype == object:
        for j in range(row.shape[0]):
            row[j] = round_off_to_zero(row[j], threshold)
    else:
        row[np.abs(row) < threshold] = 0.0


def resolve_zero_threshold(scalar_type: type, threshold: float | None) -> float | None:
    """
    Threshold to reduce with when the caller gave none.

    Float data defaults to DEFAULT_ZERO_THRESHOLD so elimination residue is
    never taken as a pivot. Exact types keep None.
    """
    if threshold is None and scalar_type is float:
        return DEFAULT_ZERO_THRESHOLD
    return threshold
