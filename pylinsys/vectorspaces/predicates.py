"""
Vector-space predicates.

Every function here accepts Vector instances or plain 1-D sequences of
scalars and reports its outcome as a Result. Vectors of the wrong or
mismatched dimension are an expected outcome (INCOMPATIBLE_VECTORS), not an
exception.
"""

import math
import warnings
from typing import Any, Iterable, Sequence

from pylinsys.core.compute.precision import resolve_zero_threshold
from pylinsys.core.result import ErrorCode, Result
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.plane import Plane
from pylinsys.dense.vector import Vector
from pylinsys.elimination.rref import rref


VectorLike = Vector | Iterable[Any]

DEPENDENCE_DIMENSION_MESSAGE = (
    "Cannot check linear independence of 2 vectors of unequal dimensions."
)
ANGLE_DIMENSION_MESSAGE = "Cannot compute angle between 2 vectors of unequal dimensions."
PLANE_DIMENSION_MESSAGE = (
    "Only 3 dimenstional vectors can be checked for normalcy with a plane."
)
CROSS_DIMENSION_MESSAGE = "Can compute cross product of only 3 dimensional vectors."
SINGLE_VECTOR_MESSAGE = (
    "You cannot determine linear independence of only 1 vector unless you are high."
)
SYSTEM_DIMENSION_MESSAGE = (
    "Cannot compare linear independence of vectors of unequal dimensions."
)
SYSTEM_UNKNOWN_MESSAGE = (
    "Unknown error occured while trying to compute linear independence of the set of vectors."
)


def _as_vector(value: VectorLike) -> Vector:
    if isinstance(value, Vector):
        return value
    return Vector.from_values(value)


def are_linearly_dependent(v1: VectorLike, v2: VectorLike) -> Result[bool]:
    """
    Test whether two vectors are scalar multiples of one another.

    Uses the equality case of Cauchy-Schwarz: dot(v1, v2)^2 == |v1|^2 |v2|^2,
    compared exactly in the vectors' scalar type. Exact for Fraction; for
    float input only exactly representable cases compare equal.

    Returns:
        Result[bool], or INCOMPATIBLE_VECTORS if the lengths differ
    """
    a = _as_vector(v1)
    b = _as_vector(v2)
    if a.size != b.size:
        return Result.err(ErrorCode.INCOMPATIBLE_VECTORS, DEPENDENCE_DIMENSION_MESSAGE)

    dot = a.dot(b)
    return Result.ok(dot * dot == a.squared_magnitude() * b.squared_magnitude())


def cosine_angle(v1: VectorLike, v2: VectorLike) -> Result[float]:
    """
    Cosine of the angle between two vectors.

    cos = dot(v1, v2) / sqrt(|v1|^2 |v2|^2)

    For exact scalar types cos^2 is formed exactly and only its square
    root is taken in float, so huge entries cannot overflow.

    A zero-length vector has no direction: the result is nan and a
    RuntimeWarning is issued (also recorded in Result.warnings).

    Returns:
        Result[float], or INCOMPATIBLE_VECTORS if the lengths differ
    """
    a = _as_vector(v1)
    b = _as_vector(v2)
    if a.size != b.size:
        return Result.err(ErrorCode.INCOMPATIBLE_VECTORS, ANGLE_DIMENSION_MESSAGE)

    dot = a.dot(b)
    norms = a.squared_magnitude() * b.squared_magnitude()
    if norms == 0:
        msg = "Cosine angle is undefined for a zero vector; returning nan"
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        return Result.ok(math.nan, warnings=(msg,))

    if isinstance(dot, float):
        return Result.ok(float(dot) / math.sqrt(float(norms)))

    # Exact types: cos^2 is at most 1 so it converts to float without
    # overflow, and parallel vectors give exactly 1.0
    cos_squared = (dot * dot) / norms
    cos = math.sqrt(float(cos_squared))
    return Result.ok(cos if dot >= 0 else -cos)


def is_normal_to_plane(plane: Plane, v: VectorLike) -> Result[bool]:
    """
    True iff v points exactly along the plane's normal.

    The test is cosine_angle(plane.normal, v) == 1.0: v must be parallel
    to the normal and share its orientation. An antiparallel v gives False.

    Returns:
        Result[bool], or INCOMPATIBLE_VECTORS if v is not 3-dimensional
    """
    vec = _as_vector(v)
    if vec.size != 3:
        return Result.err(ErrorCode.INCOMPATIBLE_VECTORS, PLANE_DIMENSION_MESSAGE)

    with warnings.catch_warnings():
        warnings.simplefilter('ignore', RuntimeWarning)
        cos = cosine_angle(plane.normal, vec)
    if cos.is_err:
        return Result.err(cos.error, cos.message)
    if cos.warnings:
        warnings.warn(cos.warnings[0], RuntimeWarning, stacklevel=2)
    return Result.ok(cos.value == 1.0, warnings=cos.warnings)


def cross(v1: VectorLike, v2: VectorLike) -> Result[Vector]:
    """
    Cross product of two 3-dimensional vectors.

    (a2 b3 - a3 b2, a3 b1 - a1 b3, a1 b2 - a2 b1)

    Returns:
        Result[Vector], or INCOMPATIBLE_VECTORS unless both have length 3
    """
    a = _as_vector(v1)
    b = _as_vector(v2)
    if a.size != 3 or b.size != 3:
        return Result.err(ErrorCode.INCOMPATIBLE_VECTORS, CROSS_DIMENSION_MESSAGE)

    a1, a2, a3 = a.tolist()
    b1, b2, b3 = b.tolist()
    return Result.ok(Vector.from_values([
        a2 * b3 - a3 * b2,
        a3 * b1 - a1 * b3,
        a1 * b2 - a2 * b1,
    ]))


def linear_independence_of_system(
    vectors: Sequence[VectorLike],
    *,
    homogeneous: bool = False,
    zero_threshold: float | None = None,
) -> Result[bool]:
    """
    Test whether a set of vectors is linearly independent.

    The vectors become the columns of a coefficient matrix, which is reduced
    in place. The set is independent iff the reduction finds a pivot for
    every vector column, i.e. Ax = 0 has only the trivial solution.

    Args:
        vectors: Two or more vectors of equal length
        homogeneous: Reduce the augmented system [A | 0] instead of the
            bare coefficient matrix A. Both give the same answer.
        zero_threshold: Forwarded to rref(). None means DEFAULT_ZERO_THRESHOLD
            for float data and no rounding for exact types

    Returns:
        Result[bool], or one of:
            UNDERDETERMINED_SYSTEM: fewer than 2 vectors
            INCOMPATIBLE_VECTORS: vectors of unequal length
            UNKNOWN_ERROR: the reducer failed for another reason

    Raises:
        ValidationError: If zero_threshold is invalid
    """
    vecs = [_as_vector(v) for v in vectors]
    if len(vecs) < 2:
        return Result.err(ErrorCode.UNDERDETERMINED_SYSTEM, SINGLE_VECTOR_MESSAGE)

    dim = vecs[0].size
    if any(v.size != dim for v in vecs):
        return Result.err(ErrorCode.INCOMPATIBLE_VECTORS, SYSTEM_DIMENSION_MESSAGE)

    # More vectors than dimensions are always dependent
    if len(vecs) > dim:
        return Result.ok(False, info={'nvectors': len(vecs), 'dimension': dim})

    matrix = _assemble(vecs, homogeneous)
    reduced = rref(
        matrix,
        zero_threshold=resolve_zero_threshold(matrix.scalar_type, zero_threshold),
    )
    info = dict(reduced.info)
    info['homogeneous'] = homogeneous

    if reduced.is_ok:
        return Result.ok(True, info=info, timing=reduced.timing)
    if reduced.error is ErrorCode.FREE_COLUMNS_IN_RREF:
        dependent = any(col < len(vecs) for col in reduced.info['free_columns'])
        return Result.ok(not dependent, info=info, timing=reduced.timing)
    return Result.err(ErrorCode.UNKNOWN_ERROR, SYSTEM_UNKNOWN_MESSAGE, info=info)


def _assemble(vecs: list[Vector], homogeneous: bool) -> Matrix:
    """Lay the vectors out as columns, optionally followed by a zero column."""
    columns = [v.tolist() for v in vecs]
    rows = [[col[r] for col in columns] for r in range(vecs[0].size)]
    if homogeneous:
        zero = type(rows[0][0])(0)
        rows = [row + [zero] for row in rows]
    return Matrix.from_rows(rows)
