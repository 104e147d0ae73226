"""
Linear system solvers built on the in-place reducer.

This module provides gauss_jordan() (public API), which reduces an
augmented matrix [A | b] and classifies the outcome.
"""

from typing import Any

from pylinsys.core.compute.precision import resolve_zero_threshold
from pylinsys.core.compute.timing import Timer
from pylinsys.core.result import ErrorCode, Result
from pylinsys.dense.matrix import Matrix
from pylinsys.dense.vector import Vector
from pylinsys.elimination._common import find_contradiction_row
from pylinsys.elimination.rref import rref


UNDERDETERMINED_MESSAGE = (
    "The number of equations in the augmented matrix is less than the number of variables."
)
NO_SOLUTIONS_MESSAGE = "This system of equations has no solutions."
INFINITE_SOLUTIONS_MESSAGE = "This system of equations has infinite solutions."


def gauss_jordan(
    matrix: Matrix,
    *,
    zero_threshold: float | None = None,
) -> Result[Vector]:
    """
    Solve the linear system held in an augmented matrix.

    The last column of ``matrix`` is the right-hand side; the first
    ncols - 1 columns are the coefficients of the unknowns.

    Args:
        matrix: Augmented matrix [A | b], reduced in place
        zero_threshold: Forwarded to rref(). None means DEFAULT_ZERO_THRESHOLD
            for float data and no rounding for exact types

    Returns:
        Result[Vector] holding the unique solution (length ncols - 1), or
        one of:
            UNDERDETERMINED_SYSTEM: fewer equations than unknowns; the
                matrix is left untouched
            NO_SOLUTIONS: the reduced form contains a row 0 = c, c != 0
            INFINITE_SOLUTIONS: free columns and no contradiction row
            UNKNOWN_ERROR: the reducer failed for another reason

    Raises:
        ValidationError: If zero_threshold is invalid

    Example:
        >>> m = Matrix.from_rows([[2, 0, 4], [0, 4, 8]])
        >>> gauss_jordan(m).unwrap().tolist()
        [2.0, 2.0]
    """
    nvars = matrix.ncols - 1
    if matrix.nrows < nvars:
        return Result.err(
            ErrorCode.UNDERDETERMINED_SYSTEM,
            UNDERDETERMINED_MESSAGE,
            info={'nrows': matrix.nrows, 'nvars': nvars},
        )

    timer = Timer()
    timer.start()

    with timer.section('rref'):
        reduced = rref(
            matrix,
            zero_threshold=resolve_zero_threshold(matrix.scalar_type, zero_threshold),
        )

    with timer.section('classification'):
        outcome = _classify(matrix, reduced, nvars)

    timer.stop()

    if outcome.is_err:
        return Result.err(
            outcome.error,
            outcome.message,
            info=outcome.info,
            timing=timer.result(),
        )
    return Result.ok(outcome.value, info=outcome.info, timing=timer.result())


def _classify(matrix: Matrix, reduced: Result[None], nvars: int) -> Result[Vector]:
    info: dict[str, Any] = dict(reduced.info)

    if reduced.is_ok:
        # A full diagonal can still hide 0 = c when the last pivot sits in
        # the right-hand column (nrows >= ncols)
        bad_row = find_contradiction_row(matrix)
        if bad_row is not None:
            info['contradiction_row'] = bad_row
            return Result.err(ErrorCode.NO_SOLUTIONS, NO_SOLUTIONS_MESSAGE, info=info)

        rhs = nvars
        solution = Vector.from_values(
            [matrix[r, rhs] for r in range(nvars)],
            scalar_type=matrix.scalar_type,
        )
        return Result.ok(solution, info=info)

    if reduced.error is ErrorCode.FREE_COLUMNS_IN_RREF:
        bad_row = find_contradiction_row(matrix)
        if bad_row is not None:
            info['contradiction_row'] = bad_row
            return Result.err(ErrorCode.NO_SOLUTIONS, NO_SOLUTIONS_MESSAGE, info=info)
        return Result.err(
            ErrorCode.INFINITE_SOLUTIONS, INFINITE_SOLUTIONS_MESSAGE, info=info
        )

    return Result.err(
        ErrorCode.UNKNOWN_ERROR,
        f"Reduction failed: {reduced.message}",
        info=info,
    )
