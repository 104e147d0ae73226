"""
In-place reduction to reduced row echelon form.

Pivots are taken on the diagonal: step i works on column i using row i,
for i in 0 .. min(nrows, ncols) - 1. A column with no usable pivot on or
below the diagonal is recorded as free and skipped; its row is left for a
later step. The caller's matrix is rewritten; there is no copying variant.
"""

from typing import Any

from pylinsys.core.compute.timing import Timer
from pylinsys.core.result import ErrorCode, Result
from pylinsys.core.validation import check_zero_threshold
from pylinsys.dense.matrix import Matrix
from pylinsys.elimination._common import find_next_pivot


def rref(
    matrix: Matrix,
    *,
    zero_threshold: float | None = None,
) -> Result[None]:
    """
    Reduce ``matrix`` to reduced row echelon form in place.

    For each diagonal position i:
        1. If matrix[i][i] is zero, exchange row i with the first row below
           it that has a non-zero entry in column i. If there is none,
           column i is free.
        2. Eliminate column i from every other row r, adding
           -(matrix[r][i] / matrix[i][i]) times row i, then set matrix[r][i]
           to an exact zero.
        3. Multiply row i by 1 / matrix[i][i] and set the pivot to an
           exact one.

    With a zero_threshold, every row touched in steps 2 and 3 has its
    elements with abs(float(x)) < zero_threshold replaced by exact zeros.
    Leave it None for exact scalar types.

    Args:
        matrix: Matrix to reduce (mutated)
        zero_threshold: Optional rounding threshold, finite and > 0

    Returns:
        Result[None]. Success when every diagonal column holds a pivot;
        FREE_COLUMNS_IN_RREF otherwise. info carries 'method', 'rank',
        'free_columns' and 'zero_threshold'.

    Raises:
        ValidationError: If zero_threshold is not None and not finite > 0
    """
    threshold = check_zero_threshold(zero_threshold)

    timer = Timer()
    timer.start()

    free_columns = _reduce(matrix, threshold)

    timer.stop()

    info: dict[str, Any] = {
        'method': 'gauss_jordan_rref',
        'rank': min(matrix.nrows, matrix.ncols) - len(free_columns),
        'free_columns': free_columns,
        'zero_threshold': threshold,
    }

    if free_columns:
        return Result.err(
            ErrorCode.FREE_COLUMNS_IN_RREF,
            f"Reduced row echelon form has free columns: {free_columns}",
            info=info,
            timing=timer.result(),
        )
    return Result.ok(info=info, timing=timer.result())


def _reduce(matrix: Matrix, threshold: float | None) -> list[int]:
    """Run the elimination loop. Returns the free column indices."""
    stype = matrix.scalar_type
    one = stype(1)
    zero = stype(0)
    free_columns: list[int] = []

    for i in range(min(matrix.nrows, matrix.ncols)):
        if matrix[i, i] == 0:
            pivot_row = find_next_pivot(matrix, i, i + 1)
            if pivot_row is None:
                free_columns.append(i)
                continue
            matrix.exchange_rows(i, pivot_row)

        pivot = matrix[i, i]
        for r in range(matrix.nrows):
            if r == i:
                continue
            entry = matrix[r, i]
            if entry == 0:
                continue
            matrix.linear_comb_rows(r, one, i, -(entry / pivot))
            matrix[r, i] = zero
            if threshold is not None:
                matrix.round_row(r, threshold)

        matrix.scale_row(i, one / pivot)
        matrix[i, i] = one
        if threshold is not None:
            matrix.round_row(i, threshold)

    return free_columns
