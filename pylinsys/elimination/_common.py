"""
Helpers shared by the reducer and the solver.
"""

from pylinsys.dense.matrix import Matrix


def find_next_pivot(matrix: Matrix, col: int, start: int) -> int | None:
    """
    First row index >= start whose entry in ``col`` is non-zero.

    Returns:
        Row index, or None if every candidate is zero
    """
    for r in range(start, matrix.nrows):
        if matrix[r, col] != 0:
            return r
    return None


def is_contradiction_row(matrix: Matrix, row: int) -> bool:
    """
    True iff every coefficient in ``row`` is exactly zero and the last
    (right-hand side) entry is not: the row reads 0 = c with c != 0.
    """
    values = matrix[row].tolist()
    return values[-1] != 0 and all(v == 0 for v in values[:-1])


def find_contradiction_row(matrix: Matrix) -> int | None:
    """Scan rows bottom-up for a contradiction row."""
    for r in range(matrix.nrows - 1, -1, -1):
        if is_contradiction_row(matrix, r):
            return r
    return None
