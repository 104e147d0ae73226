"""
Tests for the in-place RREF reducer.

Validates:
    - Reduced form of full-rank square, wide and tall matrices
    - Free-column detection and the info dict
    - Exact reduction over Fraction
    - Zero-threshold rounding
    - Idempotence and determinism over seeded random inputs
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinsys.core.exceptions import ValidationError
from pylinsys.core.result import ErrorCode
from pylinsys.dense import Matrix
from pylinsys.elimination import rref


# ═══════════════════════════════════════════════════════════════════════
# Basic reduction
# ═══════════════════════════════════════════════════════════════════════


class TestReduction:
    """Full-rank inputs reduce to an identity block."""

    def test_square(self):
        m = Matrix.from_rows([[2, 1], [1, 3]], scalar_type=Fraction)
        result = rref(m)
        assert result.is_ok
        assert result.value is None
        assert m.tolist() == [[1, 0], [0, 1]]

    def test_augmented(self):
        m = Matrix.from_rows([[2, 1, 5], [1, 3, 10]], scalar_type=Fraction)
        assert rref(m).is_ok
        assert m.tolist() == [[1, 0, 1], [0, 1, 3]]

    def test_zero_pivot_triggers_exchange(self):
        m = Matrix.from_rows([[0, 1, 2], [1, 0, 3]])
        assert rref(m).is_ok
        assert m.tolist() == [[1, 0, 3], [0, 1, 2]]

    def test_tall(self):
        m = Matrix.from_rows([[1, 2], [3, 4], [5, 6]], scalar_type=Fraction)
        result = rref(m)
        assert result.is_ok
        assert m.tolist() == [[1, 0], [0, 1], [0, 0]]
        assert result.info["rank"] == 2

    def test_single_element(self):
        m = Matrix.from_rows([[4]])
        assert rref(m).is_ok
        assert m[0, 0] == 1.0

    def test_integer_scalar_type(self):
        m = Matrix.from_rows([[2, 1], [1, 3]], scalar_type=int)
        assert rref(m).is_ok
        assert m.scalar_type is float
        assert m.tolist() == [[1.0, 0.0], [0.0, 1.0]]
        assert all(isinstance(v, float) for row in m for v in row)

    def test_info_and_timing(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        result = rref(m)
        assert result.info["method"] == "gauss_jordan_rref"
        assert result.info["rank"] == 2
        assert result.info["free_columns"] == []
        assert result.info["zero_threshold"] is None
        assert result.timing["total_seconds"] >= 0


# ═══════════════════════════════════════════════════════════════════════
# Free columns
# ═══════════════════════════════════════════════════════════════════════


class TestFreeColumns:
    """A column without a pivot on or below the diagonal is free."""

    def test_dependent_columns(self):
        m = Matrix.from_rows(
            [
                [11, 22, 17, 100, 100],
                [11, 22, 99, 123, 145],
                [1, 2, 36, 45, 123],
                [2, 4, 63, 98, 1413],
            ],
            scalar_type=Fraction,
        )
        result = rref(m)
        assert result.error is ErrorCode.FREE_COLUMNS_IN_RREF
        assert 1 in result.info["free_columns"]
        assert result.info["rank"] == 4 - len(result.info["free_columns"])
        assert result.message is not None

    def test_zero_matrix(self):
        m = Matrix.zero(2, 3)
        result = rref(m)
        assert result.is_err
        assert result.info["free_columns"] == [0, 1]
        assert result.info["rank"] == 0

    def test_zero_column_skipped(self):
        m = Matrix.from_rows([[0, 1], [0, 2]], scalar_type=Fraction)
        result = rref(m)
        assert result.info["free_columns"] == [0]
        # Column 1 pivots on the diagonal row and clears row 0
        assert m.tolist() == [[0, 0], [0, 1]]


# ═══════════════════════════════════════════════════════════════════════
# Exactness and rounding
# ═══════════════════════════════════════════════════════════════════════


class TestExactness:
    """Fraction input is reduced without round-off."""

    def test_fraction_entries_stay_fractions(self):
        m = Matrix.from_rows([[Fraction(1, 3), Fraction(1, 7)], [Fraction(2, 5), 1]])
        assert rref(m).is_ok
        assert m.tolist() == [[1, 0], [0, 1]]
        assert all(isinstance(v, Fraction) for row in m for v in row)

    def test_fraction_solution_satisfies_system(self, random_fraction_rows):
        for _ in range(10):
            rows = random_fraction_rows(4, 5)
            m = Matrix.from_rows(rows)
            if not rref(m).is_ok:
                continue
            x = [m[i, 4] for i in range(4)]
            for row in rows:
                assert sum(a * xi for a, xi in zip(row[:4], x)) == row[4]

    def test_agrees_with_numpy_rank(self, random_fraction_rows):
        for _ in range(10):
            rows = random_fraction_rows(4, 4, low=-2, high=3)
            expected_rank = np.linalg.matrix_rank(np.array(rows, dtype=float))
            result = rref(Matrix.from_rows(rows))
            assert result.is_ok == (expected_rank == 4)


class TestZeroThreshold:
    """Residue below the threshold is replaced by exact zeros."""

    def test_residue_rounded(self):
        m = Matrix.from_rows([[1, 1e-12, 0], [0, 1, 1]])
        result = rref(m, zero_threshold=1e-10)
        assert result.is_ok
        assert m.tolist() == [[1, 0, 0], [0, 1, 1]]
        assert result.info["zero_threshold"] == 1e-10

    def test_residue_kept_without_threshold(self):
        m = Matrix.from_rows([[1, 1e-12, 0], [0, 1, 1]])
        assert rref(m).is_ok
        assert m[0, 2] == -1e-12

    def test_tiny_pivot_becomes_free(self):
        rows = [[1, 1, 1], [1, 1 + 1e-13, 2]]
        assert rref(Matrix.from_rows(rows)).is_ok
        result = rref(Matrix.from_rows(rows), zero_threshold=1e-10)
        assert result.error is ErrorCode.FREE_COLUMNS_IN_RREF
        assert result.info["free_columns"] == [1]

    @pytest.mark.parametrize("threshold", [0, -1e-10, float("inf"), float("nan")])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(ValidationError):
            rref(Matrix.identity(2), zero_threshold=threshold)


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:
    """Idempotence and determinism over seeded random inputs."""

    @pytest.mark.parametrize("shape", [(3, 3), (3, 4), (4, 6), (5, 3)])
    def test_idempotent(self, rng, shape):
        data = rng.standard_normal(shape)
        m = Matrix.from_rows(data.tolist())
        assert rref(m).is_ok
        once = m.to_numpy()
        assert rref(m).is_ok
        np.testing.assert_array_equal(m.to_numpy(), once)

    @pytest.mark.parametrize("shape", [(3, 3), (4, 5), (6, 2)])
    def test_deterministic(self, rng, shape):
        data = rng.standard_normal(shape)
        a = Matrix.from_rows(data.tolist())
        b = Matrix.from_rows(data.tolist())
        rref(a)
        rref(b)
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

    def test_identity_block(self, rng):
        data = rng.standard_normal((4, 6))
        m = Matrix.from_rows(data.tolist())
        assert rref(m).is_ok
        np.testing.assert_array_equal(m.to_numpy()[:, :4], np.eye(4))

    def test_matches_numpy_solve(self, rng):
        a = rng.standard_normal((5, 5))
        b = rng.standard_normal(5)
        m = Matrix.from_rows(np.column_stack([a, b]).tolist())
        assert rref(m).is_ok
        np.testing.assert_allclose(m.to_numpy()[:, 5], np.linalg.solve(a, b), rtol=1e-9, atol=1e-12)
