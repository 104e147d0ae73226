"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def consistent_system_rows():
    """3 equations, 3 unknowns, unique solution near (4.80, -4.88, 9.09)."""
    return [
        [11, 22, 17, 100],
        [0, 0, 22, 200],
        [19, 82, 67, 300],
    ]


@pytest.fixture
def inconsistent_system_rows():
    """4 equations, 3 unknowns; rows 0 and 1 demand x+y+z = 1 and = 2."""
    return [
        [1, 1, 1, 1],
        [1, 1, 1, 2],
        [0, 1, 1, 3],
        [0, 2, 2, 6],
    ]


@pytest.fixture
def redundant_system_rows():
    """4 equations, 4 unknowns with a duplicated equation."""
    return [
        [11, 22, 17, 100, 100],
        [13, 22, 99, 123, 145],
        [11, 22, 17, 100, 100],
        [2, 4, 63, 98, 1413],
    ]


@pytest.fixture
def random_fraction_rows(rng):
    """Factory for random small-integer grids stored as Fractions."""
    def make(nrows, ncols, low=-9, high=10):
        ints = rng.integers(low, high, size=(nrows, ncols))
        return [[Fraction(int(v)) for v in row] for row in ints]
    return make
