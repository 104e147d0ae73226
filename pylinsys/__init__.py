"""
pylinsys: dense row reduction and linear system solving for Python.

Exact (Fraction) or floating-point elimination over a dense matrix, a
Gauss-Jordan solver that classifies systems as uniquely solvable,
inconsistent or underdetermined, and vector-space predicates built on the
same reduction.

Submodules:
    core: Result envelope, exceptions, validation, timing, precision
    dense: Matrix, Vector, Plane
    elimination: rref, gauss_jordan
    vectorspaces: Linear dependence, angles, cross product, independence
    benchmark: Timing harness over input-size buckets
"""

__version__ = "0.1.0"

from pylinsys.core import (
    DimensionError,
    ErrorCode,
    IndexOutOfRangeError,
    PyLinSysError,
    Result,
    Scalar,
    UnwrapError,
    ValidationError,
)
from pylinsys.dense import Matrix, Plane, Row, Vector
from pylinsys.elimination import gauss_jordan, rref
from pylinsys.vectorspaces import (
    are_linearly_dependent,
    cosine_angle,
    cross,
    is_normal_to_plane,
    linear_independence_of_system,
)
from pylinsys.benchmark import Benchmark, RunInfo

__all__ = [
    "__version__",
    # Core
    "Scalar",
    "ErrorCode",
    "Result",
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnwrapError",
    # Dense types
    "Matrix",
    "Row",
    "Vector",
    "Plane",
    # Algorithms
    "rref",
    "gauss_jordan",
    "are_linearly_dependent",
    "cosine_angle",
    "cross",
    "is_normal_to_plane",
    "linear_independence_of_system",
    # Benchmarking
    "Benchmark",
    "RunInfo",
]
