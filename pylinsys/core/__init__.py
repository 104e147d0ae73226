"""
Core infrastructure for pylinsys.

This module provides the shared abstractions used by the dense types, the
elimination algorithms and the vector-space predicates.

Key components:
    protocols: Scalar protocol (the element contract)
    result: Result[P] envelope and ErrorCode taxonomy
    exceptions: Exception hierarchy (programmer-error channel)
    validation: Input validators
    compute: Timing and zero-threshold precision helpers
"""

from pylinsys.core.protocols import Scalar
from pylinsys.core.result import ErrorCode, Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    UnwrapError,
)

__all__ = [
    # Protocols
    "Scalar",
    # Result
    "ErrorCode",
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnwrapError",
]
