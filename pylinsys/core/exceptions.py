"""
Exception hierarchy for pylinsys.

These exceptions form the programmer-error channel: they signal caller bugs
(out-of-range indices, ragged construction grids, shape mismatches on raw
arithmetic) and are never raised for data-dependent outcomes. Expected
outcomes of running an algorithm on caller data travel through
``pylinsys.core.result.Result`` instead.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when construction inputs are malformed: empty or ragged grids,
    zero-length vectors, entries that do not behave like scalars, or
    degenerate geometric definitions.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Raised by raw arithmetic on matrices and vectors (``+``, ``-``, ``@``,
    dot products) when shapes do not line up.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(PyLinSysError, IndexError):
    """
    Row, column or element index outside the valid range.

    Inherits from IndexError so that ordinary ``except IndexError`` handlers
    keep working.

    Attributes:
        index: The offending index
        size: Number of valid positions along the axis
        axis: Which axis was indexed ('row', 'column' or 'element')
    """

    def __init__(self, message: str, index: int, size: int, axis: str):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class UnwrapError(PyLinSysError):
    """
    A Result was unwrapped on the wrong branch.

    Raised by ``Result.unwrap()`` on an error result and by
    ``Result.unwrap_err()`` on a success. Callers are expected to branch on
    the discriminant first.

    Attributes:
        error: The ErrorCode held by the result, if any
        result_message: The message held by the result, if any
    """

    def __init__(self, message: str, error=None, result_message: str | None = None):
        super().__init__(message)
        self.error = error
        self.result_message = result_message
