"""
Discriminated result container for all pylinsys algorithms.

Every algorithmic or predicate function returns a Result: either a success
payload or an ErrorCode with an optional message. These are the expected,
data-dependent outcomes of running an algorithm on caller-supplied numbers
(a system with no solutions, vectors of different lengths). Caller bugs are
reported through exceptions instead; the two channels are never merged.

Design decisions:
    - Generic over success payload P for type safety
    - Exactly one branch is populated; enforced in __post_init__
    - info dict for structured diagnostics (rank, free columns)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so results can be passed around safely
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from pylinsys.core.exceptions import UnwrapError

P = TypeVar('P')  # Success payload type


class ErrorCode(Enum):
    """Closed set of domain error codes."""
    UNKNOWN_ERROR = 'unknown_error'
    UNDERDETERMINED_SYSTEM = 'underdetermined_system'
    FREE_COLUMNS_IN_RREF = 'free_columns_in_rref'
    INFINITE_SOLUTIONS = 'infinite_solutions'
    NO_SOLUTIONS = 'no_solutions'
    INCOMPATIBLE_VECTORS = 'incompatible_vectors'


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable success-or-error envelope.

    Type Parameters:
        P: The success payload type (None for operations that only mutate)

    Attributes:
        value: Success payload; None on error (and for unit successes)
        error: ErrorCode on failure, None on success
        message: Human-readable explanation of the error, if any
        info: Structured metadata (method, rank, free columns)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Construct through the ``ok`` and ``err`` classmethods rather than
    directly.

    Examples:
        >>> res = gauss_jordan(system)
        >>> if res:
        ...     x = res.unwrap()
        ... elif res.error is ErrorCode.NO_SOLUTIONS:
        ...     ...
    """
    value: P | None = None
    error: ErrorCode | None = None
    message: str | None = None
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.error is not None and not isinstance(self.error, ErrorCode):
            raise TypeError(
                f"error must be an ErrorCode or None, got {type(self.error).__name__}"
            )
        if self.error is not None and self.value is not None:
            raise ValueError("An error Result cannot also carry a success value")

    @classmethod
    def ok(
        cls,
        value: P | None = None,
        *,
        info: dict[str, Any] | None = None,
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result[P]:
        """Build a success result."""
        return cls(
            value=value,
            info=dict(info or {}),
            timing=timing,
            warnings=tuple(warnings),
        )

    @classmethod
    def err(
        cls,
        error: ErrorCode,
        message: str | None = None,
        *,
        info: dict[str, Any] | None = None,
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result[P]:
        """Build an error result."""
        return cls(
            error=error,
            message=message,
            info=dict(info or {}),
            timing=timing,
            warnings=tuple(warnings),
        )

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def __bool__(self) -> bool:
        return self.is_ok

    def unwrap(self) -> P | None:
        """
        Return the success payload.

        Raises:
            UnwrapError: If this is an error result
        """
        if self.error is not None:
            raise UnwrapError(
                f"unwrap() called on error result {self.error.name}: {self.message}",
                error=self.error,
                result_message=self.message,
            )
        return self.value

    def unwrap_err(self) -> ErrorCode:
        """
        Return the error code.

        Raises:
            UnwrapError: If this is a success result
        """
        if self.error is None:
            raise UnwrapError("unwrap_err() called on success result")
        return self.error

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
