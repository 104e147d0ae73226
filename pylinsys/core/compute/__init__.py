"""
Shared compute infrastructure for pylinsys.

Submodules:
    timing: Execution timing utilities
    precision: Zero-threshold constants and rounding helpers
"""

from pylinsys.core.compute.precision import (
    DEFAULT_ZERO_THRESHOLD,
    EPSILON_64,
    round_off_to_zero,
    resolve_zero_threshold,
    round_row_to_zero,
)
from pylinsys.core.compute.timing import Timer, timed

__all__ = [
    # Precision
    "DEFAULT_ZERO_THRESHOLD",
    "EPSILON_64",
    "round_off_to_zero",
    "resolve_zero_threshold",
    "round_row_to_zero",
    # Timing
    "Timer",
    "timed",
]
