"""
Tests for the Result[P] envelope and ErrorCode.

Validates:
    - ok / err construction and the is_ok / is_err discriminant
    - unwrap() and unwrap_err() on the right and wrong branch
    - Frozen immutability
    - Default factories (info, warnings)
    - has_warning() method
    - Rejection of malformed results
"""

from dataclasses import FrozenInstanceError

import pytest

from pylinsys.core.exceptions import UnwrapError
from pylinsys.core.result import ErrorCode, Result


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:
    """ok() and err() populate exactly one branch."""

    def test_ok_carries_value(self):
        result = Result.ok(42)
        assert result.value == 42
        assert result.error is None
        assert result.is_ok
        assert not result.is_err

    def test_ok_without_value(self):
        result = Result.ok()
        assert result.is_ok
        assert result.value is None

    def test_err_carries_code_and_message(self):
        result = Result.err(ErrorCode.NO_SOLUTIONS, "none")
        assert result.error is ErrorCode.NO_SOLUTIONS
        assert result.message == "none"
        assert result.value is None
        assert result.is_err

    def test_err_message_optional(self):
        result = Result.err(ErrorCode.UNKNOWN_ERROR)
        assert result.message is None

    def test_info_and_timing(self):
        result = Result.ok(
            1,
            info={"rank": 3},
            timing={"total_seconds": 0.01},
        )
        assert result.info["rank"] == 3
        assert result.timing["total_seconds"] == 0.01

    def test_info_is_copied(self):
        info = {"rank": 1}
        result = Result.ok(info=info)
        info["rank"] = 2
        assert result.info["rank"] == 1

    def test_bool_follows_discriminant(self):
        assert Result.ok(False)
        assert not Result.err(ErrorCode.INCOMPATIBLE_VECTORS)


# ═══════════════════════════════════════════════════════════════════════
# Unwrapping
# ═══════════════════════════════════════════════════════════════════════


class TestUnwrap:
    """unwrap() on the wrong branch raises UnwrapError."""

    def test_unwrap_ok(self):
        assert Result.ok("payload").unwrap() == "payload"

    def test_unwrap_err_raises(self):
        result = Result.err(ErrorCode.INFINITE_SOLUTIONS, "many")
        with pytest.raises(UnwrapError) as exc_info:
            result.unwrap()
        assert exc_info.value.error is ErrorCode.INFINITE_SOLUTIONS
        assert exc_info.value.result_message == "many"
        assert "INFINITE_SOLUTIONS" in str(exc_info.value)

    def test_unwrap_err_on_error(self):
        result = Result.err(ErrorCode.UNDERDETERMINED_SYSTEM)
        assert result.unwrap_err() is ErrorCode.UNDERDETERMINED_SYSTEM

    def test_unwrap_err_on_success_raises(self):
        with pytest.raises(UnwrapError):
            Result.ok(1).unwrap_err()


# ═══════════════════════════════════════════════════════════════════════
# Defaults and warnings
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:
    """Default values for info, timing and warnings."""

    def test_defaults(self):
        result = Result.ok()
        assert result.info == {}
        assert result.timing is None
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_list_becomes_tuple(self):
        result = Result.ok(warnings=["a", "b"])
        assert result.warnings == ("a", "b")

    def test_has_warning_substring(self):
        result = Result.ok(warnings=("zero vector in angle",))
        assert result.has_warning("zero vector")
        assert not result.has_warning("singular")


# ═══════════════════════════════════════════════════════════════════════
# Immutability and invariants
# ═══════════════════════════════════════════════════════════════════════


class TestInvariants:
    """Result is frozen and rejects inconsistent branches."""

    def test_cannot_set_value(self):
        result = Result.ok(1)
        with pytest.raises(FrozenInstanceError):
            result.value = 2

    def test_cannot_set_error(self):
        result = Result.ok(1)
        with pytest.raises(FrozenInstanceError):
            result.error = ErrorCode.UNKNOWN_ERROR

    def test_error_must_be_error_code(self):
        with pytest.raises(TypeError):
            Result(error="no_solutions")

    def test_error_with_value_rejected(self):
        with pytest.raises(ValueError):
            Result(value=1, error=ErrorCode.UNKNOWN_ERROR)


class TestErrorCode:
    """ErrorCode is the closed set of domain outcomes."""

    def test_members(self):
        assert {code.name for code in ErrorCode} == {
            "UNKNOWN_ERROR",
            "UNDERDETERMINED_SYSTEM",
            "FREE_COLUMNS_IN_RREF",
            "INFINITE_SOLUTIONS",
            "NO_SOLUTIONS",
            "INCOMPATIBLE_VECTORS",
        }
