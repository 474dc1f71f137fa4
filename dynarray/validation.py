"""
Validation, Errors and Configuration for dynarray.

Reads are forgiving: any integer index is a legal read and an unset or
out-of-range slot simply yields the default value. Writes and removals
are strict: a write index must be a non-negative integer, and removal
from an empty sequence follows the configured underflow policy.

Underflow policies:
    RAISE  — raise EmptySequenceError (default)
    CLAMP  — return the default value and leave length at 0
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union


# =============================================================================
# ERRORS
# =============================================================================

class SequenceError(Exception):
    """Base error for container operations."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"[{operation}] {reason}")


class EmptySequenceError(SequenceError, IndexError):
    """Raised when an operation needs at least one element and there is none."""


class InvalidIndexError(SequenceError, IndexError):
    """Raised when an index is not usable for the requested operation."""


class ConfigurationError(ValueError):
    """Raised for an unknown or malformed configuration value."""


# =============================================================================
# CONFIGURATION
# =============================================================================

class UnderflowPolicy(Enum):
    """What pop_back / pop_front do on an empty sequence."""
    RAISE = "raise"
    CLAMP = "clamp"


DEFAULT_UNDERFLOW_POLICY = UnderflowPolicy.RAISE


def resolve_underflow_policy(
    policy: Optional[Union[UnderflowPolicy, str]],
) -> UnderflowPolicy:
    """
    Normalize a policy given as enum, string value, or None.

    Raises:
        ConfigurationError: If the value names no known policy
    """
    if policy is None:
        return DEFAULT_UNDERFLOW_POLICY
    if isinstance(policy, UnderflowPolicy):
        return policy
    try:
        return UnderflowPolicy(str(policy).strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in UnderflowPolicy)
        raise ConfigurationError(
            f"Unknown underflow policy {policy!r}, expected one of: {choices}"
        ) from None


# =============================================================================
# INDEX CHECKS
# =============================================================================

def _is_integer(index: Any) -> bool:
    # bool is an int subclass but never a sensible position
    return isinstance(index, int) and not isinstance(index, bool)


def validate_read_index(index: Any, operation: str = "at") -> int:
    """
    Check that index is an integer. Any integer value is accepted.

    Raises:
        InvalidIndexError: If index is not an integer
    """
    if not _is_integer(index):
        raise InvalidIndexError(
            operation,
            f"index must be an integer, got {type(index).__name__}",
        )
    return index


def validate_write_index(index: Any, operation: str = "set_at") -> int:
    """
    Check that index is a non-negative integer.

    Raises:
        InvalidIndexError: If index is not an integer or is negative
    """
    validate_read_index(index, operation)
    if index < 0:
        raise InvalidIndexError(
            operation,
            f"index must be non-negative, got {index}",
        )
    return index


def in_range(index: int, length: int) -> bool:
    """True if index addresses a logical slot of a sequence of this length."""
    return 0 <= index < length
