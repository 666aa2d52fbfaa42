# =============================================================================
# iterassert v1.0.0 -- ERROR TAXONOMY
# File:   iterassert/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Defines the two failure kinds raised by iterassert. They are never
# conflated: callers must be able to tell "bad usage" apart from
# "assertion failed".
#
# EXCEPTION HIERARCHY
# -------------------
#   PreconditionViolationError(Exception)    -- caller misuse (e.g. no predicate)
#   AssertionFailedError(AssertionError)     -- comparison outcome
#
# All exceptions are pure value objects: no side effects, no logging,
# no I/O. This module is a leaf dependency; it imports nothing from the
# rest of the package except the constants registry.
#
# MESSAGE CONTRACT
# ----------------
# Every message is deterministic (identical inputs -> identical string)
# and non-empty. Rendering happens in failure_builder.py; these classes
# store the already rendered message.
#
# =============================================================================

from __future__ import annotations

from typing import Any, Optional

from iterassert.constants import FAILURE_KINDS


# =============================================================================
# PRECONDITION VIOLATION
# =============================================================================

class PreconditionViolationError(Exception):
    """
    Raised when a caller violates a usage precondition.

    Distinct from AssertionFailedError: a precondition violation means the
    assertion was never evaluated.

    Attributes:
        message:  Human-readable description. Always non-empty.
    """

    def __init__(self, message: str) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "PreconditionViolationError: message must be a non-empty string"
            )
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return "PreconditionViolationError(message=" + repr(self.message) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PreconditionViolationError):
            return NotImplemented
        return self.message == other.message

    __hash__ = Exception.__hash__


# =============================================================================
# ASSERTION FAILURE
# =============================================================================

class AssertionFailedError(AssertionError):
    """
    Raised when compared values do not satisfy the assertion.

    Subclasses AssertionError so that test runners report it as a failed
    assertion rather than an error.

    Attributes:
        message:     Fully rendered message (prefix + reason + values).
        reason:      Bare reason string, or None.
        expected:    Expected value of the payload, or None.
        actual:      Actual value of the payload, or None.
        has_values:  True iff an expected/actual payload was supplied.
                     Distinguishes "no payload" from a payload of None.
        kind:        Key from FAILURE_KINDS, or None for unclassified failures.
        index:       Zero-based position of an element mismatch, or None.

    Raises:
        ValueError if message is empty or kind is not a registered kind.
    """

    def __init__(
        self,
        message:    str,
        reason:     Optional[str] = None,
        expected:   Any = None,
        actual:     Any = None,
        has_values: bool = False,
        kind:       Optional[str] = None,
        index:      Optional[int] = None,
    ) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "AssertionFailedError: message must be a non-empty string"
            )
        if kind is not None and kind not in FAILURE_KINDS:
            raise ValueError(
                "AssertionFailedError: unknown failure kind " + repr(kind)
            )
        super().__init__(message)
        self.message:    str           = message
        self.reason:     Optional[str] = reason
        self.expected:   Any           = expected
        self.actual:     Any           = actual
        self.has_values: bool          = has_values
        self.kind:       Optional[str] = kind
        self.index:      Optional[int] = index

    def __repr__(self) -> str:
        return (
            "AssertionFailedError(kind=" + repr(self.kind)
            + ", index=" + repr(self.index)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssertionFailedError):
            return NotImplemented
        return (
            self.message        == other.message
            and self.reason     == other.reason
            and self.has_values == other.has_values
            and self.expected   == other.expected
            and self.actual     == other.actual
            and self.kind       == other.kind
            and self.index      == other.index
        )

    __hash__ = AssertionError.__hash__


__all__ = [
    "PreconditionViolationError",
    "AssertionFailedError",
]
