# iterassert/failure_builder.py
# AssertionFailureBuilder -- constructs and raises AssertionFailedError.
#
# Message layout:
#   [<message> ==> ]<reason>[, expected: <E> but was: <A>]
#
# The message context (literal, zero-argument callable, or None) is only
# resolved in build(). A callable context is never evaluated for a passing
# assertion.
#
# Standard import pattern:
#   from iterassert.failure_builder import assertion_failure
#
#   (
#       assertion_failure()
#           .message(message_or_supplier)
#           .reason("iterable lengths differ")
#           .expected(3)
#           .actual(2)
#           .build_and_raise()
#   )

from typing import Any, Callable, Dict, NoReturn, Optional, Union

from iterassert.constants import (
    EVENT_MATCH_FAILED,
    MESSAGE_SEPARATOR,
    VALUES_SEPARATOR,
)
from iterassert.exceptions import AssertionFailedError
from iterassert.logging_layer import EventLog, utc_now
from iterassert.preconditions import condition

MessageContext = Union[None, str, Callable[[], Any]]


def _resolve_message(message: MessageContext) -> Optional[str]:
    if message is None:
        return None
    if callable(message):
        resolved = message()
        return None if resolved is None else str(resolved)
    return str(message)


def _build_prefix(message: Optional[str]) -> str:
    if message is not None and message.strip():
        return message + MESSAGE_SEPARATOR
    return ""


def _to_string(value: Any) -> str:
    """
    str(value), falling back to the default object representation when
    the value's own __str__ raises.
    """
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _format_class_and_value(value: Any, value_string: str) -> str:
    class_name = type(value).__qualname__
    if value is None:
        return class_name + "<" + value_string + ">"
    return class_name + "@" + format(id(value), "x") + "<" + value_string + ">"


def format_values(expected: Any, actual: Any) -> str:
    """
    Render an expected/actual pair.

    When both sides render to the same string the values are qualified with
    their type name and identity so that the message still shows a difference.
    """
    expected_string = _to_string(expected)
    actual_string = _to_string(actual)
    if expected_string == actual_string:
        return (
            "expected: " + _format_class_and_value(expected, expected_string)
            + " but was: " + _format_class_and_value(actual, actual_string)
        )
    return "expected: <" + expected_string + "> but was: <" + actual_string + ">"


class AssertionFailureBuilder:
    """
    Fluent builder for AssertionFailedError.

    Setting either expected() or actual() marks the failure as carrying a
    value payload; the payload is then rendered into the message.
    """

    def __init__(self) -> None:
        self._message: MessageContext = None
        self._reason: Optional[str] = None
        self._has_values: bool = False
        self._expected: Any = None
        self._actual: Any = None
        self._kind: Optional[str] = None
        self._index: Optional[int] = None
        self._event_log: Optional[EventLog] = None

    def message(self, message: MessageContext) -> "AssertionFailureBuilder":
        self._message = message
        return self

    def reason(self, reason: str) -> "AssertionFailureBuilder":
        self._reason = reason
        return self

    def expected(self, expected: Any) -> "AssertionFailureBuilder":
        self._has_values = True
        self._expected = expected
        return self

    def actual(self, actual: Any) -> "AssertionFailureBuilder":
        self._has_values = True
        self._actual = actual
        return self

    def kind(self, kind: str) -> "AssertionFailureBuilder":
        self._kind = kind
        return self

    def index(self, index: int) -> "AssertionFailureBuilder":
        condition(
            isinstance(index, int) and not isinstance(index, bool) and index >= 0,
            lambda: "index must be a non-negative int; got: " + repr(index),
        )
        self._index = index
        return self

    def event_log(self, event_log: Optional[EventLog]) -> "AssertionFailureBuilder":
        self._event_log = event_log
        return self

    def build(self) -> AssertionFailedError:
        """Render the message and return (not raise) the failure."""
        reason = self._reason
        if self._has_values:
            values = format_values(self._expected, self._actual)
            reason = values if reason is None else reason + VALUES_SEPARATOR + values

        message = _resolve_message(self._message)
        if reason is not None:
            message = _build_prefix(message) + reason

        return AssertionFailedError(
            message=message if message else "assertion failed",
            reason=self._reason,
            expected=self._expected,
            actual=self._actual,
            has_values=self._has_values,
            kind=self._kind,
            index=self._index,
        )

    def build_and_raise(self) -> NoReturn:
        """Build the failure, record it on the event log if one is set, raise it."""
        failure = self.build()
        if self._event_log is not None:
            self._event_log.log_event(EVENT_MATCH_FAILED, self._event_data(), utc_now())
        raise failure

    def _event_data(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind":   self._kind,
            "reason": self._reason,
            "index":  self._index,
        }
        if self._kind == "LENGTH_MISMATCH":
            data["expected_length"] = self._expected
            data["actual_length"] = self._actual
        return data


def assertion_failure() -> AssertionFailureBuilder:
    return AssertionFailureBuilder()
