# iterassert/iterable_matches.py
# assert_iterable_matches -- element-wise, order-preserving comparison of
# two iterables under a caller-supplied predicate.
#
# Outcome is implicit: the call returns normally, or raises exactly one of
#   PreconditionViolationError  -- predicate is None
#   AssertionFailedError        -- null iterable, element mismatch, or
#                                  length mismatch
#
# Each iterable is iterated once, forward only. After the lockstep walk
# ends by exhaustion, the same iterators are drained to count remaining
# elements; the predicate is never called while draining.
# Errors raised by the predicate or by the iterables propagate unchanged.

from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from iterassert.constants import (
    EVENT_MATCH_PASSED,
    REASON_ACTUAL_NULL,
    REASON_CONTENTS_MISMATCH,
    REASON_EXPECTED_NULL,
    REASON_LENGTHS_DIFFER,
    REASON_PREDICATE_NULL,
)
from iterassert.failure_builder import MessageContext, assertion_failure
from iterassert.logging_layer import EventLog, utc_now
from iterassert.preconditions import not_null

E = TypeVar("E")
A = TypeVar("A")

# Marks an exhausted iterator; never equal to any element.
_EXHAUSTED = object()


def _count_remaining(iterator: Iterator[Any]) -> int:
    count = 0
    for _ in iterator:
        count += 1
    return count


def assert_iterable_matches(
    predicate: Callable[[E, A], bool],
    expected:  Optional[Iterable[E]],
    actual:    Optional[Iterable[A]],
    message:   MessageContext = None,
    *,
    event_log: Optional[EventLog] = None,
) -> None:
    """
    Assert that expected and actual match element by element.

    predicate is called as predicate(expected_element, actual_element) for
    each position, in order, until it returns a falsy value or either
    iterable runs out. Two None iterables match; one None iterable does not.

    message is an optional literal string or zero-argument callable; it is
    passed through to the failure and only evaluated if the assertion fails.

    If event_log is given, a MATCH_PASSED or MATCH_FAILED event is recorded.

    Raises
    ------
    PreconditionViolationError : predicate is None.
    AssertionFailedError       : see module docstring.
    """
    not_null(predicate, REASON_PREDICATE_NULL)

    if expected is None and actual is None:
        _record_pass(event_log, 0)
        return
    _assert_iterables_not_null(expected, actual, message, event_log)

    expected_iterator = iter(expected)
    actual_iterator = iter(actual)

    processed = 0
    # Number of elements already pulled from expected when actual ran out.
    pending_expected = 0
    while True:
        expected_element = next(expected_iterator, _EXHAUSTED)
        if expected_element is _EXHAUSTED:
            break
        actual_element = next(actual_iterator, _EXHAUSTED)
        if actual_element is _EXHAUSTED:
            pending_expected = 1
            break

        if not predicate(expected_element, actual_element):
            _fail_iterables_not_matching(
                expected_element, actual_element, processed, message, event_log
            )

        processed += 1

    remaining_expected = pending_expected + _count_remaining(expected_iterator)
    remaining_actual = _count_remaining(actual_iterator)
    if remaining_expected or remaining_actual:
        (
            assertion_failure()
                .message(message)
                .reason(REASON_LENGTHS_DIFFER)
                .expected(processed + remaining_expected)
                .actual(processed + remaining_actual)
                .kind("LENGTH_MISMATCH")
                .event_log(event_log)
                .build_and_raise()
        )

    _record_pass(event_log, processed)


def _assert_iterables_not_null(
    expected:  Any,
    actual:    Any,
    message:   MessageContext,
    event_log: Optional[EventLog],
) -> None:
    if expected is None:
        (
            assertion_failure()
                .message(message)
                .reason(REASON_EXPECTED_NULL)
                .kind("EXPECTED_NULL")
                .event_log(event_log)
                .build_and_raise()
        )
    if actual is None:
        (
            assertion_failure()
                .message(message)
                .reason(REASON_ACTUAL_NULL)
                .kind("ACTUAL_NULL")
                .event_log(event_log)
                .build_and_raise()
        )


def _fail_iterables_not_matching(
    expected:  Any,
    actual:    Any,
    index:     int,
    message:   MessageContext,
    event_log: Optional[EventLog],
) -> None:
    (
        assertion_failure()
            .message(message)
            .reason(REASON_CONTENTS_MISMATCH + str(index))
            .expected(expected)
            .actual(actual)
            .kind("CONTENTS_MISMATCH")
            .index(index)
            .event_log(event_log)
            .build_and_raise()
    )


def _record_pass(event_log: Optional[EventLog], compared: int) -> None:
    if event_log is not None:
        event_log.log_event(EVENT_MATCH_PASSED, {"compared": compared}, utc_now())
