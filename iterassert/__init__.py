# iterassert/__init__.py
# Order-preserving, element-wise iterable assertions.
#
# Canonical import:
#   from iterassert import assert_iterable_matches, AssertionFailedError

from .constants import VERSION
from .exceptions import (
    AssertionFailedError,
    PreconditionViolationError,
)
from .failure_builder import AssertionFailureBuilder, assertion_failure
from .iterable_matches import assert_iterable_matches
from .logging_layer import Event, EventFilter, EventLog, LoggingError

__version__ = VERSION

__all__ = [
    # Exceptions
    "AssertionFailedError",
    "PreconditionViolationError",
    "LoggingError",
    # Assertion
    "assert_iterable_matches",
    # Failure reporting
    "AssertionFailureBuilder",
    "assertion_failure",
    # Event log
    "Event",
    "EventFilter",
    "EventLog",
]
