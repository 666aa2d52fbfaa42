# iterassert/preconditions.py
# Precondition checks for caller arguments.
#
# Violations raise PreconditionViolationError, never AssertionFailedError.
# Messages may be literal strings or zero-argument callables; a callable is
# only evaluated when the check fails.

from typing import Any, Callable, TypeVar, Union

from iterassert.exceptions import PreconditionViolationError

T = TypeVar("T")

MessageOrSupplier = Union[str, Callable[[], str]]


def _resolve(message: MessageOrSupplier) -> str:
    if callable(message):
        return message()
    return message


def not_null(obj: T, message: MessageOrSupplier) -> T:
    """
    Return obj unchanged if it is not None.

    Raises PreconditionViolationError carrying message otherwise.
    """
    if obj is None:
        raise PreconditionViolationError(_resolve(message))
    return obj


def condition(predicate: Any, message: MessageOrSupplier) -> None:
    """Raise PreconditionViolationError if predicate is falsy."""
    if not predicate:
        raise PreconditionViolationError(_resolve(message))
