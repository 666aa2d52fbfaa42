import pytest

from iterassert import EventLog


class OnePass:
    """
    Iterable that can be iterated exactly once and records every element
    handed out. A second iter() call fails the test.
    """

    def __init__(self, elements):
        self._elements = list(elements)
        self._iterated = False
        self.pulled = []

    def __iter__(self):
        assert not self._iterated, "iterable was iterated more than once"
        self._iterated = True
        return self._generate()

    def _generate(self):
        for element in self._elements:
            self.pulled.append(element)
            yield element


class RecordingPredicate:
    """Wraps a predicate and records every (expected, actual) call."""

    def __init__(self, predicate):
        self._predicate = predicate
        self.calls = []

    def __call__(self, expected, actual):
        self.calls.append((expected, actual))
        return self._predicate(expected, actual)


@pytest.fixture
def event_log() -> EventLog:
    """Fresh, empty EventLog."""
    return EventLog()


@pytest.fixture
def one_pass():
    """Factory for single-use iterables."""
    return OnePass


@pytest.fixture
def recording():
    """Factory for call-recording predicates."""
    return RecordingPredicate
