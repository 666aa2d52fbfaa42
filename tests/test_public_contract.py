# tests/test_public_contract.py
# Contract tests for the public iterassert surface.
#
# CONSTRAINTS:
#   Only public imports.
#   Message strings asserted byte-for-byte.
#
# Standard import pattern:
#   from iterassert import assert_iterable_matches

import operator

import pytest

import iterassert
from iterassert import (
    AssertionFailedError,
    PreconditionViolationError,
    assert_iterable_matches,
)


# ---------------------------------------------------------------------------
# CONTRACT: public names
# ---------------------------------------------------------------------------

class TestPublicSurface:

    def test_all_names_importable(self) -> None:
        for name in iterassert.__all__:
            assert hasattr(iterassert, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(iterassert.__version__, str)


# ---------------------------------------------------------------------------
# CONTRACT: three call forms
# ---------------------------------------------------------------------------

class TestCallForms:

    def test_without_message(self) -> None:
        assert assert_iterable_matches(operator.eq, [1], [1]) is None

    def test_with_literal_message(self) -> None:
        assert assert_iterable_matches(operator.eq, [1], [1], "message") is None

    def test_with_message_supplier(self) -> None:
        assert assert_iterable_matches(operator.eq, [1], [1], lambda: "message") is None


# ---------------------------------------------------------------------------
# CONTRACT: reference scenarios
# ---------------------------------------------------------------------------

class TestScenarios:

    def test_list_against_matching_set(self) -> None:
        assert_iterable_matches(operator.eq, ["x"], {"x"})

    @pytest.mark.parametrize(
        "expected, actual, message",
        [
            (["x"], {"y"}, "iterable contents do not match at index 0, expected: <x> but was: <y>"),
            (["x"], [], "iterable lengths differ, expected: <1> but was: <0>"),
            ([], ["y"], "iterable lengths differ, expected: <0> but was: <1>"),
            (None, ["y"], "expected iterable was <null>"),
            (["x"], None, "actual iterable was <null>"),
        ],
    )
    def test_failure_messages(self, expected, actual, message) -> None:
        with pytest.raises(AssertionFailedError) as info:
            assert_iterable_matches(operator.eq, expected, actual)
        assert str(info.value) == message

    def test_ordering_predicate(self) -> None:
        assert_iterable_matches(lambda e, a: a > e, [1, 2, 3], [2, 3, 4])

    def test_null_predicate_wins_over_mismatch(self) -> None:
        with pytest.raises(PreconditionViolationError) as info:
            assert_iterable_matches(None, ["x"], {"y"})
        assert str(info.value) == "predicate must not be null"
