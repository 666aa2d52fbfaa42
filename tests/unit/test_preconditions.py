import pytest

from iterassert import PreconditionViolationError
from iterassert.preconditions import condition, not_null


class TestNotNull:

    def test_returns_object(self):
        obj = object()
        assert not_null(obj, "obj must not be null") is obj

    def test_falsy_values_are_not_null(self):
        assert not_null(0, "m") == 0
        assert not_null([], "m") == []

    def test_none_raises_with_literal_message(self):
        with pytest.raises(PreconditionViolationError) as info:
            not_null(None, "predicate must not be null")
        assert info.value.message == "predicate must not be null"

    def test_none_raises_with_supplied_message(self):
        with pytest.raises(PreconditionViolationError, match="lazy"):
            not_null(None, lambda: "lazy")

    def test_supplier_not_called_when_present(self):
        calls = []
        not_null("x", lambda: calls.append(1) or "never")
        assert calls == []


class TestCondition:

    def test_true_passes(self):
        condition(True, "m")

    def test_false_raises(self):
        with pytest.raises(PreconditionViolationError, match="must hold"):
            condition(False, "must hold")

    def test_falsy_raises_with_supplier(self):
        with pytest.raises(PreconditionViolationError, match="lazy"):
            condition(0, lambda: "lazy")
