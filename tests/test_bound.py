"""Tests for BoundCallback."""

import pytest

from invocator.bound import BoundCallback
from invocator.callable import DirectUnit, MethodRef, NamedFunction
from invocator.errors import (
    InvalidCallbackError,
    InvalidInputError,
    InvocationError,
    OutOfRangeError,
    ReflectionError,
    ValidationFailedError,
)


def subtract(a, b):
    return a - b


class TestCallbackProperty:
    """The callback is canonicalized when it is set."""

    def test_name_is_canonicalized(self, invoker):
        bound = BoundCallback("strlen", invoker=invoker)
        assert bound.callback == NamedFunction("strlen")

    def test_pair_is_canonicalized(self, invoker):
        bound = BoundCallback("SomeClass::staticSum", invoker=invoker)
        assert bound.callback == MethodRef("SomeClass", "staticSum")

    def test_function_is_canonicalized(self, invoker):
        bound = BoundCallback(subtract, invoker=invoker)
        assert bound.callback == DirectUnit(subtract)

    def test_unset_by_default(self, invoker):
        assert BoundCallback(invoker=invoker).callback is None

    def test_set_none_clears(self, invoker):
        bound = BoundCallback("strlen", invoker=invoker)
        bound.callback = None
        assert bound.callback is None

    def test_invalid_callback_rejected_on_set(self, invoker):
        bound = BoundCallback(invoker=invoker)
        with pytest.raises(InvalidInputError):
            bound.callback = 42
        assert bound.callback is None

    def test_malformed_pair_rejected_on_set(self, invoker):
        with pytest.raises(OutOfRangeError):
            BoundCallback(["Foo"], invoker=invoker)


class TestArgsProperty:
    """Stored arguments are coerced into a list."""

    def test_tuple_is_coerced(self, invoker):
        bound = BoundCallback(subtract, (10,), invoker=invoker)
        assert bound.args == [10]

    def test_getter_returns_copy(self, invoker):
        bound = BoundCallback(subtract, [10], invoker=invoker)
        bound.args.append(99)
        assert bound.args == [10]

    def test_not_list_like_rejected(self, invoker):
        bound = BoundCallback(subtract, invoker=invoker)
        with pytest.raises(InvalidInputError):
            bound.args = 10

    def test_set_rejected(self, invoker):
        bound = BoundCallback(subtract, invoker=invoker)
        with pytest.raises(InvalidInputError):
            bound.args = {1, 2}


class TestInvoke:
    """Invocation with stored and extra arguments."""

    def test_stored_then_extra(self, invoker):
        bound = BoundCallback(subtract, [10], invoker=invoker)
        assert bound.invoke([3]) == 7

    def test_stored_only(self, invoker):
        bound = BoundCallback("strlen", ["hello"], invoker=invoker)
        assert bound.invoke() == 5

    def test_extra_only(self, invoker):
        bound = BoundCallback("SomeClass::staticSum", invoker=invoker)
        assert bound.invoke([[1, 2, 3]]) == 6

    def test_repeat_invocations_do_not_accumulate(self, invoker):
        bound = BoundCallback(subtract, [10], invoker=invoker)
        assert bound.invoke([1]) == 9
        assert bound.invoke([2]) == 8
        assert bound.args == [10]

    def test_default_invoker(self):
        bound = BoundCallback("len")
        assert bound.invoke([[1, 2]]) == 2

    def test_extra_not_list_like(self, invoker):
        bound = BoundCallback("strlen", invoker=invoker)
        with pytest.raises(InvalidInputError):
            bound.invoke("hello")


class TestInvokeFailures:
    """How failures are reported to the holder."""

    def test_no_callback(self, invoker):
        bound = BoundCallback(invoker=invoker)
        with pytest.raises(InvalidCallbackError, match="No callback"):
            bound.invoke([1])

    def test_validation_failure_is_invalid_callback(self, invoker):
        bound = BoundCallback("strlen", invoker=invoker)
        with pytest.raises(InvalidCallbackError) as exc_info:
            bound.invoke([])
        error = exc_info.value
        assert isinstance(error, OutOfRangeError)
        assert isinstance(error.cause, ValidationFailedError)
        assert error.argument == NamedFunction("strlen")

    def test_invocation_error_passes_through(self, invoker):
        def explode():
            raise RuntimeError("boom")

        bound = BoundCallback(explode, invoker=invoker)
        with pytest.raises(InvocationError) as exc_info:
            bound.invoke()
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_reflection_error_passes_through(self, invoker):
        bound = BoundCallback("no_such_function", invoker=invoker)
        with pytest.raises(ReflectionError):
            bound.invoke()
