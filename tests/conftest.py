import pytest

from invocator.callable import CallableRegistry
from invocator.invoker import Invoker, set_invoker
from invocator.reflector import Reflector


def strlen(value):
    return len(value)


class SomeClass:
    """Class referenced by name in static-call tests."""

    @staticmethod
    def staticSum(values):
        return sum(values)

    @classmethod
    def create(cls):
        return cls()

    def greet(self, name, punctuation="!"):
        return f"Hello, {name}{punctuation}"


@pytest.fixture
def registry():
    reg = CallableRegistry()
    reg.register_function("strlen", strlen)
    reg.register_class("SomeClass", SomeClass)
    return reg


@pytest.fixture
def invoker(registry):
    return Invoker(reflector=Reflector(registry))


@pytest.fixture
def some_class():
    return SomeClass


@pytest.fixture(autouse=True)
def reset_default_invoker():
    # Module-level default invoker must not leak between tests
    set_invoker(None)
    yield
    set_invoker(None)
