"""
CanonicalCallable - the three shapes every callable is normalized into.

- DirectUnit: a routine that can be called as is (function, lambda, builtin,
  bound method, functools.partial)
- MethodRef: a (target, method_name) pair; target is an instance (bound call),
  a class, or a class name (static call)
- NamedFunction: the name of a free function, resolved through the registry

Rule: names are never empty once canonicalized.
"""

from dataclasses import dataclass
from typing import Any, Callable, Union

# Method name used when an invocable object is the target itself
INVOKE_METHOD = "__call__"

# Separator of the "Class::method" string form
METHOD_SEPARATOR = "::"


@dataclass(frozen=True)
class DirectUnit:
    """A directly invokable routine."""
    fn: Callable[..., Any]

    def __str__(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))


@dataclass(frozen=True)
class MethodRef:
    """
    A method on a target.

    Attributes:
        target: Object instance, class, or class name
        method_name: Name of the method to call on the target
    """
    target: Any
    method_name: str

    def __post_init__(self):
        if not self.method_name:
            raise ValueError("MethodRef requires a non-empty method name")
        if isinstance(self.target, str) and not self.target:
            raise ValueError("MethodRef requires a non-empty target name")

    @property
    def is_static(self) -> bool:
        """True when the target is a class or class name rather than an instance."""
        return isinstance(self.target, (str, type))

    def __str__(self) -> str:
        if isinstance(self.target, str):
            owner = self.target
        elif isinstance(self.target, type):
            owner = self.target.__qualname__
        else:
            owner = type(self.target).__qualname__
        return f"{owner}{METHOD_SEPARATOR}{self.method_name}"


@dataclass(frozen=True)
class NamedFunction:
    """A free function referenced by name."""
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("NamedFunction requires a non-empty name")

    def __str__(self) -> str:
        return self.name


CanonicalCallable = Union[DirectUnit, MethodRef, NamedFunction]
