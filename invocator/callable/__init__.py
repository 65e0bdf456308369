"""
Callable normalization module for invocator.

This module provides the layer that:
1. Recognizes the supported raw callable shapes
2. Canonicalizes them into DirectUnit, MethodRef or NamedFunction
3. Resolves function and class names through an explicit registry
"""

from invocator.callable.canonical import (
    INVOKE_METHOD,
    METHOD_SEPARATOR,
    CanonicalCallable,
    DirectUnit,
    MethodRef,
    NamedFunction,
)
from invocator.callable.canonicalizer import Canonicalizer
from invocator.callable.registry import CallableRegistry

__all__ = [
    "INVOKE_METHOD",
    "METHOD_SEPARATOR",
    "CanonicalCallable",
    "CallableRegistry",
    "Canonicalizer",
    "DirectUnit",
    "MethodRef",
    "NamedFunction",
]
