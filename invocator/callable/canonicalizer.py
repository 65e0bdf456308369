"""
Canonicalizer - recognize supported callable shapes.

Recognition order (first match wins, already canonical values pass through):
1. Routine, partial or non-stringable callable -> DirectUnit
2. Stringable non-invocable, no "::"           -> NamedFunction
3. Stringable invocable object                 -> MethodRef(obj, "__call__")
4. "Class::method" string or 2-item list       -> MethodRef(target, method)
5. Anything else                               -> InvalidInputError

A plain function name is a string that must never be read as a
class-qualified name; the "::" separator is the only thing telling them apart,
which is why string coercion runs before pair decomposition.
"""

import functools
import inspect
import numbers
from collections.abc import Mapping, Set
from typing import Any, Callable, Optional

from invocator import messages
from invocator.callable.canonical import (
    INVOKE_METHOD,
    METHOD_SEPARATOR,
    CanonicalCallable,
    DirectUnit,
    MethodRef,
    NamedFunction,
)
from invocator.errors import InvalidInputError, OutOfRangeError
from invocator.messages import Translator
from invocator.normalize import (
    count_iterable,
    is_stringable,
    normalize_list,
    normalize_string,
)


def is_direct_unit(value: Any) -> bool:
    """
    Check whether a value can be called as is.

    Routines and partials always can. Other callables (classes, C-level
    callables such as operator.itemgetter, invocable instances) can when they
    are not stringable, since only stringable values are read as names.
    """
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return True
    return callable(value) and not is_stringable(value)


def is_invocable_object(value: Any) -> bool:
    """Check whether a value is an instance whose type defines __call__."""
    return not isinstance(value, type) and callable(value)


def is_valid_target(value: Any) -> bool:
    """Check whether a non-string value can own a method."""
    if value is None or isinstance(value, (bool, numbers.Number, bytes, bytearray)):
        return False
    return not isinstance(value, (list, tuple, Mapping, Set))


class Canonicalizer:
    """
    Turns raw callable representations into a CanonicalCallable.

    The string and list coercions are injectable so an embedding system can
    widen or narrow what counts as a name or a pair.
    """

    def __init__(
        self,
        normalize_string: Callable[[Any], str] = normalize_string,
        normalize_list: Callable[[Any], list] = normalize_list,
        translate: Optional[Translator] = None,
    ):
        self._normalize_string = normalize_string
        self._normalize_list = normalize_list
        self._translate = translate or messages.translate

    def normalize(self, raw: Any) -> CanonicalCallable:
        """
        Normalize a raw callable.

        Args:
            raw: Function, function name, "Class::method" string,
                 [target, method] pair, or stringable invocable object

        Returns:
            DirectUnit, MethodRef or NamedFunction

        Raises:
            InvalidInputError: If raw matches none of the supported shapes
            OutOfRangeError: If raw looks like a method pair but breaks its constraints
        """
        if isinstance(raw, (DirectUnit, MethodRef, NamedFunction)):
            return raw

        if is_direct_unit(raw):
            return DirectUnit(raw)

        invocable = is_invocable_object(raw)

        if not invocable:
            try:
                name = self._normalize_string(raw)
            except InvalidInputError:
                name = None
            if name is not None and METHOD_SEPARATOR not in name:
                if not name:
                    raise OutOfRangeError(
                        self._translate(messages.EMPTY_FUNCTION_NAME), argument=raw
                    )
                return NamedFunction(name)

        if invocable and is_stringable(raw):
            return MethodRef(raw, INVOKE_METHOD)

        try:
            target, method_name = self.normalize_method_callable(raw)
        except InvalidInputError as e:
            raise InvalidInputError(
                self._translate(messages.NOT_CALLABLE), cause=e, argument=raw
            ) from e
        return MethodRef(target, method_name)

    def normalize_method_callable(self, raw: Any) -> tuple[Any, str]:
        """
        Normalize a "Class::method" string or a [target, method] pair.

        Returns:
            (target, method_name) where target is a non-empty class name or
            a target object

        Raises:
            InvalidInputError: If raw is neither stringable nor list-like
            OutOfRangeError: If the pair has the wrong size, target or method name
        """
        try:
            parts: Any = self._normalize_string(raw).split(METHOD_SEPARATOR)
        except InvalidInputError:
            parts = raw

        parts = self._normalize_list(parts)

        count = count_iterable(parts)
        if count < 2:
            raise OutOfRangeError(
                self._translate(messages.TOO_FEW_PARTS, {"count": count}),
                argument=raw,
            )
        if count > 2:
            raise OutOfRangeError(
                self._translate(messages.TOO_MANY_PARTS, {"count": count}),
                argument=raw,
            )

        target, method = parts
        if isinstance(target, str):
            if not target:
                raise OutOfRangeError(
                    self._translate(messages.INVALID_TARGET), argument=raw
                )
        elif not is_valid_target(target):
            raise OutOfRangeError(
                self._translate(messages.INVALID_TARGET), argument=raw
            )

        try:
            method_name = self._normalize_string(method)
        except InvalidInputError as e:
            raise OutOfRangeError(
                self._translate(messages.INVALID_METHOD_NAME), cause=e, argument=raw
            ) from e
        if not method_name:
            raise OutOfRangeError(
                self._translate(messages.INVALID_METHOD_NAME), argument=raw
            )

        return target, method_name
