"""
Value normalization helpers.

These are the small coercions the rest of invocator leans on:
- normalize_list: any ordered, non-string iterable -> list
- normalize_string: str or an object that defines its own __str__ -> str
- count_iterable: number of elements in a sized or plain iterable
"""

import numbers
from collections.abc import Iterable, Mapping, Set, Sized
from typing import Any

from invocator import messages
from invocator.errors import InvalidInputError


def is_stringable(value: Any) -> bool:
    """
    Check whether a value has a meaningful string representation.

    Strings qualify, as do objects whose class overrides __str__. Classes,
    numbers, bytes and objects relying on the default object.__str__ do not.
    """
    if isinstance(value, str):
        return True
    if value is None or isinstance(value, (type, numbers.Number, bytes, bytearray)):
        return False
    if isinstance(value, (list, tuple, Mapping, Set)):
        return False
    return type(value).__str__ is not object.__str__


def is_list_like(value: Any) -> bool:
    """
    Check whether a value can be normalized into an ordered list.

    Sets are rejected: their iteration order is not stable across runs.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping, Set)):
        return False
    return isinstance(value, Iterable)


def normalize_string(value: Any) -> str:
    """
    Normalize a stringable value into a plain str.

    Raises:
        InvalidInputError: If the value is not stringable
    """
    if not is_stringable(value):
        raise InvalidInputError(
            messages.translate(messages.NOT_STRINGABLE), argument=value
        )
    return str(value)


def normalize_list(value: Any) -> list:
    """
    Normalize an iterable into a new list.

    Strings, bytes, mappings and sets are rejected: they are iterable, but
    never an ordered list of values.

    Raises:
        InvalidInputError: If the value is not list-like
    """
    if not is_list_like(value):
        raise InvalidInputError(
            messages.translate(messages.NOT_A_LIST), argument=value
        )
    return list(value)


def count_iterable(value: Iterable) -> int:
    """Count the elements of an iterable, using len() when available."""
    if isinstance(value, Sized):
        return len(value)
    return sum(1 for _ in value)
