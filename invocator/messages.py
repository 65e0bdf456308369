"""
Human-readable message templates and translation.

Messages are only ever formatted for people; control flow never inspects
them. Templates use %-style named placeholders.
"""

from typing import Any, Callable, Mapping, Optional

Translator = Callable[[str, Optional[Mapping[str, Any]]], str]

NOT_STRINGABLE = "Value is not stringable"
NOT_A_LIST = "Value is not a valid list"
INVALID_ARGS = "Invalid argument list"
NOT_CALLABLE = "Value is not a recognized callable"
EMPTY_FUNCTION_NAME = "Function name is empty"
TOO_FEW_PARTS = "Method callable has too few parts: expected 2, got %(count)d"
TOO_MANY_PARTS = "Method callable has too many parts: expected 2, got %(count)d"
INVALID_TARGET = "Method callable has an invalid target"
INVALID_METHOD_NAME = "Method callable has an invalid method name"
MISSING_ARGUMENT = "missing required argument at position %(position)d"
TOO_MANY_ARGUMENTS = "too many arguments, expected at most %(max)d"
VALIDATION_FAILED = "Argument list is not compatible with the callable"
INVOCATION_FAILED = "There was an error during invocation"
INVALID_CALLBACK = "Invalid callback"
NO_CALLBACK = "No callback has been set"


def translate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Format a message template with its placeholder values."""
    if not params:
        return template
    return template % dict(params)
