"""
Error classes for invocator.

These error types keep the origin of a failure distinguishable:
- InvalidInputError: A caller-supplied value (callable or argument list) is unusable
- OutOfRangeError: A plausible value fails a domain constraint (empty method name, too few parts)
- InvalidCallbackError: A stored callback turned out to be unusable at invocation time
- ReflectionError: The canonical callable cannot be located or introspected
- ValidationFailedError: The argument list does not fit the declared parameters
- InvocationError: The callable itself raised during dispatch

None of these are retried by invocator; retry policy belongs to the caller.

Error handling contract:
- Errors are exceptions, not values
- Every error accepts a message, an optional code and an optional cause
- The cause is chained as __cause__ so tracebacks keep the original failure
- Kind-specific context (offending argument, callable, args) is attached as attributes
"""

from typing import Any, Optional


class InvocatorError(Exception):
    """Base exception for invocator."""

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class InvalidInputError(InvocatorError, ValueError):
    """
    Invalid input - the value is structurally unusable.

    Examples:
    - 42 passed as a callable
    - A string passed as an argument list
    - An object with no string representation where a name is expected
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        argument: Any = None,
    ):
        super().__init__(message, code, cause)
        self.argument = argument


class OutOfRangeError(InvocatorError, ValueError):
    """
    Out of range - a structurally plausible value fails a domain constraint.

    Examples:
    - A one-element method pair
    - An empty method name
    - A method pair whose target is a list
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        argument: Any = None,
    ):
        super().__init__(message, code, cause)
        self.argument = argument


class InvalidCallbackError(OutOfRangeError):
    """Raised by a bound callback when its stored callable cannot be invoked."""
    pass


class ReflectionError(InvocatorError, LookupError):
    """
    Reflection failure - the callable cannot be located or introspected.

    Treated as a configuration or programmer error.
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        callable: Any = None,
    ):
        super().__init__(message, code, cause)
        self.callable = callable


class ValidationFailedError(InvocatorError):
    """
    Validation failure - the argument list is incompatible with the parameters.

    Carries the callable, the argument list and every incompatibility found,
    so callers can report precisely without re-running validation.
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        callable: Any = None,
        args: Optional[list] = None,
        errors: Optional[list[str]] = None,
        validator: Any = None,
    ):
        super().__init__(message, code, cause)
        self.callable = callable
        self.args_list = list(args) if args is not None else []
        self.errors = list(errors) if errors is not None else []
        self.validator = validator


class InvocationError(InvocatorError):
    """
    Invocation failure - the callable raised while executing.

    The original exception is always available as `cause`.
    """

    def __init__(
        self,
        message: str = "",
        code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        callable: Any = None,
        args: Optional[list] = None,
    ):
        super().__init__(message, code, cause)
        self.callable = callable
        self.args_list = list(args) if args is not None else []
