"""
Invoker - canonicalize, reflect, validate, dispatch.

This is the entry point callers use:
1. Coerce the argument list into a list
2. Canonicalize the raw callable
3. Describe its parameters
4. Validate the arguments against them
5. Dispatch, wrapping any failure raised by the callable

Error handling contract:
- InvalidInputError: the args, or the raw callable, are unusable (see .argument)
- OutOfRangeError: the raw callable is a malformed method pair
- ReflectionError: the callable cannot be found or introspected
- ValidationFailedError: the args do not fit; the callable is never dispatched
- InvocationError: the callable raised; the original is the cause

Each call is a single pass with no retry and no state kept between calls.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from invocator import messages
from invocator.callable.canonical import CanonicalCallable
from invocator.callable.canonicalizer import Canonicalizer
from invocator.callable.registry import CallableRegistry
from invocator.errors import InvalidInputError, InvocationError, ValidationFailedError
from invocator.messages import Translator
from invocator.normalize import normalize_list
from invocator.reflector import Reflector
from invocator.validator import Validator

if TYPE_CHECKING:
    from invocator.config import InvocatorConfig

logger = logging.getLogger(__name__)


class Invoker:
    """
    Invokes callables given in any supported shape.

    Usage:
        invoker = Invoker.create_default()
        invoker.registry.register_function("strlen", len)

        invoker.invoke("strlen", ["hello"])            # -> 5
        invoker.invoke("Path::cwd", [])                # static call
        invoker.invoke([obj, "method"], [1, 2])        # bound call
    """

    def __init__(
        self,
        canonicalizer: Optional[Canonicalizer] = None,
        reflector: Optional[Reflector] = None,
        validator: Optional[Validator] = None,
        normalize_list: Callable[[Any], list] = normalize_list,
        translate: Optional[Translator] = None,
    ):
        """
        Initialize the invoker.

        Args:
            canonicalizer: Recognizes raw callables (default: Canonicalizer())
            reflector: Locates and describes callables (default: Reflector())
            validator: Checks argument lists (default: Validator())
            normalize_list: Coerces the argument list
            translate: Message formatter for error text
        """
        self._translate = translate or messages.translate
        self.canonicalizer = canonicalizer or Canonicalizer(translate=self._translate)
        self.reflector = reflector or Reflector()
        self.validator = validator or Validator(translate=self._translate)
        self._normalize_list = normalize_list

    @property
    def registry(self) -> CallableRegistry:
        """The registry used to resolve function and class names."""
        return self.reflector.registry

    def invoke(self, raw_callable: Any, args: Any = ()) -> Any:
        """
        Invoke a callable with a positional argument list.

        Args:
            raw_callable: Any supported callable shape
            args: Ordered collection of positional arguments

        Returns:
            Whatever the callable returns

        Raises:
            InvalidInputError: If args is not list-like or raw_callable is unrecognized
            OutOfRangeError: If raw_callable is a malformed method pair
            ReflectionError: If the callable cannot be located or introspected
            ValidationFailedError: If args do not fit the declared parameters
            InvocationError: If the callable raised during execution
        """
        try:
            arg_list = self._normalize_list(args)
        except InvalidInputError as e:
            raise InvalidInputError(
                self._translate(messages.INVALID_ARGS), cause=e, argument=args
            ) from e

        canonical = self.canonicalizer.normalize(raw_callable)
        logger.debug(
            f"Canonicalized {raw_callable!r} as {canonical!r}",
            extra={"callable": canonical},
        )

        params = self.reflector.describe(canonical)
        errors = self.validator.check(arg_list, params)
        if errors:
            logger.debug(
                f"Validation of {canonical} failed: {errors}",
                extra={"callable": canonical},
            )
            raise ValidationFailedError(
                self._translate(messages.VALIDATION_FAILED),
                callable=canonical,
                args=arg_list,
                errors=errors,
                validator=self.validator,
            )

        return self.dispatch(canonical, arg_list)

    def dispatch(self, canonical: CanonicalCallable, args: list) -> Any:
        """
        Call an already validated canonical callable.

        Raises:
            ReflectionError: If the callable cannot be located
            InvocationError: If the callable raised
        """
        fn = self.reflector.resolve(canonical)
        logger.debug(
            f"Dispatching {canonical} with {len(args)} argument(s)",
            extra={"callable": canonical},
        )

        try:
            return fn(*args)
        except Exception as e:
            raise InvocationError(
                self._translate(messages.INVOCATION_FAILED),
                cause=e,
                callable=canonical,
                args=args,
            ) from e

    @classmethod
    def create_default(cls) -> "Invoker":
        """Create an invoker resolving builtins and import paths."""
        return cls(reflector=Reflector(CallableRegistry.create_default()))

    @classmethod
    def from_config(cls, config: "InvocatorConfig") -> "Invoker":
        """
        Create an invoker whose registry is populated from configuration.

        Raises:
            ConfigError: If a configured function or class cannot be loaded
        """
        return cls(reflector=Reflector(CallableRegistry.from_config(config)))


# Lazy-initialized default invoker
_DEFAULT_INVOKER: Optional[Invoker] = None


def get_invoker() -> Invoker:
    """Get the module-level default invoker, initializing if needed."""
    global _DEFAULT_INVOKER
    if _DEFAULT_INVOKER is None:
        _DEFAULT_INVOKER = Invoker.create_default()
    return _DEFAULT_INVOKER


def set_invoker(invoker: Optional[Invoker]) -> None:
    """
    Replace the module-level default invoker.

    Passing None resets it so the next get_invoker() builds a fresh default.
    """
    global _DEFAULT_INVOKER
    _DEFAULT_INVOKER = invoker


def invoke_callable(raw_callable: Any, args: Any = ()) -> Any:
    """Invoke a callable through the default invoker."""
    return get_invoker().invoke(raw_callable, args)
