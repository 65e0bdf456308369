"""
Reflector - describe the positional parameters of a canonical callable.

Python parameter kinds map onto ParameterDescriptors as:
- POSITIONAL_ONLY / POSITIONAL_OR_KEYWORD -> descriptor, required when no default
- VAR_POSITIONAL (*args)                   -> trailing variadic descriptor
- KEYWORD_ONLY with a default, VAR_KEYWORD -> omitted (outside the positional model)
- KEYWORD_ONLY without a default           -> ReflectionError (never satisfiable)

Callables without a retrievable signature (some C-level callables and
builtin classes) are described as a single variadic parameter: their arity is
unknown, so the argument list is passed through and the callable itself
decides.

Reflection is introspection, not invocation: methods are located with
inspect.getattr_static so properties are never evaluated while looking.
"""

import inspect
import logging
from typing import Any, Callable, Optional

from invocator.callable.canonical import (
    CanonicalCallable,
    DirectUnit,
    MethodRef,
    NamedFunction,
)
from invocator.callable.registry import CallableRegistry
from invocator.errors import ReflectionError
from invocator.schemas import ParameterDescriptor, check_parameter_order

logger = logging.getLogger(__name__)

# Description of a callable whose signature cannot be retrieved
UNKNOWN_ARITY = ParameterDescriptor(position=0, name="args", required=False, variadic=True)


def _is_method_like(member: Any) -> bool:
    if isinstance(member, property):
        return False
    return isinstance(member, (staticmethod, classmethod)) or callable(member)


class Reflector:
    """
    Locates canonical callables and describes their parameters.

    Name lookups go through a CallableRegistry, shared with dispatch so that
    what was described is exactly what gets called.
    """

    def __init__(self, registry: Optional[CallableRegistry] = None):
        self.registry = registry or CallableRegistry.create_default()

    def describe(self, canonical: CanonicalCallable) -> list[ParameterDescriptor]:
        """
        Describe the declared positional parameters of a callable.

        Args:
            canonical: DirectUnit, MethodRef or NamedFunction

        Returns:
            Ordered list of ParameterDescriptor

        Raises:
            ReflectionError: If the callable cannot be located or introspected
        """
        fn = self.resolve(canonical)

        try:
            signature = inspect.signature(fn)
        except ValueError as e:
            logger.debug(
                f"No signature for {canonical}, accepting any arguments: {e}",
                extra={"callable": canonical},
            )
            return [UNKNOWN_ARITY]
        except TypeError as e:
            raise ReflectionError(
                f"Cannot introspect callable: {canonical}",
                cause=e,
                callable=canonical,
            ) from e

        params = self._describe_signature(signature, canonical)
        try:
            check_parameter_order(params)
        except ValueError as e:
            raise ReflectionError(
                f"Cannot describe callable: {canonical}: {e}",
                cause=e,
                callable=canonical,
            ) from e
        return params

    def resolve(self, canonical: CanonicalCallable) -> Callable[..., Any]:
        """
        Locate the Python callable behind a canonical callable.

        Instance targets yield bound methods; class targets yield the
        attribute as seen on the class (static functions, class methods,
        or plain functions expecting the instance as first argument).

        Raises:
            ReflectionError: If the function, class or method cannot be found
        """
        if isinstance(canonical, DirectUnit):
            return canonical.fn

        if isinstance(canonical, NamedFunction):
            try:
                return self.registry.resolve_function(canonical.name)
            except KeyError as e:
                raise ReflectionError(
                    f"Function not found: {canonical.name}",
                    cause=e,
                    callable=canonical,
                ) from e

        if isinstance(canonical, MethodRef):
            return self._resolve_method(canonical)

        raise ReflectionError(
            f"Not a canonical callable: {canonical!r}", callable=canonical
        )

    def _resolve_method(self, ref: MethodRef) -> Callable[..., Any]:
        target = ref.target
        if isinstance(target, str):
            try:
                target = self.registry.resolve_class(target)
            except KeyError as e:
                raise ReflectionError(
                    f"Class not found: {ref.target}", cause=e, callable=ref
                ) from e

        try:
            member = inspect.getattr_static(target, ref.method_name)
        except AttributeError as e:
            raise ReflectionError(
                f"Method not found: {ref}", cause=e, callable=ref
            ) from e

        if not _is_method_like(member):
            raise ReflectionError(f"Not a method: {ref}", callable=ref)

        return getattr(target, ref.method_name)

    def _describe_signature(
        self, signature: inspect.Signature, canonical: CanonicalCallable
    ) -> list[ParameterDescriptor]:
        params: list[ParameterDescriptor] = []
        for param in signature.parameters.values():
            if param.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                params.append(ParameterDescriptor(
                    position=len(params),
                    name=param.name,
                    required=param.default is inspect.Parameter.empty,
                ))
            elif param.kind is inspect.Parameter.VAR_POSITIONAL:
                params.append(ParameterDescriptor(
                    position=len(params),
                    name=param.name,
                    required=False,
                    variadic=True,
                ))
            elif (
                param.kind is inspect.Parameter.KEYWORD_ONLY
                and param.default is inspect.Parameter.empty
            ):
                raise ReflectionError(
                    f"Callable {canonical} declares required keyword-only "
                    f"parameter '{param.name}', which positional arguments cannot supply",
                    callable=canonical,
                )
        return params
