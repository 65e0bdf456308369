"""
CallableRegistry - resolve function and class names.

Names referenced by NamedFunction and by string MethodRef targets are looked
up in this order:
1. Explicitly registered names
2. Import paths ("package.module:attr" or "package.module.attr"), when allowed
3. Builtins ("len", "sum", "str", ...)

Lookups raise KeyError; the Reflector turns that into ReflectionError. A failed
import is chained as the KeyError's __cause__.
"""

import builtins
import importlib
import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from invocator.config import InvocatorConfig

logger = logging.getLogger(__name__)


def import_object(path: str) -> Any:
    """
    Import an object from an import path.

    Accepts "package.module:attr.sub" or "package.module.attr".

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the attribute does not exist on the module
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise ImportError(f"Not an import path: {path}")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


class CallableRegistry:
    """
    Registry of named functions and classes.

    Usage:
        registry = CallableRegistry()
        registry.register_function("strlen", len)
        registry.register_class("Path", pathlib.Path)

        registry.resolve_function("strlen")      # -> len
        registry.resolve_function("os.path:join")  # -> os.path.join
        registry.resolve_class("Path")           # -> pathlib.Path
    """

    def __init__(self, allow_imports: bool = True) -> None:
        """
        Initialize an empty registry.

        Args:
            allow_imports: Resolve unregistered dotted names by importing them
        """
        self._functions: dict[str, Callable[..., Any]] = {}
        self._classes: dict[str, type] = {}
        self.allow_imports = allow_imports

    def register_function(self, name: str, fn: Callable[..., Any]) -> None:
        """Register a function under a name."""
        if not name:
            raise ValueError("Function name must not be empty")
        if not callable(fn):
            raise TypeError(f"Cannot register non-callable as function '{name}': {fn!r}")
        self._functions[name] = fn

    def register_class(self, name: str, cls: type) -> None:
        """Register a class under a name."""
        if not name:
            raise ValueError("Class name must not be empty")
        if not isinstance(cls, type):
            raise TypeError(f"Cannot register non-class as class '{name}': {cls!r}")
        self._classes[name] = cls

    def has_function(self, name: str) -> bool:
        return name in self._functions

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def list_functions(self) -> list[str]:
        return sorted(self._functions)

    def list_classes(self) -> list[str]:
        return sorted(self._classes)

    def resolve_function(self, name: str) -> Callable[..., Any]:
        """
        Resolve a function name.

        Raises:
            KeyError: If no callable is known by this name
        """
        if name in self._functions:
            return self._functions[name]

        fn = self._lookup(name, "function")
        if fn is None or isinstance(fn, type) or not callable(fn):
            raise KeyError(
                f"Unknown function: {name}. "
                f"Registered: {self.list_functions()}"
            )
        return fn

    def resolve_class(self, name: str) -> type:
        """
        Resolve a class name.

        Raises:
            KeyError: If no class is known by this name
        """
        if name in self._classes:
            return self._classes[name]

        cls = self._lookup(name, "class")
        if not isinstance(cls, type):
            raise KeyError(
                f"Unknown class: {name}. "
                f"Registered: {self.list_classes()}"
            )
        return cls

    def _lookup(self, name: str, kind: str) -> Any:
        if ("." in name or ":" in name) and self.allow_imports:
            try:
                return import_object(name)
            except Exception as e:
                # Module-level code may raise anything, not only ImportError
                logger.debug(f"Import of '{name}' failed: {type(e).__name__}: {e}")
                raise KeyError(
                    f"Unknown {kind}: {name}. Import failed: {type(e).__name__}: {e}"
                ) from e
        return getattr(builtins, name, None)

    @classmethod
    def create_default(cls) -> "CallableRegistry":
        """Create a registry that resolves builtins and import paths only."""
        return cls(allow_imports=True)

    @classmethod
    def from_config(cls, config: "InvocatorConfig") -> "CallableRegistry":
        """
        Create a registry from configuration.

        Every configured import path is loaded eagerly so that a typo fails
        at startup rather than at the first invocation.

        Raises:
            ConfigError: If a configured path cannot be imported or has the wrong kind
        """
        from invocator.config import ConfigError

        registry = cls(allow_imports=config.allow_imports)

        for name, path in config.functions.items():
            try:
                fn = import_object(path)
            except Exception as e:
                raise ConfigError(f"Function '{name}': cannot import {path}: {e}") from e
            if isinstance(fn, type) or not callable(fn):
                raise ConfigError(f"Function '{name}': {path} is not a function")
            registry.register_function(name, fn)

        for name, path in config.classes.items():
            try:
                klass = import_object(path)
            except Exception as e:
                raise ConfigError(f"Class '{name}': cannot import {path}: {e}") from e
            if not isinstance(klass, type):
                raise ConfigError(f"Class '{name}': {path} is not a class")
            registry.register_class(name, klass)

        logger.debug(
            f"Registry loaded {len(registry._functions)} function(s) "
            f"and {len(registry._classes)} class(es) from config"
        )
        return registry
