"""
invocator - Invoke callables given in any supported shape

Normalizes functions, function names, "Class::method" strings and
[target, method] pairs into one canonical form, checks argument lists
against declared parameters, and invokes them with a small error taxonomy.
"""

__version__ = "0.1.0"


__all__ = [
    "BoundCallback",
    "CallableRegistry",
    "Canonicalizer",
    "DirectUnit",
    "Invoker",
    "MethodRef",
    "NamedFunction",
    "ParameterDescriptor",
    "Reflector",
    "Validator",
    "invoke_callable",
    "load_config",
    "setup_logging",
    "setup_logging_from_config",
]

from .callable import CallableRegistry, Canonicalizer, DirectUnit, MethodRef, NamedFunction
from .schemas import ParameterDescriptor
from .reflector import Reflector
from .validator import Validator
from .invoker import Invoker, invoke_callable
from .bound import BoundCallback
from .config import load_config
from .utils import setup_logging, setup_logging_from_config
