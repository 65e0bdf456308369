"""
invocator.schemas - Data structures shared across invocator.

- ParameterDescriptor: one declared positional parameter, as produced by the
  Reflector and consumed by the Validator
"""

from .parameter import ParameterDescriptor, check_parameter_order

__all__ = [
    "ParameterDescriptor",
    "check_parameter_order",
]
