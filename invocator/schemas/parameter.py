"""
ParameterDescriptor schema - one declared positional parameter.

A described parameter list is ordered by position and obeys:
- At most one element is variadic, and it is the last one
- Required elements never follow optional ones
"""

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    A declared positional parameter.

    Attributes:
        position: Zero-based position in the positional parameter list
        name: Declared parameter name
        required: True when the parameter has no default
        variadic: True for a trailing *args parameter
    """
    position: int
    name: str
    required: bool = True
    variadic: bool = False

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(f"Parameter position must be >= 0, got {self.position}")
        if self.variadic and self.required:
            raise ValueError(f"Variadic parameter '{self.name}' cannot be required")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "position": self.position,
            "name": self.name,
            "required": self.required,
            "variadic": self.variadic,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParameterDescriptor":
        """Deserialize from dictionary."""
        return cls(
            position=data["position"],
            name=data["name"],
            required=data.get("required", True),
            variadic=data.get("variadic", False),
        )


def check_parameter_order(params: Sequence[ParameterDescriptor]) -> None:
    """
    Verify the ordering rules of a described parameter list.

    Raises:
        ValueError: If positions are not consecutive, a variadic parameter is
                    not last, or a required parameter follows an optional one
    """
    seen_optional = False
    for index, param in enumerate(params):
        if param.position != index:
            raise ValueError(
                f"Parameter '{param.name}' has position {param.position}, expected {index}"
            )
        if param.variadic and index != len(params) - 1:
            raise ValueError(f"Variadic parameter '{param.name}' must be last")
        if param.required and seen_optional:
            raise ValueError(
                f"Required parameter '{param.name}' follows an optional parameter"
            )
        if not param.required:
            seen_optional = True
