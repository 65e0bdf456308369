"""
Validator - check an argument list against declared parameters.

Only arity and shape are checked. Argument values are never compared with
parameter annotations.
"""

from typing import Any, Callable, Optional, Sequence

from invocator import messages
from invocator.messages import Translator
from invocator.normalize import count_iterable
from invocator.schemas import ParameterDescriptor


class Validator:
    """Produces the list of incompatibilities between args and params."""

    def __init__(
        self,
        translate: Optional[Translator] = None,
        count_iterable: Callable[[Any], int] = count_iterable,
    ):
        self._translate = translate or messages.translate
        self._count = count_iterable

    def check(
        self, args: Sequence[Any], params: Sequence[ParameterDescriptor]
    ) -> list[str]:
        """
        Compare an argument list with a parameter description.

        Args:
            args: Positional arguments about to be passed
            params: Declared parameters, in order

        Returns:
            Human-readable errors; empty when compatible
        """
        errors: list[str] = []
        arg_count = self._count(args)

        for param in params:
            if param.required and param.position >= arg_count:
                errors.append(self._translate(
                    messages.MISSING_ARGUMENT, {"position": param.position}
                ))

        param_count = len(params)
        accepts_extra = param_count > 0 and params[-1].variadic
        if arg_count > param_count and not accepts_extra:
            errors.append(self._translate(
                messages.TOO_MANY_ARGUMENTS, {"max": param_count}
            ))

        return errors
