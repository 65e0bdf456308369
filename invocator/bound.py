"""
BoundCallback - a callable paired with stored arguments.

The callback is canonicalized when it is set, and the stored arguments are
coerced into a list when they are set, so both are known-good by the time
invoke() runs. From the holder's point of view any remaining input or
validation failure therefore means the callback itself is wrong, and it is
reported as InvalidCallbackError.
"""

from typing import Any, Optional

from invocator import messages
from invocator.callable.canonical import CanonicalCallable
from invocator.errors import InvalidCallbackError, InvalidInputError, ValidationFailedError
from invocator.invoker import Invoker, get_invoker
from invocator.normalize import is_list_like, normalize_list


class BoundCallback:
    """
    Holder for one canonical callable and its stored arguments.

    Arguments given to invoke() are appended after the stored ones.

    Not thread-safe: share an instance between threads only with external locking.
    """

    def __init__(
        self,
        callback: Any = None,
        args: Any = (),
        invoker: Optional[Invoker] = None,
    ):
        self._invoker = invoker
        self._callback: Optional[CanonicalCallable] = None
        self._args: list = []
        self.callback = callback
        self.args = args

    @property
    def invoker(self) -> Invoker:
        return self._invoker or get_invoker()

    @property
    def callback(self) -> Optional[CanonicalCallable]:
        """The stored canonical callable, if any."""
        return self._callback

    @callback.setter
    def callback(self, value: Any) -> None:
        """
        Set the callback, canonicalizing it.

        Raises:
            InvalidInputError: If the value is not a recognized callable
            OutOfRangeError: If the value is a malformed method pair
        """
        if value is None:
            self._callback = None
            return
        self._callback = self.invoker.canonicalizer.normalize(value)

    @property
    def args(self) -> list:
        """A copy of the stored arguments."""
        return list(self._args)

    @args.setter
    def args(self, value: Any) -> None:
        """
        Set the stored arguments.

        Raises:
            InvalidInputError: If the value is not list-like
        """
        self._args = normalize_list(value)

    def invoke(self, args: Any = ()) -> Any:
        """
        Invoke the callback with stored arguments followed by `args`.

        Raises:
            InvalidInputError: If args is not list-like
            InvalidCallbackError: If no callback is set, or it rejects its arguments
            ReflectionError: If the callback cannot be located
            InvocationError: If the callback raised
        """
        if not is_list_like(args):
            raise InvalidInputError(
                messages.translate(messages.INVALID_ARGS), argument=args
            )
        extra = normalize_list(args)

        callback = self._callback
        if callback is None:
            raise InvalidCallbackError(
                messages.translate(messages.NO_CALLBACK), argument=None
            )

        try:
            return self.invoker.invoke(callback, self._args + extra)
        except (InvalidInputError, ValidationFailedError) as e:
            raise InvalidCallbackError(
                messages.translate(messages.INVALID_CALLBACK),
                cause=e,
                argument=callback,
            ) from e
