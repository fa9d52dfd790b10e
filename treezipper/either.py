# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""A two-variant result type for operations that may not be possible.

A ``Right`` carries the result of an operation that succeeded, a
``Left`` carries the reason why it did not.  ``either`` is the only
way to unwrap a value without knowing which variant it is; the
variant-specific accessors raise UnsupportedOperation when used on the
other variant.
"""

from __future__ import annotations

from typing import Any, Callable

from treezipper.exceptions import UnsupportedOperation

__all__ = ("Either", "Left", "Right")


class Either:
    """Base class of Left and Right, not meant to be instantiated."""

    __slots__ = ("_payload",)

    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        raise UnsupportedOperation(operation="value", parameter=self._payload)

    @property
    def error(self) -> Any:
        raise UnsupportedOperation(operation="error", parameter=self._payload)

    def either(
        self, on_success: Callable[[Any], Any], on_failure: Callable[[Any], Any]
    ) -> Any:
        """Call exactly one of the handlers with the payload and return its result."""
        raise NotImplementedError

    def map(self, fn: Callable[[Any], Any]) -> Either:
        """Apply ``fn`` to the payload of a Right, leave a Left untouched."""
        return self.either(lambda value: Right(fn(value)), lambda _: self)

    def flat_map(self, fn: Callable[[Any], Either]) -> Either:
        """Chain an Either-returning ``fn`` onto a Right.

        >>> zipper.safe_down().flat_map(Zipper.safe_right)
        """
        return self.either(fn, lambda _: self)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"


class Right(Either):
    """The operation succeeded, ``value`` holds its result."""

    __slots__ = ()

    def is_right(self) -> bool:
        return True

    @property
    def value(self) -> Any:
        return self._payload

    def either(self, on_success, on_failure):
        return on_success(self._payload)


class Left(Either):
    """The operation was not possible, ``error`` says why."""

    __slots__ = ()

    def is_left(self) -> bool:
        return True

    @property
    def error(self) -> Any:
        return self._payload

    def either(self, on_success, on_failure):
        return on_failure(self._payload)
