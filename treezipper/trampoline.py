# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Run step functions in a loop instead of recursing.

A step function returns either a final result or a Continuation built
with ``bounce``.  ``trampoline`` resumes continuations until a final
result turns up, so algorithms that would recurse once per tree level
run in constant stack space however deep the tree is.
"""

from __future__ import annotations

from typing import Any, Callable

__all__ = ("Continuation", "bounce", "trampoline")


class Continuation:
    """A deferred, zero-argument computation."""

    __slots__ = ("func", "args")

    def __init__(self, func: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.func = func
        self.args = args

    def resume(self) -> Any:
        return self.func(*self.args)

    __call__ = resume

    def __repr__(self) -> str:
        return f"<Continuation {getattr(self.func, '__name__', self.func)!s}>"


def bounce(func: Callable[..., Any], *args: Any) -> Continuation:
    """Defer ``func(*args)`` to the next turn of the trampoline."""
    return Continuation(func, args)


def trampoline(initial: Any, step: Callable[[Any], Any]) -> Any:
    """Apply ``step`` to ``initial``, then to every resumed continuation.

    Returns the first value ``step`` produces that is not a Continuation.
    """
    result = step(initial)
    while isinstance(result, Continuation):
        result = step(result.resume())
    return result
