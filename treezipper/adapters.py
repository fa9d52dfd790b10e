# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Ready-made adapters for zipping on plain Python containers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from treezipper.exceptions import UnsupportedOperation
from treezipper.zipper import Zipper, zip_on

__all__ = ("isa", "make_sequence", "sequence_children", "sequence_zipper")


def isa(*types: type) -> Callable[[Any], bool]:
    """Returns is_<type>(obj), a function that returns true
    when its argument is an instance of one of ``types``.
    """

    def predicate(obj: Any) -> bool:
        return isinstance(obj, types)

    predicate.__name__ = "is_{}".format("_or_".join(t.__name__ for t in types))
    return predicate


# Strings are sequences too, but they are treated as leaves.
is_sequence = isa(list, tuple)


def sequence_children(node: Any) -> tuple[Any, ...]:
    if not is_sequence(node):
        raise UnsupportedOperation(operation="children_of", parameter=node)
    return tuple(node)


def make_sequence(node: Any, children: Sequence[Any]) -> Any:
    """Build a sequence of the same type as ``node`` holding ``children``."""
    if isinstance(node, list):
        return list(children)
    if isinstance(node, tuple):
        if hasattr(node, "_make"):
            return node._make(children)
        return type(node)(children)
    raise UnsupportedOperation(operation="make_node", parameter=node)


def sequence_zipper(root: Any) -> Zipper:
    """Zip on nested lists and tuples; anything else is a leaf."""
    return zip_on(root, is_sequence, sequence_children, make_sequence)
