# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""One-hole contexts: everything in a tree except the zipper's focus.

A Context records the siblings around the focus, the original value of
the enclosing node and the Context of that node, so a chain of Contexts
leads back to the root without the tree needing parent pointers.  A
RootContext ends the chain.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

# The following are helper functions for working with singly-linked
# lists made with two-tuples.  The empty tuple is used to denote the
# end of a linked list.  Siblings are kept in these lists so that moving
# left or right takes constant time and shares the rest of the list.
LinkedList = tuple


def linked_list(values: Iterable[Any]) -> LinkedList:
    """Builds a new linked list of tuples out of an iterable, keeping its order."""
    tail: LinkedList = ()
    for value in reversed(tuple(values)):
        tail = (value, tail)
    return tail


def iterate(linked: LinkedList) -> Iterator[Any]:
    """Return an iterator over a linked list of tuples."""
    node = linked
    while node:
        yield node[0]
        node = node[1]


def reverse(linked: LinkedList) -> LinkedList:
    """Reverses an existing linked list of tuples."""
    result: LinkedList = ()
    for value in iterate(linked):
        result = (value, result)
    return result


def _same_value(first: Any, second: Any) -> bool:
    return first is second or first == second


def _same_linked(first: LinkedList, second: LinkedList) -> bool:
    """Compare two linked lists element by element."""
    while first and second:
        if first is second:
            return True
        if not _same_value(first[0], second[0]):
            return False
        first, second = first[1], second[1]
    return not first and not second


class Context(NamedTuple):
    """The hole left in a tree by a zipper's focus.

    Attributes:
        path (Context, RootContext): The Context of the enclosing node.
        parent_node: The original, unedited value of the enclosing node.
        left (linked list): Siblings to the left of the focus, nearest first.
        right (linked list): Siblings to the right of the focus, nearest first.
        changed (bool): Whether this position was edited.
    """

    path: Any
    parent_node: Any
    left: LinkedList
    right: LinkedList
    changed: bool

    def is_root(self) -> bool:
        return False

    def is_end(self) -> bool:
        return False

    @property
    def left_siblings(self) -> tuple[Any, ...]:
        """The left siblings in document order, the last one is next to the focus."""
        return tuple(iterate(reverse(self.left)))

    @property
    def right_siblings(self) -> tuple[Any, ...]:
        return tuple(iterate(self.right))

    def siblings_around(self, focus: Any) -> tuple[Any, ...]:
        """The complete child list of the enclosing node with ``focus`` in the hole."""
        return self.left_siblings + (focus,) + self.right_siblings

    def mark_changed(self) -> Context:
        if self.changed:
            return self
        return self._replace(changed=True)

    def depth(self) -> int:
        depth = 0
        context = self
        while not context.is_root():
            depth += 1
            context = context.path
        return depth

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Context, RootContext)):
            return NotImplemented
        # Level by level, without recursion.
        first, second = self, other
        while not (first.is_root() or second.is_root()):
            if first is second:
                return True
            if not (
                first.changed == second.changed
                and _same_value(first.parent_node, second.parent_node)
                and _same_linked(first.left, second.left)
                and _same_linked(first.right, second.right)
            ):
                return False
            first, second = first.path, second.path
        return type(first) is type(second)

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    def __hash__(self) -> int:
        levels = []
        context = self
        while not context.is_root():
            levels.append(
                (
                    context.parent_node,
                    context.changed,
                    tuple(iterate(context.left)),
                    tuple(iterate(context.right)),
                )
            )
            context = context.path
        return hash((tuple(levels), context))

    def __repr__(self) -> str:
        return (
            f"Context(depth={self.depth()}, left={len(self.left_siblings)}, "
            f"right={len(self.right_siblings)}, changed={self.changed})"
        )


class RootContext:
    """Context of the root of a tree: no parent, no siblings.

    Its path is itself, so code walking the chain of Contexts stops
    here without special cases.
    """

    __slots__ = ()

    parent_node = None
    left: LinkedList = ()
    right: LinkedList = ()
    changed = False
    left_siblings: tuple[Any, ...] = ()
    right_siblings: tuple[Any, ...] = ()

    @property
    def path(self) -> RootContext:
        return self

    def is_root(self) -> bool:
        return True

    def is_end(self) -> bool:
        return False

    def mark_changed(self) -> RootContext:
        return self

    def depth(self) -> int:
        return 0

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TraversalEnd(RootContext):
    """Marks the cursor of a traversal that has visited every node."""

    __slots__ = ()

    def is_end(self) -> bool:
        return True
