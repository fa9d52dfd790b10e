# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""This contains an implementation of a zipper for arbitrary trees.

A zipper is a data structure for traversing and editing immutable
recursive data types that can act as a doubly-linked structure without
actual double links.
http://blog.ezyang.com/2010/04/you-could-have-invented-zippers/ has a
brief introduction to zippers as a whole.  This implementation is
based on the Clojure implementation,
https://github.com/clojure/clojure/blob/master/src/clj/clojure/zip.clj .

The zipper knows nothing about the tree it walks.  Three functions
supplied to ``zip_on`` tell it whether a node is a branch, what a
branch's children are, and how to build a new node from an old one and
a new list of children.  Every operation returns a new zipper, and
rebuilding the tree with ``root`` only rebuilds the nodes on the paths
that were edited: everything else is returned by reference.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, NamedTuple

from treezipper import decorators
from treezipper.const import Kind
from treezipper.context import Context, RootContext, linked_list
from treezipper.either import Either, Left, Right
from treezipper.exceptions import UnsupportedOperation
from treezipper.trampoline import bounce, trampoline

__all__ = ("Adapter", "Zipper", "ZipperError", "zip_on")

logger = logging.getLogger(__name__)


class Adapter(NamedTuple):
    """The functions that let a zipper work on one kind of tree."""

    is_branch: Callable[[Any], bool]
    children_of: Callable[[Any], Sequence[Any]]
    make_node: Callable[[Any, Sequence[Any]], Any]


class ZipperError(NamedTuple):
    """Why a move was impossible, and where the zipper was when it was tried."""

    kind: Kind
    location: Zipper


def zip_on(
    root: Any,
    is_branch: Callable[[Any], bool],
    children_of: Callable[[Any], Sequence[Any]],
    make_node: Callable[[Any, Sequence[Any]], Any],
) -> Zipper:
    """Make a zipper focused on ``root``.

    Arguments:
        root: The tree to walk.
        is_branch: Returns whether a node can have children.
        children_of: Returns the children of a branch, in order.
        make_node: Called with an original node and a new sequence of
            children, returns the node replacing it.  It must not mutate
            the original node.
    """
    adapter = Adapter(is_branch, children_of, make_node)
    for name, function in zip(Adapter._fields, adapter):
        if not callable(function):
            raise UnsupportedOperation(operation=name, parameter=function)
    return Zipper(root, RootContext(), adapter)


class Zipper:
    """An object-oriented zipper with methods instead of functions.

    The operations that can fail come in pairs.  ``safe_down``,
    ``safe_up`` and the other ``safe_`` methods return a Right holding
    the new zipper or a Left holding a ZipperError.  ``down``, ``up``
    and the other unsafe versions return the new zipper or raise
    ZipperNavigationError.

    Attributes:
        value: The node at the zipper's focus.
        context: The Context describing the rest of the tree.
    """

    __slots__ = ("_value", "_context", "_adapter")

    def __init__(self, value: Any, context: Context | RootContext, adapter: Adapter):
        self._value = value
        self._context = context
        self._adapter = adapter

    @property
    def value(self) -> Any:
        return self._value

    @property
    def context(self) -> Context | RootContext:
        return self._context

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    def _move(self, value: Any, context: Context | RootContext) -> Zipper:
        return type(self)(value, context, self._adapter)

    def _fail(self, kind: Kind) -> Either:
        return Left(ZipperError(kind, self))

    # Inspection
    def branch(self) -> bool:
        """Whether the focus can have children."""
        return bool(self._adapter.is_branch(self._value))

    def children(self) -> tuple[Any, ...]:
        """The children of the focus, which must be a branch."""
        if not self.branch():
            raise UnsupportedOperation(operation="children", parameter=self._value)
        return tuple(self._adapter.children_of(self._value))

    def _current_children(self) -> tuple[Any, ...]:
        return self.children() if self.branch() else ()

    def is_root(self) -> bool:
        return self._context.is_root()

    def has_left(self) -> bool:
        return bool(self._context.left)

    def has_right(self) -> bool:
        return bool(self._context.right)

    def depth(self) -> int:
        """Number of ancestors of the focus."""
        return self._context.depth()

    # Traversal
    def safe_down(self) -> Either:
        """Go to the leftmost child of the focus.

        This takes time linear in the number of children, which the
        adapter has to produce anyway.
        """
        if self.branch():
            children = self.children()
            if children:
                context = Context(
                    path=self._context,
                    parent_node=self._value,
                    left=(),
                    right=linked_list(children[1:]),
                    changed=False,
                )
                return Right(self._move(children[0], context))
        return self._fail(Kind.DOWN_AT_LEAF)

    def safe_up(self) -> Either:
        """Go to the parent of the focus.

        This takes constant time if the focus hasn't been edited.
        Otherwise the parent is rebuilt from its original value and its
        current children, which takes time linear in the number of
        siblings, and the parent's own position is marked as edited.
        """
        context = self._context
        if context.is_root():
            return self._fail(Kind.UP_AT_ROOT)
        if context.changed:
            parent = self._adapter.make_node(
                context.parent_node, context.siblings_around(self._value)
            )
            return Right(self._move(parent, context.path.mark_changed()))
        return Right(self._move(context.parent_node, context.path))

    def safe_left(self) -> Either:
        """Go to the sibling directly to the left of the focus.

        This takes constant time."""
        context = self._context
        if context.is_root():
            return self._fail(Kind.LEFT_AT_ROOT)
        if not context.left:
            return self._fail(Kind.LEFT_AT_LEFTMOST)
        focus, left = context.left
        return Right(
            self._move(focus, context._replace(left=left, right=(self._value, context.right)))
        )

    def safe_right(self) -> Either:
        """Go to the sibling directly to the right of the focus.

        This takes constant time."""
        context = self._context
        if context.is_root():
            return self._fail(Kind.RIGHT_AT_ROOT)
        if not context.right:
            return self._fail(Kind.RIGHT_AT_RIGHTMOST)
        focus, right = context.right
        return Right(
            self._move(focus, context._replace(left=(self._value, context.left), right=right))
        )

    @decorators.raise_on_left
    def down(self) -> Zipper:
        return self.safe_down()

    @decorators.raise_on_left
    def up(self) -> Zipper:
        return self.safe_up()

    @decorators.raise_on_left
    def left(self) -> Zipper:
        return self.safe_left()

    @decorators.raise_on_left
    def right(self) -> Zipper:
        return self.safe_right()

    def leftmost(self) -> Zipper:
        """Go to the leftmost sibling of the focus, or stay if already there.

        This takes time linear in the number of siblings."""
        context = self._context
        if context.is_root() or not context.left:
            return self
        siblings = context.siblings_around(self._value)
        return self._move(
            siblings[0], context._replace(left=(), right=linked_list(siblings[1:]))
        )

    def rightmost(self) -> Zipper:
        """Go to the rightmost sibling of the focus, or stay if already there.

        This takes time linear in the number of siblings."""
        context = self._context
        if context.is_root() or not context.right:
            return self
        siblings = context.siblings_around(self._value)
        return self._move(
            siblings[-1],
            context._replace(left=linked_list(reversed(siblings[:-1])), right=()),
        )

    def top(self) -> Zipper:
        """Go to the root of the tree, rebuilding every edited ancestor.

        This takes time linear in the number of ancestors of the focus
        plus the siblings of every rebuilt ancestor.
        """
        if self._context.changed and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebuilding the ancestors of an edited node at depth %d", self.depth())

        def step(location):
            if location.is_root():
                return location
            return bounce(location.up)

        return trampoline(self, step)

    def root(self) -> Any:
        """Return the whole tree, including every edit made so far.

        If nothing was edited this is the very object the zipper was
        made on.
        """
        if self._context.is_root():
            return self._value
        return self.top().value

    # Editing
    def replace(self, node: Any) -> Zipper:
        """Replaces the node at the focus.

        Replacing the focus with an equal node returns this zipper, so
        the original node keeps its identity.
        """
        if node is self._value or node == self._value:
            return self
        return self._move(node, self._context.mark_changed())

    def change(self, function: Callable[..., Any], *args: Any) -> Zipper:
        """Replace the focus with ``function(focus, *args)``."""
        return self.replace(function(self._value, *args))

    def safe_insert_left(self, node: Any) -> Either:
        """Insert ``node`` as the left sibling of the focus, without moving."""
        context = self._context
        if context.is_root():
            return self._fail(Kind.LEFT_AT_ROOT)
        return Right(
            self._move(self._value, context._replace(left=(node, context.left), changed=True))
        )

    def safe_insert_right(self, node: Any) -> Either:
        """Insert ``node`` as the right sibling of the focus, without moving."""
        context = self._context
        if context.is_root():
            return self._fail(Kind.RIGHT_AT_ROOT)
        return Right(
            self._move(self._value, context._replace(right=(node, context.right), changed=True))
        )

    @decorators.raise_on_left
    def insert_left(self, node: Any) -> Zipper:
        return self.safe_insert_left(node)

    @decorators.raise_on_left
    def insert_right(self, node: Any) -> Zipper:
        return self.safe_insert_right(node)

    def insert_all(self, nodes: Iterable[Any]) -> Zipper:
        """Insert ``nodes`` before the children of the focus, without moving."""
        return self.replace(
            self._adapter.make_node(self._value, tuple(nodes) + self._current_children())
        )

    def append_all(self, nodes: Iterable[Any]) -> Zipper:
        """Insert ``nodes`` after the children of the focus, without moving."""
        return self.replace(
            self._adapter.make_node(self._value, self._current_children() + tuple(nodes))
        )

    def insert_child(self, node: Any) -> Zipper:
        """Inserts ``node`` as the leftmost child of the focus, without moving."""
        return self.insert_all((node,))

    def append_child(self, node: Any) -> Zipper:
        """Inserts ``node`` as the rightmost child of the focus, without moving."""
        return self.append_all((node,))

    def safe_remove(self) -> Either:
        """Remove the focus.

        The new focus is the left sibling of the removed node.  If there
        is none, it is the parent, rebuilt with the remaining siblings as
        its children.
        """
        context = self._context
        if context.is_root():
            return self._fail(Kind.REMOVE_AT_ROOT)
        if context.left:
            focus, left = context.left
            return Right(self._move(focus, context._replace(left=left, changed=True)))
        parent = self._adapter.make_node(context.parent_node, context.right_siblings)
        return Right(self._move(parent, context.path.mark_changed()))

    @decorators.raise_on_left
    def remove(self) -> Zipper:
        return self.safe_remove()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        return (
            self._value is other._value or self._value == other._value
        ) and self._context == other._context

    def __hash__(self) -> int:
        return hash((self._value, self._context))

    def __repr__(self) -> str:
        return f"<treezipper.Zipper({self._value!r}) at depth {self.depth()}>"
