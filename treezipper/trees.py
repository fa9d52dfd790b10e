# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Immutable tree types that know how to make zippers on themselves.

``Tree`` is a rose tree whose every node carries a value.  ``Node``,
``Leaf`` and ``EmptyTree`` make up a tagged tree where only branches
carry tags and only leaves carry values.  ``Sexp`` is an S-expression
built from tuples.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Any

from treezipper.adapters import sequence_zipper
from treezipper.zipper import Zipper, zip_on

__all__ = ("EmptyTree", "Leaf", "Node", "Sexp", "TaggedTree", "Tree", "s")

_is_branch = operator.methodcaller("branch")
_children_of = operator.attrgetter("children")


class Tree:
    """A value with an ordered, possibly empty, tuple of subtrees."""

    __slots__ = ("_value", "_children", "_hash")

    def __init__(self, value: Any, children: Iterable[Tree] = ()) -> None:
        self._value = value
        self._children = tuple(children)
        self._hash = None

    @property
    def value(self) -> Any:
        return self._value

    @property
    def children(self) -> tuple[Tree, ...]:
        return self._children

    def branch(self) -> bool:
        return bool(self._children)

    def _label(self) -> Any:
        return self._value

    def zipper(self) -> Zipper:
        return zip_on(self, _is_branch, _children_of, _make_tree)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return _same_tree(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)

    def __str__(self) -> str:
        if not self._children:
            return repr(self._value)
        return "{!r} [{}]".format(self._value, ", ".join(str(c) for c in self._children))

    def __repr__(self) -> str:
        return f"Tree({self._value!r}, {list(self._children)!r})"


def _make_tree(node: Any, children: Iterable[Tree]) -> Tree:
    if isinstance(node, Tree):
        return Tree(node.value, children)
    return Tree(node, children)


class TaggedTree:
    """Base class of the tagged tree types."""

    __slots__ = ()

    children: tuple[TaggedTree, ...] = ()

    def branch(self) -> bool:
        return False

    def zipper(self) -> Zipper:
        return zip_on(self, _is_branch, _children_of, _make_tagged)

    # Iterative algorithms for these two methods, with explicit stacks,
    # ensure that no tree will overflow the call stack.
    def depth(self) -> int:
        """Number of nodes on the longest path from this node down to a leaf."""
        deepest = 0
        to_visit = [(self, 1)]
        while to_visit:
            node, level = to_visit.pop()
            if isinstance(node, EmptyTree):
                continue
            deepest = max(deepest, level)
            to_visit.extend((child, level + 1) for child in node.children)
        return deepest

    def size(self) -> int:
        """Number of nodes in this tree, empty trees excluded."""
        count = 0
        to_visit = [self]
        while to_visit:
            node = to_visit.pop()
            if not isinstance(node, EmptyTree):
                count += 1
                to_visit.extend(node.children)
        return count


class Node(TaggedTree):
    """A tagged branch.  It is a branch even when it has no children."""

    __slots__ = ("_tag", "_children", "_hash")

    def __init__(self, tag: Any, children: Iterable[TaggedTree] = ()) -> None:
        self._tag = tag
        self._children = tuple(children)
        self._hash = None

    @property
    def tag(self) -> Any:
        return self._tag

    @property
    def children(self) -> tuple[TaggedTree, ...]:
        return self._children

    def branch(self) -> bool:
        return True

    def _label(self) -> Any:
        return self._tag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return _same_tree(self, other)

    def __hash__(self) -> int:
        return _tree_hash(self)

    def __repr__(self) -> str:
        return f"Node({self._tag!r}, {list(self._children)!r})"


class Leaf(TaggedTree):
    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Leaf, self._value))

    def __repr__(self) -> str:
        return f"Leaf({self._value!r})"


class EmptyTree(TaggedTree):
    """A tree with no nodes at all.  All empty trees are equal."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaggedTree):
            return NotImplemented
        return isinstance(other, EmptyTree)

    def __hash__(self) -> int:
        return hash(EmptyTree)

    def __repr__(self) -> str:
        return "EmptyTree()"


# Equality and hashing of Tree and Node walk the tree with explicit
# stacks, like TaggedTree.depth and size.  Hashes are cached on every
# subtree, so hashing a tree again takes constant time.
def _same_kind(first: Any, second: Any) -> bool:
    return (isinstance(first, Tree) and isinstance(second, Tree)) or (
        isinstance(first, Node) and isinstance(second, Node)
    )


def _same_tree(first: Tree | Node, second: Tree | Node) -> bool:
    to_compare = [(first, second)]
    while to_compare:
        left, right = to_compare.pop()
        if left is right:
            continue
        if not _same_kind(left, right):
            if left != right:
                return False
            continue
        if left._hash is not None and right._hash is not None and left._hash != right._hash:
            return False
        if left._label() != right._label() or len(left.children) != len(right.children):
            return False
        to_compare.extend(zip(left.children, right.children))
    return True


def _is_unhashed(node: Any) -> bool:
    return isinstance(node, (Tree, Node)) and node._hash is None


def _tree_hash(tree: Tree | Node) -> int:
    to_visit = [tree]
    while to_visit:
        node = to_visit[-1]
        unhashed = [child for child in node.children if _is_unhashed(child)]
        if unhashed:
            to_visit.extend(unhashed)
            continue
        to_visit.pop()
        if node._hash is None:
            kind = Tree if isinstance(node, Tree) else Node
            children = tuple(hash(child) for child in node.children)
            node._hash = hash((kind, node._label(), children))
    return tree._hash


def _make_tagged(node: Any, children: Iterable[TaggedTree]) -> Node:
    # A leaf given children becomes a branch tagged with its value.
    if isinstance(node, Node):
        return Node(node.tag, children)
    if isinstance(node, Leaf):
        return Node(node.value, children)
    return Node(None, children)


class Sexp(tuple):
    """An S-expression: a tuple whose elements may be S-expressions."""

    __slots__ = ()

    def zipper(self) -> Zipper:
        return sequence_zipper(self)

    def __repr__(self) -> str:
        return "s({})".format(", ".join(repr(item) for item in self))


def s(*items: Any) -> Sexp:
    """Build an S-expression: ``s(1, s(2, 3))``."""
    return Sexp(items)
