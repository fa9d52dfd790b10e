# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Walk every node of a tree through a zipper.

A traversal object owns a cursor that it moves through the tree in a
fixed order.  It is a single walker: advancing the same traversal from
several threads at once needs external locking.
"""

from __future__ import annotations

import collections
import logging
from collections.abc import Callable, Iterator
from typing import Any

from treezipper.context import TraversalEnd
from treezipper.trampoline import bounce, trampoline
from treezipper.zipper import Zipper

__all__ = ("BreadthFirstTraversal", "PreOrderTraversal", "Traversal")

logger = logging.getLogger(__name__)


class Traversal:
    """Base class for the traversal strategies.

    Subclasses implement ``has_next`` and ``next``; iteration, ``each``
    and ``fold`` are built on them.
    """

    def has_next(self) -> bool:
        raise NotImplementedError

    def next(self) -> Zipper:
        """Return the zipper at the next position and advance past it.

        Raises StopIteration once every node was visited.
        """
        raise NotImplementedError

    def __iter__(self) -> Iterator[Zipper]:
        return self

    def __next__(self) -> Zipper:
        return self.next()

    def each(self, function: Callable[[Any], Any]) -> None:
        """Call ``function`` on every remaining value, for its side effects."""
        for location in self:
            function(location.value)

    def fold(self, initial: Any, function: Callable[[Any, Any], Any]) -> Any:
        """Combine the remaining values, in visiting order, into one."""
        accumulator = initial
        for location in self:
            accumulator = function(accumulator, location.value)
        return accumulator

    reduce = fold


def _climb_to_uncle(location: Zipper) -> Any:
    if location.is_root():
        return Zipper(location.value, TraversalEnd(), location.adapter)
    parent = location.up()
    if parent.has_right():
        return parent.right()
    return bounce(lambda: parent)


def preorder_successor(location: Zipper) -> Zipper:
    """The position after ``location`` in a depth-first, pre-order walk.

    Once the whole tree was walked, the result is the root of the tree
    (with every edit in place) tagged with a TraversalEnd context.
    Finding the next sibling of the nearest ancestor that has one is
    trampolined, so it works on trees of any depth.
    """
    down = location.safe_down()
    if down.is_right():
        return down.value
    if location.has_right():
        return location.right()
    return trampoline(location, _climb_to_uncle)


class PreOrderTraversal(Traversal):
    """Visit a node, then each of its subtrees from left to right.

    For example given the following tree:

            a
          /   \\
         b     e
         ^     ^
        c d   f g

    the nodes are visited in the order a, b, c, d, e, f, g.  The walk
    starts at the zipper given to the constructor and continues until
    the root of its tree has been left behind.
    """

    def __init__(self, zipper: Zipper) -> None:
        self._current = zipper
        self._visited = 0

    @property
    def current(self) -> Zipper:
        """The position the next call to ``next`` returns."""
        return self._current

    def has_next(self) -> bool:
        return not self._current.context.is_end()

    def _advance(self, location: Zipper) -> None:
        self._visited += 1
        self._current = preorder_successor(location)
        if not self.has_next():
            logger.debug("Pre-order traversal finished after %d nodes", self._visited)

    def next(self) -> Zipper:
        if not self.has_next():
            raise StopIteration
        location = self._current
        self._advance(location)
        return location

    def map(self, function: Callable[[Any], Any]) -> Any:
        """Replace every remaining value with ``function(value)``.

        Each node is replaced before its children are visited, so the
        children walked are those of the replacement.  Returns the whole
        rebuilt tree; subtrees whose values ``function`` returned
        unchanged are shared with the original.
        """
        while self.has_next():
            location = self._current.change(function)
            self._advance(location)
        return self._current.value

    def each(self, function: Callable[[Any], Any]) -> None:
        def visit(value):
            function(value)
            return value

        self.map(visit)


class BreadthFirstTraversal(Traversal):
    """Visit every node at one depth before any node deeper down.

    Pending positions wait in a FIFO queue, seeded with the starting
    zipper and refilled with the children of each visited node from
    left to right.  Only the subtree under the starting zipper is
    walked.  Positions are independent snapshots of the tree, so this
    traversal does not offer ``map``.
    """

    def __init__(self, zipper: Zipper) -> None:
        self._queue = collections.deque((zipper,))

    def has_next(self) -> bool:
        return bool(self._queue)

    def next(self) -> Zipper:
        if not self._queue:
            raise StopIteration
        location = self._queue.popleft()
        child = location.safe_down()
        while child.is_right():
            self._queue.append(child.value)
            child = child.value.safe_right()
        if not self._queue:
            logger.debug("Breadth-first traversal finished")
        return location
