# Licensed under the LGPL: https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

import logging
import unittest

import hypothesis
import pytest

from treezipper.adapters import sequence_zipper
from treezipper.traversal import BreadthFirstTraversal, PreOrderTraversal
from treezipper.trees import Tree

from . import resources


def _values(traversal):
    return [location.value.value for location in traversal]


class PreOrderTraversalTest(unittest.TestCase):
    def setUp(self) -> None:
        self.tree = resources.sample_tree()

    def test_visiting_order(self) -> None:
        self.assertEqual(_values(PreOrderTraversal(self.tree.zipper())), [1, 2, 3, 4, 5, 6])

    def test_next_and_has_next(self) -> None:
        traversal = PreOrderTraversal(self.tree.zipper())
        self.assertTrue(traversal.has_next())
        self.assertIs(traversal.next().value, self.tree)
        self.assertIs(traversal.current.value, self.tree.children[0])
        for _ in range(5):
            traversal.next()
        self.assertFalse(traversal.has_next())
        self.assertTrue(traversal.current.context.is_end())
        with self.assertRaises(StopIteration):
            traversal.next()

    def test_single_node(self) -> None:
        self.assertEqual(_values(PreOrderTraversal(Tree("only").zipper())), ["only"])

    def test_fold(self) -> None:
        total = PreOrderTraversal(self.tree.zipper()).fold(0, lambda acc, t: acc + t.value)
        self.assertEqual(total, 21)
        order = PreOrderTraversal(self.tree.zipper()).reduce(
            "", lambda acc, t: acc + str(t.value)
        )
        self.assertEqual(order, "123456")

    def test_each(self) -> None:
        seen = []
        traversal = PreOrderTraversal(self.tree.zipper())
        self.assertIsNone(traversal.each(lambda t: seen.append(t.value)))
        self.assertEqual(seen, [1, 2, 3, 4, 5, 6])
        self.assertIs(traversal.current.value, self.tree)

    def test_map_rebuilds_every_node(self) -> None:
        root = PreOrderTraversal(self.tree.zipper()).map(
            lambda t: Tree(t.value * 10, t.children)
        )
        self.assertEqual(
            root,
            Tree(10, [Tree(20, [Tree(30)]), Tree(40, [Tree(50), Tree(60)])]),
        )
        self.assertEqual(self.tree, resources.sample_tree())

    def test_map_shares_untouched_subtrees(self) -> None:
        def bump_five(tree):
            if tree.value == 5:
                return Tree(55)
            return tree

        root = PreOrderTraversal(self.tree.zipper()).map(bump_five)
        self.assertEqual(root, Tree(1, [Tree(2, [Tree(3)]), Tree(4, [Tree(55), Tree(6)])]))
        self.assertIs(root.children[0], self.tree.children[0])
        self.assertIs(root.children[1].children[1], self.tree.children[1].children[1])

    def test_map_identity_keeps_the_tree(self) -> None:
        self.assertIs(PreOrderTraversal(self.tree.zipper()).map(lambda t: t), self.tree)

    def test_map_walks_the_replacement_children(self) -> None:
        def grow(tree):
            if tree.value == 3:
                return Tree(3, [Tree("grown")])
            return tree

        seen = []
        traversal = PreOrderTraversal(self.tree.zipper())
        traversal.map(grow)
        PreOrderTraversal(traversal.current.value.zipper()).each(lambda t: seen.append(t.value))
        self.assertEqual(seen, [1, 2, 3, "grown", 4, 5, 6])

    def test_starting_inside_the_tree(self) -> None:
        start = self.tree.zipper().down().down()
        self.assertEqual(_values(PreOrderTraversal(start)), [3, 4, 5, 6])


class BreadthFirstTraversalTest(unittest.TestCase):
    def test_visiting_order(self) -> None:
        tree = resources.sample_tree()
        self.assertEqual(_values(BreadthFirstTraversal(tree.zipper())), [1, 2, 4, 3, 5, 6])

    def test_exhaustion(self) -> None:
        traversal = BreadthFirstTraversal(Tree(1, [Tree(2)]).zipper())
        self.assertTrue(traversal.has_next())
        traversal.next()
        traversal.next()
        self.assertFalse(traversal.has_next())
        with self.assertRaises(StopIteration):
            traversal.next()

    def test_fold_and_each(self) -> None:
        tree = resources.sample_tree()
        self.assertEqual(
            BreadthFirstTraversal(tree.zipper()).fold([], lambda acc, t: acc + [t.value]),
            [1, 2, 4, 3, 5, 6],
        )
        seen = []
        BreadthFirstTraversal(tree.zipper()).each(lambda t: seen.append(t.value))
        self.assertEqual(seen, [1, 2, 4, 3, 5, 6])

    def test_only_walks_the_starting_subtree(self) -> None:
        start = resources.sample_tree().zipper().down().right()
        self.assertEqual(_values(BreadthFirstTraversal(start)), [4, 5, 6])

    def test_visited_positions_can_be_edited(self) -> None:
        tree = resources.sample_tree()
        for location in BreadthFirstTraversal(tree.zipper()):
            if location.value.value == 5:
                self.assertEqual(
                    location.replace(Tree(50)).root(),
                    Tree(1, [Tree(2, [Tree(3)]), Tree(4, [Tree(50), Tree(6)])]),
                )


@hypothesis.given(resources.trees)
def test_preorder_matches_recursive_walk(tree) -> None:
    assert _values(PreOrderTraversal(tree.zipper())) == resources.preorder(tree)


@hypothesis.given(resources.trees)
def test_breadth_first_matches_level_order(tree) -> None:
    assert _values(BreadthFirstTraversal(tree.zipper())) == resources.level_order(tree)


@hypothesis.given(resources.trees)
def test_breadth_first_never_goes_back_up(tree) -> None:
    depths = [location.depth() for location in BreadthFirstTraversal(tree.zipper())]
    assert depths == sorted(depths)
    assert depths[-1] == resources.depth_of(tree) - 1


@pytest.mark.parametrize(
    "structure,expected",
    [
        ([1, [2, 3], 4], [[1, [2, 3], 4], 1, [2, 3], 2, 3, 4]),
        ([], [[]]),
        ("leaf", ["leaf"]),
    ],
)
def test_preorder_over_sequences(structure, expected) -> None:
    visited = [location.value for location in PreOrderTraversal(sequence_zipper(structure))]
    assert visited == expected


def test_traversals_log_their_end(caplog) -> None:
    tree = resources.sample_tree()
    with caplog.at_level(logging.DEBUG, logger="treezipper.traversal"):
        traversal = PreOrderTraversal(tree.zipper())
        for _ in range(5):
            traversal.next()
        assert not caplog.records
        traversal.next()
        assert caplog.messages == ["Pre-order traversal finished after 6 nodes"]
        list(BreadthFirstTraversal(tree.zipper()))
    assert caplog.messages[-1] == "Breadth-first traversal finished"
    assert {record.levelno for record in caplog.records} == {logging.DEBUG}
