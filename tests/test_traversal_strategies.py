"""Unit tests for traversal strategies and traversal modes.

Tests each traversal order on a known tree, the visitor callback, and
that recursive and iterative modes agree.
"""

import unittest
import random
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtree import (
    Tree,
    TreeConfig,
    TraversalMode,
    TraversalStrategy,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)


SAMPLE = [5, 3, 8, 1, 4, 7, 9]
MODES = [TraversalMode.RECURSIVE, TraversalMode.ITERATIVE]


class TestTraversalOrders(unittest.TestCase):
    """Test each order on the seven-value sample tree, in both modes."""

    def test_inorder(self):
        for mode in MODES:
            with self.subTest(mode=mode):
                tree = Tree(SAMPLE, config=TreeConfig(traversal_mode=mode))
                self.assertEqual(tree.inorder(), [1, 3, 4, 5, 7, 8, 9])

    def test_preorder(self):
        for mode in MODES:
            with self.subTest(mode=mode):
                tree = Tree(SAMPLE, config=TreeConfig(traversal_mode=mode))
                self.assertEqual(tree.preorder(), [5, 3, 1, 4, 8, 7, 9])

    def test_postorder(self):
        for mode in MODES:
            with self.subTest(mode=mode):
                tree = Tree(SAMPLE, config=TreeConfig(traversal_mode=mode))
                self.assertEqual(tree.postorder(), [1, 4, 3, 7, 9, 8, 5])

    def test_level_order(self):
        for mode in MODES:
            with self.subTest(mode=mode):
                tree = Tree(SAMPLE, config=TreeConfig(traversal_mode=mode))
                self.assertEqual(tree.level_order(), [5, 3, 8, 1, 4, 7, 9])

    def test_traverse_by_name(self):
        tree = Tree(SAMPLE)
        self.assertEqual(tree.traverse("preorder"), tree.preorder())
        self.assertEqual(tree.traverse("level"), tree.level_order())
        self.assertEqual(tree.traverse(TraversalStrategy.POSTORDER), tree.postorder())

    def test_iter_is_inorder(self):
        tree = Tree(SAMPLE)
        self.assertEqual(list(tree), tree.inorder())

    def test_empty_tree(self):
        tree = Tree([])
        for mode in MODES:
            tree.config = TreeConfig(traversal_mode=mode)
            self.assertEqual(tree.inorder(), [])
            self.assertEqual(tree.preorder(), [])
            self.assertEqual(tree.postorder(), [])
            self.assertEqual(tree.level_order(), [])

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            Tree(SAMPLE).traverse("zigzag")


class TestVisitor(unittest.TestCase):
    """Test the per-node visitor callback."""

    def test_visitor_sees_nodes_in_order(self):
        tree = Tree(SAMPLE)
        visited = []
        values = tree.preorder(visited.append)
        self.assertEqual([node.value for node in visited], values)

    def test_visitor_never_sees_sentinels(self):
        tree = Tree(SAMPLE)
        for strategy in TraversalStrategy:
            visited = []
            tree.traverse(strategy, visited.append)
            self.assertEqual(len(visited), 7)
            self.assertFalse(any(node.is_sentinel() for node in visited))

    def test_traversal_is_repeatable(self):
        tree = Tree(SAMPLE)
        first = tree.level_order(lambda node: None)
        second = tree.level_order()
        self.assertEqual(first, second)
        self.assertEqual(tree.inorder(), [1, 3, 4, 5, 7, 8, 9])


class TestModeEquivalence(unittest.TestCase):
    """Recursive and iterative traversals must produce identical output."""

    def test_random_trees(self):
        random.seed(0)
        for _ in range(20):
            values = random.sample(range(500), random.randint(0, 60))
            recursive = Tree(config=TreeConfig.recursive())
            iterative = Tree(config=TreeConfig.iterative())
            for value in values:
                recursive.insert(value)
                iterative.insert(value)

            for strategy in TraversalStrategy:
                self.assertEqual(
                    recursive.traverse(strategy),
                    iterative.traverse(strategy),
                    f"{strategy} differs for {values}",
                )

    def test_same_value_set_across_orders(self):
        random.seed(2)
        tree = Tree()
        for value in random.sample(range(100), 40):
            tree.insert(value)
        expected = set(tree.inorder())
        for strategy in TraversalStrategy:
            self.assertEqual(set(tree.traverse(strategy)), expected)

    def test_deep_chain_iterative(self):
        """A sorted run of inserts builds a chain deeper than the recursion limit."""
        tree = Tree(config=TreeConfig.iterative())
        for value in range(2000):
            tree.insert(value)

        self.assertEqual(tree.inorder(), list(range(2000)))
        self.assertEqual(tree.preorder(), list(range(2000)))
        self.assertEqual(tree.postorder(), list(range(1999, -1, -1)))
        self.assertEqual(len(tree), 2000)
        self.assertEqual(tree.height(), 1999)

        tree.rebalance()
        self.assertEqual(tree.height(), 10)


class TestTraversers(unittest.TestCase):
    """Test the traverser classes directly."""

    def setUp(self):
        self.root = Tree(range(1, 8)).root

    def test_depths(self):
        pairs = [(node.value, depth) for node, depth in InOrderTraverser().traverse(self.root)]
        self.assertEqual(pairs, [(1, 2), (2, 1), (3, 2), (4, 0), (5, 2), (6, 1), (7, 2)])

    def test_depths_iterative(self):
        traverser = LevelOrderTraverser(TraversalMode.ITERATIVE)
        depths = [depth for _, depth in traverser.traverse(self.root)]
        self.assertEqual(depths, [0, 1, 1, 2, 2, 2, 2])

    def test_subtree_root_is_depth_zero(self):
        pairs = [(node.value, depth) for node, depth in PostOrderTraverser().traverse(self.root.right)]
        self.assertEqual(pairs, [(5, 1), (7, 1), (6, 0)])

    def test_sentinel_root_yields_nothing(self):
        self.assertEqual(list(PreOrderTraverser().traverse(Tree().root)), [])

    def test_create_traverser(self):
        self.assertIsInstance(create_traverser("inorder"), InOrderTraverser)
        self.assertIsInstance(create_traverser("pre_order"), PreOrderTraverser)
        self.assertIsInstance(create_traverser("POSTORDER"), PostOrderTraverser)
        self.assertIsInstance(create_traverser("bfs"), LevelOrderTraverser)
        traverser = create_traverser(TraversalStrategy.LEVEL_ORDER, TraversalMode.ITERATIVE)
        self.assertEqual(traverser.mode, TraversalMode.ITERATIVE)

    def test_create_traverser_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            create_traverser("dfs")
        self.assertIn("Unknown traversal strategy", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
