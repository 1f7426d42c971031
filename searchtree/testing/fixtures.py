"""Test fixtures for searchtree consumers.

These fixtures check a tree's structural invariants from the outside,
without relying on the traversal code under test.
"""

from typing import List, Optional

from ..core.node import Node
from ..core.tree import Tree


class TreeInvariantChecker:
    """Public test fixture for structural verification.

    Checks that:
    - every child slot of a data node holds a Node
    - sentinel leaves have no children of their own
    - no Node is reachable from two positions (no sharing, no cycles)
    - values are strictly increasing left to right

    Example:
        checker = TreeInvariantChecker(tree)
        assert checker.violations() == []
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree to inspect.

        Args:
            tree: Tree under test
        """
        self._tree = tree

    def violations(self) -> List[str]:
        """Collect every invariant violation.

        Returns:
            List of human-readable problems (empty if the tree is well formed)
        """
        problems: List[str] = []
        seen = set()

        # (node, lower bound, upper bound); bounds are None when open
        stack = [(self._tree.root, None, None, "root")]
        while stack:
            node, low, high, where = stack.pop()

            if not isinstance(node, Node):
                problems.append(f"{where}: expected Node, found {type(node).__name__}")
                continue
            if id(node) in seen:
                problems.append(f"{where}: node {node!r} is shared")
                continue
            seen.add(id(node))

            if node.is_sentinel():
                continue
            if node.left is None or node.right is None:
                problems.append(f"{where}: data node {node!r} is missing a child")
                continue
            if (low is not None and not low < node.value) or \
                    (high is not None and not node.value < high):
                problems.append(f"{where}: value {node.value!r} is out of order")

            stack.append((node.right, node.value, high, f"{where}.right"))
            stack.append((node.left, low, node.value, f"{where}.left"))

        return problems

    def is_well_formed(self) -> bool:
        return not self.violations()

    def sentinel_count(self) -> int:
        """Count sentinel leaves; a well-formed tree of n values has n + 1."""
        count = 0
        stack: List[Optional[Node]] = [self._tree.root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            if node.is_sentinel():
                count += 1
            else:
                stack.extend((node.left, node.right))
        return count
