"""Tree traversal strategies for searchtree.

Traversers implement the different orders for walking a binary search
tree. Each one yields ``(node, depth)`` pairs for data nodes only; sentinel
leaves are never yielded. The depth-first orders can run recursively or
with an explicit stack, and both modes produce identical sequences.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Tuple, Union

from ..config import TraversalMode, TraversalStrategy
from .node import Node

# Stack entry phases for the iterative depth-first traversals
_ENTER = 0      # Node just discovered, children not yet pushed
_EMIT = 1       # Node is ready to be yielded


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers are stateless and never modify the tree, so one instance
    can be reused for any number of traversals.
    """

    def __init__(self, mode: TraversalMode = TraversalMode.RECURSIVE):
        """Initialize traverser.

        Args:
            mode: Recursive or iterative bookkeeping for pending work
        """
        self.mode = mode

    def traverse(self, root: Node) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree rooted at ``root``.

        Args:
            root: Starting node (a sentinel yields nothing)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None or root.is_sentinel():
            return
        if self.mode == TraversalMode.ITERATIVE:
            yield from self._traverse_iterative(root)
        else:
            yield from self._traverse_recursive(root, 0)

    @abstractmethod
    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        pass

    @abstractmethod
    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        pass


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On a
    binary search tree this yields values in ascending order.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        if node.is_sentinel():
            return
        yield from self._traverse_recursive(node.left, depth + 1)
        yield (node, depth)
        yield from self._traverse_recursive(node.right, depth + 1)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int, int]] = [(root, 0, _ENTER)]

        while stack:
            node, depth, phase = stack.pop()
            if phase == _EMIT:
                yield (node, depth)
                continue

            # Pushed in reverse: right runs last, node runs after left
            if not node.right.is_sentinel():
                stack.append((node.right, depth + 1, _ENTER))
            stack.append((node, depth, _EMIT))
            if not node.left.is_sentinel():
                stack.append((node.left, depth + 1, _ENTER))


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children. Feeding the result into
    ``Tree.insert`` one value at a time reproduces the same shape.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        if node.is_sentinel():
            return
        yield (node, depth)
        yield from self._traverse_recursive(node.left, depth + 1)
        yield from self._traverse_recursive(node.right, depth + 1)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            if not node.right.is_sentinel():
                stack.append((node.right, depth + 1))
            if not node.left.is_sentinel():
                stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits a node only after both of its subtrees are exhausted.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        if node.is_sentinel():
            return
        yield from self._traverse_recursive(node.left, depth + 1)
        yield from self._traverse_recursive(node.right, depth + 1)
        yield (node, depth)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int, int]] = [(root, 0, _ENTER)]

        while stack:
            node, depth, phase = stack.pop()
            if phase == _EMIT:
                yield (node, depth)
                continue

            stack.append((node, depth, _EMIT))
            if not node.right.is_sentinel():
                stack.append((node.right, depth + 1, _ENTER))
            if not node.left.is_sentinel():
                stack.append((node.left, depth + 1, _ENTER))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at depth
    N+1. Always queue based; the recursive mode shares the same loop.
    """

    def _traverse_recursive(self, node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
        return self._traverse_iterative(node)

    def _traverse_iterative(self, root: Node) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            if not node.left.is_sentinel():
                queue.append((node.left, depth + 1))
            if not node.right.is_sentinel():
                queue.append((node.right, depth + 1))


_STRATEGIES = {
    TraversalStrategy.INORDER: InOrderTraverser,
    TraversalStrategy.PREORDER: PreOrderTraverser,
    TraversalStrategy.POSTORDER: PostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}

_ALIASES = {
    'inorder': TraversalStrategy.INORDER,
    'in_order': TraversalStrategy.INORDER,
    'preorder': TraversalStrategy.PREORDER,
    'pre_order': TraversalStrategy.PREORDER,
    'postorder': TraversalStrategy.POSTORDER,
    'post_order': TraversalStrategy.POSTORDER,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
    'bfs': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy enum or name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = str(strategy).lower()
    if strategy_lower not in _ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_ALIASES.keys())}"
        )
    return _ALIASES[strategy_lower]


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     mode: TraversalMode = TraversalMode.RECURSIVE) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: Strategy enum or name (inorder, preorder, postorder, level)
        mode: Recursive or iterative traversal

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _STRATEGIES[parse_strategy(strategy)](mode)
