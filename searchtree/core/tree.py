"""Binary search tree built on sentinel-leaf Nodes.

The Tree owns the structural algorithms: search, insertion, deletion,
traversal, balance measurement and balanced reconstruction. Callers never
mutate Nodes directly; every change goes through a Tree method.
"""

import logging
from collections.abc import Sequence, Set
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from ..config import DeletionBias, TraversalMode, TraversalStrategy, TreeConfig
from ..errors import InvalidInputError, PreconditionViolatedError
from .node import Node
from .traverser import create_traverser

logger = logging.getLogger(__name__)

Visitor = Optional[Callable[[Node], Any]]


class Tree:
    """An ordered binary search tree whose values double as keys.

    The tree never rebalances itself. Use ``balanced()`` to check the root
    and ``rebalance()`` to rebuild it from its sorted values.

    Example:
        >>> tree = Tree([5, 3, 8, 1, 4, 7, 9])
        >>> tree.inorder()
        [1, 3, 4, 5, 7, 8, 9]
        >>> tree.find(4).value
        4
    """

    def __init__(self, values: Optional[Iterable[Any]] = None,
                 config: Optional[TreeConfig] = None):
        """Create a tree.

        Args:
            values: Finite sequence (or set) of orderable values. Duplicates
                are dropped. None or an empty sequence gives an empty tree.
            config: Traversal and deletion settings (defaults to TreeConfig())

        Raises:
            InvalidInputError: If values is not a finite sequence of
                orderable values, or config is invalid
        """
        self.config = config if config is not None else TreeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise InvalidInputError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.root: Node = self.build_from_sequence([] if values is None else values)

    # Construction

    @classmethod
    def build_from_sequence(cls, values: Iterable[Any]) -> Node:
        """Build a balanced subtree from arbitrary values.

        Values are deduplicated and sorted, then the middle element becomes
        the root and each half becomes a subtree, recursively.

        Args:
            values: Finite sequence (or set) of orderable values

        Returns:
            Root node of the new subtree (a sentinel for empty input)

        Raises:
            InvalidInputError: If values is not a finite sequence of
                orderable values
        """
        ordered = _sorted_unique(values)
        logger.debug("Building balanced tree from %d distinct values", len(ordered))
        return cls._build_range(ordered, 0, len(ordered))

    @classmethod
    def _build_range(cls, ordered: List[Any], start: int, stop: int) -> Node:
        if start >= stop:
            return Node.sentinel()
        middle = start + (stop - start) // 2
        node = Node(ordered[middle])
        node.left = cls._build_range(ordered, start, middle)
        node.right = cls._build_range(ordered, middle + 1, stop)
        return node

    def rebalance(self) -> None:
        """Rebuild the tree from its inorder values.

        The inorder sequence is unchanged; the height drops to the minimum
        for the number of values.
        """
        old_height = self.height()
        traverser = create_traverser(TraversalStrategy.INORDER, TraversalMode.ITERATIVE)
        values = [node.value for node, _ in traverser.traverse(self.root)]
        self.root = self.build_from_sequence(values)
        logger.debug("Rebalanced tree: height %d -> %d", old_height, self.height())

    # Search

    def find(self, value: Any) -> Optional[Node]:
        """Find the node holding ``value``.

        Returns:
            The matching Node, or None if the value is absent

        Raises:
            InvalidInputError: If value cannot be ordered against the
                stored values
        """
        node = self.root
        while not node.is_sentinel():
            if node.value == value:
                return node
            node = node.left if _less(value, node.value) else node.right
        return None

    def find_min(self, node: Optional[Node] = None) -> Optional[Node]:
        """Return the leftmost data node of a subtree (root by default)."""
        node = self.root if node is None else node
        if node.is_sentinel():
            return None
        while not node.left.is_sentinel():
            node = node.left
        return node

    def find_max(self, node: Optional[Node] = None) -> Optional[Node]:
        """Return the rightmost data node of a subtree (root by default)."""
        node = self.root if node is None else node
        if node.is_sentinel():
            return None
        while not node.right.is_sentinel():
            node = node.right
        return node

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    # Mutation

    def insert(self, value: Any) -> Node:
        """Insert ``value`` at the sentinel its search path ends on.

        Equal values descend to the right; duplicates are not rejected, so
        callers relying on uniqueness must not insert them.

        Returns:
            The newly materialized data node

        Raises:
            InvalidInputError: If value cannot be ordered against the
                stored values
        """
        node = self.root
        while not node.is_sentinel():
            node = node.left if _less(value, node.value) else node.right
        node.make_data(value)
        return node

    def delete(self, value: Any) -> None:
        """Remove ``value`` from the tree. Absent values are ignored."""
        node = self.find(value)
        if node is None:
            logger.debug("delete(%r): value not found", value)
            return
        self._remove_node(node)

    def _remove_node(self, node: Node) -> None:
        left, right = node.left, node.right

        if left.is_sentinel() and right.is_sentinel():
            node.make_sentinel()
        elif left.is_sentinel():
            node.replace_with(right)
        elif right.is_sentinel():
            node.replace_with(left)
        else:
            # Two real subtrees: substitute from the taller side
            left_depth, right_depth = self.depth(left), self.depth(right)
            if left_depth > right_depth or (
                    left_depth == right_depth
                    and self.config.deletion_bias == DeletionBias.PREDECESSOR):
                substitute = self.find_max(left)
            else:
                substitute = self.find_min(right)
            logger.debug("Replacing %r with %r", node.value, substitute.value)
            node.value = substitute.value
            # The substitute has at most one real child, so this recursion
            # ends in one of the first three cases
            self._remove_node(substitute)

    # Measurement

    @staticmethod
    def depth(node: Optional[Node]) -> int:
        """Height of a subtree: -1 for None, 0 for a sentinel, otherwise
        one more than the taller child."""
        if node is None:
            return -1
        if node.is_sentinel():
            return 0

        # Iterative post-order; skewed trees can outgrow the recursion limit
        heights = {}
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if current.is_sentinel():
                heights[id(current)] = 0
            elif expanded:
                heights[id(current)] = 1 + max(heights[id(current.left)],
                                               heights[id(current.right)])
            else:
                stack.append((current, True))
                stack.append((current.left, False))
                stack.append((current.right, False))
        return heights[id(node)]

    def height(self) -> int:
        """Edges on the longest root-to-data-node path (-1 when empty)."""
        return self.depth(self.root) - 1

    def balanced(self) -> bool:
        """Check the root's two subtrees differ in depth by at most one.

        This only looks at the root; deeper imbalance is not detected.

        Raises:
            PreconditionViolatedError: If the tree is empty
        """
        if self.is_empty():
            raise PreconditionViolatedError("Cannot check balance of an empty tree")
        return abs(self.depth(self.root.left) - self.depth(self.root.right)) <= 1

    def is_empty(self) -> bool:
        return self.root.is_sentinel()

    def __len__(self) -> int:
        traverser = create_traverser(TraversalStrategy.PREORDER, TraversalMode.ITERATIVE)
        return sum(1 for _ in traverser.traverse(self.root))

    # Traversal

    def traverse(self, strategy: Union[TraversalStrategy, str] = TraversalStrategy.INORDER,
                 visit: Visitor = None) -> List[Any]:
        """Walk the tree in the given order.

        Args:
            strategy: Traversal order (enum or name)
            visit: Optional callable invoked with each data node in order

        Returns:
            List of visited values
        """
        values = []
        for node in self._walk(strategy):
            if visit is not None:
                visit(node)
            values.append(node.value)
        return values

    def inorder(self, visit: Visitor = None) -> List[Any]:
        return self.traverse(TraversalStrategy.INORDER, visit)

    def preorder(self, visit: Visitor = None) -> List[Any]:
        return self.traverse(TraversalStrategy.PREORDER, visit)

    def postorder(self, visit: Visitor = None) -> List[Any]:
        return self.traverse(TraversalStrategy.POSTORDER, visit)

    def level_order(self, visit: Visitor = None) -> List[Any]:
        return self.traverse(TraversalStrategy.LEVEL_ORDER, visit)

    def __iter__(self) -> Iterator[Any]:
        for node in self._walk(TraversalStrategy.INORDER):
            yield node.value

    def _walk(self, strategy: Union[TraversalStrategy, str]) -> Iterator[Node]:
        traverser = create_traverser(strategy, self.config.traversal_mode)
        for node, _ in traverser.traverse(self.root):
            yield node

    # Display

    def __str__(self) -> str:
        return self.root.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, height={self.height()})"


def _sorted_unique(values: Iterable[Any]) -> List[Any]:
    """Sort values ascending and drop duplicates.

    Uses adjacency after sorting, so unhashable values work as long as
    they are orderable.
    """
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, (Sequence, Set)):
        raise InvalidInputError(
            f"Tree expects a sequence of values, got {type(values).__name__}"
        )

    try:
        ordered = sorted(values)
    except TypeError as e:
        raise InvalidInputError(f"Tree values must be mutually orderable: {e}") from e

    unique: List[Any] = []
    for value in ordered:
        if not unique or unique[-1] != value:
            unique.append(value)
    return unique


def _less(value: Any, other: Any) -> bool:
    try:
        return value < other
    except TypeError as e:
        raise InvalidInputError(
            f"Cannot order {type(value).__name__} against {type(other).__name__}: {e}"
        ) from e
