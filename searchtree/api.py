"""High-level API for searchtree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree class for ease of use in simple
cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .config import DeletionBias, TraversalMode, TraversalStrategy, TreeConfig
from .core.node import Node
from .core.tree import Tree


def build_tree(
    values: Optional[Iterable[Any]] = None,
    traversal_mode: TraversalMode = TraversalMode.RECURSIVE,
    deletion_bias: DeletionBias = DeletionBias.SUCCESSOR,
) -> Tree:
    """Build a balanced tree from values.

    Args:
        values: Finite sequence (or set) of orderable values
        traversal_mode: Recursive or iterative traversal
        deletion_bias: Tie-break for two-child deletion

    Returns:
        A new Tree

    Raises:
        InvalidInputError: If values is not a sequence of orderable values

    Example:
        >>> tree = build_tree([3, 1, 2], traversal_mode=TraversalMode.ITERATIVE)
        >>> tree.preorder()
        [2, 1, 3]
    """
    config = TreeConfig(traversal_mode=traversal_mode, deletion_bias=deletion_bias)
    return Tree(values, config=config)


def traverse_tree(
    tree: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.INORDER,
    visit: Optional[Callable[[Node], Any]] = None,
) -> List[Any]:
    """Traverse a tree and return the visited values.

    Args:
        tree: Tree to walk
        strategy: Traversal order (inorder, preorder, postorder, level)
        visit: Optional callable invoked with each data node

    Returns:
        Values in visit order

    Raises:
        ValueError: If the strategy name is not recognized
    """
    return tree.traverse(strategy, visit)


def count_nodes(tree: Tree) -> int:
    """Count the data nodes in a tree."""
    return len(tree)


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to measure

    Returns:
        Dictionary with:
        - size: Number of values
        - height: Edges on the longest path (-1 when empty)
        - balanced: Root-level balance, or None when empty
        - min: Smallest value, or None when empty
        - max: Largest value, or None when empty
    """
    if tree.is_empty():
        return {
            'size': 0,
            'height': -1,
            'balanced': None,
            'min': None,
            'max': None,
        }

    return {
        'size': len(tree),
        'height': tree.height(),
        'balanced': tree.balanced(),
        'min': tree.find_min().value,
        'max': tree.find_max().value,
    }


def render_tree(tree: Tree) -> str:
    """Render a tree as an indented dump for display.

    Not a serialization format; the output cannot be parsed back.
    """
    return str(tree)
