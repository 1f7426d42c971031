"""searchtree - in-memory binary search trees.

searchtree provides an ordered binary search tree whose empty subtrees are
sentinel leaves. It supports lookup, insertion and deletion, four traversal
orders, root-level balance checks and on-demand rebalancing.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from searchtree import Tree

    tree = Tree([5, 3, 8, 1, 4, 7, 9])
    tree.insert(6)
    tree.delete(3)
    tree.inorder()          # [1, 4, 5, 6, 7, 8, 9]
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.node import Node
from .core.tree import Tree
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TreeConfig, TraversalStrategy, TraversalMode, DeletionBias
from .errors import (
    TreeError,
    TypeMismatchError,
    InvalidInputError,
    PreconditionViolatedError,
)
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    get_tree_stats,
    render_tree,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "Tree",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TreeConfig",
    "TraversalStrategy",
    "TraversalMode",
    "DeletionBias",
    # Errors
    "TreeError",
    "TypeMismatchError",
    "InvalidInputError",
    "PreconditionViolatedError",
    # API
    "build_tree",
    "traverse_tree",
    "count_nodes",
    "get_tree_stats",
    "render_tree",
]
