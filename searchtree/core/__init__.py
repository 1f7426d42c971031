"""Core abstractions for searchtree.

This module contains the Node representation, the traversal strategies
and the Tree that ties them together.
"""

from .node import Node
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import Tree

__all__ = [
    "Node",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "Tree",
]
