"""Configuration system for searchtree.

This module defines how users choose the traversal algorithm a tree runs
with and how two-child deletions pick their substitute node.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """Which order to visit data nodes in."""
    INORDER = "inorder"         # Left, node, right (ascending values)
    PREORDER = "preorder"       # Node before children
    POSTORDER = "postorder"     # Children before node
    LEVEL_ORDER = "level"       # Breadth-first, left to right


class TraversalMode(Enum):
    """How the depth-first traversals keep track of pending work.

    Both modes yield identical sequences. Iterative mode avoids the
    interpreter's recursion limit on very deep (skewed) trees.
    """
    RECURSIVE = "recursive"     # Nested generators on the call stack
    ITERATIVE = "iterative"     # Explicit stack of (node, depth, phase)


class DeletionBias(Enum):
    """Which substitute to use when a two-child node's subtrees are equally tall."""
    SUCCESSOR = "successor"         # Minimum of the right subtree
    PREDECESSOR = "predecessor"     # Maximum of the left subtree


@dataclass
class TreeConfig:
    """Complete configuration for a Tree.

    Attributes:
        traversal_mode: Recursive or iterative depth-first traversal
        deletion_bias: Tie-break for two-child deletion when both subtrees
            have the same depth. The taller subtree always wins otherwise.
    """

    traversal_mode: TraversalMode = TraversalMode.RECURSIVE
    deletion_bias: DeletionBias = DeletionBias.SUCCESSOR

    @classmethod
    def recursive(cls) -> 'TreeConfig':
        """Create config that traverses with recursive generators."""
        return cls(traversal_mode=TraversalMode.RECURSIVE)

    @classmethod
    def iterative(cls) -> 'TreeConfig':
        """Create config that traverses with an explicit stack.

        Use this for trees built by inserting long runs of sorted values,
        whose height can exceed the recursion limit.
        """
        return cls(traversal_mode=TraversalMode.ITERATIVE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.traversal_mode, TraversalMode):
            errors.append(
                f"traversal_mode must be a TraversalMode, got {self.traversal_mode!r}"
            )

        if not isinstance(self.deletion_bias, DeletionBias):
            errors.append(
                f"deletion_bias must be a DeletionBias, got {self.deletion_bias!r}"
            )

        return errors
