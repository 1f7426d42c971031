"""Node abstraction for searchtree.

Every child slot of a data node holds a Node. An empty subtree is a
*sentinel leaf*: a Node whose own children are both absent. Insertion turns
a sentinel into a data node in place, so each empty position owns its own
sentinel and sentinels are never shared.
"""

from typing import Any, Optional

from ..errors import TypeMismatchError


class Node:
    """A data node or a sentinel leaf in a binary search tree.

    Ordering comparisons (``<``, ``<=``, ``>``, ``>=``) compare values.
    Equality is left as identity so nodes can be told apart even when
    their values match.
    """

    __slots__ = ("value", "_left", "_right")

    def __init__(self, value: Any = None, sentinel: bool = False):
        """Create a node.

        Args:
            value: Payload for a data node (ignored for a sentinel)
            sentinel: If True, create a sentinel leaf with no children.
                Otherwise the caller must assign both children.
        """
        self.value = None if sentinel else value
        self._left: Optional["Node"] = None
        self._right: Optional["Node"] = None

    @classmethod
    def sentinel(cls) -> "Node":
        """Create a fresh sentinel leaf."""
        return cls(sentinel=True)

    def is_sentinel(self) -> bool:
        """Check if this node marks an empty subtree.

        Returns:
            bool: True if both children are absent
        """
        return self._left is None and self._right is None

    @property
    def left(self) -> Optional["Node"]:
        return self._left

    @left.setter
    def left(self, node: "Node") -> None:
        self._left = _require_node(node, "Cannot store {} as a child of Node")

    @property
    def right(self) -> Optional["Node"]:
        return self._right

    @right.setter
    def right(self, node: "Node") -> None:
        self._right = _require_node(node, "Cannot store {} as a child of Node")

    def set_left(self, node: "Node") -> None:
        self.left = node

    def set_right(self, node: "Node") -> None:
        self.right = node

    def make_data(self, value: Any) -> None:
        """Turn this node into a data node holding ``value`` with two new
        sentinel children. Any previous children are discarded."""
        self.value = value
        self._left = Node.sentinel()
        self._right = Node.sentinel()

    def make_sentinel(self) -> None:
        """Turn this node into a sentinel leaf in place."""
        self.value = None
        self._left = None
        self._right = None

    def replace_with(self, other: "Node") -> None:
        """Take over ``other``'s value and children.

        The parent's reference to ``self`` is untouched, so this splices
        ``other``'s subtree into ``self``'s position. ``other`` must not be
        used afterwards since its children are now owned by ``self``.

        Raises:
            TypeMismatchError: If ``other`` is not a Node
        """
        other = _require_node(other, "Cannot replace Node with {}")
        self.value = other.value
        self._left = other._left
        self._right = other._right

    def compare(self, other: "Node") -> int:
        """Three-way comparison by value.

        Returns:
            -1, 0 or 1 as ``self.value`` is less than, equal to or greater
            than ``other.value``

        Raises:
            TypeMismatchError: If ``other`` is not a Node
        """
        other = _require_node(other, "Cannot compare Node with {}")
        if self.value < other.value:
            return -1
        if other.value < self.value:
            return 1
        return 0

    def __lt__(self, other: "Node") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Node") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Node") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Node") -> bool:
        return self.compare(other) >= 0

    def describe(self) -> str:
        """Multi-line summary of this node and its immediate children."""
        return (
            f"{self!r}\n"
            f"  Value = {self.value}\n"
            f"  Left child = {_child_label(self._left)}\n"
            f"  Right child = {_child_label(self._right)}"
        )

    def render(self, depth: int = 0) -> str:
        """Indented dump of this subtree, one data node per line.

        Each level is indented by one more space. Sentinels are skipped.
        """
        lines = []
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            if node.is_sentinel():
                continue
            lines.append(" " * level + f"{node.value}\n")
            stack.append((node._right, level + 1))
            stack.append((node._left, level + 1))
        return "".join(lines)

    def __repr__(self) -> str:
        if self.is_sentinel():
            return f"{self.__class__.__name__}(<sentinel>)"
        return f"{self.__class__.__name__}(value={self.value!r})"


def _require_node(obj: Any, message: str) -> Node:
    if not isinstance(obj, Node):
        raise TypeMismatchError(message.format(type(obj).__name__))
    return obj


def _child_label(child: Optional[Node]) -> str:
    if child is None:
        return "none"
    if child.is_sentinel():
        return "<leaf>"
    return str(child.value)
