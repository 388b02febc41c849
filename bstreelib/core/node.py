"""BSTreeNode for bstreelib.

A node is a plain data container: one item and two owning child slots.
There is no parent link, so every node is reachable from exactly one slot.
Navigation and all structural changes belong to OrderedTree.
"""

from typing import Any, Iterator, Optional


class BSTreeNode:
    """One node of an OrderedTree."""

    __slots__ = ('item', 'left', 'right')

    def __init__(self, item: Any,
                 left: Optional['BSTreeNode'] = None,
                 right: Optional['BSTreeNode'] = None):
        self.item = item
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def child_count(self) -> int:
        """Return the number of occupied child slots (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)

    def children(self) -> Iterator['BSTreeNode']:
        """Yield existing children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(item={self.item!r})"
