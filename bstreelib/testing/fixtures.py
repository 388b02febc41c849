"""Test fixtures for bstreelib consumers.

These fixtures provide controlled access to tree structure for testing
purposes without making node layout part of the OrderedTree API.
"""

from typing import Any, Dict, Optional, Set, Tuple

from ..config import TraversalOrder


class TreeTestHelper:
    """Public test fixture for structural verification.

    Example:
        original = build_tree(entries)
        clone = original.copy()
        helper = TreeTestHelper(clone)

        assert helper.shape() == TreeTestHelper(original).shape()
        assert not helper.shares_nodes_with(original)
    """

    def __init__(self, tree):
        """Initialize with the tree under test.

        Args:
            tree: OrderedTree to inspect
        """
        self._tree = tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - count: Number of nodes
            - height: Tree height (-1 when empty)
            - is_empty: Whether the root slot is empty
            - is_valid: Whether the search-tree ordering holds
        """
        return {
            'count': self._tree.count(),
            'height': self._tree.height(),
            'is_empty': self._tree.is_empty(),
            'is_valid': self.is_valid_bst(),
        }

    def shape(self) -> Optional[Tuple]:
        """Return the tree as nested ``(key, left, right)`` tuples.

        Two trees have the same shape and keys iff their shapes are equal.
        """
        key = self._tree.key

        def _shape(node) -> Optional[Tuple]:
            if node is None:
                return None
            return (key(node.item), _shape(node.left), _shape(node.right))

        return _shape(self._tree.root)

    def node_ids(self) -> Set[int]:
        """Return the identities of every node object in the tree."""
        return {id(node) for node, _ in self._tree.traverse(TraversalOrder.PRE_ORDER)}

    def shares_nodes_with(self, other) -> bool:
        """Check if any node object is reachable from both trees."""
        return bool(self.node_ids() & TreeTestHelper(other).node_ids())

    def is_valid_bst(self) -> bool:
        """Check that in-order keys are strictly ascending."""
        previous = None
        first = True
        for key in self._tree.keys():
            if not first and not previous < key:
                return False
            previous = key
            first = False
        return True

    def depth_of(self, search_key: Any) -> Optional[int]:
        """Return the depth of the node holding ``search_key`` (root = 0).

        Returns:
            Depth, or None if the key is not in the tree
        """
        for node, depth in self._tree.traverse(TraversalOrder.PRE_ORDER):
            node_key = self._tree.key(node.item)
            if not (node_key < search_key or node_key > search_key):
                return depth
        return None
