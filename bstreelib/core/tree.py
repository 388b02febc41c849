"""OrderedTree: an ordered map backed by an unbalanced binary search tree.

Every mutating algorithm is a recursive helper that receives a subtree root
and returns the root that should occupy that slot afterwards. The caller
stores the returned node in its own child slot, so each structural change is
a single slot assignment made while the recursion unwinds. If the recursion
fails on the way down (for example by exhausting the recursion limit) no slot
has been touched yet and the tree is unchanged.

No rebalancing is done: inserting keys in sorted order produces a tree whose
height equals its size minus one.
"""

import functools
import logging
from copy import copy as shallow_copy, deepcopy
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from ..config import TraversalOrder
from ..errors import TreeDepthError
from .item import default_key
from .node import BSTreeNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)


def _guard_depth(method):
    """Translate RecursionError from a tree operation into TreeDepthError."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except TreeDepthError:
            raise
        except RecursionError as error:
            logger.warning(
                "%s() on %s exceeded the recursion limit; tree left unchanged",
                method.__name__, type(self).__name__,
            )
            raise TreeDepthError(
                f"{method.__name__}() exceeded the recursion limit; the tree is "
                f"too tall for recursive processing (it is never rebalanced)"
            ) from error

    return wrapper


class OrderedTree:
    """Ordered map of keyed items with unique keys.

    Items are ordered by ``key(item)``, which defaults to ``item.get_key()``.
    Keys must support ``<`` and ``>``; two keys are considered equal when
    neither is less than nor greater than the other.

    Example:
        >>> tree = OrderedTree([Entry(2, "b"), Entry(1, "a")])
        >>> [e.get_key() for e in tree]
        [1, 2]
        >>> tree.retrieve(2)
        Entry(2, 'b')
    """

    def __init__(self,
                 source: Union['OrderedTree', Iterable[Any], None] = None,
                 key: Optional[Callable[[Any], Any]] = None):
        """Create a tree.

        Args:
            source: Another OrderedTree to deep-copy, or an iterable of items
                to insert in order
            key: Key extraction function (default calls ``item.get_key()``).
                When copying another tree, omitting it keeps the source's
                key; a different key rebuilds the copy under the new order.
        """
        self._root: Optional[BSTreeNode] = None
        self._key = key or default_key

        if source is None:
            return
        if isinstance(source, OrderedTree):
            if key is None or key is source.key:
                self.assign(source)
            else:
                # Shape depends on the key, so the nodes cannot be cloned
                self.update(shallow_copy(item) for item in source)
        else:
            self.update(source)

    # ------------------ Introspection ------------------

    @property
    def key(self) -> Callable[[Any], Any]:
        """The key extraction function used by this tree."""
        return self._key

    @property
    def root(self) -> Optional[BSTreeNode]:
        """Root node, for read-only structural inspection."""
        return self._root

    def is_empty(self) -> bool:
        """Return True if the tree holds no items."""
        return self._root is None

    @_guard_depth
    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return self._height(self._root)

    def _height(self, node: Optional[BSTreeNode]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    @_guard_depth
    def count(self) -> int:
        """Number of nodes in the tree."""
        return self._count(self._root)

    def _count(self, node: Optional[BSTreeNode]) -> int:
        if node is None:
            return 0
        return 1 + self._count(node.left) + self._count(node.right)

    def __len__(self) -> int:
        # Same value as count(), without recursing: list(tree) calls this
        return sum(1 for _ in InOrderTraverser().traverse(self._root))

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={list(self.keys())!r})"

    # ------------------ Insertion ------------------

    @_guard_depth
    def insert(self, item: Any) -> None:
        """Insert ``item``, or replace the stored item with the same key."""
        item_key = self._key(item)
        self._root = self._insert(self._root, item, item_key)

    def _insert(self, node: Optional[BSTreeNode], item: Any, item_key: Any) -> BSTreeNode:
        if node is None:
            return BSTreeNode(item)

        node_key = self._key(node.item)
        if item_key < node_key:
            node.left = self._insert(node.left, item, item_key)
        elif item_key > node_key:
            node.right = self._insert(node.right, item, item_key)
        else:
            node.item = item
        return node

    def update(self, items: Iterable[Any]) -> None:
        """Insert every item from ``items`` in iteration order."""
        for item in items:
            self.insert(item)

    # ------------------ Lookup ------------------

    @_guard_depth
    def retrieve(self, search_key: Any) -> Optional[Any]:
        """Return a copy of the item stored under ``search_key``, or None."""
        node = self._find(self._root, search_key)
        if node is None:
            return None
        return shallow_copy(node.item)

    def get(self, search_key: Any, default: Any = None) -> Any:
        """Like retrieve(), but return ``default`` when the key is absent."""
        item = self.retrieve(search_key)
        return default if item is None else item

    @_guard_depth
    def __contains__(self, search_key: Any) -> bool:
        return self._find(self._root, search_key) is not None

    def _find(self, node: Optional[BSTreeNode], search_key: Any) -> Optional[BSTreeNode]:
        if node is None:
            return None

        node_key = self._key(node.item)
        if search_key < node_key:
            return self._find(node.left, search_key)
        if search_key > node_key:
            return self._find(node.right, search_key)
        return node

    def min_item(self) -> Optional[Any]:
        """Return a copy of the item with the smallest key, or None."""
        if self._root is None:
            return None
        return shallow_copy(self._leftmost(self._root).item)

    def max_item(self) -> Optional[Any]:
        """Return a copy of the item with the largest key, or None."""
        if self._root is None:
            return None
        return shallow_copy(self._rightmost(self._root).item)

    @staticmethod
    def _leftmost(node: BSTreeNode) -> BSTreeNode:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: BSTreeNode) -> BSTreeNode:
        while node.right is not None:
            node = node.right
        return node

    # ------------------ Removal ------------------

    @_guard_depth
    def remove(self, delete_key: Any) -> bool:
        """Remove the item stored under ``delete_key``.

        Returns:
            True if an item was removed, False if the key was not present
        """
        self._root, found = self._remove(self._root, delete_key)
        return found

    def _remove(self, node: Optional[BSTreeNode],
                delete_key: Any) -> Tuple[Optional[BSTreeNode], bool]:
        """Remove ``delete_key`` from the subtree rooted at ``node``.

        Returns:
            (new subtree root, whether the key was found)
        """
        if node is None:
            return None, False

        node_key = self._key(node.item)
        if delete_key < node_key:
            node.left, found = self._remove(node.left, delete_key)
            return node, found
        if delete_key > node_key:
            node.right, found = self._remove(node.right, delete_key)
            return node, found

        # Found. With at most one child, that child takes over the slot.
        if node.left is None:
            replacement, node.right = node.right, None
            return replacement, True
        if node.right is None:
            replacement, node.left = node.left, None
            return replacement, True

        # Two children: pull up the in-order predecessor. It has no right
        # child, so removing it below hits one of the cases above.
        predecessor = self._rightmost(node.left)
        node.left, _ = self._remove(node.left, self._key(predecessor.item))
        node.item = predecessor.item
        return node, True

    def clear(self) -> None:
        """Remove every item. Children are detached before their parent."""
        detached = 0
        for node, _ in PostOrderTraverser().traverse(self._root):
            node.left = None
            node.right = None
            detached += 1
        self._root = None
        logger.debug("Cleared %d nodes from %s", detached, type(self).__name__)

    # ------------------ Traversal ------------------

    def traverse(self,
                 order: Union[TraversalOrder, str, TreeTraverser] = TraversalOrder.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        """Walk the tree, yielding ``(node, depth)`` pairs.

        Args:
            order: TraversalOrder, strategy name, or a TreeTraverser instance
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Raises:
            ValueError: If ``order`` does not name a known strategy
        """
        if isinstance(order, TreeTraverser):
            traverser = order
        elif isinstance(order, TraversalOrder):
            traverser = create_traverser(order.value)
        else:
            traverser = create_traverser(order)
        return traverser.traverse(self._root, max_depth=max_depth, min_depth=min_depth)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over stored items in ascending key order."""
        for node, _ in InOrderTraverser().traverse(self._root):
            yield node.item

    def items(self) -> Iterator[Any]:
        """Generate the stored items in ascending key order."""
        return iter(self)

    def keys(self) -> Iterator[Any]:
        """Generate the keys in ascending order."""
        for item in self:
            yield self._key(item)

    # ------------------ Copy / assignment ------------------

    @_guard_depth
    def assign(self, other: 'OrderedTree') -> 'OrderedTree':
        """Make this tree an independent deep copy of ``other``.

        Assigning a tree to itself is a no-op. The copy is built before the
        current contents are dropped, so a failed copy leaves this tree as
        it was.

        Returns:
            self
        """
        if other is self:
            logger.debug("Ignoring self-assignment of %s", type(self).__name__)
            return self
        if not isinstance(other, OrderedTree):
            raise TypeError(
                f"can only assign from an OrderedTree, not {type(other).__name__}"
            )

        new_root = self._copy_subtree(other._root, shallow_copy)
        self.clear()
        self._key = other._key
        self._root = new_root
        logger.debug("Assigned deep copy into %s", type(self).__name__)
        return self

    @_guard_depth
    def copy(self) -> 'OrderedTree':
        """Return an independent deep copy with identical shape."""
        clone = self.__class__(key=self._key)
        clone._root = self._copy_subtree(self._root, shallow_copy)
        logger.debug("Copied %s", type(self).__name__)
        return clone

    def __copy__(self) -> 'OrderedTree':
        return self.copy()

    @_guard_depth
    def __deepcopy__(self, memo) -> 'OrderedTree':
        clone = self.__class__(key=self._key)
        memo[id(self)] = clone
        clone._root = self._copy_subtree(self._root, lambda item: deepcopy(item, memo))
        return clone

    def _copy_subtree(self, source: Optional[BSTreeNode],
                      copy_item: Callable[[Any], Any]) -> Optional[BSTreeNode]:
        if source is None:
            return None
        return BSTreeNode(
            copy_item(source.item),
            self._copy_subtree(source.left, copy_item),
            self._copy_subtree(source.right, copy_item),
        )
