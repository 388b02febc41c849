"""Tree traversal strategies for bstreelib.

Traversers implement different orders for walking a binary subtree. They
only follow the ``left``/``right`` slots of BSTreeNode, so they work on the
whole tree or on any subtree root.

All strategies are iterative (explicit stack or queue). A degenerate tree
built from sorted input is as tall as it is large, and walking it must not
depend on the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import BSTreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Optional[BSTreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        """Traverse the subtree rooted at ``root``.

        Args:
            root: Subtree root (None for an empty subtree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """Symmetric (left, node, right) traversal.

    On a valid search tree this yields nodes in strictly ascending key order.
    """

    _first = 'left'
    _second = 'right'

    def traverse(self,
                 root: Optional[BSTreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        stack: List[Tuple[BSTreeNode, int]] = []
        current = root
        depth = 0

        while stack or current is not None:
            # Slide down the near edge, remembering each node on the way
            while current is not None:
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current = getattr(current, self._first)
                else:
                    current = None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                current = getattr(node, self._second)
            else:
                current = None
            depth += 1


class ReverseInOrderTraverser(InOrderTraverser):
    """Mirrored (right, node, left) traversal, descending key order.

    This is the order in which a tree rotated 90 degrees is printed
    top to bottom.
    """

    _first = 'right'
    _second = 'left'


class PreOrderTraverser(TreeTraverser):
    """Node before children, left subtree before right.

    Inserting keys in this order into an empty tree rebuilds the same shape.
    """

    def traverse(self,
                 root: Optional[BSTreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        if root is None:
            return

        stack: List[Tuple[BSTreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right pushed first so left is popped first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Children before node, left subtree before right.

    A node is yielded only after the traverser has finished reading both of
    its child slots, so the consumer may detach a yielded node's children.
    """

    def traverse(self,
                 root: Optional[BSTreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        if root is None:
            return

        # (node, depth, children_already_pushed)
        stack: List[Tuple[BSTreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                if node.right is not None:
                    stack.append((node.right, depth + 1, False))
                if node.left is not None:
                    stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N, left to right, before any node at N+1.
    """

    def traverse(self,
                 root: Optional[BSTreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[BSTreeNode, int]]:
        if root is None:
            return

        queue: Deque[Tuple[BSTreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (inorder, reverse, preorder,
            postorder, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'inorder': InOrderTraverser,
        'in_order': InOrderTraverser,
        'reverse': ReverseInOrderTraverser,
        'reverse_in_order': ReverseInOrderTraverser,
        'preorder': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'postorder': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Valid options: {', '.join(sorted(strategies.keys()))}"
        )

    return strategies[strategy_lower]()
