"""Data collection strategies for bstreelib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce keys, items or structural facts.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from .node import BSTreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, key: Callable[[Any], Any]):
        """Initialize collector with the tree's key function.

        Args:
            key: Function extracting a key from a stored item
        """
        self.key = key

    @abstractmethod
    def collect(self, node: BSTreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys."""

    def collect(self, node: BSTreeNode, depth: int) -> Any:
        return self.key(node.item)


class ItemCollector(DataCollector):
    """Collects the stored item itself (not a copy)."""

    def collect(self, node: BSTreeNode, depth: int) -> Any:
        return node.item


class ChildCountCollector(DataCollector):
    """Collects keys with child count information.

    Useful for tree structure analysis.
    """

    def collect(self, node: BSTreeNode, depth: int) -> Dict[str, Any]:
        return {
            'key': self.key(node.item),
            'depth': depth,
            'child_count': node.child_count(),
            'is_leaf': node.is_leaf(),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, key: Callable[[Any], Any],
                 collect_func: Callable[[BSTreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            key: Function extracting a key from a stored item
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(key)
        self.collect_func = collect_func

    def collect(self, node: BSTreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)
