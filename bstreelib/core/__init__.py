"""Core abstractions for bstreelib.

This package contains the node and item types, the OrderedTree itself and
the traversal/collection strategies it is walked with.
"""

from .item import KeyedItem, Entry, default_key
from .node import BSTreeNode
from .tree import OrderedTree
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    ItemCollector,
    ChildCountCollector,
    CustomCollector,
)

__all__ = [
    "KeyedItem",
    "Entry",
    "default_key",
    "BSTreeNode",
    "OrderedTree",
    "TreeTraverser",
    "InOrderTraverser",
    "ReverseInOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "KeyCollector",
    "ItemCollector",
    "ChildCountCollector",
    "CustomCollector",
]
