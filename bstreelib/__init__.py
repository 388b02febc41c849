"""bstreelib - Ordered map backed by an unbalanced binary search tree.

bstreelib stores keyed items in a binary search tree whose nodes only link
downward to their children. It supports insert/update, lookup, removal,
ordered enumeration, height and size introspection, and deep copies.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import OrderedTree, Entry

    tree = OrderedTree([Entry(50, "root"), Entry(30, "left")])
    tree.insert(Entry(70, "right"))
    tree.retrieve(30)          # Entry(30, 'left')
    tree.remove(50)            # True
    list(tree.keys())          # [30, 70]
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree is never rebalanced and is not thread-safe.
"""

__version__ = "0.1.0"

# Core components
from .core.item import KeyedItem, Entry, default_key
from .core.node import BSTreeNode
from .core.tree import OrderedTree
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    KeyCollector,
    ItemCollector,
    ChildCountCollector,
    CustomCollector,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalOrder,
    DataRequirement,
    DepthConfig,
    FilterConfig,
    DisplayConfig,
)
from .planning import TraversalPlan
from .errors import (
    BSTreeError,
    KeyExtractionError,
    TreeDepthError,
    ConfigurationError,
)

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_items,
    get_leaf_items,
    get_tree_stats,
)
from .display import show_structure, write_keys

__all__ = [
    "__version__",
    # Core
    'KeyedItem',
    'Entry',
    'default_key',
    'BSTreeNode',
    'OrderedTree',
    'TreeTraverser',
    'InOrderTraverser',
    'ReverseInOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'KeyCollector',
    'ItemCollector',
    'ChildCountCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalOrder',
    'DataRequirement',
    'DepthConfig',
    'FilterConfig',
    'DisplayConfig',
    'TraversalPlan',
    # Errors
    'BSTreeError',
    'KeyExtractionError',
    'TreeDepthError',
    'ConfigurationError',
    # API
    'build_tree',
    'traverse_tree',
    'collect_tree_data',
    'count_nodes',
    'find_items',
    'get_leaf_items',
    'get_tree_stats',
    # Display
    'show_structure',
    'write_keys',
]
