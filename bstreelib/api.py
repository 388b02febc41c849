"""High-level API for bstreelib.

This module provides simple, functional interfaces for common operations on
an OrderedTree. These functions wrap TraversalConfig/TraversalPlan for ease
of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import (
    TraversalConfig,
    TraversalOrder,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import TraversalPlan
from .core.tree import OrderedTree


def build_tree(items: Iterable[Any],
               key: Optional[Callable[[Any], Any]] = None) -> OrderedTree:
    """Build a tree by inserting ``items`` in iteration order.

    Later items replace earlier ones with the same key.

    Example:
        >>> tree = build_tree([Entry(5, "e"), Entry(3, "c")])
        >>> list(tree.keys())
        [3, 5]
    """
    return OrderedTree(items, key=key)


def traverse_tree(
    tree: OrderedTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
) -> Iterator[Any]:
    """Simple interface for walking a tree.

    Args:
        tree: Tree to walk
        order: Traversal order (inorder, reverse, preorder, postorder, level)
        max_depth: Maximum depth to traverse (root is depth 0)
        min_depth: Minimum depth before yielding items
        include_filter: Function(item) -> bool selecting items to yield
        exclude_filter: Function(item) -> bool rejecting items

    Yields:
        Stored items that match the criteria

    Example:
        >>> for entry in traverse_tree(tree, order="reverse", max_depth=1):
        ...     print(entry.get_key())
    """
    config = TraversalConfig(
        order=_parse_order(order),
        depth=DepthConfig(
            min_depth=min_depth,
            max_depth=max_depth
        ),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        data_requirement=DataRequirement.ITEM,
    )

    plan = TraversalPlan(config, tree.key)
    for _, item in plan.execute(tree):
        yield item


def collect_tree_data(
    tree: OrderedTree,
    data_requirement: DataRequirement = DataRequirement.KEY,
    **kwargs
) -> Iterator[Tuple[Any, Any]]:
    """Walk a tree and collect the specified data.

    Similar to traverse_tree but yields both items and collected data.

    Args:
        tree: Tree to walk
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree), plus
            ``custom_collector`` for DataRequirement.CUSTOM

    Yields:
        Tuples of (item, collected_data)

    Example:
        >>> for entry, info in collect_tree_data(tree, DataRequirement.CHILD_COUNT):
        ...     print(info['key'], info['child_count'])
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement

    config = _build_config_from_kwargs(**config_kwargs)
    plan = TraversalPlan(config, tree.key)

    for node, data in plan.execute(tree):
        yield (node.item, data)


def count_nodes(tree: OrderedTree, **kwargs) -> int:
    """Count items that match traversal criteria.

    Without criteria this equals ``tree.count()`` but does not recurse.

    Args:
        tree: Tree to walk
        **kwargs: Only the options traverse_tree accepts (order, max_depth,
            min_depth, include_filter, exclude_filter)

    Raises:
        TypeError: For any other keyword, such as ``data_requirement``
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_items(
    tree: OrderedTree,
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find items that match a predicate.

    Args:
        tree: Tree to walk
        predicate: Function that returns True for matching items
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Items that match the predicate, in traversal order
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def get_leaf_items(tree: OrderedTree, **kwargs) -> Iterator[Any]:
    """Get the items stored in leaf nodes, in ascending key order.

    Args:
        tree: Tree to walk
        **kwargs: Traversal options (see traverse_tree)
    """
    for item, info in collect_tree_data(
        tree, data_requirement=DataRequirement.CHILD_COUNT, **kwargs
    ):
        if info['is_leaf']:
            yield item


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with ``total_nodes``, ``leaf_nodes``, ``internal_nodes``,
        ``height``, ``depths`` (node count per depth), ``min_key`` and
        ``max_key``. Heights follow the tree's convention: -1 when empty.

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"{stats['total_nodes']} nodes, height {stats['height']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
        'min_key': None,
        'max_key': None,
    }

    for _, info in collect_tree_data(
        tree,
        data_requirement=DataRequirement.CHILD_COUNT,
        order=TraversalOrder.LEVEL_ORDER,
    ):
        depth = info['depth']
        stats['total_nodes'] += 1

        if info['is_leaf']:
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    if not tree.is_empty():
        stats['min_key'] = tree.key(tree.min_item())
        stats['max_key'] = tree.key(tree.max_item())

    return stats


# Helper functions

def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse traversal order from string or enum.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'inorder': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'ascending': TraversalOrder.IN_ORDER,
        'reverse': TraversalOrder.REVERSE_IN_ORDER,
        'reverse_in_order': TraversalOrder.REVERSE_IN_ORDER,
        'descending': TraversalOrder.REVERSE_IN_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'order' in kwargs:
        config.order = _parse_order(kwargs.pop('order'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirement = kwargs.pop('data_requirement')

    # Apply any remaining kwargs directly
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
