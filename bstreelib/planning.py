"""Execution planning for bstreelib.

The TraversalPlan validates a TraversalConfig up front and then runs it
against any number of trees, pairing each visited item with the data the
configured collector extracts.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .config import TraversalConfig, TraversalOrder, DataRequirement
from .errors import ConfigurationError
from .core.item import default_key
from .core.node import BSTreeNode
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import (
    DataCollector,
    KeyCollector,
    ItemCollector,
    ChildCountCollector,
)

logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated execution plan for a walk over an OrderedTree.

    Configuration problems are reported when the plan is built, before any
    node is visited.
    """

    def __init__(self, config: TraversalConfig,
                 key: Optional[Callable[[Any], Any]] = None):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            key: Key function handed to built-in collectors (default calls
                ``item.get_key()``); pass the tree's ``key`` attribute

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config
        self.key = key or default_key

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        if self.config.order == TraversalOrder.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.order.value)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirement == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.KEY: KeyCollector,
            DataRequirement.ITEM: ItemCollector,
            DataRequirement.CHILD_COUNT: ChildCountCollector,
        }
        collector_class = collector_map[self.config.data_requirement]
        return collector_class(self.key)

    def execute(self, tree) -> Iterator[Tuple[BSTreeNode, Any]]:
        """Execute the plan against ``tree``.

        Args:
            tree: OrderedTree to walk

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        logger.debug("Executing traversal plan %s", self.get_summary())

        for node, depth in self.traverser.traverse(
            tree.root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.filter.should_include(node.item):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'data_requirement': self.config.data_requirement.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
