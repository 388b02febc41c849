"""Configuration system for bstreelib.

This module defines how users specify a walk over an OrderedTree: the
order, the depth window, which items to keep and what data to collect.
It also holds the formatting options of the structural dump.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalOrder(Enum):
    """How to walk the tree.

    Values are the strategy names understood by ``create_traverser``.
    """
    IN_ORDER = "inorder"                # Ascending keys
    REVERSE_IN_ORDER = "reverse"        # Descending keys
    PRE_ORDER = "preorder"              # Parent before children
    POST_ORDER = "postorder"            # Children before parent
    LEVEL_ORDER = "level"               # Level by level
    CUSTOM = "custom"                   # User-defined traverser


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    KEY = "key"                         # Just the key
    ITEM = "item"                       # The stored item
    CHILD_COUNT = "child_count"         # Key, depth and child count
    CUSTOM = "custom"                   # User-defined collector


@dataclass
class FilterConfig:
    """Configuration for filtering items during traversal.

    Filters only decide what is yielded; they never prune the walk, because
    a rejected node may still have accepted descendants.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, item: Any) -> bool:
        """Check if an item passes the filters.

        Args:
            item: Stored item to check

        Returns:
            True if item passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(item):
            return False

        if self.include_filter:
            return self.include_filter(item)

        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering (root is depth 0)."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse


@dataclass
class DisplayConfig:
    """Formatting of the rotated structural dump."""

    indent: str = "\t"                  # Repeated once per level
    empty_message: str = "Empty tree"
    both: str = "<"                     # Connector: two children
    right_only: str = "/"               # Connector: right child only
    left_only: str = "\\"               # Connector: left child only

    def connector(self, has_left: bool, has_right: bool) -> str:
        """Return the connector drawn after a key."""
        if has_left and has_right:
            return self.both
        if has_right:
            return self.right_only
        if has_left:
            return self.left_only
        return ""


@dataclass
class TraversalConfig:
    """Complete configuration for a walk over an OrderedTree.

    TraversalPlan validates this configuration and turns it into a
    traverser/collector pair.
    """

    # Traversal algorithm
    order: TraversalOrder = TraversalOrder.IN_ORDER
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Item filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirement: DataRequirement = DataRequirement.ITEM
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Convenience constructors for common configurations

    @classmethod
    def ascending(cls) -> 'TraversalConfig':
        """Items in ascending key order."""
        return cls(order=TraversalOrder.IN_ORDER)

    @classmethod
    def descending(cls) -> 'TraversalConfig':
        """Items in descending key order."""
        return cls(order=TraversalOrder.REVERSE_IN_ORDER)

    @classmethod
    def shape(cls) -> 'TraversalConfig':
        """Keys in pre-order; reinserting them rebuilds the same shape."""
        return cls(
            order=TraversalOrder.PRE_ORDER,
            data_requirement=DataRequirement.KEY,
        )

    @classmethod
    def levels(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Structural summary of each node, level by level.

        Args:
            max_depth: Deepest level to report (None = all)
        """
        return cls(
            order=TraversalOrder.LEVEL_ORDER,
            depth=DepthConfig(max_depth=max_depth),
            data_requirement=DataRequirement.CHILD_COUNT,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        # Check depth configuration
        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        # Check custom components
        if self.order == TraversalOrder.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when order is CUSTOM")

        if self.data_requirement == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirement is CUSTOM")

        return errors
