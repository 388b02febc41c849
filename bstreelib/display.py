"""Text renderings of an OrderedTree for testing and debugging.

Both functions only consume traversals; they never touch tree internals
beyond the nodes a traverser yields.
"""

from typing import Optional

from .config import DisplayConfig, TraversalOrder


def show_structure(tree, config: Optional[DisplayConfig] = None) -> str:
    """Render the tree rotated 90 degrees counterclockwise.

    The root sits at the left margin and the largest key on the first line.
    Each line holds one key indented once per level (the root is at level 1)
    followed by a connector: ``<`` for two children, ``/`` for a right child
    only and ``\\`` for a left child only.

    Args:
        tree: OrderedTree to render
        config: Indentation and connector characters

    Returns:
        The rendering, or ``config.empty_message`` for an empty tree
    """
    config = config or DisplayConfig()
    if tree.is_empty():
        return config.empty_message

    lines = []
    for node, depth in tree.traverse(TraversalOrder.REVERSE_IN_ORDER):
        connector = config.connector(node.left is not None, node.right is not None)
        lines.append(f"{config.indent * (depth + 1)} {tree.key(node.item)}{connector}")
    return "\n".join(lines)


def write_keys(tree) -> str:
    """Return the keys in ascending order separated by single spaces."""
    return " ".join(str(key) for key in tree.keys())
