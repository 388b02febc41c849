"""Exception hierarchy for bstreelib.

A missing key is never an error: ``retrieve`` returns ``None`` and ``remove``
returns ``False``. The exceptions here cover misuse of the collaborators and
resource limits only.
"""


class BSTreeError(Exception):
    """Base class for all bstreelib errors."""
    pass


class KeyExtractionError(BSTreeError, TypeError):
    """Raised when the default key function cannot read a key from an item."""
    pass


class TreeDepthError(BSTreeError, RecursionError):
    """Raised when a recursive tree operation exceeds the recursion limit.

    The tree is left exactly as it was before the failed call.
    """
    pass


class ConfigurationError(BSTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
