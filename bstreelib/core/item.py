"""Keyed item abstractions for bstreelib.

The tree never inspects an item beyond extracting its key. Items either
implement ``get_key()`` (see KeyedItem) or the tree is given a key function.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..errors import KeyExtractionError


class KeyedItem(ABC):
    """Abstract base class for items stored in an OrderedTree.

    Subclasses only need to provide ``get_key``. The returned key must
    support ``<`` and ``>`` against every other key stored in the same tree.
    """

    @abstractmethod
    def get_key(self) -> Any:
        """Return the key this item is ordered by."""
        pass


class Entry(KeyedItem):
    """Lightweight (key, value) item."""

    __slots__ = ('_key', '_value')

    def __init__(self, key: Any, value: Any = None):
        self._key = key
        self._value = value

    def get_key(self) -> Any:
        return self._key

    def get_value(self) -> Any:
        return self._value

    @property
    def key(self) -> Any:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other: object) -> bool:
        """Entries are equal when both key and value are equal."""
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key == other._key and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Entry({self._key!r}, {self._value!r})"


def default_key(item: Any) -> Any:
    """Extract a key by calling ``item.get_key()``.

    Raises:
        KeyExtractionError: If the item has no callable ``get_key``
    """
    get_key = getattr(item, 'get_key', None)
    if not callable(get_key):
        raise KeyExtractionError(
            f"{type(item).__name__} does not provide get_key(); "
            f"pass key= to the tree instead"
        )
    return get_key()
