"""Error handling tests: key extraction, depth limits and logging."""

import logging
import sys

import pytest

from bstreelib import (
    OrderedTree,
    Entry,
    BSTreeError,
    KeyExtractionError,
    TreeDepthError,
    count_nodes,
    show_structure,
)
from bstreelib.testing import TreeTestHelper


class TestKeyExtraction:

    def test_item_without_get_key(self, sample_tree):
        with pytest.raises(KeyExtractionError, match="get_key"):
            sample_tree.insert(object())

        assert sample_tree.count() == 7

    def test_key_extraction_error_is_type_error(self):
        with pytest.raises(TypeError):
            OrderedTree([42])

    def test_custom_key_errors_propagate(self):
        tree = OrderedTree(key=lambda item: item["id"])

        with pytest.raises(KeyError):
            tree.insert({"name": "no id"})

        assert tree.is_empty()

    def test_missing_key_is_not_an_error(self, sample_tree):
        assert sample_tree.retrieve(999) is None
        assert sample_tree.remove(999) is False


class TestDepthLimit:
    """Degenerate trees taller than the recursion limit."""

    def fill_until_too_deep(self, tree):
        """Insert ascending keys until the recursion limit is hit."""
        limit = sys.getrecursionlimit()
        for key in range(limit * 2):
            try:
                tree.insert(Entry(key))
            except TreeDepthError as error:
                return key, error
        pytest.fail("insert never exceeded the recursion limit")

    def test_insert_failure_leaves_tree_unchanged(self, caplog):
        tree = OrderedTree()

        with caplog.at_level(logging.WARNING, logger="bstreelib.core.tree"):
            failed_key, error = self.fill_until_too_deep(tree)

        assert isinstance(error, RecursionError)
        assert isinstance(error, BSTreeError)
        assert isinstance(error.__cause__, RecursionError)
        assert "recursion limit" in caplog.text

        # Iterative helpers still see exactly the keys inserted before the failure
        assert count_nodes(tree) == failed_key
        assert list(tree.keys()) == list(range(failed_key))
        assert TreeTestHelper(tree).is_valid_bst()

    def test_tree_stays_usable_after_failure(self):
        tree = OrderedTree()
        failed_key, _ = self.fill_until_too_deep(tree)

        # Shallow positions are unaffected
        tree.insert(Entry(-1, "left of root"))
        assert tree.retrieve(-1) == Entry(-1, "left of root")
        assert tree.remove(0)
        assert list(tree.keys())[:2] == [-1, 1]

        # Iterative operations work at any height
        assert show_structure(tree).count("\n") == failed_key - 1
        tree.clear()
        assert tree.is_empty()
