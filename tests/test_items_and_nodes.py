"""Tests for Entry, KeyedItem, BSTreeNode and the TreeTestHelper fixture."""

import copy

import pytest

from bstreelib import OrderedTree, Entry, KeyedItem, BSTreeNode, default_key
from bstreelib.testing import TreeTestHelper


class Version(KeyedItem):
    """Item keyed by a (major, minor) tuple."""

    def __init__(self, major, minor, label):
        self.major = major
        self.minor = minor
        self.label = label

    def get_key(self):
        return (self.major, self.minor)


class TestEntry:

    def test_accessors(self):
        entry = Entry("k", 3)
        assert entry.get_key() == entry.key == "k"
        assert entry.get_value() == entry.value == 3

    def test_equality_uses_key_and_value(self):
        assert Entry(1, "a") == Entry(1, "a")
        assert Entry(1, "a") != Entry(1, "b")
        assert Entry(1, "a") != (1, "a")

    def test_copy(self):
        entry = Entry(1, [1, 2])
        duplicate = copy.copy(entry)
        assert duplicate == entry
        assert duplicate is not entry

    def test_repr(self):
        assert repr(Entry(1, "a")) == "Entry(1, 'a')"


class TestKeyedItem:

    def test_keyed_item_subclass_in_tree(self):
        tree = OrderedTree([Version(1, 2, "b"), Version(1, 0, "a"), Version(2, 0, "c")])

        assert list(tree.keys()) == [(1, 0), (1, 2), (2, 0)]
        assert tree.retrieve((1, 2)).label == "b"

    def test_keyed_item_is_abstract(self):
        with pytest.raises(TypeError):
            KeyedItem()

    def test_default_key(self):
        assert default_key(Entry(7)) == 7


class TestNode:

    def test_leaf(self):
        node = BSTreeNode(Entry(1))
        assert node.is_leaf()
        assert node.child_count() == 0
        assert list(node.children()) == []

    def test_children_left_first(self):
        left, right = BSTreeNode(Entry(1)), BSTreeNode(Entry(3))
        node = BSTreeNode(Entry(2), left, right)

        assert not node.is_leaf()
        assert node.child_count() == 2
        assert list(node.children()) == [left, right]

    def test_no_parent_link(self):
        assert not hasattr(BSTreeNode(Entry(1)), 'parent')


class TestTreeTestHelper:

    def test_summary(self, sample_tree):
        assert TreeTestHelper(sample_tree).get_summary() == {
            'count': 7,
            'height': 2,
            'is_empty': False,
            'is_valid': True,
        }

    def test_shape_of_empty_tree(self, empty_tree):
        assert TreeTestHelper(empty_tree).shape() is None

    def test_detects_broken_ordering(self, sample_tree):
        sample_tree.root.left.item = Entry(99)
        assert not TreeTestHelper(sample_tree).is_valid_bst()

    def test_depth_of(self, sample_tree):
        helper = TreeTestHelper(sample_tree)
        assert helper.depth_of(50) == 0
        assert helper.depth_of(70) == 1
        assert helper.depth_of(60) == 2
        assert helper.depth_of(65) is None

    def test_shares_nodes(self, sample_tree):
        helper = TreeTestHelper(sample_tree)
        assert helper.shares_nodes_with(sample_tree)
        assert not helper.shares_nodes_with(OrderedTree())
        assert len(helper.node_ids()) == 7
