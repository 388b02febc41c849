"""Shared fixtures for the bstreelib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import OrderedTree, Entry


# Insertion order used throughout the suite. Produces:
#
#            50
#          /    \
#        30      70
#       /  \    /  \
#     20   40  60   80
SAMPLE_KEYS = [50, 30, 70, 20, 40, 60, 80]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large randomized runs (deselect with -m 'not slow')")


def make_entry(key):
    """Entry whose value is derived from its key."""
    return Entry(key, f"value-{key}")


@pytest.fixture
def sample_tree():
    """Full three-level tree built from SAMPLE_KEYS."""
    return OrderedTree(make_entry(k) for k in SAMPLE_KEYS)


@pytest.fixture
def empty_tree():
    return OrderedTree()
