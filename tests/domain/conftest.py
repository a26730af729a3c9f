"""Domain layer test fixtures - plain elements, no external dependencies.

Function-scoped so each test mutates its own collection.
"""

from unittest.mock import Mock

import pytest

from tests.fixtures.models import Node, make_nodes, node_text


@pytest.fixture
def extract_text():
    """Extractor reading the node's text attribute."""
    return node_text


@pytest.fixture
def counting_extractor():
    """Extractor that records how often it is called."""
    return Mock(side_effect=node_text)


@pytest.fixture
def fruits():
    """Mixed-prefix collection for prefix/suffix filtering."""
    return make_nodes("apple", "banana", "avocado")


@pytest.fixture
def numbers():
    """Numeric-text collection for threshold filtering."""
    return make_nodes("3", "5", "9", "2")


@pytest.fixture
def letters():
    """Four-element collection for pagination."""
    return make_nodes("a", "b", "c", "d")


@pytest.fixture
def ranked_duplicates():
    """Collection with duplicate keys, tagged to reveal input order."""
    return [
        Node(text="2", tag="first-two"),
        Node(text="1", tag="first-one"),
        Node(text="2", tag="second-two"),
        Node(text="1", tag="second-one"),
        Node(text="2", tag="third-two"),
    ]
