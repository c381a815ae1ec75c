"""Test configuration and fixtures for nodetree."""

import pytest

from nodetree.hierarchical_node.hierarchical_node import Container


@pytest.fixture
def sample_tree():
    """Build the small file-system-like tree used across tests.

    /
    ├── home/
    │   └── user1/
    │       └── file1
    ├── etc/
    └── configfile
    """
    root = Container("/")
    home = root.mkdir("home")
    user1 = home.mkdir("user1")
    user1.touch("file1")
    root.mkdir("etc")
    root.touch("configfile")
    return root
