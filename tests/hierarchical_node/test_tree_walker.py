"""Unit tests for the tree walker helpers."""

import pytest

from nodetree.exceptions import NodeNotFoundError
from nodetree.hierarchical_node.hierarchical_node import Container, Leaf
from nodetree.hierarchical_node.tree_walker import (
    count_containers,
    count_leaves,
    get_tree_representation,
    iterate_leaves,
    iterate_nodes,
    locate,
    stream_tree_representation,
)


def test_iterate_nodes_pre_order(sample_tree):
    paths = [path for path, _ in iterate_nodes(sample_tree)]
    assert paths == ["home", "home/user1", "home/user1/file1", "etc", "configfile"]


def test_iterate_nodes_from_subtree(sample_tree):
    home = sample_tree.children[0]
    assert [path for path, _ in iterate_nodes(home)] == ["user1", "user1/file1"]


def test_iterate_leaves(sample_tree):
    leaves = list(iterate_leaves(sample_tree))
    assert [path for path, _ in leaves] == ["home/user1/file1", "configfile"]
    assert all(isinstance(node, Leaf) for _, node in leaves)


def test_counts(sample_tree):
    assert count_leaves(sample_tree) == 2
    assert count_containers(sample_tree) == 3


def test_counts_on_single_nodes():
    assert count_leaves(Container("empty")) == 0
    assert count_containers(Container("empty")) == 0
    assert count_leaves(Leaf("file")) == 0


def test_locate(sample_tree):
    assert locate(sample_tree, "home/user1").name == "user1"
    assert locate(sample_tree, "/home/user1/file1").is_leaf
    assert locate(sample_tree, "home/../etc").name == "etc"
    assert locate(sample_tree, "") is sample_tree


def test_locate_then_touch(sample_tree):
    """Test growing the tree beneath a located container rather than by path."""
    locate(sample_tree, "home/user1").touch("file2")
    assert [path for path, _ in iterate_leaves(sample_tree)] == [
        "home/user1/file1",
        "home/user1/file2",
        "configfile",
    ]


def test_locate_first_duplicate_wins():
    root = Container("root")
    first = root.mkdir("dup")
    root.mkdir("dup")
    assert locate(root, "dup") is first


@pytest.mark.parametrize("path", ["missing", "home/user2", "configfile/child"])
def test_locate_missing(sample_tree, path):
    with pytest.raises(NodeNotFoundError) as exc_info:
        locate(sample_tree, path)
    assert exc_info.value.path == path


def test_stream_tree_representation(sample_tree):
    assert list(stream_tree_representation(sample_tree)) == [
        "/",
        "├── home/",
        "│   └── user1/",
        "│       └── file1",
        "├── etc/",
        "└── configfile",
    ]


def test_get_tree_representation():
    root = Container("src")
    root.touch("main.py")
    assert get_tree_representation(root) == "src/\n└── main.py"


def test_walkers_do_not_modify_tree(sample_tree):
    before = list(sample_tree.render())
    list(iterate_nodes(sample_tree))
    list(stream_tree_representation(sample_tree))
    locate(sample_tree, "home")
    assert list(sample_tree.render()) == before


def test_locate_cannot_reach_names_containing_separator():
    root = Container("root")
    slashed = root.touch("a/b")

    with pytest.raises(NodeNotFoundError):
        locate(root, "a/b")
    assert [node for _, node in iterate_nodes(root)] == [slashed]
