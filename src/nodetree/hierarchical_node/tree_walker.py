"""Traversal helpers written once against the HierarchicalNode interface.

These functions work on any subtree, whatever mix of leaves and containers it
holds, and never modify the tree they walk.
"""

import logging
from typing import Iterator, Tuple

from anytree import ContStyle, PreOrderIter, RenderTree, Resolver, ResolverError

from nodetree.exceptions import NodeNotFoundError
from nodetree.hierarchical_node.hierarchical_node import HierarchicalNode, Leaf

logger = logging.getLogger(__name__)

_resolver = Resolver("name")


def _relative_path(root: HierarchicalNode, node: HierarchicalNode) -> str:
    start = root.depth + 1
    return "/".join(n.name for n in node.path[start:])


def iterate_nodes(root: HierarchicalNode) -> Iterator[Tuple[str, HierarchicalNode]]:
    """Iterate over every descendant of root in pre-order.

    Children are visited in insertion order. The root itself is not yielded.

    Yields:
        Pairs of (relative_path, node), where relative_path joins the names below
        root with "/".

    Example:
        >>> from nodetree.hierarchical_node.hierarchical_node import Container
        >>> root = Container("/")
        >>> _ = root.mkdir("home").touch("file1")
        >>> [path for path, _ in iterate_nodes(root)]
        ['home', 'home/file1']
    """
    for node in PreOrderIter(root):
        if node is root:
            continue
        yield _relative_path(root, node), node


def iterate_leaves(root: HierarchicalNode) -> Iterator[Tuple[str, Leaf]]:
    """Iterate over the leaves beneath root, in the same order as iterate_nodes."""
    for path, node in iterate_nodes(root):
        if node.is_leaf:
            yield path, node


def count_leaves(root: HierarchicalNode) -> int:
    """Count the leaves beneath root."""
    return sum(1 for _ in iterate_leaves(root))


def count_containers(root: HierarchicalNode) -> int:
    """Count the containers beneath root, not including root itself."""
    return sum(1 for _, node in iterate_nodes(root) if node.is_container)


def locate(root: HierarchicalNode, path: str) -> HierarchicalNode:
    """Find the node at a "/"-separated path relative to root.

    "." and ".." segments are honoured and a leading "/" is ignored. When siblings
    share a name, the first one inserted wins. An empty path returns root. Paths are
    split on "/", so a node whose name contains "/" cannot be reached through locate;
    walk its parent's children instead.

    Args:
        root: The node the path is relative to.
        path: The relative path, e.g. "home/user1".

    Returns:
        The node found at path.

    Raises:
        NodeNotFoundError: If any segment of the path does not exist.

    Example:
        >>> from nodetree.hierarchical_node.hierarchical_node import Container
        >>> root = Container("/")
        >>> _ = root.mkdir("home").mkdir("user1")
        >>> locate(root, "home/user1").name
        'user1'
    """
    try:
        return _resolver.get(root, path.lstrip("/"))
    except ResolverError as e:
        logger.debug("Could not resolve %r from %r: %s", path, root.name, e)
        raise NodeNotFoundError(path) from e


def stream_tree_representation(root: HierarchicalNode) -> Iterator[str]:
    """Generate a tree-command style listing of root one line at a time.

    Containers are marked with a trailing "/" and children keep insertion order.

    Yields:
        Lines of the listing, including the connecting lines.

    Example:
        >>> from nodetree.hierarchical_node.hierarchical_node import Container
        >>> root = Container("src")
        >>> _ = root.touch("main.py")
        >>> _ = root.mkdir("utils").touch("helpers.py")
        >>> for line in stream_tree_representation(root):
        ...     print(line)
        src/
        ├── main.py
        └── utils/
            └── helpers.py
    """
    for prefix, _, node in RenderTree(root, style=ContStyle()):
        suffix = "/" if node.is_container and not node.name.endswith("/") else ""
        yield f"{prefix}{node.name}{suffix}"


def get_tree_representation(root: HierarchicalNode) -> str:
    """Get the complete tree-command style listing of root as a single string."""
    return "\n".join(stream_tree_representation(root))
