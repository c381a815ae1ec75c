"""Free-function interface over hierarchical nodes.

Each function delegates to the matching node method, so callers can work with
trees without holding a reference to the node classes. Failed mutations raise
InvalidOperation and leave the tree untouched.

Example:
    >>> root = new_container("/")
    >>> home = mkdir(root, "home")
    >>> _ = touch(home, "file1")
    >>> list(render(root, indent="  "))
    ['/:', '  home:', '    file1']
"""

from typing import Iterator

from nodetree.hierarchical_node.hierarchical_node import DEFAULT_INDENT, Container, HierarchicalNode, Leaf


def new_leaf(name: str) -> Leaf:
    """Create a detached leaf node."""
    return Leaf(name)


def new_container(name: str) -> Container:
    """Create a detached, empty container node."""
    return Container(name)


def render(node: HierarchicalNode, indent: str = DEFAULT_INDENT) -> Iterator[str]:
    """Lazily generate the indented display lines of node and its descendants."""
    return node.render(indent)


def add_child(container: HierarchicalNode, child: HierarchicalNode) -> HierarchicalNode:
    """Attach child as the last child of container.

    Raises:
        InvalidOperation: If container is a leaf, or child is already attached or
            would close a cycle.
    """
    return container.add_child(child)


def mkdir(container: HierarchicalNode, name: str) -> Container:
    return container.mkdir(name)


def touch(container: HierarchicalNode, name: str) -> Leaf:
    return container.touch(name)


def remove_child(container: HierarchicalNode, child: HierarchicalNode) -> HierarchicalNode:
    """Detach child from container and return it.

    Raises:
        InvalidOperation: If container is a leaf or child is not one of its children.
    """
    return container.remove_child(child)
