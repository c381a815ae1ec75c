"""In-memory composite trees of leaves and containers.

This package provides a small hierarchical node model in which terminal nodes
(leaves, like files) and container nodes (like directories) share one uniform
interface for rendering and mutation.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from nodetree.exceptions import InvalidOperation, NodeNotFoundError
from nodetree.hierarchical_node.hierarchical_node import DEFAULT_INDENT, Container, HierarchicalNode, Leaf
from nodetree.operations import add_child, mkdir, new_container, new_leaf, remove_child, render, touch
from nodetree.types import NodeKind

# Expose the version for programmatic use
try:
    __version__ = version("nodetree")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_INDENT",
    "Container",
    "HierarchicalNode",
    "InvalidOperation",
    "Leaf",
    "NodeKind",
    "NodeNotFoundError",
    "add_child",
    "mkdir",
    "new_container",
    "new_leaf",
    "remove_child",
    "render",
    "touch",
]
