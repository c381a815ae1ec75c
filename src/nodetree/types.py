from enum import Enum


class NodeKind(str, Enum):
    """Enumeration of the node variants that make up a hierarchical tree.

    Attributes:
        LEAF: Terminal node that never holds children (e.g. a file)
        CONTAINER: Node holding an ordered sequence of children (e.g. a directory)
    """

    LEAF = "leaf"
    CONTAINER = "container"
