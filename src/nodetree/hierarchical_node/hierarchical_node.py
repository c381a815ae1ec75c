"""Leaf and container nodes sharing one composite interface."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Tuple

from anytree import Node

from nodetree.exceptions import InvalidOperation
from nodetree.types import NodeKind

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


class HierarchicalNode(Node, ABC):  # type: ignore
    """Base class for every node of a composite tree.

    Extends anytree.Node so that parent/child bookkeeping, single-parent ownership
    and loop detection come from anytree, while rendering and mutation dispatch on
    the concrete variant. Client code can therefore render or grow a tree without
    knowing whether it holds a leaf or a container.

    Nodes are created detached; the only way to put a node into a tree is through
    add_child (or the mkdir/touch conveniences) on a container.

    Attributes:
        name (str): The node's display name. Never empty; sibling duplicates are allowed.
        kind (NodeKind): Which variant this node is.
        parent (Optional[HierarchicalNode]): The owning container, or None for a root.
        children (tuple[HierarchicalNode, ...]): The child nodes in insertion order.

    Example:
        >>> root = Container("/")
        >>> home = root.mkdir("home")
        >>> _ = home.touch("notes.txt")
        >>> list(root.render(indent="  "))
        ['/:', '  home:', '    notes.txt']
    """

    kind: NodeKind

    def __init__(self, name: str) -> None:
        """Initialize a detached node.

        Args:
            name: The node's name. Must be a non-empty string.

        Raises:
            ValueError: If name is empty or not a string.
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Node name must be a non-empty string, got {name!r}")
        super().__init__(name)

    @property
    def is_leaf(self) -> bool:
        """True if this node is terminal and can never hold children.

        Unlike anytree's structural check, an empty container is not a leaf.
        """
        return self.kind is NodeKind.LEAF

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    @property
    @abstractmethod
    def label(self) -> str:
        """The single display line for this node on its own."""

    def render(self, indent: str = DEFAULT_INDENT) -> Iterator[str]:
        """Generate the display lines for this node and everything beneath it.

        Every call returns a fresh generator, so rendering an unchanged tree twice
        produces identical output.

        Leaves contribute their name and containers a "<name>:" header followed by
        their children, one indent deeper. The walk keeps its own stack, so tree
        depth is not bounded by the interpreter's recursion limit.

        Args:
            indent: The string prepended once per nesting level. Defaults to four spaces.

        Yields:
            One display line at a time, without trailing newlines.
        """
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            yield f"{indent * level}{node.label}"
            stack.extend((child, level + 1) for child in reversed(node.children))

    @abstractmethod
    def add_child(self, child: "HierarchicalNode") -> "HierarchicalNode":
        """Append a detached node to the end of this node's children.

        Args:
            child: The node to attach.

        Returns:
            The attached child.

        Raises:
            InvalidOperation: If this node cannot hold children, or the child cannot
                be attached here. No state changes in that case.
        """

    @abstractmethod
    def remove_child(self, child: "HierarchicalNode") -> "HierarchicalNode":
        """Detach a direct child, returning it as the root of its own tree.

        Raises:
            InvalidOperation: If this node cannot hold children or child is not one of them.
        """

    def mkdir(self, name: str) -> "Container":
        """Create an empty container named name and attach it as the last child.

        Returns:
            The new container, ready for further mkdir/touch calls.

        Raises:
            InvalidOperation: If this node is a leaf.
        """
        container = Container(name)
        self.add_child(container)
        return container

    def touch(self, name: str) -> "Leaf":
        """Create a leaf named name and attach it as the last child.

        Returns:
            The new leaf.

        Raises:
            InvalidOperation: If this node is a leaf.
        """
        leaf = Leaf(name)
        self.add_child(leaf)
        return leaf

    def _pre_attach(self, parent: Node) -> None:
        # Called by anytree before any attachment, whichever setter triggered it.
        if isinstance(parent, Leaf):
            raise InvalidOperation("cannot add a child to a terminal node", node=parent)


class Leaf(HierarchicalNode):
    """A terminal node, such as a file.

    Example:
        >>> leaf = Leaf("configfile")
        >>> list(leaf.render())
        ['configfile']
        >>> leaf.touch("nested")
        Traceback (most recent call last):
            ...
        nodetree.exceptions.InvalidOperation: cannot add a child to a terminal node
    """

    kind = NodeKind.LEAF

    @property
    def label(self) -> str:
        return self.name

    @property
    def children(self) -> Tuple[Node, ...]:
        # A foreign anytree node can still set parent=leaf; a leaf never reports it.
        return ()

    @children.setter
    def children(self, children: Iterable[Node]) -> None:
        Node.children.fset(self, children)

    @children.deleter
    def children(self) -> None:
        Node.children.fdel(self)

    def add_child(self, child: HierarchicalNode) -> HierarchicalNode:
        raise InvalidOperation("cannot add a child to a terminal node", node=self)

    def remove_child(self, child: HierarchicalNode) -> HierarchicalNode:
        raise InvalidOperation("cannot remove a child from a terminal node", node=self)

    def _pre_attach_children(self, children: Tuple[Node, ...]) -> None:
        if children:
            raise InvalidOperation("cannot add a child to a terminal node", node=self)


class Container(HierarchicalNode):
    """A node holding an ordered sequence of exclusively owned children, such as a directory.

    Example:
        >>> root = Container("/")
        >>> _ = root.mkdir("etc")
        >>> _ = root.touch("configfile")
        >>> print("\\n".join(root.render()))
        /:
            etc:
            configfile
    """

    kind = NodeKind.CONTAINER

    @property
    def label(self) -> str:
        return f"{self.name}:"

    def add_child(self, child: HierarchicalNode) -> HierarchicalNode:
        if not isinstance(child, HierarchicalNode):
            raise TypeError(f"Expected a HierarchicalNode, got {type(child).__name__}")
        if child.parent is not None:
            raise InvalidOperation(
                f"{child.name!r} is already attached to {child.parent.name!r}; remove it first", node=self
            )
        # A detached child can only close a cycle if it is the root of this tree
        if self.root is child:
            raise InvalidOperation(f"attaching {child.name!r} under {self.name!r} would create a cycle", node=self)

        child.parent = self
        logger.debug("Attached %s %r to %r", child.kind.value, child.name, self.name)
        return child

    def remove_child(self, child: HierarchicalNode) -> HierarchicalNode:
        if not any(c is child for c in self.children):
            raise InvalidOperation(f"{getattr(child, 'name', child)!r} is not a child of {self.name!r}", node=self)

        child.parent = None
        logger.debug("Detached %s %r from %r", child.kind.value, child.name, self.name)
        return child

    def _pre_attach_children(self, children: Tuple[Node, ...]) -> None:
        for child in children:
            if not isinstance(child, HierarchicalNode):
                raise TypeError(f"Expected a HierarchicalNode, got {type(child).__name__}")
