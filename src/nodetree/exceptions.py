from typing import Any, Optional


class InvalidOperation(Exception):
    """
    Exception raised when a tree mutation is not allowed for the receiving node.

    This is raised when a child is added to (or removed from) a terminal node, when a
    node that already belongs to a tree is attached a second time, when an attachment
    would create a cycle, or when a node that is not a direct child is removed. The
    tree is left exactly as it was before the failing call.

    Attributes:
        node (Optional[Any]): The node the operation was aimed at, if known.
        message (str): Human-readable description of the failure.

    Example:
        >>> error = InvalidOperation("cannot add a child to a terminal node")
        >>> str(error)
        'cannot add a child to a terminal node'
        >>> error.node is None
        True
    """

    def __init__(self, message: str, node: Optional[Any] = None) -> None:
        """
        Initialize the exception with a message and the node involved.

        Args:
            message (str): Description of the rejected operation.
            node (Optional[Any]): The node that rejected the operation. Defaults to None.
        """
        self.message = message
        self.node = node
        super().__init__(message)


class NodeNotFoundError(LookupError):
    """
    Exception raised when a relative path does not resolve to a node in the tree.

    Attributes:
        path (str): The path that could not be resolved.

    Example:
        >>> error = NodeNotFoundError("home/user2")
        >>> str(error)
        'No node found at path: home/user2'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No node found at path: {path}")
