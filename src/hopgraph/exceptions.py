"""Custom exceptions for hopgraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class DuplicateNodeError(GraphError):
    """Raised when a node identity is inserted twice."""


class DuplicateEdgeError(GraphError):
    """Raised when an edge already exists for an ordered node pair."""


class NodeNotFoundError(GraphError, KeyError):
    """Raised when an identity is absent from the node store."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages.
        return Exception.__str__(self)


class MissingEndpointError(NodeNotFoundError):
    """Raised when an edge references a node that was never inserted."""


class PathNotFoundError(GraphError):
    """Raised when a search exhausts every branch without reaching the target."""


class MalformedPathError(GraphError):
    """Raised when a path is too short or crosses a pair with no stored edge."""


class CacheUnavailableError(GraphError):
    """Raised when the path cache is disabled or empty."""
