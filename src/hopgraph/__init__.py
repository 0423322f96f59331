"""hopgraph: Directed graph engine with shortest hop-count paths and cycle detection."""

__version__ = "0.1.0"

from .config import GraphConfig
from .exceptions import (
    CacheUnavailableError,
    DuplicateEdgeError,
    DuplicateNodeError,
    GraphError,
    MalformedPathError,
    MissingEndpointError,
    NodeNotFoundError,
    PathNotFoundError,
)
from .graph import (
    EdgeSpec,
    Graph,
    GraphSource,
    NodeHandle,
    Path,
    PathGraph,
)

__all__ = [
    # Engine
    "Graph",
    "PathGraph",
    "GraphConfig",
    # Value types
    "NodeHandle",
    "EdgeSpec",
    "GraphSource",
    "Path",
    # Exceptions
    "GraphError",
    "DuplicateNodeError",
    "DuplicateEdgeError",
    "NodeNotFoundError",
    "MissingEndpointError",
    "PathNotFoundError",
    "MalformedPathError",
    "CacheUnavailableError",
]
