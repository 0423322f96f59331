"""Directed-graph engine with hop-count path search and cycle detection.

Public API:
    Graph: The engine; owns nodes, edges, the path cache and cycle flag.
    PathGraph: Protocol describing the engine's call contract.
    NodeHandle: Immutable handle to a node in a traced path.
    EdgeSpec: A (source, target, data) edge description.
    GraphSource: Bulk-load input for ``Graph.build_from``.
    Path: Tuple of handles returned by ``Graph.trace``.
    NodeStore: Arena of nodes addressed by stable index.
    EdgeStore: Payload registry keyed by ordered node pair.
    PathCache: Memoized traces keyed by ordered node pair.
    find_path: The underlying index-level search.
    contains_cycles: Edge-probing cycle detector.
"""

from __future__ import annotations

from .cache import PathCache
from .cycles import contains_cycles
from .engine import Graph
from .protocol import PathGraph
from .store import EdgeStore, NodeStore, pair_key
from .traversal import find_path
from .types import EdgeSpec, GraphSource, NodeHandle, Path

__all__ = [
    "Graph",
    "PathGraph",
    "NodeHandle",
    "EdgeSpec",
    "GraphSource",
    "Path",
    "NodeStore",
    "EdgeStore",
    "pair_key",
    "PathCache",
    "find_path",
    "contains_cycles",
]
