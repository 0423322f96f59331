"""Value types shared by the graph engine.

Public API:
    NodeHandle: Immutable handle to a node inside one Graph.
    EdgeSpec: A (source, target, data) triple used for bulk loading.
    GraphSource: Bulk-load input of node identities plus ordered edges.
    Path: Alias for the tuple of handles returned by a trace.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Sequence


@dataclass(frozen=True)
class NodeHandle:
    """An immutable reference to a node in a graph's node arena.

    Attributes:
        index: Stable position of the node in the arena of its graph.
        node_id: The identity the node was inserted with.
    """

    index: int
    node_id: Hashable

    def __repr__(self) -> str:
        return f"NodeHandle({self.node_id!r})"


Path = tuple[NodeHandle, ...]


@dataclass(frozen=True)
class EdgeSpec:
    """A directed, payload-bearing edge description.

    Attributes:
        source: Identity of the tail node.
        target: Identity of the head node.
        data: Arbitrary payload stored on the edge.
    """

    source: Hashable
    target: Hashable
    data: Any = None


@dataclass
class GraphSource:
    """Input for ``Graph.build_from``.

    Nodes are inserted first (their order does not matter), then edges in
    the given order. Edges may be given as ``EdgeSpec`` instances or plain
    ``(source, target, data)`` tuples.

    Attributes:
        nodes: Node identities to insert.
        edges: Edges to insert after all nodes.
    """

    nodes: Sequence[Hashable] = field(default_factory=list)
    edges: Sequence[EdgeSpec] = field(default_factory=list)

    def __post_init__(self):
        self.nodes = list(self.nodes)
        self.edges = [e if isinstance(e, EdgeSpec) else EdgeSpec(*e) for e in self.edges]


__all__ = ["NodeHandle", "EdgeSpec", "GraphSource", "Path"]
