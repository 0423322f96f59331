"""Node and edge storage for the graph engine.

Nodes live in an arena (a list) and are addressed by their stable integer
index; adjacency lists hold indices. Edges are keyed by the ordered pair of
endpoint indices.

Public API:
    PairKey: Ordered (source_index, target_index) key.
    pair_key: Build the key for an ordered pair of indices.
    NodeStore: Identity-keyed arena of nodes with outgoing adjacency.
    EdgeStore: Ordered-pair keyed registry of edge payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator

from ..exceptions import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError
from .types import NodeHandle

PairKey = tuple[int, int]


def pair_key(source: int, target: int) -> PairKey:
    """Key for the ordered pair ``source -> target``.

    A tuple keeps the pairing injective: ``(a, b)`` and ``(b, a)`` never
    collide.
    """
    return (source, target)


@dataclass
class _NodeRecord:
    node_id: Hashable
    out: list[int] = field(default_factory=list)


class NodeStore:
    """Registry of nodes and their outgoing adjacency.

    Records are appended and never removed, so an index handed out once
    stays valid for the store's lifetime.
    """

    def __init__(self) -> None:
        self._records: list[_NodeRecord] = []
        self._index: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, node_id: Hashable) -> bool:
        return node_id in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return (record.node_id for record in self._records)

    def add(self, node_id: Hashable) -> int:
        """Insert a node and return its index.

        Raises:
            DuplicateNodeError: If *node_id* is already present.
        """
        if node_id in self._index:
            raise DuplicateNodeError(f"Node already exists: {node_id!r}")
        idx = len(self._records)
        self._records.append(_NodeRecord(node_id))
        self._index[node_id] = idx
        return idx

    def lookup(self, node_id: Hashable) -> int | None:
        """Index of *node_id*, or None if not present."""
        return self._index.get(node_id)

    def require(self, node_id: Hashable) -> int:
        """Index of *node_id*.

        Raises:
            NodeNotFoundError: If *node_id* is not present.
        """
        idx = self._index.get(node_id)
        if idx is None:
            raise NodeNotFoundError(f"Node not found: {node_id!r}")
        return idx

    def node_id(self, index: int) -> Hashable:
        return self._records[index].node_id

    def handle(self, index: int) -> NodeHandle:
        return NodeHandle(index, self._records[index].node_id)

    def owns(self, handle: NodeHandle) -> bool:
        """True if *handle* was issued for a node of this store."""
        if not isinstance(handle.index, int):
            return False
        if not 0 <= handle.index < len(self._records):
            return False
        return self._records[handle.index].node_id == handle.node_id

    def link(self, source: int, target: int) -> None:
        self._records[source].out.append(target)

    def out(self, index: int) -> list[int]:
        """Outgoing neighbour indices of *index*, in insertion order."""
        return self._records[index].out

    def adjacency(self) -> list[list[int]]:
        """Adjacency lists for every node, indexed like the arena."""
        return [record.out for record in self._records]


class EdgeStore:
    """Registry mapping an ordered pair of node indices to an edge payload.

    Insertion order is preserved so edges iterate in the order they were
    added.
    """

    def __init__(self) -> None:
        self._payloads: dict[PairKey, Any] = {}

    def __len__(self) -> int:
        return len(self._payloads)

    def __contains__(self, key: PairKey) -> bool:
        return key in self._payloads

    def add(self, key: PairKey, data: Any) -> None:
        """Store *data* for *key*.

        Raises:
            DuplicateEdgeError: If an edge already exists for *key*.
        """
        if key in self._payloads:
            raise DuplicateEdgeError(f"Edge already exists for pair {key}")
        self._payloads[key] = data

    def get(self, key: PairKey, default: Any = None) -> Any:
        return self._payloads.get(key, default)

    def items(self) -> Iterator[tuple[PairKey, Any]]:
        return iter(self._payloads.items())


__all__ = ["PairKey", "pair_key", "NodeStore", "EdgeStore"]
