"""Graph -- the directed-graph engine.

Owns the node and edge stores, the path cache and the cycle flag. Every
public query and mutation goes through this class.

The engine is not thread-safe. Confine an instance to one thread or
serialize all calls on it externally.

Public API:
    Graph: Directed graph with hop-count path search, payload retrieval,
        cycle detection and a path cache.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Generic, Hashable, Iterator, Sequence, TypeVar

from ..config import GraphConfig
from ..exceptions import (
    CacheUnavailableError,
    DuplicateEdgeError,
    DuplicateNodeError,
    MalformedPathError,
    MissingEndpointError,
    NodeNotFoundError,
    PathNotFoundError,
)
from . import cycles, traversal
from .cache import PathCache
from .store import EdgeStore, NodeStore, pair_key
from .types import EdgeSpec, GraphSource, NodeHandle, Path

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
D = TypeVar("D")


class Graph(Generic[K, D]):
    """A directed graph of unique node identities and payload-bearing edges.

    Nodes and edges can only be added. Adding either clears the path cache
    and resets the cycle flag, so no query observes a stale topology.

    The ``add_*``, ``trace``, ``load_edges`` and ``optimize_trace`` methods
    report failure through False/None. Their raising counterparts
    (``insert_node``, ``insert_edge``, ``find_path``, ``edges_along``) say
    why an operation failed.

    Args:
        config: Engine settings; defaults to ``GraphConfig()``.
        cache_enabled: Overrides ``config.cache_enabled`` when given.
    """

    def __init__(
        self,
        config: GraphConfig | None = None,
        *,
        cache_enabled: bool | None = None,
    ) -> None:
        config = config or GraphConfig()
        if cache_enabled is not None:
            config = replace(config, cache_enabled=cache_enabled)
        self._config = config

        self._nodes = NodeStore()
        self._edges = EdgeStore()
        self._cache = PathCache(
            enabled=config.cache_enabled,
            length_hint=config.default_trace_reservation,
        )
        self._contains_cycles = False

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"cache_enabled={self._cache.enabled})"
        )

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[K]:
        return iter(self._nodes)

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ── bulk load ─────────────────────────────────────────────

    def build_from(self, source: GraphSource) -> bool:
        """Insert all nodes of *source*, then all of its edges in order.

        Stops at the first insertion that fails. Insertions made before the
        failure stay in place.

        Returns:
            True if every node and edge was inserted.
        """
        for node_id in source.nodes:
            if not self.add_node(node_id):
                logger.debug("Failed to add node %r during bulk load", node_id)
                return False
        for edge in source.edges:
            if not self.add_edge(edge.source, edge.target, edge.data):
                logger.debug(
                    "Failed to add edge %r -> %r during bulk load",
                    edge.source,
                    edge.target,
                )
                return False
        return True

    # ── node operations ───────────────────────────────────────

    def insert_node(self, node_id: K) -> NodeHandle:
        """Add a node and return its handle.

        Raises:
            DuplicateNodeError: If *node_id* already exists.
        """
        index = self._nodes.add(node_id)
        self._topology_changed()
        return self._nodes.handle(index)

    def add_node(self, node_id: K) -> bool:
        """Add a node with no edges. Returns False if *node_id* exists."""
        try:
            self.insert_node(node_id)
        except DuplicateNodeError as e:
            logger.debug("%s", e)
            return False
        return True

    def get_node(self, node_id: K) -> NodeHandle | None:
        """Handle for *node_id*, or None if not found."""
        index = self._nodes.lookup(node_id)
        if index is None:
            return None
        return self._nodes.handle(index)

    def has_node(self, node_id: K) -> bool:
        return node_id in self._nodes

    def successors(self, node_id: K) -> list[NodeHandle]:
        """Handles of the out-neighbours of *node_id*, in insertion order.

        Returns an empty list for an unknown identity.
        """
        index = self._nodes.lookup(node_id)
        if index is None:
            return []
        return [self._nodes.handle(i) for i in self._nodes.out(index)]

    def nodes(self) -> Iterator[K]:
        """Node identities in insertion order."""
        return iter(self._nodes)

    # ── edge operations ───────────────────────────────────────

    def insert_edge(self, source: K, target: K, data: D) -> None:
        """Add a directed edge ``source -> target`` carrying *data*.

        Raises:
            MissingEndpointError: If either endpoint does not exist.
            DuplicateEdgeError: If the ordered pair already has an edge.
        """
        dst = self._nodes.lookup(target)
        if dst is None:
            raise MissingEndpointError(f"Target node not found: {target!r}")
        src = self._nodes.lookup(source)
        if src is None:
            raise MissingEndpointError(f"Source node not found: {source!r}")

        key = pair_key(src, dst)
        if key in self._edges:
            raise DuplicateEdgeError(f"Edge already exists: {source!r} -> {target!r}")

        self._edges.add(key, data)
        self._nodes.link(src, dst)
        self._topology_changed()

    def add_edge(self, source: K, target: K, data: D) -> bool:
        """Add a directed edge. Returns False on a missing endpoint or duplicate."""
        try:
            self.insert_edge(source, target, data)
        except (MissingEndpointError, DuplicateEdgeError) as e:
            logger.debug("%s", e)
            return False
        return True

    def has_edge(self, source: K, target: K) -> bool:
        src = self._nodes.lookup(source)
        dst = self._nodes.lookup(target)
        if src is None or dst is None:
            return False
        return pair_key(src, dst) in self._edges

    def get_edge_data(self, source: K, target: K, default: Any = None) -> D | Any:
        """Payload of the edge ``source -> target``, or *default*."""
        src = self._nodes.lookup(source)
        dst = self._nodes.lookup(target)
        if src is None or dst is None:
            return default
        return self._edges.get(pair_key(src, dst), default)

    def edges(self) -> Iterator[EdgeSpec]:
        """All edges in insertion order."""
        for (src, dst), data in self._edges.items():
            yield EdgeSpec(self._nodes.node_id(src), self._nodes.node_id(dst), data)

    # ── path queries ──────────────────────────────────────────

    def find_path(self, source: K, target: K) -> Path:
        """Shortest hop-count path from *source* to *target*.

        For ``source == target`` the result is the shortest cycle through
        *source*; a lone node does not count as a path to itself.

        Returns:
            Node handles from *source* to *target*, inclusive. With caching
            on, repeated calls return the same tuple object.

        Raises:
            NodeNotFoundError: If either identity does not exist.
            PathNotFoundError: If *target* is unreachable from *source*.
        """
        dst = self._nodes.require(target)
        src = self._nodes.require(source)

        key = pair_key(src, dst)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r -> %r", source, target)
            return cached

        logger.debug(
            "Tracing %r -> %r (expected length %d)",
            source,
            target,
            self.path_length_hint,
        )
        describe = self._nodes.node_id if self._config.debug_trace else None
        indices = traversal.find_path(self._nodes.adjacency(), src, dst, describe=describe)
        if indices is None:
            raise PathNotFoundError(f"No path from {source!r} to {target!r}")

        path = tuple(self._nodes.handle(i) for i in indices)
        self._cache.put(key, path)
        return path

    def trace(self, source: K, target: K) -> Path | None:
        """Like ``find_path`` but returns None when there is no path or a node is missing."""
        try:
            return self.find_path(source, target)
        except (NodeNotFoundError, PathNotFoundError) as e:
            logger.debug("Trace failed: %s", e)
            return None

    def edges_along(self, path: Sequence[NodeHandle]) -> list[D]:
        """Payloads of the edges crossed by *path*, in order.

        Raises:
            MalformedPathError: If *path* has fewer than two nodes, holds a
                handle from another graph, or crosses a pair with no edge.
        """
        if len(path) < 2:
            raise MalformedPathError(f"Path needs at least two nodes, got {len(path)}")

        for handle in path:
            if not isinstance(handle, NodeHandle) or not self._nodes.owns(handle):
                raise MalformedPathError(f"Unknown node handle in path: {handle!r}")

        payloads: list[D] = []
        for a, b in zip(path, path[1:]):
            key = pair_key(a.index, b.index)
            if key not in self._edges:
                raise MalformedPathError(f"No edge {a.node_id!r} -> {b.node_id!r}")
            payloads.append(self._edges.get(key))
        return payloads

    def load_edges(self, path: Sequence[NodeHandle]) -> list[D] | None:
        """Like ``edges_along`` but returns None for a malformed path."""
        try:
            return self.edges_along(path)
        except MalformedPathError as e:
            logger.debug("%s", e)
            return None

    # ── cycles ────────────────────────────────────────────────

    def contains_cycles(self) -> bool:
        """True if some edge ``u -> v`` has a path back from ``v`` to ``u``.

        A positive answer is remembered until the topology changes.
        """
        if self._contains_cycles:
            return True
        if cycles.contains_cycles(self._nodes, self.trace):
            self._contains_cycles = True
        return self._contains_cycles

    # ── cache controls ────────────────────────────────────────

    @property
    def cache_enabled(self) -> bool:
        return self._cache.enabled

    @property
    def cached_paths(self) -> int:
        """Number of paths currently cached."""
        return len(self._cache)

    @property
    def path_length_hint(self) -> int:
        """Expected node count of the next uncached trace."""
        if not self._cache.enabled:
            return self._config.default_trace_reservation
        return self._cache.length_hint

    def clear_cache(self) -> None:
        self._cache.clear()

    def toggle_cache(self, enabled: bool) -> None:
        """Enable or disable the path cache. Clears it either way."""
        self._cache.toggle(enabled)

    def optimize_trace(self) -> bool:
        """Set the path length hint to the average cached path length.

        Returns:
            False if caching is disabled or nothing is cached.
        """
        try:
            self._cache.optimize()
        except CacheUnavailableError as e:
            logger.debug("Trace optimization unavailable: %s", e)
            return False
        return True

    # ── internals ─────────────────────────────────────────────

    def _topology_changed(self) -> None:
        self._cache.clear()
        self._contains_cycles = False


__all__ = ["Graph"]
