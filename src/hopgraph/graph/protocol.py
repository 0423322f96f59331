"""PathGraph protocol -- the call contract consumers of the engine rely on.

Public API:
    PathGraph: Runtime-checkable protocol implemented by ``Graph``.
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, Sequence, runtime_checkable

from .types import GraphSource, NodeHandle, Path


@runtime_checkable
class PathGraph(Protocol):
    """Interface used by loaders and demo code that drive a graph engine.

    Failures are reported through False/None results; none of these
    methods raise for an invalid insertion or an unanswerable query.
    """

    # ── building ──────────────────────────────────────────────

    def build_from(self, source: GraphSource) -> bool:
        """Insert all nodes then all edges; False at the first failure."""
        ...

    def add_node(self, node_id: Hashable) -> bool:
        """Add a unique node. False if it already exists."""
        ...

    def add_edge(self, source: Hashable, target: Hashable, data: Any) -> bool:
        """Add a unique directed edge between existing nodes."""
        ...

    # ── queries ───────────────────────────────────────────────

    def trace(self, source: Hashable, target: Hashable) -> Path | None:
        """Shortest hop-count path, or None."""
        ...

    def load_edges(self, path: Sequence[NodeHandle]) -> list[Any] | None:
        """Payloads along *path*, or None for a malformed path."""
        ...

    def contains_cycles(self) -> bool:
        """True if the graph has a directed cycle."""
        ...

    # ── cache controls ────────────────────────────────────────

    def clear_cache(self) -> None:
        """Drop every cached path."""
        ...

    def toggle_cache(self, enabled: bool) -> None:
        """Enable or disable caching; clears the cache."""
        ...

    def optimize_trace(self) -> bool:
        """Derive the path length hint from the cache."""
        ...


__all__ = ["PathGraph"]
