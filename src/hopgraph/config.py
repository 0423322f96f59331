"""Engine configuration for hopgraph.

Public API:
    GraphConfig: Immutable, validated settings for a Graph instance.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TRACE_RESERVATION = 5


@dataclass(frozen=True)
class GraphConfig:
    """Settings that control caching and diagnostics for a Graph.

    Attributes:
        cache_enabled: Memoize successful traces per ordered node pair.
        default_trace_reservation: Expected path length (in nodes) used for
            uncached searches until ``optimize_trace`` derives one from the
            cache.
        debug_trace: Emit per-neighbour search tracing at DEBUG level.
    """

    cache_enabled: bool = True
    default_trace_reservation: int = DEFAULT_TRACE_RESERVATION
    debug_trace: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.cache_enabled, bool):
            raise TypeError("cache_enabled must be bool")

        if not isinstance(self.debug_trace, bool):
            raise TypeError("debug_trace must be bool")

        # bool is an int subclass; reject it explicitly
        if (
            isinstance(self.default_trace_reservation, bool)
            or not isinstance(self.default_trace_reservation, int)
            or self.default_trace_reservation <= 0
        ):
            raise ValueError("default_trace_reservation must be positive integer")


__all__ = ["GraphConfig", "DEFAULT_TRACE_RESERVATION"]
