"""Cycle detection built on path search.

Public API:
    contains_cycles: Probe every edge for a return path.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable

from .store import NodeStore

logger = logging.getLogger(__name__)


def contains_cycles(
    nodes: NodeStore,
    trace: Callable[[Hashable, Hashable], Any | None],
) -> bool:
    """Return True if any edge ``u -> v`` has a path back from ``v`` to ``u``.

    The forward edge plus the return path close a loop. Self-loops are
    found by the ``trace(u, u)`` probe.

    Args:
        nodes: Node store whose adjacency is probed.
        trace: Path query used for each probe; a non-None result counts as
            a return path.
    """
    for index in range(len(nodes)):
        node_id = nodes.node_id(index)
        for neighbor in nodes.out(index):
            neighbor_id = nodes.node_id(neighbor)
            if trace(neighbor_id, node_id) is not None:
                logger.debug("Cycle through edge %r -> %r", node_id, neighbor_id)
                return True
    return False


__all__ = ["contains_cycles"]
