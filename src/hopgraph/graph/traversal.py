"""Shortest hop-count path search.

An exhaustive depth-first search with backtracking. Every outgoing branch
is explored; at each branch point the shortest successful sub-path wins,
ties going to the neighbour that comes first in adjacency order. Nodes on
the current search stack are excluded, so the search terminates on
cyclic graphs while sibling branches may still revisit a node.

The stack is an explicit list of frames, so path length is not bounded by
the interpreter's recursion limit. Worst-case cost is still exponential in
the number of nodes. Intended for small and medium graphs only.

Public API:
    find_path: Shortest path between two node indices, or None.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, Iterator, Sequence

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    node: int
    neighbors: Iterator[int]
    best: list[int] | None = None


def find_path(
    adjacency: Sequence[Sequence[int]],
    source: int,
    target: int,
    *,
    describe: Callable[[int], Hashable] | None = None,
) -> list[int] | None:
    """Find a minimum hop-count path from *source* to *target*.

    When ``source == target`` the empty path does not count: the result is
    the shortest cycle leaving *source* through its outgoing edges and
    returning to it.

    Args:
        adjacency: Outgoing neighbour indices for every node index.
        source: Index of the start node.
        target: Index of the goal node.
        describe: Optional index -> identity mapping. When given, every
            neighbour probe and every found sub-path is logged at DEBUG.

    Returns:
        Node indices from *source* to *target* inclusive, or None when no
        path exists.
    """
    on_stack: set[int] = {source}
    frames = [_Frame(source, iter(adjacency[source]))]

    while True:
        frame = frames[-1]
        neighbor = next(frame.neighbors, None)

        if neighbor is None:
            frames.pop()
            on_stack.discard(frame.node)
            branch = None if frame.best is None else [frame.node, *frame.best]
            if not frames:
                return branch
            _offer(frames[-1], branch, describe)
            continue

        if describe is not None:
            logger.debug("%r scanning %r", describe(frame.node), describe(neighbor))

        # Target check precedes the stack check so a cycle can close on the start node.
        if neighbor == target:
            _offer(frame, [neighbor], describe)
        elif neighbor not in on_stack:
            on_stack.add(neighbor)
            frames.append(_Frame(neighbor, iter(adjacency[neighbor])))


def _offer(
    frame: _Frame,
    branch: list[int] | None,
    describe: Callable[[int], Hashable] | None,
) -> None:
    """Keep *branch* as the frame's best sub-path if it is strictly shorter."""
    if branch is None:
        return

    if describe is not None:
        logger.debug("found sub-path: %s", " ".join(repr(describe(i)) for i in branch))

    if frame.best is None or len(branch) < len(frame.best):
        frame.best = branch


__all__ = ["find_path"]
