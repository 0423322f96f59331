"""Pytest configuration and fixtures for hopgraph tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from hopgraph import Graph, GraphSource


def labelled_edges(*pairs: str) -> list[tuple[str, str, str]]:
    """Turn ``"A->B"`` strings into ``(source, target, label)`` triples."""
    edges = []
    for pair in pairs:
        source, target = pair.split("->")
        edges.append((source, target, pair))
    return edges


@dataclass
class ExpectedPath:
    source: str
    target: str
    hops: int = 0
    payloads: list[str] = field(default_factory=list)
    possible: bool = True


@dataclass
class ReferenceCase:
    name: str
    source: GraphSource
    paths: list[ExpectedPath]
    contains_cycles: bool = True


def _impossible(source: str, target: str) -> ExpectedPath:
    return ExpectedPath(source, target, possible=False)


# ── reference graphs ──────────────────────────────────────────


REFERENCE_CASES = [
    ReferenceCase(
        name="two_loops",
        source=GraphSource(
            nodes=list("ABCDEFGH"),
            edges=labelled_edges(
                "A->G", "A->E", "A->B", "E->A", "E->C", "C->H",
                "G->F", "H->F", "D->C", "F->B", "F->D",
            ),
        ),
        paths=[
            ExpectedPath("E", "C", 1, ["E->C"]),
            ExpectedPath("A", "C", 2, ["A->E", "E->C"]),
            ExpectedPath("G", "H", 4, ["G->F", "F->D", "D->C", "C->H"]),
            ExpectedPath("F", "H", 3, ["F->D", "D->C", "C->H"]),
            _impossible("F", "A"),
        ],
    ),
    ReferenceCase(
        name="self_loop_chain",
        source=GraphSource(
            nodes=list("ABCDE"),
            edges=labelled_edges("A->B", "B->B", "B->C", "C->D", "D->E"),
        ),
        paths=[
            ExpectedPath("B", "B", 1, ["B->B"]),
            _impossible("B", "A"),
            ExpectedPath("A", "C", 2, ["A->B", "B->C"]),
            ExpectedPath("A", "E", 4, ["A->B", "B->C", "C->D", "D->E"]),
        ],
    ),
    ReferenceCase(
        name="self_loop_shortcut",
        source=GraphSource(
            nodes=list("ABCDE"),
            edges=labelled_edges("A->B", "B->B", "B->C", "C->D", "D->E", "C->E"),
        ),
        paths=[
            ExpectedPath("B", "B", 1, ["B->B"]),
            ExpectedPath("A", "C", 2, ["A->B", "B->C"]),
            ExpectedPath("A", "E", 3, ["A->B", "B->C", "C->E"]),
            _impossible("X", "Y"),
            _impossible("Y", "Z"),
            _impossible("Z", "Z"),
        ],
    ),
    ReferenceCase(
        name="two_cycle_tail",
        source=GraphSource(
            nodes=list("ABCDEFG"),
            edges=labelled_edges(
                "A->G", "G->E", "E->G", "E->F", "F->D", "D->C", "D->B", "C->B",
            ),
        ),
        paths=[
            ExpectedPath("A", "B", 5, ["A->G", "G->E", "E->F", "F->D", "D->B"]),
            ExpectedPath("D", "B", 1, ["D->B"]),
            ExpectedPath("E", "G", 1, ["E->G"]),
            _impossible("B", "A"),
            _impossible("B", "A"),
            _impossible("X", "Y"),
            _impossible("Y", "Z"),
            _impossible("Z", "Z"),
        ],
    ),
    ReferenceCase(
        name="tree",
        source=GraphSource(
            nodes=list("ABCDEFGH"),
            edges=labelled_edges("A->B", "B->D", "B->E", "A->C", "C->F", "F->G", "G->H"),
        ),
        paths=[
            ExpectedPath("A", "H", 4, ["A->C", "C->F", "F->G", "G->H"]),
            ExpectedPath("A", "D", 2, ["A->B", "B->D"]),
            ExpectedPath("A", "E", 2, ["A->B", "B->E"]),
            ExpectedPath("F", "H", 2, ["F->G", "G->H"]),
            _impossible("E", "H"),
            _impossible("H", "A"),
            _impossible("X", "Y"),
            _impossible("Y", "Z"),
            _impossible("Z", "Z"),
        ],
        contains_cycles=False,
    ),
    ReferenceCase(
        name="single_component",
        source=GraphSource(
            nodes=list("ABCDEFGHI"),
            edges=labelled_edges(
                "A->F", "A->D", "A->B", "D->A", "D->F", "F->G",
                "G->H", "H->E", "E->C", "C->B", "B->I", "B->E",
            ),
        ),
        paths=[
            ExpectedPath("A", "I", 2, ["A->B", "B->I"]),
            ExpectedPath("D", "I", 3, ["D->A", "A->B", "B->I"]),
            ExpectedPath("F", "I", 6, ["F->G", "G->H", "H->E", "E->C", "C->B", "B->I"]),
            ExpectedPath("C", "E", 2, ["C->B", "B->E"]),
            _impossible("I", "F"),
        ],
    ),
    ReferenceCase(
        name="back_edge",
        source=GraphSource(
            nodes=list("ABCD"),
            edges=labelled_edges("A->D", "A->B", "A->C", "D->B", "D->A", "B->D"),
        ),
        paths=[
            ExpectedPath("A", "C", 1, ["A->C"]),
            ExpectedPath("B", "C", 3, ["B->D", "D->A", "A->C"]),
        ],
    ),
]


# ── fixtures ──────────────────────────────────────────────────


@pytest.fixture(params=REFERENCE_CASES, ids=lambda case: case.name)
def reference_case(request) -> ReferenceCase:
    """Each reference graph with its expected paths and cyclicity."""
    return request.param


@pytest.fixture
def graph() -> Graph:
    """An empty graph with caching enabled."""
    return Graph()


@pytest.fixture
def chain_graph() -> Graph:
    """Five nodes, a self-loop on B and a straight chain to E.

    Graph structure:
        A -> B -> C -> D -> E
             B -> B
    """
    g = Graph()
    assert g.build_from(
        GraphSource(
            nodes=list("ABCDE"),
            edges=labelled_edges("A->B", "B->B", "B->C", "C->D", "D->E"),
        )
    )
    return g


@pytest.fixture
def dag_graph() -> Graph:
    """A strict DAG over A..H with no back edges."""
    g = Graph()
    assert g.build_from(
        GraphSource(
            nodes=list("ABCDEFGH"),
            edges=labelled_edges(
                "A->B", "A->C", "B->D", "B->E", "C->E", "C->F",
                "D->G", "E->G", "F->H", "G->H",
            ),
        )
    )
    return g
