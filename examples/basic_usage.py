"""Basic usage example for hopgraph."""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from hopgraph import EdgeSpec, Graph, GraphSource

GRAPH_IMAGE = r"""
                  +------------------+
                  |                  v
       +--------->B-------+          I
       |          ^       v
       |          |       E<---+
       |          |       |    |
       |          C<------+    |
       |                       +---H<-+
       |                              |
   +-->A----------------->F-------+   |
   |   |                  ^       v   |
   |   |                  |       G---+
   |   +--------->D-------+
   |              |
   +--------------+
"""

EDGES = [
    ("A", "F"), ("A", "D"), ("A", "B"), ("D", "A"), ("D", "F"), ("F", "G"),
    ("G", "H"), ("H", "E"), ("E", "C"), ("C", "B"), ("B", "I"), ("B", "E"),
]


def main():
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("hopgraph - Basic Usage Example")
    print("=" * 60)
    print(GRAPH_IMAGE)

    # 1. Build the graph
    print("1. Building graph...")
    graph = Graph()
    source = GraphSource(
        nodes=list("ABCDEFGHI"),
        edges=[EdgeSpec(a, b, f"{a}->{b}") for a, b in EDGES],
    )
    if not graph.build_from(source):
        print("   Failed to build graph")
        return 1
    print(f"   {graph}")

    # 2. Trace a path
    print("\n2. Finding path from 'A' to 'C'...")
    path = graph.trace("A", "C")
    if path is None:
        print("   No path found")
        return 1
    print(f"   Retrieved a path of {len(path)} nodes, {len(path) - 1} hops")
    print(f"   Nodes: {' '.join(str(h.node_id) for h in path)}")

    # 3. Load the payloads along the path
    print("\n3. Loading edge data...")
    print(f"   {' '.join(graph.load_edges(path))}")

    # 4. Cycle detection
    print("\n4. Checking for cycles...")
    print(f"   Contains cycles: {graph.contains_cycles()}")

    # 5. Cache
    print("\n5. Path cache...")
    print(f"   Cached paths: {graph.cached_paths}")
    if graph.optimize_trace():
        print(f"   Path length hint: {graph.path_length_hint}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
