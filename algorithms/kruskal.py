"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Global edge sort + Union–Find cycle check.

Emits steps for:
  1. Sorting the edges (stable: equal weights keep their original order)
  2. Each edge examined                                  →  CONSIDERING
  3. Endpoints in different sets → union, accept         →  edge / nodes ACCEPTED
  4. Endpoints already connected → would close a cycle   →  REJECTED
  5. Final pass (see algorithms.spanning)

Stops as soon as n-1 edges are accepted.  On a disconnected graph the
accepted edges form a spanning forest, one tree per component.
Direction is ignored: an MST is about connectivity.
"""

from typing import List

from graph import Graph, Edge, NodeState, EdgeState
from algorithms.step import Trace, TraceBuilder, format_number
from algorithms.spanning import finish_spanning_forest
from algorithms.union_find import UnionFind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                          # 0
    "    mst ← []",                                 # 1
    "    edges ← sort(graph.edges, by weight)",     # 2
    "    dsu ← DisjointSetUnion(graph.nodes)",      # 3
    "    for (u, v, w) in edges:",                  # 4
    "        if dsu.find(u) ≠ dsu.find(v):",        # 5
    "            dsu.union(u, v)",                  # 6
    "            mst.add((u, v, w))",               # 7
    "        if |mst| = |V| - 1: break",            # 8
    "    return mst",                               # 9
]


def compute_mst_by_sorted_edges(graph: Graph) -> Trace:
    tb = TraceBuilder()

    if not graph.nodes:
        tb.message("Graph is empty.", "Error: Graph is empty for Kruskal's algorithm.")
        return tb.build()

    tb.message(
        "Starting Kruskal's Algorithm",
        "Kruskal's algorithm initialized to find Minimum Spanning Tree.",
    )

    sorted_edges = sorted(graph.edges.values(), key=lambda e: e.weight)
    tb.message(
        "Edges sorted by weight.",
        "All graph edges have been sorted by their weights: "
        + (", ".join(f"{_ends(graph, e)}({format_number(e.weight)})" for e in sorted_edges) or "no edges")
        + ".",
    )

    dsu = UnionFind(graph.nodes)
    accepted: List[Edge] = []
    goal = len(graph.nodes) - 1

    for edge in sorted_edges:
        if len(accepted) == goal:
            break
        ends = _ends(graph, edge)
        tb.highlight_edge(
            edge.id, EdgeState.CONSIDERING,
            f"Edge {ends} (weight {format_number(edge.weight)}) is being considered.",
        )
        if dsu.union(edge.source, edge.target):
            accepted.append(edge)
            tb.highlight_edge(
                edge.id, EdgeState.ACCEPTED,
                f"Edge {ends} connects two different components, so it is added to the MST "
                f"({len(accepted)} of at most {goal} edges).",
            )
            for endpoint in (edge.source, edge.target):
                tb.highlight_node(
                    endpoint, NodeState.ACCEPTED,
                    f"Node {graph.nodes[endpoint].display_label} is connected by MST edge {ends}.",
                )
        else:
            tb.highlight_edge(
                edge.id, EdgeState.REJECTED,
                f"Edge {ends} would form a cycle: both endpoints are already in the same component. Skipped.",
            )

    finish_spanning_forest(tb, graph, accepted, dsu.component_count, "Kruskal's Algorithm")
    return tb.build()


def _ends(graph: Graph, edge: Edge) -> str:
    return f"{graph.nodes[edge.source].display_label}-{graph.nodes[edge.target].display_label}"
