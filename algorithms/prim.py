"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows one tree outward from a start node, always taking the cheapest
edge that leaves the tree.

Candidate pool: min-heap of (weight, insertion order, edge id).  The
insertion counter breaks weight ties in the order edges were pooled,
and each edge is pooled at most once.  A popped edge whose far end
joined the tree in the meantime is a stale candidate and is discarded.

Disconnected graphs: once the pool runs dry while nodes remain, growth
restarts from the first uncovered node (graph order), so the result is
a full spanning forest, matching Kruskal.

Direction is ignored: an MST is about connectivity.
"""

import heapq
from typing import List, Set, Tuple

from graph import Graph, Edge, NodeState, EdgeState
from algorithms.step import Trace, TraceBuilder, format_number
from algorithms.spanning import finish_spanning_forest


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Prim(graph):",                               # 0
    "    for root in V not yet in tree:",             # 1
    "        tree.add(root); pool ← edges(root)",     # 2
    "        while pool is not empty:",               # 3
    "            (u, v, w) ← pool.pop_min()",         # 4
    "            if v in tree: continue",             # 5
    "            tree.add(v); mst.add((u, v, w))",    # 6
    "            pool.push(edges(v) leaving tree)",   # 7
    "    return mst",                                 # 8
]


def compute_mst_by_growing_frontier(graph: Graph) -> Trace:
    tb = TraceBuilder()

    if not graph.nodes:
        tb.message("Graph is empty.", "Error: Graph is empty for Prim's algorithm.")
        return tb.build()

    tb.message(
        "Starting Prim's Algorithm",
        "Prim's algorithm initialized to find Minimum Spanning Tree.",
    )

    n = len(graph.nodes)
    in_tree:  Set[str]                     = set()
    pooled:   Set[str]                     = set()
    pool:     List[Tuple[float, int, str]] = []
    accepted: List[Edge]                   = []
    tree_count = 0
    seq = 0

    def add_candidates(node_id: str) -> None:
        nonlocal seq
        for edge in graph.incident_edges(node_id):
            if edge.id in pooled or edge.opposite(node_id) in in_tree:
                continue
            pooled.add(edge.id)
            heapq.heappush(pool, (edge.weight, seq, edge.id))
            seq += 1
            tb.highlight_edge(
                edge.id, EdgeState.CANDIDATE,
                f"Edge {_ends(graph, edge)} (weight {format_number(edge.weight)}) leaves the tree "
                f"and is added to the candidate pool.",
            )

    for root in graph.nodes:
        if len(in_tree) == n:
            break
        if root in in_tree:
            continue

        tree_count += 1
        root_label = graph.nodes[root].display_label
        if tree_count > 1:
            tb.message(
                f"No candidate edges left; starting a new tree from node {root_label}.",
                f"The previous tree cannot grow any further, so the graph is disconnected. "
                f"Prim's algorithm restarts from unreached node {root_label}.",
            )
        in_tree.add(root)
        tb.highlight_node(root, NodeState.START, f"Node {root_label} selected as starting point.")
        add_candidates(root)

        while pool and len(in_tree) < n:
            _, _, eid = heapq.heappop(pool)
            edge = graph.edges[eid]
            ends = _ends(graph, edge)
            tb.highlight_edge(
                edge.id, EdgeState.CONSIDERING,
                f"Edge {ends} (weight {format_number(edge.weight)}) is the cheapest candidate in the pool.",
            )

            if edge.source in in_tree and edge.target in in_tree:
                tb.highlight_edge(
                    edge.id, EdgeState.REJECTED,
                    f"Edge {ends} is stale: both endpoints are already in the tree. Discarded.",
                )
                continue

            new_node = edge.target if edge.source in in_tree else edge.source
            in_tree.add(new_node)
            accepted.append(edge)
            tb.highlight_edge(
                edge.id, EdgeState.ACCEPTED,
                f"Edge {ends} is the cheapest edge leaving the tree, so it is added to the MST.",
            )
            tb.highlight_node(
                new_node, NodeState.ACCEPTED,
                f"Node {graph.nodes[new_node].display_label} joins the tree "
                f"({len(in_tree)} of {n} nodes covered).",
            )
            add_candidates(new_node)

    finish_spanning_forest(tb, graph, accepted, tree_count, "Prim's Algorithm")
    return tb.build()


def _ends(graph: Graph, edge: Edge) -> str:
    return f"{graph.nodes[edge.source].display_label}-{graph.nodes[edge.target].display_label}"
