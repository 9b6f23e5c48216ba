"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Label-setting single-source shortest paths.

Emits steps for:
  1. Initialise every distance to ∞, the start to 0
  2. Select the unvisited node with the smallest finite distance  →  ACTIVE
  3. Each relaxation attempt                                      →  edge CONSIDERING
  4. Successful relaxation                                        →  new label, node UPDATED
  5. Final pass: start / reachable / unreachable nodes, tree / neutral edges

Selection scans the nodes in graph order and keeps the first minimum,
so ties always resolve to the earlier node and the trace is
reproducible.  Edges are tried in the order they were added.

Correctness note: Dijkstra requires non-negative weights.  Negative
weights are not rejected and not detected; the trace simply shows what
the greedy selection does with them.
"""

from typing import Dict, List, Optional, Set, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms.step import Trace, TraceBuilder, format_number


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← {v: ∞ for v in V}",                 # 1
    "    dist[source] ← 0",                         # 2
    "    visited ← {}",                             # 3
    "    while some unvisited v has dist[v] < ∞:",  # 4
    "        u ← unvisited v with min dist[v]",     # 5
    "        visited.add(u)",                       # 6
    "        for (neighbour, w) in adj(u):",        # 7
    "            if dist[u] + w < dist[neighbour]:",# 8
    "                dist[neighbour] ← dist[u] + w",# 9
    "                parent[neighbour] ← u",        # 10
    "    return dist, parent",                      # 11
]


def compute_shortest_paths(graph: Graph, start_node_id: str) -> Trace:
    tb = TraceBuilder()

    if not graph.nodes:
        tb.message("Graph is empty.", "Error: Graph is empty for Dijkstra's algorithm.")
        return tb.build()

    if not isinstance(start_node_id, str) or start_node_id not in graph.nodes:
        tb.message(
            "Start node not found.",
            f"Error: start node '{start_node_id}' does not exist, so Dijkstra's algorithm cannot run.",
        )
        return tb.build()

    INF = float("inf")
    start_label = graph.nodes[start_node_id].display_label

    tb.message(
        f"Starting Dijkstra's Algorithm from node {start_label}",
        f"Dijkstra's algorithm initialized starting from node {start_label}.",
    )

    dist:    Dict[str, float]                 = {}
    parent:  Dict[str, Tuple[str, str]]       = {}   # node → (predecessor, edge id)
    visited: Set[str]                         = set()

    # --- initialise ---
    for nid in graph.nodes:
        dist[nid] = INF
        tb.highlight_node(nid, NodeState.INITIAL, f"Node {_name(graph, nid)} initialized with infinite distance.")
        tb.set_label(nid, format_number(INF))

    dist[start_node_id] = 0
    tb.set_label(start_node_id, "0")
    tb.highlight_node(start_node_id, NodeState.START, f"Node {start_label} (start node) distance set to 0.")

    # --- main loop ---
    while True:
        u = _closest_unvisited(graph, dist, visited)
        if u is None:
            break
        visited.add(u)
        tb.highlight_node(
            u, NodeState.ACTIVE,
            f"Node {_name(graph, u)} has the smallest tentative distance ({format_number(dist[u])}) "
            f"among unvisited nodes; it is now being processed and its distance is final.",
        )

        for nbr, edge in graph.neighbours(u):
            if nbr in visited:
                continue
            candidate = dist[u] + edge.weight
            tb.highlight_edge(
                edge.id, EdgeState.CONSIDERING,
                f"Edge {_name(graph, u)}-{_name(graph, nbr)} (weight {format_number(edge.weight)}) considered "
                f"for relaxation: {format_number(dist[u])} + {format_number(edge.weight)} = "
                f"{format_number(candidate)} vs current {format_number(dist[nbr])}.",
            )
            if candidate < dist[nbr]:
                dist[nbr]   = candidate
                parent[nbr] = (u, edge.id)
                tb.set_label(nbr, format_number(candidate))
                tb.highlight_node(
                    nbr, NodeState.UPDATED,
                    f"Distance to {_name(graph, nbr)} updated to {format_number(candidate)} "
                    f"via {_name(graph, u)}.",
                )

    # --- final pass ---
    reachable = [nid for nid in graph.nodes if dist[nid] < INF]
    tb.message(
        f"Dijkstra's Algorithm complete. {len(reachable)} of {len(graph.nodes)} nodes reachable from {start_label}.",
        "Dijkstra's algorithm finished. Final distances: "
        + ", ".join(f"{_name(graph, nid)}={format_number(dist[nid])}" for nid in graph.nodes) + ".",
    )

    for nid in graph.nodes:
        if nid == start_node_id:
            tb.highlight_node(nid, NodeState.START, f"Start node {start_label} remains highlighted. Final distance: 0.")
        elif dist[nid] < INF:
            tb.highlight_node(
                nid, NodeState.REACHED,
                f"Node {_name(graph, nid)} is reachable. Final distance: {format_number(dist[nid])}.",
            )
        else:
            tb.highlight_node(nid, NodeState.UNREACHABLE, f"Node {_name(graph, nid)} is not reachable from the start node.")

    tree = _tree_edges(parent, reachable, start_node_id)
    for edge in graph.edges.values():
        ends = f"{_name(graph, edge.source)}-{_name(graph, edge.target)}"
        if edge.id in tree:
            tb.highlight_edge(edge.id, EdgeState.TREE, f"Edge {ends} is part of the shortest-path tree.")
        else:
            tb.highlight_edge(edge.id, EdgeState.NEUTRAL, f"Edge {ends} is not part of the shortest-path tree.")

    return tb.build()


# ---------------------------------------------------------------------------
def _closest_unvisited(graph: Graph, dist: Dict[str, float], visited: Set[str]) -> Optional[str]:
    best: Optional[str] = None
    for nid in graph.nodes:
        if nid in visited or dist[nid] == float("inf"):
            continue
        if best is None or dist[nid] < dist[best]:
            best = nid
    return best


def _tree_edges(parent: Dict[str, Tuple[str, str]], reachable: List[str], start: str) -> Set[str]:
    """Walk every reachable node back to the start, collecting the edges used."""
    edges: Set[str] = set()
    done:  Set[str] = {start}
    for nid in reachable:
        cur = nid
        while cur not in done and cur in parent:
            done.add(cur)
            pred, eid = parent[cur]
            edges.add(eid)
            cur = pred
    return edges


def _name(graph: Graph, node_id: str) -> str:
    return graph.nodes[node_id].display_label
