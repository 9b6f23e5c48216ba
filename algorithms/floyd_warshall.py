"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  UpdateMatrix steps carry the full
NxN distance grid so the UI can render it live.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Emits steps for:
  1. Initialisation (adjacency → matrix snapshot)
  2. Start of each k-round (k highlighted as the intermediate)
  3. Each (i, j) relaxation that actually changes the matrix
  4. End of each k-round (matrix snapshot if anything changed, colour reset)
  5. Negative-cycle report: any dist[i][i] < 0 after the triple loop

Rows / columns follow graph node order.  ∞ is float("inf") while
computing (absorbing under +, never improves anything) and becomes the
"∞" sentinel in snapshots.
"""

from typing import List

from graph import Graph, NodeState
from algorithms.step import Trace, TraceBuilder, format_number


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← adjacency matrix",                 # 1
    "    for k in 0 … n-1:",                       # 2
    "        for i in 0 … n-1:",                   # 3
    "            for j in 0 … n-1:",               # 4
    "                if dist[i][k]+dist[k][j]",    # 5
    "                      < dist[i][j]:",         # 6
    "                    dist[i][j] = …",          # 7
    "    for i in 0 … n-1:",                       # 8
    "        if dist[i][i] < 0: negative cycle",   # 9
    "    return dist",                             # 10
]


def compute_all_pairs_shortest_paths(graph: Graph) -> Trace:
    tb = TraceBuilder()

    INF    = float("inf")
    nodes  = graph.node_ids()
    n      = len(nodes)

    if n == 0:
        tb.message("Graph is empty.", "Error: Graph is empty for Floyd-Warshall algorithm.")
        return tb.build()

    labels = [graph.nodes[nid].display_label for nid in nodes]
    idx    = {nid: i for i, nid in enumerate(nodes)}

    tb.message(
        "Starting Floyd-Warshall Algorithm",
        "Floyd-Warshall algorithm initialized to find all-pairs shortest paths.",
    )

    # --- initialise dist matrix ---
    dist: List[List[float]] = [[INF] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0

    for edge in graph.edges.values():
        u, v = idx[edge.source], idx[edge.target]
        # parallel edges: cheapest wins
        if edge.weight < dist[u][v]:
            dist[u][v] = edge.weight
        if not edge.directed and edge.weight < dist[v][u]:
            dist[v][u] = edge.weight

    tb.update_matrix(dist, labels, "Distance matrix initialized with direct edge weights and 0s on the diagonal.")
    tb.message(f"Initialized {n}×{n} distance matrix from graph edges.")

    # ==============================================================
    # MAIN TRIPLE LOOP
    # ==============================================================
    for k in range(n):
        tb.message(f"Using node {labels[k]} as intermediate vertex.")
        tb.highlight_node(nodes[k], NodeState.ACTIVE, f"Considering paths via intermediate node {labels[k]}.")

        updates_this_round = 0
        for i in range(n):
            if dist[i][k] == INF:
                continue          # nothing can go through k from i
            for j in range(n):
                if dist[k][j] == INF:
                    continue
                new_dist = dist[i][k] + dist[k][j]
                if new_dist < dist[i][j]:
                    old_dist   = dist[i][j]
                    dist[i][j] = new_dist
                    updates_this_round += 1
                    tb.message(
                        f"Path {labels[i]}->{labels[k]}->{labels[j]} is shorter. "
                        f"dist[{labels[i]}][{labels[j]}] = {format_number(new_dist)}"
                    )
                    tb.highlight_node(
                        nodes[i], NodeState.PAIR,
                        f"Path from {labels[i]} to {labels[j]} through {labels[k]} is shorter: "
                        f"{format_number(dist[i][k])} + {format_number(dist[k][j])} = {format_number(new_dist)} "
                        f"< {format_number(old_dist)}. New distance: {format_number(new_dist)}.",
                    )
                    tb.highlight_node(
                        nodes[j], NodeState.PAIR,
                        f"Node {labels[j]} is the destination of the improved path from {labels[i]}.",
                    )

        if updates_this_round:
            tb.update_matrix(
                dist, labels,
                f"Distance matrix updated after considering paths through {labels[k]} "
                f"({updates_this_round} improvement(s)).",
            )
        tb.reset_colors()

    # ==============================================================
    # NEGATIVE CYCLES
    # ==============================================================
    negative = [i for i in range(n) if dist[i][i] < 0]
    for i in negative:
        tb.message(
            f"Negative weight cycle detected involving node {labels[i]}.",
            f"Algorithm detected a negative weight cycle: dist[{labels[i]}][{labels[i]}] = "
            f"{format_number(dist[i][i])} < 0, so shortest paths through {labels[i]} are undefined.",
        )
        tb.highlight_node(
            nodes[i], NodeState.NEGATIVE_CYCLE,
            f"Node {labels[i]} lies on a negative weight cycle.",
        )

    if negative:
        tb.message(
            f"Floyd-Warshall Algorithm complete. {len(negative)} node(s) lie on negative cycles; "
            f"distances involving them are not meaningful.",
            "Floyd-Warshall algorithm finished with negative cycles. The final matrix is shown but "
            "is not a valid shortest-path matrix.",
        )
    else:
        tb.message(
            "Floyd-Warshall Algorithm complete. Final distance matrix shown.",
            "Floyd-Warshall algorithm finished. Final matrix of shortest paths is displayed.",
        )

    return tb.build()
