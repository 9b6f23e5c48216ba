"""
spanning.py — Shared Minimum-Spanning-Tree Finish
==================================================
Kruskal and Prim end the same way: recolour the result and narrate
whether it is one spanning tree or a forest.
"""

from typing import List

from graph import Graph, Edge, NodeState, EdgeState
from algorithms.step import TraceBuilder, format_number


def total_weight(edges: List[Edge]) -> float:
    return sum(e.weight for e in edges)


def finish_spanning_forest(
    tb: TraceBuilder,
    graph: Graph,
    accepted: List[Edge],
    tree_count: int,
    algo_name: str,
) -> None:
    """
    Final pass:
      • every node → IN_TREE (isolated nodes are one-node trees of the forest)
      • accepted edges → TREE, every other edge → NEUTRAL
      • completion message: "tree" when tree_count == 1, otherwise "forest"
    """
    accepted_ids = {e.id for e in accepted}
    weight = format_number(total_weight(accepted))

    for nid, node in graph.nodes.items():
        tb.highlight_node(nid, NodeState.IN_TREE, f"Node {node.display_label} is part of the final spanning {_shape(tree_count)}.")

    for edge in graph.edges.values():
        ends = f"{graph.nodes[edge.source].display_label}-{graph.nodes[edge.target].display_label}"
        if edge.id in accepted_ids:
            tb.highlight_edge(edge.id, EdgeState.TREE, f"Edge {ends} (weight {format_number(edge.weight)}) is in the final MST.")
        else:
            tb.highlight_edge(edge.id, EdgeState.NEUTRAL, f"Edge {ends} is not used by the final MST.")

    if tree_count == 1:
        tb.message(
            f"{algo_name} complete. Minimum spanning tree has {len(accepted)} edge(s), total weight {weight}.",
            f"{algo_name} finished. The graph is connected and the minimum spanning tree "
            f"uses {len(accepted)} edge(s) with total weight {weight}.",
        )
    else:
        tb.message(
            f"{algo_name} complete. Graph is disconnected: minimum spanning forest of "
            f"{tree_count} trees, {len(accepted)} edge(s), total weight {weight}.",
            f"{algo_name} finished. The graph has {tree_count} connected components, so the result "
            f"is a spanning forest (one tree per component) with {len(accepted)} edge(s) "
            f"and total weight {weight}.",
        )


def _shape(tree_count: int) -> str:
    return "tree" if tree_count == 1 else "forest"
