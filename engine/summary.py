"""
summary.py — Run Recorder & Analytics
======================================
Runs one algorithm, replays its trace to the end, and reads the result
back off the final display state for the analytics panel and
comparison mode.

Usage:
    trace, summary = record_run("kruskal", graph)
    summary.tree_weight        # total MST weight
    summary.is_forest          # disconnected input?

Comparison mode:
    _, left  = record_run("prim", graph)
    _, right = record_run("kruskal", graph)
    compare(left, right)  →  ComparisonResult
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple

from graph import Graph, NodeState, EdgeState
from algorithms import get_algorithm, run_algorithm
from algorithms.step import Message, Trace, INFINITY_LABEL
from engine.replay import DisplayState, replay


# ---------------------------------------------------------------------------
# Summary dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunSummary:
    algo_key:             str   = ""
    algo_label:           str   = ""
    start_node:           Optional[str] = None
    total_steps:          int   = 0
    message_count:        int   = 0
    wall_time_ms:         float = 0.0
    completed:            bool  = False      # False when the engine bailed out (empty graph, bad start)
    final_message:        str   = ""
    distances:            Dict[str, float] = field(default_factory=dict)   # single-source only
    tree_edges:           List[str] = field(default_factory=list)          # SP tree or MST edges
    tree_weight:          float = 0.0
    is_forest:            bool  = False      # MST only: input was disconnected
    negative_cycle_nodes: List[str] = field(default_factory=list)
    matrix:               Optional[List[list]] = None                      # all-pairs only
    warnings:             List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["distances"] = {k: (INFINITY_LABEL if v == float("inf") else v) for k, v in self.distances.items()}
        return data


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunSummary = field(default_factory=RunSummary)
    right: RunSummary = field(default_factory=RunSummary)
    # derived
    winner_steps:     str  = ""     # which run needed fewer steps
    same_tree_weight: bool = False  # MST runs must agree on total weight

    def to_dict(self) -> dict:
        return {
            "left":           self.left.to_dict(),
            "right":          self.right.to_dict(),
            "winnerSteps":    self.winner_steps,
            "sameTreeWeight": self.same_tree_weight,
        }


# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------
def record_run(key: str, graph: Graph, start_node_id: Optional[str] = None) -> Tuple[Trace, RunSummary]:
    """Run the engine, time it, and summarise the trace.  Unknown key → ValueError."""
    started = time.monotonic()
    trace = run_algorithm(key, graph, start_node_id)
    wall_ms = (time.monotonic() - started) * 1000

    summary = summarize(key, graph, trace, start_node_id)
    summary.wall_time_ms = round(wall_ms, 2)
    return trace, summary


def summarize(key: str, graph: Graph, trace: Trace, start_node_id: Optional[str] = None) -> RunSummary:
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")

    final = replay(graph, trace)
    messages = [s for s in trace if isinstance(s, Message)]

    summary = RunSummary(
        algo_key=info.key,
        algo_label=info.label,
        start_node=start_node_id if info.needs_start_node else None,
        total_steps=len(trace),
        message_count=len(messages),
        completed=len(trace) > 1,
        final_message=messages[-1].text if messages else "",
    )
    if graph.has_negative_edges() and not info.supports_negative:
        summary.warnings.append(
            f"{info.label} assumes non-negative edge weights; results on this graph may not be shortest paths."
        )
    if not summary.completed:
        return summary

    if info.needs_start_node:
        summary.distances = _distances(final)
    if info.needs_start_node or info.is_mst:
        summary.tree_edges = [eid for eid, color in final.edge_colors.items() if color == EdgeState.TREE.value]
        summary.tree_weight = sum(graph.edges[eid].weight for eid in summary.tree_edges)
    if info.is_mst:
        summary.is_forest = len(summary.tree_edges) < graph.node_count() - 1
    if info.is_all_pairs:
        summary.negative_cycle_nodes = [
            nid for nid, color in final.node_colors.items() if color == NodeState.NEGATIVE_CYCLE.value
        ]
        summary.matrix = [list(row) for row in final.matrix] if final.matrix is not None else None
    return summary


def _distances(state: DisplayState) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for nid, label in state.node_labels.items():
        out[nid] = float("inf") if label == INFINITY_LABEL else float(label)
    return out


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: RunSummary, right: RunSummary) -> ComparisonResult:
    """Given two summaries on the same graph, produce a ComparisonResult."""

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=left,
        right=right,
        winner_steps=winner(left.total_steps, right.total_steps, left.algo_label, right.algo_label),
        same_tree_weight=abs(left.tree_weight - right.tree_weight) < 1e-9,
    )
