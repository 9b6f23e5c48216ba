"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "dijkstra": AlgoInfo(key, label, fn, pseudocode, tags, needs_start_node, …),
        …
    }

Every `fn` is a pure function Graph (+ start node) → Trace.  Adding an
algorithm is: write the engine, add one entry here.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

from graph import Graph
from algorithms.step import Trace
from algorithms.dijkstra       import compute_shortest_paths           as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.floyd_warshall import compute_all_pairs_shortest_paths as _fw,       PSEUDOCODE as _fw_pc
from algorithms.kruskal        import compute_mst_by_sorted_edges      as _kruskal,  PSEUDOCODE as _kru_pc
from algorithms.prim           import compute_mst_by_growing_frontier  as _prim,     PSEUDOCODE as _prim_pc


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dijkstra"
    label:             str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:                Callable[..., Trace]   # the engine
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)
    needs_start_node:  bool     = False       # single-source engines take start_node_id
    supports_negative: bool     = False       # meaningful on negative weights?
    is_all_pairs:      bool     = False       # emits UpdateMatrix steps
    is_mst:            bool     = False       # result is a spanning tree / forest
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "needsStartNode":   self.needs_start_node,
            "supportsNegative": self.supports_negative,
            "isAllPairs":       self.is_all_pairs,
            "isMst":            self.is_mst,
            "complexityTime":   self.complexity_time,
            "complexitySpace":  self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path", "single-source"],
        needs_start_node=True,
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Greedily settles the closest node. Optimal for non-negative weights.",
    ),

    "floyd-warshall": AlgoInfo(
        key="floyd-warshall", label="Floyd–Warshall", fn=_fw, pseudocode=_fw_pc,
        tags=["weighted", "shortest-path", "all-pairs", "negative-edges"],
        supports_negative=True, is_all_pairs=True,
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths via dynamic programming. Detects negative cycles.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=_kruskal, pseudocode=_kru_pc,
        tags=["weighted", "mst", "union-find"],
        supports_negative=True, is_mst=True,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Sorts all edges and keeps each one that does not close a cycle.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=_prim, pseudocode=_prim_pc,
        tags=["weighted", "mst", "greedy"],
        supports_negative=True, is_mst=True,
        complexity_time="O(E log E)", complexity_space="O(V + E)",
        description="Grows a tree from one node by always taking the cheapest edge leaving it.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def run_algorithm(key: str, graph: Graph, start_node_id: Optional[str] = None) -> Trace:
    """Dispatch to the engine registered under `key`.  Unknown key → ValueError."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")

    if info.needs_start_node:
        trace = info.fn(graph, start_node_id if start_node_id is not None else "")
    else:
        trace = info.fn(graph)

    logger.debug(
        "%s on %d nodes / %d edges produced %d steps",
        key, graph.node_count(), graph.edge_count(), len(trace),
    )
    return trace


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "run_algorithm",
]
