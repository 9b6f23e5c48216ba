"""
samples.py — Real-World Application Graphs
===========================================
Small hand-made scenarios, one or two per algorithm family, that the
service can load as a starting point.

Every scenario is built with a fresh IdSequence, so node ids are
"node-1", "node-2", … in the order listed and the returned sequence
continues numbering if the user edits the graph afterwards.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from graph.graph import Graph
from graph.ids import IdSequence


@dataclass(frozen=True)
class SampleGraph:
    key:         str
    description: str
    algorithm:   str                   # registry key the scenario is meant for
    graph:       Graph
    ids:         IdSequence
    start_node:  Optional[str] = None  # shortest-path scenarios only

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "description": self.description,
            "algorithm":   self.algorithm,
            "startNode":   self.start_node,
            "graph":       self.graph.to_dict(),
            **self.ids.to_dict(),
        }


def _build(
    nodes: List[Tuple[str, float, float]],
    edges: List[Tuple[int, int, float]],
    directed: bool = False,
) -> Tuple[Graph, IdSequence]:
    """nodes: (label, x, y); edges: (1-based source, 1-based target, weight)."""
    g = Graph(directed=directed)
    ids = IdSequence()
    node_ids: List[str] = []
    for label, x, y in nodes:
        nid, ids = ids.next_node_id()
        g.create_node(x, y, label=label, node_id=nid)
        node_ids.append(nid)
    for s, t, w in edges:
        eid, ids = ids.next_edge_id()
        g.create_edge(node_ids[s - 1], node_ids[t - 1], weight=w, edge_id=eid)
    return g, ids


def _gps_navigation() -> SampleGraph:
    g, ids = _build(
        [("City Hall", 100, 200), ("Market", 250, 100), ("Park", 280, 300),
         ("Library", 450, 150), ("Museum", 480, 350)],
        [(1, 2, 5), (1, 3, 3), (2, 4, 2), (3, 2, 1), (3, 5, 7), (4, 5, 4)],
    )
    return SampleGraph(
        key="gps-navigation",
        description="GPS: Find the shortest route from City Hall to the Museum.",
        algorithm="dijkstra", graph=g, ids=ids, start_node="node-1",
    )


def _network_routing() -> SampleGraph:
    g, ids = _build(
        [("Router A", 50, 150), ("Router B", 200, 50), ("Router C", 220, 250),
         ("Router D", 350, 100), ("Router E", 380, 300), ("Router F", 500, 180)],
        [(1, 2, 10), (1, 3, 15), (2, 4, 12), (3, 5, 10), (4, 3, 2), (4, 6, 1), (5, 6, 5)],
        directed=True,
    )
    return SampleGraph(
        key="network-routing-ospf",
        description="Network: Find the fastest data path from Router A to Router F.",
        algorithm="dijkstra", graph=g, ids=ids, start_node="node-1",
    )


def _power_grid() -> SampleGraph:
    g, ids = _build(
        [("Sub 1", 100, 100), ("Sub 2", 300, 150), ("Sub 3", 150, 300),
         ("Sub 4", 400, 250), ("Sub 5", 250, 400)],
        [(1, 2, 5), (1, 3, 3), (2, 3, 4), (2, 4, 6), (3, 4, 7), (3, 5, 5), (4, 5, 2)],
    )
    return SampleGraph(
        key="network-design-power-cable",
        description="Power Grid: Connect all substations with minimum cable length.",
        algorithm="prim", graph=g, ids=ids,
    )


def _clustering() -> SampleGraph:
    # three loose clusters joined by two long edges
    g, ids = _build(
        [("P1", 50, 50), ("P2", 70, 80), ("P3", 100, 60),
         ("P4", 200, 200), ("P5", 230, 220), ("P6", 210, 180),
         ("P7", 350, 350), ("P8", 380, 320)],
        [(1, 2, 3), (2, 3, 2), (4, 5, 3), (5, 6, 2), (7, 8, 4), (3, 6, 15), (6, 7, 18)],
    )
    return SampleGraph(
        key="clustering-conceptual",
        description="Clustering: Identify data groups using MST (remove longest edges).",
        algorithm="prim", graph=g, ids=ids,
    )


def _circuit_board() -> SampleGraph:
    g, ids = _build(
        [("CPU", 150, 150), ("RAM", 300, 100), ("GPU", 180, 300), ("SSD", 350, 250)],
        [(1, 2, 10), (1, 3, 12), (1, 4, 15), (2, 3, 8), (2, 4, 5), (3, 4, 9)],
    )
    return SampleGraph(
        key="circuit-board-design",
        description="Circuit Board: Connect components with minimum wire.",
        algorithm="kruskal", graph=g, ids=ids,
    )


def _islands() -> SampleGraph:
    g, ids = _build(
        [("Isla A", 100, 100), ("Isla B", 300, 80), ("Isla C", 150, 250),
         ("Isla D", 400, 300), ("Isla E", 250, 400)],
        [(1, 2, 20), (1, 3, 10), (2, 3, 15), (2, 4, 30), (3, 4, 25), (3, 5, 5), (4, 5, 18)],
    )
    return SampleGraph(
        key="connecting-islands-bridges",
        description="Islands: Connect all islands with minimum bridge cost.",
        algorithm="kruskal", graph=g, ids=ids,
    )


_BUILDERS = {
    "gps-navigation":             _gps_navigation,
    "network-routing-ospf":       _network_routing,
    "network-design-power-cable": _power_grid,
    "clustering-conceptual":      _clustering,
    "circuit-board-design":       _circuit_board,
    "connecting-islands-bridges": _islands,
}


def get_sample(key: str) -> Optional[SampleGraph]:
    """Freshly built sample by key, or None.  Each call returns a new Graph."""
    builder = _BUILDERS.get(key)
    return builder() if builder else None


def list_samples() -> Dict[str, str]:
    """{key: description} in display order."""
    return {key: builder().description for key, builder in _BUILDERS.items()}
