"""Shared fixtures and helpers for the trace-engine tests."""

from typing import Iterable, List, Sequence, Tuple

import pytest

from graph import Graph
from algorithms.step import HighlightEdge, HighlightNode, Step
from algorithms.union_find import UnionFind
from engine import summarize


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_graph(
    nodes: Sequence[str],
    edges: Iterable[Tuple],
    directed: bool = False,
) -> Graph:
    """nodes: ids; edges: (edge_id, source, target, weight) tuples."""
    g = Graph(directed=directed)
    for i, nid in enumerate(nodes):
        g.create_node(x=10.0 * i, y=0.0, node_id=nid)
    for eid, s, t, w in edges:
        g.create_edge(s, t, weight=w, edge_id=eid)
    return g


def colors_of(trace: Sequence[Step], kind, item_id: str) -> List[str]:
    """Every colour a node (kind=HighlightNode) or edge (kind=HighlightEdge) was painted, in order."""
    if kind is HighlightNode:
        return [s.color for s in trace if isinstance(s, HighlightNode) and s.node_id == item_id]
    return [s.color for s in trace if isinstance(s, HighlightEdge) and s.edge_id == item_id]


def component_count(graph: Graph) -> int:
    dsu = UnionFind(graph.nodes)
    for e in graph.edges.values():
        dsu.union(e.source, e.target)
    return dsu.component_count


def tree_edges(key: str, graph: Graph, trace) -> List[str]:
    return summarize(key, graph, trace).tree_edges


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def scenario_a() -> Graph:
    """A-B:1, B-C:2, A-C:4, C-D:1 (undirected)."""
    return make_graph(
        ["A", "B", "C", "D"],
        [("ab", "A", "B", 1), ("bc", "B", "C", 2), ("ac", "A", "C", 4), ("cd", "C", "D", 1)],
    )


@pytest.fixture
def scenario_b() -> Graph:
    """P-Q:1, Q-R:2, R-S:3, P-S:10, P-R:8 (undirected)."""
    return make_graph(
        ["P", "Q", "R", "S"],
        [("pq", "P", "Q", 1), ("qr", "Q", "R", 2), ("rs", "R", "S", 3), ("ps", "P", "S", 10), ("pr", "P", "R", 8)],
    )


@pytest.fixture
def scenario_c() -> Graph:
    """A->B:-5, B->A:-5 (directed negative cycle)."""
    return make_graph(
        ["A", "B"],
        [("ab", "A", "B", -5), ("ba", "B", "A", -5)],
        directed=True,
    )


@pytest.fixture
def disconnected() -> Graph:
    """Two edges and an isolated node: three components."""
    return make_graph(
        ["A", "B", "C", "D", "E"],
        [("ab", "A", "B", 1), ("cd", "C", "D", 2)],
    )


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()
