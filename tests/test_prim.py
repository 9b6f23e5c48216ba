"""Tests for the frontier-growth minimum-spanning-tree engine."""

from collections import Counter

from graph import NodeState, EdgeState
from algorithms.prim import compute_mst_by_growing_frontier
from algorithms.step import HighlightEdge, HighlightNode, Message
from engine import replay, summarize

from conftest import colors_of, make_graph


def test_scenario_b_accepts_three_cheapest(scenario_b):
    trace = compute_mst_by_growing_frontier(scenario_b)
    summary = summarize("prim", scenario_b, trace)

    assert sorted(summary.tree_edges) == ["pq", "qr", "rs"]
    assert summary.tree_weight == 6


def test_starts_from_first_node(scenario_b):
    trace = compute_mst_by_growing_frontier(scenario_b)

    first_highlight = next(s for s in trace if isinstance(s, HighlightNode))
    assert first_highlight.node_id == "P"
    assert first_highlight.color == NodeState.START.value


def test_each_edge_is_pooled_once(scenario_b):
    trace = compute_mst_by_growing_frontier(scenario_b)

    pooled = Counter(
        s.edge_id for s in trace
        if isinstance(s, HighlightEdge) and s.color == EdgeState.CANDIDATE.value
    )
    assert pooled
    assert max(pooled.values()) == 1


def test_stale_candidate_is_discarded():
    g = make_graph(
        ["A", "B", "C", "D"],
        [("ab", "A", "B", 1), ("ac", "A", "C", 2), ("bc", "B", "C", 1), ("cd", "C", "D", 5)],
    )

    trace = compute_mst_by_growing_frontier(g)

    assert colors_of(trace, HighlightEdge, "ac") == [
        EdgeState.CANDIDATE.value,
        EdgeState.CONSIDERING.value,
        EdgeState.REJECTED.value,
        EdgeState.NEUTRAL.value,
    ]
    assert sorted(summarize("prim", g, trace).tree_edges) == ["ab", "bc", "cd"]


def test_new_node_joins_after_accepted_edge(scenario_b):
    trace = list(compute_mst_by_growing_frontier(scenario_b))

    for i, step in enumerate(trace):
        if isinstance(step, HighlightEdge) and step.color == EdgeState.ACCEPTED.value:
            joined = trace[i + 1]
            assert isinstance(joined, HighlightNode)
            assert joined.color == NodeState.ACCEPTED.value


def test_disconnected_graph_restarts_for_full_forest(disconnected):
    trace = compute_mst_by_growing_frontier(disconnected)
    summary = summarize("prim", disconnected, trace)

    roots = [s.node_id for s in trace if isinstance(s, HighlightNode) and s.color == NodeState.START.value]
    assert roots == ["A", "C", "E"]
    assert sorted(summary.tree_edges) == ["ab", "cd"]
    assert summary.is_forest is True
    restarts = [s for s in trace if isinstance(s, Message) and "starting a new tree" in s.text]
    assert len(restarts) == 2
    assert "forest of 3 trees" in trace[-1].text


def test_every_node_ends_in_tree(disconnected):
    final = replay(disconnected, compute_mst_by_growing_frontier(disconnected))

    assert set(final.node_colors.values()) == {NodeState.IN_TREE.value}


def test_direction_is_ignored():
    g = make_graph(["A", "B", "C"], [("ba", "B", "A", 1), ("cb", "C", "B", 1)], directed=True)

    summary = summarize("prim", g, compute_mst_by_growing_frontier(g))

    assert sorted(summary.tree_edges) == ["ba", "cb"]


def test_single_node_graph_is_a_tree():
    g = make_graph(["A"], [])

    trace = compute_mst_by_growing_frontier(g)

    assert "Minimum spanning tree has 0 edge(s)" in trace[-1].text


def test_empty_graph_is_a_single_message(empty_graph):
    trace = compute_mst_by_growing_frontier(empty_graph)

    assert len(trace) == 1
    assert trace[0].text == "Graph is empty."
