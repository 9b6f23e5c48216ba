"""Tests for the all-pairs shortest-path engine."""

from graph import NodeState
from algorithms.floyd_warshall import compute_all_pairs_shortest_paths
from algorithms.step import HighlightNode, Message, ResetColors, UpdateMatrix
from engine import replay, summarize

from conftest import make_graph


def test_empty_graph_is_a_single_message(empty_graph):
    trace = compute_all_pairs_shortest_paths(empty_graph)

    assert len(trace) == 1
    assert isinstance(trace[0], Message)
    assert trace[0].text == "Graph is empty."


def test_seeded_matrix_uses_sentinel_for_missing_edges():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 3)])

    trace = compute_all_pairs_shortest_paths(g)
    seeded = next(s for s in trace if isinstance(s, UpdateMatrix))

    assert seeded.labels == ("A", "B", "C")
    assert seeded.matrix == (
        (0, 3, "∞"),
        (3, 0, "∞"),
        ("∞", "∞", 0),
    )


def test_infinity_never_improves():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 3)])

    final = replay(g, compute_all_pairs_shortest_paths(g))

    assert final.matrix[0][2] == "∞"
    assert final.matrix[2][0] == "∞"


def test_matrix_snapshot_only_after_improving_rounds():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 1), ("bc", "B", "C", 1)])

    trace = compute_all_pairs_shortest_paths(g)
    matrices = [s for s in trace if isinstance(s, UpdateMatrix)]

    # seed + round k=B (A-C and C-A improve); rounds A and C change nothing
    assert len(matrices) == 2
    assert matrices[-1].matrix[0][2] == 2
    assert matrices[-1].matrix[2][0] == 2
    assert sum(isinstance(s, ResetColors) for s in trace) == 3


def test_each_round_highlights_its_intermediate():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 1), ("bc", "B", "C", 1)])

    trace = compute_all_pairs_shortest_paths(g)
    active = [s.node_id for s in trace if isinstance(s, HighlightNode) and s.color == NodeState.ACTIVE.value]

    assert active == ["A", "B", "C"]


def test_improvement_pulses_both_endpoints():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 1), ("bc", "B", "C", 1)])

    trace = list(compute_all_pairs_shortest_paths(g))
    pulses = [s.node_id for s in trace if isinstance(s, HighlightNode) and s.color == NodeState.PAIR.value]

    assert pulses == ["A", "C", "C", "A"]


def test_directed_edges_only_seed_one_direction():
    g = make_graph(["A", "B"], [("ab", "A", "B", 4)], directed=True)

    final = replay(g, compute_all_pairs_shortest_paths(g))

    assert final.matrix == ((0, 4), ("∞", 0))


def test_scenario_c_reports_negative_cycle(scenario_c):
    trace = compute_all_pairs_shortest_paths(scenario_c)
    summary = summarize("floyd-warshall", scenario_c, trace)

    assert summary.negative_cycle_nodes == ["A", "B"]
    assert summary.matrix[0][0] < 0
    assert summary.matrix[1][1] < 0
    messages = [s.text for s in trace if isinstance(s, Message)]
    assert any("Negative weight cycle" in m and "A" in m for m in messages)
    assert any("Negative weight cycle" in m and "B" in m for m in messages)


def test_no_negative_cycle_with_negative_edge():
    g = make_graph(["A", "B", "C"], [("ab", "A", "B", 4), ("bc", "B", "C", -2)], directed=True)

    trace = compute_all_pairs_shortest_paths(g)
    summary = summarize("floyd-warshall", g, trace)

    assert summary.negative_cycle_nodes == []
    assert summary.matrix[0][2] == 2
    assert trace[-1].text.startswith("Floyd-Warshall Algorithm complete")


def test_matches_single_source_rows(scenario_a):
    trace = compute_all_pairs_shortest_paths(scenario_a)
    final = replay(scenario_a, trace)

    assert final.matrix_labels == ("A", "B", "C", "D")
    assert final.matrix[0] == (0, 1, 3, 4)
    assert final.matrix[3] == (4, 3, 1, 0)


def test_every_node_highlight_carries_a_description(scenario_c):
    chain = make_graph(["A", "B", "C"], [("ab", "A", "B", 1), ("bc", "B", "C", 1)])

    for g in (chain, scenario_c):
        highlights = [s for s in compute_all_pairs_shortest_paths(g) if isinstance(s, HighlightNode)]
        assert highlights
        assert all(s.ai_description for s in highlights)
