"""Folding traces onto display state."""

import pytest

from graph import NodeState, EdgeState
from algorithms.dijkstra import compute_shortest_paths
from algorithms.step import (
    ClearLabels, HighlightEdge, HighlightNode, Message, ResetColors, SetNodeLabel, UpdateMatrix,
)
from engine import MESSAGE_LOG_LIMIT, apply_step, initial_state, iter_states, replay


def test_initial_state_shows_default_labels(scenario_a):
    state = initial_state(scenario_a)

    assert state.node_labels == {"A": "A", "B": "B", "C": "C", "D": "D"}
    assert set(state.node_colors.values()) == {None}
    assert set(state.edge_colors.values()) == {None}
    assert state.matrix is None


def test_apply_step_leaves_input_untouched(scenario_a):
    state = initial_state(scenario_a)
    after = apply_step(state, HighlightNode("A", "red"))

    assert state.node_colors["A"] is None
    assert after.node_colors["A"] == "red"
    assert after.steps_applied == 1


def test_replay_is_repeatable(scenario_a):
    trace = compute_shortest_paths(scenario_a, "A")

    assert replay(scenario_a, trace) == replay(scenario_a, trace)


def test_partial_replay(scenario_a):
    trace = compute_shortest_paths(scenario_a, "A")

    assert replay(scenario_a, trace, upto=0) == initial_state(scenario_a)
    assert replay(scenario_a, trace, upto=3).steps_applied == 3


def test_iter_states_yields_one_state_per_step(scenario_a):
    trace = compute_shortest_paths(scenario_a, "A")
    states = list(iter_states(scenario_a, trace))

    assert len(states) == len(trace)
    assert states[-1] == replay(scenario_a, trace)


def test_reset_colors_restores_defaults(scenario_a):
    trace = (
        HighlightNode("A", NodeState.ACTIVE.value),
        HighlightEdge("ab", EdgeState.TREE.value),
        SetNodeLabel("A", "0"),
        ResetColors(),
    )

    state = replay(scenario_a, trace)
    assert set(state.node_colors.values()) == {None}
    assert set(state.edge_colors.values()) == {None}
    # labels survive a colour reset
    assert state.node_labels["A"] == "0"


def test_clear_labels_restores_default_labels(scenario_a):
    trace = (SetNodeLabel("A", "0"), SetNodeLabel("B", "∞"), ClearLabels())

    assert replay(scenario_a, trace).node_labels == initial_state(scenario_a).node_labels


def test_messages_newest_first_and_capped(scenario_a):
    trace = tuple(Message(f"m{i}") for i in range(MESSAGE_LOG_LIMIT + 50))

    state = replay(scenario_a, trace)
    assert len(state.messages) == MESSAGE_LOG_LIMIT
    assert state.messages[0] == f"m{MESSAGE_LOG_LIMIT + 49}"
    assert state.messages[-1] == "m50"


def test_unknown_ids_only_advance_the_counter(scenario_a):
    trace = (HighlightNode("nope", "red"), HighlightEdge("nope", "red"), SetNodeLabel("nope", "1"))

    state = replay(scenario_a, trace)
    assert state.steps_applied == 3
    assert state.node_colors == initial_state(scenario_a).node_colors
    assert "nope" not in state.edge_colors


def test_latest_description_is_kept(scenario_a):
    trace = (Message("a", "first"), HighlightNode("A", "red"), HighlightNode("B", "red", "second"))

    assert replay(scenario_a, trace).ai_description == "second"


def test_matrix_is_replaced(scenario_a):
    trace = (
        UpdateMatrix(((0,),), ("A",)),
        UpdateMatrix(((0, 1), (1, 0)), ("A", "B")),
    )

    state = replay(scenario_a, trace)
    assert state.matrix == ((0, 1), (1, 0))
    assert state.matrix_labels == ("A", "B")


def test_non_step_is_rejected(scenario_a):
    with pytest.raises(TypeError):
        apply_step(initial_state(scenario_a), "not a step")


def test_to_dict_uses_wire_names(scenario_a):
    data = replay(scenario_a, (Message("hello"),)).to_dict()

    assert data["messages"] == ["hello"]
    assert data["stepsApplied"] == 1
    assert data["matrix"] is None
