"""Wire format of trace steps and the TraceBuilder."""

import math

import pytest

from graph import NodeState, EdgeState
from algorithms.step import (
    INFINITY_LABEL,
    ClearLabels, HighlightEdge, HighlightNode, Message, ResetColors, SetNodeLabel, UpdateMatrix,
    TraceBuilder, format_number, step_from_dict, trace_to_dicts,
)


def test_wire_tags():
    assert Message("hi").to_dict() == {"type": "message", "message": "hi"}
    assert HighlightNode("n1", "red").to_dict() == {"type": "highlight-node", "nodeId": "n1", "color": "red"}
    assert HighlightEdge("e1", "blue").to_dict() == {"type": "highlight-edge", "edgeId": "e1", "color": "blue"}
    assert SetNodeLabel("n1", "3").to_dict() == {"type": "update-node-label", "nodeId": "n1", "label": "3"}
    assert ResetColors().to_dict() == {"type": "reset-colors"}
    assert ClearLabels().to_dict() == {"type": "clear-labels"}


def test_description_is_only_sent_when_present():
    assert "descriptionForAI" not in Message("x").to_dict()
    assert Message("x", "longer").to_dict()["descriptionForAI"] == "longer"
    assert HighlightNode("n1", "red", "why").to_dict()["descriptionForAI"] == "why"


def test_matrix_payload():
    step = UpdateMatrix(((0, INFINITY_LABEL), (2, 0)), ("A", "B"))

    assert step.to_dict() == {
        "type": "update-matrix",
        "payload": {"matrix": [[0, "∞"], [2, 0]], "nodeLabels": ["A", "B"]},
    }


@pytest.mark.parametrize("step", [
    Message("hello", "context"),
    HighlightNode("n1", "red", "because"),
    HighlightEdge("e1", "green"),
    SetNodeLabel("n2", "∞"),
    ResetColors(),
    ClearLabels(),
    UpdateMatrix(((0, 1), ("∞", 0)), ("A", "B"), "grid"),
])
def test_step_from_dict_inverts_to_dict(step):
    assert step_from_dict(step.to_dict()) == step


def test_unknown_step_type_is_rejected():
    with pytest.raises(ValueError):
        step_from_dict({"type": "explode"})


def test_trace_to_dicts_keeps_order():
    out = trace_to_dicts((Message("a"), ResetColors()))
    assert [d["type"] for d in out] == ["message", "reset-colors"]


@pytest.mark.parametrize("value, expected", [
    (3, "3"),
    (3.0, "3"),
    (2.5, "2.5"),
    (-4, "-4"),
    (math.inf, "∞"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_builder_unwraps_state_enums():
    tb = TraceBuilder()
    tb.highlight_node("n1", NodeState.ACTIVE)
    tb.highlight_edge("e1", EdgeState.TREE)
    tb.highlight_node("n2", "plain")

    trace = tb.build()
    assert trace[0].color == NodeState.ACTIVE.value
    assert trace[1].color == EdgeState.TREE.value
    assert trace[2].color == "plain"
    assert len(tb) == 3


def test_builder_snapshots_matrix():
    dist = [[0, math.inf], [1, 0]]
    tb = TraceBuilder()
    tb.update_matrix(dist, ["A", "B"])
    dist[0][1] = 7

    step = tb.build()[0]
    assert step.matrix == ((0, "∞"), (1, 0))
    assert step.labels == ("A", "B")


def test_steps_are_immutable():
    step = Message("fixed")
    with pytest.raises(AttributeError):
        step.text = "changed"


def test_build_returns_a_tuple():
    tb = TraceBuilder()
    tb.message("one")
    trace = tb.build()
    tb.message("two")

    assert isinstance(trace, tuple)
    assert len(trace) == 1
