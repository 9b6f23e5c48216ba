"""
replay.py — Trace Replay Reducer
=================================
Folds Steps onto a display state: what the canvas, the log panel and
the matrix panel would show after N steps.

    state = initial_state(graph)
    for step in trace:
        state = apply_step(state, step)

`apply_step` never mutates its input; it returns a new DisplayState.
Replaying the same trace from the same initial state therefore always
lands on the same intermediate and final states, and the caller can
keep every frame if it wants to scrub back and forth.

Timing (how fast to advance, when to stop early) belongs to whoever
drives this loop.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, Optional, Sequence, Tuple

from graph import Graph
from algorithms.step import (
    Step, Matrix,
    Message, HighlightNode, HighlightEdge, SetNodeLabel,
    ResetColors, ClearLabels, UpdateMatrix,
)


MESSAGE_LOG_LIMIT = 100     # newest messages kept in the log panel


@dataclass(frozen=True)
class DisplayState:
    """
    Attributes:
        node_colors    : {node_id: colour or None}   None = default colour
        node_labels    : {node_id: text currently shown on the node}
        edge_colors    : {edge_id: colour or None}
        default_labels : {node_id: label ClearLabels restores}
        messages       : Message texts, newest first, capped at MESSAGE_LOG_LIMIT
        ai_description : Latest ai_description seen (context for contextual help)
        matrix         : Latest UpdateMatrix grid, if any
        matrix_labels  : Row / column labels for `matrix`
        steps_applied  : How many steps have been folded in
    """

    node_colors:    Dict[str, Optional[str]]
    node_labels:    Dict[str, str]
    edge_colors:    Dict[str, Optional[str]]
    default_labels: Dict[str, str]
    messages:       Tuple[str, ...]       = ()
    ai_description: Optional[str]         = None
    matrix:         Optional[Matrix]      = None
    matrix_labels:  Tuple[str, ...]       = field(default_factory=tuple)
    steps_applied:  int                   = 0

    def to_dict(self) -> dict:
        return {
            "nodeColors":    dict(self.node_colors),
            "nodeLabels":    dict(self.node_labels),
            "edgeColors":    dict(self.edge_colors),
            "messages":      list(self.messages),
            "descriptionForAI": self.ai_description,
            "matrix":        [list(row) for row in self.matrix] if self.matrix is not None else None,
            "matrixLabels":  list(self.matrix_labels),
            "stepsApplied":  self.steps_applied,
        }


def initial_state(graph: Graph) -> DisplayState:
    labels = {nid: node.display_label for nid, node in graph.nodes.items()}
    return DisplayState(
        node_colors={nid: None for nid in graph.nodes},
        node_labels=dict(labels),
        edge_colors={eid: None for eid in graph.edges},
        default_labels=labels,
    )


def apply_step(state: DisplayState, step: Step) -> DisplayState:
    """Return the state after `step`.  Steps naming unknown nodes / edges only advance the counter."""
    changes: dict = {"steps_applied": state.steps_applied + 1}

    description = getattr(step, "ai_description", None)
    if description:
        changes["ai_description"] = description

    if isinstance(step, HighlightNode):
        if step.node_id in state.node_colors:
            changes["node_colors"] = {**state.node_colors, step.node_id: step.color}
    elif isinstance(step, HighlightEdge):
        if step.edge_id in state.edge_colors:
            changes["edge_colors"] = {**state.edge_colors, step.edge_id: step.color}
    elif isinstance(step, SetNodeLabel):
        if step.node_id in state.node_labels:
            changes["node_labels"] = {**state.node_labels, step.node_id: step.label}
    elif isinstance(step, Message):
        changes["messages"] = (step.text,) + state.messages[:MESSAGE_LOG_LIMIT - 1]
    elif isinstance(step, ResetColors):
        changes["node_colors"] = dict.fromkeys(state.node_colors)
        changes["edge_colors"] = dict.fromkeys(state.edge_colors)
    elif isinstance(step, ClearLabels):
        changes["node_labels"] = dict(state.default_labels)
    elif isinstance(step, UpdateMatrix):
        changes["matrix"] = step.matrix
        changes["matrix_labels"] = step.labels
    else:
        raise TypeError(f"Not a trace step: {step!r}")

    return replace(state, **changes)


def iter_states(graph: Graph, trace: Sequence[Step]) -> Iterator[DisplayState]:
    """Yield the display state after each step, in order."""
    state = initial_state(graph)
    for step in trace:
        state = apply_step(state, step)
        yield state


def replay(graph: Graph, trace: Sequence[Step], upto: Optional[int] = None) -> DisplayState:
    """State after the first `upto` steps (all of them when None)."""
    state = initial_state(graph)
    steps = trace if upto is None else trace[:max(upto, 0)]
    for step in steps:
        state = apply_step(state, step)
    return state
