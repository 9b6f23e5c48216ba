"""
step.py — Trace Step Vocabulary
================================
Every algorithm returns a Trace: a tuple of Step values.  A Step is ONE
discrete visual event, not a snapshot:

    • Message        – narration line for the log panel
    • HighlightNode  – paint a node
    • HighlightEdge  – paint an edge
    • SetNodeLabel   – change the text shown on a node (distances)
    • ResetColors    – every node / edge back to its default colour
    • ClearLabels    – every node back to its default label
    • UpdateMatrix   – replace the all-pairs distance grid

Design decisions:
  - One frozen dataclass per variant, each with only the fields that
    variant needs.  `Step` is the Union of them.
  - `ai_description` is the longer, state-describing text that the
    contextual-help feature hands to a language model.
  - Colours are plain strings on the wire; engines pass NodeState /
    EdgeState members and TraceBuilder unwraps them.
  - TraceBuilder is the only writer.  Once `build()` returns, the trace
    is an immutable tuple.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union


INFINITY_LABEL = "∞"

Cell = Union[int, float, str]
Matrix = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True)
class Message:
    kind: ClassVar[str] = "message"

    text:           str
    ai_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _with_description({"type": self.kind, "message": self.text}, self.ai_description)


@dataclass(frozen=True)
class HighlightNode:
    kind: ClassVar[str] = "highlight-node"

    node_id:        str
    color:          str
    ai_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.kind, "nodeId": self.node_id, "color": self.color}
        return _with_description(data, self.ai_description)


@dataclass(frozen=True)
class HighlightEdge:
    kind: ClassVar[str] = "highlight-edge"

    edge_id:        str
    color:          str
    ai_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.kind, "edgeId": self.edge_id, "color": self.color}
        return _with_description(data, self.ai_description)


@dataclass(frozen=True)
class SetNodeLabel:
    kind: ClassVar[str] = "update-node-label"

    node_id: str
    label:   str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "nodeId": self.node_id, "label": self.label}


@dataclass(frozen=True)
class ResetColors:
    kind: ClassVar[str] = "reset-colors"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class ClearLabels:
    kind: ClassVar[str] = "clear-labels"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class UpdateMatrix:
    kind: ClassVar[str] = "update-matrix"

    matrix:         Matrix
    labels:         Tuple[str, ...]
    ai_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.kind,
            "payload": {
                "matrix":     [list(row) for row in self.matrix],
                "nodeLabels": list(self.labels),
            },
        }
        return _with_description(data, self.ai_description)


Step = Union[Message, HighlightNode, HighlightEdge, SetNodeLabel, ResetColors, ClearLabels, UpdateMatrix]
Trace = Tuple[Step, ...]


def _with_description(data: Dict[str, Any], ai_description: Optional[str]) -> Dict[str, Any]:
    if ai_description is not None:
        data["descriptionForAI"] = ai_description
    return data


def step_from_dict(data: Dict[str, Any]) -> Step:
    """Inverse of Step.to_dict().  Raises ValueError on an unknown type tag."""
    kind = data.get("type")
    desc = data.get("descriptionForAI")
    if kind == Message.kind:
        return Message(data["message"], desc)
    if kind == HighlightNode.kind:
        return HighlightNode(data["nodeId"], data["color"], desc)
    if kind == HighlightEdge.kind:
        return HighlightEdge(data["edgeId"], data["color"], desc)
    if kind == SetNodeLabel.kind:
        return SetNodeLabel(data["nodeId"], data["label"])
    if kind == ResetColors.kind:
        return ResetColors()
    if kind == ClearLabels.kind:
        return ClearLabels()
    if kind == UpdateMatrix.kind:
        payload = data["payload"]
        return UpdateMatrix(
            matrix=tuple(tuple(row) for row in payload["matrix"]),
            labels=tuple(payload["nodeLabels"]),
            ai_description=desc,
        )
    raise ValueError(f"Unknown step type: {kind!r}")


def trace_to_dicts(trace: Sequence[Step]) -> List[Dict[str, Any]]:
    return [step.to_dict() for step in trace]


def format_number(value: float) -> str:
    """Render a distance / weight the way node labels show it: 3.0 → "3", inf → "∞"."""
    if value == float("inf"):
        return INFINITY_LABEL
    if value == float("-inf"):
        return "-" + INFINITY_LABEL
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Builder so algorithms don't have to spell out every Step constructor
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Append-only scratch-pad that engines use to assemble a trace.

    Usage inside an engine:
        tb = TraceBuilder()
        tb.message("Starting …")
        tb.highlight_node("node-1", NodeState.ACTIVE, "Node node-1 is being processed.")
        return tb.build()
    """

    def __init__(self):
        self._steps: List[Step] = []

    def __len__(self) -> int:
        return len(self._steps)

    # -- helpers --
    def message(self, text: str, ai_description: Optional[str] = None) -> None:
        self._steps.append(Message(text, ai_description))

    def highlight_node(self, node_id: str, color: Union[Enum, str], ai_description: Optional[str] = None) -> None:
        self._steps.append(HighlightNode(node_id, _color(color), ai_description))

    def highlight_edge(self, edge_id: str, color: Union[Enum, str], ai_description: Optional[str] = None) -> None:
        self._steps.append(HighlightEdge(edge_id, _color(color), ai_description))

    def set_label(self, node_id: str, label: str) -> None:
        self._steps.append(SetNodeLabel(node_id, label))

    def reset_colors(self) -> None:
        self._steps.append(ResetColors())

    def clear_labels(self) -> None:
        self._steps.append(ClearLabels())

    def update_matrix(
        self,
        dist: Sequence[Sequence[float]],
        labels: Sequence[str],
        ai_description: Optional[str] = None,
    ) -> None:
        """Snapshot `dist` (∞ → "∞") so later writes to it never leak into the trace."""
        snapshot = tuple(
            tuple(INFINITY_LABEL if v == float("inf") else v for v in row)
            for row in dist
        )
        self._steps.append(UpdateMatrix(snapshot, tuple(labels), ai_description))

    def build(self) -> Trace:
        return tuple(self._steps)


def _color(color: Union[Enum, str]) -> str:
    return color.value if isinstance(color, Enum) else color
