from enum import Enum
from typing import Optional
import uuid


# ---------------------------------------------------------------------------
# Node State Enum — maps 1-to-1 with the visual encoding palette.
# The value is the colour string a HighlightNode step carries.
# ---------------------------------------------------------------------------
class NodeState(Enum):
    INITIAL        = "hsl(var(--secondary))"     # distance ∞, not yet touched
    START          = "hsl(var(--primary))"       # source node / root of a tree
    ACTIVE         = "hsl(var(--accent))"        # the node being processed RIGHT NOW
    UPDATED        = "hsl(var(--chart-2))"       # tentative distance just improved
    REACHED        = "hsl(var(--chart-1))"       # final pass: reachable, on a shortest path
    UNREACHABLE    = "hsl(var(--muted))"         # final pass: no path from the start
    PAIR           = "hsl(var(--chart-5))"       # Floyd–Warshall: endpoints of an improved pair
    ACCEPTED       = "hsl(var(--chart-4))"       # MST: node just joined via an accepted edge
    IN_TREE        = "hsl(var(--chart-3))"       # MST final pass: part of the tree / forest
    NEGATIVE_CYCLE = "hsl(var(--destructive))"   # Floyd–Warshall: on a negative cycle


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Identity plus presentation.  Only `id` matters to the algorithms.

    Attributes:
        id            : Unique identifier ("node-N" by convention, or user-supplied).
        label         : Optional human-readable name shown on the canvas.
        x, y          : Canvas coordinates.
        display_color : Optional highlight colour (presentation only).
    """

    __slots__ = ("id", "label", "x", "y", "display_color")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
        display_color: Optional[str] = None,
    ):
        self.id: str                       = node_id or str(uuid.uuid4())[:8]
        self.label: Optional[str]          = label
        self.x: float                      = float(x)
        self.y: float                      = float(y)
        self.display_color: Optional[str]  = display_color

    @property
    def display_label(self) -> str:
        """Label if one was given, otherwise the id."""
        return self.label or self.id

    def copy(self) -> "Node":
        return Node(x=self.x, y=self.y, label=self.label, node_id=self.id, display_color=self.display_color)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "x": self.x, "y": self.y}
        if self.label is not None:
            data["label"] = self.label
        if self.display_color is not None:
            data["color"] = self.display_color
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
            node_id=data["id"],
            display_color=data.get("color"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
