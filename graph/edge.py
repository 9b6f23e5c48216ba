"""
edge.py — Graph Edge
====================
Connects two nodes and carries a weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - `directed` is stored per-edge; the shortest-path engines honour it,
    the spanning-tree engines treat every edge as undirected.
  - Weights may be negative.  The model does not reject them; each
    engine documents what it does with them.
"""

from enum import Enum
from typing import Optional, Tuple
import uuid


# ---------------------------------------------------------------------------
# Edge State Enum — visual encoding; the value is the HighlightEdge colour
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    CONSIDERING = "hsl(var(--secondary))"   # the edge being examined RIGHT NOW
    CANDIDATE   = "hsl(var(--ring))"        # Prim: sitting in the candidate pool
    ACCEPTED    = "hsl(var(--primary))"     # MST: edge just accepted
    REJECTED    = "hsl(var(--muted))"       # MST: would close a cycle / stale candidate
    TREE        = "hsl(var(--accent))"      # final pass: shortest-path tree or MST edge
    NEUTRAL     = "hsl(var(--border))"      # final pass: everything else


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id            : Unique identifier.
        source        : ID of the tail node.
        target        : ID of the head node.
        weight        : Numeric cost (default 1).
        directed      : If False, traversal works in both directions.
        display_color : Optional highlight colour (presentation only).
    """

    __slots__ = ("id", "source", "target", "weight", "directed", "display_color")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        directed: bool = False,
        edge_id: Optional[str] = None,
        display_color: Optional[str] = None,
    ):
        self.id:            str            = edge_id or str(uuid.uuid4())[:8]
        self.source:        str            = source
        self.target:        str            = target
        self.weight:        float          = weight
        self.directed:      bool           = directed
        self.display_color: Optional[str]  = display_color

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def endpoints(self) -> Tuple[str, str]:
        return self.source, self.target

    def touches(self, node_id: str) -> bool:
        return node_id == self.source or node_id == self.target

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b (respects directedness)."""
        if self.directed:
            return self.source == node_a and self.target == node_b
        return {self.source, self.target} == {node_a, node_b}

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the node reachable over this edge. None if not traversable."""
        if node_id == self.source:
            return self.target
        if node_id == self.target and not self.directed:
            return self.source
        return None

    def opposite(self, node_id: str) -> str:
        """The other endpoint, ignoring direction."""
        return self.target if node_id == self.source else self.source

    def copy(self) -> "Edge":
        return Edge(
            source=self.source,
            target=self.target,
            weight=self.weight,
            directed=self.directed,
            edge_id=self.id,
            display_color=self.display_color,
        )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {
            "id":         self.id,
            "source":     self.source,
            "target":     self.target,
            "weight":     self.weight,
            "isDirected": self.directed,
        }
        if self.display_color is not None:
            data["color"] = self.display_color
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
            directed=bool(data.get("isDirected", data.get("directed", False))),
            edge_id=data.get("id"),
            display_color=data.get("color"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.id}: {self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
