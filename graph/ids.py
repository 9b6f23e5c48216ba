"""
ids.py — Node / Edge Id Sequence
=================================
Hands out "node-N" / "edge-N" identifiers.

The sequence is a frozen value: every allocation returns the new id
together with the NEXT sequence.  Whoever owns the graph (the Flask
session, a sample-graph builder, a test) threads the sequence through
its own state; there is no module-level counter.

    ids = IdSequence()
    nid, ids = ids.next_node_id()     # "node-1"
    eid, ids = ids.next_edge_id()     # "edge-1"
"""

from dataclasses import dataclass, replace
from typing import Tuple


NODE_PREFIX = "node-"
EDGE_PREFIX = "edge-"


@dataclass(frozen=True)
class IdSequence:
    next_node: int = 1
    next_edge: int = 1

    def next_node_id(self) -> Tuple[str, "IdSequence"]:
        return f"{NODE_PREFIX}{self.next_node}", replace(self, next_node=self.next_node + 1)

    def next_edge_id(self) -> Tuple[str, "IdSequence"]:
        return f"{EDGE_PREFIX}{self.next_edge}", replace(self, next_edge=self.next_edge + 1)

    def to_dict(self) -> dict:
        return {"nextNodeId": self.next_node, "nextEdgeId": self.next_edge}

    @classmethod
    def from_dict(cls, data: dict) -> "IdSequence":
        return cls(
            next_node=int(data.get("nextNodeId", 1)),
            next_edge=int(data.get("nextEdgeId", 1)),
        )

    @classmethod
    def after(cls, node_ids, edge_ids) -> "IdSequence":
        """Sequence that continues past every "node-N" / "edge-N" id already in use."""
        return cls(
            next_node=_highest(node_ids, NODE_PREFIX) + 1,
            next_edge=_highest(edge_ids, EDGE_PREFIX) + 1,
        )


def _highest(ids, prefix: str) -> int:
    best = 0
    for item_id in ids:
        if item_id.startswith(prefix) and item_id[len(prefix):].isdigit():
            best = max(best, int(item_id[len(prefix):]))
    return best
