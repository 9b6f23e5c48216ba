"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for the graph the engines read.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Structural validation                  (unique ids, known endpoints, finite weights)
  3. Adjacency queries                      (neighbours, edges_from, incident_edges)
  4. Random-graph factory                   (ring backbone + sprinkled extra edges)
  5. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id.  Dicts keep
    insertion order, and that order is what the engines use to break
    ties, so a Graph built the same way always yields the same trace.
  - Two indexes are maintained incrementally:
        _adj[node_id]      → [(neighbour_id, edge_id)]   traversable from node
        _incident[node_id] → [edge_id]                    touching node, any direction
  - Engines only READ a Graph.  All highlighting lives in the trace.
"""

import math
import random
from typing import (
    Dict, List, Tuple, Optional, Set
)
from graph.node import Node
from graph.edge import Edge
from graph.errors import GraphError, DuplicateIdError, DanglingEdgeError
from graph.ids import IdSequence


# Canvas used when placing randomly generated nodes
RANDOM_GRAPH_CANVAS_WIDTH  = 760
RANDOM_GRAPH_CANVAS_HEIGHT = 560
NODE_RADIUS_PADDING        = 40
RANDOM_EDGE_PROBABILITY_ADDITIONAL = 0.15   # chance of an extra edge once the ring is in place


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}   (insertion-ordered)
        edges      : {edge_id: Edge}   (insertion-ordered)
        directed   : bool – default directedness for create_edge
        _adj       : {node_id: [(neighbour_id, edge_id), …]}
        _incident  : {node_id: [edge_id, …]}
    """

    def __init__(self, directed: bool = False):
        self.nodes:     Dict[str, Node] = {}
        self.edges:     Dict[str, Edge] = {}
        self.directed:  bool            = directed
        self._adj:      Dict[str, List[Tuple[str, str]]] = {}
        self._incident: Dict[str, List[str]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise DuplicateIdError("node", node.id)
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        self._incident.setdefault(node.id, [])
        return node

    def create_node(self, x: float, y: float, label: Optional[str] = None, node_id: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(x=x, y=y, label=label, node_id=node_id))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        for eid in list(self._incident.get(node_id, [])):
            self.remove_edge(eid)
        del self.nodes[node_id]
        self._adj.pop(node_id, None)
        self._incident.pop(node_id, None)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        if edge.id in self.edges:
            raise DuplicateIdError("edge", edge.id)
        for endpoint in edge.endpoints:
            if endpoint not in self.nodes:
                raise DanglingEdgeError(edge.id, endpoint)
        _check_weight(edge)

        self.edges[edge.id] = edge
        # maintain adjacency
        self._adj[edge.source].append((edge.target, edge.id))
        if not edge.directed:
            self._adj[edge.target].append((edge.source, edge.id))
        self._incident[edge.source].append(edge.id)
        if edge.target != edge.source:
            self._incident[edge.target].append(edge.id)
        return edge

    def create_edge(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
        directed: Optional[bool] = None,
    ) -> Edge:
        if directed is None:
            directed = self.directed
        return self.add_edge(Edge(source=source, target=target, weight=weight, directed=directed, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        if edge_id not in self.edges:
            return
        e = self.edges.pop(edge_id)
        for endpoint in set(e.endpoints):
            self._adj[endpoint][:] = [(n, eid) for n, eid in self._adj[endpoint] if eid != edge_id]
            self._incident[endpoint][:] = [eid for eid in self._incident[endpoint] if eid != edge_id]

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b (direction-aware)."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] for every edge traversable from node_id, in edge order."""
        return [(nbr_id, self.edges[eid]) for nbr_id, eid in self._adj.get(node_id, [])]

    def edges_from(self, node_id: str) -> List[Edge]:
        return [self.edges[eid] for _, eid in self._adj.get(node_id, [])]

    def incident_edges(self, node_id: str) -> List[Edge]:
        """Every edge touching node_id, ignoring direction, in edge order."""
        return [self.edges[eid] for eid in self._incident.get(node_id, [])]

    def degree(self, node_id: str) -> int:
        return len(self._incident.get(node_id, []))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """Build and validate a graph; raises GraphError on malformed input."""
        if not isinstance(data, dict):
            raise GraphError("Graph payload must be an object with 'nodes' and 'edges'")
        g = cls(directed=bool(data.get("directed", False)))
        try:
            for nd in data.get("nodes", []):
                g.add_node(Node.from_dict(nd))
            for ed in data.get("edges", []):
                g.add_edge(Edge.from_dict(ed))
        except GraphError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GraphError(f"Malformed graph payload: {exc}") from exc
        return g

    def copy(self) -> "Graph":
        g = Graph(directed=self.directed)
        for node in self.nodes.values():
            g.add_node(node.copy())
        for edge in self.edges.values():
            g.add_edge(edge.copy())
        return g

    # ==================================================================
    # GENERATOR — Factory class-method
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        min_weight: int = 1,
        max_weight: int = 20,
        seed: Optional[int] = None,
        ids: Optional[IdSequence] = None,
        canvas_w: float = RANDOM_GRAPH_CANVAS_WIDTH,
        canvas_h: float = RANDOM_GRAPH_CANVAS_HEIGHT,
    ) -> Tuple["Graph", IdSequence]:
        """
        Random connected, undirected, weighted graph.

        A ring through every node guarantees connectivity, then each
        remaining pair gets an extra edge with probability
        RANDOM_EDGE_PROBABILITY_ADDITIONAL.  Returns the graph and the
        id sequence to continue numbering from.
        """
        if num_nodes < 0:
            raise GraphError("num_nodes must be non-negative")
        if min_weight > max_weight:
            raise GraphError("min_weight must not exceed max_weight")

        rng = random.Random(seed)
        ids = ids or IdSequence()
        g = cls(directed=False)
        pad = NODE_RADIUS_PADDING

        node_ids: List[str] = []
        for i in range(num_nodes):
            nid, ids = ids.next_node_id()
            x = round(pad + rng.random() * (canvas_w - 2 * pad), 1)
            y = round(pad + rng.random() * (canvas_h - 2 * pad), 1)
            g.create_node(x, y, label=f"N{i + 1}", node_id=nid)
            node_ids.append(nid)

        linked: Set[frozenset] = set()

        def link(a: str, b: str) -> None:
            nonlocal ids
            eid, ids = ids.next_edge_id()
            g.create_edge(a, b, weight=rng.randint(min_weight, max_weight), edge_id=eid)
            linked.add(frozenset((a, b)))

        # ring backbone
        if num_nodes > 1:
            for i in range(num_nodes):
                a, b = node_ids[i], node_ids[(i + 1) % num_nodes]
                if frozenset((a, b)) not in linked:
                    link(a, b)

        # sprinkle extra edges
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < RANDOM_EDGE_PROBABILITY_ADDITIONAL:
                    a, b = node_ids[i], node_ids[j]
                    if frozenset((a, b)) not in linked:
                        link(a, b)

        return g, ids

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges.values())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _check_weight(edge: Edge) -> None:
    w = edge.weight
    if isinstance(w, bool) or not isinstance(w, (int, float)):
        raise GraphError(f"Edge {edge.id!r} has a non-numeric weight: {w!r}")
    if not math.isfinite(w):
        raise GraphError(f"Edge {edge.id!r} has a non-finite weight: {w!r}")
