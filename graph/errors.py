"""
errors.py — Graph Model Errors
===============================
Raised while a Graph is being BUILT (add / create / from_dict).
The algorithm engines never raise these: by the time a Graph reaches
an engine it has already passed through these checks.
"""


class GraphError(ValueError):
    """Base class for every structural problem with a graph."""


class DuplicateIdError(GraphError):
    """A node or edge id is already taken inside the same graph."""

    def __init__(self, kind: str, item_id: str):
        super().__init__(f"Duplicate {kind} id: {item_id!r}")
        self.kind    = kind
        self.item_id = item_id


class DanglingEdgeError(GraphError):
    """An edge endpoint does not name a node of the graph."""

    def __init__(self, edge_id: str, node_id: str):
        super().__init__(f"Edge {edge_id!r} references unknown node {node_id!r}")
        self.edge_id = edge_id
        self.node_id = node_id
