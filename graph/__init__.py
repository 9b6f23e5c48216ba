"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
    from graph import GraphError, IdSequence
"""

from graph.node    import Node,  NodeState
from graph.edge    import Edge,  EdgeState
from graph.errors  import GraphError, DuplicateIdError, DanglingEdgeError
from graph.ids     import IdSequence
from graph.graph   import Graph
from graph.samples import SampleGraph, get_sample, list_samples

__all__ = [
    "Node",       "NodeState",
    "Edge",       "EdgeState",
    "Graph",
    "GraphError", "DuplicateIdError", "DanglingEdgeError",
    "IdSequence",
    "SampleGraph", "get_sample", "list_samples",
]
