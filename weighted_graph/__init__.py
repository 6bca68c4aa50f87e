from .graph import Graph, InvalidArgumentError, empty
from .edges_graph import Edge, EdgesGraph
from .vertices_graph import Vertex, VerticesGraph
from .convert import to_networkx

__all__ = [
    "Graph", "InvalidArgumentError", "empty",
    "Edge", "EdgesGraph",
    "Vertex", "VerticesGraph",
    "to_networkx",
]
